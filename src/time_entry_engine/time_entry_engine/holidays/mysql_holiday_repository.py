from __future__ import annotations

from typing import Optional, Sequence

from ..core.constants import NATIONWIDE_REGION
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import Holiday
from .repository import HolidayRepository


class MySQLHolidayRepository(HolidayRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_range(self, *, start: str, end: str, bundesland: Optional[str] = None) -> Sequence[Holiday]:
        clauses = ["holiday_date BETWEEN %s AND %s"]
        params: list[object] = [start, end]
        if bundesland:
            clauses.append("bundesland IN (%s, %s)")
            params.extend([bundesland, NATIONWIDE_REGION])

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT holiday_date, name, bundesland
                FROM holidays
                WHERE {where}
                ORDER BY holiday_date ASC
                """,
                tuple(params),
            )
            return [
                Holiday(
                    date=str(r["holiday_date"])[:10],
                    name=r["name"],
                    bundesland=r.get("bundesland") or NATIONWIDE_REGION,
                )
                for r in fetchall(cur)
            ]
