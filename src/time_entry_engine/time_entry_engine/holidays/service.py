from __future__ import annotations

from datetime import date
from typing import Optional, Union

from ..common.datetime_utils import parse_iso_date
from ..core.exceptions import ValidationError
from .repository import HolidayRepository

DayLike = Union[date, str]


def _day_str(value: DayLike) -> str:
    if isinstance(value, date):
        return value.isoformat()
    try:
        return parse_iso_date(str(value)[:10]).isoformat()
    except ValueError as e:
        raise ValidationError(f"Ungültiges Datum: {value!r}") from e


class HolidayService:
    """Resolves the holiday calendar a shift is computed against.

    Region filtering happens here, before the calculation core sees the dates.
    """

    def __init__(self, holidays: HolidayRepository):
        self._holidays = holidays

    def resolve_dates(self, start: DayLike, end: DayLike, bundesland: Optional[str] = None) -> list[str]:
        start_day, end_day = _day_str(start), _day_str(end)
        if end_day < start_day:
            raise ValidationError("Enddatum liegt vor dem Startdatum")
        rows = self._holidays.list_range(start=start_day, end=end_day, bundesland=bundesland or None)
        return sorted({h.date for h in rows})
