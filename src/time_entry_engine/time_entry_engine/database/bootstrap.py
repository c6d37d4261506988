from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import List, Union

from .connection import DatabaseConnection

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

# The SQL files name time_entry_db for manual use; the configured database wins here.
_DB_SELECTION = re.compile(r"(?im)^\s*(CREATE\s+DATABASE|USE)\b[^;]*;\s*$")
_LINE_COMMENT = re.compile(r"(?m)^\s*--.*$")


def read_sql_script(path: PathLike) -> List[str]:
    """Statements of a schema/seed file.

    Statements end with ';' at the end of a line. Our files keep semicolons out
    of string literals, which is all this split relies on.
    """
    sql = Path(path).read_text(encoding="utf-8")
    sql = _LINE_COMMENT.sub("", _DB_SELECTION.sub("", sql))
    statements = re.split(r";\s*$", sql, flags=re.M)
    return [s.strip() for s in statements if s.strip()]


def ensure_database_exists(conn_factory: DatabaseConnection) -> None:
    conn = conn_factory.connect(with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{conn_factory.config.database}` "
            "CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"
        )
        conn.commit()
    finally:
        conn.close()


def run_sql_script(conn_factory: DatabaseConnection, path: PathLike) -> int:
    """Execute every statement of the file in one transaction; returns the statement count."""
    statements = read_sql_script(path)
    conn = conn_factory.connect()
    try:
        cur = conn.cursor()
        for stmt in statements:
            cur.execute(stmt)
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()
    logger.info("Executed %s statement(s) from %s", len(statements), Path(path).name)
    return len(statements)


def apply_schema(conn_factory: DatabaseConnection, *, schema_path: PathLike) -> int:
    """Create the database if missing, then apply schema.sql (CREATE ... IF NOT EXISTS)."""
    ensure_database_exists(conn_factory)
    return run_sql_script(conn_factory, schema_path)


def apply_seed_sql(conn_factory: DatabaseConnection, *, seed_path: PathLike) -> int:
    return run_sql_script(conn_factory, seed_path)


def list_tables(conn_factory: DatabaseConnection) -> List[str]:
    conn = conn_factory.connect()
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
    finally:
        conn.close()
