from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Tuple

import mysql.connector
from mysql.connector import errorcode

from ..core.exceptions import PermanentError, TransientIOError
from .connection import DatabaseConnection

logger = logging.getLogger(__name__)

# Worth another attempt: server unreachable or gone, lock contention.
TRANSIENT_ERRNOS = frozenset(
    {
        errorcode.CR_CONNECTION_ERROR,
        errorcode.CR_CONN_HOST_ERROR,
        errorcode.CR_SERVER_GONE_ERROR,
        errorcode.CR_SERVER_LOST,
        errorcode.ER_LOCK_WAIT_TIMEOUT,
        errorcode.ER_LOCK_DEADLOCK,
    }
)


def translate_mysql_error(error: mysql.connector.Error) -> Exception:
    """Map a driver error onto the transient/permanent split the batch retry understands."""
    if error.errno in TRANSIENT_ERRNOS:
        return TransientIOError(f"MySQL nicht erreichbar ({error.errno}): {error.msg}")
    return PermanentError(f"MySQL-Fehler ({error.errno}): {error.msg}")


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True) -> Iterator[Tuple[Any, Any]]:
    """Short-lived connection plus cursor; commits on success, rolls back on error."""
    try:
        conn = conn_factory.connect()
    except mysql.connector.Error as e:
        raise translate_mysql_error(e) from e

    cur = conn.cursor(dictionary=dictionary)
    try:
        yield conn, cur
        conn.commit()
    except mysql.connector.Error as e:
        conn.rollback()
        logger.warning("Rolled back after MySQL error %s", e.errno)
        raise translate_mysql_error(e) from e
    except Exception:
        conn.rollback()
        raise
    finally:
        cur.close()
        conn.close()


def fetchall(cur) -> List[Dict[str, Any]]:
    return list(cur.fetchall() or [])
