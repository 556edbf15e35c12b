from __future__ import annotations

from contextlib import contextmanager
from datetime import date, datetime
from typing import Any, Dict, List, Optional

from ..common.datetime_utils import to_calendar_date
from .connection import DatabaseConnection


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    conn = conn_factory.connect()
    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def normalize_mysql_date(value: Any) -> Optional[date]:
    """Normalize DATE/DATETIME column values to a calendar date.

    Synced tables store some dates as DATETIME or as 'YYYY-MM-DD HH:MM:SS' text.
    """

    if value is None:
        return None
    if isinstance(value, (date, datetime, str)):
        return to_calendar_date(value)
    raise TypeError(f"Unsupported MySQL date value type: {type(value)!r}")
