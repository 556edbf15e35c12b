from __future__ import annotations

from datetime import date
from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_mysql_date
from .model import Holiday
from .repository import HolidayRepository


class MySQLHolidayRepository(HolidayRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_range(self, *, start: date, end: date) -> Sequence[Holiday]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT holiday_date, name
                FROM holidays
                WHERE holiday_date BETWEEN %s AND %s
                ORDER BY holiday_date ASC
                """,
                (start, end),
            )
            rows = fetchall(cur)
            return [Holiday(holiday_date=normalize_mysql_date(r["holiday_date"]), name=r.get("name") or "") for r in rows]

    def has_any(self) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT 1 AS found FROM holidays LIMIT 1")
            return fetchone(cur) is not None

    def upsert(self, *, holiday_date: date, name: str) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO holidays(holiday_date, name)
                VALUES(%s,%s)
                ON DUPLICATE KEY UPDATE name=VALUES(name)
                """,
                (holiday_date, name),
            )
