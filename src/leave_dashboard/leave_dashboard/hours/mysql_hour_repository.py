from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, normalize_mysql_date
from .model import HourEntry
from .repository import HourRepository


class MySQLHourRepository(HourRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_period(self, *, start: date, end: date, employee_id: Optional[int] = None) -> Sequence[HourEntry]:
        clauses = ["h.work_date BETWEEN %s AND %s"]
        params: list[object] = [start, end]
        if employee_id is not None:
            clauses.append("h.employee_id=%s")
            params.append(int(employee_id))

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT h.employee_id, h.work_date, h.amount, h.invoice_basis_id, h.description
                FROM hours h
                WHERE {where}
                ORDER BY h.work_date ASC, h.employee_id ASC
                """,
                tuple(params),
            )
            rows = fetchall(cur)
            return [
                HourEntry(
                    employee_id=int(r["employee_id"]),
                    work_date=normalize_mysql_date(r["work_date"]),
                    amount=float(r["amount"] or 0),
                    invoice_basis_id=int(r["invoice_basis_id"]) if r.get("invoice_basis_id") is not None else None,
                    description=r.get("description"),
                )
                for r in rows
            ]
