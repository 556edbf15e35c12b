from __future__ import annotations

from datetime import date
from typing import Any, Dict, Optional, Sequence

from ..common.validators import require_non_negative
from ..core.enums import AbsenceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, normalize_mysql_date
from .model import Absence
from .repository import AbsenceRepository


def _to_absence(r: Dict[str, Any]) -> Absence:
    return Absence(
        employee_id=int(r["employee_id"]),
        start_date=normalize_mysql_date(r["startdate"]),
        end_date=normalize_mysql_date(r["enddate"]),
        hours_per_day=require_non_negative(r["hours_per_day"], "hours_per_day"),
        type_name=r.get("type_name"),
        description=r.get("description"),
        status_name=r.get("status_name"),
    )


class MySQLAbsenceRepository(AbsenceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_period(self, *, start: date, end: date, employee_id: Optional[int] = None) -> Sequence[Absence]:
        counted = tuple(int(s) for s in AbsenceStatus.counted())
        clauses = ["a.startdate <= %s", "a.enddate >= %s", f"a.status_id IN ({', '.join(['%s'] * len(counted))})"]
        params: list[object] = [end, start, *counted]
        if employee_id is not None:
            clauses.append("a.employee_id=%s")
            params.append(int(employee_id))

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT a.employee_id, a.startdate, a.enddate, a.hours_per_day,
                       a.type_name, a.description, a.status_name
                FROM absences a
                WHERE {where}
                ORDER BY a.employee_id ASC, a.startdate ASC
                """,
                tuple(params),
            )
            return [_to_absence(r) for r in fetchall(cur)]
