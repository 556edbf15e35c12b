from __future__ import annotations

from typing import Any, Dict, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import Employee
from .repository import EmployeeRepository

_SELECT = """
    SELECT e.employee_id, e.firstname, e.lastname, e.active, d.department_id, d.department_name
    FROM employees e
    LEFT JOIN departments d ON d.department_id = e.department_id
"""


def _to_employee(r: Dict[str, Any]) -> Employee:
    full_name = " ".join(part for part in (r.get("firstname"), r.get("lastname")) if part)
    return Employee(
        employee_id=int(r["employee_id"]),
        full_name=full_name,
        department_id=int(r["department_id"]) if r.get("department_id") is not None else None,
        department_name=r.get("department_name"),
        active=bool(r.get("active")),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self, *, active_only: bool = True) -> Sequence[Employee]:
        where = "WHERE e.active = 1" if active_only else ""
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} {where} ORDER BY e.employee_id ASC")
            return [_to_employee(r) for r in fetchall(cur)]
