from __future__ import annotations

from datetime import date
from typing import Any, Dict, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, normalize_mysql_date
from .model import Contract
from .repository import ContractRepository

_HOUR_COLUMNS = tuple(
    f"hours_{day}_{parity}"
    for day in ("monday", "tuesday", "wednesday", "thursday", "friday")
    for parity in ("even", "odd")
)

_SELECT = f"""
    SELECT c.employee_id, c.startdate, c.enddate, {", ".join("c." + col for col in _HOUR_COLUMNS)}
    FROM contracts c
"""


def _to_contract(r: Dict[str, Any]) -> Contract:
    return Contract(
        employee_id=int(r["employee_id"]),
        start_date=normalize_mysql_date(r.get("startdate")),
        end_date=normalize_mysql_date(r.get("enddate")),
        **{col: float(r.get(col) or 0) for col in _HOUR_COLUMNS},
    )


class MySQLContractRepository(ContractRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_active(self, *, start: date, end: date) -> Sequence[Contract]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                _SELECT
                + """
                WHERE (c.startdate IS NULL OR c.startdate <= %s)
                  AND (c.enddate IS NULL OR c.enddate >= %s)
                ORDER BY c.employee_id ASC, c.startdate DESC
                """,
                (end, start),
            )
            rows = fetchall(cur)

        # Keep the most recent contract per employee.
        latest: dict[int, Contract] = {}
        for r in rows:
            contract = _to_contract(r)
            latest.setdefault(contract.employee_id, contract)
        return list(latest.values())
