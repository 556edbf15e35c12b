from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from datetime import date
from typing import Callable, Optional

from ..common.validators import require_period
from ..core.constants import DEFAULT_DECLARABILITY_CACHE_SECONDS, NON_DECLARABLE_INVOICE_BASIS_ID
from ..employees.repository import EmployeeRepository
from ..hours.model import HourEntry
from ..hours.repository import HourRepository

logger = logging.getLogger(__name__)


@dataclass
class DepartmentDeclarability:
    department_id: int
    department_name: str
    total_hours: float = 0.0
    declarable_hours: float = 0.0
    non_declarable_hours: float = 0.0

    @property
    def declarability_percentage(self) -> float:
        if self.total_hours <= 0:
            return 0.0
        return self.declarable_hours / self.total_hours * 100

    def to_dict(self) -> dict:
        return {
            "department_id": self.department_id,
            "department_name": self.department_name,
            "total_hours": self.total_hours,
            "declarable_hours": self.declarable_hours,
            "non_declarable_hours": self.non_declarable_hours,
            "declarability_percentage": self.declarability_percentage,
        }


def is_declarable(entry: HourEntry) -> bool:
    """Hours without a project line or with invoice basis 4 are not declarable."""
    if entry.invoice_basis_id is None:
        return False
    return entry.invoice_basis_id != NON_DECLARABLE_INVOICE_BASIS_ID


class DeclarabilityService:
    """Billable vs. total written hours per department, cached per period."""

    def __init__(
        self,
        employees: EmployeeRepository,
        hours: HourRepository,
        *,
        cache_seconds: float = DEFAULT_DECLARABILITY_CACHE_SECONDS,
        clock: Optional[Callable[[], float]] = None,
    ):
        self._employees = employees
        self._hours = hours
        self._cache_seconds = float(cache_seconds)
        self._clock = clock or time.monotonic
        self._cache: dict[tuple[date, date], tuple[float, list[DepartmentDeclarability]]] = {}

    def by_department(self, *, start: date, end: date, force_refresh: bool = False) -> list[DepartmentDeclarability]:
        require_period(start, end)
        key = (start, end)
        now = self._clock()

        cached = self._cache.get(key)
        if not force_refresh and cached and now - cached[0] < self._cache_seconds:
            logger.debug("Declarability served from cache", extra={"start": start.isoformat(), "end": end.isoformat()})
            return cached[1]

        result = self._calculate(start, end)
        self._evict_expired(now)
        self._cache[key] = (now, result)
        return result

    def clear_cache(self) -> None:
        self._cache.clear()
        logger.info("Declarability cache cleared")

    def _evict_expired(self, now: float) -> None:
        expired = [k for k, (stamp, _) in self._cache.items() if now - stamp >= self._cache_seconds]
        for k in expired:
            del self._cache[k]

    def _calculate(self, start: date, end: date) -> list[DepartmentDeclarability]:
        departments: dict[int, DepartmentDeclarability] = {}
        department_of: dict[int, int] = {}

        for employee in self._employees.list_all(active_only=True):
            if employee.department_id is None:
                continue
            department_of[employee.employee_id] = employee.department_id
            departments.setdefault(
                employee.department_id,
                DepartmentDeclarability(
                    department_id=employee.department_id,
                    department_name=employee.department_name or f"Department {employee.department_id}",
                ),
            )

        for entry in self._hours.list_for_period(start=start, end=end):
            department_id = department_of.get(entry.employee_id)
            if department_id is None:
                continue
            dept = departments[department_id]
            dept.total_hours += entry.amount
            if is_declarable(entry):
                dept.declarable_hours += entry.amount
            else:
                dept.non_declarable_hours += entry.amount

        result = [d for d in departments.values() if d.total_hours > 0]
        result.sort(key=lambda d: d.declarability_percentage, reverse=True)

        logger.info(
            "Declarability calculated",
            extra={"start": start.isoformat(), "end": end.isoformat(), "departments": len(result)},
        )
        return result
