from __future__ import annotations

from typing import Iterable, Sequence

from ...absences.model import Absence
from ..engine import HolidayLike, compute_leave_hours
from ..model import ReportingPeriod
from .base import LeaveHoursCalculator


class StandardLeaveCalculator(LeaveHoursCalculator):
    """Standard rule: every absence counts on its own, no per-day capping."""

    def leave_hours(
        self,
        employee_id: int,
        absences: Sequence[Absence],
        period: ReportingPeriod,
        holidays: Iterable[HolidayLike],
    ) -> float:
        return compute_leave_hours(employee_id, absences, period.start, period.end, holidays)
