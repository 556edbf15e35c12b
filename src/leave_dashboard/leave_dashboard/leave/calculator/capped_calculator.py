from __future__ import annotations

from datetime import date
from typing import Callable, Iterable, Sequence

from ...absences.model import Absence
from ..engine import HolidayLike, leave_hours_by_day
from ..model import ReportingPeriod
from .base import LeaveHoursCalculator


class DailyCapLeaveCalculator(LeaveHoursCalculator):
    """Overlapping absences on one day never exceed that day's cap.

    ``cap_for_day`` usually returns the contracted hours for the day.
    """

    def __init__(self, cap_for_day: Callable[[date], float]):
        self._cap_for_day = cap_for_day

    def leave_hours(
        self,
        employee_id: int,
        absences: Sequence[Absence],
        period: ReportingPeriod,
        holidays: Iterable[HolidayLike],
    ) -> float:
        per_day = leave_hours_by_day(employee_id, absences, period.start, period.end, holidays)
        return float(sum(min(hours, max(self._cap_for_day(day), 0.0)) for day, hours in per_day.items()))
