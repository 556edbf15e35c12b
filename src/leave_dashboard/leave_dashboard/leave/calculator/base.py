from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, Sequence

from ...absences.model import Absence
from ..engine import HolidayLike
from ..model import ReportingPeriod


class LeaveHoursCalculator(ABC):
    """Calculator interface (Strategy Pattern for leave reconciliation)."""

    @abstractmethod
    def leave_hours(
        self,
        employee_id: int,
        absences: Sequence[Absence],
        period: ReportingPeriod,
        holidays: Iterable[HolidayLike],
    ) -> float:
        raise NotImplementedError
