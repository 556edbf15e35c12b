from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import Absence


class AbsenceRepository(Protocol):
    def list_for_period(self, *, start: date, end: date, employee_id: Optional[int] = None) -> Sequence[Absence]:
        """Absences overlapping [start, end] (company-wide unless employee_id is given)."""

        raise NotImplementedError
