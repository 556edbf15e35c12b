from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import HourEntry


class HourRepository(Protocol):
    def list_for_period(self, *, start: date, end: date, employee_id: Optional[int] = None) -> Sequence[HourEntry]:
        raise NotImplementedError
