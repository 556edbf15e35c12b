from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from .model import Holiday


class HolidayRepository(Protocol):
    def list_range(self, *, start: date, end: date) -> Sequence[Holiday]:
        raise NotImplementedError

    def has_any(self) -> bool:
        """True once at least one holiday has been stored, in any year."""

        raise NotImplementedError

    def upsert(self, *, holiday_date: date, name: str) -> None:
        raise NotImplementedError
