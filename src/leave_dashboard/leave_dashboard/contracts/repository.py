from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from .model import Contract


class ContractRepository(Protocol):
    def list_active(self, *, start: date, end: date) -> Sequence[Contract]:
        """Most recent contract per employee that overlaps [start, end]."""

        raise NotImplementedError
