from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterator

from ..common.datetime_utils import iter_days


@dataclass(frozen=True)
class ReportingPeriod:
    """Window over which leave hours are reconciled (both ends inclusive)."""

    start: date
    end: date

    def days(self) -> Iterator[date]:
        return iter_days(self.start, self.end)
