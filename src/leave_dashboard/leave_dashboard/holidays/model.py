from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class Holiday:
    """Organization-wide non-working day."""

    holiday_date: date
    name: str = ""
