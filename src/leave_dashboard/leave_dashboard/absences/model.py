from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class Absence:
    """One continuous leave period for one employee (end date inclusive)."""

    employee_id: int
    start_date: date
    end_date: date
    hours_per_day: float
    type_name: Optional[str] = None
    description: Optional[str] = None
    status_name: Optional[str] = None
