from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class HourEntry:
    """Written (booked) hours of one employee on one day."""

    employee_id: int
    work_date: date
    amount: float
    invoice_basis_id: Optional[int] = None
    description: Optional[str] = None
