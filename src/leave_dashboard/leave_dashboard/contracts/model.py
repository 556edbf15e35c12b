from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class Contract:
    """Weekly working-hour schedule of an employee.

    Hours alternate between even and odd ISO weeks.
    """

    employee_id: int
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    hours_monday_even: float = 0.0
    hours_monday_odd: float = 0.0
    hours_tuesday_even: float = 0.0
    hours_tuesday_odd: float = 0.0
    hours_wednesday_even: float = 0.0
    hours_wednesday_odd: float = 0.0
    hours_thursday_even: float = 0.0
    hours_thursday_odd: float = 0.0
    hours_friday_even: float = 0.0
    hours_friday_odd: float = 0.0

    def hours_for_weekday(self, weekday: int, *, even_week: bool) -> float:
        """Contract hours for date.weekday() (Monday=0); 0 for weekends."""
        names = ("monday", "tuesday", "wednesday", "thursday", "friday")
        if weekday < 0 or weekday >= len(names):
            return 0.0
        suffix = "even" if even_week else "odd"
        return float(getattr(self, f"hours_{names[weekday]}_{suffix}") or 0.0)

    def covers(self, day: date) -> bool:
        if self.start_date and day < self.start_date:
            return False
        if self.end_date and day > self.end_date:
            return False
        return True
