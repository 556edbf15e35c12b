"""Leave-hour reconciliation.

Turns raw absence intervals into the working hours of leave an employee
consumed in a reporting period. Everything here is a pure function of its
arguments: no I/O, no shared state.

A day qualifies when it lies inside both the absence and the period (both
inclusive), is Monday-Friday, and is not a holiday. Each qualifying day adds
the absence's ``hours_per_day``. Overlapping absences of the same employee
are summed independently; see ``calculator.DailyCapLeaveCalculator`` for the
capped variant.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from datetime import date
from typing import Iterable, Optional, Sequence, Union

from ..absences.model import Absence
from ..common.datetime_utils import DateLike, is_weekend, iter_days, to_calendar_date
from ..holidays.model import Holiday

logger = logging.getLogger(__name__)

HolidayLike = Union[Holiday, DateLike]


def holiday_date_set(holidays: Iterable[HolidayLike]) -> frozenset[date]:
    """Calendar days of the given holidays, time components dropped."""
    days = set()
    for h in holidays:
        value = h.holiday_date if isinstance(h, Holiday) else h
        days.add(to_calendar_date(value))
    return frozenset(days)


def overlap(start_a: DateLike, end_a: DateLike, start_b: DateLike, end_b: DateLike) -> Optional[tuple[date, date]]:
    """Inclusive intersection of two day ranges, or None when they do not meet."""
    start = max(to_calendar_date(start_a), to_calendar_date(start_b))
    end = min(to_calendar_date(end_a), to_calendar_date(end_b))
    if start > end:
        return None
    return start, end


def qualifying_days(start: date, end: date, holiday_dates: frozenset[date]) -> list[date]:
    return [d for d in iter_days(start, end) if not is_weekend(d) and d not in holiday_dates]


def _employee_absences(employee_id: int, absences: Iterable[Absence]) -> list[Absence]:
    return [a for a in absences if a.employee_id == employee_id]


def compute_leave_hours(
    employee_id: int,
    absences: Sequence[Absence],
    period_start: DateLike,
    period_end: DateLike,
    holidays: Iterable[HolidayLike],
) -> float:
    """Total chargeable leave hours for one employee in [period_start, period_end].

    An inverted period (start after end) gives 0 because no absence overlaps it.
    """
    own = _employee_absences(employee_id, absences)
    if not own:
        return 0.0

    holiday_dates = holiday_date_set(holidays)
    total = 0.0
    for absence in own:
        window = overlap(absence.start_date, absence.end_date, period_start, period_end)
        if window is None:
            continue
        days = qualifying_days(window[0], window[1], holiday_dates)
        total += len(days) * absence.hours_per_day

    logger.debug(
        "Leave hours computed",
        extra={"employee_id": employee_id, "absences": len(own), "leave_hours": total},
    )
    return total


def leave_hours_by_day(
    employee_id: int,
    absences: Sequence[Absence],
    period_start: DateLike,
    period_end: DateLike,
    holidays: Iterable[HolidayLike],
) -> dict[date, float]:
    """Per-day breakdown of compute_leave_hours; values sum to the same total."""
    holiday_dates = holiday_date_set(holidays)
    per_day: dict[date, float] = defaultdict(float)
    for absence in _employee_absences(employee_id, absences):
        window = overlap(absence.start_date, absence.end_date, period_start, period_end)
        if window is None:
            continue
        for day in qualifying_days(window[0], window[1], holiday_dates):
            per_day[day] += absence.hours_per_day
    return dict(sorted(per_day.items()))
