from __future__ import annotations

from datetime import date, timedelta
from typing import Iterable

from ..common.datetime_utils import is_even_week, is_weekend
from ..core.constants import WORKING_WEEKDAYS
from ..leave.engine import HolidayLike, holiday_date_set
from .model import Contract


def working_hours_for_day(
    day: date,
    contract: Contract,
    holidays: Iterable[HolidayLike] = (),
    *,
    absence_hours: float = 0.0,
) -> float:
    """Hours the employee is expected to work on ``day``.

    Holidays and weekends are 0. An absence covering the whole day makes the
    employee fully absent; a shorter one is subtracted.
    """
    if day in holiday_date_set(holidays) or is_weekend(day):
        return 0.0

    hours = contract.hours_for_weekday(day.weekday(), even_week=is_even_week(day))
    if absence_hours >= hours:
        return 0.0
    return max(0.0, hours - absence_hours)


def contract_hours_for_week(contract: Contract, week_start: date) -> float:
    """Contract hours Monday-Friday of the week starting at ``week_start``.

    Only days inside the contract period count.
    """
    even = is_even_week(week_start)
    total = 0.0
    for offset in WORKING_WEEKDAYS:
        day = week_start + timedelta(days=offset)
        if contract.covers(day):
            total += contract.hours_for_weekday(day.weekday(), even_week=even)
    return total
