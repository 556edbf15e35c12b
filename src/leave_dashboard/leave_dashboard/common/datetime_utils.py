from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Iterator, Union

from ..core.constants import WEEKEND_DAYS
from ..core.exceptions import InvalidDate

DateLike = Union[date, datetime, str]


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(value.strip(), "%Y-%m-%d").date()
    except (AttributeError, ValueError) as e:
        raise InvalidDate(f"Invalid date: {value!r}") from e


def to_calendar_date(value: DateLike) -> date:
    """Reduce a date, datetime or ISO string to its calendar day.

    Time-of-day is dropped, so "2025-04-03T23:00:00" and date(2025, 4, 3)
    compare equal.
    """
    # datetime is a subclass of date, check it first.
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        head = value.strip()[:10]
        return parse_iso_date(head)
    raise InvalidDate(f"Unsupported date value: {value!r}")


def iter_days(start: date, end: date) -> Iterator[date]:
    """Yield every day from start to end inclusive (nothing if start > end)."""
    day = start
    while day <= end:
        yield day
        day += timedelta(days=1)


def is_weekend(day: date) -> bool:
    return day.weekday() in WEEKEND_DAYS


def iso_week_dates(year: int, week: int) -> tuple[date, date]:
    """Monday and Sunday of an ISO-8601 week.

    Week 1 is the week containing the first Thursday of the year.
    """
    try:
        monday = date.fromisocalendar(int(year), int(week), 1)
    except ValueError as e:
        raise InvalidDate(f"Invalid ISO week: {year}-W{week}") from e
    return monday, monday + timedelta(days=6)


def is_even_week(day: date) -> bool:
    return day.isocalendar()[1] % 2 == 0
