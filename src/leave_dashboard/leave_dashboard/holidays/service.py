from __future__ import annotations

import logging
from datetime import date
from typing import Sequence

from ..common.validators import require_period
from .calendar import DEFAULT_HOLIDAYS, holidays_in_range, is_holiday
from .model import Holiday
from .repository import HolidayRepository

logger = logging.getLogger(__name__)


class HolidayService:
    """Holiday Source for reports.

    Falls back to the built-in calendar only while the store is empty
    (e.g. before the first sync). A populated store is authoritative, also
    for ranges where it holds no holidays.
    """

    def __init__(self, holidays: HolidayRepository, *, defaults: Sequence[Holiday] = DEFAULT_HOLIDAYS):
        self._holidays = holidays
        self._defaults = tuple(defaults)

    def list_range(self, *, start: date, end: date) -> Sequence[Holiday]:
        require_period(start, end)
        stored = list(self._holidays.list_range(start=start, end=end))
        if stored or self._holidays.has_any():
            return stored

        logger.debug("Holiday store is empty, using defaults", extra={"start": start.isoformat(), "end": end.isoformat()})
        return holidays_in_range(start, end, self._defaults)

    def is_holiday(self, day: date) -> bool:
        return is_holiday(day, self.list_range(start=day, end=day))
