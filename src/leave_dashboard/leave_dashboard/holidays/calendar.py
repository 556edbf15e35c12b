from __future__ import annotations

from datetime import date
from typing import Iterable, Sequence

from .model import Holiday

# Public holidays observed by the organization (Dutch calendar).
DEFAULT_HOLIDAYS: tuple[Holiday, ...] = (
    Holiday(date(2024, 1, 1), "Nieuwjaarsdag"),
    Holiday(date(2024, 3, 29), "Goede Vrijdag"),
    Holiday(date(2024, 4, 1), "Paasmaandag"),
    Holiday(date(2024, 4, 27), "Koningsdag"),
    Holiday(date(2024, 5, 9), "Hemelvaartsdag"),
    Holiday(date(2024, 5, 20), "Pinkstermaandag"),
    Holiday(date(2024, 12, 25), "Eerste Kerstdag"),
    Holiday(date(2024, 12, 26), "Tweede Kerstdag"),
    Holiday(date(2025, 1, 1), "Nieuwjaarsdag"),
    Holiday(date(2025, 4, 18), "Goede Vrijdag"),
    Holiday(date(2025, 4, 21), "Paasmaandag"),
    Holiday(date(2025, 4, 26), "Koningsdag"),
    Holiday(date(2025, 5, 5), "Bevrijdingsdag"),
    Holiday(date(2025, 5, 29), "Hemelvaartsdag"),
    Holiday(date(2025, 6, 8), "Eerste Pinksterdag"),
    Holiday(date(2025, 6, 9), "Tweede Pinksterdag"),
    Holiday(date(2025, 12, 25), "Eerste Kerstdag"),
    Holiday(date(2025, 12, 26), "Tweede Kerstdag"),
)


def holidays_in_range(start: date, end: date, holidays: Iterable[Holiday] = DEFAULT_HOLIDAYS) -> list[Holiday]:
    return sorted(
        (h for h in holidays if start <= h.holiday_date <= end),
        key=lambda h: h.holiday_date,
    )


def is_holiday(day: date, holidays: Sequence[Holiday] = DEFAULT_HOLIDAYS) -> bool:
    return any(h.holiday_date == day for h in holidays)
