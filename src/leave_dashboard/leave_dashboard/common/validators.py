from __future__ import annotations

from datetime import date

from ..core.exceptions import ValidationError


def require_period(start: date, end: date) -> tuple[date, date]:
    if start > end:
        raise ValidationError(f"Period start {start.isoformat()} is after end {end.isoformat()}")
    return start, end


def require_positive_int(value, field_name: str) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"{field_name} is not a valid number") from e
    if number <= 0:
        raise ValidationError(f"{field_name} must be positive")
    return number


def require_non_negative(value, field_name: str) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"{field_name} is not a valid number") from e
    if number < 0:
        raise ValidationError(f"{field_name} must not be negative")
    return number
