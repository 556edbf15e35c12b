from datetime import date, datetime
from decimal import Decimal

import pytest

from src.leave_dashboard.leave_dashboard.absences.mysql_absence_repository import _to_absence
from src.leave_dashboard.leave_dashboard.core.exceptions import ValidationError


def row(**overrides):
    r = {
        "employee_id": 7,
        "startdate": datetime(2025, 4, 1, 0, 0),
        "enddate": "2025-04-04 00:00:00",
        "hours_per_day": Decimal("7.50"),
        "type_name": "Verlof",
        "description": None,
        "status_name": "Approved",
    }
    r.update(overrides)
    return r


def test_row_is_mapped_to_absence():
    absence = _to_absence(row())

    assert absence.employee_id == 7
    assert absence.start_date == date(2025, 4, 1)
    assert absence.end_date == date(2025, 4, 4)
    assert absence.hours_per_day == 7.5
    assert absence.type_name == "Verlof"


def test_zero_hours_per_day_is_accepted():
    assert _to_absence(row(hours_per_day=0)).hours_per_day == 0


@pytest.mark.parametrize("hours", [-8, Decimal("-0.5"), "abc", None])
def test_invalid_hours_per_day_is_rejected(hours):
    with pytest.raises(ValidationError):
        _to_absence(row(hours_per_day=hours))
