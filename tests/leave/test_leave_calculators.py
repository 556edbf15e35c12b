from datetime import date

from src.leave_dashboard.leave_dashboard.absences.model import Absence
from src.leave_dashboard.leave_dashboard.holidays.model import Holiday
from src.leave_dashboard.leave_dashboard.leave.calculator.capped_calculator import DailyCapLeaveCalculator
from src.leave_dashboard.leave_dashboard.leave.calculator.standard_calculator import StandardLeaveCalculator
from src.leave_dashboard.leave_dashboard.leave.model import ReportingPeriod

APRIL = ReportingPeriod(start=date(2025, 4, 1), end=date(2025, 4, 30))


def _overlapping():
    return [
        Absence(employee_id=1, start_date=date(2025, 4, 7), end_date=date(2025, 4, 8), hours_per_day=8),
        Absence(employee_id=1, start_date=date(2025, 4, 8), end_date=date(2025, 4, 8), hours_per_day=4),
    ]


def test_standard_calculator_sums_overlaps():
    calc = StandardLeaveCalculator()
    assert calc.leave_hours(1, _overlapping(), APRIL, []) == 20


def test_daily_cap_calculator_caps_each_day():
    calc = DailyCapLeaveCalculator(lambda day: 8.0)
    assert calc.leave_hours(1, _overlapping(), APRIL, []) == 16


def test_daily_cap_calculator_uses_cap_per_day():
    # Part-timer: nothing contracted on Mondays.
    calc = DailyCapLeaveCalculator(lambda day: 0.0 if day.weekday() == 0 else 6.0)
    assert calc.leave_hours(1, _overlapping(), APRIL, []) == 6


def test_daily_cap_calculator_still_skips_holidays():
    calc = DailyCapLeaveCalculator(lambda day: 8.0)
    holidays = [Holiday(date(2025, 4, 8), "Test")]
    assert calc.leave_hours(1, _overlapping(), APRIL, holidays) == 8


def test_reporting_period_days_are_inclusive():
    period = ReportingPeriod(start=date(2025, 4, 29), end=date(2025, 5, 1))
    assert list(period.days()) == [date(2025, 4, 29), date(2025, 4, 30), date(2025, 5, 1)]
