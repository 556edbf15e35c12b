from datetime import date

from src.leave_dashboard.leave_dashboard.contracts.model import Contract
from src.leave_dashboard.leave_dashboard.contracts.schedule import contract_hours_for_week, working_hours_for_day
from src.leave_dashboard.leave_dashboard.holidays.model import Holiday


def alternating_contract(**kwargs):
    # Even weeks: Monday-Friday 8h. Odd weeks: no Friday.
    return Contract(
        employee_id=1,
        hours_monday_even=8,
        hours_monday_odd=8,
        hours_tuesday_even=8,
        hours_tuesday_odd=8,
        hours_wednesday_even=8,
        hours_wednesday_odd=8,
        hours_thursday_even=8,
        hours_thursday_odd=8,
        hours_friday_even=8,
        hours_friday_odd=0,
        **kwargs,
    )


def test_hours_for_weekday_uses_week_parity():
    contract = alternating_contract()
    assert contract.hours_for_weekday(4, even_week=True) == 8
    assert contract.hours_for_weekday(4, even_week=False) == 0
    assert contract.hours_for_weekday(5, even_week=True) == 0
    assert contract.hours_for_weekday(6, even_week=False) == 0


def test_covers_handles_open_ends():
    contract = alternating_contract(start_date=date(2025, 4, 16))
    assert not contract.covers(date(2025, 4, 15))
    assert contract.covers(date(2025, 4, 16))
    assert contract.covers(date(2030, 1, 1))

    ended = alternating_contract(end_date=date(2025, 4, 16))
    assert ended.covers(date(2020, 1, 1))
    assert not ended.covers(date(2025, 4, 17))


def test_contract_hours_for_week_even_and_odd():
    contract = alternating_contract()
    assert contract_hours_for_week(contract, date(2025, 4, 14)) == 40  # week 16
    assert contract_hours_for_week(contract, date(2025, 4, 7)) == 32  # week 15


def test_contract_hours_for_week_only_counts_covered_days():
    contract = alternating_contract(start_date=date(2025, 4, 16))
    assert contract_hours_for_week(contract, date(2025, 4, 14)) == 24


def test_working_hours_zero_on_holiday_and_weekend():
    contract = alternating_contract()
    holidays = [Holiday(date(2025, 4, 18), "Goede Vrijdag")]

    assert working_hours_for_day(date(2025, 4, 18), contract, holidays) == 0
    assert working_hours_for_day(date(2025, 4, 19), contract, holidays) == 0
    assert working_hours_for_day(date(2025, 4, 17), contract, holidays) == 8


def test_working_hours_subtracts_absence():
    contract = alternating_contract()

    assert working_hours_for_day(date(2025, 4, 17), contract, absence_hours=3) == 5
    assert working_hours_for_day(date(2025, 4, 17), contract, absence_hours=8) == 0
    assert working_hours_for_day(date(2025, 4, 17), contract, absence_hours=10) == 0
