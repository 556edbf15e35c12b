from datetime import date, timedelta

import pytest

from src.leave_dashboard.leave_dashboard.core.exceptions import ValidationError
from src.leave_dashboard.leave_dashboard.declarability.service import DeclarabilityService, is_declarable
from src.leave_dashboard.leave_dashboard.employees.model import Employee
from src.leave_dashboard.leave_dashboard.hours.model import HourEntry


class FakeEmployeeRepo:
    def __init__(self, employees):
        self._employees = employees

    def list_all(self, *, active_only=True):
        return [e for e in self._employees if e.active or not active_only]


class CountingHourRepo:
    def __init__(self, entries):
        self._entries = entries
        self.calls = 0

    def list_for_period(self, *, start, end, employee_id=None):
        self.calls += 1
        return [e for e in self._entries if start <= e.work_date <= end]


class FakeClock:
    def __init__(self):
        self.now = 1000.0

    def __call__(self):
        return self.now


DAY = date(2025, 4, 7)

EMPLOYEES = [
    Employee(employee_id=1, full_name="A", department_id=10, department_name="Dev"),
    Employee(employee_id=2, full_name="B", department_id=10, department_name="Dev"),
    Employee(employee_id=3, full_name="C", department_id=20, department_name="Design"),
    Employee(employee_id=4, full_name="D"),
    Employee(employee_id=5, full_name="E", department_id=30, department_name="Sales"),
    Employee(employee_id=6, full_name="F", department_id=20, department_name="Design", active=False),
]

ENTRIES = [
    HourEntry(employee_id=1, work_date=DAY, amount=6, invoice_basis_id=1),
    HourEntry(employee_id=1, work_date=DAY, amount=2, invoice_basis_id=4),
    HourEntry(employee_id=2, work_date=DAY, amount=4),
    HourEntry(employee_id=3, work_date=DAY, amount=5, invoice_basis_id=2),
    HourEntry(employee_id=4, work_date=DAY, amount=8, invoice_basis_id=1),
    HourEntry(employee_id=6, work_date=DAY, amount=8, invoice_basis_id=4),
]


def test_is_declarable():
    assert is_declarable(HourEntry(employee_id=1, work_date=DAY, amount=1, invoice_basis_id=1))
    assert not is_declarable(HourEntry(employee_id=1, work_date=DAY, amount=1, invoice_basis_id=4))
    assert not is_declarable(HourEntry(employee_id=1, work_date=DAY, amount=1))


def test_by_department_groups_and_sorts():
    svc = DeclarabilityService(FakeEmployeeRepo(EMPLOYEES), CountingHourRepo(ENTRIES))

    result = svc.by_department(start=date(2025, 4, 1), end=date(2025, 4, 30))

    assert [d.department_name for d in result] == ["Design", "Dev"]
    design, dev = result
    assert design.total_hours == 5
    assert design.declarability_percentage == 100
    assert dev.total_hours == 12
    assert dev.declarable_hours == 6
    assert dev.non_declarable_hours == 6
    assert dev.declarability_percentage == pytest.approx(50.0)


def test_results_are_cached_until_ttl_expires():
    hours = CountingHourRepo(ENTRIES)
    clock = FakeClock()
    svc = DeclarabilityService(FakeEmployeeRepo(EMPLOYEES), hours, cache_seconds=60, clock=clock)

    svc.by_department(start=date(2025, 4, 1), end=date(2025, 4, 30))
    clock.now += 59
    svc.by_department(start=date(2025, 4, 1), end=date(2025, 4, 30))
    assert hours.calls == 1

    clock.now += 2
    svc.by_department(start=date(2025, 4, 1), end=date(2025, 4, 30))
    assert hours.calls == 2


def test_force_refresh_and_clear_cache():
    hours = CountingHourRepo(ENTRIES)
    svc = DeclarabilityService(FakeEmployeeRepo(EMPLOYEES), hours, clock=FakeClock())

    svc.by_department(start=date(2025, 4, 1), end=date(2025, 4, 30))
    svc.by_department(start=date(2025, 4, 1), end=date(2025, 4, 30), force_refresh=True)
    assert hours.calls == 2

    svc.clear_cache()
    svc.by_department(start=date(2025, 4, 1), end=date(2025, 4, 30))
    assert hours.calls == 3


def test_rejects_inverted_period():
    svc = DeclarabilityService(FakeEmployeeRepo(EMPLOYEES), CountingHourRepo(ENTRIES))
    with pytest.raises(ValidationError):
        svc.by_department(start=date(2025, 4, 30), end=date(2025, 4, 1))


def test_expired_periods_are_dropped_from_cache():
    clock = FakeClock()
    svc = DeclarabilityService(FakeEmployeeRepo(EMPLOYEES), CountingHourRepo(ENTRIES), cache_seconds=1, clock=clock)

    for offset in range(100):
        day = date(2025, 1, 1) + timedelta(days=offset)
        svc.by_department(start=day, end=day)
        clock.now += 10

    assert len(svc._cache) == 1


def test_live_periods_stay_cached_next_to_each_other():
    hours = CountingHourRepo(ENTRIES)
    clock = FakeClock()
    svc = DeclarabilityService(FakeEmployeeRepo(EMPLOYEES), hours, cache_seconds=60, clock=clock)

    svc.by_department(start=date(2025, 4, 1), end=date(2025, 4, 30))
    clock.now += 30
    svc.by_department(start=date(2025, 5, 1), end=date(2025, 5, 31))
    svc.by_department(start=date(2025, 4, 1), end=date(2025, 4, 30))

    assert len(svc._cache) == 2
    assert hours.calls == 2
