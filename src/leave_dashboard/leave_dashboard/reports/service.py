from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Iterable, Optional

from ..absences.repository import AbsenceRepository
from ..common.datetime_utils import is_even_week, iso_week_dates
from ..common.validators import require_period
from ..contracts.model import Contract
from ..contracts.repository import ContractRepository
from ..contracts.schedule import contract_hours_for_week
from ..core.constants import WORKING_WEEKDAYS
from ..employees.repository import EmployeeRepository
from ..holidays.repository import HolidayRepository
from ..hours.repository import HourRepository
from ..leave.calculator.base import LeaveHoursCalculator
from ..leave.calculator.capped_calculator import DailyCapLeaveCalculator
from ..leave.calculator.standard_calculator import StandardLeaveCalculator
from ..leave.engine import holiday_date_set
from ..leave.model import ReportingPeriod

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LeaveReport:
    start: date
    end: date
    rows: list[dict]
    total_hours: float


@dataclass(frozen=True)
class EmployeeWeekRow:
    employee_id: int
    full_name: str
    contract_hours: float
    holiday_hours: float
    leave_hours: float
    written_hours: float

    @property
    def expected_hours(self) -> float:
        return max(0.0, self.contract_hours - self.holiday_hours - self.leave_hours)

    @property
    def missing_hours(self) -> float:
        return max(0.0, self.expected_hours - self.written_hours)

    def to_dict(self) -> dict:
        return {
            "employee_id": self.employee_id,
            "full_name": self.full_name,
            "contract_hours": self.contract_hours,
            "holiday_hours": self.holiday_hours,
            "leave_hours": self.leave_hours,
            "written_hours": self.written_hours,
            "expected_hours": self.expected_hours,
            "missing_hours": self.missing_hours,
        }


class LeaveReportService:
    """Leave hours per employee for a reporting period."""

    def __init__(
        self,
        absences: AbsenceRepository,
        holidays: HolidayRepository,
        employees: EmployeeRepository,
        *,
        calculator: Optional[LeaveHoursCalculator] = None,
        max_workers: int = 1,
    ):
        self._absences = absences
        self._holidays = holidays
        self._employees = employees
        self._calculator = calculator or StandardLeaveCalculator()
        self._max_workers = max(1, int(max_workers))

    def build_leave_report(
        self,
        *,
        start: date,
        end: date,
        employee_ids: Optional[Iterable[int]] = None,
    ) -> LeaveReport:
        require_period(start, end)
        period = ReportingPeriod(start=start, end=end)

        # Company-wide absences and holidays are loaded once and shared by every employee.
        absences = list(self._absences.list_for_period(start=start, end=end))
        holidays = list(self._holidays.list_range(start=start, end=end))

        names = {e.employee_id: e.full_name for e in self._employees.list_all(active_only=False)}
        if employee_ids is None:
            targets = [e.employee_id for e in self._employees.list_all(active_only=True)]
        else:
            targets = [int(i) for i in employee_ids]

        def leave_for(employee_id: int) -> float:
            return self._calculator.leave_hours(employee_id, absences, period, holidays)

        if self._max_workers > 1 and len(targets) > 1:
            with ThreadPoolExecutor(max_workers=self._max_workers) as pool:
                totals = list(pool.map(leave_for, targets))
        else:
            totals = [leave_for(employee_id) for employee_id in targets]

        rows = [
            {"employee_id": employee_id, "full_name": names.get(employee_id, ""), "leave_hours": hours}
            for employee_id, hours in zip(targets, totals)
        ]
        rows.sort(key=lambda r: (-r["leave_hours"], r["employee_id"]))
        total_hours = sum(r["leave_hours"] for r in rows)

        logger.info(
            "Leave report built",
            extra={
                "start": start.isoformat(),
                "end": end.isoformat(),
                "employees": len(rows),
                "absences": len(absences),
                "total_hours": total_hours,
            },
        )
        return LeaveReport(start=start, end=end, rows=rows, total_hours=total_hours)


class EmployeeWeekService:
    """Weekly overview: contract, holiday, leave and written hours per employee."""

    def __init__(
        self,
        employees: EmployeeRepository,
        contracts: ContractRepository,
        absences: AbsenceRepository,
        holidays: HolidayRepository,
        hours: HourRepository,
    ):
        self._employees = employees
        self._contracts = contracts
        self._absences = absences
        self._holidays = holidays
        self._hours = hours

    def build_week_overview(self, *, year: int, week: int) -> list[EmployeeWeekRow]:
        start, end = iso_week_dates(year, week)
        period = ReportingPeriod(start=start, end=end)

        absences = list(self._absences.list_for_period(start=start, end=end))
        holidays = list(self._holidays.list_range(start=start, end=end))
        holiday_dates = holiday_date_set(holidays)
        contracts = {c.employee_id: c for c in self._contracts.list_active(start=start, end=end)}

        written: dict[int, float] = {}
        for entry in self._hours.list_for_period(start=start, end=end):
            written[entry.employee_id] = written.get(entry.employee_id, 0.0) + entry.amount

        rows = []
        for employee in self._employees.list_all(active_only=True):
            contract = contracts.get(employee.employee_id)
            if contract is None:
                rows.append(
                    EmployeeWeekRow(
                        employee_id=employee.employee_id,
                        full_name=employee.full_name,
                        contract_hours=0.0,
                        holiday_hours=0.0,
                        leave_hours=0.0,
                        written_hours=written.get(employee.employee_id, 0.0),
                    )
                )
                continue

            contract_hours = contract_hours_for_week(contract, start)
            holiday_hours = _holiday_hours(contract, start, holiday_dates)

            calculator = DailyCapLeaveCalculator(_contract_day_cap(contract))
            leave_hours = calculator.leave_hours(employee.employee_id, absences, period, holidays)
            leave_hours = min(leave_hours, max(0.0, contract_hours - holiday_hours))

            rows.append(
                EmployeeWeekRow(
                    employee_id=employee.employee_id,
                    full_name=employee.full_name,
                    contract_hours=contract_hours,
                    holiday_hours=holiday_hours,
                    leave_hours=leave_hours,
                    written_hours=written.get(employee.employee_id, 0.0),
                )
            )

        logger.info("Week overview built", extra={"year": year, "week": week, "employees": len(rows)})
        return rows


def _contract_day_cap(contract: Contract):
    def cap(day: date) -> float:
        if not contract.covers(day):
            return 0.0
        return contract.hours_for_weekday(day.weekday(), even_week=is_even_week(day))

    return cap


def _holiday_hours(contract: Contract, week_start: date, holiday_dates: frozenset[date]) -> float:
    total = 0.0
    for offset in WORKING_WEEKDAYS:
        day = week_start + timedelta(days=offset)
        if day in holiday_dates and contract.covers(day):
            total += contract.hours_for_weekday(day.weekday(), even_week=is_even_week(day))
    return total
