from __future__ import annotations

from dataclasses import dataclass

from .absences.mysql_absence_repository import MySQLAbsenceRepository
from .absences.repository import AbsenceRepository
from .contracts.mysql_contract_repository import MySQLContractRepository
from .contracts.repository import ContractRepository
from .core.constants import DEFAULT_DECLARABILITY_CACHE_SECONDS
from .database.connection import DatabaseConnection, DBConfig
from .declarability.service import DeclarabilityService
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .holidays.mysql_holiday_repository import MySQLHolidayRepository
from .holidays.repository import HolidayRepository
from .holidays.service import HolidayService
from .hours.mysql_hour_repository import MySQLHourRepository
from .hours.repository import HourRepository
from .reports.service import EmployeeWeekService, LeaveReportService


@dataclass(frozen=True)
class Container:
    employees_repo: EmployeeRepository
    contracts_repo: ContractRepository
    absences_repo: AbsenceRepository
    holidays_repo: HolidayRepository
    hours_repo: HourRepository

    holiday_service: HolidayService
    leave_report_service: LeaveReportService
    employee_week_service: EmployeeWeekService
    declarability_service: DeclarabilityService


def wire_services(
    *,
    employees_repo: EmployeeRepository,
    contracts_repo: ContractRepository,
    absences_repo: AbsenceRepository,
    holidays_repo: HolidayRepository,
    hours_repo: HourRepository,
    declarability_cache_seconds: float = DEFAULT_DECLARABILITY_CACHE_SECONDS,
    report_max_workers: int = 1,
) -> Container:
    holiday_service = HolidayService(holidays_repo)
    leave_report_service = LeaveReportService(
        absences_repo,
        holiday_service,
        employees_repo,
        max_workers=report_max_workers,
    )
    employee_week_service = EmployeeWeekService(
        employees_repo,
        contracts_repo,
        absences_repo,
        holiday_service,
        hours_repo,
    )
    declarability_service = DeclarabilityService(
        employees_repo,
        hours_repo,
        cache_seconds=declarability_cache_seconds,
    )

    return Container(
        employees_repo=employees_repo,
        contracts_repo=contracts_repo,
        absences_repo=absences_repo,
        holidays_repo=holidays_repo,
        hours_repo=hours_repo,
        holiday_service=holiday_service,
        leave_report_service=leave_report_service,
        employee_week_service=employee_week_service,
        declarability_service=declarability_service,
    )


def build_container(
    *,
    db_config: dict,
    declarability_cache_seconds: float = DEFAULT_DECLARABILITY_CACHE_SECONDS,
    report_max_workers: int = 1,
) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    return wire_services(
        employees_repo=MySQLEmployeeRepository(conn),
        contracts_repo=MySQLContractRepository(conn),
        absences_repo=MySQLAbsenceRepository(conn),
        holidays_repo=MySQLHolidayRepository(conn),
        hours_repo=MySQLHourRepository(conn),
        declarability_cache_seconds=declarability_cache_seconds,
        report_max_workers=report_max_workers,
    )
