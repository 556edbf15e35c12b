"""Example: compute leave hours without Flask or a database.

The reconciliation engine is a plain function; the report services only add
the sources around it.
"""

from datetime import date

from src.leave_dashboard.leave_dashboard.absences.model import Absence
from src.leave_dashboard.leave_dashboard.holidays.calendar import DEFAULT_HOLIDAYS
from src.leave_dashboard.leave_dashboard.leave.engine import compute_leave_hours, leave_hours_by_day


def main():
    absences = [
        Absence(employee_id=7, start_date=date(2025, 4, 14), end_date=date(2025, 4, 25), hours_per_day=8),
        Absence(employee_id=9, start_date=date(2025, 4, 14), end_date=date(2025, 4, 14), hours_per_day=4),
    ]

    # Good Friday and Easter Monday fall inside the absence and are not charged.
    total = compute_leave_hours(7, absences, date(2025, 4, 1), date(2025, 4, 30), DEFAULT_HOLIDAYS)
    print(f"Employee 7 leave hours in April 2025: {total}")

    for day, hours in leave_hours_by_day(7, absences, date(2025, 4, 1), date(2025, 4, 30), DEFAULT_HOLIDAYS).items():
        print(f"  {day.isoformat()}: {hours}")


if __name__ == "__main__":
    main()
