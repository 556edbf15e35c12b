from __future__ import annotations

import argparse
import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.leave_dashboard.leave_dashboard.common.logging_config import setup_logging
from src.leave_dashboard.leave_dashboard.database.bootstrap import apply_schema, list_tables, seed_holidays
from src.leave_dashboard.leave_dashboard.holidays.calendar import DEFAULT_HOLIDAYS

EXPECTED_TABLES = {"departments", "employees", "contracts", "absences", "holidays", "hours"}


def main() -> int:
    ap = argparse.ArgumentParser(description="Create the leave dashboard tables")
    ap.add_argument("--schema", default=str(REPO_ROOT / "database" / "schema.sql"), help="Schema file to apply")
    ap.add_argument("--with-holidays", action="store_true", help="Also seed the built-in holiday calendar")
    args = ap.parse_args()

    settings = importlib.import_module(get_settings_module())
    setup_logging(getattr(settings, "LOG_LEVEL", "INFO"), format_as_json=getattr(settings, "LOG_JSON", False))
    db_config = dict(settings.DB_CONFIG)
    target = f"{db_config.get('database')}@{db_config.get('host')}:{db_config.get('port', 3306)}"

    apply_schema(db_config, schema_path=args.schema)
    missing = sorted(EXPECTED_TABLES - set(list_tables(db_config)))
    if missing:
        print(f"ERROR: {target} is missing tables after applying {args.schema}: {', '.join(missing)}")
        return 1

    seeded = seed_holidays(db_config, DEFAULT_HOLIDAYS) if args.with_holidays else 0
    print(f"OK: {target} has all {len(EXPECTED_TABLES)} tables (holidays seeded={seeded})")
    return 0


if __name__ == "__main__":
    sys.exit(main())
