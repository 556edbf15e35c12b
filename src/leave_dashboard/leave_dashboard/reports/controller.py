from __future__ import annotations

import logging
from functools import wraps
from typing import Optional

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date
from ..common.validators import require_positive_int
from ..container import Container
from ..core.exceptions import ValidationError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    def json_errors(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                return view(*args, **kwargs)
            except ValidationError as e:
                return jsonify({"success": False, "message": str(e)}), 400
            except Exception:
                logger.exception("Unhandled error", extra={"path": request.path})
                return jsonify({"success": False, "message": "Internal server error"}), 500

        return wrapper

    def _required_arg(name: str) -> str:
        value = request.args.get(name)
        if not value:
            raise ValidationError(f"Missing query parameter: {name}")
        return value

    def _optional_int(name: str) -> Optional[int]:
        value = request.args.get(name)
        if value is None or value == "":
            return None
        return require_positive_int(value, name)

    @app.route("/api/health", methods=["GET"], endpoint="api_health")
    def api_health():
        return jsonify({"success": True, "status": "ok"})

    @app.route("/api/leave-hours", methods=["GET"], endpoint="api_leave_hours")
    @json_errors
    def api_leave_hours():
        start = parse_iso_date(_required_arg("start"))
        end = parse_iso_date(_required_arg("end"))
        employee_id = _optional_int("employee_id")

        report = container.leave_report_service.build_leave_report(
            start=start,
            end=end,
            employee_ids=[employee_id] if employee_id is not None else None,
        )
        return jsonify(
            {
                "success": True,
                "start": report.start.isoformat(),
                "end": report.end.isoformat(),
                "total_hours": report.total_hours,
                "rows": report.rows,
            }
        )

    @app.route("/api/employees/week", methods=["GET"], endpoint="api_employees_week")
    @json_errors
    def api_employees_week():
        year = require_positive_int(_required_arg("year"), "year")
        week = require_positive_int(_required_arg("week"), "week")

        rows = container.employee_week_service.build_week_overview(year=year, week=week)
        return jsonify({"success": True, "year": year, "week": week, "rows": [r.to_dict() for r in rows]})

    @app.route("/api/declarability", methods=["GET"], endpoint="api_declarability")
    @json_errors
    def api_declarability():
        start = parse_iso_date(_required_arg("start"))
        end = parse_iso_date(_required_arg("end"))
        refresh = request.args.get("refresh") in {"1", "true", "yes"}

        departments = container.declarability_service.by_department(start=start, end=end, force_refresh=refresh)
        return jsonify({"success": True, "departments": [d.to_dict() for d in departments]})

    @app.route("/api/holidays", methods=["GET"], endpoint="api_holidays")
    @json_errors
    def api_holidays():
        start = parse_iso_date(_required_arg("start"))
        end = parse_iso_date(_required_arg("end"))

        holidays = container.holiday_service.list_range(start=start, end=end)
        return jsonify(
            {
                "success": True,
                "holidays": [{"date": h.holiday_date.isoformat(), "name": h.name} for h in holidays],
            }
        )
