from __future__ import annotations

from dataclasses import asdict

from flask import Flask, jsonify, request

from ..analytics.filters import FilterSpec
from ..container import Container
from ..core.exceptions import AttendanceServiceError, ValidationError
from .service import DashboardView

LOAD_ERROR_NOTICE = "Error loading attendance data. Make sure the backend server is running."


def first_value(data: dict, *keys, default=""):
    for key in keys:
        if data.get(key) not in (None, ""):
            return data[key]
    return default


def json_body():
    """The request's JSON object, or None when the body is not an object."""
    data = request.get_json(silent=True)
    if data is None:
        return {}
    return data if isinstance(data, dict) else None


def _dashboard_to_dict(view: DashboardView) -> dict:
    return {
        "success": view.notice is None,
        "records": view.rows,
        "stats": asdict(view.stats),
        "total_matches": view.total_matches,
        "showing": view.showing,
        "notice": view.notice,
    }


def register(app: Flask, container: Container) -> None:
    def _error(message: str, status: int):
        return jsonify({"success": False, "error": message}), status

    @app.route("/api/dashboard", methods=["GET"], endpoint="dashboard")
    def dashboard():
        spec = FilterSpec.from_mapping(request.args)
        refresh = request.args.get("refresh", "").lower() in {"1", "true", "yes"}
        try:
            view = container.attendance_service.dashboard(spec, refresh=refresh)
        except AttendanceServiceError as e:
            # Blocking notice plus an empty view instead of stale rows.
            app.logger.warning("Dashboard fetch failed: %s", e)
            view = container.attendance_service.empty_dashboard(LOAD_ERROR_NOTICE)
        return jsonify(_dashboard_to_dict(view))

    @app.route("/api/attendance", methods=["POST"], endpoint="mark_attendance")
    def mark_attendance():
        data = json_body()
        if data is None:
            return _error("Invalid request body", 400)
        try:
            message = container.attendance_service.mark_attendance(
                employee_name=first_value(data, "employeeName", "employee_name", "name"),
                employee_id=first_value(data, "employeeID", "employee_id", "employeeId"),
                work_date=first_value(data, "date", "work_date", default=None),
                status=first_value(data, "status", default="Present"),
            )
        except ValidationError as e:
            return _error(str(e), 400)
        except AttendanceServiceError as e:
            return _error(str(e), e.http_status)
        return jsonify({"success": True, "message": message}), 201

    @app.route("/api/attendance/<record_id>", methods=["DELETE"], endpoint="delete_attendance")
    def delete_attendance(record_id: str):
        try:
            container.attendance_service.delete_record(record_id)
        except AttendanceServiceError as e:
            return _error(str(e) or "Failed to delete record", e.http_status)
        return jsonify({"success": True, "message": "Record deleted successfully!"})

    @app.route("/api/refresh", methods=["POST"], endpoint="refresh")
    def refresh():
        container.attendance_service.refresh()
        return jsonify({"success": True})

    @app.route("/api/filters/options", methods=["GET"], endpoint="filter_options")
    def filter_options():
        return jsonify(container.attendance_service.filter_options())
