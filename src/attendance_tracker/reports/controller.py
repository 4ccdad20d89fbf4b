from __future__ import annotations

import csv
import io

from flask import Flask, jsonify, request

from ..common.datetime_utils import format_date, today_local
from ..container import Container
from ..attendance.controller import first_value, json_body
from ..core.exceptions import AttendanceServiceError, ValidationError
from .service import EXPORT_FIELDS, employee_to_dict, report_to_dict

LOAD_ERROR_NOTICE = "Error loading report data. Please check if the backend server is running."


def register(app: Flask, container: Container) -> None:
    def _write_csv(*, rows: list[dict], filename: str):
        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=EXPORT_FIELDS)
        writer.writeheader()
        for row in rows:
            writer.writerow(row)

        csv_bytes = out.getvalue().encode("utf-8-sig")
        return app.response_class(
            csv_bytes,
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.route("/api/reports", methods=["GET"], endpoint="reports")
    def reports():
        refresh = request.args.get("refresh", "").lower() in {"1", "true", "yes"}
        notice = None
        try:
            report = container.report_service.build_report(refresh=refresh)
        except AttendanceServiceError as e:
            app.logger.warning("Report fetch failed: %s", e)
            report = container.report_service.empty_report()
            notice = LOAD_ERROR_NOTICE

        data = report_to_dict(report)
        data["success"] = notice is None
        data["notice"] = notice
        return jsonify(data)

    @app.route("/api/reports.csv", methods=["GET"], endpoint="reports_csv")
    def reports_csv():
        try:
            rows = container.report_service.export_rows()
        except AttendanceServiceError as e:
            return jsonify({"success": False, "error": str(e)}), 502

        filename = f"attendance-report-{format_date(today_local())}.csv"
        return _write_csv(rows=rows, filename=filename)

    @app.route("/api/employees", methods=["GET"], endpoint="employees")
    def employees():
        try:
            rows = container.report_service.employees(search=request.args.get("search"))
        except AttendanceServiceError as e:
            app.logger.warning("Employee directory fetch failed: %s", e)
            return jsonify({"success": False, "employees": [], "notice": LOAD_ERROR_NOTICE})
        return jsonify({"success": True, "employees": [employee_to_dict(e) for e in rows]})

    @app.route("/api/employees", methods=["POST"], endpoint="add_employee")
    def add_employee():
        data = json_body()
        if data is None:
            return jsonify({"success": False, "error": "Invalid request body"}), 400
        try:
            message = container.attendance_service.add_employee(
                employee_name=first_value(data, "name", "employeeName", "employee_name"),
                employee_id=first_value(data, "employeeId", "employeeID", "employee_id"),
            )
        except ValidationError as e:
            return jsonify({"success": False, "error": str(e)}), 400
        except AttendanceServiceError as e:
            return jsonify({"success": False, "error": str(e)}), e.http_status
        return jsonify({"success": True, "message": message}), 201
