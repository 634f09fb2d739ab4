from __future__ import annotations

from flask import Flask

from ..common.http import arg, json_errors, ok, permission_required
from ..container import Container
from ..core.enums import Operation
from .export import daily_metrics_csv, report_csv_filename


def register(app: Flask, container: Container) -> None:
    def _report():
        return container.report_service.get_attendance_report(
            arg("class_name"),
            arg("term_num"),
            arg("year"),
            arg("start_date"),
            arg("end_date"),
        )

    @app.route("/api/attendance/reports", methods=["GET"], endpoint="attendance_reports")
    @permission_required(Operation.VIEW_ATTENDANCE_REPORT)
    @json_errors
    def attendance_reports():
        return ok(_report().to_dict())

    @app.route("/api/attendance/reports.csv", methods=["GET"], endpoint="attendance_reports_csv")
    @permission_required(Operation.VIEW_ATTENDANCE_REPORT)
    @json_errors
    def attendance_reports_csv():
        report = _report()
        return app.response_class(
            daily_metrics_csv(report),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={report_csv_filename(report)}"},
        )

    @app.route("/api/attendance/summary", methods=["GET"], endpoint="attendance_summary")
    @permission_required(Operation.VIEW_ATTENDANCE_SUMMARY)
    @json_errors
    def attendance_summary():
        summary = container.report_service.get_attendance_summary(
            arg("class_name"),
            arg("term_num"),
            arg("year"),
        )
        return ok(summary.to_dict())
