from __future__ import annotations

from flask import Flask, request

from ..common.http import arg, json_errors, ok, permission_required
from ..container import Container
from ..core.enums import Operation


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance/mark", methods=["POST"], endpoint="attendance_mark")
    @permission_required(Operation.MARK_ATTENDANCE)
    @json_errors
    def attendance_mark():
        data = request.get_json(silent=True) or {}
        record = container.attendance_service.mark_attendance(
            student_number=data.get("student_number"),
            class_name=data.get("class_name"),
            term_num=data.get("term_num"),
            year=data.get("year"),
            present=data.get("present"),
            att_date=data.get("date"),
        )
        return ok(record.to_dict())

    @app.route("/api/attendance/class", methods=["GET"], endpoint="attendance_class")
    @permission_required(Operation.VIEW_CLASS_ATTENDANCE)
    @json_errors
    def attendance_class():
        entries = container.attendance_service.get_class_attendance(
            arg("class_name"),
            arg("term_num"),
            arg("year"),
            arg("date"),
        )
        return ok([e.to_dict() for e in entries])

    @app.route("/api/attendance/student/<student_number>", methods=["GET"], endpoint="attendance_student")
    @permission_required(Operation.VIEW_STUDENT_ATTENDANCE)
    @json_errors
    def attendance_student(student_number: str):
        entries = container.attendance_service.get_student_attendance(
            student_number,
            arg("term_num"),
            arg("year"),
            arg("start_date"),
            arg("end_date"),
        )
        return ok([e.to_dict() for e in entries])
