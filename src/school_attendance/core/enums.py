from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Roles carried by an authenticated actor."""

    ADMIN = "admin"
    DIRECTOR = "director"
    AUDITOR = "auditor"
    HOD = "hod"
    TEACHER = "teacher"
    RECEPTION = "reception"
    PARENT = "parent"
    STUDENT = "student"


class Operation(str, Enum):
    """Operation tags checked against the role policy table."""

    MARK_ATTENDANCE = "mark_attendance"
    VIEW_CLASS_ATTENDANCE = "view_class_attendance"
    VIEW_ATTENDANCE_REPORT = "view_attendance_report"
    VIEW_ATTENDANCE_SUMMARY = "view_attendance_summary"
    VIEW_STUDENT_ATTENDANCE = "view_student_attendance"


class TrendLabel(str, Enum):
    """Week-over-week movement of the attendance rate."""

    IMPROVING = "improving"
    DECLINING = "declining"
    STABLE = "stable"
