from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .database.connection import DatabaseConnection, DBConfig
from .enrolment.mysql_enrolment_repository import MySQLRosterProvider, MySQLStudentRepository
from .enrolment.repository import RosterProvider, StudentRepository
from .reports.service import AttendanceReportService


@dataclass(frozen=True)
class Container:
    attendance_repo: AttendanceRepository
    students_repo: StudentRepository
    roster: RosterProvider

    attendance_service: AttendanceService
    report_service: AttendanceReportService

    conn: Optional[DatabaseConnection] = None


def build_services(
    *,
    attendance_repo: AttendanceRepository,
    students_repo: StudentRepository,
    roster: RosterProvider,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    return Container(
        attendance_repo=attendance_repo,
        students_repo=students_repo,
        roster=roster,
        attendance_service=AttendanceService(attendance_repo, students_repo, roster),
        report_service=AttendanceReportService(attendance_repo, roster),
        conn=conn,
    )


def build_container(*, db_config: dict) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    return build_services(
        attendance_repo=MySQLAttendanceRepository(conn),
        students_repo=MySQLStudentRepository(conn),
        roster=MySQLRosterProvider(conn),
        conn=conn,
    )
