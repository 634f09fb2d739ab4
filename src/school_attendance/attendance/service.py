from __future__ import annotations

import logging
from typing import Optional

from ..common.datetime_utils import DateLike, optional_calendar_date, to_calendar_date, today_local
from ..common.validators import check_date_range, require_bool, require_non_empty, require_positive_int
from ..core.exceptions import NotFoundError
from ..enrolment.repository import RosterProvider, StudentRepository
from .model import AttendanceKey, AttendanceRecord, RosterAttendanceEntry, StudentAttendanceEntry
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    """Use cases: mark attendance and read it back per class or per student."""

    def __init__(
        self,
        attendance: AttendanceRepository,
        students: StudentRepository,
        roster: RosterProvider,
    ):
        self._attendance = attendance
        self._students = students
        self._roster = roster

    def mark_attendance(
        self,
        *,
        student_number: str,
        class_name: str,
        term_num: int,
        year: int,
        present: bool,
        att_date: DateLike,
    ) -> AttendanceRecord:
        student_number = require_non_empty(student_number, "student_number")
        class_name = require_non_empty(class_name, "class_name")
        term_num = require_positive_int(term_num, "term_num")
        year = require_positive_int(year, "year")
        present = require_bool(present, "present")
        target_date = to_calendar_date(att_date, "date")

        student = self._students.get_by_student_number(student_number)
        if not student:
            logger.warning("Cannot mark attendance: student %s not found", student_number)
            raise NotFoundError("Student not found")

        key = AttendanceKey(
            student_id=student.student_id,
            class_name=class_name,
            term_num=term_num,
            year=year,
            date=target_date,
        )
        record = self._attendance.upsert(key, present=present)
        logger.debug(
            "Marked %s %s in %s T%d/%d on %s",
            student_number,
            "present" if present else "absent",
            class_name,
            term_num,
            year,
            target_date,
        )
        return record

    def get_class_attendance(
        self,
        class_name: str,
        term_num: int,
        year: int,
        att_date: Optional[DateLike] = None,
    ) -> list[RosterAttendanceEntry]:
        class_name = require_non_empty(class_name, "class_name")
        term_num = require_positive_int(term_num, "term_num")
        year = require_positive_int(year, "year")
        target_date = optional_calendar_date(att_date, "date") or today_local()

        enrolments = self._roster.list_enrolled(class_name=class_name, term_num=term_num, year=year)
        if not enrolments:
            logger.warning("No roster for %s term %d/%d", class_name, term_num, year)
            raise NotFoundError("No students found for the specified class and term")

        records = self._attendance.list_for_class(
            class_name=class_name,
            term_num=term_num,
            year=year,
            start_date=target_date,
            end_date=target_date,
        )
        by_student = {r.student.student_number: r for r in records if r.student is not None}

        entries: list[RosterAttendanceEntry] = []
        for enrolment in enrolments:
            student = enrolment.student
            if student is None:
                continue
            existing = by_student.get(student.student_number)
            entries.append(
                RosterAttendanceEntry(
                    attendance_id=existing.attendance_id if existing else None,
                    student_number=student.student_number,
                    surname=student.surname,
                    name=student.name,
                    gender=student.gender,
                    present=existing.present if existing else False,
                    date=target_date,
                    class_name=class_name,
                    term_num=term_num,
                    year=year,
                )
            )
        return entries

    def get_student_attendance(
        self,
        student_number: str,
        term_num: int,
        year: int,
        start_date: Optional[DateLike] = None,
        end_date: Optional[DateLike] = None,
    ) -> list[StudentAttendanceEntry]:
        student_number = require_non_empty(student_number, "student_number")
        term_num = require_positive_int(term_num, "term_num")
        year = require_positive_int(year, "year")
        start = optional_calendar_date(start_date, "start_date")
        end = optional_calendar_date(end_date, "end_date")
        check_date_range(start, end)

        records = self._attendance.list_for_student(
            student_number=student_number,
            term_num=term_num,
            year=year,
            start_date=start,
            end_date=end,
        )
        rows = [r for r in records if r.student is not None]
        rows.sort(key=lambda r: r.date, reverse=True)
        return [
            StudentAttendanceEntry(
                attendance_id=r.attendance_id,
                student_number=r.student.student_number,
                surname=r.student.surname,
                name=r.student.name,
                gender=r.student.gender,
                present=r.present,
                date=r.date,
                class_name=r.class_name,
                term_num=r.term_num,
                year=r.year,
            )
            for r in rows
        ]
