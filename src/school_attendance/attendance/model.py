from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..common.datetime_utils import iso
from ..enrolment.model import StudentSummary


@dataclass(frozen=True)
class AttendanceKey:
    """Business key: at most one record exists per key."""

    student_id: int
    class_name: str
    term_num: int
    year: int
    date: date


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one student's presence in one class on one calendar date."""

    attendance_id: int
    student_id: int
    class_name: str
    term_num: int
    year: int
    date: date
    present: bool
    student: Optional[StudentSummary] = None

    @property
    def key(self) -> AttendanceKey:
        return AttendanceKey(
            student_id=self.student_id,
            class_name=self.class_name,
            term_num=self.term_num,
            year=self.year,
            date=self.date,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.attendance_id,
            "student": self.student.to_dict() if self.student else None,
            "class_name": self.class_name,
            "term_num": self.term_num,
            "year": self.year,
            "date": iso(self.date),
            "present": self.present,
        }


@dataclass(frozen=True)
class RosterAttendanceEntry:
    """Read-model: one enrolled student's status for a queried date.

    ``attendance_id`` is None when the student has not been marked yet.
    """

    attendance_id: Optional[int]
    student_number: str
    surname: str
    name: str
    gender: Optional[str]
    present: bool
    date: date
    class_name: str
    term_num: int
    year: int

    def to_dict(self) -> dict:
        return {
            "id": self.attendance_id,
            "student_number": self.student_number,
            "surname": self.surname,
            "name": self.name,
            "gender": self.gender,
            "present": self.present,
            "date": iso(self.date),
            "class_name": self.class_name,
            "term_num": self.term_num,
            "year": self.year,
        }


@dataclass(frozen=True)
class StudentAttendanceEntry:
    """Read-model: one row of a student's own attendance history."""

    attendance_id: int
    student_number: str
    surname: str
    name: str
    gender: Optional[str]
    present: bool
    date: date
    class_name: str
    term_num: int
    year: int

    def to_dict(self) -> dict:
        return {
            "id": self.attendance_id,
            "student_number": self.student_number,
            "surname": self.surname,
            "name": self.name,
            "gender": self.gender,
            "present": self.present,
            "date": iso(self.date),
            "class_name": self.class_name,
            "term_num": self.term_num,
            "year": self.year,
        }
