from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class StudentSummary:
    """Minimal student identity used in rosters and absence lists."""

    student_number: str
    surname: str
    name: str
    gender: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "student_number": self.student_number,
            "surname": self.surname,
            "name": self.name,
            "gender": self.gender,
        }


@dataclass(frozen=True)
class Student:
    student_id: int
    student_number: str
    surname: str
    name: str
    gender: Optional[str] = None

    def summary(self) -> StudentSummary:
        return StudentSummary(
            student_number=self.student_number,
            surname=self.surname,
            name=self.name,
            gender=self.gender,
        )


@dataclass(frozen=True)
class Enrollment:
    """A student's membership in a class for one term of one year.

    ``student`` is None when the referenced student row cannot be loaded.
    """

    enrol_id: int
    class_name: str
    term_num: int
    year: int
    student: Optional[Student]
