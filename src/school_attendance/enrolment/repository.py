from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Enrollment, Student


class StudentRepository(Protocol):
    def get_by_student_number(self, student_number: str) -> Optional[Student]:
        raise NotImplementedError


class RosterProvider(Protocol):
    """Read-only access to class enrolment.

    Note: the roster is authoritative for which students a class has; this
    system never mutates it.
    """

    def list_enrolled(self, *, class_name: str, term_num: int, year: int) -> Sequence[Enrollment]:
        raise NotImplementedError
