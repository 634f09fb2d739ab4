from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import AttendanceKey, AttendanceRecord


class AttendanceRepository(Protocol):
    """Attendance store port.

    Implementations must hold one record per business key; ``upsert`` is the
    only write path and must be atomic with respect to that key.
    """

    def upsert(self, key: AttendanceKey, *, present: bool) -> AttendanceRecord:
        """Create the record for ``key`` or overwrite its ``present`` flag."""

        raise NotImplementedError

    def list_for_class(
        self,
        *,
        class_name: str,
        term_num: int,
        year: int,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> Sequence[AttendanceRecord]:
        """Records of a class/term/year, ascending by date; bounds are inclusive."""

        raise NotImplementedError

    def list_for_student(
        self,
        *,
        student_number: str,
        term_num: int,
        year: int,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> Sequence[AttendanceRecord]:
        """Records of one student for a term, newest first; bounds are inclusive."""

        raise NotImplementedError
