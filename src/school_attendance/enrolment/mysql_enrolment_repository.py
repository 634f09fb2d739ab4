from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Enrollment, Student
from .repository import RosterProvider, StudentRepository


def _student_from_row(r: Dict[str, Any]) -> Optional[Student]:
    if r.get("student_id") is None or r.get("student_number") is None:
        return None
    return Student(
        student_id=int(r["student_id"]),
        student_number=str(r["student_number"]),
        surname=r.get("surname") or "",
        name=r.get("name") or "",
        gender=r.get("gender"),
    )


class MySQLStudentRepository(StudentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_student_number(self, student_number: str) -> Optional[Student]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT student_id, student_number, surname, name, gender
                FROM students
                WHERE student_number=%s
                """,
                (student_number,),
            )
            r = fetchone(cur)
            return _student_from_row(r) if r else None


class MySQLRosterProvider(RosterProvider):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_enrolled(self, *, class_name: str, term_num: int, year: int) -> Sequence[Enrollment]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT
                    e.enrol_id, e.class_name, e.term_num, e.year,
                    s.student_id, s.student_number, s.surname, s.name, s.gender
                FROM enrolments e
                LEFT JOIN students s ON s.student_id = e.student_id
                WHERE e.class_name=%s AND e.term_num=%s AND e.year=%s
                ORDER BY s.surname ASC, s.name ASC, e.enrol_id ASC
                """,
                (class_name, int(term_num), int(year)),
            )
            rows = fetchall(cur)
            return [
                Enrollment(
                    enrol_id=int(r["enrol_id"]),
                    class_name=r["class_name"],
                    term_num=int(r["term_num"]),
                    year=int(r["year"]),
                    student=_student_from_row(r),
                )
                for r in rows
            ]
