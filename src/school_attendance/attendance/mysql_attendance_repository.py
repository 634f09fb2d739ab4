from __future__ import annotations

from datetime import date
from typing import Any, Dict, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import date_range_clauses, db_cursor, fetchall, fetchone, normalize_mysql_date
from ..enrolment.model import StudentSummary
from .model import AttendanceKey, AttendanceRecord
from .repository import AttendanceRepository

_SELECT = """
    SELECT
        a.attendance_id, a.student_id, a.class_name, a.term_num, a.year, a.att_date, a.present,
        s.student_number, s.surname, s.name, s.gender
    FROM attendance a
    LEFT JOIN students s ON s.student_id = a.student_id
"""

_KEY_WHERE = "a.student_id=%s AND a.class_name=%s AND a.term_num=%s AND a.year=%s AND a.att_date=%s"


def _record_from_row(r: Dict[str, Any]) -> AttendanceRecord:
    student = None
    if r.get("student_number") is not None:
        student = StudentSummary(
            student_number=str(r["student_number"]),
            surname=r.get("surname") or "",
            name=r.get("name") or "",
            gender=r.get("gender"),
        )
    return AttendanceRecord(
        attendance_id=int(r["attendance_id"]),
        student_id=int(r["student_id"]),
        class_name=r["class_name"],
        term_num=int(r["term_num"]),
        year=int(r["year"]),
        date=normalize_mysql_date(r["att_date"]),
        present=bool(r["present"]),
        student=student,
    )


def _key_params(key: AttendanceKey) -> tuple:
    return (int(key.student_id), key.class_name, int(key.term_num), int(key.year), key.date)


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def upsert(self, key: AttendanceKey, *, present: bool) -> AttendanceRecord:
        # Atomic per business key through uq_attendance_business_key.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance(student_id, class_name, term_num, year, att_date, present)
                VALUES(%s,%s,%s,%s,%s,%s) AS new
                ON DUPLICATE KEY UPDATE present=new.present
                """,
                _key_params(key) + (1 if present else 0,),
            )
            cur.execute(f"{_SELECT} WHERE {_KEY_WHERE}", _key_params(key))
            r = fetchone(cur)
            if not r:
                raise RuntimeError(f"Attendance row missing after upsert: {key!r}")
            return _record_from_row(r)

    def list_for_class(
        self,
        *,
        class_name: str,
        term_num: int,
        year: int,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> Sequence[AttendanceRecord]:
        clauses = ["a.class_name=%s", "a.term_num=%s", "a.year=%s"]
        params: list[object] = [class_name, int(term_num), int(year)]

        range_clauses, range_params = date_range_clauses("a.att_date", start_date, end_date)
        clauses.extend(range_clauses)
        params.extend(range_params)

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"{_SELECT} WHERE {where} ORDER BY a.att_date ASC, s.surname ASC",
                tuple(params),
            )
            return [_record_from_row(r) for r in fetchall(cur)]

    def list_for_student(
        self,
        *,
        student_number: str,
        term_num: int,
        year: int,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> Sequence[AttendanceRecord]:
        clauses = ["s.student_number=%s", "a.term_num=%s", "a.year=%s"]
        params: list[object] = [student_number, int(term_num), int(year)]

        range_clauses, range_params = date_range_clauses("a.att_date", start_date, end_date)
        clauses.extend(range_clauses)
        params.extend(range_params)

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"{_SELECT} WHERE {where} ORDER BY a.att_date DESC, a.class_name ASC",
                tuple(params),
            )
            return [_record_from_row(r) for r in fetchall(cur)]
