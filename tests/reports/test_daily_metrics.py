from __future__ import annotations

from datetime import date

import pytest

from school_attendance.attendance.model import AttendanceRecord
from school_attendance.enrolment.model import StudentSummary
from school_attendance.reports.metrics import attendance_rate, build_daily_metrics, round2


def _rec(rid: int, number: str, day: date, present: bool, *, loaded: bool = True) -> AttendanceRecord:
    return AttendanceRecord(
        attendance_id=rid,
        student_id=rid,
        class_name="5A",
        term_num=1,
        year=2024,
        date=day,
        present=present,
        student=StudentSummary(number, f"Surname {number}", f"Name {number}", "F") if loaded else None,
    )


def test_groups_by_date_and_sorts_ascending():
    records = [
        _rec(1, "S1", date(2024, 3, 5), True),
        _rec(2, "S2", date(2024, 3, 4), True),
        _rec(3, "S3", date(2024, 3, 4), False),
    ]

    daily = build_daily_metrics(records, 3)

    assert [d.date for d in daily] == [date(2024, 3, 4), date(2024, 3, 5)]
    first = daily[0]
    assert (first.possible_attendance, first.actual_attendance, first.absent_count) == (3, 1, 1)
    assert first.attendance_rate == 33.33
    assert [s.student_number for s in first.absent_students] == ["S3"]


def test_records_without_student_are_dropped():
    records = [
        _rec(1, "S1", date(2024, 3, 4), True),
        _rec(2, "S2", date(2024, 3, 4), False, loaded=False),
    ]

    (day,) = build_daily_metrics(records, 2)

    assert day.actual_attendance == 1
    assert day.absent_count == 0


def test_student_who_left_the_class_still_counts():
    records = [
        _rec(1, "S1", date(2024, 3, 4), True),
        _rec(9, "S9", date(2024, 3, 4), True),
        _rec(10, "S9", date(2024, 3, 5), False),
    ]

    daily = build_daily_metrics(records, 3)

    assert [(d.date, d.actual_attendance, d.absent_count) for d in daily] == [
        (date(2024, 3, 4), 2, 0),
        (date(2024, 3, 5), 0, 1),
    ]
    assert [d.attendance_rate for d in daily] == [66.67, 0.0]
    assert [s.student_number for s in daily[1].absent_students] == ["S9"]


def test_zero_students_gives_zero_rate():
    (day,) = build_daily_metrics([_rec(1, "S1", date(2024, 3, 4), True)], 0)

    assert day.attendance_rate == 0


def test_empty_input_gives_empty_output():
    assert build_daily_metrics([], 30) == []


@pytest.mark.parametrize(
    "actual,possible,expected",
    [(2, 3, 66.67), (1, 3, 33.33), (1, 8, 12.5), (0, 5, 0.0), (5, 5, 100.0), (3, 0, 0.0)],
)
def test_rate_is_bounded_percentage(actual, possible, expected):
    rate = attendance_rate(actual, possible)

    assert rate == expected
    assert 0 <= rate <= 100


def test_round2_rounds_half_up():
    assert round2(0.125) == 0.13
    assert round2(2.675) == 2.68
