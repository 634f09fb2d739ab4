from __future__ import annotations

from datetime import date

import pytest

from school_attendance.core.exceptions import ValidationError


@pytest.fixture
def marked(attendance_service):
    for day, present in [("2024-03-04", True), ("2024-03-05", False), ("2024-03-11", True)]:
        attendance_service.mark_attendance(
            student_number="S1", class_name="5A", term_num=1, year=2024, present=present, att_date=day
        )
    attendance_service.mark_attendance(
        student_number="S1", class_name="5A", term_num=2, year=2024, present=True, att_date="2024-06-03"
    )
    return attendance_service


def test_history_is_newest_first_and_scoped_to_term(marked):
    rows = marked.get_student_attendance("S1", 1, 2024)

    assert [r.date for r in rows] == [date(2024, 3, 11), date(2024, 3, 5), date(2024, 3, 4)]
    assert [r.present for r in rows] == [True, False, True]
    assert all(r.term_num == 1 and r.class_name == "5A" for r in rows)


def test_history_bounds_are_inclusive(marked):
    rows = marked.get_student_attendance("S1", 1, 2024, "2024-03-05", "2024-03-11")

    assert [r.date for r in rows] == [date(2024, 3, 11), date(2024, 3, 5)]


def test_history_of_unmarked_student_is_empty(marked):
    assert marked.get_student_attendance("S2", 1, 2024) == []


def test_inverted_range_is_rejected(marked):
    with pytest.raises(ValidationError):
        marked.get_student_attendance("S1", 1, 2024, "2024-03-11", "2024-03-04")
