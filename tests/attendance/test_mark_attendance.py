from __future__ import annotations

import threading
from datetime import date, datetime

import pytest

from school_attendance.attendance.model import AttendanceKey
from school_attendance.core.exceptions import NotFoundError, ValidationError


def _mark(svc, *, present=True, att_date="2024-03-04", student_number="S1"):
    return svc.mark_attendance(
        student_number=student_number,
        class_name="5A",
        term_num=1,
        year=2024,
        present=present,
        att_date=att_date,
    )


def test_marking_twice_keeps_one_record(attendance_service, attendance_repo):
    first = _mark(attendance_service, present=True)
    second = _mark(attendance_service, present=True)

    assert len(attendance_repo.all()) == 1
    assert first.attendance_id == second.attendance_id
    assert second.present is True


def test_remarking_mutates_the_existing_record(attendance_service, attendance_repo):
    first = _mark(attendance_service, present=True)
    _mark(attendance_service, present=True)
    third = _mark(attendance_service, present=False)

    records = attendance_repo.all()
    assert len(records) == 1
    assert third.attendance_id == first.attendance_id
    assert records[0].present is False


def test_time_of_day_is_discarded(attendance_service, attendance_repo):
    morning = _mark(attendance_service, att_date=datetime(2024, 3, 4, 8, 15))
    evening = _mark(attendance_service, present=False, att_date="2024-03-04T17:45:00")

    assert morning.date == date(2024, 3, 4)
    assert evening.attendance_id == morning.attendance_id
    assert len(attendance_repo.all()) == 1


def test_distinct_dates_create_distinct_records(attendance_service, attendance_repo):
    _mark(attendance_service, att_date="2024-03-04")
    _mark(attendance_service, att_date="2024-03-05")

    assert sorted(r.date for r in attendance_repo.all()) == [date(2024, 3, 4), date(2024, 3, 5)]


def test_record_is_stored_under_business_key(attendance_service, attendance_repo):
    rec = _mark(attendance_service, att_date=date(2024, 3, 4))

    key = AttendanceKey(student_id=1, class_name="5A", term_num=1, year=2024, date=date(2024, 3, 4))
    assert attendance_repo.all() == [rec]
    assert rec.key == key
    assert rec.student.student_number == "S1"


def test_unknown_student_raises_not_found(attendance_service, attendance_repo):
    with pytest.raises(NotFoundError):
        _mark(attendance_service, student_number="NOPE")

    assert attendance_repo.all() == []


@pytest.mark.parametrize("bad_date", ["2024-13-01", "not-a-date", "", None, 20240304])
def test_malformed_date_is_rejected(attendance_service, attendance_repo, bad_date):
    with pytest.raises(ValidationError):
        _mark(attendance_service, att_date=bad_date)

    assert attendance_repo.upserts == 0


def test_present_accepts_form_strings(attendance_service):
    assert _mark(attendance_service, present="false").present is False
    assert _mark(attendance_service, present="true").present is True

    with pytest.raises(ValidationError):
        _mark(attendance_service, present="maybe")


def test_concurrent_markings_of_one_key_leave_one_record(attendance_service, attendance_repo):
    threads = [threading.Thread(target=_mark, args=(attendance_service,)) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(attendance_repo.all()) == 1
    assert attendance_repo.upserts == 8
