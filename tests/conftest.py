from __future__ import annotations

import pytest

from school_attendance.container import build_services
from tests.fakes import InMemoryAttendance, InMemoryRoster, InMemoryStudents, make_student


@pytest.fixture
def students():
    return [
        make_student(1, "S1", "Banda", "Alice"),
        make_student(2, "S2", "Chirwa", "Brian", gender="M"),
        make_student(3, "S3", "Dube", "Chipo"),
    ]


@pytest.fixture
def students_repo(students):
    return InMemoryStudents.of(*students)


@pytest.fixture
def roster(students):
    r = InMemoryRoster()
    r.enrol("5A", 1, 2024, *students)
    return r


@pytest.fixture
def attendance_repo(students_repo):
    return InMemoryAttendance(students_repo)


@pytest.fixture
def container(attendance_repo, students_repo, roster):
    return build_services(attendance_repo=attendance_repo, students_repo=students_repo, roster=roster)


@pytest.fixture
def attendance_service(container):
    return container.attendance_service


@pytest.fixture
def report_service(container):
    return container.report_service
