from __future__ import annotations

import pytest

from school_attendance.auth.policy import POLICY, Actor, check_permission, require_permission
from school_attendance.core.enums import Operation, Role
from school_attendance.core.exceptions import AuthorizationError


@pytest.mark.parametrize("role", ["admin", "hod", "teacher", " Teacher "])
def test_staff_can_mark(role):
    assert check_permission(Actor(1, role), Operation.MARK_ATTENDANCE).allowed


@pytest.mark.parametrize("role", [Role.PARENT, Role.STUDENT, Role.RECEPTION, Role.AUDITOR])
def test_others_cannot_mark(role):
    decision = check_permission(Actor(1, role), Operation.MARK_ATTENDANCE)

    assert not decision.allowed
    assert role.value in decision.reason


def test_reception_sees_class_view_but_not_reports():
    actor = Actor(7, Role.RECEPTION)

    assert check_permission(actor, Operation.VIEW_CLASS_ATTENDANCE).allowed
    assert not check_permission(actor, Operation.VIEW_ATTENDANCE_REPORT).allowed


def test_every_role_may_view_student_history():
    for role in Role:
        assert check_permission(Actor(1, role), Operation.VIEW_STUDENT_ATTENDANCE).allowed


@pytest.mark.parametrize("role", [None, "", "janitor"])
def test_missing_or_unknown_role_is_denied(role):
    assert not check_permission(Actor(1, role), Operation.VIEW_CLASS_ATTENDANCE).allowed


def test_anonymous_is_denied():
    assert not check_permission(None, Operation.VIEW_STUDENT_ATTENDANCE).allowed


def test_every_operation_has_a_policy_entry():
    assert set(POLICY) == set(Operation)


def test_require_permission_raises_on_denial():
    actor = Actor(3, "teacher")

    assert require_permission(actor, Operation.MARK_ATTENDANCE) is actor
    with pytest.raises(AuthorizationError):
        require_permission(Actor(4, "parent"), Operation.MARK_ATTENDANCE)
