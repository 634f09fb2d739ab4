"""Role policy: which roles may perform which operation.

One table decides every permission; services stay free of role checks.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional, Union

from ..core.enums import Operation, Role
from ..core.exceptions import AuthorizationError

_STAFF_READERS = frozenset({Role.ADMIN, Role.DIRECTOR, Role.AUDITOR, Role.HOD, Role.TEACHER})

POLICY: Mapping[Operation, frozenset[Role]] = {
    Operation.MARK_ATTENDANCE: frozenset({Role.ADMIN, Role.HOD, Role.TEACHER}),
    Operation.VIEW_CLASS_ATTENDANCE: _STAFF_READERS | {Role.RECEPTION},
    Operation.VIEW_ATTENDANCE_REPORT: _STAFF_READERS,
    Operation.VIEW_ATTENDANCE_SUMMARY: _STAFF_READERS,
    Operation.VIEW_STUDENT_ATTENDANCE: frozenset(Role),
}


@dataclass(frozen=True)
class Actor:
    """Authenticated caller supplied by the request layer."""

    actor_id: Optional[int]
    role: Union[Role, str, None]


@dataclass(frozen=True)
class Decision:
    allowed: bool
    reason: str = ""


def normalize_role(role: Union[Role, str, None]) -> Optional[Role]:
    if isinstance(role, Role):
        return role
    if not role:
        return None
    try:
        return Role(str(role).strip().lower())
    except ValueError:
        return None


def check_permission(actor: Optional[Actor], operation: Operation) -> Decision:
    if actor is None:
        return Decision(False, "Not authenticated")

    role = normalize_role(actor.role)
    if role is None:
        return Decision(False, f"Invalid user role: {actor.role!r}")

    allowed_roles = POLICY.get(operation, frozenset())
    if role not in allowed_roles:
        return Decision(False, f"Access denied for role {role.value} on {operation.value}")
    return Decision(True)


def require_permission(actor: Optional[Actor], operation: Operation) -> Actor:
    decision = check_permission(actor, operation)
    if not decision.allowed:
        raise AuthorizationError(decision.reason)
    return actor
