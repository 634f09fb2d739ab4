"""Shared helpers for the thin Flask controllers."""
from __future__ import annotations

import logging
from functools import wraps
from typing import Any, Optional

from flask import jsonify, request, session

from ..auth.policy import Actor, check_permission
from ..core.enums import Operation
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)


def ok(data: Any, status: int = 200):
    return jsonify({"success": True, "data": data}), status


def fail(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def current_actor() -> Optional[Actor]:
    """Actor stored in the session by the login flow (outside this service)."""
    if "user_id" not in session:
        return None
    return Actor(actor_id=session.get("user_id"), role=session.get("role"))


def permission_required(operation: Operation):
    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            actor = current_actor()
            if actor is None:
                return fail("Please log in to continue", 401)

            decision = check_permission(actor, operation)
            if not decision.allowed:
                logger.info("Denied %s for user %s: %s", operation.value, actor.actor_id, decision.reason)
                return fail(decision.reason, 403)

            return view(*args, **kwargs)

        return wrapper

    return decorator


def json_errors(view):
    """Map domain errors to JSON responses; anything else is a 500."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except ValidationError as e:
            return fail(str(e), 400)
        except AuthorizationError as e:
            return fail(str(e), 403)
        except NotFoundError as e:
            return fail(str(e), 404)
        except Exception:
            logger.exception("Unhandled error in %s %s", request.method, request.path)
            return fail("Internal server error", 500)

    return wrapper


def arg(name: str) -> Optional[str]:
    value = request.args.get(name)
    if value is None or not value.strip():
        return None
    return value.strip()
