"""Session-based access control and JSON error mapping for the Flask layer."""
from __future__ import annotations

import logging
from functools import wraps

from flask import Flask, jsonify, request, session
from werkzeug.exceptions import HTTPException

from ..core.enums import Role
from ..core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    DomainError,
    NotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)


def json_error(message: str, status: int):
    return jsonify({"message": message}), status


def json_body() -> dict:
    """Request JSON as a dict; a missing or unparsable body is empty, any other shape is a 400."""

    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def current_user_id() -> int:
    return int(session["user_id"])


def current_role() -> Role:
    return Role(session.get("role"))


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            return json_error("Unauthorized", 401)
        return view(*args, **kwargs)

    return wrapper


def roles_required(*roles: Role):
    allowed = {r.value for r in roles}

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            if "user_id" not in session:
                return json_error("Unauthorized", 401)
            if session.get("role") not in allowed:
                return json_error("Forbidden", 403)
            return view(*args, **kwargs)

        return wrapper

    return decorator


staff_required = roles_required(Role.ADMIN, Role.TRAINER)
admin_required = roles_required(Role.ADMIN)
member_required = roles_required(Role.MEMBER)


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(ValidationError)
    def _validation(e: ValidationError):
        return json_error(str(e), 400)

    @app.errorhandler(NotFoundError)
    def _not_found(e: NotFoundError):
        return json_error(str(e), 404)

    @app.errorhandler(AuthenticationError)
    def _unauthenticated(e: AuthenticationError):
        return json_error(str(e), 401)

    @app.errorhandler(AuthorizationError)
    def _forbidden(e: AuthorizationError):
        return json_error(str(e), 403)

    @app.errorhandler(DomainError)
    def _domain(e: DomainError):
        return json_error(str(e), 400)

    @app.errorhandler(Exception)
    def _unexpected(e: Exception):
        # Let Flask render its own HTTP errors (404 routes, 405, ...).
        if isinstance(e, HTTPException):
            return e
        logger.exception("Unhandled error")
        return json_error("Internal server error", 500)
