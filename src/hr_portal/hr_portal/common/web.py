from __future__ import annotations

import logging
from functools import wraps
from typing import Any, Callable, Tuple

from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException

from ..container import Container
from ..core.enums import Collection
from ..core.exceptions import (
    AuthorizationError,
    AuthServiceUnavailable,
    DomainError,
    InvalidCredentials,
    NotFoundError,
    PartialCascadeFailure,
    TransportError,
    ValidationError,
)

logger = logging.getLogger(__name__)


def route_id(container: Container, collection: Collection, value: str) -> Any:
    """Route ids arrive as text; use the id the snapshot holds for that record."""
    return container.snapshot.resolve_id(collection, value)


def form_data() -> dict:
    return dict(request.get_json(silent=True) or request.form or {})


def error_response(message: str, status: int, **extra: Any) -> Tuple[Any, int]:
    return jsonify({"error": message, **extra}), status


def guards(container: Container) -> Tuple[Callable, Callable]:
    """Build ``login_required`` / ``admin_required`` bound to the container's session manager."""
    manager = container.session_manager

    def login_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            if not manager.is_authenticated:
                return error_response("Please log in to continue", 401)
            return view(*args, **kwargs)

        return wrapper

    def admin_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            session = manager.current_session
            if session is None:
                return error_response("Please log in to continue", 401)
            if not session.is_admin:
                return error_response("You do not have permission", 403)
            return view(*args, **kwargs)

        return wrapper

    return login_required, admin_required


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(ValidationError)
    def _validation(e):
        return error_response(str(e), 400)

    @app.errorhandler(InvalidCredentials)
    def _invalid_credentials(e):
        return error_response(str(e), 401)

    @app.errorhandler(AuthorizationError)
    def _unauthorized(e):
        return error_response(str(e), 401)

    @app.errorhandler(AuthServiceUnavailable)
    def _auth_unavailable(e):
        return error_response(str(e), 503)

    @app.errorhandler(NotFoundError)
    def _not_found(e):
        return error_response(str(e), 404)

    @app.errorhandler(TransportError)
    def _transport(e):
        return error_response(f"Data server error: {e}", 502)

    @app.errorhandler(PartialCascadeFailure)
    def _partial_cascade(e):
        failed = [{"collection": c.value, "id": rid, "error": str(err)} for c, rid, err in e.failures]
        return error_response(str(e), 500, failed=failed)

    @app.errorhandler(DomainError)
    def _domain(e):
        return error_response(str(e), 400)

    @app.errorhandler(Exception)
    def _unexpected(e):
        if isinstance(e, HTTPException):
            return e
        logger.exception("Unhandled error on %s %s", request.method, request.path)
        if app.config.get("DEBUG"):
            return error_response(f"Internal error: {e}", 500)
        return error_response("Internal error", 500)
