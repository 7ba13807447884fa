from __future__ import annotations

import logging
from functools import wraps
from typing import Optional

from flask import Flask, g, jsonify

from ..core.enums import Role
from ..core.exceptions import AuthorizationError, NotFoundError, StoreIOError, ValidationError

logger = logging.getLogger(__name__)


def json_error(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def register_error_handlers(app: Flask) -> None:
    """Map domain errors to JSON responses; each request fails on its own."""

    @app.errorhandler(ValidationError)
    def _validation(e: ValidationError):
        return json_error(str(e), 400)

    @app.errorhandler(AuthorizationError)
    def _forbidden(e: AuthorizationError):
        return json_error(str(e), 403)

    @app.errorhandler(NotFoundError)
    def _not_found(e: NotFoundError):
        return json_error(str(e), 404)

    @app.errorhandler(StoreIOError)
    def _store_down(e: StoreIOError):
        logger.warning("request failed on store error", extra={"error": str(e)})
        return json_error("Storage is unavailable, please try again", 503)


def actor_required(container, role: Optional[Role] = None):
    """Resolve the logged-in profile into ``g.actor`` and enforce its role.

    The acting user is then passed explicitly to every service call.
    """

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            identity = container.identity.current_user()
            if identity is None:
                return json_error("Please log in to continue", 401)

            actor = container.user_service.actor_for(identity)
            if actor is None:
                return json_error("Profile not registered", 403)
            if role is not None and actor.role != role:
                return json_error(f"Only {role.value}s can access this page", 403)

            g.actor = actor
            return view(*args, **kwargs)

        return wrapper

    return decorator
