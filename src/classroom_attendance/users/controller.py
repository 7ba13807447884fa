from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..common.web import json_error
from ..container import Container
from ..core.exceptions import StoreIOError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/me/profile", methods=["POST"], endpoint="register_profile")
    def register_profile():
        identity = container.identity.current_user()
        if identity is None:
            return json_error("Please log in to continue", 401)

        data = request.get_json(silent=True) or {}
        user = container.user_service.register_profile(
            user_id=identity.user_id,
            display_name=data.get("display_name") or identity.display_name,
            role=data.get("role", ""),
            email=data.get("email"),
        )
        return jsonify(
            {
                "success": True,
                "user_id": user.user_id,
                "display_name": user.display_name,
                "role": user.role.value,
            }
        ), 201

    @app.route("/me", methods=["GET"], endpoint="me")
    def me():
        identity = container.identity.current_user()
        if identity is None:
            return jsonify({"user_id": None, "role": None, "dashboard": "landing"})

        try:
            role = container.user_service.resolve_role(identity.user_id)
        except StoreIOError:
            # Failed role lookup falls back to the landing view.
            logger.warning("role lookup failed", extra={"user_id": identity.user_id})
            role = None

        return jsonify(
            {
                "user_id": identity.user_id,
                "display_name": identity.display_name,
                "role": role.value if role else None,
                "dashboard": role.value if role else "landing",
            }
        )
