from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import now_utc
from ..common.validators import require_non_empty
from ..core.enums import Role
from ..core.exceptions import NotFoundError, ValidationError
from .identity import SessionIdentity
from .model import User
from .repository import UserRepository

logger = logging.getLogger(__name__)


class UserService:
    """Use case: register profiles and resolve who is acting."""

    def __init__(self, users: UserRepository):
        self._users = users

    def register_profile(
        self,
        *,
        user_id: str,
        display_name: str,
        role: Role | str,
        email: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> User:
        user_id = require_non_empty(user_id, "User id")
        display_name = require_non_empty(display_name, "Display name")
        try:
            role = Role(role)
        except ValueError:
            raise ValidationError("Role must be 'student' or 'teacher'")

        existing = self._users.get_by_id(user_id)
        if existing and existing.role != role:
            raise ValidationError("Role cannot be changed after registration")

        user = User(
            user_id=user_id,
            display_name=display_name,
            role=role,
            email=(email or "").strip() or None,
            created_at=existing.created_at if existing else (now or now_utc()).isoformat(),
        )
        self._users.save(user)
        logger.info("profile registered", extra={"user_id": user_id, "role": role.value})
        return user

    def get_profile(self, user_id: str) -> User:
        user = self._users.get_by_id(user_id)
        if not user:
            raise NotFoundError("User profile not found")
        return user

    def resolve_role(self, user_id: str) -> Optional[Role]:
        """Role used to route a user to the student or teacher dashboard.

        ``None`` means no profile exists; callers fall back to the landing view.
        """

        user = self._users.get_by_id(user_id)
        return user.role if user else None

    def actor_for(self, identity: SessionIdentity) -> Optional[User]:
        """Profile of the logged-in user, preferring the session display name."""

        user = self._users.get_by_id(identity.user_id)
        if not user:
            return None
        if identity.display_name and identity.display_name != user.display_name:
            return User(
                user_id=user.user_id,
                display_name=identity.display_name,
                role=user.role,
                email=user.email,
                created_at=user.created_at,
            )
        return user
