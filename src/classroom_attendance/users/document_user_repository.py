from __future__ import annotations

from typing import Optional

from ..core.constants import USERS
from ..core.enums import Role
from ..store.base import DocumentStore
from .model import User
from .repository import UserRepository


class DocumentUserRepository(UserRepository):
    def __init__(self, store: DocumentStore):
        self._store = store

    def get_by_id(self, user_id: str) -> Optional[User]:
        fields = self._store.get_document(USERS, user_id)
        if not fields:
            return None
        return User(
            user_id=str(user_id),
            display_name=str(fields.get("name") or ""),
            role=Role(fields["role"]),
            email=fields.get("email"),
            created_at=fields.get("createdAt"),
        )

    def save(self, user: User) -> None:
        self._store.put_document(
            USERS,
            user.user_id,
            {
                "name": user.display_name,
                "email": user.email,
                "role": user.role.value,
                "createdAt": user.created_at,
            },
        )
