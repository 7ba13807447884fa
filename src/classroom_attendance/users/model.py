from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Domain entity: a registered profile stored at ``users/{uid}``.

    The role is fixed at registration; there is no role-change path.
    """

    user_id: str
    display_name: str
    role: Role
    email: Optional[str] = None
    created_at: Optional[str] = None

    @property
    def is_teacher(self) -> bool:
        return self.role == Role.TEACHER

    @property
    def is_student(self) -> bool:
        return self.role == Role.STUDENT
