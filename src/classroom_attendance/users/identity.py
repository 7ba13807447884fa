from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol

from flask import session


@dataclass(frozen=True)
class SessionIdentity:
    """Who is logged in, as reported by the external identity layer."""

    user_id: str
    display_name: str


class IdentityProvider(Protocol):
    def current_user(self) -> Optional[SessionIdentity]:
        raise NotImplementedError


class FlaskSessionIdentity(IdentityProvider):
    """Reads the identity the login layer stored into the Flask session.

    The value is trusted as-is; it is never re-validated here.
    """

    def current_user(self) -> Optional[SessionIdentity]:
        user_id = session.get("user_id")
        if not user_id:
            return None
        return SessionIdentity(user_id=str(user_id), display_name=str(session.get("name") or ""))
