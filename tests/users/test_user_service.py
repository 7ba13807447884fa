from __future__ import annotations

import pytest

from classroom_attendance.core.enums import Role
from classroom_attendance.core.exceptions import NotFoundError, ValidationError
from classroom_attendance.users.identity import SessionIdentity


def test_register_profile_persists_role(container):
    user = container.user_service.register_profile(user_id="S1", display_name=" Ana ", role="student")

    assert user.display_name == "Ana"
    assert container.user_service.get_profile("S1").role == Role.STUDENT
    assert container.user_service.resolve_role("S1") == Role.STUDENT


def test_role_cannot_change_after_registration(container, student1):
    with pytest.raises(ValidationError):
        container.user_service.register_profile(user_id="S1", display_name="Ana", role=Role.TEACHER)


def test_unknown_role_is_rejected(container):
    with pytest.raises(ValidationError):
        container.user_service.register_profile(user_id="X", display_name="X", role="admin")


def test_missing_profile(container):
    assert container.user_service.resolve_role("nobody") is None
    with pytest.raises(NotFoundError):
        container.user_service.get_profile("nobody")


def test_actor_prefers_session_display_name(container, student1):
    actor = container.user_service.actor_for(SessionIdentity(user_id="S1", display_name="Ana B."))

    assert actor.display_name == "Ana B."
    assert actor.role == Role.STUDENT
    assert container.user_service.actor_for(SessionIdentity(user_id="ghost", display_name="")) is None


def test_display_name_must_be_text(container):
    with pytest.raises(ValidationError):
        container.user_service.register_profile(user_id="U1", display_name=5, role=Role.STUDENT)

    assert container.user_service.resolve_role("U1") is None
