from __future__ import annotations

import pytest

from classroom_attendance.container import build_container
from classroom_attendance.core.enums import Role
from classroom_attendance.store.memory_store import InMemoryDocumentStore


@pytest.fixture
def store():
    return InMemoryDocumentStore()


@pytest.fixture
def container(store):
    return build_container(store=store)


@pytest.fixture
def teacher(container):
    return container.user_service.register_profile(user_id="T1", display_name="Ms. Lee", role=Role.TEACHER)


@pytest.fixture
def other_teacher(container):
    return container.user_service.register_profile(user_id="T2", display_name="Mr. Kim", role=Role.TEACHER)


@pytest.fixture
def student1(container):
    return container.user_service.register_profile(user_id="S1", display_name="Ana", role=Role.STUDENT)


@pytest.fixture
def student2(container):
    return container.user_service.register_profile(user_id="S2", display_name="Ben", role=Role.STUDENT)
