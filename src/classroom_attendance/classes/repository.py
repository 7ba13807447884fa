from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Classroom, JoinedClass, RosterEntry


class ClassRepository(Protocol):
    """Repository for classes and both halves of the enrollment relation."""

    def create(self, *, name: str, description: str, teacher_id: str) -> str:
        raise NotImplementedError

    def get_by_id(self, class_id: str) -> Optional[Classroom]:
        raise NotImplementedError

    def list_by_teacher(self, teacher_id: str) -> Sequence[Classroom]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Classroom]:
        raise NotImplementedError

    def list_roster(self, class_id: str) -> Sequence[RosterEntry]:
        raise NotImplementedError

    def list_joined(self, student_id: str) -> Sequence[JoinedClass]:
        raise NotImplementedError

    def get_joined(self, student_id: str, class_id: str) -> Optional[JoinedClass]:
        raise NotImplementedError

    def enroll(self, *, classroom: Classroom, student_id: str, student_name: str) -> None:
        """Write the roster entry and the joined-class entry together."""

        raise NotImplementedError
