from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Classroom:
    """Domain entity: a class owned by the teacher who created it."""

    class_id: str
    name: str
    description: str
    teacher_id: str


@dataclass(frozen=True)
class RosterEntry:
    """Enrollment fact stored under ``classes/{classId}/students``."""

    student_id: str
    name: str


@dataclass(frozen=True)
class JoinedClass:
    """Mirror of a roster entry, stored under ``students/{studentId}/joinedClasses``."""

    class_id: str
    class_name: str


@dataclass(frozen=True)
class AvailableClass:
    """Read-model for class discovery: every class plus whether the student is in it."""

    classroom: Classroom
    already_joined: bool
