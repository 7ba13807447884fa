from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User role, fixed at registration."""

    STUDENT = "student"
    TEACHER = "teacher"


class AttendanceStatus(str, Enum):
    """Status stored on a per-student attendance record."""

    PRESENT = "Present"
    ABSENT = "Absent"

    @classmethod
    def from_presence(cls, present: bool) -> "AttendanceStatus":
        return cls.PRESENT if present else cls.ABSENT


class SheetState(str, Enum):
    """Lifecycle of an attendance sheet held by one teacher."""

    IDLE = "IDLE"
    ROSTER_LOADED = "ROSTER_LOADED"
    EDITING = "EDITING"
    SAVING = "SAVING"
