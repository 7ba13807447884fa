from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceSession:
    """Class-side view: who was present in ``class_id`` on ``date_key``."""

    class_id: str
    date_key: str
    students: Dict[str, bool] = field(default_factory=dict)

    @property
    def present_count(self) -> int:
        return sum(1 for present in self.students.values() if present)


@dataclass(frozen=True)
class AttendanceRecord:
    """Student-side view of the same fact, one per (student, class, date)."""

    student_id: str
    class_id: str
    date_key: str
    status: AttendanceStatus


@dataclass(frozen=True)
class AttendanceSummary:
    """Derived counts; recomputed on every read, never stored."""

    present_days: int
    absent_days: int
    total_days: int
    attendance_percentage: str


@dataclass(frozen=True)
class ClassAttendanceSummary:
    class_id: str
    class_name: str
    summary: AttendanceSummary


@dataclass(frozen=True)
class RosterAttendanceSummary:
    student_id: str
    name: str
    summary: AttendanceSummary


@dataclass(frozen=True)
class StudentOverview:
    """Read-model behind the student dashboard."""

    summary: AttendanceSummary
    recent: List[AttendanceRecord]
    classes: List[ClassAttendanceSummary]


@dataclass(frozen=True)
class DailyPresence:
    date_key: str
    present: int
    total: int


@dataclass(frozen=True)
class SaveResult:
    session: AttendanceSession
    history: List[AttendanceSession]
