from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, List, Sequence

from ..classes.repository import ClassRepository
from ..core.constants import DEFAULT_RECENT_ACTIVITY_LIMIT
from ..core.enums import AttendanceStatus
from .model import (
    AttendanceRecord,
    AttendanceSession,
    AttendanceSummary,
    ClassAttendanceSummary,
    RosterAttendanceSummary,
    StudentOverview,
)
from .repository import AttendanceRepository


def percentage(present: int, total: int) -> str:
    """Attendance percentage with one decimal digit.

    ``total == 0`` yields the bare string ``"0"`` (not ``"0.0"``); existing
    consumers rely on that form. Halves round up, as the dashboards always did.
    """

    if total == 0:
        return "0"
    value = Decimal(present / total * 100).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
    return f"{value:.1f}"


def summarize(present: int, absent: int) -> AttendanceSummary:
    total = present + absent
    return AttendanceSummary(
        present_days=present,
        absent_days=absent,
        total_days=total,
        attendance_percentage=percentage(present, total),
    )


def summarize_records(records: Iterable[AttendanceRecord]) -> AttendanceSummary:
    present = absent = 0
    for r in records:
        if r.status == AttendanceStatus.PRESENT:
            present += 1
        elif r.status == AttendanceStatus.ABSENT:
            absent += 1
    return summarize(present, absent)


def summarize_sessions(sessions: Iterable[AttendanceSession], student_id: str) -> AttendanceSummary:
    """Count one student's marks across a class's sessions.

    A session without the student's key (recorded before they joined) counts
    toward neither present nor absent.
    """

    present = absent = 0
    for s in sessions:
        mark = s.students.get(student_id)
        if mark is True:
            present += 1
        elif mark is False:
            absent += 1
    return summarize(present, absent)


def most_recent(records: Sequence[AttendanceRecord], limit: int) -> List[AttendanceRecord]:
    ordered = sorted(records, key=lambda r: (r.date_key, r.class_id), reverse=True)
    return ordered[: max(0, int(limit))]


class AttendanceAggregator:
    """Derives summaries from either view of the ledger; nothing is cached."""

    def __init__(
        self,
        attendance: AttendanceRepository,
        classes: ClassRepository,
        *,
        recent_limit: int = DEFAULT_RECENT_ACTIVITY_LIMIT,
    ):
        self._attendance = attendance
        self._classes = classes
        self._recent_limit = int(recent_limit)

    def student_summary(self, student_id: str) -> AttendanceSummary:
        return summarize_records(self._attendance.list_records(student_id))

    def recent_activity(self, student_id: str) -> List[AttendanceRecord]:
        return most_recent(self._attendance.list_records(student_id), self._recent_limit)

    def class_summaries_for_student(self, student_id: str) -> List[ClassAttendanceSummary]:
        out: List[ClassAttendanceSummary] = []
        for joined in self._classes.list_joined(student_id):
            sessions = self._attendance.list_sessions(joined.class_id)
            out.append(
                ClassAttendanceSummary(
                    class_id=joined.class_id,
                    class_name=joined.class_name,
                    summary=summarize_sessions(sessions, student_id),
                )
            )
        return out

    def student_overview(self, student_id: str) -> StudentOverview:
        records = self._attendance.list_records(student_id)
        return StudentOverview(
            summary=summarize_records(records),
            recent=most_recent(records, self._recent_limit),
            classes=self.class_summaries_for_student(student_id),
        )

    def class_student_summaries(self, class_id: str) -> List[RosterAttendanceSummary]:
        sessions = self._attendance.list_sessions(class_id)
        return [
            RosterAttendanceSummary(
                student_id=entry.student_id,
                name=entry.name,
                summary=summarize_sessions(sessions, entry.student_id),
            )
            for entry in self._classes.list_roster(class_id)
        ]
