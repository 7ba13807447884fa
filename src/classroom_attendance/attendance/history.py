from __future__ import annotations

from typing import List

from ..classes.repository import ClassRepository
from ..core.enums import AttendanceStatus
from .model import AttendanceSession, DailyPresence
from .repository import AttendanceRepository


class SessionHistoryService:
    def __init__(self, attendance: AttendanceRepository, classes: ClassRepository):
        self._attendance = attendance
        self._classes = classes

    def list_sessions(self, class_id: str) -> List[AttendanceSession]:
        return sorted(self._attendance.list_sessions(class_id), key=lambda s: s.date_key)

    def present_counts(self, class_id: str) -> List[DailyPresence]:
        """Students present per day, the series behind the class history chart."""

        return [
            DailyPresence(date_key=s.date_key, present=s.present_count, total=len(s.students))
            for s in self.list_sessions(class_id)
        ]

    def export_rows(self, class_id: str) -> List[dict]:
        names = {r.student_id: r.name for r in self._classes.list_roster(class_id)}
        rows: List[dict] = []
        for s in self.list_sessions(class_id):
            for student_id, present in s.students.items():
                rows.append(
                    {
                        "date": s.date_key,
                        "student_id": student_id,
                        "student_name": names.get(student_id, ""),
                        "status": AttendanceStatus.from_presence(present).value,
                    }
                )
        return rows
