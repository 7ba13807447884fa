from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import AttendanceRecord, AttendanceSession


class AttendanceRepository(Protocol):
    def save_session(self, session: AttendanceSession, records: Sequence[AttendanceRecord]) -> None:
        """Upsert the class-side session and every student-side record together."""

        raise NotImplementedError

    def get_session(self, class_id: str, date_key: str) -> Optional[AttendanceSession]:
        raise NotImplementedError

    def list_sessions(self, class_id: str) -> Sequence[AttendanceSession]:
        raise NotImplementedError

    def list_records(self, student_id: str) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def get_record(self, student_id: str, class_id: str, date_key: str) -> Optional[AttendanceRecord]:
        raise NotImplementedError
