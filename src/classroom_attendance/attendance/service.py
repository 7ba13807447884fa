from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from ..classes.service import ClassService
from ..common.datetime_utils import now_utc, to_date_key
from ..core.enums import AttendanceStatus
from ..users.model import User
from .history import SessionHistoryService
from .model import AttendanceRecord, AttendanceSession, SaveResult
from .repository import AttendanceRepository
from .sheet import AttendanceSheet

logger = logging.getLogger(__name__)


class AttendanceService:
    """Use case: a teacher captures and saves one day's attendance for a class."""

    def __init__(
        self,
        attendance: AttendanceRepository,
        classes: ClassService,
        history: SessionHistoryService,
    ):
        self._attendance = attendance
        self._classes = classes
        self._history = history

    def load_roster(self, teacher: User, class_id: str) -> AttendanceSheet:
        classroom = self._classes.get_owned_class(teacher, class_id)
        return AttendanceSheet(classroom.class_id, self._classes.list_roster(classroom.class_id))

    def save_session(self, teacher: User, sheet: AttendanceSheet, *, now: Optional[datetime] = None) -> SaveResult:
        """Commit the sheet as today's session plus one record per student.

        Both views are written in a single store batch; a failure leaves
        neither written. Saving again the same day replaces the whole mapping.
        """

        classroom = self._classes.get_owned_class(teacher, sheet.class_id)
        date_key = to_date_key(now or now_utc())

        sheet.begin_save()
        try:
            presence = sheet.presence_map()
            session = AttendanceSession(class_id=classroom.class_id, date_key=date_key, students=presence)
            records = [
                AttendanceRecord(
                    student_id=student_id,
                    class_id=classroom.class_id,
                    date_key=date_key,
                    status=AttendanceStatus.from_presence(present),
                )
                for student_id, present in presence.items()
            ]
            self._attendance.save_session(session, records)
        except Exception:
            sheet.abort_save()
            raise
        sheet.finish_save()

        logger.info(
            "attendance saved",
            extra={
                "class_id": classroom.class_id,
                "date_key": date_key,
                "present": session.present_count,
                "total": len(presence),
            },
        )
        return SaveResult(session=session, history=self._history.list_sessions(classroom.class_id))
