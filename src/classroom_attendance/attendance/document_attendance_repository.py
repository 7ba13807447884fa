from __future__ import annotations

from typing import Optional, Sequence

from ..core.constants import ATTENDANCE, CLASSES, STUDENTS
from ..core.enums import AttendanceStatus
from ..store.base import Document, DocumentStore, collection_path
from .model import AttendanceRecord, AttendanceSession
from .repository import AttendanceRepository


def record_id(class_id: str, date_key: str) -> str:
    return f"{date_key}_{class_id}"


def _to_session(class_id: str, doc: Document) -> AttendanceSession:
    students = doc.fields.get("students") or {}
    return AttendanceSession(
        class_id=class_id,
        date_key=doc.id,
        students={str(k): bool(v) for k, v in students.items()},
    )


def _to_record(student_id: str, doc: Document) -> AttendanceRecord:
    f = doc.fields
    return AttendanceRecord(
        student_id=student_id,
        class_id=str(f.get("classId") or ""),
        date_key=str(f.get("date") or doc.id[:10]),
        status=AttendanceStatus(f["status"]),
    )


class DocumentAttendanceRepository(AttendanceRepository):
    """Sessions at ``classes/{classId}/attendance/{dateKey}``, records at
    ``students/{studentId}/attendance/{dateKey}_{classId}``.
    """

    def __init__(self, store: DocumentStore):
        self._store = store

    def save_session(self, session: AttendanceSession, records: Sequence[AttendanceRecord]) -> None:
        with self._store.batch() as batch:
            batch.put(
                collection_path(CLASSES, session.class_id, ATTENDANCE),
                session.date_key,
                {"students": dict(session.students)},
            )
            for r in records:
                batch.put(
                    collection_path(STUDENTS, r.student_id, ATTENDANCE),
                    record_id(r.class_id, r.date_key),
                    {"date": r.date_key, "status": r.status.value, "classId": r.class_id},
                )

    def get_session(self, class_id: str, date_key: str) -> Optional[AttendanceSession]:
        fields = self._store.get_document(collection_path(CLASSES, class_id, ATTENDANCE), date_key)
        if fields is None:
            return None
        return _to_session(class_id, Document(id=date_key, fields=fields))

    def list_sessions(self, class_id: str) -> Sequence[AttendanceSession]:
        docs = self._store.list_documents(collection_path(CLASSES, class_id, ATTENDANCE))
        return [_to_session(class_id, d) for d in docs]

    def list_records(self, student_id: str) -> Sequence[AttendanceRecord]:
        docs = self._store.list_documents(collection_path(STUDENTS, student_id, ATTENDANCE))
        return [_to_record(student_id, d) for d in docs]

    def get_record(self, student_id: str, class_id: str, date_key: str) -> Optional[AttendanceRecord]:
        doc_id = record_id(class_id, date_key)
        fields = self._store.get_document(collection_path(STUDENTS, student_id, ATTENDANCE), doc_id)
        if fields is None:
            return None
        return _to_record(student_id, Document(id=doc_id, fields=fields))
