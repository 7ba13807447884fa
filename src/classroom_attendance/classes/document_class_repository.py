from __future__ import annotations

from typing import Optional, Sequence

from ..core.constants import CLASSES, JOINED_CLASSES, ROSTER, STUDENTS
from ..store.base import Document, DocumentStore, collection_path
from .model import Classroom, JoinedClass, RosterEntry
from .repository import ClassRepository


def _to_classroom(doc: Document) -> Classroom:
    f = doc.fields
    return Classroom(
        class_id=doc.id,
        name=str(f.get("name") or ""),
        description=str(f.get("description") or ""),
        teacher_id=str(f.get("teacherId") or ""),
    )


def _to_joined(doc: Document) -> JoinedClass:
    return JoinedClass(
        class_id=str(doc.fields.get("classId") or doc.id),
        class_name=str(doc.fields.get("className") or ""),
    )


class DocumentClassRepository(ClassRepository):
    """Classes live at ``classes/{classId}``.

    Roster entries are keyed by student id and joined-class entries by class
    id, so re-enrolling upserts instead of appending a duplicate. Documents
    written with generated ids are still read through their ``studentId`` /
    ``classId`` fields.
    """

    def __init__(self, store: DocumentStore):
        self._store = store

    def create(self, *, name: str, description: str, teacher_id: str) -> str:
        return self._store.create_document(
            CLASSES,
            {"name": name, "description": description, "teacherId": teacher_id},
        )

    def get_by_id(self, class_id: str) -> Optional[Classroom]:
        fields = self._store.get_document(CLASSES, class_id)
        if fields is None:
            return None
        return _to_classroom(Document(id=str(class_id), fields=fields))

    def list_by_teacher(self, teacher_id: str) -> Sequence[Classroom]:
        return [_to_classroom(d) for d in self._store.list_documents(CLASSES, {"teacherId": teacher_id})]

    def list_all(self) -> Sequence[Classroom]:
        return [_to_classroom(d) for d in self._store.list_documents(CLASSES)]

    def list_roster(self, class_id: str) -> Sequence[RosterEntry]:
        docs = self._store.list_documents(collection_path(CLASSES, class_id, ROSTER))
        return [
            RosterEntry(
                student_id=str(d.fields.get("studentId") or d.id),
                name=str(d.fields.get("name") or ""),
            )
            for d in docs
        ]

    def list_joined(self, student_id: str) -> Sequence[JoinedClass]:
        docs = self._store.list_documents(collection_path(STUDENTS, student_id, JOINED_CLASSES))
        return [_to_joined(d) for d in docs]

    def get_joined(self, student_id: str, class_id: str) -> Optional[JoinedClass]:
        path = collection_path(STUDENTS, student_id, JOINED_CLASSES)
        fields = self._store.get_document(path, class_id)
        if fields is not None:
            return _to_joined(Document(id=str(class_id), fields=fields))

        legacy = self._store.list_documents(path, {"classId": class_id})
        return _to_joined(legacy[0]) if legacy else None

    def enroll(self, *, classroom: Classroom, student_id: str, student_name: str) -> None:
        with self._store.batch() as batch:
            batch.put(
                collection_path(CLASSES, classroom.class_id, ROSTER),
                student_id,
                {"studentId": student_id, "name": student_name},
            )
            batch.put(
                collection_path(STUDENTS, student_id, JOINED_CLASSES),
                classroom.class_id,
                {"classId": classroom.class_id, "className": classroom.name},
            )
