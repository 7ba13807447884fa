from __future__ import annotations

import logging
from typing import List, Sequence

from ..common.validators import require_non_empty
from ..core.exceptions import AuthorizationError, NotFoundError
from ..users.model import User
from .model import AvailableClass, Classroom, JoinedClass, RosterEntry
from .repository import ClassRepository

logger = logging.getLogger(__name__)


class ClassService:
    """Use case: create and discover classes, enroll students."""

    def __init__(self, classes: ClassRepository):
        self._classes = classes

    def create_class(self, teacher: User, *, name: str, description: str) -> Classroom:
        if not teacher.is_teacher:
            raise AuthorizationError("Only teachers can create classes")

        name = require_non_empty(name, "Class name")
        description = require_non_empty(description, "Class description")

        class_id = self._classes.create(name=name, description=description, teacher_id=teacher.user_id)
        logger.info("class created", extra={"class_id": class_id, "teacher_id": teacher.user_id})
        return Classroom(class_id=class_id, name=name, description=description, teacher_id=teacher.user_id)

    def get_class(self, class_id: str) -> Classroom:
        classroom = self._classes.get_by_id(class_id)
        if not classroom:
            raise NotFoundError("Class not found")
        return classroom

    def get_owned_class(self, teacher: User, class_id: str) -> Classroom:
        """A class belongs to the teacher who created it; nobody else may manage it."""

        classroom = self.get_class(class_id)
        if not teacher.is_teacher or classroom.teacher_id != teacher.user_id:
            raise AuthorizationError("You do not own this class")
        return classroom

    def list_classes_for_teacher(self, teacher_id: str) -> Sequence[Classroom]:
        return self._classes.list_by_teacher(teacher_id)

    def list_all_classes(self) -> Sequence[Classroom]:
        return self._classes.list_all()

    def list_roster(self, class_id: str) -> Sequence[RosterEntry]:
        return self._classes.list_roster(class_id)

    def list_joined_classes(self, student_id: str) -> Sequence[JoinedClass]:
        return self._classes.list_joined(student_id)

    def list_available_classes(self, student_id: str) -> List[AvailableClass]:
        joined_ids = {j.class_id for j in self._classes.list_joined(student_id)}
        return [
            AvailableClass(classroom=c, already_joined=c.class_id in joined_ids)
            for c in self._classes.list_all()
        ]

    def join_class(self, student: User, class_id: str) -> bool:
        """Enroll ``student``; returns False when already enrolled (no write)."""

        if not student.is_student:
            raise AuthorizationError("Only students can join classes")

        classroom = self.get_class(class_id)
        if self._classes.get_joined(student.user_id, classroom.class_id):
            logger.info("join skipped, already enrolled", extra={"class_id": class_id, "student_id": student.user_id})
            return False

        self._classes.enroll(classroom=classroom, student_id=student.user_id, student_name=student.display_name)
        logger.info("student joined class", extra={"class_id": class_id, "student_id": student.user_id})
        return True
