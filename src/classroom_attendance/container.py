from __future__ import annotations

from dataclasses import dataclass

from .attendance.aggregator import AttendanceAggregator
from .attendance.document_attendance_repository import DocumentAttendanceRepository
from .attendance.history import SessionHistoryService
from .attendance.service import AttendanceService
from .classes.document_class_repository import DocumentClassRepository
from .classes.service import ClassService
from .core.constants import DEFAULT_RECENT_ACTIVITY_LIMIT
from .core.exceptions import ValidationError
from .database.connection import DatabaseConnection, DBConfig
from .store.base import DocumentStore
from .store.memory_store import InMemoryDocumentStore
from .store.mysql_document_store import MySQLDocumentStore
from .users.document_user_repository import DocumentUserRepository
from .users.identity import FlaskSessionIdentity, IdentityProvider
from .users.service import UserService


@dataclass(frozen=True)
class Container:
    store: DocumentStore
    identity: IdentityProvider

    users_repo: DocumentUserRepository
    classes_repo: DocumentClassRepository
    attendance_repo: DocumentAttendanceRepository

    user_service: UserService
    class_service: ClassService
    attendance_service: AttendanceService
    aggregator: AttendanceAggregator
    history_service: SessionHistoryService


def build_store(*, backend: str, db_config: dict | None = None) -> DocumentStore:
    if backend == "memory":
        return InMemoryDocumentStore()
    if backend == "mysql":
        if not db_config:
            raise ValidationError("DB_CONFIG is required for the mysql store")
        return MySQLDocumentStore(DatabaseConnection(DBConfig.from_mapping(db_config)))
    raise ValidationError(f"Unknown store backend: {backend!r}")


def build_container(
    *,
    store: DocumentStore,
    identity: IdentityProvider | None = None,
    recent_limit: int = DEFAULT_RECENT_ACTIVITY_LIMIT,
) -> Container:
    users_repo = DocumentUserRepository(store)
    classes_repo = DocumentClassRepository(store)
    attendance_repo = DocumentAttendanceRepository(store)

    user_service = UserService(users_repo)
    class_service = ClassService(classes_repo)
    history_service = SessionHistoryService(attendance_repo, classes_repo)
    attendance_service = AttendanceService(attendance_repo, class_service, history_service)
    aggregator = AttendanceAggregator(attendance_repo, classes_repo, recent_limit=recent_limit)

    return Container(
        store=store,
        identity=identity or FlaskSessionIdentity(),
        users_repo=users_repo,
        classes_repo=classes_repo,
        attendance_repo=attendance_repo,
        user_service=user_service,
        class_service=class_service,
        attendance_service=attendance_service,
        aggregator=aggregator,
        history_service=history_service,
    )
