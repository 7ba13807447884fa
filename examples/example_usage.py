"""Example: drive the service layer directly (no Flask).

Controllers are a thin layer; the ledger rules live in the services.
"""

from datetime import datetime

from classroom_attendance.container import build_container
from classroom_attendance.core.enums import Role
from classroom_attendance.store.memory_store import InMemoryDocumentStore


def main():
    container = build_container(store=InMemoryDocumentStore())
    users = container.user_service

    teacher = users.register_profile(user_id="t1", display_name="Ms. Lee", role=Role.TEACHER)
    ana = users.register_profile(user_id="s1", display_name="Ana", role=Role.STUDENT)
    ben = users.register_profile(user_id="s2", display_name="Ben", role=Role.STUDENT)

    algebra = container.class_service.create_class(teacher, name="Algebra", description="Period 1")
    container.class_service.join_class(ana, algebra.class_id)
    container.class_service.join_class(ben, algebra.class_id)

    sheet = container.attendance_service.load_roster(teacher, algebra.class_id)
    sheet.toggle("s1")
    container.attendance_service.save_session(teacher, sheet, now=datetime(2024, 1, 1, 9, 0))

    print(container.aggregator.student_overview("s1"))
    print(container.history_service.present_counts(algebra.class_id))


if __name__ == "__main__":
    main()
