from __future__ import annotations

import pytest

from classroom_attendance.core.exceptions import AuthorizationError, NotFoundError, ValidationError


def test_create_class_is_retrievable_by_id(container, teacher):
    created = container.class_service.create_class(teacher, name="Algebra", description="Period 1")

    fetched = container.class_service.get_class(created.class_id)
    assert fetched == created
    assert fetched.teacher_id == "T1"


@pytest.mark.parametrize(
    "name,description",
    [("", "Period 1"), ("Algebra", ""), ("   ", "x"), (None, "x"), (5, "x"), ("Algebra", ["x"])],
)
def test_create_class_requires_name_and_description(container, store, teacher, name, description):
    with pytest.raises(ValidationError):
        container.class_service.create_class(teacher, name=name, description=description)

    assert store.list_documents("classes") == []


def test_students_cannot_create_classes(container, student1):
    with pytest.raises(AuthorizationError):
        container.class_service.create_class(student1, name="Algebra", description="x")


def test_duplicate_names_are_allowed(container, teacher):
    a = container.class_service.create_class(teacher, name="Algebra", description="a")
    b = container.class_service.create_class(teacher, name="Algebra", description="b")

    assert a.class_id != b.class_id


def test_list_classes_for_teacher_filters_by_owner(container, teacher, other_teacher):
    mine = container.class_service.create_class(teacher, name="Algebra", description="x")
    container.class_service.create_class(other_teacher, name="Biology", description="y")

    assert container.class_service.list_classes_for_teacher("T1") == [mine]
    assert len(container.class_service.list_all_classes()) == 2


def test_join_writes_both_mirror_entries(container, store, teacher, student1):
    algebra = container.class_service.create_class(teacher, name="Algebra", description="x")

    assert container.class_service.join_class(student1, algebra.class_id) is True

    roster = container.class_service.list_roster(algebra.class_id)
    joined = container.class_service.list_joined_classes("S1")
    assert [(r.student_id, r.name) for r in roster] == [("S1", "Ana")]
    assert [(j.class_id, j.class_name) for j in joined] == [(algebra.class_id, "Algebra")]
    assert store.get_document(f"classes/{algebra.class_id}/students", "S1") == {"studentId": "S1", "name": "Ana"}


def test_join_twice_yields_one_entry(container, teacher, student1):
    algebra = container.class_service.create_class(teacher, name="Algebra", description="x")

    container.class_service.join_class(student1, algebra.class_id)
    assert container.class_service.join_class(student1, algebra.class_id) is False

    assert len(container.class_service.list_joined_classes("S1")) == 1
    assert len(container.class_service.list_roster(algebra.class_id)) == 1


def test_join_is_keyed_by_class_id_not_name(container, teacher, other_teacher, student1):
    first = container.class_service.create_class(teacher, name="Algebra", description="x")
    second = container.class_service.create_class(other_teacher, name="Algebra", description="y")

    assert container.class_service.join_class(student1, first.class_id) is True
    assert container.class_service.join_class(student1, second.class_id) is True
    assert {j.class_id for j in container.class_service.list_joined_classes("S1")} == {
        first.class_id,
        second.class_id,
    }


def test_join_recognises_entries_written_with_generated_ids(container, store, teacher, student1):
    algebra = container.class_service.create_class(teacher, name="Algebra", description="x")
    store.create_document("students/S1/joinedClasses", {"classId": algebra.class_id, "className": "Algebra"})

    assert container.class_service.join_class(student1, algebra.class_id) is False


def test_join_unknown_class(container, student1):
    with pytest.raises(NotFoundError):
        container.class_service.join_class(student1, "missing")


def test_teachers_cannot_join(container, teacher):
    algebra = container.class_service.create_class(teacher, name="Algebra", description="x")
    with pytest.raises(AuthorizationError):
        container.class_service.join_class(teacher, algebra.class_id)


def test_available_classes_flag_joined(container, teacher, student1):
    algebra = container.class_service.create_class(teacher, name="Algebra", description="x")
    container.class_service.create_class(teacher, name="Biology", description="y")
    container.class_service.join_class(student1, algebra.class_id)

    flags = {a.classroom.name: a.already_joined for a in container.class_service.list_available_classes("S1")}
    assert flags == {"Algebra": True, "Biology": False}


def test_get_owned_class_rejects_other_teacher(container, teacher, other_teacher):
    algebra = container.class_service.create_class(teacher, name="Algebra", description="x")

    assert container.class_service.get_owned_class(teacher, algebra.class_id) == algebra
    with pytest.raises(AuthorizationError):
        container.class_service.get_owned_class(other_teacher, algebra.class_id)
