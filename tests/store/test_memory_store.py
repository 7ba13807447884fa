from __future__ import annotations

import pytest

from classroom_attendance.core.exceptions import StoreIOError, ValidationError
from classroom_attendance.store.base import collection_path
from classroom_attendance.store.memory_store import InMemoryDocumentStore


def test_create_then_get_returns_same_fields():
    store = InMemoryDocumentStore()
    doc_id = store.create_document("classes", {"name": "Algebra", "teacherId": "T1"})

    assert store.get_document("classes", doc_id) == {"name": "Algebra", "teacherId": "T1"}
    assert store.get_document("classes", "missing") is None


def test_put_upserts_and_keeps_listing_position():
    store = InMemoryDocumentStore()
    store.put_document("c", "a", {"v": 1})
    store.put_document("c", "b", {"v": 2})
    store.put_document("c", "a", {"v": 3})

    docs = store.list_documents("c")
    assert [d.id for d in docs] == ["a", "b"]
    assert docs[0].fields == {"v": 3}


def test_list_filters_on_equality():
    store = InMemoryDocumentStore()
    store.put_document("classes", "1", {"teacherId": "T1"})
    store.put_document("classes", "2", {"teacherId": "T2"})

    assert [d.id for d in store.list_documents("classes", {"teacherId": "T2"})] == ["2"]


def test_returned_fields_are_copies():
    store = InMemoryDocumentStore()
    store.put_document("c", "a", {"students": {"S1": True}})

    fields = store.get_document("c", "a")
    fields["students"]["S1"] = False

    assert store.get_document("c", "a") == {"students": {"S1": True}}


def test_batch_discards_everything_when_block_raises():
    store = InMemoryDocumentStore()

    with pytest.raises(RuntimeError):
        with store.batch() as batch:
            batch.put("c", "a", {"v": 1})
            raise RuntimeError("boom")

    assert store.list_documents("c") == []


def test_batch_commit_failure_leaves_nothing_written():
    class FailingStore(InMemoryDocumentStore):
        def _commit(self, ops):
            raise StoreIOError("quota exceeded")

    store = FailingStore()
    with pytest.raises(StoreIOError):
        with store.batch() as batch:
            batch.put("c", "a", {"v": 1})
            batch.put("d", "b", {"v": 2})

    assert store.list_documents("c") == []
    assert store.list_documents("d") == []


def test_collection_path_rejects_bad_segments():
    assert collection_path("classes", "C1", "students") == "classes/C1/students"
    with pytest.raises(ValidationError):
        collection_path("classes", "", "students")
    with pytest.raises(ValidationError):
        collection_path("classes", "a/b")
