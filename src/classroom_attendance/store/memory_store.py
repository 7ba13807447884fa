from __future__ import annotations

import copy
import threading
from contextlib import contextmanager
from typing import Any, Dict, Iterator, Mapping, Optional, Sequence, Tuple

from .base import Document, Fields, StagedBatch, matches, new_document_id


class InMemoryDocumentStore:
    """Process-local store used by tests and the ``memory`` backend.

    Documents keep their insertion order; upserting an existing id keeps its
    position, mirroring the ``seq`` ordering of the MySQL table.
    """

    def __init__(self) -> None:
        self._collections: Dict[str, Dict[str, Fields]] = {}
        self._lock = threading.Lock()

    def get_document(self, collection: str, doc_id: str) -> Optional[Fields]:
        with self._lock:
            fields = self._collections.get(collection, {}).get(str(doc_id))
            return copy.deepcopy(fields) if fields is not None else None

    def list_documents(self, collection: str, filters: Optional[Mapping[str, Any]] = None) -> Sequence[Document]:
        with self._lock:
            docs = self._collections.get(collection, {})
            return [
                Document(id=doc_id, fields=copy.deepcopy(fields))
                for doc_id, fields in docs.items()
                if matches(fields, filters)
            ]

    def create_document(self, collection: str, fields: Fields) -> str:
        doc_id = new_document_id()
        self._commit([(collection, doc_id, copy.deepcopy(dict(fields)))])
        return doc_id

    def put_document(self, collection: str, doc_id: str, fields: Fields) -> None:
        self._commit([(collection, str(doc_id), copy.deepcopy(dict(fields)))])

    @contextmanager
    def batch(self) -> Iterator[StagedBatch]:
        staged = StagedBatch()
        yield staged
        self._commit(staged.ops)

    def _commit(self, ops: Sequence[Tuple[str, str, Fields]]) -> None:
        with self._lock:
            for collection, doc_id, fields in ops:
                self._collections.setdefault(collection, {})[doc_id] = fields
