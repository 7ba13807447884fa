from __future__ import annotations

import copy
import uuid
from dataclasses import dataclass
from typing import Any, ContextManager, Dict, List, Mapping, Optional, Protocol, Sequence, Tuple

from ..core.exceptions import ValidationError

Fields = Dict[str, Any]


@dataclass(frozen=True)
class Document:
    """One stored document: its id inside the collection and its field map."""

    id: str
    fields: Fields


def collection_path(*parts: str) -> str:
    """Build a (sub)collection path such as ``classes/{classId}/students``."""

    cleaned = []
    for part in parts:
        part = str(part or "").strip()
        if not part or "/" in part:
            raise ValidationError(f"Invalid path segment: {part!r}")
        cleaned.append(part)
    return "/".join(cleaned)


def matches(fields: Mapping[str, Any], filters: Optional[Mapping[str, Any]]) -> bool:
    if not filters:
        return True
    return all(fields.get(key) == value for key, value in filters.items())


class WriteBatch(Protocol):
    """Writes staged here are committed together or not at all."""

    def put(self, collection: str, doc_id: str, fields: Fields) -> None:
        raise NotImplementedError

    def create(self, collection: str, fields: Fields) -> str:
        raise NotImplementedError


class DocumentStore(Protocol):
    """Document-oriented store contract used by every repository.

    Collections hold field maps keyed by id and may be nested under a parent
    document (``students/{studentId}/attendance``). ``list_documents`` returns
    documents in store-defined order; filters are equality matches on
    top-level fields.
    """

    def get_document(self, collection: str, doc_id: str) -> Optional[Fields]:
        raise NotImplementedError

    def list_documents(self, collection: str, filters: Optional[Mapping[str, Any]] = None) -> Sequence[Document]:
        raise NotImplementedError

    def create_document(self, collection: str, fields: Fields) -> str:
        raise NotImplementedError

    def put_document(self, collection: str, doc_id: str, fields: Fields) -> None:
        raise NotImplementedError

    def batch(self) -> ContextManager[WriteBatch]:
        raise NotImplementedError


def new_document_id() -> str:
    return uuid.uuid4().hex[:20]


class StagedBatch:
    """Collects writes in order; a store applies ``ops`` on commit."""

    def __init__(self) -> None:
        self.ops: List[Tuple[str, str, Fields]] = []

    def put(self, collection: str, doc_id: str, fields: Fields) -> None:
        self.ops.append((collection, str(doc_id), copy.deepcopy(dict(fields))))

    def create(self, collection: str, fields: Fields) -> str:
        doc_id = new_document_id()
        self.put(collection, doc_id, fields)
        return doc_id
