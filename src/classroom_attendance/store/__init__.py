from .base import Document, DocumentStore, Fields, WriteBatch, collection_path
from .memory_store import InMemoryDocumentStore

__all__ = [
    "Document",
    "DocumentStore",
    "Fields",
    "InMemoryDocumentStore",
    "WriteBatch",
    "collection_path",
]
