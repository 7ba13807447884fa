from __future__ import annotations

import json
import logging
import re
from contextlib import contextmanager
from typing import Any, Iterator, Mapping, Optional, Sequence

import mysql.connector

from ..core.exceptions import StoreIOError, ValidationError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .base import Document, Fields, StagedBatch, new_document_id

logger = logging.getLogger(__name__)

_FIELD_NAME = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")

_UPSERT_SQL = """
    INSERT INTO documents(collection, doc_id, fields)
    VALUES(%s, %s, %s)
    ON DUPLICATE KEY UPDATE fields=VALUES(fields)
"""


@contextmanager
def _store_errors(operation: str, collection: str):
    try:
        yield
    except mysql.connector.Error as exc:
        logger.error(
            "document store failure",
            exc_info=True,
            extra={"operation": operation, "collection": collection},
        )
        raise StoreIOError(f"Store {operation} failed for {collection}") from exc


class MySQLDocumentStore:
    """Document store persisted in the single ``documents`` table (schema.sql)."""

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_document(self, collection: str, doc_id: str) -> Optional[Fields]:
        with _store_errors("get", collection), db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT fields FROM documents WHERE collection=%s AND doc_id=%s",
                (collection, str(doc_id)),
            )
            row = fetchone(cur)
            return _decode(row["fields"]) if row else None

    def list_documents(self, collection: str, filters: Optional[Mapping[str, Any]] = None) -> Sequence[Document]:
        clauses = ["collection=%s"]
        params: list[object] = [collection]

        for key, value in (filters or {}).items():
            if not _FIELD_NAME.match(key):
                raise ValidationError(f"Unsupported filter field: {key!r}")
            clauses.append("JSON_EXTRACT(fields, %s) = CAST(%s AS JSON)")
            params.extend([f"$.{key}", json.dumps(value)])

        where = " AND ".join(clauses)

        with _store_errors("list", collection), db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT doc_id, fields FROM documents WHERE {where} ORDER BY seq ASC",
                tuple(params),
            )
            return [Document(id=r["doc_id"], fields=_decode(r["fields"])) for r in fetchall(cur)]

    def create_document(self, collection: str, fields: Fields) -> str:
        doc_id = new_document_id()
        with _store_errors("create", collection), db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO documents(collection, doc_id, fields) VALUES(%s, %s, %s)",
                (collection, doc_id, json.dumps(fields)),
            )
        return doc_id

    def put_document(self, collection: str, doc_id: str, fields: Fields) -> None:
        with _store_errors("put", collection), db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_UPSERT_SQL, (collection, str(doc_id), json.dumps(fields)))

    @contextmanager
    def batch(self) -> Iterator[StagedBatch]:
        staged = StagedBatch()
        yield staged
        if not staged.ops:
            return

        collections = ",".join(sorted({op[0] for op in staged.ops}))
        with _store_errors("batch", collections), db_cursor(self._conn_factory) as (_, cur):
            for collection, doc_id, fields in staged.ops:
                cur.execute(_UPSERT_SQL, (collection, doc_id, json.dumps(fields)))
        logger.debug("batch committed", extra={"writes": len(staged.ops)})


def _decode(value: Any) -> Fields:
    if isinstance(value, (bytes, bytearray)):
        value = value.decode("utf-8")
    if isinstance(value, str):
        return json.loads(value)
    return dict(value or {})
