"""
Document store backed by a single PostgreSQL JSONB table.

Every collection lives in the `documents` table; a document is the JSON body
of one row. Filters are equality matches on top-level fields and are
evaluated with JSONB containment (`body @> filter`).
"""

import uuid
from typing import Any, Dict, List, Optional

import psycopg2
import psycopg2.errors
from psycopg2.extras import Json

from eventoz.errors import DuplicateKeyError, StoreError

Document = Dict[str, Any]

SCHEMA_SQL = """
    CREATE TABLE IF NOT EXISTS documents (
        doc_id      TEXT PRIMARY KEY,
        collection  TEXT NOT NULL,
        body        JSONB NOT NULL
    );
    CREATE INDEX IF NOT EXISTS documents_collection_idx
        ON documents (collection);
    CREATE INDEX IF NOT EXISTS documents_body_idx
        ON documents USING GIN (body jsonb_path_ops);
    CREATE UNIQUE INDEX IF NOT EXISTS users_email_key
        ON documents ((body->>'email')) WHERE collection = 'users';
"""


class PostgresDocumentStore:
    """
    Named collections of JSON documents on one shared psycopg2 connection.

    Documents get a store-generated `_id` on insert. All operations touch a
    single row or run a single read, so each one is atomic on its own.
    """

    def __init__(self, conn) -> None:
        self._conn = conn

    def create_schema(self) -> None:
        self._execute(SCHEMA_SQL)

    def insert(self, collection: str, document: Document) -> str:
        """
        Insert a document and return its generated id.

        The passed dict is updated in place with the `_id` key.

        Raises:
            DuplicateKeyError: A unique index rejected the document.
            StoreError: Any other database failure.
        """
        doc_id = uuid.uuid4().hex
        body = dict(document, _id=doc_id)
        sql = "INSERT INTO documents (doc_id, collection, body) VALUES (%s, %s, %s);"
        try:
            with self._conn.cursor() as cur:
                cur.execute(sql, (doc_id, collection, Json(body)))
        except psycopg2.errors.UniqueViolation as e:
            raise DuplicateKeyError(f"Duplicate key in {collection}") from e
        except psycopg2.Error as e:
            raise StoreError(str(e)) from e
        document["_id"] = doc_id
        return doc_id

    def find_one(self, collection: str, query: Document) -> Optional[Document]:
        sql = """
            SELECT body FROM documents
            WHERE collection = %s AND body @> %s
            LIMIT 1;
        """
        row = self._fetchone(sql, (collection, Json(query)))
        return row["body"] if row else None

    def find_many(self, collection: str, query: Document) -> List[Document]:
        sql = "SELECT body FROM documents WHERE collection = %s AND body @> %s;"
        try:
            with self._conn.cursor() as cur:
                cur.execute(sql, (collection, Json(query)))
                return [row["body"] for row in cur.fetchall()]
        except psycopg2.Error as e:
            raise StoreError(str(e)) from e

    def count(self, collection: str, query: Document) -> int:
        sql = """
            SELECT COUNT(*) AS n FROM documents
            WHERE collection = %s AND body @> %s;
        """
        row = self._fetchone(sql, (collection, Json(query)))
        return int(row["n"]) if row else 0

    def update_one(self, collection: str, query: Document, changes: Document) -> int:
        """
        Merge `changes` into the first document matching `query`.

        Returns:
            int: Number of matched documents (0 or 1).
        """
        sql = """
            UPDATE documents SET body = body || %s
            WHERE doc_id = (
                SELECT doc_id FROM documents
                WHERE collection = %s AND body @> %s
                LIMIT 1
            );
        """
        try:
            with self._conn.cursor() as cur:
                cur.execute(sql, (Json(changes), collection, Json(query)))
                return cur.rowcount
        except psycopg2.Error as e:
            raise StoreError(str(e)) from e

    def _fetchone(self, sql: str, params: tuple) -> Optional[Dict[str, Any]]:
        try:
            with self._conn.cursor() as cur:
                cur.execute(sql, params)
                return cur.fetchone()
        except psycopg2.Error as e:
            raise StoreError(str(e)) from e

    def _execute(self, sql: str, params: Optional[tuple] = None) -> None:
        try:
            with self._conn.cursor() as cur:
                cur.execute(sql, params)
        except psycopg2.Error as e:
            raise StoreError(str(e)) from e
