"""Key/value table holding JSON documents."""

import json

from sqlalchemy import text

from finance_tracker.application.ports.database import DatabaseEnginePort
from finance_tracker.infrastructure.logging.logger import get_app_logger

CREATE_DOCUMENTS_SQL = """
    CREATE TABLE IF NOT EXISTS finance_documents (
        key TEXT PRIMARY KEY,
        payload TEXT NOT NULL
    )
"""


class SqlAlchemyDocumentStore:
    """Read and replace whole JSON documents by key.

    Each entity list is stored as one document, so a save replaces the list
    atomically.
    """

    def __init__(self, db_port: DatabaseEnginePort, logger=None) -> None:
        """Initialize the store.

        Args:
            db_port: Port providing access to the finance engine.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._db_port = db_port
        self._logger = logger or get_app_logger()
        self._table_ready = False

    def _engine(self):
        engine = self._db_port.get_finance_engine()
        if not self._table_ready:
            with engine.begin() as conn:
                conn.execute(text(CREATE_DOCUMENTS_SQL))
            self._table_ready = True
        return engine

    def read_document(self, key: str):
        """Return the decoded document stored under a key, or None."""
        query = text("SELECT payload FROM finance_documents WHERE key = :key")
        with self._engine().connect() as conn:
            row = conn.execute(query, {"key": key}).first()
        if row is None:
            return None
        try:
            return json.loads(row.payload)
        except json.JSONDecodeError as exc:
            self._logger.error(f"Stored document {key!r} is corrupt: {exc}")
            return None

    def write_document(self, key: str, document) -> None:
        """Replace the document stored under a key."""
        payload = json.dumps(document, ensure_ascii=False)
        with self._engine().begin() as conn:
            conn.execute(
                text("DELETE FROM finance_documents WHERE key = :key"),
                {"key": key},
            )
            conn.execute(
                text(
                    """
                    INSERT INTO finance_documents (key, payload)
                    VALUES (:key, :payload)
                    """
                ),
                {"key": key, "payload": payload},
            )

    def read_records(self, key: str, decoder) -> list | None:
        """Decode a stored list, skipping records that no longer parse."""
        document = self.read_document(key)
        if document is None:
            return None
        if not isinstance(document, list):
            self._logger.error(f"Stored document {key!r} is not a list")
            return None
        records = []
        for item in document:
            try:
                records.append(decoder(item))
            except (KeyError, TypeError, ValueError) as exc:
                self._logger.warning(
                    f"Dropped unreadable {key} record: {exc!r}"
                )
        return records


__all__ = ["SqlAlchemyDocumentStore", "CREATE_DOCUMENTS_SQL"]
