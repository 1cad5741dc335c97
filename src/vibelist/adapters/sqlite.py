"""SQLite key-value adapter.

One ``kv_store`` table, one row per key. Each call opens its own
connection, so nothing is held open between commands.
"""

from __future__ import annotations

import contextlib
import logging
import sqlite3
import time
from pathlib import Path

from vibelist.models.exceptions import StorageReadCorruptError, StorageWriteFailure
from vibelist.repositories import KeyValueRepository

logger = logging.getLogger(__name__)

_SCHEMA = """
CREATE TABLE IF NOT EXISTS kv_store (
    key TEXT PRIMARY KEY,
    value TEXT NOT NULL,
    updated_at REAL NOT NULL
)
"""


class SqliteKeyValueRepository(KeyValueRepository):
    """Key-value storage backed by a SQLite database file."""

    def __init__(self, db_path: str | Path):
        self.db_path = Path(db_path)

    def _get_conn(self) -> sqlite3.Connection:
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        conn = sqlite3.connect(str(self.db_path), timeout=30.0)
        with contextlib.suppress(sqlite3.Error):
            conn.execute("PRAGMA journal_mode=WAL")
        try:
            conn.execute(_SCHEMA)
        except sqlite3.Error:
            conn.close()
            raise
        return conn

    def get_item(self, key: str) -> str | None:
        try:
            conn = self._get_conn()
        except (OSError, sqlite3.Error) as e:
            raise StorageReadCorruptError(f"Cannot open {self.db_path}: {e}") from e
        try:
            row = conn.execute(
                "SELECT value FROM kv_store WHERE key = ?", (key,)
            ).fetchone()
        except sqlite3.Error as e:
            raise StorageReadCorruptError(f"Cannot read {key!r}: {e}") from e
        finally:
            conn.close()
        return row[0] if row else None

    def set_item(self, key: str, value: str) -> None:
        try:
            conn = self._get_conn()
            try:
                conn.execute(
                    """
                    INSERT INTO kv_store(key, value, updated_at)
                    VALUES (?, ?, ?)
                    ON CONFLICT(key) DO UPDATE SET
                        value = excluded.value,
                        updated_at = excluded.updated_at
                    """,
                    (key, value, time.time()),
                )
                conn.commit()
            finally:
                conn.close()
        except (OSError, sqlite3.Error) as e:
            raise StorageWriteFailure(f"Cannot write {key!r}: {e}") from e
        logger.debug("kv_store write key=%s bytes=%d", key, len(value))

    def remove_item(self, key: str) -> None:
        try:
            conn = self._get_conn()
            try:
                conn.execute("DELETE FROM kv_store WHERE key = ?", (key,))
                conn.commit()
            finally:
                conn.close()
        except (OSError, sqlite3.Error) as e:
            raise StorageWriteFailure(f"Cannot remove {key!r}: {e}") from e
