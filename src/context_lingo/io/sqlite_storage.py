"""SQLite-backed key-value storage."""

import sqlite3
from pathlib import Path
from typing import Optional

from .key_value_storage import KeyValueStorage, StorageLoadError, StorageWriteError


class SqliteStorage(KeyValueStorage):
    """Owns an SQLite connection holding a single key/value table.

    The database is opened on first use, so an unusable location surfaces as
    StorageLoadError / StorageWriteError from the storage calls.
    """

    def __init__(self, db_path: Path) -> None:
        self.db_path = Path(db_path)
        self.connection: Optional[sqlite3.Connection] = None

    def _connect(self) -> sqlite3.Connection:
        if self.connection is None:
            self.db_path.parent.mkdir(parents=True, exist_ok=True)
            connection = sqlite3.connect(self.db_path)
            connection.row_factory = sqlite3.Row
            self.connection = connection
        return self.connection

    def ensure_schema(self) -> None:
        """Create the table if it does not exist."""
        try:
            connection = self._connect()
            connection.execute(
                """
                CREATE TABLE IF NOT EXISTS kv_store (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL,
                    updated_at TIMESTAMP NOT NULL DEFAULT CURRENT_TIMESTAMP
                );
                """
            )
            connection.commit()
        except (OSError, sqlite3.Error) as e:
            raise StorageLoadError(f"Could not open {self.db_path}: {e}") from e

    def read(self, key: str) -> Optional[str]:
        try:
            row = self._connect().execute(
                "SELECT value FROM kv_store WHERE key = ?;", (key,)
            ).fetchone()
        except (OSError, sqlite3.Error) as e:
            raise StorageLoadError(f"Could not read '{key}' from {self.db_path}: {e}") from e
        return row["value"] if row else None

    def write(self, key: str, value: str) -> None:
        try:
            connection = self._connect()
            connection.execute(
                """
                INSERT INTO kv_store(key, value, updated_at)
                VALUES (?, ?, CURRENT_TIMESTAMP)
                ON CONFLICT(key) DO UPDATE SET
                    value = excluded.value,
                    updated_at = excluded.updated_at;
                """,
                (key, value),
            )
            connection.commit()
        except (OSError, sqlite3.Error) as e:
            if self.connection is not None:
                self.connection.rollback()
            raise StorageWriteError(f"Could not write '{key}' to {self.db_path}: {e}") from e

    def close(self) -> None:
        if self.connection is not None:
            self.connection.close()
            self.connection = None
