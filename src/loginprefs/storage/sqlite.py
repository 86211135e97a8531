"""SqlitePreferences — SQLite-based preference storage."""

from __future__ import annotations

import json
import logging
import sqlite3
from pathlib import Path  # noqa: TC003

from loginprefs.core.exceptions import StorageError
from loginprefs.storage.base import Preferences, Value

logger = logging.getLogger(__name__)

_CREATE_TABLE = """\
CREATE TABLE IF NOT EXISTS prefs (
    key   TEXT PRIMARY KEY,
    value TEXT NOT NULL
);
"""

_UPSERT = """\
INSERT INTO prefs (key, value) VALUES (?, ?)
ON CONFLICT(key) DO UPDATE SET value=excluded.value
"""


class SqlitePreferences(Preferences):
    """SQLite-backed preferences. Values are stored JSON-encoded."""

    def __init__(self, db_path: Path) -> None:
        """Open or create the SQLite database at *db_path*."""
        self._path = db_path
        conn: sqlite3.Connection | None = None
        try:
            db_path.parent.mkdir(parents=True, exist_ok=True)
            conn = sqlite3.connect(str(db_path))
            conn.execute("PRAGMA journal_mode=WAL;")
            conn.execute(_CREATE_TABLE)
            conn.commit()
        except (sqlite3.Error, OSError) as exc:
            if conn is not None:
                conn.close()
            msg = f"Failed to open database: {db_path}"
            raise StorageError(msg) from exc
        self._conn = conn
        logger.debug("Opened preferences database %s", db_path)

    def _read(self, key: str) -> str | bool | None:
        try:
            row = self._conn.execute(
                "SELECT value FROM prefs WHERE key=?",
                (key,),
            ).fetchone()
        except sqlite3.Error as exc:
            msg = f"read failed: {exc}"
            raise StorageError(msg, key=key) from exc
        if row is None:
            return None
        try:
            value = json.loads(row[0])
        except json.JSONDecodeError as exc:
            msg = "Corrupt stored value"
            raise StorageError(msg, key=key) from exc
        if not isinstance(value, (str, bool)):
            msg = f"Unsupported stored type {type(value).__name__}"
            raise StorageError(msg, key=key)
        return value

    def _apply(self, *, clear: bool, changes: dict[str, Value]) -> None:
        try:
            with self._conn:
                if clear:
                    self._conn.execute("DELETE FROM prefs")
                for key, value in changes.items():
                    if value is None:
                        self._conn.execute("DELETE FROM prefs WHERE key=?", (key,))
                    else:
                        self._conn.execute(_UPSERT, (key, json.dumps(value)))
        except sqlite3.Error as exc:
            msg = f"apply failed: {exc}"
            raise StorageError(msg) from exc

    def keys(self) -> list[str]:
        try:
            rows = self._conn.execute("SELECT key FROM prefs ORDER BY key").fetchall()
        except sqlite3.Error as exc:
            msg = f"keys failed: {exc}"
            raise StorageError(msg) from exc
        return [r[0] for r in rows]

    def close(self) -> None:
        """Close the database connection."""
        self._conn.close()
