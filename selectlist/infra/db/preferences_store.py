"""Module: preferences_store.py

Date: 2026-10-19

SQLite key-value storage for the selectable-list store.

Values are kept in a single ``preferences`` table together with their type
tag, so a string, an integer and a string set can never be confused on read:

- string: stored verbatim
- int: decimal text
- string_set: JSON array of strings, sorted for stable output

Every write is committed before the call returns. Storage errors are logged
and reported through the return value (False / default), never raised.
"""

import json
import sqlite3
import threading
from datetime import datetime
from pathlib import Path

from selectlist.config import PREFERENCES_TABLE
from selectlist.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)

TYPE_STRING = "string"
TYPE_INT = "int"
TYPE_STRING_SET = "string_set"


class PreferencesStore:
    """Typed key-value preferences stored in SQLite.

    Implements KeyValueStoreProtocol.
    """

    def __init__(
        self,
        connection: sqlite3.Connection,
        write_lock: "threading.RLock | None" = None,
    ):
        """Initialize PreferencesStore with a database connection.

        Args:
            connection: Active SQLite database connection
            write_lock: Lock for thread-safe database access

        """
        self.connection = connection
        self._write_lock = write_lock or threading.RLock()
        self._ensure_table()

    @classmethod
    def open(cls, db_path: str | Path) -> "PreferencesStore":
        """Open (or create) a preferences database file.

        ``":memory:"`` gives a private, non-durable database.
        """
        if str(db_path) != ":memory:":
            Path(db_path).parent.mkdir(parents=True, exist_ok=True)
        connection = sqlite3.connect(str(db_path), check_same_thread=False)
        logger.info("[PreferencesStore] Opened %s", db_path, extra={"dev_only": True})
        return cls(connection)

    def close(self) -> None:
        with self._write_lock:
            self.connection.close()
        logger.debug("[PreferencesStore] Connection closed")

    def _ensure_table(self) -> None:
        """Create the preferences table if it doesn't exist."""
        try:
            with self._write_lock:
                self.connection.execute(f"""
                    CREATE TABLE IF NOT EXISTS {PREFERENCES_TABLE} (
                        key TEXT PRIMARY KEY,
                        value TEXT NOT NULL,
                        value_type TEXT NOT NULL DEFAULT '{TYPE_STRING}',
                        updated_at TEXT NOT NULL
                    )
                """)
                self.connection.commit()
                logger.debug("[PreferencesStore] Table ensured")
        except sqlite3.Error as e:
            logger.error("[PreferencesStore] Failed to create table: %s", e)

    # =====================================
    # Low-level access
    # =====================================

    def _read(self, key: str, expected_type: str) -> str | None:
        """Return the raw value for ``key`` if it exists with ``expected_type``."""
        try:
            cursor = self.connection.execute(
                f"SELECT value, value_type FROM {PREFERENCES_TABLE} WHERE key = ?", (key,)
            )
            row = cursor.fetchone()
        except sqlite3.Error as e:
            logger.error("[PreferencesStore] Failed to get key '%s': %s", key, e)
            return None

        if row is None:
            return None

        value, value_type = row
        if value_type != expected_type:
            logger.warning(
                "[PreferencesStore] Key '%s' holds %s, expected %s",
                key,
                value_type,
                expected_type,
            )
            return None
        return value

    def _write(self, key: str, serialized: str, value_type: str) -> bool:
        timestamp = datetime.now().isoformat()
        try:
            with self._write_lock:
                self.connection.execute(
                    f"""
                    INSERT OR REPLACE INTO {PREFERENCES_TABLE} (key, value, value_type, updated_at)
                    VALUES (?, ?, ?, ?)
                """,
                    (key, serialized, value_type, timestamp),
                )
                self.connection.commit()
        except sqlite3.Error as e:
            logger.error("[PreferencesStore] Failed to set key '%s': %s", key, e)
            return False

        logger.debug(
            "[PreferencesStore] Set '%s' = %s (type: %s)",
            key,
            serialized[:50] + "..." if len(serialized) > 50 else serialized,
            value_type,
        )
        return True

    # =====================================
    # KeyValueStoreProtocol
    # =====================================

    def get_string(self, key: str) -> str | None:
        return self._read(key, TYPE_STRING)

    def put_string(self, key: str, value: str) -> bool:
        return self._write(key, value, TYPE_STRING)

    def get_string_set(self, key: str) -> set[str] | None:
        raw = self._read(key, TYPE_STRING_SET)
        if raw is None:
            return None

        try:
            values = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.warning("[PreferencesStore] Failed to deserialize '%s': %s", key, e)
            return None

        if not isinstance(values, list):
            logger.warning("[PreferencesStore] Key '%s' is not a JSON array", key)
            return None
        return {str(v) for v in values}

    def put_string_set(self, key: str, values: set[str] | frozenset[str]) -> bool:
        try:
            serialized = json.dumps(sorted(values), ensure_ascii=False)
        except TypeError as e:
            logger.error("[PreferencesStore] Failed to serialize '%s': %s", key, e)
            return False
        return self._write(key, serialized, TYPE_STRING_SET)

    def get_int(self, key: str, default: int) -> int:
        raw = self._read(key, TYPE_INT)
        if raw is None:
            return default
        try:
            return int(raw)
        except ValueError as e:
            logger.warning("[PreferencesStore] Failed to deserialize '%s': %s", key, e)
            return default

    def put_int(self, key: str, value: int) -> bool:
        return self._write(key, str(int(value)), TYPE_INT)

    # =====================================
    # Housekeeping
    # =====================================

    def contains(self, key: str) -> bool:
        """Check if a key exists, whatever its type."""
        try:
            cursor = self.connection.execute(
                f"SELECT 1 FROM {PREFERENCES_TABLE} WHERE key = ? LIMIT 1", (key,)
            )
            return cursor.fetchone() is not None
        except sqlite3.Error as e:
            logger.error("[PreferencesStore] Failed to check key '%s': %s", key, e)
            return False

    def remove(self, key: str) -> bool:
        """Delete a key. Returns True if something was deleted."""
        try:
            with self._write_lock:
                cursor = self.connection.execute(
                    f"DELETE FROM {PREFERENCES_TABLE} WHERE key = ?", (key,)
                )
                self.connection.commit()
                deleted = cursor.rowcount > 0
        except sqlite3.Error as e:
            logger.error("[PreferencesStore] Failed to delete key '%s': %s", key, e)
            return False

        if deleted:
            logger.debug("[PreferencesStore] Deleted key '%s'", key)
        return deleted

    def clear(self) -> bool:
        """Delete every stored preference."""
        try:
            with self._write_lock:
                self.connection.execute(f"DELETE FROM {PREFERENCES_TABLE}")
                self.connection.commit()
        except sqlite3.Error as e:
            logger.error("[PreferencesStore] Failed to clear: %s", e)
            return False

        logger.info("[PreferencesStore] Cleared all preferences")
        return True
