"""Module: memory_preferences.py

Date: 2026-10-19

Dict-backed KeyValueStoreProtocol implementation.
Used for ephemeral sessions and as a test double; ``fail_writes`` makes
every put report failure without changing stored data.
"""

from typing import Any

from selectlist.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


class MemoryPreferences:
    """In-process preferences with the same read/write contract as PreferencesStore."""

    def __init__(self, initial: dict[str, Any] | None = None):
        self._data: dict[str, Any] = {}
        self.fail_writes = False
        self.write_count = 0
        for key, value in (initial or {}).items():
            self._data[key] = set(value) if isinstance(value, set | frozenset) else value

    def _put(self, key: str, value: Any) -> bool:
        if self.fail_writes:
            logger.warning("[MemoryPreferences] Write to '%s' rejected", key)
            return False
        self._data[key] = value
        self.write_count += 1
        return True

    def get_string(self, key: str) -> str | None:
        value = self._data.get(key)
        return value if isinstance(value, str) else None

    def put_string(self, key: str, value: str) -> bool:
        return self._put(key, str(value))

    def get_string_set(self, key: str) -> set[str] | None:
        value = self._data.get(key)
        return set(value) if isinstance(value, set) else None

    def put_string_set(self, key: str, values: set[str] | frozenset[str]) -> bool:
        return self._put(key, {str(v) for v in values})

    def get_int(self, key: str, default: int) -> int:
        value = self._data.get(key)
        if isinstance(value, bool) or not isinstance(value, int):
            return default
        return value

    def put_int(self, key: str, value: int) -> bool:
        return self._put(key, int(value))

    def contains(self, key: str) -> bool:
        return key in self._data

    def snapshot(self) -> dict[str, Any]:
        """Copy of the raw stored values, for inspection in tests."""
        return {k: set(v) if isinstance(v, set) else v for k, v in self._data.items()}
