"""Tests for service protocol interfaces.

Date: 2026-10-19

Tests verify that the backing-store protocol is runtime-checkable and that
the shipped implementations satisfy it.
"""

from __future__ import annotations

from selectlist.infra.memory_preferences import MemoryPreferences
from selectlist.services.interfaces import KeyValueStoreProtocol


class TestKeyValueStoreProtocol:
    """Tests for KeyValueStoreProtocol."""

    def test_sqlite_store_is_instance(self, sqlite_prefs) -> None:
        assert isinstance(sqlite_prefs, KeyValueStoreProtocol)

    def test_memory_store_is_instance(self) -> None:
        assert isinstance(MemoryPreferences(), KeyValueStoreProtocol)

    def test_mock_implementation_is_instance(self) -> None:
        """Test that a mock class implementing the protocol is recognized."""

        class MockPreferences:
            def get_string(self, key: str) -> str | None:
                _ = key
                return None

            def put_string(self, key: str, value: str) -> bool:
                return True

            def get_string_set(self, key: str) -> set[str] | None:
                return None

            def put_string_set(self, key: str, values: set[str]) -> bool:
                return True

            def get_int(self, key: str, default: int) -> int:
                return default

            def put_int(self, key: str, value: int) -> bool:
                return True

        assert isinstance(MockPreferences(), KeyValueStoreProtocol)

    def test_incomplete_implementation_not_instance(self) -> None:
        """Test that incomplete implementation is not recognized."""

        class StringsOnly:
            def get_string(self, key: str) -> str | None:
                _ = key
                return None

            def put_string(self, key: str, value: str) -> bool:
                return True

            # Missing set and int accessors

        assert not isinstance(StringsOnly(), KeyValueStoreProtocol)
