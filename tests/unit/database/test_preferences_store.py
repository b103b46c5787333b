"""Unit tests for PreferencesStore.

Date: 2026-10-19

Tests for the SQLite key-value backing store.
"""

import sqlite3
import threading

from selectlist.infra.db.preferences_store import PreferencesStore


class TestPreferencesStore:
    """Test suite for PreferencesStore."""

    def test_put_and_get_string(self, sqlite_prefs):
        assert sqlite_prefs.put_string("name", "value")
        assert sqlite_prefs.get_string("name") == "value"

    def test_put_and_get_int(self, sqlite_prefs):
        assert sqlite_prefs.put_int("count", 42)
        result = sqlite_prefs.get_int("count", 0)
        assert result == 42
        assert isinstance(result, int)

    def test_negative_int(self, sqlite_prefs):
        assert sqlite_prefs.put_int("selected", -1)
        assert sqlite_prefs.get_int("selected", 0) == -1

    def test_put_and_get_string_set(self, sqlite_prefs):
        assert sqlite_prefs.put_string_set("ids", {"3", "1", "20"})
        assert sqlite_prefs.get_string_set("ids") == {"1", "3", "20"}

    def test_empty_string_set(self, sqlite_prefs):
        assert sqlite_prefs.put_string_set("ids", set())
        assert sqlite_prefs.get_string_set("ids") == set()

    def test_absent_keys(self, sqlite_prefs):
        assert sqlite_prefs.get_string("missing") is None
        assert sqlite_prefs.get_string_set("missing") is None
        assert sqlite_prefs.get_int("missing", 7) == 7

    def test_type_mismatch_reads_as_absent(self, sqlite_prefs):
        sqlite_prefs.put_int("key", 5)
        assert sqlite_prefs.get_string("key") is None
        assert sqlite_prefs.get_string_set("key") is None

        sqlite_prefs.put_string("other", "5")
        assert sqlite_prefs.get_int("other", -1) == -1

    def test_overwrite_replaces_type(self, sqlite_prefs):
        sqlite_prefs.put_string("key", "text")
        sqlite_prefs.put_int("key", 3)
        assert sqlite_prefs.get_int("key", 0) == 3
        assert sqlite_prefs.get_string("key") is None

    def test_corrupt_string_set_reads_as_absent(self, sqlite_prefs, memory_db):
        memory_db.execute(
            "INSERT INTO preferences (key, value, value_type, updated_at) VALUES (?, ?, ?, ?)",
            ("ids", "[not json", "string_set", "2026-01-01T00:00:00"),
        )
        memory_db.commit()
        assert sqlite_prefs.get_string_set("ids") is None

    def test_non_numeric_int_row_returns_default(self, sqlite_prefs, memory_db):
        memory_db.execute(
            "INSERT INTO preferences (key, value, value_type, updated_at) VALUES (?, ?, ?, ?)",
            ("n", "seven", "int", "2026-01-01T00:00:00"),
        )
        memory_db.commit()
        assert sqlite_prefs.get_int("n", 11) == 11

    def test_contains_and_remove(self, sqlite_prefs):
        assert not sqlite_prefs.contains("key")
        sqlite_prefs.put_string("key", "v")
        assert sqlite_prefs.contains("key")
        assert sqlite_prefs.remove("key")
        assert not sqlite_prefs.contains("key")
        assert not sqlite_prefs.remove("key")

    def test_clear(self, sqlite_prefs):
        sqlite_prefs.put_string("a", "1")
        sqlite_prefs.put_int("b", 2)
        assert sqlite_prefs.clear()
        assert not sqlite_prefs.contains("a")
        assert not sqlite_prefs.contains("b")

    def test_default_write_lock(self, memory_db):
        store = PreferencesStore(memory_db)
        assert store.put_int("n", 3)
        assert store.get_int("n", 0) == 3

    def test_write_on_closed_connection_returns_false(self):
        conn = sqlite3.connect(":memory:")
        store = PreferencesStore(conn, threading.RLock())
        conn.close()

        assert not store.put_string("key", "value")
        assert not store.put_string_set("ids", {"1"})
        assert not store.put_int("n", 1)
        assert store.get_string("key") is None

    def test_values_survive_reopen(self, db_path):
        store = PreferencesStore.open(db_path)
        store.put_string("ItemList", "[]")
        store.put_string_set("SelectedIds", {"7"})
        store.close()

        reopened = PreferencesStore.open(db_path)
        assert reopened.get_string("ItemList") == "[]"
        assert reopened.get_string_set("SelectedIds") == {"7"}
        reopened.close()
