"""SQLite-backed persistence."""

from selectlist.infra.db.preferences_store import PreferencesStore

__all__ = ["PreferencesStore"]
