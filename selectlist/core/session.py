"""Module: session.py

Date: 2026-10-19

Explicit construction of a store and its SQLite backing store.

The caller opens a session once, keeps it for as long as the list is shown,
and closes it when done; there is no global store instance.

Usage:
    with open_session() as session:
        session.store.selection.subscribe(render)
        session.store.toggle_selection(3)
"""

from pathlib import Path

from selectlist.core.selection_store import SelectableListStore
from selectlist.infra.db.preferences_store import PreferencesStore
from selectlist.models.selection_mode import SelectionMode
from selectlist.utils.logging.logger_factory import get_cached_logger
from selectlist.utils.paths import AppPaths
from selectlist.utils.shared.json_config_manager import load_store_settings

logger = get_cached_logger(__name__)


class StoreSession:
    """Owns a PreferencesStore and the SelectableListStore built on it."""

    def __init__(self, preferences: PreferencesStore, store: SelectableListStore):
        self.preferences = preferences
        self.store = store
        self._closed = False

    def close(self) -> None:
        """Dispose the store, then close the database connection."""
        if self._closed:
            return
        self._closed = True
        self.store.dispose()
        self.preferences.close()
        logger.info("[StoreSession] Closed")

    @property
    def closed(self) -> bool:
        return self._closed

    def __enter__(self) -> "StoreSession":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def open_session(
    db_path: str | Path | None = None,
    mode: SelectionMode | str | None = None,
    item_count: int | None = None,
    *,
    config_dir: str | Path | None = None,
) -> StoreSession:
    """Open the backing store and build a store from it.

    Arguments left as None come from the ``store`` settings category
    (config.json), and an empty database path falls back to AppPaths.
    """
    settings = load_store_settings(config_dir)

    if db_path is None:
        db_path = settings.get("database_path") or AppPaths.get_database_path()
    if mode is None:
        mode = settings.get("mode")
    if item_count is None:
        item_count = settings.get("item_count")

    preferences = PreferencesStore.open(db_path)
    try:
        store = SelectableListStore(preferences, mode, item_count=item_count)
    except (TypeError, ValueError):
        preferences.close()
        raise

    logger.info("[StoreSession] Opened %s (%s mode)", db_path, store.mode.value)
    return StoreSession(preferences, store)
