"""
Module: selection_store.py

Date: 2026-10-19

Selectable-list store - owns the item list and the current selection.

The store loads (or seeds) the item list once, restores the previous
selection, and from then on changes selection only through
``toggle_selection``. Every change is written to the backing store before
it is published, so subscribers never see a selection that is not durable.

Features:
- SINGLE mode (picking an item sets it) and MULTI mode (picking flips it)
- Observable ``items`` and ``selection`` channels with late-subscriber delivery
- Stale selection ids from a previous item list are dropped on load
- Write failures surface as PersistenceError plus a ``persistence_failed`` signal
"""

import threading

from selectlist.config import (
    DEFAULT_ITEM_COUNT,
    ITEMS_KEY,
    NO_SELECTION_ID,
    SELECTED_ID_KEY,
    SELECTED_IDS_KEY,
)
from selectlist.core.errors import (
    ItemListFormatError,
    PersistenceError,
    StoreDisposedError,
    UnknownItemError,
)
from selectlist.core.observable import ObservableValue
from selectlist.core.pyqt_imports import QObject, pyqtSignal
from selectlist.core.serialization import (
    deserialize_items,
    deserialize_selection_set,
    deserialize_single_selection,
    serialize_items,
    serialize_selection_set,
    serialize_single_selection,
)
from selectlist.models.item import Item, default_items
from selectlist.models.selection_mode import SelectionMode
from selectlist.services.interfaces import KeyValueStoreProtocol
from selectlist.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


class SelectableListStore(QObject):
    """
    Item list plus persisted selection, exposed as observables.

    Presentation layers subscribe to ``items`` and ``selection`` and forward
    user picks to ``toggle_selection``; they never modify state directly.
    Snapshots are immutable: a tuple of Item and a frozenset of ids.

    Signals:
        persistence_failed: Emitted with the backing-store key whose write failed
    """

    persistence_failed = pyqtSignal(str)

    def __init__(
        self,
        preferences: KeyValueStoreProtocol,
        mode: SelectionMode | str = SelectionMode.MULTI,
        *,
        item_count: int = DEFAULT_ITEM_COUNT,
        parent: QObject | None = None,
    ):
        """
        Load state from ``preferences``, seeding defaults where needed.

        Args:
            preferences: Backing store for the item list and selection
            mode: Selection cardinality
            item_count: Number of items to seed when no valid list is stored
            parent: Optional Qt parent
        """
        super().__init__(parent)

        if not isinstance(preferences, KeyValueStoreProtocol):
            raise TypeError(
                f"preferences must implement KeyValueStoreProtocol, got {type(preferences).__name__}"
            )
        if item_count < 0:
            raise ValueError(f"item_count must be >= 0, got {item_count}")

        self._preferences = preferences
        self._mode = SelectionMode.parse(mode)
        self._item_count = item_count
        self._lock = threading.RLock()
        self._disposed = False

        self.items = ObservableValue((), name="items", parent=self)
        self.selection = ObservableValue(frozenset(), name="selection", parent=self)

        items = self._load_items()
        self._items_by_id: dict[int, Item] = {item.id: item for item in items}
        self.items.publish(tuple(items))

        self.selection.publish(frozenset(self._load_selection()))

        logger.info(
            "[SelectableListStore] Ready: %d items, %d selected (%s mode)",
            len(items),
            len(self.selection.value()),
            self._mode.value,
        )

    # =====================================
    # Loading
    # =====================================

    def _load_items(self) -> list[Item]:
        """Decode the stored item list, or seed and persist the default one."""
        raw = self._preferences.get_string(ITEMS_KEY)
        if raw is not None:
            try:
                return deserialize_items(raw)
            except ItemListFormatError as e:
                logger.warning("[SelectableListStore] Stored item list unusable, re-seeding: %s", e)
        else:
            logger.debug("[SelectableListStore] No stored item list, seeding defaults")

        items = default_items(self._item_count)
        if not self._preferences.put_string(ITEMS_KEY, serialize_items(items)):
            logger.error("[SelectableListStore] Failed to persist seeded item list")
        return items

    def _load_selection(self) -> set[int]:
        """Restore the previous selection, dropping ids that no longer exist."""
        if self._mode is SelectionMode.SINGLE:
            stored = self._preferences.get_int(SELECTED_ID_KEY, NO_SELECTION_ID)
            ids = deserialize_single_selection(stored)
        else:
            stored = self._preferences.get_string_set(SELECTED_IDS_KEY)
            ids = deserialize_selection_set(stored) if stored is not None else set()

        valid = {item_id for item_id in ids if item_id in self._items_by_id}
        if valid != ids:
            logger.warning(
                "[SelectableListStore] Dropping stale selection ids: %s",
                sorted(ids - valid),
            )
            if not self._write_selection(valid):
                logger.error("[SelectableListStore] Failed to persist filtered selection")
        return valid

    # =====================================
    # Mutation
    # =====================================

    def toggle_selection(self, item_id: int) -> None:
        """
        Apply a user pick to the selection, persist it, then publish it.

        MULTI mode adds the id if absent and removes it if present.
        SINGLE mode replaces the selection with ``{item_id}``; picking the
        selected item again keeps it selected.

        Args:
            item_id: Id of the picked item

        Raises:
            UnknownItemError: If no item has this id
            PersistenceError: If the backing store rejected the write; the
                selection is left at its previous value
            StoreDisposedError: If the store was disposed
        """
        if isinstance(item_id, bool) or not isinstance(item_id, int):
            raise TypeError(f"item_id must be an int, got {type(item_id).__name__}")

        with self._lock:
            if self._disposed:
                raise StoreDisposedError("Store has been disposed")
            if item_id not in self._items_by_id:
                raise UnknownItemError(item_id)

            current = self.selection.value()
            if self._mode is SelectionMode.SINGLE:
                updated = frozenset({item_id})
            elif item_id in current:
                updated = current - {item_id}
            else:
                updated = current | {item_id}

            if not self._write_selection(updated):
                key = self._selection_key()
                logger.error(
                    "[SelectableListStore] Selection not saved, keeping %s",
                    sorted(current),
                )
                self.persistence_failed.emit(key)
                raise PersistenceError(key, f"Selection could not be saved ({key})")

            logger.debug(
                "[SelectableListStore] Selection %s -> %s",
                sorted(current),
                sorted(updated),
                extra={"dev_only": True},
            )
            self.selection.publish(updated)

    def _selection_key(self) -> str:
        return SELECTED_ID_KEY if self._mode is SelectionMode.SINGLE else SELECTED_IDS_KEY

    def _write_selection(self, ids: set[int] | frozenset[int]) -> bool:
        if self._mode is SelectionMode.SINGLE:
            return self._preferences.put_int(SELECTED_ID_KEY, serialize_single_selection(ids))
        return self._preferences.put_string_set(SELECTED_IDS_KEY, serialize_selection_set(ids))

    # =====================================
    # State Queries
    # =====================================

    @property
    def mode(self) -> SelectionMode:
        return self._mode

    def get_item(self, item_id: int) -> Item | None:
        return self._items_by_id.get(item_id)

    def is_selected(self, item_id: int) -> bool:
        return item_id in self.selection.value()

    def selected_id(self) -> int | None:
        """The selected id in SINGLE mode; the lowest selected id in MULTI mode."""
        current = self.selection.value()
        return min(current) if current else None

    def selected_items(self) -> tuple[Item, ...]:
        """Selected items in display order."""
        current = self.selection.value()
        return tuple(item for item in self.items.value() if item.id in current)

    def item_count(self) -> int:
        return len(self._items_by_id)

    def selection_count(self) -> int:
        return len(self.selection.value())

    @property
    def is_disposed(self) -> bool:
        return self._disposed

    # =====================================
    # Cleanup
    # =====================================

    def dispose(self) -> None:
        """Release all subscribers. Further toggles raise StoreDisposedError."""
        with self._lock:
            if self._disposed:
                return
            self._disposed = True
            self.items.clear_subscribers()
            self.selection.clear_subscribers()

        logger.debug("[SelectableListStore] Disposed", extra={"dev_only": True})
