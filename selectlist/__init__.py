"""selectlist - a persisted, observable list-selection store.

Public API:
    SelectableListStore: the store itself
    open_session: build a store over the SQLite backing store
    Item, SelectionMode: data model
"""

from selectlist.config import APP_VERSION
from selectlist.core.errors import (
    PersistenceError,
    SelectListError,
    StoreDisposedError,
    UnknownItemError,
)
from selectlist.core.selection_store import SelectableListStore
from selectlist.core.session import StoreSession, open_session
from selectlist.models import Item, SelectionMode

__version__ = APP_VERSION

__all__ = [
    "Item",
    "PersistenceError",
    "SelectListError",
    "SelectableListStore",
    "SelectionMode",
    "StoreDisposedError",
    "StoreSession",
    "UnknownItemError",
    "open_session",
]
