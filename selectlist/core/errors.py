"""Module: errors.py

Date: 2026-10-19

Exceptions raised by the selectable-list store.
"""


class SelectListError(Exception):
    """Base class for store errors."""


class UnknownItemError(SelectListError, ValueError):
    """Raised when a selection targets an id that is not in the item list."""

    def __init__(self, item_id: int):
        super().__init__(f"No item with id {item_id}")
        self.item_id = item_id


class PersistenceError(SelectListError):
    """Raised when the backing store rejects a write."""

    def __init__(self, key: str, message: str | None = None):
        super().__init__(message or f"Failed to persist '{key}'")
        self.key = key


class StoreDisposedError(SelectListError, RuntimeError):
    """Raised when a disposed store is asked to mutate state."""


class ItemListFormatError(SelectListError, ValueError):
    """Raised when a stored item list cannot be decoded."""
