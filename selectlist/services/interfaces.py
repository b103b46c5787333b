"""
Service protocol definitions for selectlist.

Date: 2026-10-19

Protocol classes describing the collaborators the store depends on. Using
Protocols allows structural subtyping, so any object with the right methods
(the SQLite preferences store, the in-memory store, a test double) can back
the store without inheriting from anything.

All protocols are runtime-checkable, meaning isinstance() works with them.

Usage:
    from selectlist.services.interfaces import KeyValueStoreProtocol

    class DictPreferences:
        def get_string(self, key: str) -> str | None: ...
        ...

    prefs: KeyValueStoreProtocol = DictPreferences()
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

__all__ = [
    "KeyValueStoreProtocol",
]


@runtime_checkable
class KeyValueStoreProtocol(Protocol):
    """Durable, synchronous string-keyed store.

    Reads return ``None`` (or the supplied default) for absent keys. Writes
    return True once the value is durable and False when it could not be
    stored; implementations do not raise for storage failures.
    """

    def get_string(self, key: str) -> str | None:
        """Return the string stored under ``key`` or None."""
        ...

    def put_string(self, key: str, value: str) -> bool:
        """Store a string value."""
        ...

    def get_string_set(self, key: str) -> set[str] | None:
        """Return a copy of the string set stored under ``key`` or None."""
        ...

    def put_string_set(self, key: str, values: set[str] | frozenset[str]) -> bool:
        """Store a set of strings, replacing any previous value."""
        ...

    def get_int(self, key: str, default: int) -> int:
        """Return the integer stored under ``key`` or ``default``."""
        ...

    def put_int(self, key: str, value: int) -> bool:
        """Store an integer value."""
        ...
