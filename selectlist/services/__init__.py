"""Service protocols consumed by the store."""

from selectlist.services.interfaces import KeyValueStoreProtocol

__all__ = ["KeyValueStoreProtocol"]
