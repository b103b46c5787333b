"""Backing-store implementations."""

from selectlist.infra.memory_preferences import MemoryPreferences

__all__ = ["MemoryPreferences"]
