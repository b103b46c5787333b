"""Data models: list items and selection mode."""

from selectlist.models.item import Item
from selectlist.models.selection_mode import SelectionMode

__all__ = ["Item", "SelectionMode"]
