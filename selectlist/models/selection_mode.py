"""Module: selection_mode.py

Date: 2026-10-19

Selection cardinality of the store.
"""

from enum import Enum


class SelectionMode(Enum):
    """How ``toggle_selection`` treats the picked item.

    SINGLE: at most one id selected; picking an item sets it (never clears)
    MULTI: any number of ids; picking an item flips its membership
    """

    SINGLE = "single"
    MULTI = "multi"

    @classmethod
    def parse(cls, value: "str | SelectionMode") -> "SelectionMode":
        """Accept an enum member or its case-insensitive value."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"Unknown selection mode: {value!r}") from None
