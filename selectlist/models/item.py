"""Module: item.py

Date: 2026-10-19

Immutable list item. Items are created once at seed time (or when the
stored list is decoded) and are never modified afterwards.
"""

from dataclasses import dataclass

from selectlist.config import DEFAULT_ITEM_NAME_FORMAT


@dataclass(frozen=True, slots=True)
class Item:
    """A single entry of the selectable list.

    Attributes:
        id: Stable identifier, unique within the list
        name: Display name
    """

    id: int
    name: str

    def to_dict(self) -> dict[str, int | str]:
        return {"id": self.id, "name": self.name}

    @classmethod
    def from_dict(cls, data: dict) -> "Item":
        """Build an Item from a decoded JSON object.

        Raises:
            ValueError: If ``id`` is not a non-negative integer or ``name`` is
                not a string
        """
        item_id = data.get("id")
        name = data.get("name")
        # bool is an int subclass; reject it explicitly
        if isinstance(item_id, bool) or not isinstance(item_id, int):
            raise ValueError(f"Item id must be an integer, got {item_id!r}")
        if item_id < 0:
            # negative ids collide with the NO_SELECTION_ID sentinel
            raise ValueError(f"Item id must not be negative, got {item_id}")
        if not isinstance(name, str):
            raise ValueError(f"Item name must be a string, got {name!r}")
        return cls(item_id, name)


def default_items(count: int) -> list[Item]:
    """Seed list: ids ``0..count-1`` named ``"Item 1"`` .. ``"Item {count}"``."""
    return [Item(i, DEFAULT_ITEM_NAME_FORMAT.format(number=i + 1)) for i in range(count)]
