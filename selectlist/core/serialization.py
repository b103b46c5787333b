"""Module: serialization.py

Date: 2026-10-19

Conversion between store state and the values kept in the backing store.

- Item list: JSON array of {"id", "name"} objects in display order.
- MULTI selection: set of decimal strings.
- SINGLE selection: one integer, NO_SELECTION_ID when empty.

Item lists are all-or-nothing: any defect raises ItemListFormatError.
Selection values are decoded entry by entry and malformed entries are skipped.
"""

import json
import re
from collections.abc import Iterable

from selectlist.config import NO_SELECTION_ID
from selectlist.core.errors import ItemListFormatError
from selectlist.models.item import Item
from selectlist.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)

_DECIMAL_RE = re.compile(r"[+-]?[0-9]+")


def serialize_items(items: Iterable[Item]) -> str:
    return json.dumps([item.to_dict() for item in items], ensure_ascii=False)


def deserialize_items(text: str) -> list[Item]:
    """Decode a stored item list.

    Raises:
        ItemListFormatError: On invalid JSON, a non-list payload, a malformed
            entry or duplicate ids
    """
    try:
        raw = json.loads(text)
    except (TypeError, json.JSONDecodeError) as e:
        raise ItemListFormatError(f"Item list is not valid JSON: {e}") from e

    if not isinstance(raw, list):
        raise ItemListFormatError(f"Item list must be a JSON array, got {type(raw).__name__}")

    items: list[Item] = []
    seen: set[int] = set()
    for index, entry in enumerate(raw):
        if not isinstance(entry, dict):
            raise ItemListFormatError(f"Entry {index} is not an object")
        try:
            item = Item.from_dict(entry)
        except ValueError as e:
            raise ItemListFormatError(f"Entry {index}: {e}") from e
        if item.id in seen:
            raise ItemListFormatError(f"Duplicate item id {item.id}")
        seen.add(item.id)
        items.append(item)

    return items


def parse_item_id(text: str) -> int | None:
    """Parse a decimal id, or None if ``text`` is not a plain decimal integer."""
    if not isinstance(text, str) or not _DECIMAL_RE.fullmatch(text):
        return None
    return int(text)


def serialize_selection_set(ids: Iterable[int]) -> set[str]:
    return {str(item_id) for item_id in ids}


def deserialize_selection_set(values: Iterable[str]) -> set[int]:
    ids: set[int] = set()
    for value in values:
        item_id = parse_item_id(value)
        if item_id is None:
            logger.debug("[serialization] Skipping malformed selection entry %r", value)
            continue
        ids.add(item_id)
    return ids


def serialize_single_selection(ids: Iterable[int]) -> int:
    """Collapse a selection of at most one id to the stored integer form."""
    ids = list(ids)
    if len(ids) > 1:
        raise ValueError(f"Single selection holds {len(ids)} ids")
    return ids[0] if ids else NO_SELECTION_ID


def deserialize_single_selection(value: int) -> set[int]:
    return set() if value == NO_SELECTION_ID else {value}
