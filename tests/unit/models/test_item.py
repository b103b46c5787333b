"""Tests for Item and SelectionMode.

Date: 2026-10-19
"""

import dataclasses

import pytest

from selectlist.models.item import Item, default_items
from selectlist.models.selection_mode import SelectionMode


class TestItem:
    def test_is_frozen(self):
        item = Item(1, "One")
        with pytest.raises(dataclasses.FrozenInstanceError):
            item.name = "Uno"

    def test_dict_round_trip(self):
        item = Item(3, "Three")
        assert Item.from_dict(item.to_dict()) == item

    @pytest.mark.parametrize(
        "data",
        [
            {"id": "1", "name": "x"},
            {"id": False, "name": "x"},
            {"id": -1, "name": "x"},
            {"id": 1, "name": 2},
            {},
        ],
    )
    def test_from_dict_rejects_bad_fields(self, data):
        with pytest.raises(ValueError):
            Item.from_dict(data)

    def test_default_items(self):
        items = default_items(3)
        assert items == [Item(0, "Item 1"), Item(1, "Item 2"), Item(2, "Item 3")]

    def test_default_items_zero(self):
        assert default_items(0) == []


class TestSelectionMode:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("single", SelectionMode.SINGLE),
            ("MULTI", SelectionMode.MULTI),
            (" Multi ", SelectionMode.MULTI),
            (SelectionMode.SINGLE, SelectionMode.SINGLE),
        ],
    )
    def test_parse(self, value, expected):
        assert SelectionMode.parse(value) is expected

    def test_parse_unknown(self):
        with pytest.raises(ValueError):
            SelectionMode.parse("some")
