"""Tests for ItemListWidget and MainWindow.

Date: 2026-10-19
"""

import pytest

from selectlist.config import SELECTED_ROW_COLOR, UNSELECTED_ROW_COLOR
from selectlist.core.pyqt_imports import QColor, Qt
from selectlist.core.selection_store import SelectableListStore
from selectlist.infra.memory_preferences import MemoryPreferences
from selectlist.models.selection_mode import SelectionMode
from selectlist.ui.main_window import MainWindow
from selectlist.ui.widgets.item_list_widget import ItemListWidget

pytestmark = pytest.mark.gui


@pytest.fixture
def store():
    return SelectableListStore(MemoryPreferences(), SelectionMode.MULTI, item_count=5)


def _click_row(qtbot, widget, row):
    rect = widget.visualItemRect(widget.item(row))
    qtbot.mouseClick(widget.viewport(), Qt.LeftButton, pos=rect.center())


class TestItemListWidget:
    def test_renders_items(self, qtbot, store):
        widget = ItemListWidget(store)
        qtbot.addWidget(widget)

        assert widget.count() == 5
        assert widget.item(0).text() == "Item 1\nItem ID : 0"
        assert widget.item(4).data(Qt.UserRole) == 4

    def test_renders_restored_selection(self, qtbot, store):
        store.toggle_selection(2)
        widget = ItemListWidget(store)
        qtbot.addWidget(widget)

        assert widget.is_row_highlighted(2)
        assert widget.item(2).background().color() == QColor(SELECTED_ROW_COLOR)
        assert widget.item(1).background().color() == QColor(UNSELECTED_ROW_COLOR)

    def test_store_changes_repaint(self, qtbot, store):
        widget = ItemListWidget(store)
        qtbot.addWidget(widget)

        store.toggle_selection(3)
        assert widget.is_row_highlighted(3)

        store.toggle_selection(3)
        assert not widget.is_row_highlighted(3)

    def test_click_toggles_selection(self, qtbot, store):
        widget = ItemListWidget(store)
        qtbot.addWidget(widget)
        widget.show()
        qtbot.waitExposed(widget)

        _click_row(qtbot, widget, 1)

        assert store.selection.value() == frozenset({1})
        assert widget.is_row_highlighted(1)

    def test_save_failure_emits_error(self, qtbot):
        prefs = MemoryPreferences()
        store = SelectableListStore(prefs, item_count=3)
        widget = ItemListWidget(store)
        qtbot.addWidget(widget)
        prefs.fail_writes = True

        with qtbot.waitSignal(widget.selection_error, timeout=1000):
            widget.itemClicked.emit(widget.item(0))

        assert store.selection.value() == frozenset()
        assert not widget.is_row_highlighted(0)

    def test_detach(self, qtbot, store):
        widget = ItemListWidget(store)
        qtbot.addWidget(widget)
        widget.detach()

        store.toggle_selection(0)

        assert not widget.is_row_highlighted(0)
        assert store.selection.subscriber_count() == 0


class TestMainWindow:
    def test_status_shows_selection_count(self, qtbot, store):
        window = MainWindow(store)
        qtbot.addWidget(window)

        store.toggle_selection(0)
        store.toggle_selection(4)

        assert window.statusBar().currentMessage() == "2 of 5 selected"

    def test_close_unsubscribes(self, qtbot, store):
        window = MainWindow(store)
        qtbot.addWidget(window)
        window.show()

        window.close()

        assert store.items.subscriber_count() == 0
        assert store.selection.subscriber_count() == 0
