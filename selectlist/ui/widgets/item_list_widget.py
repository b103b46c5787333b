"""
Module: item_list_widget.py

Date: 2026-10-19

List widget that renders store snapshots and forwards clicks.

The widget keeps no selection state of its own: it repaints whenever the
store publishes and turns row clicks into ``toggle_selection`` calls.
"""

from selectlist.config import SELECTED_ROW_COLOR, UNSELECTED_ROW_COLOR
from selectlist.core.errors import PersistenceError
from selectlist.core.pyqt_imports import (
    QBrush,
    QColor,
    QListWidget,
    QListWidgetItem,
    Qt,
    pyqtSignal,
)
from selectlist.core.selection_store import SelectableListStore
from selectlist.models.item import Item
from selectlist.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


class ItemListWidget(QListWidget):
    """Rows of ``name`` / ``Item ID`` with selected rows shaded.

    Signals:
        selection_error: Emitted with a user-facing message when a pick
            could not be saved
    """

    selection_error = pyqtSignal(str)

    def __init__(self, store: SelectableListStore, parent=None):
        super().__init__(parent)
        self._store = store
        self._selected: frozenset[int] = frozenset()

        # Highlighting comes from the store, not from Qt's own selection
        self.setSelectionMode(QListWidget.NoSelection)
        self.itemClicked.connect(self._on_item_clicked)

        store.items.subscribe(self._render_items)
        store.selection.subscribe(self._render_selection)

    def _render_items(self, items: tuple[Item, ...]) -> None:
        self.clear()
        for item in items:
            row = QListWidgetItem(f"{item.name}\nItem ID : {item.id}")
            row.setData(Qt.UserRole, item.id)
            self.addItem(row)
        self._render_selection(self._store.selection.value())

    def _render_selection(self, selected: frozenset[int]) -> None:
        self._selected = selected
        selected_brush = QBrush(QColor(SELECTED_ROW_COLOR))
        unselected_brush = QBrush(QColor(UNSELECTED_ROW_COLOR))
        for row in range(self.count()):
            list_item = self.item(row)
            is_selected = list_item.data(Qt.UserRole) in selected
            list_item.setBackground(selected_brush if is_selected else unselected_brush)

    def _on_item_clicked(self, list_item: QListWidgetItem) -> None:
        item_id = list_item.data(Qt.UserRole)
        try:
            self._store.toggle_selection(item_id)
        except PersistenceError as e:
            logger.warning("[ItemListWidget] Pick of item %s not saved: %s", item_id, e)
            self.selection_error.emit("Selection could not be saved")

    def is_row_highlighted(self, row: int) -> bool:
        list_item = self.item(row)
        return list_item is not None and list_item.data(Qt.UserRole) in self._selected

    def detach(self) -> None:
        """Stop listening to the store."""
        self._store.items.unsubscribe(self._render_items)
        self._store.selection.unsubscribe(self._render_selection)
