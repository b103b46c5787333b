"""
Module: main_window.py

Date: 2026-10-19

Main window: the item list plus a status bar showing the selection count
and save errors.
"""

from selectlist.config import (
    STATUS_MESSAGE_TIMEOUT_MS,
    WINDOW_HEIGHT,
    WINDOW_TITLE,
    WINDOW_WIDTH,
)
from selectlist.core.pyqt_imports import QMainWindow, QStatusBar
from selectlist.core.selection_store import SelectableListStore
from selectlist.ui.widgets.item_list_widget import ItemListWidget


class MainWindow(QMainWindow):
    def __init__(self, store: SelectableListStore, parent=None):
        super().__init__(parent)
        self._store = store

        self.setWindowTitle(WINDOW_TITLE)
        self.resize(WINDOW_WIDTH, WINDOW_HEIGHT)

        self.list_widget = ItemListWidget(store, self)
        self.setCentralWidget(self.list_widget)
        self.setStatusBar(QStatusBar(self))

        self.list_widget.selection_error.connect(self._show_error)
        store.selection.subscribe(self._update_status)

    def _update_status(self, selected: frozenset[int]) -> None:
        self.statusBar().showMessage(f"{len(selected)} of {self._store.item_count()} selected")

    def _show_error(self, message: str) -> None:
        self.statusBar().showMessage(message, STATUS_MESSAGE_TIMEOUT_MS)

    def closeEvent(self, event):
        self.list_widget.detach()
        self._store.selection.unsubscribe(self._update_status)
        super().closeEvent(event)
