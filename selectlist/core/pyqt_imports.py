"""Module: pyqt_imports.py

Date: 2026-10-19

Centralized PyQt5 imports used across selectlist.
"""

from PyQt5.QtCore import QObject, Qt, pyqtSignal
from PyQt5.QtGui import QBrush, QColor
from PyQt5.QtWidgets import (
    QApplication,
    QListWidget,
    QListWidgetItem,
    QMainWindow,
    QStatusBar,
)

__all__ = [
    "QApplication",
    "QBrush",
    "QColor",
    "QListWidget",
    "QListWidgetItem",
    "QMainWindow",
    "QObject",
    "QStatusBar",
    "Qt",
    "pyqtSignal",
]
