"""
Module: conftest.py

Date: 2026-10-19

Global pytest configuration and fixtures for the selectlist test suite.
Includes CI-friendly setup for PyQt5 testing and backing-store fixtures.
"""

import os
import sqlite3
import threading

# Headless Qt for CI and terminals without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from selectlist.infra.db.preferences_store import PreferencesStore
from selectlist.infra.memory_preferences import MemoryPreferences


def pytest_collection_modifyitems(session, config, items):
    """Skip GUI and local-only tests on CI."""
    _ = session
    _ = config

    is_ci = "CI" in os.environ or "GITHUB_ACTIONS" in os.environ
    if not is_ci:
        return

    skip_gui = pytest.mark.skip(reason="GUI tests don't work on CI")
    skip_local = pytest.mark.skip(reason="Local-only tests skipped on CI")
    for item in items:
        if "gui" in item.keywords:
            item.add_marker(skip_gui)
        if "local_only" in item.keywords:
            item.add_marker(skip_local)


@pytest.fixture(autouse=True)
def qt_application(qapp):
    """Every test runs with a QApplication so QObject signals behave as in the app."""
    return qapp


@pytest.fixture
def memory_prefs():
    """Empty dict-backed preferences."""
    return MemoryPreferences()


@pytest.fixture
def memory_db():
    """Create an in-memory database for testing."""
    conn = sqlite3.connect(":memory:", check_same_thread=False)
    yield conn
    conn.close()


@pytest.fixture
def sqlite_prefs(memory_db):
    """PreferencesStore over an in-memory SQLite database."""
    return PreferencesStore(memory_db, threading.RLock())


@pytest.fixture
def db_path(tmp_path):
    """Path for a preferences database file that survives store restarts."""
    return tmp_path / "data" / "prefs.db"
