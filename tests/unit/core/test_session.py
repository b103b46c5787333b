"""Tests for open_session / StoreSession.

Date: 2026-10-19
"""

import json

from selectlist.config import SELECTED_ID_KEY
from selectlist.core.session import open_session
from selectlist.models.selection_mode import SelectionMode


class TestOpenSession:
    """Wiring of settings, SQLite backing store and store."""

    def test_defaults_from_settings(self, tmp_path, db_path):
        session = open_session(db_path, config_dir=tmp_path)

        assert session.store.mode is SelectionMode.MULTI
        assert session.store.item_count() == 20
        assert (tmp_path / "config.json").exists()
        session.close()

    def test_settings_file_drives_mode_and_count(self, tmp_path, db_path):
        (tmp_path / "config.json").write_text(
            json.dumps({"store": {"mode": "single", "item_count": 6}}), encoding="utf-8"
        )

        with open_session(db_path, config_dir=tmp_path) as session:
            assert session.store.mode is SelectionMode.SINGLE
            assert session.store.item_count() == 6

    def test_database_path_from_settings(self, tmp_path):
        target = tmp_path / "custom" / "prefs.db"
        (tmp_path / "config.json").write_text(
            json.dumps({"store": {"database_path": str(target)}}), encoding="utf-8"
        )

        with open_session(config_dir=tmp_path):
            pass

        assert target.exists()

    def test_arguments_override_settings(self, tmp_path, db_path):
        with open_session(db_path, "single", 3, config_dir=tmp_path) as session:
            assert session.store.mode is SelectionMode.SINGLE
            assert session.store.item_count() == 3

    def test_selection_survives_restart(self, tmp_path, db_path):
        with open_session(db_path, "single", config_dir=tmp_path) as session:
            session.store.toggle_selection(12)
            assert session.preferences.get_int(SELECTED_ID_KEY, -1) == 12

        with open_session(db_path, "single", config_dir=tmp_path) as session:
            assert session.store.selected_id() == 12

    def test_close_disposes_store(self, tmp_path, db_path):
        session = open_session(db_path, config_dir=tmp_path)
        session.close()
        session.close()

        assert session.closed
        assert session.store.is_disposed
