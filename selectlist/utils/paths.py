"""Module: paths.py

Date: 2026-10-19

Centralized path management for the selectlist application.

Platform-specific behavior:
- Windows: %LOCALAPPDATA%/selectlist/
- Linux: $XDG_DATA_HOME/selectlist/ or ~/.local/share/selectlist/
- macOS: ~/Library/Application Support/selectlist/

Usage:
    from selectlist.utils.paths import AppPaths

    db_path = AppPaths.get_database_path()
"""

import os
import platform
from pathlib import Path

from selectlist.config import APP_NAME, DATABASE_FILENAME
from selectlist.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


class AppPaths:
    """Cross-platform access to the application's data directories.

    Directory Structure:
        <user_data_dir>/
        ├── config.json              # User settings
        ├── logs/                    # Log files
        └── data/
            └── selectlist_prefs.db  # Backing store for items and selection
    """

    _user_data_dir: Path | None = None

    @classmethod
    def _get_platform_data_dir(cls) -> Path:
        system = platform.system()

        if system == "Windows":
            base = os.environ.get("LOCALAPPDATA")
            if not base:
                base = Path(os.environ.get("USERPROFILE", "")) / "AppData" / "Local"
            return Path(base) / APP_NAME

        if system == "Darwin":
            return Path.home() / "Library" / "Application Support" / APP_NAME

        xdg_data = os.environ.get("XDG_DATA_HOME")
        if xdg_data:
            return Path(xdg_data) / APP_NAME
        return Path.home() / ".local" / "share" / APP_NAME

    @classmethod
    def set_user_data_dir(cls, path: str | Path) -> None:
        """Override the user data directory (tests, portable installs)."""
        cls._user_data_dir = Path(path)

    @classmethod
    def get_user_data_dir(cls) -> Path:
        """Get the user data directory, creating it if necessary."""
        if cls._user_data_dir is None:
            cls._user_data_dir = cls._get_platform_data_dir()
            logger.info("[AppPaths] User data directory: %s", cls._user_data_dir)

        cls._user_data_dir.mkdir(parents=True, exist_ok=True)
        return cls._user_data_dir

    @classmethod
    def get_config_path(cls) -> Path:
        """Get path to config.json file."""
        return cls.get_user_data_dir() / "config.json"

    @classmethod
    def get_database_path(cls) -> Path:
        """Get path to the SQLite backing store, in the data/ subdirectory."""
        data_dir = cls.get_user_data_dir() / "data"
        data_dir.mkdir(parents=True, exist_ok=True)
        return data_dir / DATABASE_FILENAME

    @classmethod
    def get_logs_dir(cls) -> Path:
        """Get path to logs directory."""
        logs_dir = cls.get_user_data_dir() / "logs"
        logs_dir.mkdir(parents=True, exist_ok=True)
        return logs_dir

    @classmethod
    def reset(cls) -> None:
        """Forget the cached data directory (primarily for tests)."""
        cls._user_data_dir = None
