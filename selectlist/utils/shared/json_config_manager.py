"""Module: json_config_manager.py

Date: 2026-10-19

JSON-based settings manager.
Settings are grouped in categories with defaults; the manager loads them from
and saves them to a single config.json (with a .bak copy of the previous file),
guarding reads and writes with a re-entrant lock.
"""

import json
import shutil
import threading
from datetime import datetime
from pathlib import Path
from typing import Any, Generic, TypeVar

from selectlist.config import (
    APP_NAME,
    APP_VERSION,
    DEBUG_RESET_CONFIG,
    DEFAULT_ITEM_COUNT,
    DEFAULT_SELECTION_MODE,
)
from selectlist.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)

T = TypeVar("T")


class ConfigCategory(Generic[T]):
    """Base class for configuration categories with defaults."""

    def __init__(self, name: str, defaults: dict[str, T]):
        self.name = name
        self.defaults = defaults
        self._data = defaults.copy()

    def get(self, key: str, default: T | None = None) -> T | None:
        """Get configuration value with fallback to default."""
        return self._data.get(key, default if default is not None else self.defaults.get(key))

    def set(self, key: str, value: T) -> None:
        self._data[key] = value

    def reset(self) -> None:
        """Reset all values to defaults."""
        self._data = self.defaults.copy()

    def to_dict(self) -> dict[str, T]:
        return self._data.copy()

    def from_dict(self, data: dict[str, T]) -> None:
        """Load from dictionary, applying defaults for missing keys."""
        self._data = self.defaults.copy()
        self._data.update(data)


class StoreSettings(ConfigCategory[Any]):
    """Settings for the selectable-list store."""

    ALLOWED_MODES = ("single", "multi")

    def __init__(self) -> None:
        defaults = {
            "mode": DEFAULT_SELECTION_MODE,
            "item_count": DEFAULT_ITEM_COUNT,
            "database_path": "",  # empty = AppPaths default
        }
        super().__init__("store", defaults)

    def from_dict(self, data: dict[str, Any]) -> None:
        super().from_dict(data)
        self.validate()

    def validate(self) -> None:
        """Clamp values to what the store accepts, logging what was replaced."""
        mode = str(self._data.get("mode", "")).lower()
        if mode not in self.ALLOWED_MODES:
            logger.warning(
                "[StoreSettings] Unknown selection mode %r, using %r",
                self._data.get("mode"),
                self.defaults["mode"],
            )
            mode = self.defaults["mode"]
        self._data["mode"] = mode

        count = self._data.get("item_count")
        if isinstance(count, bool) or not isinstance(count, int) or count < 1:
            logger.warning(
                "[StoreSettings] Invalid item_count %r, using %d",
                count,
                self.defaults["item_count"],
            )
            self._data["item_count"] = self.defaults["item_count"]

        if not isinstance(self._data.get("database_path"), str):
            self._data["database_path"] = ""


class JSONConfigManager:
    """JSON-based configuration manager with categories and backups."""

    def __init__(self, app_name: str = "app", config_dir: str | Path | None = None):
        self.app_name = app_name
        self.config_dir = Path(config_dir or self._get_default_config_dir())
        self.config_file = self.config_dir / "config.json"
        self.backup_file = self.config_dir / "config.json.bak"

        self._lock = threading.RLock()
        self._categories: dict[str, ConfigCategory[Any]] = {}

        self.config_dir.mkdir(parents=True, exist_ok=True)

        logger.info(
            "[JSONConfigManager] Initialized for '%s' with dir: %s",
            app_name,
            self.config_dir,
            extra={"dev_only": True},
        )

    def _get_default_config_dir(self) -> str:
        from selectlist.utils.paths import AppPaths

        return str(AppPaths.get_user_data_dir())

    def register_category(self, category: ConfigCategory[Any]) -> None:
        with self._lock:
            self._categories[category.name] = category

    def get_category(
        self, category_name: str, create_if_not_exists: bool = False
    ) -> ConfigCategory[Any] | None:
        """Get configuration category by name."""
        category = self._categories.get(category_name)
        if not category and create_if_not_exists:
            logger.debug("Category '%s' not found, creating it dynamically.", category_name)
            new_category: ConfigCategory[Any] = ConfigCategory(category_name, {})
            self.register_category(new_category)
            return new_category
        return category

    def list_categories(self) -> list[str]:
        return list(self._categories.keys())

    def load(self) -> bool:
        """Load configuration from JSON file.

        A missing file is not an error: categories keep their defaults.
        """
        with self._lock:
            if DEBUG_RESET_CONFIG and self.config_file.exists():
                logger.info("[DEBUG] Deleting config file for fresh start: %s", self.config_file)
                try:
                    self.config_file.unlink()
                    if self.backup_file.exists():
                        self.backup_file.unlink()
                except OSError as e:
                    logger.error("[DEBUG] Failed to delete config file: %s", e)

            if not self.config_file.exists():
                logger.info(
                    "[JSONConfigManager] No config file found, using defaults",
                    extra={"dev_only": True},
                )
                return True

            try:
                with open(self.config_file, encoding="utf-8") as f:
                    data = json.load(f)
            except (OSError, json.JSONDecodeError) as e:
                logger.error("[JSONConfigManager] Failed to load configuration: %s", e)
                return False

            if not isinstance(data, dict):
                logger.error("[JSONConfigManager] Configuration root is not an object")
                return False

            for category_name, category in self._categories.items():
                section = data.get(category_name)
                if isinstance(section, dict):
                    category.from_dict(section)

            logger.info(
                "[JSONConfigManager] Configuration loaded successfully",
                extra={"dev_only": True},
            )
            return True

    def save(self, create_backup: bool = True) -> bool:
        """Save configuration to JSON file."""
        with self._lock:
            try:
                if create_backup and self.config_file.exists():
                    shutil.copy2(self.config_file, self.backup_file)

                data: dict[str, Any] = {
                    name: category.to_dict() for name, category in self._categories.items()
                }
                data["_metadata"] = {
                    "last_saved": datetime.now().isoformat(),
                    "version": f"v{APP_VERSION}",
                    "app_name": self.app_name,
                }

                with open(self.config_file, "w", encoding="utf-8") as f:
                    json.dump(data, f, indent=2, ensure_ascii=False)
            except (OSError, TypeError) as e:
                logger.error("[JSONConfigManager] Failed to save configuration: %s", e)
                return False

            logger.debug("[JSONConfigManager] Configuration saved successfully")
            return True


def load_store_settings(config_dir: str | Path | None = None) -> StoreSettings:
    """Load the ``store`` settings category, writing defaults on first run."""
    manager = JSONConfigManager(APP_NAME, config_dir)
    settings = StoreSettings()
    manager.register_category(settings)

    first_run = not manager.config_file.exists()
    manager.load()
    if first_run:
        manager.save(create_backup=False)

    return settings
