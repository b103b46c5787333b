"""Module: selectlist.config.app

Date: 2026-10-19

Application-level configuration: app info, debug flags, logging settings.
"""

# =====================================
# DEBUG SETTINGS
# =====================================

# Config reset - if True, deletes config.json on startup
DEBUG_RESET_CONFIG = False

# =====================================
# APPLICATION INFORMATION
# =====================================

APP_NAME = "selectlist"
APP_VERSION = "1.0"

# Window
WINDOW_TITLE = "Item Picker"
WINDOW_WIDTH = 420
WINDOW_HEIGHT = 640

# =====================================
# LOGGING CONFIGURATION
# =====================================

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Console logging
LOG_TO_CONSOLE = True
LOG_CONSOLE_LEVEL = "INFO"

# File logging
LOG_TO_FILE = True
LOG_FILE_LEVEL = "INFO"
LOG_FILE_MAX_BYTES = 5_000_000  # 5MB per file
LOG_FILE_BACKUP_COUNT = 3

# Development logging settings
SHOW_DEV_ONLY_IN_CONSOLE = False

# =====================================
# LIST COLORS
# =====================================

SELECTED_ROW_COLOR = "#888888"
UNSELECTED_ROW_COLOR = "#ffffff"
STATUS_MESSAGE_TIMEOUT_MS = 5000
