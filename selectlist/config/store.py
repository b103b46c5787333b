"""Module: selectlist.config.store

Date: 2026-10-19

Backing-store keys and defaults for the selectable-list store.
"""

# =====================================
# BACKING STORE KEYS
# =====================================

ITEMS_KEY = "ItemList"
SELECTED_ID_KEY = "SelectedId"  # SINGLE mode, integer
SELECTED_IDS_KEY = "SelectedIds"  # MULTI mode, string set

# Stored under SELECTED_ID_KEY when nothing is selected
NO_SELECTION_ID = -1

# =====================================
# SEEDING
# =====================================

DEFAULT_ITEM_COUNT = 20
DEFAULT_ITEM_NAME_FORMAT = "Item {number}"

# "single" | "multi"
DEFAULT_SELECTION_MODE = "multi"

# =====================================
# DATABASE
# =====================================

DATABASE_FILENAME = "selectlist_prefs.db"
PREFERENCES_TABLE = "preferences"
