"""Module: selectlist.config

Date: 2026-10-19

Configuration package for the selectlist application.

This package organizes configuration into logical modules:
- app: Application info, debug flags, logging
- store: Backing-store keys and seeding defaults

All settings are re-exported from this module:
    from selectlist.config import APP_NAME, ITEMS_KEY
"""

from selectlist.config.app import *  # noqa: F401, F403
from selectlist.config.store import *  # noqa: F401, F403
