"""
Module: main.py

Date: 2026-10-19

Application entry point: configures logging, opens the store session and
shows the item list window.
"""

import argparse
import sys

from selectlist.config import APP_NAME
from selectlist.core.pyqt_imports import QApplication
from selectlist.core.session import open_session
from selectlist.ui.main_window import MainWindow
from selectlist.utils.logging.logger_factory import get_cached_logger
from selectlist.utils.logging.logger_setup import ConfigureLogger
from selectlist.utils.paths import AppPaths

logger = get_cached_logger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog=APP_NAME, description="Pick items from a persisted list.")
    parser.add_argument("--mode", choices=["single", "multi"], help="selection mode")
    parser.add_argument("--database", help="path of the preferences database")
    parser.add_argument("--items", type=int, help="number of items to seed on first run")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    ConfigureLogger(log_name=APP_NAME, log_dir=str(AppPaths.get_logs_dir()))

    app = QApplication.instance() or QApplication(sys.argv[:1])
    session = open_session(args.database, args.mode, args.items)
    try:
        window = MainWindow(session.store)
        window.show()
        return app.exec_()
    finally:
        session.close()
        logger.info("[main] %s exited", APP_NAME)
