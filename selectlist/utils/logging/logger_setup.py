"""Module: logger_setup.py

Date: 2026-10-19

ConfigureLogger sets up application-wide logging on the root logger:
INFO and higher to the console, and a rotating activity log file.
Levels, sizes and toggles come from selectlist.config.app.
"""

import contextlib
import logging
import os
import sys
from logging.handlers import RotatingFileHandler

from selectlist.config import (
    LOG_CONSOLE_LEVEL,
    LOG_DATE_FORMAT,
    LOG_FILE_BACKUP_COUNT,
    LOG_FILE_LEVEL,
    LOG_FILE_MAX_BYTES,
    LOG_FORMAT,
    LOG_TO_CONSOLE,
    LOG_TO_FILE,
)
from selectlist.utils.logging.logger_helper import DevOnlyFilter


class ConfigureLogger:
    """Configures application-wide logging.

    Handlers are only installed once; constructing a second instance on an
    already configured root logger is a no-op.
    """

    def __init__(
        self,
        log_name: str = "app",
        log_dir: str = "logs",
        *,
        to_console: bool = LOG_TO_CONSOLE,
        to_file: bool = LOG_TO_FILE,
    ):
        """Initialize and configure the root logger.

        Args:
            log_name: Base name for the log file.
            log_dir: Directory to store log files.
            to_console: Attach a console handler.
            to_file: Attach a rotating file handler.
        """
        self.logger = logging.getLogger()
        self.logger.setLevel(logging.DEBUG)  # Accept everything; handlers filter levels
        self.log_file_path: str | None = None

        if self.logger.hasHandlers():
            return

        if to_console:
            self._setup_console_handler(getattr(logging, LOG_CONSOLE_LEVEL, logging.INFO))

        if to_file:
            os.makedirs(log_dir, exist_ok=True)
            self.log_file_path = os.path.join(log_dir, f"{log_name}.log")
            self._setup_file_handler(
                self.log_file_path,
                getattr(logging, LOG_FILE_LEVEL, logging.INFO),
                LOG_FILE_MAX_BYTES,
                LOG_FILE_BACKUP_COUNT,
            )

    def _setup_console_handler(self, level: int):
        """Sets up console handler with UTF-8-safe formatting and DevOnlyFilter."""
        console_handler = logging.StreamHandler(sys.stdout)

        with contextlib.suppress(AttributeError, ValueError):
            console_handler.stream.reconfigure(encoding="utf-8")

        console_handler.setLevel(level)
        console_handler.addFilter(DevOnlyFilter())
        console_handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
        self.logger.addHandler(console_handler)

    def _setup_file_handler(self, path: str, level: int, max_bytes: int, backup_count: int):
        """Sets up file handler with rotating file output."""
        file_handler = RotatingFileHandler(
            path, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
        self.logger.addHandler(file_handler)
