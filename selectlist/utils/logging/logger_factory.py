"""Module: logger_factory.py

Date: 2026-10-19

Logger factory with caching.
Keeps one logger instance per module name behind a lock so every module
can call ``get_cached_logger(__name__)`` at import time.
"""

import logging
import threading

from selectlist.utils.logging.logger_helper import get_logger


class LoggerFactory:
    """Thread-safe logger factory with caching.

    Maintains a single logger instance per module name.
    """

    _loggers: dict[str, logging.Logger] = {}
    _lock = threading.Lock()

    @classmethod
    def get_logger(cls, name: str | None = None) -> logging.Logger:
        """Get or create a cached logger for the given name.

        Args:
            name: Logger name, typically ``__name__`` from the calling module.

        Returns:
            Cached logger instance.
        """
        if name is None:
            import inspect

            frame = inspect.currentframe().f_back
            name = frame.f_globals.get("__name__", "unknown")

        with cls._lock:
            if name not in cls._loggers:
                cls._loggers[name] = get_logger(name)

            return cls._loggers[name]

    @classmethod
    def get_cached_names(cls) -> list[str]:
        """Get list of all cached logger names."""
        with cls._lock:
            return list(cls._loggers.keys())


def get_cached_logger(name: str | None = None) -> logging.Logger:
    """Convenience function for getting a cached logger."""
    return LoggerFactory.get_logger(name)
