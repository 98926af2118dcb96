"""Logging setup shared by the service and its workers."""

from __future__ import annotations

import logging
import sys
from typing import Optional

from app.config import get_settings

ROOT_LOGGER_NAME = "thread_sessions"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


class LoggingConfig:
    """
    Configure the service logger once per process.

    The level comes from LOG_LEVEL unless passed explicitly. Calling it again
    only updates the level; handlers are never duplicated. Nothing in this
    package calls it: the process embedding the router does, once at startup.
    """

    _configured = False

    def __init__(self, level: Optional[str] = None) -> None:
        self.level = (level or get_settings().log_level or "INFO").upper()
        self._configure()

    def _configure(self) -> None:
        root = logging.getLogger(ROOT_LOGGER_NAME)
        root.setLevel(self.level)
        if LoggingConfig._configured:
            return
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
        LoggingConfig._configured = True


def get_logger(name: Optional[str] = None) -> logging.Logger:
    if not name:
        return logging.getLogger(ROOT_LOGGER_NAME)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
