"""Logging setup for VibeList.

Modules log through ``logging.getLogger(__name__)``. Their records flow up
to the ``vibelist`` logger, which writes a rotating file in the platform
log directory. ``VIBELIST_LOG_LEVEL`` (e.g. ``INFO``) raises the threshold.
"""

from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

from platformdirs import user_log_dir

LOGGER_NAME = "vibelist"
LOG_FILE_NAME = "vibelist.log"
LOG_LEVEL_ENV = "VIBELIST_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"
ROTATE_BYTES = 5 * 1024 * 1024
ROTATE_KEEP = 3

_logger: logging.Logger | None = None


def log_file_path() -> Path:
    """Location of the active log file."""
    return Path(user_log_dir(LOGGER_NAME)) / LOG_FILE_NAME


def _level_from_env() -> int:
    level = logging.getLevelName(os.environ.get(LOG_LEVEL_ENV, "DEBUG").upper())
    return level if isinstance(level, int) else logging.DEBUG


def _file_handler(path: Path) -> RotatingFileHandler:
    handler = RotatingFileHandler(
        path, maxBytes=ROTATE_BYTES, backupCount=ROTATE_KEEP, encoding="utf-8"
    )
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S"))
    return handler


def get_logger() -> logging.Logger:
    """Configure the package logger on first use and return it."""
    global _logger
    if _logger is None:
        path = log_file_path()
        path.parent.mkdir(parents=True, exist_ok=True)

        logger = logging.getLogger(LOGGER_NAME)
        logger.setLevel(_level_from_env())
        if not logger.handlers:
            logger.addHandler(_file_handler(path))
        logger.propagate = False
        _logger = logger
    return _logger
