# src/numeric_demos/logging_config.py
"""
Shared logging setup for the numeric demos.

Every module asks for its logger the same way:

    from .logging_config import get_logger
    logger = get_logger(__name__)

The first call attaches one stdout handler to the root logger. The level is
read from the NUMERIC_DEMOS_LOG_LEVEL environment variable (DEBUG, INFO,
WARNING, ERROR, CRITICAL; INFO when unset or unrecognised) and can be changed
later with set_log_level().

The ground state search logs every iteration at DEBUG, so

    NUMERIC_DEMOS_LOG_LEVEL=DEBUG python -m simulations.cli ground-state

reproduces the original per-iteration trace.
"""

from __future__ import annotations

import logging
import os
import sys
from datetime import datetime
from typing import Dict, Optional

LOG_LEVEL_ENV_VAR = "NUMERIC_DEMOS_LOG_LEVEL"

_DEFAULT_FORMAT = "%(asctime)s | %(name)-28s | %(levelname)-8s | %(message)s"
_DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_DEFAULT_LEVEL = logging.INFO

_LEVELS: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

_loggers: Dict[str, logging.Logger] = {}
_handlers_configured = False
_file_handler: Optional[logging.FileHandler] = None


def level_from_env(default: int = _DEFAULT_LEVEL) -> int:
    """
    Map the NUMERIC_DEMOS_LOG_LEVEL environment variable to a logging level.
    """
    name = os.environ.get(LOG_LEVEL_ENV_VAR, "").strip().upper()
    return _LEVELS.get(name, default)


def _configure_root_handler() -> None:
    global _handlers_configured

    if _handlers_configured:
        return

    level = level_from_env()
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Leave an already configured root (pytest, an embedding app) alone.
    if not root_logger.handlers:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level)
        console_handler.setFormatter(
            logging.Formatter(_DEFAULT_FORMAT, datefmt=_DEFAULT_DATE_FORMAT)
        )
        root_logger.addHandler(console_handler)

    _handlers_configured = True


def get_logger(name: str) -> logging.Logger:
    """
    Return the (cached) logger for `name`, configuring output on first use.

    Parameters
    ----------
    name : str
        Module name, normally __name__.
    """
    if name not in _loggers:
        _configure_root_handler()
        _loggers[name] = logging.getLogger(name)
    return _loggers[name]


def set_log_level(level: int) -> None:
    """Set the level of the root logger and of every handler attached to it."""
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in root_logger.handlers:
        handler.setLevel(level)


def enable_debug_mode() -> None:
    set_log_level(logging.DEBUG)


def enable_file_logging(filename: Optional[str] = None, level: int = logging.DEBUG) -> str:
    """
    Mirror log output into a file, replacing any file handler added earlier.

    Returns the path written to. Without a filename a timestamped one is
    generated in the current directory.
    """
    global _file_handler

    if filename is None:
        filename = f"numeric_demos_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log"

    disable_file_logging()

    _file_handler = logging.FileHandler(filename, encoding="utf-8")
    _file_handler.setLevel(level)
    _file_handler.setFormatter(
        logging.Formatter(_DEFAULT_FORMAT, datefmt=_DEFAULT_DATE_FORMAT)
    )

    root_logger = logging.getLogger()
    root_logger.addHandler(_file_handler)
    if root_logger.level > level:
        root_logger.setLevel(level)

    return filename


def disable_file_logging() -> None:
    global _file_handler

    if _file_handler is not None:
        root_logger = logging.getLogger()
        root_logger.removeHandler(_file_handler)
        _file_handler.close()
        _file_handler = None
