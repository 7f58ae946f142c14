"""Logging configuration for strict_records."""

import logging
import sys
from pathlib import Path
from typing import List, Optional
from .settings import get_settings

ROOT_LOGGER_NAME = "strict_records"

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s"


def _handlers(log_file: Optional[Path]) -> List[logging.Handler]:
    # stdout is reserved for command output
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    return handlers


def setup_logging(
    level: Optional[str] = None,
    log_file: Optional[Path] = None,
    format_string: Optional[str] = None,
) -> logging.Logger:
    """
    Configure the package logger.

    Unset arguments fall back to ``Settings.log_level`` and
    ``Settings.log_file``. Calling this again replaces the handlers
    installed by the previous call.

    Returns:
        The configured ``strict_records`` logger
    """
    settings = get_settings()
    numeric_level = logging.getLevelName((level or settings.log_level).upper())
    formatter = logging.Formatter(format_string or DEFAULT_FORMAT)

    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    package_logger.setLevel(numeric_level)
    for old in list(package_logger.handlers):
        package_logger.removeHandler(old)
        old.close()

    for handler in _handlers(log_file or settings.log_file):
        handler.setLevel(numeric_level)
        handler.setFormatter(formatter)
        package_logger.addHandler(handler)

    package_logger.propagate = False
    return package_logger


def get_logger(name: str) -> logging.Logger:
    """Logger for ``name`` under the strict_records namespace."""
    if not logging.getLogger(ROOT_LOGGER_NAME).handlers:
        setup_logging()

    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
