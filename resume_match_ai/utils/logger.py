"""Logging for the resume_match_ai package.

A single stdout handler lives on the package logger; module loggers propagate to it.
LOG_LEVEL (env) sets the package level, default INFO.
"""

import logging
import os
import sys
from typing import Optional

PACKAGE_LOGGER = "resume_match_ai"
LOG_FORMAT = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _package_logger() -> logging.Logger:
    root = logging.getLogger(PACKAGE_LOGGER)
    if not root.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        root.addHandler(handler)
        root.setLevel(os.getenv("LOG_LEVEL", "INFO").upper())
    return root


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """Module logger under the package logger; names outside the package are nested under it."""
    _package_logger()
    if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    logger = logging.getLogger(name)
    if level is not None:
        logger.setLevel(level)
    return logger
