"""Centralized logger configuration."""

from __future__ import annotations

import os
import sys
from typing import Optional

from loguru import logger

_LOG_LEVEL = os.getenv("JIRA_TESTGEN_LOG_LEVEL", "INFO").upper()
_LOG_FILE = os.getenv("JIRA_TESTGEN_LOG_FILE")
LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)


def configure_logger(extra_sink: Optional[str] = _LOG_FILE, level: str = _LOG_LEVEL) -> None:
    """(Re)configure loguru sinks; safe to call again to change the level."""

    logger.remove()
    logger.add(sys.stderr, level=level, format=LOG_FORMAT, colorize=True, enqueue=True)

    if extra_sink:
        logger.add(extra_sink, level=level, rotation="1 week", retention=4, enqueue=True)


# Configure immediately on import for convenience.
configure_logger()

__all__ = ["logger", "configure_logger", "LOG_FORMAT"]
