"""Structured logging setup.

rune logs through structlog on top of the stdlib ``rune`` logger, so until an
application opts in, its events follow the stdlib defaults: debug and info are
dropped, and nothing is written to stdout. configure_logging() is the opt-in.
"""

import logging
from typing import Optional

import structlog

from rune.config import get_settings

LOGGER_NAME = "rune"


def get_logger():
    """structlog logger bound to the stdlib ``rune`` logger."""
    return structlog.wrap_logger(logging.getLogger(LOGGER_NAME))


def configure_logging(level: Optional[str] = None, debug: Optional[bool] = None) -> None:
    """Configure structlog for console (debug) or JSON output.

    Args:
        level: Minimum level name, e.g. "debug" or "warning". Defaults to RUNE_LOG_LEVEL.
        debug: Render for humans instead of JSON. Defaults to RUNE_DEBUG.
    """
    settings = get_settings()
    level = level or settings.LOG_LEVEL
    debug = settings.DEBUG if debug is None else debug
    level_no = getattr(logging, level.upper(), logging.WARNING)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer() if debug else structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level_no),
        logger_factory=structlog.stdlib.LoggerFactory(),
    )

    # Rendered events are plain messages; no-op if the application has handlers
    logging.basicConfig(format="%(message)s")
    logging.getLogger(LOGGER_NAME).setLevel(level_no)
