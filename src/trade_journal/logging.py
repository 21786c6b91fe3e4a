"""Logging configuration helpers (structlog)."""

from __future__ import annotations

import logging
import os
import sys

import structlog

LOG_LEVEL_ENV_VAR = "TRADE_JOURNAL_LOG_LEVEL"


def configure_structlog() -> None:
    """
    Configure structlog for this package.

    Default behavior:
    - Logs go to stderr (keeps stdout clean for CLI output and `--json`).
    - Default level is WARNING (override with `TRADE_JOURNAL_LOG_LEVEL`).
    """
    level_name = os.getenv(LOG_LEVEL_ENV_VAR, "WARNING").strip().upper()
    level = logging.getLevelNamesMapping().get(level_name)
    invalid_level = level is None
    if level is None:
        level = logging.WARNING

    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.__stderr__),
        cache_logger_on_first_use=True,
    )

    if invalid_level:
        structlog.get_logger().warning(
            f"Invalid {LOG_LEVEL_ENV_VAR}; falling back to WARNING", value=level_name
        )
