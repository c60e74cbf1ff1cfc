"""Logging configuration and the structlog-backed Reporter."""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from market.application.reporter import Reporter

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def configure_logging(level: str = "INFO") -> None:
    """Configure structlog to render human-readable lines on stderr."""
    level_no = logging.getLevelName(level.upper())
    if not isinstance(level_no, int):
        raise ValueError(f"Unknown log level: {level!r}")

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level_no),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        # The CLI may be reconfigured (and stderr swapped) within one process
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> Any:
    return structlog.get_logger(name)


class StructlogReporter(Reporter):
    """State changes are logged at INFO, soft conditions at WARNING."""

    def __init__(self, logger_name: str = "market") -> None:
        self._logger = get_logger(logger_name)

    def announce(self, event: str, **details: Any) -> None:
        self._logger.info(event, **details)

    def reject(self, event: str, **details: Any) -> None:
        self._logger.warning(event, **details)
