"""structlog configuration for hosts embedding money masks.

The library only emits ``debug`` events from the field adapter and never
configures logging on import. A host routes them by calling
:func:`setup_logging` once, or :meth:`money_mask.config.Settings.configure_logging`.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import structlog

COMPONENT = "money_mask"


def _renderer(json_output: bool):
    if json_output:
        return structlog.processors.JSONRenderer(sort_keys=True)
    return structlog.dev.ConsoleRenderer(colors=False)


def setup_logging(log_level: str = "INFO", json_output: bool = True, stream: TextIO | None = None) -> None:
    """Send mask events at *log_level* and above to *stream* (stdout by default)."""
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {log_level!r}")

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            _renderer(json_output),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=stream or sys.stdout),
    )


def get_logger(name: str, **context) -> structlog.BoundLogger:
    """Return a logger for module *name*, tagged with the library component."""
    return structlog.get_logger(name, component=COMPONENT, **context)
