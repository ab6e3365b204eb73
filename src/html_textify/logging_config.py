"""
Structured logging configuration using structlog.

Log lines are written to stderr; stdout is reserved for converted text so
the CLI can be used in pipes.
"""

import logging
import sys
from typing import Optional, TextIO

import structlog

from .config import settings


def setup_logging(
    log_level: Optional[str] = None,
    json_output: Optional[bool] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """
    Configure structlog for the command-line tools.

    Args:
        log_level: Minimum level name (defaults to settings.log_level)
        json_output: Render JSON lines instead of console output
            (defaults to settings.log_json)
        stream: Destination (defaults to sys.stderr)
    """
    level = log_level or settings.log_level
    use_json = settings.log_json if json_output is None else json_output

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            (
                structlog.processors.JSONRenderer()
                if use_json
                else structlog.dev.ConsoleRenderer(colors=False)
            ),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(level.upper())
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=stream or sys.stderr),
        # Loggers are rebuilt on every call so a later setup_logging() applies
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a logger instance with the given name."""
    return structlog.get_logger(name)
