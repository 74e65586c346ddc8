"""Structured logging configuration for Trellis.

structlog handles event rendering on top of stdlib logging, which owns
the handler. Debug events trace the pipeline stages and are shown only
with ``--verbose``; everything a user must see goes through the rich
console in the CLI layer instead.

Example usage:
    >>> from trellis.logging import setup_logging, get_logger
    >>> setup_logging(verbose=True)
    >>> logger = get_logger(__name__)
    >>> logger.debug("dispatch_started", project_type="backend")
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import structlog


def setup_logging(verbose: bool = False, stream: TextIO | None = None) -> None:
    """Configure structlog and the stdlib root logger.

    Args:
        verbose: Log at DEBUG when True, otherwise only warnings and errors.
        stream: Output stream for log lines. Defaults to stderr so logs
            never mix with command output on stdout.
    """
    log_level = logging.DEBUG if verbose else logging.WARNING

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(log_level)
    root_logger.addHandler(handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.contextvars.merge_contextvars,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=False,
    )


def bind_run_context(**values: object) -> None:
    """Bind values (project name, type, ...) to every later log event."""
    structlog.contextvars.bind_contextvars(**values)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance.

    Args:
        name: Logger name (typically __name__ of the calling module)
    """
    return structlog.get_logger(name)
