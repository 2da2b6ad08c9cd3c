"""Structured logging for dumpfiles.

structlog is configured once, on import, to render through the standard library
``logging`` tree. Library code only emits events; the CLI decides where they go
and at which level by calling :func:`setup_logging`.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Optional, Union

import structlog

if TYPE_CHECKING:
    from pathlib import Path

LOGGER_NAME = "dumpfiles"

_STRUCTLOG_CONFIGURED = False


def configure_structlog() -> None:
    """Install the structlog processor chain used by every dumpfiles logger.

    Calling this more than once is a no-op.
    """
    global _STRUCTLOG_CONFIGURED
    if _STRUCTLOG_CONFIGURED:
        return
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
    _STRUCTLOG_CONFIGURED = True


def setup_logging(level: int = logging.INFO, log_file: Optional[Union[str, Path]] = None) -> structlog.stdlib.BoundLogger:
    """Route dumpfiles log records to stderr or to a file.

    Args:
        level: Minimum stdlib log level to emit (e.g. ``logging.DEBUG``).
        log_file: Optional path to a log file. If None, records go to stderr.

    Returns:
        The shared dumpfiles logger.
    """
    handler: logging.Handler
    if log_file:
        handler = logging.FileHandler(str(log_file), encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))

    stdlib_logger = logging.getLogger(LOGGER_NAME)
    for existing in list(stdlib_logger.handlers):
        stdlib_logger.removeHandler(existing)
        existing.close()
    stdlib_logger.addHandler(handler)
    stdlib_logger.setLevel(level)
    return logger


configure_structlog()

logger: structlog.stdlib.BoundLogger = structlog.get_logger(LOGGER_NAME)
