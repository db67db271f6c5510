"""Logging configuration.

stdlib logging owns the handlers; structlog renders the events. Modules
get their logger with ``structlog.get_logger(__name__)``.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import structlog

_LEVELS_BY_ENV = {
    "production": "INFO",
    "staging": "INFO",
    "development": "DEBUG",
    "test": "WARNING",
}


def get_log_level(environment: str, override: str | None = None) -> str:
    return (override or _LEVELS_BY_ENV.get(environment, "INFO")).upper()


def configure_logging(
    environment: str = "development",
    level: str | None = None,
    stream: TextIO | None = None,
) -> None:
    """Configure stdlib and structlog for the whole process.

    Events go to ``stream`` (stdout by default). The CLI passes stderr so
    they stay out of command output.
    """
    log_level = get_log_level(environment, level)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers = []
    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setLevel(log_level)
    root_logger.addHandler(handler)

    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.contextvars.merge_contextvars,
    ]
    if environment in ("production", "staging"):
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
