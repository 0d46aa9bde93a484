"""structlog configuration for the todo API.

Two output modes:
- Human (default): console-formatted output to stderr
- JSON (LOG_JSON=true): structured JSON lines to stderr

Context is carried on bound loggers rather than globals: the application
binds its version once, every handler binds its own name, and failure
records bind the diagnostic ``cause``.
"""

from __future__ import annotations

import logging
import sys

import structlog

LOGGER_NAME = "todo_api"


def configure_logging(level: str = "INFO", *, log_json: bool = False) -> None:
    """Configure structlog processors and output routing.

    Args:
        level: The log level string (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_json: Use JSON renderer instead of console renderer.
    """
    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    logging.getLogger(LOGGER_NAME).setLevel(getattr(logging, level.upper(), logging.INFO))
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


def get_logger(**initial_values: object) -> structlog.stdlib.BoundLogger:
    """Return the base application logger bound with ``initial_values``."""
    return structlog.get_logger(LOGGER_NAME).bind(**initial_values)
