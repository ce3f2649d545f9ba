"""
Structured logging for handle-failure.

The library itself is silent by default: the combinator's success path never
logs, and the failure path only emits a ``failure_triggered`` event when
``HF_LOG_FAILURES`` is enabled. Applications (and the CLI) call
configure_logging() once at startup.

Architecture:
    ::

        configure_logging(level="INFO", json_format=None, service="handle-failure")
            │
            ▼
        structlog processor chain:
          1. TimeStamper (iso)
          2. add_log_level
          3. add_service_metadata
          4. JSONRenderer (not a tty) or ConsoleRenderer (tty)

Examples:
    >>> from handle_failure.core.logging import configure_logging, get_logger
    >>> configure_logging(level="DEBUG", json_format=True)
    >>> logger = get_logger(__name__)
    >>> logger.debug("failure_triggered", shape="Maybe")

Tags:
    logging, structlog, observability, handle-failure
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog
from structlog.types import EventDict, Processor, WrappedLogger

_SERVICE_NAME = "handle-failure"


def _add_service_metadata(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Add service-level metadata to all logs."""
    event_dict.setdefault("service", _SERVICE_NAME)
    return event_dict


def configure_logging(
    level: str = "WARNING",
    json_format: bool | None = None,
    service: str = "handle-failure",
    add_timestamp: bool = True,
) -> None:
    """Configure structured logging for the application.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        json_format: True for JSON, False for console, None for auto (JSON if not tty)
        service: Service name to include in logs
        add_timestamp: Include ISO timestamp in logs
    """
    global _SERVICE_NAME
    _SERVICE_NAME = service

    if json_format is None:
        json_format = not sys.stderr.isatty()

    numeric_level = getattr(logging, level.upper())

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        _add_service_metadata,
    ]
    if add_timestamp:
        processors.insert(0, structlog.processors.TimeStamper(fmt="iso"))

    if json_format:
        processors.append(structlog.processors.format_exc_info)
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=numeric_level,
    )


def get_logger(name: str | None = None) -> Any:
    """Get a structured logger (usually ``get_logger(__name__)``).

    The returned proxy is lazy, so module-level loggers pick up whatever
    configuration is active when they first log.
    """
    return structlog.get_logger(name)


__all__ = [
    "configure_logging",
    "get_logger",
]
