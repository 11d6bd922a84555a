"""
Cosmos Logging - structured logging for operations and HTTP calls.

Every operation and every HTTP client call logs through structlog. Each
entry carries a human-readable message (``[CreateUser - <id>] Started at
...``) plus the same facts as structured keys, so lines read well in a
terminal and aggregate well as JSON.

Architecture:
    ::

        configure_logging(level="INFO", json_format=True, service="billing")

            ↓

        structlog processor chain:
          1. TimeStamper (iso)
          2. merge_contextvars
          3. add_log_level / add_logger_name
          4. add_service_metadata
          5. elasticsearch_compatible (JSON only)
          6. JSONRenderer (or ConsoleRenderer for dev)

Examples:
    Production (JSON for log aggregation):

    >>> from cosmos.core.logging import configure_logging, get_logger
    >>> configure_logging(level="INFO", json_format=True, service="billing")
    >>> logger = get_logger(__name__)
    >>> logger.info("invoice_sent", invoice_id=42)

    From settings:

    >>> from cosmos.core.settings import get_settings
    >>> configure_from_settings(get_settings())

Guardrails:
    - Auto-detects JSON vs console based on TTY
    - Service name stored globally (set once at startup)
    - ECS-compatible field names for Elasticsearch

Tags:
    logging, structlog, observability, json-logging, cosmos

Doc-Types:
    - API Reference
    - Observability Guide
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

import structlog
from structlog.types import EventDict, Processor, WrappedLogger

if TYPE_CHECKING:
    from cosmos.core.settings import CosmosSettings


_SERVICE_NAME = "cosmos"


def _add_service_metadata(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Add service-level metadata to all logs."""
    event_dict.setdefault("service.name", _SERVICE_NAME)
    return event_dict


def _elasticsearch_compatible(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Make field names Elasticsearch/ECS compatible."""
    if "timestamp" in event_dict:
        event_dict["@timestamp"] = event_dict.pop("timestamp")

    if "level" in event_dict:
        event_dict["log.level"] = event_dict.pop("level")

    return event_dict


def configure_logging(
    level: str = "INFO",
    json_format: bool | None = None,
    service: str = "cosmos",
    add_timestamp: bool = True,
    cache_loggers: bool = True,
) -> None:
    """Configure structured logging for the application.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        json_format: True for JSON, False for console, None for auto (JSON if not tty)
        service: Service name to include in logs
        add_timestamp: Include ISO timestamp in logs
        cache_loggers: Freeze logger configuration on first use (disable in tests)
    """
    global _SERVICE_NAME
    _SERVICE_NAME = service

    if json_format is None:
        json_format = not sys.stdout.isatty()

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        _add_service_metadata,
    ]

    if add_timestamp:
        shared_processors.insert(0, structlog.processors.TimeStamper(fmt="iso"))

    if json_format:
        shared_processors.append(_elasticsearch_compatible)
        renderer: Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=True)

    structlog.configure(
        processors=shared_processors + [renderer],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, level.upper())
        ),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=cache_loggers,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level.upper()),
    )


def configure_from_settings(settings: CosmosSettings) -> None:
    """Apply log level, output format and service name from settings."""
    configure_logging(
        level=settings.log_level,
        json_format=settings.json_logs,
        service=settings.service_name,
    )


def get_logger(name: str | None = None) -> Any:
    """Get a structured logger.

    Args:
        name: Logger name (usually __name__)
    """
    return structlog.get_logger(name)


def bind_context(**kwargs: Any) -> None:
    """Bind context to include in all subsequent logs.

    Example:
        bind_context(request_id="abc123")
        logger.info("step_started")  # Includes request_id
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def unbind_context(*keys: str) -> None:
    """Remove specific keys from logging context."""
    structlog.contextvars.unbind_contextvars(*keys)


def clear_context() -> None:
    """Clear all bound context."""
    structlog.contextvars.clear_contextvars()


class LogContext:
    """Context manager for scoped logging context.

    Example:
        with LogContext(request_id="abc123"):
            CreateInvoice.invoke(order)
        # Context cleared here
    """

    def __init__(self, **kwargs: Any):
        self._context = kwargs

    def __enter__(self) -> LogContext:
        bind_context(**self._context)
        return self

    def __exit__(self, *args: Any) -> None:
        unbind_context(*self._context.keys())


__all__ = [
    "configure_logging",
    "configure_from_settings",
    "get_logger",
    "bind_context",
    "unbind_context",
    "clear_context",
    "LogContext",
]
