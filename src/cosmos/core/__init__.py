"""Cosmos Core -- errors, results, logging, settings and timestamps.

Architecture::

    errors.py          Structured error hierarchy (CosmosError, ParseError)
    result.py          Success / Failure tagged union
    logging.py         structlog configuration and helpers
    settings.py        CosmosSettings (pydantic-settings)
    timestamps.py      UTC helpers
"""

from cosmos.core.errors import (
    CosmosError,
    ErrorCategory,
    ErrorContext,
    InvalidResultError,
    OperationError,
    ParseError,
    ResponseParseError,
    TransportError,
    categorize_error,
    is_retryable,
)
from cosmos.core.logging import configure_from_settings, configure_logging, get_logger
from cosmos.core.result import Failure, Result, Success
from cosmos.core.settings import CosmosSettings, get_settings

__all__ = [
    "CosmosError",
    "ErrorCategory",
    "ErrorContext",
    "InvalidResultError",
    "OperationError",
    "ParseError",
    "ResponseParseError",
    "TransportError",
    "categorize_error",
    "is_retryable",
    "configure_from_settings",
    "configure_logging",
    "get_logger",
    "Failure",
    "Result",
    "Success",
    "CosmosSettings",
    "get_settings",
]
