"""
Structured error types for cosmos.

Provides a small hierarchy of typed errors carrying a category, a retry
flag, structured context and an optional chained cause. Operation failures
are classified through these categories so a caller inspecting a
``Failure`` can tell a transport problem from a bug in business logic.

Manifesto:
    - **Typed Error Hierarchy:** Different error types for different layers
    - **Explicit Retry Semantics:** Each error knows if it's retryable
    - **Rich Context:** Errors carry metadata for logging
    - **Error Chaining:** Preserve original exceptions while adding context

Architecture:
    ::

        ┌───────────────────────────────────────────────────────┐
        │                      CosmosError                       │
        │   (category, retryable, context, cause)               │
        ├───────────────────────────────────────────────────────┤
        │  TransportError     ParseError        OperationError   │
        │  (NETWORK)          (PARSE)           (OPERATION)      │
        │                         │                  │           │
        │                 ResponseParseError  InvalidResultError │
        └───────────────────────────────────────────────────────┘

Examples:
    >>> from cosmos.core.errors import CosmosError, ErrorCategory
    >>> error = CosmosError("Fetch failed", category=ErrorCategory.NETWORK)
    >>> error.with_context(service="billing", http_status=502).to_dict()["context"]
    {'service': 'billing', 'http_status': 502}

Tags:
    error-handling, exception-hierarchy, error-context, cosmos

Doc-Types:
    - API Reference
    - Error Handling Guide
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

import httpx


class ErrorCategory(str, Enum):
    """
    Standard error categories for classification.

    Attributes:
        NETWORK: Connection, timeout, DNS errors
        PARSE: Malformed payloads, undecodable bodies
        VALIDATION: Bad values, bad arguments
        OPERATION: Operation contract violations
        INTERNAL: Bugs, unimplemented code paths
        UNKNOWN: Uncategorized errors
    """

    NETWORK = "NETWORK"
    PARSE = "PARSE"
    VALIDATION = "VALIDATION"
    OPERATION = "OPERATION"
    INTERNAL = "INTERNAL"
    UNKNOWN = "UNKNOWN"


@dataclass
class ErrorContext:
    """
    Structured metadata attached to an error.

    Any key that is not a named field lands in ``metadata``.
    ``to_dict()`` drops unset fields so log lines stay short.

    Guardrails:
        ❌ DON'T: Store sensitive data (passwords, tokens)
        ✅ DO: Redact payloads before attaching them
    """

    operation: str | None = None
    correlation_id: str | None = None
    service: str | None = None
    url: str | None = None
    http_status: int | None = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary, excluding None values."""
        result: dict[str, Any] = {}
        if self.operation:
            result["operation"] = self.operation
        if self.correlation_id:
            result["correlation_id"] = self.correlation_id
        if self.service:
            result["service"] = self.service
        if self.url:
            result["url"] = self.url
        if self.http_status is not None:
            result["http_status"] = self.http_status
        result.update(self.metadata)
        return result


class CosmosError(Exception):
    """
    Base exception for all cosmos errors.

    Subclasses set ``default_category`` and ``default_retryable`` to give
    their layer sensible defaults; both can be overridden per instance.

    Examples:
        >>> error = CosmosError("Something went wrong")
        >>> error.category
        <ErrorCategory.INTERNAL: 'INTERNAL'>
        >>> error.retryable
        False

        Chaining errors:

        >>> try:
        ...     raise ConnectionError("DNS lookup failed")
        ... except ConnectionError as e:
        ...     error = CosmosError("Network error", cause=e)
        >>> error.cause
        ConnectionError('DNS lookup failed')
    """

    default_category: ErrorCategory = ErrorCategory.INTERNAL
    default_retryable: bool = False

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory | None = None,
        retryable: bool | None = None,
        context: ErrorContext | None = None,
        cause: BaseException | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.category = category or self.default_category
        self.retryable = retryable if retryable is not None else self.default_retryable
        self.context = context or ErrorContext()
        self.cause = cause

        if cause is not None:
            self.__cause__ = cause

    def with_context(self, **kwargs: Any) -> CosmosError:
        """
        Add context to this error (fluent API).

        Usage:
            raise ParseError("Bad body").with_context(
                service="billing",
                url="/invoices"
            )
        """
        for key, value in kwargs.items():
            if hasattr(self.context, key) and key != "metadata":
                setattr(self.context, key, value)
            else:
                self.context.metadata[key] = value
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        result: dict[str, Any] = {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "category": self.category.value,
            "retryable": self.retryable,
        }
        context_dict = self.context.to_dict()
        if context_dict:
            result["context"] = context_dict
        if self.cause is not None:
            result["cause"] = str(self.cause)
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, category={self.category.value})"


# =============================================================================
# TRANSPORT / PARSE
# =============================================================================


class TransportError(CosmosError):
    """
    Connection-level failure talking to a remote service.

    :class:`cosmos.http.client.Client` lets httpx errors through unchanged
    and never raises this itself. It is for operations that wrap a
    transport failure in their own error before returning ``failure(...)``.

    Usage:
        try:
            response = self.client.get("/invoices/7")
        except httpx.ConnectError as exc:
            return self.failure(TransportError("Billing unreachable", cause=exc))
    """

    default_category = ErrorCategory.NETWORK
    default_retryable = True


class ParseError(CosmosError):
    """Data could not be decoded."""

    default_category = ErrorCategory.PARSE


class ResponseParseError(ParseError):
    """
    HTTP response body is not valid JSON.

    Raised while building a :class:`cosmos.http.response.Response`; the
    underlying ``json.JSONDecodeError`` is kept as ``cause``.
    """

    def __init__(self, message: str, *, raw_body: str | None = None, **kwargs: Any):
        super().__init__(message, **kwargs)
        self.raw_body = raw_body


# =============================================================================
# OPERATION
# =============================================================================


class OperationError(CosmosError):
    """Operation contract violation."""

    default_category = ErrorCategory.OPERATION


class InvalidResultError(OperationError):
    """``call()`` returned something other than a Success or Failure."""

    pass


# =============================================================================
# UTILITY FUNCTIONS
# =============================================================================


def categorize_error(error: BaseException) -> ErrorCategory:
    """Get the category of an error."""
    if isinstance(error, CosmosError):
        return error.category
    if isinstance(error, (httpx.TransportError, ConnectionError, OSError)):
        return ErrorCategory.NETWORK
    if isinstance(error, json.JSONDecodeError):
        return ErrorCategory.PARSE
    if isinstance(error, NotImplementedError):
        return ErrorCategory.INTERNAL
    if isinstance(error, ValueError):
        return ErrorCategory.VALIDATION
    return ErrorCategory.UNKNOWN


def is_retryable(error: BaseException) -> bool:
    """Check if an error is retryable."""
    if isinstance(error, CosmosError):
        return error.retryable
    return categorize_error(error) is ErrorCategory.NETWORK


__all__ = [
    "ErrorCategory",
    "ErrorContext",
    "CosmosError",
    "TransportError",
    "ParseError",
    "ResponseParseError",
    "OperationError",
    "InvalidResultError",
    "categorize_error",
    "is_retryable",
]
