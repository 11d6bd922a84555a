"""
Tagged success/failure result returned by every operation.

An operation never raises to its caller; it hands back either a
:class:`Success` carrying an ordered payload, or a :class:`Failure`
carrying the captured error and optional extra values.

Both variants keep the tag as their first observable field. Iterating
(or indexing) a result yields ``(True, *payload)`` or
``(False, error, *extra)``, so call sites can unpack them like a tuple:

    >>> from cosmos.core.result import Success, Failure
    >>> ok, message = Success(("created",))
    >>> ok, message
    (True, 'created')
    >>> ok, error = Failure(ValueError("bad input"))
    >>> ok, error
    (False, ValueError('bad input'))

Pattern matching works on the dataclass fields:

    >>> match Success(("created", 42)):
    ...     case Success(payload=(message, count)):
    ...         print(message, count)
    ...     case Failure(error=error):
    ...         print(error)
    created 42

Guardrails:
    ❌ DON'T: Call unwrap() on a result you have not checked
    ✅ DO: Branch on ``ok`` / ``is_ok()`` or use ``match``

Tags:
    result-pattern, error-handling, tagged-union, cosmos

Doc-Types:
    - API Reference
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, ClassVar

from cosmos.core.errors import CosmosError, ErrorCategory, categorize_error, is_retryable


@dataclass(frozen=True, slots=True)
class Success:
    """Successful result carrying an ordered payload."""

    ok: ClassVar[bool] = True

    payload: tuple[Any, ...] = ()

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    @property
    def value(self) -> Any:
        """First payload element, or ``None`` for an empty payload."""
        return self.payload[0] if self.payload else None

    def unwrap(self) -> Any:
        """Get the first payload element."""
        return self.value

    def unwrap_or(self, default: Any) -> Any:
        return self.value

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {"ok": True, "payload": list(self.payload)}

    def __iter__(self) -> Iterator[Any]:
        yield True
        yield from self.payload

    def __getitem__(self, index: int | slice) -> Any:
        return tuple(self)[index]

    def __len__(self) -> int:
        return 1 + len(self.payload)

    def __repr__(self) -> str:
        return f"Success{self.payload!r}"


@dataclass(frozen=True, slots=True)
class Failure:
    """Failed result carrying the captured error and extra values."""

    ok: ClassVar[bool] = False

    error: BaseException
    extra: tuple[Any, ...] = ()

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    @property
    def category(self) -> ErrorCategory:
        """Classification of the wrapped error (NETWORK, PARSE, ...)."""
        return categorize_error(self.error)

    @property
    def retryable(self) -> bool:
        return is_retryable(self.error)

    def unwrap(self) -> Any:
        """Raise the error. Use only when you're sure it's Success."""
        raise self.error

    def unwrap_or(self, default: Any) -> Any:
        return default

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        if isinstance(self.error, CosmosError):
            error = self.error.to_dict()
        else:
            error = {
                "error_type": type(self.error).__name__,
                "message": str(self.error),
                "category": self.category.value,
            }
        result: dict[str, Any] = {"ok": False, "error": error}
        if self.extra:
            result["extra"] = list(self.extra)
        return result

    def __iter__(self) -> Iterator[Any]:
        yield False
        yield self.error
        yield from self.extra

    def __getitem__(self, index: int | slice) -> Any:
        return tuple(self)[index]

    def __len__(self) -> int:
        return 2 + len(self.extra)

    def __repr__(self) -> str:
        return f"Failure({self.error!r}, extra={self.extra!r})"


Result = Success | Failure


__all__ = [
    "Success",
    "Failure",
    "Result",
]
