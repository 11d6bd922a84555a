"""
Base class for operation objects.

An operation wraps one unit of business logic behind a uniform invocation
contract. Subclasses implement :meth:`ApplicationOperation.call` and return
``self.success(...)`` or ``self.failure(...)``; callers go through
:meth:`ApplicationOperation.invoke` and always get a tagged result back,
never an exception.

Example usage::

    class CreateUser(ApplicationOperation):
        def __init__(self, email, correlation_id=None):
            super().__init__(correlation_id=correlation_id)
            self.email = email

        def call(self):
            user = users.create(email=self.email)
            return self.success(user, "welcome mail queued")

    ok, user, note = CreateUser.invoke("ada@example.com")

    match CreateUser.invoke("not-an-email"):
        case Success(payload=(user, _)):
            ...
        case Failure(error=error):
            ...

Every execution logs one "Started" line and then either a "Completed" line
(with its duration) or a "Failed" line carrying the error message, all
tagged with the operation name and the correlation id.
"""

from __future__ import annotations

from typing import Any

from cosmos.core.errors import InvalidResultError, categorize_error
from cosmos.core.logging import get_logger
from cosmos.core.result import Failure, Result, Success
from cosmos.core.timestamps import format_log_time
from cosmos.operations.context import InvocationContext, new_correlation_id

logger = get_logger(__name__)


class ApplicationOperation:
    """Base class for all operations."""

    def __init__(self, correlation_id: str | None = None) -> None:
        self.correlation_id = correlation_id or new_correlation_id()

    @classmethod
    def invoke(cls, *args: Any, correlation_id: str | None = None, **kwargs: Any) -> Result:
        """Build the operation from the given arguments and execute it.

        ``correlation_id`` is forwarded to the constructor only when the
        caller supplies one, so subclasses with a no-argument constructor
        still work.
        """
        if correlation_id is not None:
            kwargs["correlation_id"] = correlation_id
        try:
            operation = cls(*args, **kwargs)
        except Exception as exc:
            context = InvocationContext.begin(cls.__name__, correlation_id)
            _log_started(context)
            _log_failed(context, exc)
            return Failure(exc)
        return operation.execute()

    def execute(self) -> Result:
        """Run :meth:`call` with logging and crash recovery."""
        context = InvocationContext.begin(
            type(self).__name__, getattr(self, "correlation_id", None)
        )
        _log_started(context)
        try:
            result = self.call()
            if not isinstance(result, (Success, Failure)):
                raise InvalidResultError(
                    f"{context.operation}.call must return success(...) or failure(...), "
                    f"got {type(result).__name__}"
                )
        except Exception as exc:
            _log_failed(context, exc)
            return Failure(exc)
        _log_completed(context)
        return result

    def call(self) -> Result:
        """Business logic. Must be overridden by subclasses."""
        raise NotImplementedError("Subclasses must implement the call method")

    def success(self, *payload: Any) -> Success:
        return Success(payload)

    def failure(self, error: BaseException, *extra: Any) -> Failure:
        return Failure(error, extra)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(correlation_id={getattr(self, 'correlation_id', None)!r})"


def _log_started(context: InvocationContext) -> None:
    logger.info(
        f"{context.tag} Started at {context.started_at_display}",
        **context.to_dict(),
    )


def _log_completed(context: InvocationContext) -> None:
    completed_at, duration = context.finish()
    logger.info(
        f"{context.tag} Completed at {format_log_time(completed_at)}. Duration: {duration} seconds",
        **context.to_dict(),
        duration_s=duration,
    )


def _log_failed(context: InvocationContext, error: BaseException) -> None:
    logger.error(
        f"{context.tag} Failed with error: {error}",
        **context.to_dict(),
        error_type=type(error).__name__,
        category=categorize_error(error).value,
    )
