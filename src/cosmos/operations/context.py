"""
Per-invocation context for operations.

Each execution of an operation gets its own :class:`InvocationContext`,
created when the execution starts and passed explicitly to the logging
helpers. Nothing is kept on the class, in thread-locals or in module
globals, so concurrent and nested invocations of the same operation never
see each other's correlation id or start time.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from time import perf_counter
from typing import Any

from cosmos.core.timestamps import format_log_time, to_iso8601, utc_now


def new_correlation_id() -> str:
    return str(uuid.uuid4())


@dataclass(frozen=True)
class InvocationContext:
    """Context for a single operation execution.

    Attributes:
        operation: Name of the operation class being executed.
        correlation_id: Identifier attached to every log line of this execution.
        started_at: UTC time the execution started, for display.
        started_clock: ``perf_counter()`` reading at start, for the duration.
    """

    operation: str
    correlation_id: str = field(default_factory=new_correlation_id)
    started_at: datetime = field(default_factory=utc_now)
    started_clock: float = field(default_factory=perf_counter, compare=False, repr=False)

    @classmethod
    def begin(cls, operation: str, correlation_id: str | None = None) -> InvocationContext:
        """Start a new context, generating a correlation id when none is given."""
        return cls(
            operation=operation,
            correlation_id=correlation_id or new_correlation_id(),
            started_at=utc_now(),
            started_clock=perf_counter(),
        )

    @property
    def tag(self) -> str:
        """Log line prefix: ``[Operation - correlation-id]``."""
        return f"[{self.operation} - {self.correlation_id}]"

    @property
    def started_at_display(self) -> str:
        return format_log_time(self.started_at)

    def finish(self) -> tuple[datetime, float]:
        """Return completion time and duration in seconds.

        The duration comes from the monotonic clock, so a wall-clock step
        during the execution cannot make it negative.
        """
        return utc_now(), perf_counter() - self.started_clock

    def to_dict(self) -> dict[str, Any]:
        return {
            "operation": self.operation,
            "correlation_id": self.correlation_id,
            "started_at": to_iso8601(self.started_at),
        }
