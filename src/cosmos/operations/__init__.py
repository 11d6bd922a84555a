"""Operation objects: uniform invocation, timing, logging and crash recovery."""

from cosmos.operations.base import ApplicationOperation
from cosmos.operations.context import InvocationContext

__all__ = ["ApplicationOperation", "InvocationContext"]
