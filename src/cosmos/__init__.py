"""
Cosmos - operation objects and a logging HTTP client.

- cosmos.operations: ApplicationOperation base class and invocation context
- cosmos.http: Client wrapper with redacted request/response logging
- cosmos.core: errors, results, logging and settings shared by both
"""

__version__ = "0.1.0"

from cosmos.core.result import Failure, Result, Success
from cosmos.http import Client, HttpMethod, Response, filter_sensitive_data
from cosmos.operations import ApplicationOperation, InvocationContext

__all__ = [
    "__version__",
    "ApplicationOperation",
    "InvocationContext",
    "Success",
    "Failure",
    "Result",
    "Client",
    "HttpMethod",
    "Response",
    "filter_sensitive_data",
]
