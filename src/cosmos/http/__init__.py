"""HTTP client wrapper with redacted request/response logging."""

from cosmos.http.client import Client, HttpMethod
from cosmos.http.redaction import FILTERED, filter_sensitive_data
from cosmos.http.response import Response

__all__ = ["Client", "HttpMethod", "Response", "FILTERED", "filter_sensitive_data"]
