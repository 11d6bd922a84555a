"""
HTTP client with request/response logging and payload redaction.

:class:`Client` wraps an ``httpx.Client`` bound to one base URL. Every
request is logged before it is sent (with sensitive payload fields
masked) and every response is logged once it arrives, tagged with the
logical service name. Responses come back as
:class:`cosmos.http.response.Response`.

The wrapper recovers nothing: connection errors and timeouts raised by
httpx reach the caller unchanged, and a non-JSON body raises
:class:`cosmos.core.errors.ResponseParseError`.

Examples:
    >>> client = Client(url="https://api.example.com", service="ExampleService")
    >>> response = client.get("/endpoint", headers={"Authorization": "Bearer token"})
    >>> response = client.post("/endpoint", payload={"key": "value"})
    >>> response.success
    True

    Choosing the transport (the "adapter"):

    >>> client = Client(
    ...     url="https://api.example.com",
    ...     service="ExampleService",
    ...     transport=httpx.HTTPTransport(retries=2),
    ... )

Tags:
    http, httpx, logging, redaction, cosmos

Doc-Types:
    - API Reference
"""

from __future__ import annotations

import time
from enum import Enum
from typing import Any

import httpx

from cosmos.core.logging import get_logger
from cosmos.core.settings import CosmosSettings, get_settings
from cosmos.http.redaction import FilterParameters, filter_sensitive_data
from cosmos.http.response import Response

logger = get_logger(__name__)


class HttpMethod(str, Enum):
    """HTTP methods the client sends."""

    GET = "get"
    POST = "post"
    PUT = "put"
    PATCH = "patch"
    DELETE = "delete"

    @classmethod
    def parse(cls, value: HttpMethod | str) -> HttpMethod:
        """Accept an HttpMethod or a method name in any case."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise ValueError(f"Unsupported HTTP method: {value!r}") from None

    @property
    def sends_body(self) -> bool:
        return self is not HttpMethod.GET


class Client:
    """Logging, redacting wrapper around ``httpx.Client``.

    Args:
        url: Base URL every request path is resolved against.
        service: Logical service name used to tag log lines.
        transport: httpx transport to send through (``None`` for the default).
        timeout: Request timeout in seconds; defaults to ``COSMOS_HTTP_TIMEOUT``.
        filter_parameters: Redaction keys, or a callable returning them.
            ``None`` with no ``settings`` reads ``COSMOS_FILTER_PARAMETERS``
            on every request.
        settings: Settings used for timeout and redirect defaults, and for
            the redaction keys when ``filter_parameters`` is not given.
    """

    def __init__(
        self,
        url: str,
        service: str,
        *,
        transport: httpx.BaseTransport | None = None,
        timeout: float | None = None,
        filter_parameters: FilterParameters | None = None,
        settings: CosmosSettings | None = None,
    ) -> None:
        if filter_parameters is None and settings is not None:
            filter_parameters = settings.filter_parameters
        settings = settings or get_settings()
        self.url = url
        self.service = service
        self.transport = transport
        self.timeout = timeout if timeout is not None else settings.http_timeout
        self.max_redirects = settings.max_redirects
        self.filter_parameters = filter_parameters
        self._conn = self._build_connection()

    def _build_connection(self) -> httpx.Client:
        return httpx.Client(
            base_url=self.url,
            transport=self.transport,
            timeout=self.timeout,
            follow_redirects=True,
            max_redirects=self.max_redirects,
        )

    def request(
        self,
        method: HttpMethod | str,
        endpoint: str,
        payload: Any = None,
        headers: dict[str, str] | None = None,
    ) -> Response:
        """Send one request and return the normalized response.

        ``payload`` is JSON-encoded into the body for POST, PUT, PATCH and
        DELETE; GET never carries a body.
        """
        method = HttpMethod.parse(method)
        payload = {} if payload is None else payload
        headers = dict(headers or {})

        request = self._conn.build_request(
            method.value.upper(),
            endpoint,
            headers=headers,
            json=payload if method.sends_body else None,
        )
        self._log_request(method=method, url=request.url.path, headers=headers, payload=payload)

        start_at = time.perf_counter()
        response = self._conn.send(request)
        response_time = time.perf_counter() - start_at

        self._log_response(
            method=method,
            success=response.is_success,
            elapsed=response_time,
            status=response.status_code,
            url=endpoint,
            headers=dict(response.headers),
            body=response.text,
        )
        return Response.from_transport(response)

    def get(self, endpoint: str, payload: Any = None, headers: dict[str, str] | None = None) -> Response:
        return self.request(HttpMethod.GET, endpoint, payload=payload, headers=headers)

    def post(self, endpoint: str, payload: Any = None, headers: dict[str, str] | None = None) -> Response:
        return self.request(HttpMethod.POST, endpoint, payload=payload, headers=headers)

    def put(self, endpoint: str, payload: Any = None, headers: dict[str, str] | None = None) -> Response:
        return self.request(HttpMethod.PUT, endpoint, payload=payload, headers=headers)

    def patch(self, endpoint: str, payload: Any = None, headers: dict[str, str] | None = None) -> Response:
        return self.request(HttpMethod.PATCH, endpoint, payload=payload, headers=headers)

    def delete(self, endpoint: str, payload: Any = None, headers: dict[str, str] | None = None) -> Response:
        return self.request(HttpMethod.DELETE, endpoint, payload=payload, headers=headers)

    def filter_sensitive_data(self, payload: Any) -> Any:
        return filter_sensitive_data(payload, self.filter_parameters)

    def close(self) -> None:
        self._conn.close()

    def __enter__(self) -> Client:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def _log_request(self, *, method: HttpMethod, url: str, headers: dict[str, str], payload: Any) -> None:
        filtered = self.filter_sensitive_data(payload)
        logger.info(
            f"HTTP Request | {self.service} -- method={method.value} url={url} "
            f"headers={headers} payload={filtered}",
            service=self.service,
            method=method.value,
            url=url,
        )

    def _log_response(
        self,
        *,
        method: HttpMethod,
        success: bool,
        elapsed: float,
        status: int,
        url: str,
        headers: dict[str, str],
        body: str,
    ) -> None:
        logger.info(
            f"HTTP Response | {self.service} -- success={str(success).lower()} status={status} "
            f"time={elapsed} method={method.value} url={url} headers={headers} body={body}",
            service=self.service,
            method=method.value,
            status=status,
            duration_s=elapsed,
        )

    def __repr__(self) -> str:
        return f"Client(url={self.url!r}, service={self.service!r})"
