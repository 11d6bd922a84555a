"""Normalized HTTP response."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Protocol

from cosmos.core.errors import ResponseParseError


class TransportResponse(Protocol):
    """What :meth:`Response.from_transport` reads from a transport response.

    ``httpx.Response`` satisfies this.
    """

    status_code: int

    @property
    def text(self) -> str | None: ...


@dataclass(frozen=True)
class Response:
    """
    Status and JSON body of an HTTP response.

    ``raw_body`` is the body text, or ``{}`` when the transport returned no
    body or only whitespace; ``body`` is the parsed JSON, or ``{}`` when
    there is no body.

    Examples:
        >>> import httpx
        >>> response = Response.from_transport(httpx.Response(200, text='{"key": "value"}'))
        >>> response.status, response.body, response.success
        (200, {'key': 'value'}, True)
    """

    status: int
    raw_body: str | dict[str, Any] = field(default_factory=dict)
    body: Any = field(default_factory=dict)
    headers: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_transport(cls, response: TransportResponse) -> Response:
        """Build from a transport response, parsing its body as JSON.

        Raises:
            ResponseParseError: the body is present but is not valid JSON.
        """
        text = getattr(response, "text", None)
        headers = dict(getattr(response, "headers", None) or {})
        if not text or not text.strip():
            return cls(status=response.status_code, raw_body={}, body={}, headers=headers)
        try:
            body = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ResponseParseError(
                f"Response body is not valid JSON: {exc.msg}",
                raw_body=text,
                cause=exc,
            ).with_context(http_status=response.status_code) from exc
        return cls(status=response.status_code, raw_body=text, body=body, headers=headers)

    @property
    def success(self) -> bool:
        return 200 <= self.status <= 299
