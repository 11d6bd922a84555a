"""
Shared pytest fixtures and configuration for cosmos tests.

This module provides:
- Environment isolation for COSMOS_* settings
- structlog reset and log capture
- An httpx MockTransport that records the requests it receives

Usage:
    Fixtures are auto-discovered by pytest. Use them as function arguments:

    def test_something(captured_logs, recording_transport):
        ...
"""

import json
import os
from collections.abc import Callable, Generator
from datetime import UTC, datetime
from typing import Any

import httpx
import pytest
import structlog
from structlog.testing import capture_logs


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Auto-mark tests based on their location."""
    for item in items:
        if "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Isolation
# =============================================================================


@pytest.fixture(autouse=True)
def clean_cosmos_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Drop COSMOS_* variables inherited from the developer's shell."""
    for key in list(os.environ):
        if key.startswith("COSMOS_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def reset_structlog() -> Generator[None, None, None]:
    """Restore structlog defaults and clear bound context after each test."""
    yield
    structlog.contextvars.clear_contextvars()
    structlog.reset_defaults()


@pytest.fixture
def captured_logs() -> Generator[list[dict[str, Any]], None, None]:
    """Capture structlog entries as dicts (``event``, ``log_level``, ...)."""
    with capture_logs() as entries:
        yield entries


# =============================================================================
# HTTP
# =============================================================================


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it handled."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.requests: list[httpx.Request] = []

        def record(request: httpx.Request) -> httpx.Response:
            request.read()
            self.requests.append(request)
            return handler(request)

        super().__init__(record)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]


def json_response(status: int, body: Any, headers: dict[str, str] | None = None) -> httpx.Response:
    return httpx.Response(
        status,
        content=json.dumps(body).encode(),
        headers={"Content-Type": "application/json", **(headers or {})},
    )


@pytest.fixture
def make_transport() -> Callable[..., RecordingTransport]:
    """Factory: ``make_transport(handler)`` or ``make_transport(status=..., body=...)``."""

    def factory(
        handler: Callable[[httpx.Request], httpx.Response] | None = None,
        *,
        status: int = 200,
        body: Any = None,
    ) -> RecordingTransport:
        if handler is None:
            payload = {"message": "success"} if body is None else body
            handler = lambda request: json_response(status, payload)  # noqa: E731
        return RecordingTransport(handler)

    return factory


@pytest.fixture
def recording_transport(make_transport: Callable[..., RecordingTransport]) -> RecordingTransport:
    """Transport answering 200 ``{"message": "success"}`` to everything."""
    return make_transport()


# =============================================================================
# Deterministic time
# =============================================================================


@pytest.fixture
def fixed_times() -> list[datetime]:
    """Start and completion instants 2.5 seconds apart."""
    return [
        datetime(2026, 1, 2, 3, 4, 5, tzinfo=UTC),
        datetime(2026, 1, 2, 3, 4, 7, 500000, tzinfo=UTC),
    ]
