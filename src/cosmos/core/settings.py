"""Application-wide settings for cosmos.

Configuration is read from ``COSMOS_``-prefixed environment variables and an
optional ``.env`` file.  Nothing here is cached: :func:`get_settings` builds a
fresh instance on every call, so a changed redaction set or log level is seen
by the next request without a restart.

Manifesto:
    Configuration should be explicit, validated, and environment-driven.

    - **Pydantic validation:** Type-checked when read
    - **Environment-driven:** Reads from env vars and .env files
    - **Sensible defaults:** Works out of the box for development

Examples:
    >>> from cosmos.core.settings import get_settings
    >>> settings = get_settings()
    >>> "password" in settings.filter_parameters
    True

    Overriding from the environment (complex values are JSON)::

        COSMOS_FILTER_PARAMETERS='["password", "ssn"]'
        COSMOS_LOG_LEVEL=DEBUG

Tags:
    settings, configuration, pydantic, environment, cosmos

Doc-Types:
    - API Reference
    - Configuration Guide
"""

from __future__ import annotations

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_FILTER_PARAMETERS = frozenset(
    {
        "password",
        "password_confirmation",
        "token",
        "access_token",
        "refresh_token",
        "secret",
        "api_key",
    }
)


class CosmosSettings(BaseSettings):
    """Settings shared by the operation executor and the HTTP client.

    Fields
    ──────
    service_name      : Service name stamped on every log line
    log_level         : Structlog log level
    json_logs         : JSON output (True), console (False), auto (None)
    filter_parameters : Field names redacted from HTTP request logs
    http_timeout      : Default HTTP timeout in seconds
    max_redirects     : Redirects followed per request
    """

    model_config = SettingsConfigDict(
        env_prefix="COSMOS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Observability ────────────────────────────────────────────
    service_name: str = "cosmos"
    log_level: str = "INFO"
    json_logs: bool | None = None

    # ── Redaction ────────────────────────────────────────────────
    filter_parameters: set[str] = Field(
        default_factory=lambda: set(DEFAULT_FILTER_PARAMETERS),
        description="Field names whose values never appear unmasked in logs",
    )

    # ── HTTP ─────────────────────────────────────────────────────
    http_timeout: float = Field(default=30.0, gt=0)
    max_redirects: int = Field(default=5, ge=0)

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value}")
        return level


def get_settings() -> CosmosSettings:
    """Read settings from the environment (uncached)."""
    return CosmosSettings()


__all__ = [
    "CosmosSettings",
    "DEFAULT_FILTER_PARAMETERS",
    "get_settings",
]
