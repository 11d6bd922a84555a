"""
Sensitive-field redaction for HTTP request logs.

``filter_sensitive_data`` returns a copy of a payload in which every value
stored under a configured field name is replaced by ``"[FILTERED]"``.
Mappings are walked recursively and keep their shape; lists are walked
element by element, so a list of credential objects is redacted too.

The redaction set comes from ``CosmosSettings.filter_parameters`` and is
read on every call unless the caller passes one explicitly.

Examples:
    >>> filter_sensitive_data(
    ...     {"password": "x", "nested": {"token": "y", "ok": "z"}},
    ...     {"password", "token"},
    ... )
    {'password': '[FILTERED]', 'nested': {'token': '[FILTERED]', 'ok': 'z'}}

    >>> filter_sensitive_data([{"token": "y"}, "plain"], {"token"})
    [{'token': '[FILTERED]'}, 'plain']
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from typing import Any

from cosmos.core.settings import get_settings

FILTERED = "[FILTERED]"

FilterParameters = Iterable[str] | Callable[[], Iterable[str]]


def resolve_filter_parameters(filter_parameters: FilterParameters | None = None) -> frozenset[str]:
    """Turn an explicit set, a provider callable or ``None`` into a key set."""
    if filter_parameters is None:
        return frozenset(get_settings().filter_parameters)
    if callable(filter_parameters):
        filter_parameters = filter_parameters()
    return frozenset(str(key) for key in filter_parameters)


def filter_sensitive_data(payload: Any, filter_parameters: FilterParameters | None = None) -> Any:
    """Return ``payload`` with sensitive fields masked. The input is not mutated."""
    keys = resolve_filter_parameters(filter_parameters)
    return _redact(payload, keys)


def _redact(value: Any, keys: frozenset[str]) -> Any:
    if isinstance(value, Mapping):
        result = {}
        for key, item in value.items():
            if isinstance(item, Mapping):
                result[key] = _redact(item, keys)
            elif str(key) in keys:
                result[key] = FILTERED
            else:
                result[key] = _redact(item, keys)
        return result
    if isinstance(value, (list, tuple)):
        redacted = [_redact(item, keys) for item in value]
        return redacted if isinstance(value, list) else tuple(redacted)
    return value


__all__ = [
    "FILTERED",
    "FilterParameters",
    "filter_sensitive_data",
    "resolve_filter_parameters",
]
