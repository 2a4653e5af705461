"""Masking of sensitive values before request details are logged."""

from collections.abc import Mapping
from typing import Any

REDACT_KEYS: frozenset[str] = frozenset({
    "api_key",
    "x-api-key",
    "token",
    "access_token",
    "refresh_token",
    "auth_token",
    "secret",
    "client_secret",
    "password",
    "authorization",
    "proxy-authorization",
    "cookie",
    "set-cookie",
    "private_key",
    "credentials",
})

REDACTED_VALUE = "[REDACTED]"


def redact_headers(headers: Mapping[str, str]) -> dict[str, str]:
    """Return a copy of headers with sensitive values masked."""
    return {
        name: REDACTED_VALUE if name.lower() in REDACT_KEYS else value
        for name, value in headers.items()
    }


def redact_body(body: Any) -> Any:
    """Recursively mask sensitive keys in a JSON-like body.

    The input is never mutated; dicts and lists are rebuilt on the way down.
    """
    if isinstance(body, Mapping):
        result = {}
        for key, value in body.items():
            key_lower = key.lower() if isinstance(key, str) else key
            if key_lower in REDACT_KEYS:
                result[key] = REDACTED_VALUE
            else:
                result[key] = redact_body(value)
        return result
    elif isinstance(body, (list, tuple)):
        return [redact_body(item) for item in body]
    else:
        return body
