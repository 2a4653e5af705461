"""Shared HTTP client configuration."""

import httpx

from networking_sdk._version import __version__

DEFAULT_TIMEOUT = 30.0
USER_AGENT = f"networking-sdk/{__version__}"


def create_async_http_client(
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create configured async HTTP client.

    Args:
        transport: Optional transport to send requests through.

    Returns:
        Configured httpx.AsyncClient instance.
    """
    return httpx.AsyncClient(
        timeout=DEFAULT_TIMEOUT,
        follow_redirects=True,
        transport=transport,
    )
