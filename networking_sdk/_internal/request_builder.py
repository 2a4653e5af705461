"""Translation of endpoint descriptors into transport requests.

Everything here is pure: no I/O happens, and building twice from the same
endpoint yields identical requests.
"""

import re
from collections.abc import Mapping
from typing import Any
from urllib.parse import quote

import httpx
from pydantic_core import PydanticSerializationError, to_json

from networking_sdk._internal.http import DEFAULT_TIMEOUT, USER_AGENT
from networking_sdk.exceptions import DecodeError, InvalidTargetError
from networking_sdk.models.endpoint import Endpoint, RequestMethod

AUTHORITY_SCHEMES: frozenset[str] = frozenset({"http", "https", "ws", "wss"})
JSON_CONTENT_TYPE = "application/json"

_PLACEHOLDER = re.compile(r"\{([^{}/]+)\}")


def resolve_path(path: str, path_params: Mapping[str, str] | None) -> str:
    """Substitute `{name}` placeholders with percent-encoded parameter values.

    Args:
        path: Path template, e.g. "/users/{id}".
        path_params: Values keyed by placeholder name. Extra keys are ignored.

    Returns:
        The path with every placeholder replaced.

    Raises:
        InvalidTargetError: A placeholder has no matching parameter.
    """
    params = path_params or {}

    def substitute(match: re.Match[str]) -> str:
        name = match.group(1)
        if name not in params:
            raise InvalidTargetError(f"Missing path parameter '{name}' for path '{path}'")
        return quote(str(params[name]), safe="")

    return _PLACEHOLDER.sub(substitute, path)


def build_url(
    scheme: str,
    host: str,
    path: str,
    query_params: Mapping[str, str] | None = None,
) -> httpx.URL:
    """Assemble and validate a URL.

    Raises:
        InvalidTargetError: The parts do not form a valid URL.
    """
    if not scheme:
        raise InvalidTargetError("URL scheme must not be empty")
    if scheme.lower() in AUTHORITY_SCHEMES and not host:
        raise InvalidTargetError(f"Scheme '{scheme}' requires a host")

    try:
        url = httpx.URL(scheme=scheme, host=host, path=path)
        if query_params:
            url = url.copy_merge_params(dict(query_params))
    except httpx.InvalidURL as e:
        raise InvalidTargetError(f"Invalid URL: {e}") from e
    return url


def encode_body(body: Mapping[str, Any]) -> bytes:
    """Serialize a request body to JSON bytes.

    Raises:
        DecodeError: The body contains a value that cannot be serialized.
    """
    try:
        return to_json(dict(body))
    except (PydanticSerializationError, TypeError, ValueError) as e:
        raise DecodeError(f"Failed to encode body: {e}") from e


def build_request(endpoint: Endpoint) -> httpx.Request:
    """Build the transport request described by an endpoint.

    Args:
        endpoint: Any object satisfying the Endpoint protocol.

    Returns:
        An unsent httpx.Request.

    Raises:
        InvalidTargetError: The endpoint does not describe a valid URL.
        DecodeError: The endpoint body could not be serialized.
    """
    try:
        scheme, host, path_template, raw_method = (
            endpoint.scheme,
            endpoint.host,
            endpoint.path,
            endpoint.method,
        )
        extra_headers, body = endpoint.headers, endpoint.body
        query_params, path_params = endpoint.query_params, endpoint.path_params
    except AttributeError as e:
        raise InvalidTargetError(f"Incomplete endpoint: {e}") from e

    path = resolve_path(path_template, path_params)
    url = build_url(scheme, host, path, query_params)
    try:
        method = RequestMethod(raw_method).value
    except ValueError as e:
        raise InvalidTargetError(f"Unsupported method: {raw_method!r}") from e

    headers = httpx.Headers({"User-Agent": USER_AGENT})
    headers.update(dict(extra_headers or {}))

    content: bytes | None = None
    if body is not None:
        content = encode_body(body)
        if "content-type" not in headers:
            headers["Content-Type"] = JSON_CONTENT_TYPE

    return httpx.Request(
        method,
        url,
        headers=headers,
        content=content,
        extensions={"timeout": httpx.Timeout(DEFAULT_TIMEOUT).as_dict()},
    )
