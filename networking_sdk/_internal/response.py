"""Classification and decoding of transport responses."""

from typing import Any, TypeVar

import httpx
from pydantic import PydanticSchemaGenerationError, TypeAdapter, ValidationError

from networking_sdk.exceptions import (
    DecodeError,
    UnexpectedStatusCodeError,
    UnknownResponseError,
)

T = TypeVar("T")

ACCEPTED_STATUS_CODES = range(200, 300)


def check_response(response: Any, *, expect_body: bool = True) -> httpx.Response:
    """Validate a response before its body is read.

    Args:
        response: Whatever the transport returned.
        expect_body: Require a non-empty body on success.

    Returns:
        The response, narrowed to httpx.Response.

    Raises:
        UnknownResponseError: Not an HTTP response, or an expected body is empty.
        UnexpectedStatusCodeError: Status outside 200-299.
    """
    if not isinstance(response, httpx.Response):
        raise UnknownResponseError(f"Expected an HTTP response, got {type(response).__name__}")

    if response.status_code not in ACCEPTED_STATUS_CODES:
        raise UnexpectedStatusCodeError(response.status_code)

    if expect_body and not response.content:
        raise UnknownResponseError(f"Empty body with status {response.status_code}")

    return response


def decode_body(content: bytes, response_type: type[T]) -> T:
    """Decode JSON bytes into the requested shape.

    Validation is strict: JSON values are never coerced across types, so "1"
    or 1.0 for an int field is a mismatch.

    Raises:
        DecodeError: Malformed JSON, a missing field, a type mismatch, or a
            target type pydantic cannot validate.
    """
    try:
        return TypeAdapter(response_type).validate_json(content, strict=True)
    except PydanticSchemaGenerationError as e:
        raise DecodeError(f"Cannot decode into {_type_name(response_type)}: {e}") from e
    except ValidationError as e:
        details = "; ".join(
            f"{'.'.join(str(loc) for loc in err['loc']) or '<root>'}: {err['msg']}"
            for err in e.errors()
        )
        raise DecodeError(f"Failed to decode {_type_name(response_type)}: {details}") from e


def decode_response(response: Any, response_type: type[T]) -> T:
    """Check a response and decode its body into `response_type`."""
    checked = check_response(response, expect_body=True)
    return decode_body(checked.content, response_type)


def _type_name(response_type: Any) -> str:
    return getattr(response_type, "__name__", None) or repr(response_type)
