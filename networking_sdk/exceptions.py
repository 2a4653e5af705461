"""Public exceptions for the networking SDK.

Every failed call surfaces exactly one of four error kinds. The kind (plus the
status code for unexpected statuses) is the contract; messages are diagnostic.
"""

from enum import Enum


class NetworkErrorKind(str, Enum):
    """Classification of a failed call."""

    INVALID_TARGET = "invalid_target"
    UNKNOWN = "unknown"
    UNEXPECTED_STATUS_CODE = "unexpected_status_code"
    DECODE = "decode"


class NetworkError(Exception):
    """Base exception for all networking SDK errors."""

    kind: NetworkErrorKind


class InvalidTargetError(NetworkError):
    """URL could not be assembled or the request never reached a server."""

    kind = NetworkErrorKind.INVALID_TARGET


class UnknownResponseError(NetworkError):
    """Response was malformed or a success response had no body."""

    kind = NetworkErrorKind.UNKNOWN


class UnexpectedStatusCodeError(NetworkError):
    """Response status fell outside the accepted range."""

    kind = NetworkErrorKind.UNEXPECTED_STATUS_CODE

    def __init__(self, status_code: int, message: str | None = None) -> None:
        super().__init__(message or f"Received unexpected status code: {status_code}")
        self.status_code = status_code


class DecodeError(NetworkError):
    """Response body could not be decoded, or the request body could not be encoded."""

    kind = NetworkErrorKind.DECODE
