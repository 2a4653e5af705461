"""Networking SDK for Python.

Describe an HTTP call as an endpoint, send it, and get back a typed value or
one classified error.

Public API:
    NetworkService - Request dispatcher (async and callback forms)
    EndpointSpec, BaseEndpoint, Endpoint - Endpoint descriptors
    RequestMethod - HTTP methods
    Result - Outcome delivered to callback handlers
"""

from networking_sdk._version import __version__
from networking_sdk.client import NetworkService, get_network_service
from networking_sdk.exceptions import (
    DecodeError,
    InvalidTargetError,
    NetworkError,
    NetworkErrorKind,
    UnexpectedStatusCodeError,
    UnknownResponseError,
)
from networking_sdk.models import (
    BaseEndpoint,
    Endpoint,
    EndpointSpec,
    RequestMethod,
    Result,
)

__all__ = [
    "__version__",
    "NetworkService",
    "get_network_service",
    "Endpoint",
    "BaseEndpoint",
    "EndpointSpec",
    "RequestMethod",
    "Result",
    "NetworkError",
    "NetworkErrorKind",
    "InvalidTargetError",
    "UnknownResponseError",
    "UnexpectedStatusCodeError",
    "DecodeError",
]
