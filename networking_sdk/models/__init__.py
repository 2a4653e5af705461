"""Public models for the networking SDK."""

from networking_sdk.models.endpoint import (
    BaseEndpoint,
    Endpoint,
    EndpointSpec,
    RequestMethod,
)
from networking_sdk.models.result import Result

__all__ = [
    "Endpoint",
    "BaseEndpoint",
    "EndpointSpec",
    "RequestMethod",
    "Result",
]
