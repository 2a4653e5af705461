"""Endpoint descriptors.

An endpoint describes one intended HTTP call. Anything exposing the attributes
of the `Endpoint` protocol can be dispatched; `BaseEndpoint` and `EndpointSpec`
are two ready-made ways to write one.

Example:
    class GetUser(BaseEndpoint):
        host = "api.example.com"
        method = RequestMethod.GET

        def __init__(self, user_id: int) -> None:
            self.path = "/users/{id}"
            self.path_params = {"id": str(user_id)}

    spec = EndpointSpec(host="api.example.com", path="/users", method="POST",
                        body={"name": "a"})
"""

from collections.abc import Mapping
from enum import Enum
from typing import Any, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, field_validator

DEFAULT_SCHEME = "https"
DEFAULT_HOST = ""


class RequestMethod(str, Enum):
    """HTTP methods an endpoint may use."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"


@runtime_checkable
class Endpoint(Protocol):
    """Read-only capability set describing a request."""

    @property
    def host(self) -> str: ...

    @property
    def scheme(self) -> str: ...

    @property
    def path(self) -> str: ...

    @property
    def method(self) -> RequestMethod: ...

    @property
    def headers(self) -> Mapping[str, str] | None: ...

    @property
    def body(self) -> Mapping[str, Any] | None: ...

    @property
    def query_params(self) -> Mapping[str, str] | None: ...

    @property
    def path_params(self) -> Mapping[str, str] | None: ...


class BaseEndpoint:
    """Base class supplying the optional parts of an endpoint.

    Subclasses provide `path` and `method`, as class attributes or properties,
    and override whatever else they need.
    """

    host: str = DEFAULT_HOST
    scheme: str = DEFAULT_SCHEME
    path: str
    method: RequestMethod
    headers: Mapping[str, str] | None = None
    body: Mapping[str, Any] | None = None
    query_params: Mapping[str, str] | None = None
    path_params: Mapping[str, str] | None = None


class EndpointSpec(BaseModel):
    """Immutable endpoint built from keyword arguments.

    Required fields:
        path: Request path, may contain `{name}` placeholders
        method: HTTP method (enum member or case-insensitive string)

    Optional fields:
        host: Server host (default: "")
        scheme: URL scheme (default: "https")
        headers: Request headers, sent verbatim
        body: JSON object sent as the request body
        query_params: Query string parameters
        path_params: Values substituted into path placeholders
    """

    model_config = ConfigDict(frozen=True)

    host: str = DEFAULT_HOST
    scheme: str = DEFAULT_SCHEME
    path: str
    method: RequestMethod
    headers: dict[str, str] | None = None
    body: dict[str, Any] | None = None
    query_params: dict[str, str] | None = None
    path_params: dict[str, str] | None = None

    @field_validator("method", mode="before")
    @classmethod
    def method_upper(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.upper()
        return v
