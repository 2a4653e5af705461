"""Tests for request building."""

import uuid
from dataclasses import dataclass
from datetime import UTC, datetime

import httpx
import pytest
from pydantic import BaseModel

from networking_sdk._internal.http import USER_AGENT
from networking_sdk._internal.request_builder import (
    build_request,
    build_url,
    encode_body,
    resolve_path,
)
from networking_sdk.exceptions import DecodeError, InvalidTargetError
from networking_sdk.models import BaseEndpoint, EndpointSpec, RequestMethod


class TestResolvePath:
    """Tests for resolve_path function."""

    def test_substitutes_placeholder(self):
        """Should replace a placeholder with its value."""
        assert resolve_path("/users/{id}", {"id": "42"}) == "/users/42"

    def test_substitutes_multiple_placeholders(self):
        """Should replace every placeholder."""
        path = resolve_path("/orgs/{org}/repos/{repo}", {"org": "acme", "repo": "api"})
        assert path == "/orgs/acme/repos/api"

    def test_encodes_reserved_characters(self):
        """Should percent-encode values so they stay in one segment."""
        assert resolve_path("/files/{name}", {"name": "a/b c"}) == "/files/a%2Fb%20c"

    def test_no_placeholders(self):
        """Should return paths without placeholders unchanged."""
        assert resolve_path("/users", None) == "/users"

    def test_ignores_extra_params(self):
        """Should ignore parameters without a placeholder."""
        assert resolve_path("/users", {"id": "1"}) == "/users"

    def test_missing_param_raises(self):
        """Should fail when a placeholder has no value."""
        with pytest.raises(InvalidTargetError) as exc_info:
            resolve_path("/users/{id}", {})
        assert "id" in str(exc_info.value)


class TestBuildUrl:
    """Tests for build_url function."""

    def test_basic_url(self):
        """Should join scheme, host and path."""
        url = build_url("https", "api.example.com", "/users/1")
        assert str(url) == "https://api.example.com/users/1"

    def test_query_params(self):
        """Should append query parameters as name=value pairs."""
        url = build_url("https", "api.example.com", "/search", {"q": "cats", "page": "2"})
        assert url.params["q"] == "cats"
        assert url.params["page"] == "2"
        assert str(url) == "https://api.example.com/search?q=cats&page=2"

    def test_query_params_are_encoded(self):
        """Should encode reserved characters in query values."""
        url = build_url("https", "api.example.com", "/search", {"q": "a&b"})
        assert url.params["q"] == "a&b"
        assert "a&b" not in str(url)

    def test_empty_host_raises(self):
        """Should reject an empty host for schemes requiring one."""
        with pytest.raises(InvalidTargetError):
            build_url("https", "", "/users")

    def test_empty_scheme_raises(self):
        """Should reject an empty scheme."""
        with pytest.raises(InvalidTargetError):
            build_url("", "api.example.com", "/users")

    def test_relative_path_raises(self):
        """Should reject a path that does not start with a slash."""
        with pytest.raises(InvalidTargetError):
            build_url("https", "api.example.com", "users")


class TestEncodeBody:
    """Tests for encode_body function."""

    def test_encodes_json(self):
        """Should produce compact JSON bytes."""
        assert encode_body({"name": "a", "count": 2}) == b'{"name":"a","count":2}'

    def test_encodes_rich_values(self):
        """Should encode models, dataclasses, datetimes and UUIDs."""

        class Address(BaseModel):
            city: str

        @dataclass
        class Tag:
            label: str

        body = {
            "address": Address(city="Tbilisi"),
            "tag": Tag(label="x"),
            "at": datetime(2024, 1, 1, tzinfo=UTC),
            "id": uuid.UUID("12345678-1234-5678-1234-567812345678"),
        }
        encoded = encode_body(body)
        assert b'"address":{"city":"Tbilisi"}' in encoded
        assert b'"tag":{"label":"x"}' in encoded
        assert b'"at":"2024-01-01T00:00:00Z"' in encoded
        assert b'"id":"12345678-1234-5678-1234-567812345678"' in encoded

    def test_unserializable_raises_decode_error(self):
        """Should fail with DecodeError instead of dropping the body."""
        with pytest.raises(DecodeError):
            encode_body({"handle": object()})


class TestBuildRequest:
    """Tests for build_request function."""

    def test_get_without_body(self):
        """Should build the URL and attach no body."""
        endpoint = EndpointSpec(
            host="api.example.com",
            scheme="https",
            path="/users/1",
            method=RequestMethod.GET,
        )
        request = build_request(endpoint)
        assert request.method == "GET"
        assert str(request.url) == "https://api.example.com/users/1"
        assert request.content == b""
        assert "content-type" not in request.headers

    def test_post_with_body(self):
        """Should serialize the body and mark it as JSON."""
        endpoint = EndpointSpec(
            host="api.example.com",
            path="/users",
            method=RequestMethod.POST,
            body={"name": "a"},
        )
        request = build_request(endpoint)
        assert request.method == "POST"
        assert request.content == b'{"name":"a"}'
        assert request.headers["content-type"] == "application/json"

    def test_headers_set_verbatim(self):
        """Should send descriptor headers unchanged."""
        endpoint = EndpointSpec(
            host="api.example.com",
            path="/users",
            method="GET",
            headers={"Authorization": "Bearer abc", "X-Trace": "1"},
        )
        request = build_request(endpoint)
        assert request.headers["authorization"] == "Bearer abc"
        assert request.headers["x-trace"] == "1"

    def test_default_user_agent(self):
        """Should add the SDK user agent unless the descriptor sets one."""
        default = build_request(EndpointSpec(host="api.example.com", path="/", method="GET"))
        assert default.headers["user-agent"] == USER_AGENT

        custom = build_request(
            EndpointSpec(
                host="api.example.com",
                path="/",
                method="GET",
                headers={"User-Agent": "my-app/2.0"},
            )
        )
        assert custom.headers["user-agent"] == "my-app/2.0"

    def test_descriptor_content_type_wins(self):
        """Should keep a Content-Type the descriptor provides."""
        endpoint = EndpointSpec(
            host="api.example.com",
            path="/users",
            method="POST",
            headers={"Content-Type": "application/vnd.api+json"},
            body={"name": "a"},
        )
        request = build_request(endpoint)
        assert request.headers["content-type"] == "application/vnd.api+json"

    def test_path_and_query_params(self):
        """Should resolve path params and append query params."""
        endpoint = EndpointSpec(
            host="api.example.com",
            path="/users/{id}/posts",
            method="GET",
            path_params={"id": "9"},
            query_params={"limit": "10"},
        )
        request = build_request(endpoint)
        assert str(request.url) == "https://api.example.com/users/9/posts?limit=10"

    def test_base_endpoint_subclass(self):
        """Should accept any object with the endpoint attributes."""

        class DeleteUser(BaseEndpoint):
            host = "api.example.com"
            path = "/users/{id}"
            method = RequestMethod.DELETE
            path_params = {"id": "3"}

        request = build_request(DeleteUser())
        assert request.method == "DELETE"
        assert str(request.url) == "https://api.example.com/users/3"

    def test_empty_host_fails_before_io(self):
        """Should fail with InvalidTargetError for the default empty host."""
        with pytest.raises(InvalidTargetError):
            build_request(EndpointSpec(path="/users", method="GET"))

    def test_unsupported_method_raises(self):
        """Should classify an unknown method as an invalid target."""

        class Trace(BaseEndpoint):
            host = "api.example.com"
            path = "/"
            method = "TRACE"  # type: ignore[assignment]

        with pytest.raises(InvalidTargetError):
            build_request(Trace())

    def test_incomplete_endpoint_raises(self):
        """Should classify a descriptor missing attributes as an invalid target."""

        class Partial:
            host = "api.example.com"
            scheme = "https"
            path = "/users"
            method = RequestMethod.GET

        with pytest.raises(InvalidTargetError) as exc_info:
            build_request(Partial())  # type: ignore[arg-type]
        assert "Incomplete endpoint" in str(exc_info.value)

    def test_unencodable_body_raises(self):
        """Should fail the build rather than send a bodyless request."""

        class Upload(BaseEndpoint):
            host = "api.example.com"
            path = "/upload"
            method = RequestMethod.POST
            body = {"file": object()}

        with pytest.raises(DecodeError):
            build_request(Upload())

    def test_applies_default_timeout(self):
        """Should carry the default timeout on the request."""
        request = build_request(EndpointSpec(host="api.example.com", path="/", method="GET"))
        assert request.extensions["timeout"] == httpx.Timeout(30.0).as_dict()

    def test_idempotent(self):
        """Building twice should yield identical requests."""
        endpoint = EndpointSpec(
            host="api.example.com",
            path="/users/{id}",
            method="PUT",
            headers={"X-Trace": "abc"},
            body={"name": "a", "tags": ["x", "y"]},
            query_params={"b": "2", "a": "1"},
            path_params={"id": "5"},
        )
        first = build_request(endpoint)
        second = build_request(endpoint)
        assert first is not second
        assert first.url == second.url
        assert first.method == second.method
        assert first.headers.multi_items() == second.headers.multi_items()
        assert first.content == second.content
