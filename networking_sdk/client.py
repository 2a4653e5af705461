"""Request dispatcher for endpoint descriptors.

Example usage:
    from networking_sdk import EndpointSpec, NetworkService

    service = NetworkService.shared()

    # Suspending form
    user = await service.send_request(
        EndpointSpec(host="api.example.com", path="/users/{id}",
                     method="GET", path_params={"id": "1"}),
        User,
    )

    # Callback form
    service.send_request_with_callback(endpoint, User, lambda result: print(result))
"""

import asyncio
import json
import os
import threading
from collections.abc import Callable, Coroutine
from typing import Any, TypeVar

import httpx

from networking_sdk._internal.http import create_async_http_client
from networking_sdk._internal.redaction import redact_body, redact_headers
from networking_sdk._internal.request_builder import build_request
from networking_sdk._internal.response import check_response, decode_response
from networking_sdk.exceptions import (
    InvalidTargetError,
    NetworkError,
    UnknownResponseError,
)
from networking_sdk.models.endpoint import Endpoint
from networking_sdk.models.result import Result

T = TypeVar("T")

ResultHandler = Callable[[Result[T]], None]
DispatchHandle = asyncio.Task[None] | threading.Thread

DEBUG_ENV_VAR = "NETWORKING_SDK_DEBUG"


class NetworkService:
    """Stateless dispatcher that sends endpoints and decodes their responses.

    A single instance may be shared freely between callers and threads; it
    holds only configuration fixed at construction. Each call builds its own
    request and its own HTTP client, so calls never affect each other.

    Use `NetworkService.shared()` for the process-wide instance configured from
    environment variables.
    """

    _shared: "NetworkService | None" = None
    _shared_lock = threading.Lock()

    def __init__(
        self,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        debug: bool = False,
    ) -> None:
        """Initialize the service.

        Args:
            transport: Optional httpx transport requests are sent through.
            debug: Enable debug logging to stderr.
        """
        self._transport = transport
        self._debug = debug

    @classmethod
    def from_env(cls) -> "NetworkService":
        """Create a service from environment variables.

        Optional environment variables:
            NETWORKING_SDK_DEBUG: Set to "1" to enable debug logging.
        """
        debug = os.environ.get(DEBUG_ENV_VAR, "") == "1"
        return cls(debug=debug)

    @classmethod
    def shared(cls) -> "NetworkService":
        """Return the process-wide service, creating it on first use."""
        if cls._shared is None:
            with cls._shared_lock:
                if cls._shared is None:
                    cls._shared = cls.from_env()
        return cls._shared

    def _log_debug(self, message: str) -> None:
        """Log a debug message to stderr if debug mode is enabled."""
        if self._debug:
            import sys

            print(f"[networking-sdk] {message}", file=sys.stderr)

    # =========================================================================
    # Core
    # =========================================================================

    def _build(self, endpoint: Endpoint) -> httpx.Request:
        request = build_request(endpoint)
        self._log_debug(f"{request.method} {request.url}")
        self._log_debug(f"Request headers: {redact_headers(request.headers)}")
        if request.content:
            self._log_debug(
                f"Request body as JSON: {json.dumps(redact_body(json.loads(request.content)))}"
            )
        return request

    async def _send(self, request: httpx.Request) -> httpx.Response:
        """Send a request; the only point at which a call suspends."""
        try:
            async with create_async_http_client(transport=self._transport) as client:
                response = await client.send(request)
        except httpx.TransportError as e:
            raise InvalidTargetError(f"Request to {request.url} failed: {e}") from e
        except httpx.HTTPError as e:
            raise UnknownResponseError(f"Malformed response from {request.url}: {e}") from e
        self._log_debug(f"Received status {response.status_code} from {request.url}")
        return response

    async def _execute(self, endpoint: Endpoint, classify: Callable[[httpx.Response], T]) -> T:
        try:
            request = self._build(endpoint)
            response = await self._send(request)
            return classify(response)
        except NetworkError as e:
            self._log_debug(f"{e.kind.value}: {e}")
            raise

    # =========================================================================
    # Suspending Form
    # =========================================================================

    async def send_request(self, endpoint: Endpoint, response_type: type[T]) -> T:
        """Send an endpoint and decode its JSON response.

        Args:
            endpoint: The request to send.
            response_type: Shape to decode the body into (pydantic model,
                dataclass, TypedDict, or builtin container).

        Returns:
            The decoded body.

        Raises:
            InvalidTargetError: Invalid URL or transport failure.
            UnknownResponseError: Malformed response or empty body.
            UnexpectedStatusCodeError: Status outside 200-299.
            DecodeError: Body not decodable, or request body not encodable.
        """
        return await self._execute(
            endpoint, lambda response: decode_response(response, response_type)
        )

    async def send_request_with_no_response(self, endpoint: Endpoint) -> None:
        """Send an endpoint whose response body is not needed.

        Any status in 200-299 is success; the body is never inspected.

        Raises:
            NetworkError: Same classification as `send_request`, minus decoding.
        """
        await self._execute(
            endpoint, lambda response: check_response(response, expect_body=False)
        )

    # =========================================================================
    # Callback Form
    # =========================================================================

    def send_request_with_callback(
        self,
        endpoint: Endpoint,
        response_type: type[T],
        result_handler: ResultHandler[T],
    ) -> DispatchHandle:
        """Send an endpoint and deliver the decoded response to a handler.

        The handler is invoked exactly once with a `Result`. Keep a reference
        to the returned task until it finishes; the event loop does not.

        Returns:
            The scheduled asyncio.Task when called with a running event loop,
            otherwise the started worker thread.
        """
        return self._dispatch(self.send_request(endpoint, response_type), result_handler)

    def send_request_with_no_response_callback(
        self,
        endpoint: Endpoint,
        completion: ResultHandler[None],
    ) -> DispatchHandle:
        """Callback form of `send_request_with_no_response`."""
        return self._dispatch(self.send_request_with_no_response(endpoint), completion)

    def _dispatch(
        self,
        call: Coroutine[Any, Any, T],
        handler: ResultHandler[T],
    ) -> DispatchHandle:
        async def run() -> None:
            try:
                value = await call
            except NetworkError as e:
                result: Result[T] = Result.failure(e)
            except Exception as e:
                self._log_debug(f"Unclassified error: {e!r}")
                error = UnknownResponseError(f"Unexpected error: {e!r}")
                error.__cause__ = e
                result = Result.failure(error)
            else:
                result = Result.success(value)
            handler(result)

        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            thread = threading.Thread(target=asyncio.run, args=(run(),), daemon=True)
            thread.start()
            return thread
        return loop.create_task(run())


def get_network_service() -> NetworkService:
    """Get the shared network service.

    Returns:
        The process-wide NetworkService, configured from environment variables.
    """
    return NetworkService.shared()
