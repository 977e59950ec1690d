"""
Request facade returning ``NetworkResult`` values.

``ApiClient`` exposes one coroutine per HTTP verb. A verb call never
raises: transport failures, error statuses and body encode/decode failures
are classified and returned as ``Error``. Cancellation is the only thing
that propagates.

A call that has not finished within ``ApiClient.deadline`` seconds, retries
and body decoding included, ends as ``NetworkTimeoutError``.
"""

import asyncio
from typing import Any, Mapping, Optional

import httpx

from httpplus.core.http.classifier import classify_exception
from httpplus.core.http.client import JSON_CONTENT_TYPE, HttpClientConfig, create_http_client
from httpplus.core.http.result import Error, NetworkResult, Success
from httpplus.core.http.serialization import decode_body, encode_body
from httpplus.core.logging import get_logger

logger = get_logger(__name__)


class ApiClient:
    """
    Base class for typed API clients.

    Subclass it and describe each endpoint with a verb call:

    Example:
        ```python
        class UserApi(ApiClient):
            async def get_user(self, user_id: int) -> NetworkResult[User]:
                return await self.get(f"/users/{user_id}", User)

        async with UserApi(create_http_client("https://api.example.com")) as api:
            result = await api.get_user(42)
        ```

    Args:
        client: Configured httpx client. When omitted, one is built from
            ``config`` (or the environment) and owned by this instance
        config: Settings used only when ``client`` is omitted
        lenient: Decode with type coercion; set False for strict decoding
        timeout_millis: Deadline for a whole call. Defaults to the client's
            read timeout; None there means no deadline
    """

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        *,
        config: Optional[HttpClientConfig] = None,
        lenient: bool = True,
        timeout_millis: Optional[int] = None
    ):
        self._owns_client = client is None
        self.client = client or create_http_client(config=config or HttpClientConfig.from_env())
        self.lenient = lenient
        if timeout_millis is not None:
            self.deadline: Optional[float] = timeout_millis / 1000
        else:
            self.deadline = self.client.timeout.read

    async def get(
        self,
        path: str,
        response_type: Any = Any,
        *,
        body: Any = None,
        params: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None
    ) -> NetworkResult[Any]:
        """
        Make a GET request.

        Args:
            path: Path relative to the base URL
            response_type: Type to decode the response body into
            body: Optional JSON body
            params: Query parameters; entries whose value is None are omitted
            headers: Extra HTTP headers

        Returns:
            ``Success`` with the decoded body, or ``Error`` with the classified failure
        """
        return await self._request("GET", path, response_type, body=body, params=params, headers=headers)

    async def post(
        self,
        path: str,
        response_type: Any = Any,
        *,
        body: Any = None,
        headers: Optional[Mapping[str, str]] = None
    ) -> NetworkResult[Any]:
        """
        Make a POST request.

        Args:
            path: Path relative to the base URL
            response_type: Type to decode the response body into
            body: Optional JSON body
            headers: Extra HTTP headers

        Returns:
            ``Success`` with the decoded body, or ``Error`` with the classified failure
        """
        return await self._request("POST", path, response_type, body=body, headers=headers)

    async def put(
        self,
        path: str,
        response_type: Any = Any,
        *,
        body: Any = None,
        headers: Optional[Mapping[str, str]] = None
    ) -> NetworkResult[Any]:
        """Make a PUT request. Arguments and result as for ``post``."""
        return await self._request("PUT", path, response_type, body=body, headers=headers)

    async def patch(
        self,
        path: str,
        response_type: Any = Any,
        *,
        body: Any = None,
        headers: Optional[Mapping[str, str]] = None
    ) -> NetworkResult[Any]:
        """Make a PATCH request. Arguments and result as for ``post``."""
        return await self._request("PATCH", path, response_type, body=body, headers=headers)

    async def delete(
        self,
        path: str,
        response_type: Any = None,
        *,
        headers: Optional[Mapping[str, str]] = None
    ) -> NetworkResult[Any]:
        """
        Make a DELETE request.

        The response body is ignored unless a ``response_type`` is given.
        """
        return await self._request("DELETE", path, response_type, headers=headers)

    async def safe_api_call(self, api_call) -> NetworkResult[Any]:
        """
        Await ``api_call()`` and wrap its outcome.

        Args:
            api_call: Zero-argument coroutine function

        Returns:
            ``Success`` with the returned value, or ``Error`` with the classified failure
        """
        try:
            return Success(await api_call())
        except Exception as e:
            error = classify_exception(e)
            logger.warning(f"API call failed: {error!r}")
            return Error(error)

    async def _request(
        self,
        method: str,
        path: str,
        response_type: Any,
        body: Any = None,
        params: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None
    ) -> NetworkResult[Any]:
        """Build, send and decode one request inside ``safe_api_call``."""

        async def exchange() -> Any:
            request_headers = httpx.Headers(headers or {})
            content = None
            if body is not None:
                content = encode_body(body)
                request_headers["Content-Type"] = JSON_CONTENT_TYPE

            query = {key: value for key, value in (params or {}).items() if value is not None}

            response = await self.client.request(
                method,
                path,
                content=content,
                params=query or None,
                headers=request_headers
            )
            response.raise_for_status()
            return decode_body(response, response_type, lenient=self.lenient)

        async def api_call() -> Any:
            return await asyncio.wait_for(exchange(), self.deadline)

        return await self.safe_api_call(api_call)

    async def aclose(self) -> None:
        """Close the underlying client if this instance created it."""
        if self._owns_client:
            await self.client.aclose()

    async def __aenter__(self) -> "ApiClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    def __repr__(self) -> str:
        return f"<{type(self).__name__} base_url={str(self.client.base_url)!r}>"
