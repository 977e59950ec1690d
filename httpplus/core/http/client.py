"""
Transport configuration for httpplus.

This module builds the ``httpx.AsyncClient`` that ``ApiClient`` talks
through: base URL, timeouts, JSON negotiation, request/response logging,
and transparent retry of server errors with exponential backoff.
"""

from typing import Optional

import httpx
from pydantic import BaseModel, Field
from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_result,
    stop_after_attempt,
    wait_exponential,
)

from httpplus.core import config as env
from httpplus.core.logging import get_logger
from httpplus.providers.platform import PlatformProvider, get_platform_provider

logger = get_logger(__name__)

JSON_CONTENT_TYPE = "application/json"


class RetryConfig(BaseModel):
    """Retry policy for server errors."""

    max_retries: int = Field(default=env.MAX_RETRIES, ge=0)
    base_delay: float = Field(default=env.RETRY_BASE_DELAY, ge=0)
    max_delay: float = Field(default=env.RETRY_MAX_DELAY, ge=0)
    retry_on_status: list[int] = Field(default_factory=lambda: list(range(500, 600)))


class HttpClientConfig(BaseModel):
    """Settings for clients built by ``create_http_client``."""

    base_url: str = env.BASE_URL
    timeout_millis: int = Field(default=env.TIMEOUT_MILLIS, gt=0)
    enable_logging: bool = env.ENABLE_LOGGING
    follow_redirects: bool = True
    retry: RetryConfig = Field(default_factory=RetryConfig)

    @classmethod
    def from_env(cls) -> "HttpClientConfig":
        """
        Build a config from the HTTPPLUS_* environment variables.

        Raises:
            ValueError: If any environment value is invalid
        """
        env.validate_config()
        return cls(
            base_url=env.BASE_URL,
            timeout_millis=env.TIMEOUT_MILLIS,
            enable_logging=env.ENABLE_LOGGING,
            retry=RetryConfig(
                max_retries=env.MAX_RETRIES,
                base_delay=env.RETRY_BASE_DELAY,
                max_delay=env.RETRY_MAX_DELAY,
            ),
        )


class RetryTransport(httpx.AsyncBaseTransport):
    """
    Transport wrapper that retries server-error responses.

    Responses whose status is in ``retry_on_status`` are re-sent up to
    ``max_retries`` times with exponential backoff. When attempts run out
    the last response is returned as-is, so the caller still observes the
    server error. Transport exceptions are not retried here.

    Args:
        transport: The platform transport that performs the actual I/O
        retry_config: Retry policy
    """

    def __init__(self, transport: httpx.AsyncBaseTransport, retry_config: RetryConfig):
        self._transport = transport
        self.retry_config = retry_config

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        retrying = AsyncRetrying(
            stop=stop_after_attempt(self.retry_config.max_retries + 1),
            wait=wait_exponential(
                multiplier=self.retry_config.base_delay,
                max=self.retry_config.max_delay,
            ),
            retry=retry_if_result(self._should_retry),
            retry_error_callback=self._last_response,
            before_sleep=self._log_retry,
        )
        return await retrying(self._attempt, request)

    async def _attempt(self, request: httpx.Request) -> httpx.Response:
        response = await self._transport.handle_async_request(request)
        if self._should_retry(response):
            # Buffer the body so the connection is released before the next attempt
            await response.aread()
        return response

    def _should_retry(self, response: httpx.Response) -> bool:
        return response.status_code in self.retry_config.retry_on_status

    @staticmethod
    def _last_response(retry_state: RetryCallState) -> httpx.Response:
        return retry_state.outcome.result()

    @staticmethod
    def _log_retry(retry_state: RetryCallState) -> None:
        request = retry_state.args[0]
        response = retry_state.outcome.result()
        logger.warning(
            f"{request.method} {request.url} returned {response.status_code}, "
            f"retrying (attempt {retry_state.attempt_number + 1}) "
            f"in {retry_state.next_action.sleep:.2f}s"
        )

    async def aclose(self) -> None:
        await self._transport.aclose()


async def _log_request(request: httpx.Request) -> None:
    logger.info(f"--> {request.method} {request.url}")


async def _log_response(response: httpx.Response) -> None:
    request = response.request
    logger.info(f"<-- {response.status_code} {request.method} {request.url}")


def create_http_client(
    base_url: Optional[str] = None,
    timeout_millis: Optional[int] = None,
    enable_logging: Optional[bool] = None,
    retry: Optional[RetryConfig] = None,
    *,
    config: Optional[HttpClientConfig] = None,
    platform: Optional[PlatformProvider] = None
) -> httpx.AsyncClient:
    """
    Create a configured async HTTP client.

    Explicit arguments override the matching fields of ``config``; any
    field left unset comes from the environment defaults.

    Args:
        base_url: Base URL that request paths are resolved against
        timeout_millis: Connect/read/write/pool timeout in milliseconds
        enable_logging: Log every request and response line
        retry: Retry policy for server errors
        config: Base settings (defaults to ``HttpClientConfig()``)
        platform: Platform provider supplying the transport engine
            (defaults to the process-wide provider)

    Returns:
        httpx.AsyncClient; the caller is responsible for closing it

    Example:
        ```python
        client = create_http_client("https://api.example.com", timeout_millis=10_000)
        api = ApiClient(client)
        ```
    """
    overrides = {
        "base_url": base_url,
        "timeout_millis": timeout_millis,
        "enable_logging": enable_logging,
        "retry": retry,
    }
    overrides = {key: value for key, value in overrides.items() if value is not None}
    config = config or HttpClientConfig()
    if overrides:
        config = HttpClientConfig.model_validate({**config.model_dump(), **overrides})

    platform = platform or get_platform_provider()
    transport = RetryTransport(platform.create_transport(), config.retry)

    event_hooks = {"request": [], "response": []}
    if config.enable_logging:
        event_hooks["request"].append(_log_request)
        event_hooks["response"].append(_log_response)

    client_kwargs = {}
    if config.base_url:
        client_kwargs["base_url"] = config.base_url

    logger.debug(
        f"Creating HTTP client: base_url={config.base_url!r}, "
        f"timeout={config.timeout_millis}ms, platform={platform.provider_name}"
    )

    return httpx.AsyncClient(
        transport=transport,
        timeout=httpx.Timeout(config.timeout_millis / 1000),
        headers={"Accept": JSON_CONTENT_TYPE},
        follow_redirects=config.follow_redirects,
        event_hooks=event_hooks,
        **client_kwargs
    )
