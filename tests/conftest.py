"""
Shared fixtures for httpplus tests.

Facade tests run fully offline through ``MockPlatformProvider``: each test
supplies a request handler and gets an ``ApiClient`` wired to it.
"""

from __future__ import annotations

from typing import Callable

import httpx
import pytest

from httpplus.core.http import ApiClient, RetryConfig, create_http_client
from httpplus.providers.platform import MockPlatformProvider, set_platform_provider
from httpplus.providers.platform.mock_provider import MockHandler

BASE_URL = "https://api.test"

# No waiting between attempts in tests
NO_RETRY = RetryConfig(max_retries=0, base_delay=0, max_delay=0)


class RecordingHandler:
    """Request handler that records requests and replays queued responses."""

    def __init__(self, *responses: httpx.Response | Exception) -> None:
        self.requests: list[httpx.Request] = []
        self._responses = list(responses)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        # The last queued response repeats once the queue is drained
        outcome = self._responses.pop(0) if len(self._responses) > 1 else self._responses[0]
        if isinstance(outcome, Exception):
            raise outcome
        # Fresh copy per request; httpx mutates responses it receives
        return httpx.Response(outcome.status_code, headers=outcome.headers, content=outcome.content)

    @property
    def call_count(self) -> int:
        return len(self.requests)


@pytest.fixture(autouse=True)
def reset_platform_provider():
    """Restore the process-wide platform provider after every test."""
    yield
    set_platform_provider(None)


@pytest.fixture
def make_api() -> Callable[..., ApiClient]:
    """Build an ApiClient whose transport is answered by ``handler``."""

    def _make(handler: MockHandler, retry: RetryConfig = NO_RETRY, lenient: bool = True) -> ApiClient:
        client = create_http_client(
            base_url=BASE_URL,
            enable_logging=False,
            retry=retry,
            platform=MockPlatformProvider(handler),
        )
        return ApiClient(client, lenient=lenient)

    return _make
