from typing import Awaitable, Callable, Union

import httpx

from httpplus.providers.platform.httpx_provider import HttpxPlatformProvider

MockHandler = Callable[[httpx.Request], Union[httpx.Response, Awaitable[httpx.Response]]]


class MockPlatformProvider(HttpxPlatformProvider):
    """
    Offline platform provider.

    Every request is answered by ``handler`` instead of the network, which
    makes it useful for tests and demos. The handler may be sync or async
    and may raise httpx exceptions to simulate transport failures.

    Example:
        ```python
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"id": 1, "name": "A", "email": "a@x.com"})

        set_platform_provider(MockPlatformProvider(handler))
        ```
    """

    def __init__(self, handler: MockHandler):
        super().__init__()
        self.handler = handler

    def create_transport(self) -> httpx.AsyncBaseTransport:
        return httpx.MockTransport(self.handler)

    @property
    def provider_name(self) -> str:
        """Provider name identifier."""
        return "mock"
