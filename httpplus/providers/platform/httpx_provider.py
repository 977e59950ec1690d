import base64

import httpx

from httpplus.providers.platform.base import PlatformProvider


class HttpxPlatformProvider(PlatformProvider):
    """
    Default platform provider backed by httpx's own connection pool.

    Args:
        http2: Negotiate HTTP/2 when the server supports it (needs the
            ``h2`` extra of httpx)
        transport_retries: Connection-level retries performed by httpx
            before a request is considered failed
    """

    def __init__(self, http2: bool = False, transport_retries: int = 0):
        self.http2 = http2
        self.transport_retries = transport_retries

    def create_transport(self) -> httpx.AsyncBaseTransport:
        return httpx.AsyncHTTPTransport(http2=self.http2, retries=self.transport_retries)

    def encode_base64(self, value: str) -> str:
        return base64.b64encode(value.encode("utf-8")).decode("ascii")

    @property
    def provider_name(self) -> str:
        """Provider name identifier."""
        return "httpx"
