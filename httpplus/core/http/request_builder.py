from typing import Any, Dict, Mapping, Optional

import httpx

from httpplus.providers.platform import PlatformProvider, get_platform_provider


class RequestBuilder:
    """
    Collects headers and query parameters for verb calls.

    Header names are case-insensitive. Parameters may be None; such
    entries are kept here and dropped by ``ApiClient`` when sending.
    Every mutator returns the builder so calls can be chained.

    Example:
        ```python
        options = RequestBuilder().bearer_auth(token).add_param("page", 2)
        result = await api.get("/users", list[User], params=options.params, headers=options.headers)
        ```

    Args:
        platform: Provider of the Base64 encoder used by ``basic_auth``
            (defaults to the process-wide provider)
    """

    def __init__(self, platform: Optional[PlatformProvider] = None):
        self._platform = platform
        self._headers = httpx.Headers()
        self._params: Dict[str, Any] = {}

    def add_header(self, key: str, value: str) -> "RequestBuilder":
        self._headers[key] = value
        return self

    def add_headers(self, headers: Optional[Mapping[str, str]] = None, **kwargs: str) -> "RequestBuilder":
        for key, value in {**(headers or {}), **kwargs}.items():
            self._headers[key] = value
        return self

    def add_param(self, key: str, value: Any) -> "RequestBuilder":
        self._params[key] = value
        return self

    def add_params(self, params: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> "RequestBuilder":
        self._params.update(params or {})
        self._params.update(kwargs)
        return self

    def bearer_auth(self, token: str) -> "RequestBuilder":
        self._headers["Authorization"] = f"Bearer {token}"
        return self

    def basic_auth(self, username: str, password: str) -> "RequestBuilder":
        platform = self._platform or get_platform_provider()
        encoded = platform.encode_base64(f"{username}:{password}")
        self._headers["Authorization"] = f"Basic {encoded}"
        return self

    @property
    def headers(self) -> httpx.Headers:
        """Snapshot of the collected headers (case-insensitive mapping)."""
        return httpx.Headers(self._headers)

    @property
    def params(self) -> Dict[str, Any]:
        """Snapshot of the collected query parameters, None values included."""
        return dict(self._params)
