"""Tests for platform providers and the provider factory."""

from __future__ import annotations

import base64

import httpx
import pytest

from httpplus.core import config as env
from httpplus.providers.platform import (
    HttpxPlatformProvider,
    MockPlatformProvider,
    PlatformProviderError,
    PlatformProviderFactory,
    get_platform_provider,
    set_platform_provider,
)


class TestPlatformProviderFactory:
    def test_creates_httpx_provider(self) -> None:
        provider = PlatformProviderFactory.create_provider(" HTTPX ", transport_retries=1)

        assert isinstance(provider, HttpxPlatformProvider)
        assert provider.provider_name == "httpx"
        assert provider.transport_retries == 1

    def test_creates_mock_provider(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200)

        provider = PlatformProviderFactory.create_provider("mock", handler=handler)

        assert isinstance(provider, MockPlatformProvider)
        assert isinstance(provider.create_transport(), httpx.MockTransport)

    def test_mock_provider_requires_handler(self) -> None:
        with pytest.raises(PlatformProviderError) as exc_info:
            PlatformProviderFactory.create_provider("mock")

        assert exc_info.value.provider == "mock"

    def test_unknown_provider(self) -> None:
        with pytest.raises(PlatformProviderError, match="Supported types: httpx, mock"):
            PlatformProviderFactory.create_provider("okhttp")

    def test_supported_providers(self) -> None:
        assert PlatformProviderFactory.get_supported_providers() == ["httpx", "mock"]


class TestProcessWideProvider:
    def test_default_comes_from_configuration(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(env, "PLATFORM", "httpx")
        set_platform_provider(None)

        provider = get_platform_provider()

        assert isinstance(provider, HttpxPlatformProvider)
        assert get_platform_provider() is provider

    def test_injected_provider_wins(self) -> None:
        injected = MockPlatformProvider(lambda request: httpx.Response(200))

        set_platform_provider(injected)

        assert get_platform_provider() is injected


class TestHttpxPlatformProvider:
    def test_creates_real_transport(self) -> None:
        transport = HttpxPlatformProvider().create_transport()

        assert isinstance(transport, httpx.AsyncHTTPTransport)

    def test_base64_is_standard_and_unwrapped(self) -> None:
        value = "user:" + "p" * 200

        encoded = HttpxPlatformProvider().encode_base64(value)

        assert "\n" not in encoded
        assert base64.b64decode(encoded).decode("utf-8") == value

    def test_base64_handles_unicode(self) -> None:
        assert HttpxPlatformProvider().encode_base64("åsa:lösen") == base64.b64encode(
            "åsa:lösen".encode("utf-8")
        ).decode("ascii")
