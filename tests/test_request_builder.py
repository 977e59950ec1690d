"""Tests for RequestBuilder."""

from __future__ import annotations

import httpx
import pytest

from httpplus.core.http import RequestBuilder
from httpplus.providers.platform import PlatformProvider, set_platform_provider
from tests.conftest import RecordingHandler


class UpperCaseEncoder(PlatformProvider):
    """Platform stub with a recognisable Base64 encoder."""

    def __init__(self) -> None:
        self.encoded: list[str] = []

    def create_transport(self) -> httpx.AsyncBaseTransport:
        raise NotImplementedError

    def encode_base64(self, value: str) -> str:
        self.encoded.append(value)
        return value.upper()

    @property
    def provider_name(self) -> str:
        return "stub"


class TestHeaders:
    def test_mutators_chain(self) -> None:
        builder = RequestBuilder()

        assert builder.add_header("X-A", "1") is builder
        assert builder.add_headers({"X-B": "2"}) is builder
        assert builder.add_param("page", 1) is builder
        assert builder.add_params({"size": 10}) is builder
        assert builder.bearer_auth("token") is builder

    def test_header_names_are_case_insensitive(self) -> None:
        builder = RequestBuilder().add_header("X-Trace", "first").add_header("x-trace", "second")

        headers = builder.headers
        assert headers["X-TRACE"] == "second"
        assert len(headers) == 1

    def test_add_headers_accepts_mapping_and_keywords(self) -> None:
        builder = RequestBuilder().add_headers({"X-A": "1"}, Accept_Language="sv")

        assert builder.headers["x-a"] == "1"
        assert builder.headers["accept_language"] == "sv"

    def test_bearer_auth(self) -> None:
        builder = RequestBuilder().bearer_auth("abc.def")

        assert builder.headers["Authorization"] == "Bearer abc.def"

    def test_basic_auth_uses_default_platform_encoder(self) -> None:
        builder = RequestBuilder().basic_auth("user", "pass")

        assert builder.headers["Authorization"] == "Basic dXNlcjpwYXNz"

    def test_basic_auth_uses_injected_platform(self) -> None:
        platform = UpperCaseEncoder()

        builder = RequestBuilder(platform=platform).basic_auth("user", "pass")

        assert platform.encoded == ["user:pass"]
        assert builder.headers["Authorization"] == "Basic USER:PASS"

    def test_basic_auth_uses_process_wide_platform(self) -> None:
        set_platform_provider(UpperCaseEncoder())

        builder = RequestBuilder().basic_auth("a", "b")

        assert builder.headers["Authorization"] == "Basic A:B"

    def test_snapshots_are_copies(self) -> None:
        builder = RequestBuilder().add_header("X-A", "1").add_param("q", "x")

        builder.headers["X-A"] = "changed"
        builder.params["q"] = "changed"

        assert builder.headers["X-A"] == "1"
        assert builder.params == {"q": "x"}


class TestParams:
    def test_none_values_are_kept_by_builder(self) -> None:
        builder = RequestBuilder().add_params({"q": None}, page=3)

        assert builder.params == {"q": None, "page": 3}

    @pytest.mark.asyncio
    async def test_none_values_are_not_sent(self, make_api) -> None:
        handler = RecordingHandler(httpx.Response(200, json=[]))
        api = make_api(handler)
        options = RequestBuilder().bearer_auth("t").add_param("q", None).add_param("page", 2)

        await api.get("/users", params=options.params, headers=options.headers)

        request = handler.requests[0]
        assert request.headers["authorization"] == "Bearer t"
        assert dict(request.url.params) == {"page": "2"}
