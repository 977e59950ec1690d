"""Tests for body encoding and typed decoding."""

from __future__ import annotations

from typing import Any

import httpx
import pydantic
import pydantic_core
import pytest

from httpplus.core.http.serialization import decode_body, encode_body, get_type_adapter
from httpplus.pydantic_models.users.create_user_request_model import CreateUserRequestModel
from httpplus.pydantic_models.users.user_model import User


class TestEncodeBody:
    def test_encodes_models(self) -> None:
        body = CreateUserRequestModel(name="A", email="a@x.com")

        assert encode_body(body) == b'{"name":"A","email":"a@x.com"}'

    def test_encodes_plain_values(self) -> None:
        assert encode_body({"ids": [1, 2]}) == b'{"ids":[1,2]}'

    def test_unserializable_value_raises(self) -> None:
        with pytest.raises(pydantic_core.PydanticSerializationError):
            encode_body(object())


class TestDecodeBody:
    def test_none_skips_body(self) -> None:
        assert decode_body(httpx.Response(200, content=b"not json"), None) is None

    def test_raw_bytes_and_text(self) -> None:
        response = httpx.Response(200, content=b"plain")

        assert decode_body(response, bytes) == b"plain"
        assert decode_body(response, str) == "plain"

    def test_any_with_empty_body(self) -> None:
        assert decode_body(httpx.Response(204)) is None

    def test_any_returns_plain_json(self) -> None:
        assert decode_body(httpx.Response(200, json={"a": [1]}), Any) == {"a": [1]}

    def test_typed_list(self) -> None:
        response = httpx.Response(200, json=[{"id": 1, "name": "A", "email": "a@x.com"}])

        users = decode_body(response, list[User])

        assert users == [User(id=1, name="A", email="a@x.com")]

    def test_lenient_coerces_and_strict_rejects(self) -> None:
        response = httpx.Response(200, json={"id": "7", "name": "A", "email": "a@x.com"})

        assert decode_body(response, User).id == 7
        with pytest.raises(pydantic.ValidationError):
            decode_body(response, User, lenient=False)

    def test_malformed_json_raises_validation_error(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            decode_body(httpx.Response(200, content=b"{broken"), User)


def test_type_adapters_are_cached() -> None:
    assert get_type_adapter(list[User]) is get_type_adapter(list[User])
