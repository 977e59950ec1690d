"""
JSON body encoding and schema-driven decoding.

Response bodies are decoded with a ``pydantic.TypeAdapter`` built once per
target type, so any type pydantic understands can be requested: models,
dataclasses, ``list[User]``, ``dict[str, Any]`` or plain primitives.
"""

from functools import lru_cache
from typing import Any

import httpx
import pydantic_core
from pydantic import TypeAdapter


@lru_cache(maxsize=256)
def get_type_adapter(response_type: Any) -> TypeAdapter:
    """Return the cached adapter for ``response_type``."""
    return TypeAdapter(response_type)


def encode_body(body: Any) -> bytes:
    """
    Serialize a request body to JSON.

    Raises:
        pydantic_core.PydanticSerializationError: If the value cannot be
            represented as JSON
    """
    return pydantic_core.to_json(body)


def decode_body(response: httpx.Response, response_type: Any = Any, lenient: bool = True) -> Any:
    """
    Decode a response body into ``response_type``.

    Args:
        response: A response whose body has been read
        response_type: Target type. ``None`` skips decoding entirely,
            ``bytes`` and ``str`` return the raw body, ``Any`` returns plain
            JSON (``None`` for an empty body)
        lenient: Use pydantic's lax mode (type coercion) instead of strict

    Raises:
        pydantic.ValidationError: If the body is not valid JSON or does not
            match ``response_type``
    """
    if response_type is None:
        return None
    if response_type is bytes:
        return response.content
    if response_type is str:
        return response.text
    if response_type is Any and not response.content.strip():
        return None

    return get_type_adapter(response_type).validate_json(response.content, strict=not lenient)
