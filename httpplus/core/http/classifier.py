"""
Maps low-level transport and serialization failures to ``NetworkError``.

Checks run in a fixed order and the first match wins. The order matters:
a decode failure while reading an error body must stay a serialization
error, and connect timeouts must be reported as timeouts rather than
connection failures.
"""

import asyncio
import json
import socket
from typing import Optional

import httpx
import pydantic
import pydantic_core

from httpplus.core.http.exceptions import (
    ClientError,
    NetworkError,
    NoInternetError,
    NetworkTimeoutError,
    SerializationError,
    ServerError,
    UnknownError,
    SERIALIZATION_MESSAGE,
    UNKNOWN_MESSAGE,
)
from httpplus.core.logging import get_logger

logger = get_logger(__name__)

_NO_INTERNET_ERRORS = (httpx.ConnectError, socket.gaierror)
_TIMEOUT_ERRORS = (httpx.TimeoutException, TimeoutError, asyncio.TimeoutError)
_SERIALIZATION_ERRORS = (
    pydantic.ValidationError,
    pydantic_core.PydanticSerializationError,
    json.JSONDecodeError,
)

# Keys commonly used by JSON APIs to carry a human readable error
_MESSAGE_KEYS = ("message", "detail", "error")


def classify_exception(exc: BaseException) -> NetworkError:
    """
    Classify an exception raised while performing an HTTP call.

    Args:
        exc: The failure raised by the transport, status evaluation or
            body encode/decode step

    Returns:
        Exactly one ``NetworkError`` subclass instance. Never raises.
    """
    if isinstance(exc, NetworkError):
        return exc

    if isinstance(exc, _NO_INTERNET_ERRORS):
        error: NetworkError = NoInternetError()
    elif isinstance(exc, _TIMEOUT_ERRORS):
        error = NetworkTimeoutError()
    elif isinstance(exc, _SERIALIZATION_ERRORS):
        error = SerializationError(SERIALIZATION_MESSAGE, original_error=exc)
    elif isinstance(exc, httpx.HTTPStatusError) and 400 <= exc.response.status_code < 500:
        error = ClientError(
            exc.response.status_code,
            f"Client error: {_status_error_message(exc)}"
        )
    elif isinstance(exc, httpx.HTTPStatusError) and 500 <= exc.response.status_code < 600:
        error = ServerError(
            exc.response.status_code,
            f"Server error: {_status_error_message(exc)}"
        )
    else:
        error = UnknownError(_describe(exc) or UNKNOWN_MESSAGE, original_error=exc)

    logger.debug(f"Classified {type(exc).__name__} as {type(error).__name__}: {error.message}")
    return error


def _status_error_message(exc: httpx.HTTPStatusError) -> str:
    """Best available description of a failed response."""
    response = exc.response
    try:
        message = _message_from_body(response)
        if message:
            return message
        text = response.text.strip()
        if text:
            return text
    except Exception:  # body unavailable or undecodable
        logger.debug("Could not read error response body", exc_info=True)

    return response.reason_phrase or _describe(exc) or UNKNOWN_MESSAGE


def _message_from_body(response: httpx.Response) -> Optional[str]:
    if not response.content:
        return None
    try:
        payload = json.loads(response.content)
    except ValueError:
        return None
    if not isinstance(payload, dict):
        return None
    for key in _MESSAGE_KEYS:
        value = payload.get(key)
        if isinstance(value, str) and value.strip():
            return value.strip()
    return None


def _describe(exc: BaseException) -> str:
    try:
        return str(exc).strip()
    except Exception:
        return ""
