"""
HTTP convenience layer.

This module provides the typed result, the error classifier, the request
facade and the transport configuration used by all httpplus API clients.
"""

from httpplus.core.http.api_client import ApiClient
from httpplus.core.http.classifier import classify_exception
from httpplus.core.http.client import (
    HttpClientConfig,
    RetryConfig,
    RetryTransport,
    create_http_client
)
from httpplus.core.http.exceptions import (
    ClientError,
    InvalidResultStateError,
    NetworkError,
    NetworkTimeoutError,
    NoInternetError,
    SerializationError,
    ServerError,
    UnknownError
)
from httpplus.core.http.flow import network_flow, result_flow
from httpplus.core.http.request_builder import RequestBuilder
from httpplus.core.http.result import Error, Loading, NetworkResult, Success

__all__ = [
    "ApiClient",
    "classify_exception",
    "HttpClientConfig",
    "RetryConfig",
    "RetryTransport",
    "create_http_client",
    "ClientError",
    "InvalidResultStateError",
    "NetworkError",
    "NetworkTimeoutError",
    "NoInternetError",
    "SerializationError",
    "ServerError",
    "UnknownError",
    "network_flow",
    "result_flow",
    "RequestBuilder",
    "Error",
    "Loading",
    "NetworkResult",
    "Success",
]
