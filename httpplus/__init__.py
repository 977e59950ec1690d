"""
httpplus: typed results and error classification on top of httpx.
"""

from httpplus.core.http import (
    ApiClient,
    ClientError,
    Error,
    HttpClientConfig,
    InvalidResultStateError,
    Loading,
    NetworkError,
    NetworkResult,
    NetworkTimeoutError,
    NoInternetError,
    RequestBuilder,
    RetryConfig,
    SerializationError,
    ServerError,
    Success,
    UnknownError,
    classify_exception,
    create_http_client,
    network_flow,
    result_flow
)
from httpplus.core.logging import get_logger, setup_logging
from httpplus.providers.platform import (
    PlatformProvider,
    get_platform_provider,
    set_platform_provider
)

__version__ = "1.0.0"

__all__ = [
    "ApiClient",
    "ClientError",
    "Error",
    "HttpClientConfig",
    "InvalidResultStateError",
    "Loading",
    "NetworkError",
    "NetworkResult",
    "NetworkTimeoutError",
    "NoInternetError",
    "RequestBuilder",
    "RetryConfig",
    "SerializationError",
    "ServerError",
    "Success",
    "UnknownError",
    "classify_exception",
    "create_http_client",
    "network_flow",
    "result_flow",
    "get_logger",
    "setup_logging",
    "PlatformProvider",
    "get_platform_provider",
    "set_platform_provider",
]
