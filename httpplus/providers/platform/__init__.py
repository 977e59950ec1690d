"""
Platform capabilities: transport engine and Base64 encoding.
"""

from httpplus.providers.platform.base import PlatformProvider, PlatformProviderError
from httpplus.providers.platform.httpx_provider import HttpxPlatformProvider
from httpplus.providers.platform.mock_provider import MockPlatformProvider
from httpplus.providers.platform.factory import (
    PlatformProviderFactory,
    get_platform_provider,
    set_platform_provider,
)

__all__ = [
    "PlatformProvider",
    "PlatformProviderError",
    "HttpxPlatformProvider",
    "MockPlatformProvider",
    "PlatformProviderFactory",
    "get_platform_provider",
    "set_platform_provider",
]
