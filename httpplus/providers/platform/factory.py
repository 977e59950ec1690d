from typing import Optional

from httpplus.core import config
from httpplus.providers.platform.base import PlatformProvider, PlatformProviderError
from httpplus.providers.platform.httpx_provider import HttpxPlatformProvider
from httpplus.providers.platform.mock_provider import MockPlatformProvider
from httpplus.core.logging import get_logger

logger = get_logger(__name__)

# Process-wide provider, created lazily from HTTPPLUS_PLATFORM
_current_provider: Optional[PlatformProvider] = None


class PlatformProviderFactory:
    """
    Factory class for creating platform provider instances.

    Handles provider instantiation based on configuration, so the same
    client code runs against the real network or an in-process handler.
    """

    @staticmethod
    def create_provider(provider_type: str, **kwargs) -> PlatformProvider:
        """
        Create a platform provider instance based on the specified type.

        Args:
            provider_type: Type of provider to create ("httpx", "mock")
            **kwargs: Provider-specific configuration (``http2`` and
                ``transport_retries`` for "httpx", ``handler`` for "mock")

        Returns:
            Configured platform provider instance

        Raises:
            PlatformProviderError: If provider type is invalid or configuration is missing
        """
        provider_type = provider_type.lower().strip()

        logger.info(f"Creating platform provider: {provider_type}")

        if provider_type == "httpx":
            return HttpxPlatformProvider(
                http2=kwargs.get("http2", False),
                transport_retries=kwargs.get("transport_retries", 0)
            )

        elif provider_type == "mock":
            handler = kwargs.get("handler")
            if handler is None:
                raise PlatformProviderError(
                    "A request handler is required for the mock platform provider",
                    provider="mock"
                )
            return MockPlatformProvider(handler)

        else:
            raise PlatformProviderError(
                f"Unknown platform provider type: {provider_type}. "
                f"Supported types: {', '.join(PlatformProviderFactory.get_supported_providers())}",
                provider=provider_type
            )

    @staticmethod
    def get_supported_providers() -> list[str]:
        """Get list of supported provider types."""
        return ["httpx", "mock"]


def get_platform_provider() -> PlatformProvider:
    """Return the process-wide platform provider."""
    global _current_provider
    if _current_provider is None:
        _current_provider = PlatformProviderFactory.create_provider(config.PLATFORM)
    return _current_provider


def set_platform_provider(provider: Optional[PlatformProvider]) -> None:
    """
    Replace the process-wide platform provider.

    Call this once at startup. Passing None resets to the configured
    default on next use.
    """
    global _current_provider
    _current_provider = provider
    if provider is not None:
        logger.info(f"Platform provider set: {provider.provider_name}")
