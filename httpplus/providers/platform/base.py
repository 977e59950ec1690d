from abc import ABC, abstractmethod

import httpx


class PlatformProvider(ABC):
    """
    Abstract base class for platform capabilities.

    A platform provider supplies the transport engine used by every
    ``httpx.AsyncClient`` that httpplus builds, and the Base64 encoder used
    for basic-auth headers. One implementation exists per runtime target;
    the active one is chosen by configuration or injected at process start.
    """

    @abstractmethod
    def create_transport(self) -> httpx.AsyncBaseTransport:
        """
        Create the transport engine for a new client.

        Returns:
            A fresh async transport; the caller owns and closes it
        """
        pass

    @abstractmethod
    def encode_base64(self, value: str) -> str:
        """
        Encode a string as standard, non-wrapped Base64.

        Args:
            value: Text to encode (UTF-8)

        Returns:
            Base64 text without line breaks
        """
        pass

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """
        Get the name of this provider.

        Returns:
            Provider name (e.g., "httpx", "mock")
        """
        pass


class PlatformProviderError(Exception):
    """Exception raised when a platform provider cannot be created."""

    def __init__(self, message: str, provider: str = None, original_error: Exception = None):
        self.provider = provider
        self.original_error = original_error
        super().__init__(message)
