"""
Domain errors for HTTP calls.

Every failure observed by ``ApiClient`` is classified into exactly one of
the concrete subclasses below. They are regular exceptions so callers that
prefer raise-based control flow can re-raise them via
``NetworkResult.get_or_throw()``.
"""

from typing import Optional

NO_INTERNET_MESSAGE = "No internet connection"
TIMEOUT_MESSAGE = "Request timeout"
SERIALIZATION_MESSAGE = "Serialization error"
UNKNOWN_MESSAGE = "Unknown error"


class NetworkError(Exception):
    """
    Base exception for all classified network errors.

    Catch this to handle any failure produced by the request facade
    generically. Errors compare by value: same kind, status code, message
    and original error.
    """

    default_message = UNKNOWN_MESSAGE

    def __init__(
        self,
        message: Optional[str] = None,
        status_code: Optional[int] = None,
        original_error: Optional[BaseException] = None
    ):
        """
        Initialize network error.

        Args:
            message: Human-readable error description; falls back to the
                class default when empty
            status_code: HTTP status code if applicable (optional)
            original_error: The underlying exception that caused this error (optional)
        """
        self.message = message or self.default_message
        self.status_code = status_code
        self.original_error = original_error

        super().__init__(self.message)
        if original_error is not None:
            self.__cause__ = original_error

    def __str__(self) -> str:
        """Return string representation of the error."""
        parts = [self.message]
        if self.status_code:
            parts.append(f"Status: {self.status_code}")
        return " | ".join(parts)

    def _key(self) -> tuple:
        return (type(self), self.status_code, self.message, self.original_error)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NetworkError):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        if self.status_code:
            return f"{type(self).__name__}({self.status_code}, {self.message!r})"
        return f"{type(self).__name__}({self.message!r})"


class NoInternetError(NetworkError):
    """
    Raised when the host cannot be reached at all.

    This covers DNS resolution failures and connections that could not be
    established.
    """

    default_message = NO_INTERNET_MESSAGE

    def __init__(self, message: str = NO_INTERNET_MESSAGE):
        super().__init__(message)


class NetworkTimeoutError(NetworkError):
    """Raised when a request exceeds the configured timeout."""

    default_message = TIMEOUT_MESSAGE

    def __init__(self, message: str = TIMEOUT_MESSAGE):
        super().__init__(message)


class ClientError(NetworkError):
    """The server answered with a 4xx status."""

    def __init__(self, status_code: int, message: str):
        super().__init__(message, status_code=status_code)


class ServerError(NetworkError):
    """The server answered with a 5xx status."""

    def __init__(self, status_code: int, message: str):
        super().__init__(message, status_code=status_code)


class SerializationError(NetworkError):
    """A request body could not be encoded or a response body decoded."""

    default_message = SERIALIZATION_MESSAGE

    def __init__(self, message: str = SERIALIZATION_MESSAGE, original_error: Optional[BaseException] = None):
        super().__init__(message, original_error=original_error)


class UnknownError(NetworkError):
    """Any failure that does not fit the other categories."""

    def __init__(self, message: str = UNKNOWN_MESSAGE, original_error: Optional[BaseException] = None):
        super().__init__(message, original_error=original_error)


class InvalidResultStateError(RuntimeError):
    """Raised when a ``Loading`` result is force-unwrapped."""
    pass
