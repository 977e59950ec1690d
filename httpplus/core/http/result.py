"""
Tagged outcome of an HTTP call.

A ``NetworkResult`` is exactly one of:

- ``Success(data)``: the call completed and the body was decoded
- ``Error(exception)``: the call failed; ``exception`` is a classified
  ``NetworkError``
- ``Loading()``: the call is in flight (only emitted by progress streams)

Example:
    ```python
    result = await api.get("/users/42", User)
    result.on_success(lambda user: print(user.name)).on_error(
        lambda error: print(f"Failed: {error.message}")
    )

    match result:
        case Success(data=user):
            ...
        case Error(exception=ClientError(status_code=404)):
            ...
    ```
"""

from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar

from httpplus.core.http.exceptions import InvalidResultStateError, NetworkError

T = TypeVar("T")
R = TypeVar("R")


class NetworkResult(Generic[T]):
    """Base class of the three result variants."""

    __slots__ = ()

    @property
    def is_success(self) -> bool:
        return isinstance(self, Success)

    @property
    def is_error(self) -> bool:
        return isinstance(self, Error)

    @property
    def is_loading(self) -> bool:
        return isinstance(self, Loading)

    def on_success(self, action: Callable[[T], Any]) -> "NetworkResult[T]":
        """Run ``action(data)`` if this is a ``Success``; return ``self``."""
        if isinstance(self, Success):
            action(self.data)
        return self

    def on_error(self, action: Callable[[NetworkError], Any]) -> "NetworkResult[T]":
        """Run ``action(exception)`` if this is an ``Error``; return ``self``."""
        if isinstance(self, Error):
            action(self.exception)
        return self

    def on_loading(self, action: Callable[[], Any]) -> "NetworkResult[T]":
        """Run ``action()`` if this is ``Loading``; return ``self``."""
        if isinstance(self, Loading):
            action()
        return self

    def map(self, transform: Callable[[T], R]) -> "NetworkResult[R]":
        """
        Transform the success payload.

        ``Error`` and ``Loading`` are returned unchanged and ``transform`` is
        not called. Exceptions raised by ``transform`` are not caught.
        """
        if isinstance(self, Success):
            return Success(transform(self.data))
        return self  # type: ignore[return-value]

    def get_or_null(self) -> Optional[T]:
        """Return the success payload, or None for ``Error`` and ``Loading``."""
        if isinstance(self, Success):
            return self.data
        return None

    def get_or_throw(self) -> T:
        """
        Return the success payload.

        Raises:
            NetworkError: The wrapped error, for ``Error``
            InvalidResultStateError: For ``Loading``
        """
        if isinstance(self, Success):
            return self.data
        if isinstance(self, Error):
            raise self.exception
        raise InvalidResultStateError("Result is still loading")


@dataclass(frozen=True)
class Success(NetworkResult[T]):
    data: T


@dataclass(frozen=True)
class Error(NetworkResult[Any]):
    exception: NetworkError


class Loading(NetworkResult[Any]):
    """In-flight marker. There is only ever one instance."""

    __slots__ = ()
    _instance: Optional["Loading"] = None

    def __new__(cls) -> "Loading":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Loading()"
