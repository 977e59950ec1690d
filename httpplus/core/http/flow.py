"""
Progress streams for single async calls.

Both adapters are async generators: each call produces a fresh,
single-use stream that emits ``Loading()`` first and then exactly one
terminal result. Cancellation of the consuming task propagates.
"""

from typing import AsyncIterator, Awaitable, Callable, TypeVar

from httpplus.core.http.classifier import classify_exception
from httpplus.core.http.result import Error, Loading, NetworkResult, Success

T = TypeVar("T")


async def network_flow(block: Callable[[], Awaitable[T]]) -> AsyncIterator[NetworkResult[T]]:
    """
    Run ``block`` and report its progress.

    Yields ``Loading()``, then ``Success(value)`` when ``block`` returns or
    ``Error(classified)`` when it raises.

    Example:
        ```python
        async for state in network_flow(lambda: fetch_profile(user_id)):
            state.on_loading(show_spinner).on_success(render).on_error(show_error)
        ```
    """
    yield Loading()
    try:
        value = await block()
    except Exception as e:
        outcome: NetworkResult[T] = Error(classify_exception(e))
    else:
        outcome = Success(value)
    yield outcome


async def result_flow(
    block: Callable[[], Awaitable[NetworkResult[T]]]
) -> AsyncIterator[NetworkResult[T]]:
    """
    Like ``network_flow`` for calls that already return a ``NetworkResult``.

    The result returned by ``block`` is emitted as-is after ``Loading()``,
    so ``ApiClient`` calls are not wrapped twice.
    """
    yield Loading()
    try:
        outcome = await block()
    except Exception as e:
        outcome = Error(classify_exception(e))
    yield outcome
