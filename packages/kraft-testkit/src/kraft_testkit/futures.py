"""Helpers for pre-completed futures.

Controller operations return concurrent.futures.Future objects that are
already resolved when handed to the caller. Nothing is scheduled on an
executor; the future is only a result container. Async callers can await
one with ``await asyncio.wrap_future(future)``.
"""

from __future__ import annotations

from concurrent.futures import Future
from typing import TypeVar

T = TypeVar("T")


def completed_future(value: T) -> Future[T]:
    """Return a future already resolved with value.

    Example:
        >>> completed_future(42).result()
        42
    """
    future: Future[T] = Future()
    future.set_result(value)
    return future


def failed_future(exception: BaseException) -> Future[T]:
    """Return a future already failed with exception.

    Example:
        >>> failed_future(ValueError("boom")).exception()
        ValueError('boom')
    """
    future: Future[T] = Future()
    future.set_exception(exception)
    return future
