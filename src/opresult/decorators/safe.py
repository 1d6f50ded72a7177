"""@safe and @safe_async decorators: try_ and try_async as decorators."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any, overload

import wrapt

from opresult.async_.combinators import try_async
from opresult.combinators import try_
from opresult.types import Result

__all__ = ['safe', 'safe_async']


@overload
def safe[**P, T](
    func: Callable[P, T],
) -> Callable[P, Result[T]]: ...


@overload
def safe[**P, T](
    func: None = None,
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Callable[[Callable[P, T]], Callable[P, Result[T]]]: ...


def safe[**P, T](
    func: Callable[P, T] | None = None,
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Any:
    """Decorator that runs every call through ``try_``.

    The wrapped function returns Success(value) on a normal return and
    Failure(exception) if it raises one of ``exceptions``.

    Can be used with or without arguments:
        @safe
        def risky(): ...

        @safe(exceptions=(ValueError, TypeError))
        def specific(): ...

    Args:
        func: The function to wrap (when used without parentheses).
        exceptions: Exception types to catch. Defaults to the configured
            ``catch`` tuple, ``(BaseException,)``.

    Example:
        ```python
        @safe
        def divide(a: int, b: int) -> float:
            return a / b
        divide(10, 2)
        # Success(value=5.0)
        divide(10, 0)
        # Failure(cause=ZeroDivisionError('division by zero'))
        ```
    """

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[P, T],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Result[T]:
        return try_(lambda: wrapped(*args, **kwargs), exceptions=exceptions)

    if func is not None:
        return wrapper(func)
    return wrapper


@overload
def safe_async[**P, T](
    func: Callable[P, Awaitable[T]],
) -> Callable[P, Awaitable[Result[T]]]: ...


@overload
def safe_async[**P, T](
    func: None = None,
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Callable[[Callable[P, Awaitable[T]]], Callable[P, Awaitable[Result[T]]]]: ...


def safe_async[**P, T](
    func: Callable[P, Awaitable[T]] | None = None,
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Any:
    """Async decorator that runs every call through ``try_async``.

    Exceptions raised before the coroutine is created and while it runs
    both become Failure.

    Example:
        ```python
        @safe_async
        async def fetch(url: str) -> str:
            # may raise
            return await http_get(url)
        ```
    """

    @wrapt.decorator
    async def wrapper(
        wrapped: Callable[P, Awaitable[T]],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Result[T]:
        return await try_async(lambda: wrapped(*args, **kwargs), exceptions=exceptions)

    if func is not None:
        return wrapper(func)
    return wrapper
