"""Async forms of the combinators.

Each function accepts as ``source`` either a Result or an awaitable that
produces one, and accepts continuations that return either a plain value
or an awaitable. Suspension happens only while awaiting the source or a
continuation's awaitable; the dispatch itself never suspends.

Example:
    ```python
    async def load_user(user_id: int) -> Result[User]:
        ...

    async def load_orders(user: User) -> Result[list[Order]]:
        ...

    orders = await bind_async(load_user(7), load_orders)
    ```
"""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable
from typing import Any

from opresult.runtime._config import UNSET, _Unset, resolve_catch, resolve_system_failure_code
from opresult.types import Failure, Result, Success, ensure_result

__all__ = [
    'bind_async',
    'bind_error_async',
    'bind_error_message_async',
    'if_error_async',
    'try_async',
    'use_async',
    'use_error_async',
    'use_error_message_async',
]

type MaybeAwaitable[T] = T | Awaitable[T]


async def _settle[T](value: MaybeAwaitable[T]) -> T:
    """Await ``value`` if it is awaitable, else return it as is."""
    if inspect.isawaitable(value):
        return await value
    return value


async def _resolve[T](source: MaybeAwaitable[Result[T]], what: str) -> Result[T]:
    return ensure_result(await _settle(source), what)


async def _returned[T](result: Result[T]) -> Result[T]:
    return result


async def bind_async[T, U](
    source: MaybeAwaitable[Result[T]],
    f: Callable[[T], MaybeAwaitable[Result[U]]],
) -> Result[U]:
    """Async ``bind``: chain a (possibly async) Result-returning function.

    Error and Failure are returned without calling ``f``.

    Examples:
        >>> async def double(x: int) -> Result[int]:
        ...     return Success(x * 2)
        >>> asyncio.run(bind_async(Success(4), double))
        Success(value=8)
    """
    result = await _resolve(source, 'bind_async source')

    async def _chain(value: T) -> Result[U]:
        return ensure_result(await _settle(f(value)), 'bind_async continuation result')

    return await result.match_async(
        _chain,
        lambda _code, _message: _returned(result),
        lambda _cause: _returned(result),
    )


async def bind_error_async[T](
    source: MaybeAwaitable[Result[T]],
    f: Callable[[int | None, str], MaybeAwaitable[Result[T]]],
    get_failure_message: Callable[[BaseException], str],
    system_failure_code: int | None | _Unset = UNSET,
) -> Result[T]:
    """Async ``bind_error``: recover from Error or Failure with a (possibly async) function."""
    result = await _resolve(source, 'bind_error_async source')
    failure_code = resolve_system_failure_code(system_failure_code)

    async def _recover(code: int | None, message: str) -> Result[T]:
        return ensure_result(await _settle(f(code, message)), 'bind_error_async handler result')

    return await result.match_async(
        lambda _value: _returned(result),
        _recover,
        lambda cause: _recover(failure_code, get_failure_message(cause)),
    )


async def bind_error_message_async[T](
    source: MaybeAwaitable[Result[T]],
    f: Callable[[str], MaybeAwaitable[Result[T]]],
    get_failure_message: Callable[[BaseException], str],
) -> Result[T]:
    """Message-only form of ``bind_error_async``; any Error code is discarded."""
    return await bind_error_async(source, lambda _code, message: f(message), get_failure_message, None)


async def if_error_async[T](
    source: MaybeAwaitable[Result[T]],
    produce_alternative: Callable[[], MaybeAwaitable[Result[T]]],
) -> Result[T]:
    """Async ``if_error``: on any non-success, await the alternative."""
    result = await _resolve(source, 'if_error_async source')
    if isinstance(result, Success):
        return result
    return ensure_result(await _settle(produce_alternative()), 'if_error_async alternative')


async def try_async[T](
    f: Callable[[], MaybeAwaitable[T]],
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Result[T]:
    """Run ``f`` and await its result inside one catch scope.

    Both a synchronous raise from ``f()`` and an exception raised while
    awaiting what it returned become Failure. ``f`` may also return a plain
    value, which is wrapped directly.

    Args:
        f: Zero-argument callable returning an awaitable or a value.
        exceptions: Exception types to convert into Failure. Defaults to the
            configured ``catch`` tuple, ``(BaseException,)``, so a timeout or
            ``asyncio.CancelledError`` raised by the awaited work becomes
            Failure too. Pass a narrower tuple to let cancellation propagate.
    """
    catch = resolve_catch(exceptions)
    try:
        value = await _settle(f())
    except catch as exc:
        return Failure(exc)
    return Success(value)


async def use_async[T](
    source: MaybeAwaitable[Result[T]],
    side_effect: Callable[[T], MaybeAwaitable[Any]],
) -> Result[T]:
    """Async ``use``: await ``side_effect(value)`` on Success, then return the source Result."""
    result = await _resolve(source, 'use_async source')
    if isinstance(result, Success):
        await _settle(side_effect(result.value))
    return result


async def use_error_async[T](
    source: MaybeAwaitable[Result[T]],
    side_effect: Callable[[int | None, str], MaybeAwaitable[Any]],
    get_failure_message: Callable[[BaseException], str],
    system_failure_code: int | None | _Unset = UNSET,
) -> Result[T]:
    """Async ``use_error``: await the side effect on Error or Failure, then return the source Result."""
    result = await _resolve(source, 'use_error_async source')
    failure_code = resolve_system_failure_code(system_failure_code)

    async def _observe(code: int | None, message: str) -> None:
        await _settle(side_effect(code, message))

    async def _skip(_value: T) -> None:
        return None

    await result.match_async(
        _skip,
        _observe,
        lambda cause: _observe(failure_code, get_failure_message(cause)),
    )
    return result


async def use_error_message_async[T](
    source: MaybeAwaitable[Result[T]],
    side_effect: Callable[[str], MaybeAwaitable[Any]],
    get_failure_message: Callable[[BaseException], str],
) -> Result[T]:
    """Message-only form of ``use_error_async``."""
    return await use_error_async(
        source, lambda _code, message: side_effect(message), get_failure_message, None
    )
