"""Aggregation over sequences of Result producers: all_ and any_.

Producers are zero-argument callables, so an aggregation decides which of
them run at all. ``all_`` stops at the first non-success; ``any_`` stops at
the first success. Both run producers strictly in order.

``gather_all`` is the concurrent counterpart of ``all_``: it starts every
producer at once in an anyio task group and therefore never short-circuits.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterable

import anyio

from opresult.async_.combinators import MaybeAwaitable, _settle
from opresult.runtime._config import resolve_catch
from opresult.types import Error, Failure, Result, Success, ensure_result

__all__ = ['all_', 'all_async', 'any_', 'any_async', 'gather_all']


def all_[T](producers: Iterable[Callable[[], Result[T]]]) -> Result[list[T]]:
    """Run producers in order, collecting success values.

    Short-circuits on the first Error or Failure, which becomes the overall
    result; producers after it are never called.

    Args:
        producers: Zero-argument callables returning Results.

    Returns:
        Success(list of values, in call order) if all succeed, otherwise the
        first non-success result.

    Examples:
        >>> all_([lambda: Success(1), lambda: Success(2)])
        Success(value=[1, 2])
        >>> all_([lambda: Success(1), lambda: Error('bad', 5), lambda: Success(3)])
        Error(message='bad', code=5)
    """
    values: list[T] = []
    for produce in producers:
        result = ensure_result(produce(), 'all_ producer result')
        if not isinstance(result, Success):
            return result
        values.append(result.value)
    return Success(values)


def any_[T](producers: Iterable[Callable[[], Result[T]]]) -> Result[T]:
    """Run producers in order until one succeeds.

    Returns:
        The first Success. If none succeeds, the last non-success result.
        With no producers at all, ``Error('')`` (no code).

    Examples:
        >>> any_([lambda: Error('a', 1), lambda: Error('b', 2)])
        Error(message='b', code=2)
        >>> any_([lambda: Error('a', 1), lambda: Success(9)])
        Success(value=9)
    """
    outcome: Result[T] = Error('')
    for produce in producers:
        outcome = ensure_result(produce(), 'any_ producer result')
        if isinstance(outcome, Success):
            return outcome
    return outcome


async def all_async[T](
    producers: Iterable[Callable[[], MaybeAwaitable[Result[T]]]],
) -> Result[list[T]]:
    """Sequential ``all_`` for producers that may return awaitables.

    Each producer is called and awaited before the next one is called.
    """
    values: list[T] = []
    for produce in producers:
        result = ensure_result(await _settle(produce()), 'all_async producer result')
        if not isinstance(result, Success):
            return result
        values.append(result.value)
    return Success(values)


async def any_async[T](
    producers: Iterable[Callable[[], MaybeAwaitable[Result[T]]]],
) -> Result[T]:
    """Sequential ``any_`` for producers that may return awaitables."""
    outcome: Result[T] = Error('')
    for produce in producers:
        outcome = ensure_result(await _settle(produce()), 'any_async producer result')
        if isinstance(outcome, Success):
            return outcome
    return outcome


async def gather_all[T](
    producers: Iterable[Callable[[], Awaitable[Result[T]]]],
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Result[list[T]]:
    """Run all producers concurrently and combine them like ``all_``.

    Every producer runs to completion; there is no short-circuit. A producer
    that raises one of ``exceptions`` (default: the configured ``catch``) is
    recorded as Failure at its position. The outcome is Success with the
    values in producer order, or the non-success result with the lowest index.

    A producer that raises something outside ``exceptions`` cancels the
    others. If it is the only such producer its exception is re-raised as is;
    several at once surface as the task group's ``BaseExceptionGroup``.

    Example:
        ```python
        users = await gather_all([lambda: fetch_user(1), lambda: fetch_user(2)])
        ```
    """
    catch = resolve_catch(exceptions)
    pending = list(producers)
    outcomes: list[object] = [None] * len(pending)

    async def run(index: int, produce: Callable[[], Awaitable[Result[T]]]) -> None:
        try:
            outcomes[index] = await _settle(produce())
        except catch as exc:
            outcomes[index] = Failure(exc)

    try:
        async with anyio.create_task_group() as tg:
            for index, produce in enumerate(pending):
                tg.start_soon(run, index, produce)
    except BaseExceptionGroup as group:
        if len(group.exceptions) == 1:
            raise group.exceptions[0] from None
        raise

    values: list[T] = []
    for outcome in outcomes:
        result = ensure_result(outcome, 'gather_all producer result')
        if not isinstance(result, Success):
            return result
        values.append(result.value)
    return Success(values)
