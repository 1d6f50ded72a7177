"""AsyncOutcome type for fluent chaining of async Result operations.

AsyncOutcome wraps an Awaitable[Result[T]] and exposes the combinators as
methods, each returning a new AsyncOutcome. Nothing runs until the chain
is awaited.

Example:
    ```python
    async def fetch_user(id: int) -> Result[User]:
        ...

    result = await (
        AsyncOutcome(fetch_user(1))
        .bind(validate_user)
        .use(log_success(log, 'user.loaded'))
        .bind_error(fallback_user, failure_message)
    )
    ```
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Coroutine, Generator
from typing import Any

from opresult.async_.combinators import (
    MaybeAwaitable,
    _settle,
    bind_async,
    bind_error_async,
    bind_error_message_async,
    if_error_async,
    try_async,
    use_async,
    use_error_async,
    use_error_message_async,
)
from opresult.runtime._config import UNSET, _Unset
from opresult.types import Error, Failure, Result, Success, ensure_result

__all__ = ['AsyncOutcome']


class AsyncOutcome[T]:
    """Async-aware Result wrapper for composing async Result operations.

    Note:
        AsyncOutcome is single-shot when wrapping a coroutine object.
        Coroutines can only be awaited once; awaiting the same AsyncOutcome
        twice raises RuntimeError. An AsyncOutcome built from a ready Result
        (from_result/from_value/from_error/from_cause) holds that Result
        itself and can be awaited any number of times, as can one wrapping
        a Task/Future.

    Attributes:
        _awaitable: The underlying awaitable that produces a Result, or the
            ready Result itself.
    """

    __slots__ = ('_awaitable',)

    def __init__(self, awaitable: MaybeAwaitable[Result[T]]) -> None:
        """Create an AsyncOutcome from an awaitable or a ready Result.

        Args:
            awaitable: An awaitable that produces a Result[T], or a Result[T].
        """
        self._awaitable = awaitable

    def __await__(self) -> Generator[Any, Any, Result[T]]:
        """Support await syntax to get the underlying Result."""
        return self._resolved().__await__()

    async def _resolved(self) -> Result[T]:
        return ensure_result(await _settle(self._awaitable), 'AsyncOutcome awaitable result')

    @classmethod
    def from_result(cls, result: Result[T]) -> AsyncOutcome[T]:
        """Create an AsyncOutcome from a synchronous Result."""
        return cls(ensure_result(result, 'from_result argument'))

    @classmethod
    def from_value(cls, value: T) -> AsyncOutcome[T]:
        """Create an AsyncOutcome containing Success(value)."""
        return cls.from_result(Success(value))

    @classmethod
    def from_error(cls, message: str, code: int | None = None) -> AsyncOutcome[T]:
        """Create an AsyncOutcome containing Error(message, code)."""
        return cls.from_result(Error(message, code))

    @classmethod
    def from_cause(cls, cause: BaseException) -> AsyncOutcome[T]:
        """Create an AsyncOutcome containing Failure(cause)."""
        return cls.from_result(Failure(cause))

    @classmethod
    def attempt(
        cls,
        f: Callable[[], MaybeAwaitable[T]],
        *,
        exceptions: tuple[type[BaseException], ...] | None = None,
    ) -> AsyncOutcome[T]:
        """Start a chain from ``try_async(f)``."""
        return cls(try_async(f, exceptions=exceptions))

    def bind[U](self, f: Callable[[T], MaybeAwaitable[Result[U]]]) -> AsyncOutcome[U]:
        """Chain with a (possibly async) Result-returning function."""
        return AsyncOutcome(bind_async(self._resolved(), f))

    def bind_error(
        self,
        f: Callable[[int | None, str], MaybeAwaitable[Result[T]]],
        get_failure_message: Callable[[BaseException], str],
        system_failure_code: int | None | _Unset = UNSET,
    ) -> AsyncOutcome[T]:
        """Recover from Error or Failure with a (possibly async) function."""
        return AsyncOutcome(
            bind_error_async(self._resolved(), f, get_failure_message, system_failure_code)
        )

    def bind_error_message(
        self,
        f: Callable[[str], MaybeAwaitable[Result[T]]],
        get_failure_message: Callable[[BaseException], str],
    ) -> AsyncOutcome[T]:
        """Message-only recovery from Error or Failure."""
        return AsyncOutcome(bind_error_message_async(self._resolved(), f, get_failure_message))

    def if_error(self, produce_alternative: Callable[[], MaybeAwaitable[Result[T]]]) -> AsyncOutcome[T]:
        """Fall back to ``produce_alternative()`` on any non-success."""
        return AsyncOutcome(if_error_async(self._resolved(), produce_alternative))

    def use(self, side_effect: Callable[[T], MaybeAwaitable[Any]]) -> AsyncOutcome[T]:
        """Observe the success value without changing the Result."""
        return AsyncOutcome(use_async(self._resolved(), side_effect))

    def use_error(
        self,
        side_effect: Callable[[int | None, str], MaybeAwaitable[Any]],
        get_failure_message: Callable[[BaseException], str],
        system_failure_code: int | None | _Unset = UNSET,
    ) -> AsyncOutcome[T]:
        """Observe Error or Failure without changing the Result."""
        return AsyncOutcome(
            use_error_async(self._resolved(), side_effect, get_failure_message, system_failure_code)
        )

    def use_error_message(
        self,
        side_effect: Callable[[str], MaybeAwaitable[Any]],
        get_failure_message: Callable[[BaseException], str],
    ) -> AsyncOutcome[T]:
        """Observe the message of an Error or Failure without changing the Result."""
        return AsyncOutcome(use_error_message_async(self._resolved(), side_effect, get_failure_message))

    def match[TOut](
        self,
        on_success: Callable[[T], Awaitable[TOut]],
        on_error: Callable[[int | None, str], Awaitable[TOut]],
        on_failure: Callable[[BaseException], Awaitable[TOut]],
    ) -> Coroutine[Any, Any, TOut]:
        """Await the Result and dispatch it through ``match_async``."""

        async def _matched() -> TOut:
            result = await self._resolved()
            return await result.match_async(on_success, on_error, on_failure)

        return _matched()

    def __repr__(self) -> str:
        return f'AsyncOutcome({self._awaitable!r})'
