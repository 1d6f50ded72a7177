"""Result type: Success[T] | Error | Failure for railway-oriented pipelines.

A Result is exactly one of three immutable variants:

- ``Success(value)``: the operation completed and produced ``value``.
- ``Error(message, code=None)``: an expected, caller-induced failure.
- ``Failure(cause)``: an unexpected fault, carrying the original exception.

Every variant exposes the same dispatch primitive, ``match``, which calls
exactly one of three handlers. All combinators are built on top of it.

Examples:
    >>> success(21).match(lambda v: v * 2, lambda c, m: 0, lambda e: -1)
    42
    >>> error('bad input', 400).match(lambda v: v, lambda c, m: (c, m), lambda e: e)
    (400, 'bad input')
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import TypeIs

import msgspec

from opresult.errors import ErrorInfo, OutcomeTypeError

__all__ = [
    'Error',
    'Failure',
    'Result',
    'Success',
    'ensure_result',
    'error',
    'failure',
    'from_cause',
    'from_error',
    'from_value',
    'is_error',
    'is_failure',
    'is_result',
    'is_success',
    'success',
    'to_result',
]


class Success[T](msgspec.Struct, frozen=True, gc=False):
    """Success variant of Result containing a value of type T.

    Examples:
        >>> Success(42).match(lambda v: v + 1, lambda c, m: 0, lambda e: 0)
        43
    """

    value: T

    def is_success(self) -> TypeIs[Success[T]]:
        """Return True since this is Success."""
        return True

    def is_error(self) -> bool:
        """Return False since this is Success."""
        return False

    def is_failure(self) -> bool:
        """Return False since this is Success."""
        return False

    def match[TOut](
        self,
        on_success: Callable[[T], TOut],
        on_error: Callable[[int | None, str], TOut],  # noqa: ARG002
        on_failure: Callable[[BaseException], TOut],  # noqa: ARG002
    ) -> TOut:
        """Apply ``on_success`` to the contained value."""
        return on_success(self.value)

    async def match_async[TOut](
        self,
        on_success: Callable[[T], Awaitable[TOut]],
        on_error: Callable[[int | None, str], Awaitable[TOut]],  # noqa: ARG002
        on_failure: Callable[[BaseException], Awaitable[TOut]],  # noqa: ARG002
    ) -> TOut:
        """Await ``on_success`` applied to the contained value."""
        return await on_success(self.value)


class Error(msgspec.Struct, frozen=True, gc=False):
    """User error variant of Result.

    Used when nothing went wrong inside the system itself: the input it
    received was bad. ``code`` is None when no code was supplied, which is
    distinct from a code of 0.

    Examples:
        >>> Error('name is required').match(lambda v: v, lambda c, m: (c, m), lambda e: e)
        (None, 'name is required')
    """

    message: str
    code: int | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.message, str):
            msg = f'Error message must be a str, got {type(self.message).__name__}'
            raise TypeError(msg)
        if self.code is not None and (isinstance(self.code, bool) or not isinstance(self.code, int)):
            msg = f'Error code must be an int or None, got {type(self.code).__name__}'
            raise TypeError(msg)

    def is_success(self) -> bool:
        """Return False since this is Error."""
        return False

    def is_error(self) -> TypeIs[Error]:
        """Return True since this is Error."""
        return True

    def is_failure(self) -> bool:
        """Return False since this is Error."""
        return False

    def to_info(self) -> ErrorInfo:
        """Return the error descriptor carried by this result."""
        return ErrorInfo(self.message, self.code)

    def match[TOut](
        self,
        on_success: Callable[[object], TOut],  # noqa: ARG002
        on_error: Callable[[int | None, str], TOut],
        on_failure: Callable[[BaseException], TOut],  # noqa: ARG002
    ) -> TOut:
        """Apply ``on_error`` to ``(code, message)``."""
        return on_error(self.code, self.message)

    async def match_async[TOut](
        self,
        on_success: Callable[[object], Awaitable[TOut]],  # noqa: ARG002
        on_error: Callable[[int | None, str], Awaitable[TOut]],
        on_failure: Callable[[BaseException], Awaitable[TOut]],  # noqa: ARG002
    ) -> TOut:
        """Await ``on_error`` applied to ``(code, message)``."""
        return await on_error(self.code, self.message)


# Causes carry tracebacks, which reference frames and can form cycles,
# so Failure stays tracked by the garbage collector.
class Failure(msgspec.Struct, frozen=True):
    """System failure variant of Result, wrapping the exception that caused it.

    Examples:
        >>> Failure(KeyError('id')).message
        "'id'"
    """

    cause: BaseException

    def __post_init__(self) -> None:
        if not isinstance(self.cause, BaseException):
            msg = f'Failure cause must be an exception, got {type(self.cause).__name__}'
            raise TypeError(msg)

    @property
    def message(self) -> str:
        """Human-readable message of the cause."""
        return str(self.cause)

    def is_success(self) -> bool:
        """Return False since this is Failure."""
        return False

    def is_error(self) -> bool:
        """Return False since this is Failure."""
        return False

    def is_failure(self) -> TypeIs[Failure]:
        """Return True since this is Failure."""
        return True

    def match[TOut](
        self,
        on_success: Callable[[object], TOut],  # noqa: ARG002
        on_error: Callable[[int | None, str], TOut],  # noqa: ARG002
        on_failure: Callable[[BaseException], TOut],
    ) -> TOut:
        """Apply ``on_failure`` to the cause."""
        return on_failure(self.cause)

    async def match_async[TOut](
        self,
        on_success: Callable[[object], Awaitable[TOut]],  # noqa: ARG002
        on_error: Callable[[int | None, str], Awaitable[TOut]],  # noqa: ARG002
        on_failure: Callable[[BaseException], Awaitable[TOut]],
    ) -> TOut:
        """Await ``on_failure`` applied to the cause."""
        return await on_failure(self.cause)


type Result[T] = Success[T] | Error | Failure

_VARIANTS = (Success, Error, Failure)


# ---------------------------------------------------------------------
# Factories and named conversions
# ---------------------------------------------------------------------


def success[T](value: T) -> Result[T]:
    """Create a Success wrapping ``value``."""
    return Success(value)


def error(message: str, code: int | None = None) -> Result[object]:
    """Create a user Error with a message and an optional code."""
    return Error(message, code)


def failure(cause: BaseException) -> Result[object]:
    """Create a system Failure from the exception that caused it."""
    return Failure(cause)


def from_value[T](value: T) -> Result[T]:
    """Wrap a raw value as Success."""
    return Success(value)


to_result = from_value


def from_error(info: ErrorInfo) -> Error:
    """Build an Error from an error descriptor."""
    return Error(info.message, info.code)


def from_cause(cause: BaseException) -> Failure:
    """Build a Failure from an exception.

    Raises:
        TypeError: If ``cause`` is not an exception instance.
    """
    return Failure(cause)


# ---------------------------------------------------------------------
# Predicates
# ---------------------------------------------------------------------


def is_result(value: object) -> TypeIs[Success[object] | Error | Failure]:
    """Return True if ``value`` is one of the three Result variants."""
    return isinstance(value, _VARIANTS)


def is_success[T](result: Result[T]) -> TypeIs[Success[T]]:
    return isinstance(result, Success)


def is_error[T](result: Result[T]) -> TypeIs[Error]:
    return isinstance(result, Error)


def is_failure[T](result: Result[T]) -> TypeIs[Failure]:
    return isinstance(result, Failure)


def ensure_result[T](value: Result[T], what: str = 'value') -> Result[T]:
    """Return ``value`` if it is a Result, else raise OutcomeTypeError.

    Args:
        value: The object to check.
        what: Description of the object, used in the error message.

    Raises:
        OutcomeTypeError: If ``value`` is not a Success, Error or Failure.
    """
    if isinstance(value, _VARIANTS):
        return value
    msg = f'{what} must be a Result (Success, Error or Failure), got {type(value).__name__}'
    raise OutcomeTypeError(msg)
