"""Synchronous combinators over Result values.

Every combinator is a pure function of its input Result: it either returns
the input unchanged or builds a new Result from a caller-supplied function.
Only ``try_`` observes raised exceptions; anything a continuation raises
elsewhere propagates to the caller untouched.

Example:
    ```python
    from opresult import Result, bind, bind_error, error, failure_message, success

    def parse_age(raw: str) -> Result[int]:
        return success(int(raw)) if raw.isdigit() else error('age must be a number', 400)

    outcome = bind(success('42'), parse_age)                       # Success(value=42)
    outcome = bind(success('x'), parse_age)                        # Error(message=..., code=400)
    outcome = bind_error(outcome, lambda code, msg: success(0), failure_message)
    ```
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from opresult.runtime._config import UNSET, _Unset, resolve_catch, resolve_system_failure_code
from opresult.types import Failure, Result, Success, ensure_result

__all__ = [
    'bind',
    'bind_error',
    'bind_error_message',
    'failure_message',
    'if_error',
    'try_',
    'use',
    'use_error',
    'use_error_message',
]


def bind[T, U](source: Result[T], f: Callable[[T], Result[U]]) -> Result[U]:
    """Chain a Result-returning function onto a Success.

    Success(v) yields ``f(v)``, whatever variant that is. Error and Failure
    are returned as they are and ``f`` is never called.

    Examples:
        >>> bind(Success(2), lambda v: Success(v * 10))
        Success(value=20)
        >>> bind(Error('bad', 5), lambda v: Success(v * 10))
        Error(message='bad', code=5)
    """
    source = ensure_result(source, 'bind source')
    return source.match(
        lambda value: ensure_result(f(value), 'bind continuation result'),
        lambda _code, _message: source,
        lambda _cause: source,
    )


def bind_error[T](
    source: Result[T],
    f: Callable[[int | None, str], Result[T]],
    get_failure_message: Callable[[BaseException], str],
    system_failure_code: int | None | _Unset = UNSET,
) -> Result[T]:
    """Recover from Error or Failure with a Result-returning function.

    Error(message, code) yields ``f(code, message)``. Failure(cause) yields
    ``f(system_failure_code, get_failure_message(cause))``, so system faults
    can be recovered through the same handler as user errors. Success is
    returned unchanged.

    Args:
        source: The Result to recover.
        f: Recovery function receiving ``(code, message)``.
        get_failure_message: Projection from a Failure's cause to a message.
        system_failure_code: Code passed to ``f`` for Failures. Defaults to
            the configured ``system_failure_code``.
    """
    source = ensure_result(source, 'bind_error source')
    failure_code = resolve_system_failure_code(system_failure_code)
    return source.match(
        lambda _value: source,
        lambda code, message: ensure_result(f(code, message), 'bind_error handler result'),
        lambda cause: ensure_result(
            f(failure_code, get_failure_message(cause)), 'bind_error handler result'
        ),
    )


def bind_error_message[T](
    source: Result[T],
    f: Callable[[str], Result[T]],
    get_failure_message: Callable[[BaseException], str],
) -> Result[T]:
    """Message-only form of ``bind_error``; any Error code is discarded."""
    return bind_error(source, lambda _code, message: f(message), get_failure_message, None)


def if_error[T](source: Result[T], produce_alternative: Callable[[], Result[T]]) -> Result[T]:
    """Return ``source`` on Success, otherwise the result of ``produce_alternative()``.

    Examples:
        >>> if_error(Error('cache miss'), lambda: Success('from db'))
        Success(value='from db')
    """
    source = ensure_result(source, 'if_error source')
    if isinstance(source, Success):
        return source
    return ensure_result(produce_alternative(), 'if_error alternative')


def try_[T](
    f: Callable[[], T],
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Result[T]:
    """Run ``f`` and wrap its return value as Success, or what it raises as Failure.

    This is the boundary between raising code and the Result algebra.

    Args:
        f: Zero-argument callable to run eagerly.
        exceptions: Exception types to convert into Failure. Defaults to the
            configured ``catch`` tuple, ``(BaseException,)``.

    Examples:
        >>> try_(lambda: int('7'))
        Success(value=7)
        >>> try_(lambda: int('x')).is_failure()
        True
    """
    catch = resolve_catch(exceptions)
    try:
        value = f()
    except catch as exc:
        return Failure(exc)
    return Success(value)


def use[T](source: Result[T], side_effect: Callable[[T], Any]) -> Result[T]:
    """Call ``side_effect`` with the value of a Success; always return ``source``."""
    source = ensure_result(source, 'use source')
    if isinstance(source, Success):
        side_effect(source.value)
    return source


def use_error[T](
    source: Result[T],
    side_effect: Callable[[int | None, str], Any],
    get_failure_message: Callable[[BaseException], str],
    system_failure_code: int | None | _Unset = UNSET,
) -> Result[T]:
    """Call ``side_effect`` with ``(code, message)`` on Error or Failure; always return ``source``.

    Failures are projected exactly as in ``bind_error``.
    """
    source = ensure_result(source, 'use_error source')
    failure_code = resolve_system_failure_code(system_failure_code)
    source.match(
        lambda _value: None,
        side_effect,
        lambda cause: side_effect(failure_code, get_failure_message(cause)),
    )
    return source


def use_error_message[T](
    source: Result[T],
    side_effect: Callable[[str], Any],
    get_failure_message: Callable[[BaseException], str],
) -> Result[T]:
    """Message-only form of ``use_error``."""
    return use_error(source, lambda _code, message: side_effect(message), get_failure_message, None)


def failure_message(cause: BaseException) -> str:
    """Stock projection from a Failure cause to a message.

    Exception groups are flattened into their leaf messages, joined by ``'; '``.
    An exception with an empty message is described by its type name.

    Examples:
        >>> failure_message(ValueError('bad value'))
        'bad value'
        >>> failure_message(ExceptionGroup('batch', [KeyError('a'), ValueError('b')]))
        "'a'; b"
    """
    if isinstance(cause, BaseExceptionGroup):
        return '; '.join(failure_message(inner) for inner in cause.exceptions)
    return str(cause) or type(cause).__name__
