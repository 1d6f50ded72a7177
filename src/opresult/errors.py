"""Error types: the error descriptor and the exceptions raised on contract misuse.

Pipeline outcomes are never raised; they travel as Error/Failure results.
The exceptions here signal programmer error, such as handing a combinator
something that is not a Result.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import msgspec

if TYPE_CHECKING:
    from opresult.types import Error

__all__ = [
    'ConfigurationError',
    'ErrorInfo',
    'OutcomeError',
    'OutcomeTypeError',
    'UserError',
]


class OutcomeError(Exception):
    """Base class for exceptions raised by opresult itself."""


class OutcomeTypeError(OutcomeError, TypeError):
    """A non-Result value was supplied where a Result is required."""


class ConfigurationError(OutcomeError, ValueError):
    """Invalid configuration value (argument or environment variable)."""


# --- User error descriptor ---


class ErrorInfo(msgspec.Struct, frozen=True, gc=False):
    """User error descriptor - struct variant, convertible into an Error result."""

    message: str
    code: int | None = None

    def to_result(self) -> Error:
        """Build the Error result carrying this descriptor."""
        from opresult.types import from_error

        return from_error(self)

    def to_exception(self) -> UserError:
        """Convert to exception for raise-based code."""
        return UserError(self.message, self.code)


class UserError(OutcomeError):
    """User error - exception variant, for callers leaving the Result world."""

    def __init__(self, message: str, code: int | None = None) -> None:
        self.message = message
        self.code = code
        super().__init__(message if code is None else f'[{code}] {message}')

    def to_info(self) -> ErrorInfo:
        """Convert to struct for Result-based code."""
        return ErrorInfo(self.message, self.code)
