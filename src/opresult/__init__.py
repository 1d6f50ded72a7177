"""opresult: three-way operation results for railway-oriented Python.

A Result is Success(value), Error(message, code) for expected user errors,
or Failure(cause) for unexpected system faults. Combinators chain fallible
steps so that only the success track runs until an explicit recovery point.

Flat imports (preferred):
    from opresult import Result, Success, Error, Failure
    from opresult import bind, bind_error, if_error, try_, use, use_error
    from opresult import all_, any_, safe

Submodule imports (for organization):
    from opresult.types import Success, Error, Failure
    from opresult.async_ import AsyncOutcome, bind_async
    from opresult.runtime import init, get_logger
"""

# Aggregation
from opresult.aggregate import all_, all_async, any_, any_async, gather_all

# Async
from opresult.async_ import (
    AsyncOutcome,
    bind_async,
    bind_error_async,
    bind_error_message_async,
    if_error_async,
    try_async,
    use_async,
    use_error_async,
    use_error_message_async,
)

# Combinators
from opresult.combinators import (
    bind,
    bind_error,
    bind_error_message,
    failure_message,
    if_error,
    try_,
    use,
    use_error,
    use_error_message,
)

# Decorators
from opresult.decorators import safe, safe_async

# Errors
from opresult.errors import (
    ConfigurationError,
    ErrorInfo,
    OutcomeError,
    OutcomeTypeError,
    UserError,
)

# Types
from opresult.types import (
    Error,
    Failure,
    Result,
    Success,
    error,
    failure,
    from_cause,
    from_error,
    from_value,
    is_error,
    is_failure,
    is_result,
    is_success,
    success,
    to_result,
)

__all__ = [
    # Async
    'AsyncOutcome',
    # Errors
    'ConfigurationError',
    # Result types
    'Error',
    'ErrorInfo',
    'Failure',
    'OutcomeError',
    'OutcomeTypeError',
    'Result',
    'Success',
    'UserError',
    # Aggregation
    'all_',
    'all_async',
    'any_',
    'any_async',
    # Combinators
    'bind',
    'bind_async',
    'bind_error',
    'bind_error_async',
    'bind_error_message',
    'bind_error_message_async',
    # Factories
    'error',
    'failure',
    'failure_message',
    'from_cause',
    'from_error',
    'from_value',
    'gather_all',
    'if_error',
    'if_error_async',
    'is_error',
    'is_failure',
    'is_result',
    'is_success',
    # Decorators
    'safe',
    'safe_async',
    'success',
    'to_result',
    'try_',
    'try_async',
    'use',
    'use_async',
    'use_error',
    'use_error_async',
    'use_error_message',
    'use_error_message_async',
]

__version__ = '0.1.0'
