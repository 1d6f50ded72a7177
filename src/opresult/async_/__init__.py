"""Async utilities: AsyncOutcome and the async forms of the combinators.

Examples:
    >>> from opresult.async_ import AsyncOutcome, bind_async
    >>>
    >>> async def fetch(id: int) -> Result[dict]:
    ...     return Success({'id': id})
    >>>
    >>> async def main():
    ...     # Free-function form
    ...     result = await bind_async(fetch(1), lambda d: Success(d['id']))
    ...
    ...     # Fluent form
    ...     result = await AsyncOutcome(fetch(1)).bind(lambda d: Success(d['id']))
"""

from opresult.async_.combinators import (
    bind_async,
    bind_error_async,
    bind_error_message_async,
    if_error_async,
    try_async,
    use_async,
    use_error_async,
    use_error_message_async,
)
from opresult.async_.result import AsyncOutcome

__all__ = [
    'AsyncOutcome',
    'bind_async',
    'bind_error_async',
    'bind_error_message_async',
    'if_error_async',
    'try_async',
    'use_async',
    'use_error_async',
    'use_error_message_async',
]
