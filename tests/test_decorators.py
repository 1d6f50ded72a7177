"""Tests for decorators: @safe and @safe_async."""

import pytest

from opresult import Failure, Success, safe, safe_async
from opresult.runtime import init


class TestSafeDecorator:
    """Tests for @safe decorator."""

    def test_safe_returns_success(self):
        """@safe wraps a normal return in Success."""

        @safe
        def divide(a: int, b: int) -> float:
            return a / b

        assert divide(10, 2) == Success(5.0)

    def test_safe_returns_failure_on_exception(self):
        """@safe turns a raised exception into Failure."""

        @safe
        def divide(a: int, b: int) -> float:
            return a / b

        result = divide(10, 0)
        assert isinstance(result, Failure)
        assert isinstance(result.cause, ZeroDivisionError)

    def test_safe_with_exceptions_param(self):
        """@safe(exceptions=...) catches only the listed types."""

        @safe(exceptions=(ValueError,))
        def risky(x: int) -> int:
            if x < 0:
                raise ValueError('negative')
            if x == 0:
                raise TypeError('zero')
            return x

        assert risky(5) == Success(5)
        assert isinstance(risky(-1).cause, ValueError)

        with pytest.raises(TypeError):
            risky(0)

    def test_safe_follows_configured_catch(self):
        """Without exceptions=, @safe catches what init(catch=...) names."""
        init(catch=(KeyError,))

        @safe
        def lookup(key):
            if key == 'boom':
                raise RuntimeError('boom')
            return {'a': 1}[key]

        assert lookup('a') == Success(1)
        assert lookup('b').is_failure()
        with pytest.raises(RuntimeError):
            lookup('boom')

    def test_safe_preserves_function_name(self):
        """@safe preserves function metadata."""

        @safe
        def my_function():
            """Docs."""

        assert my_function.__name__ == 'my_function'
        assert my_function.__doc__ == 'Docs.'

    def test_safe_with_kwargs(self):
        """@safe passes positional and keyword arguments through."""

        @safe
        def greet(name: str, greeting: str = 'Hello') -> str:
            return f'{greeting}, {name}!'

        assert greet('World') == Success('Hello, World!')
        assert greet(name='Python', greeting='Hi') == Success('Hi, Python!')

    def test_safe_on_method(self):
        """@safe works on methods and keeps the bound instance."""

        class Parser:
            base = 10

            @safe
            def parse(self, text: str) -> int:
                return int(text, self.base)

        parser = Parser()
        assert parser.parse('12') == Success(12)
        assert parser.parse('zz').is_failure()


class TestSafeAsyncDecorator:
    """Tests for @safe_async decorator."""

    @pytest.mark.asyncio
    async def test_safe_async_returns_success(self):
        """@safe_async wraps the awaited value in Success."""

        @safe_async
        async def fetch(x: int) -> int:
            return x * 2

        assert await fetch(5) == Success(10)

    @pytest.mark.asyncio
    async def test_safe_async_returns_failure_on_exception(self):
        """@safe_async turns a raised exception into Failure."""

        @safe_async
        async def fail() -> int:
            raise ValueError('async error')

        result = await fail()
        assert isinstance(result, Failure)
        assert isinstance(result.cause, ValueError)

    @pytest.mark.asyncio
    async def test_safe_async_with_exceptions_param(self):
        """@safe_async(exceptions=...) catches only the listed types."""

        @safe_async(exceptions=(ValueError,))
        async def risky(x: int) -> int:
            if x < 0:
                raise ValueError('negative')
            if x == 0:
                raise LookupError('zero')
            return x

        assert await risky(5) == Success(5)
        assert (await risky(-1)).is_failure()
        with pytest.raises(LookupError):
            await risky(0)

    def test_safe_async_preserves_function_name(self):
        """@safe_async preserves function metadata."""

        @safe_async
        async def load_user():
            pass

        assert load_user.__name__ == 'load_user'
