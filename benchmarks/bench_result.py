"""Benchmarks comparing opresult vs returns library.

Run with: pytest benchmarks/ --benchmark-only -v
"""

# opresult imports
from opresult import Error as OError
from opresult import Failure as OFailure
from opresult import Success as OSuccess
from opresult import all_ as o_all
from opresult import bind as o_bind
from opresult import bind_error as o_bind_error
from opresult import safe as o_safe

# returns library imports
from returns.result import Failure, Success
from returns.result import safe as r_safe

# =============================================================================
# Creation benchmarks
# =============================================================================


class TestCreation:
    """Benchmark Success/Error/Failure creation."""

    def test_opresult_success_creation(self, benchmark):
        """Benchmark opresult Success creation."""
        benchmark(OSuccess, 42)

    def test_returns_success_creation(self, benchmark):
        """Benchmark returns Success creation."""
        benchmark(Success, 42)

    def test_opresult_error_creation(self, benchmark):
        """Benchmark opresult Error creation."""
        benchmark(OError, 'error', 400)

    def test_opresult_failure_creation(self, benchmark):
        """Benchmark opresult Failure creation."""
        cause = RuntimeError('boom')
        benchmark(OFailure, cause)

    def test_returns_failure_creation(self, benchmark):
        """Benchmark returns Failure creation."""
        benchmark(Failure, 'error')


# =============================================================================
# Combinator benchmarks
# =============================================================================


class TestCombinators:
    """Benchmark single combinator calls."""

    def test_opresult_bind(self, benchmark):
        """Benchmark opresult bind."""
        ok = OSuccess(5)
        benchmark(o_bind, ok, lambda x: OSuccess(x * 2))

    def test_returns_bind(self, benchmark):
        """Benchmark returns bind."""
        ok = Success(5)
        benchmark(ok.bind, lambda x: Success(x * 2))

    def test_opresult_bind_skipped(self, benchmark):
        """Benchmark opresult bind on the error track."""
        err = OError('bad', 1)
        benchmark(o_bind, err, lambda x: OSuccess(x * 2))

    def test_opresult_bind_error(self, benchmark):
        """Benchmark opresult bind_error recovering an Error."""
        err = OError('bad', 1)
        benchmark(o_bind_error, err, lambda code, message: OSuccess(0), str)

    def test_returns_lash(self, benchmark):
        """Benchmark returns lash (error-track bind)."""
        err = Failure('bad')
        benchmark(err.lash, lambda e: Success(0))

    def test_opresult_match(self, benchmark):
        """Benchmark opresult three-way match."""
        ok = OSuccess(5)
        benchmark(ok.match, lambda v: v, lambda c, m: m, str)


# =============================================================================
# Chaining benchmarks
# =============================================================================


class TestChaining:
    """Benchmark chained operations."""

    def test_opresult_chain_10(self, benchmark):
        """Benchmark opresult 10-step bind chain."""

        def chain():
            r = OSuccess(0)
            for i in range(10):
                r = o_bind(r, lambda x, i=i: OSuccess(x + i))
            return r

        benchmark(chain)

    def test_returns_chain_10(self, benchmark):
        """Benchmark returns 10-step bind chain."""

        def chain():
            r = Success(0)
            for i in range(10):
                r = r.bind(lambda x, i=i: Success(x + i))
            return r

        benchmark(chain)


# =============================================================================
# Safe decorator benchmarks
# =============================================================================


class TestSafeDecorator:
    """Benchmark @safe decorator."""

    def test_opresult_safe_success(self, benchmark):
        """Benchmark opresult @safe on success path."""

        @o_safe
        def divide(a: int, b: int) -> float:
            return a / b

        benchmark(divide, 10, 2)

    def test_returns_safe_success(self, benchmark):
        """Benchmark returns @safe on success path."""

        @r_safe
        def divide(a: int, b: int) -> float:
            return a / b

        benchmark(divide, 10, 2)

    def test_opresult_safe_failure(self, benchmark):
        """Benchmark opresult @safe on failure path."""

        @o_safe
        def divide(a: int, b: int) -> float:
            return a / b

        benchmark(divide, 10, 0)

    def test_returns_safe_failure(self, benchmark):
        """Benchmark returns @safe on failure path."""

        @r_safe
        def divide(a: int, b: int) -> float:
            return a / b

        benchmark(divide, 10, 0)


# =============================================================================
# Aggregation benchmarks
# =============================================================================


class TestAggregation:
    """Benchmark all_ over producer lists."""

    def test_opresult_all_100(self, benchmark):
        """Benchmark all_ with 100 successful producers."""
        producers = [lambda i=i: OSuccess(i) for i in range(100)]
        benchmark(o_all, producers)

    def test_opresult_all_with_early_error(self, benchmark):
        """Benchmark all_ stopping at an early error."""
        producers = [lambda i=i: OSuccess(i) if i != 5 else OError('fail') for i in range(100)]
        benchmark(o_all, producers)


# =============================================================================
# Pattern matching benchmarks
# =============================================================================


class TestPatternMatching:
    """Benchmark structural pattern matching."""

    def test_opresult_match_statement(self, benchmark):
        """Benchmark opresult pattern matching on Success."""
        ok = OSuccess(42)

        def match_it():
            match ok:
                case OSuccess(v):
                    return v
                case OError(message, code):
                    return code, message
                case OFailure(cause):
                    return cause

        benchmark(match_it)

    def test_returns_match_statement(self, benchmark):
        """Benchmark returns pattern matching on Success."""
        ok = Success(42)

        def match_it():
            match ok:
                case Success(v):
                    return v
                case Failure(e):
                    return e

        benchmark(match_it)
