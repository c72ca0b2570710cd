"""Benchmarks comparing klaw-outcome vs the returns library.

Run with: pytest benchmarks/bench_result.py --benchmark-only -v
"""

# klaw-outcome imports
from klaw_outcome import Failure as KFailure
from klaw_outcome import Success as KSuccess
from klaw_outcome import failure as k_failure
from klaw_outcome import safe as k_safe

# returns library imports
from returns.result import Failure, Success
from returns.result import safe as r_safe


# =============================================================================
# Creation benchmarks
# =============================================================================


class TestCreation:
    """Benchmark Result creation."""

    def test_klaw_success_creation(self, benchmark):
        """Benchmark klaw Success creation."""
        benchmark(KSuccess, 42)

    def test_returns_success_creation(self, benchmark):
        """Benchmark returns Success creation."""
        benchmark(Success, 42)

    def test_klaw_failure_creation(self, benchmark):
        """Benchmark klaw Failure creation from a tuple."""
        benchmark(KFailure, ("error",))

    def test_klaw_failure_factory(self, benchmark):
        """Benchmark klaw failure() with varargs."""
        benchmark(k_failure, "error1", "error2")

    def test_returns_failure_creation(self, benchmark):
        """Benchmark returns Failure creation."""
        benchmark(Failure, "error")


# =============================================================================
# Method call benchmarks
# =============================================================================


class TestMethodCalls:
    """Benchmark common method calls."""

    def test_klaw_select(self, benchmark):
        """Benchmark klaw select."""
        ok = KSuccess(5)
        benchmark(ok.select, lambda x: KSuccess(x * 2))

    def test_returns_bind(self, benchmark):
        """Benchmark returns bind."""
        ok = Success(5)
        benchmark(ok.bind, lambda x: Success(x * 2))

    def test_klaw_select_failure_passthrough(self, benchmark):
        """Benchmark klaw select on Failure without on_failure."""
        err = k_failure("error")
        benchmark(err.select, lambda x: KSuccess(x * 2))

    def test_returns_bind_failure_passthrough(self, benchmark):
        """Benchmark returns bind on Failure."""
        err = Failure("error")
        benchmark(err.bind, lambda x: Success(x * 2))

    def test_klaw_value_or_default(self, benchmark):
        """Benchmark klaw value_or_default."""
        ok = KSuccess(5)
        benchmark(ok.value_or_default, 0)

    def test_returns_value_or(self, benchmark):
        """Benchmark returns value_or."""
        ok = Success(5)
        benchmark(ok.value_or, 0)


# =============================================================================
# Chaining benchmarks
# =============================================================================


class TestChaining:
    """Benchmark chained operations."""

    def test_klaw_chain_10(self, benchmark):
        """Benchmark klaw 10-step select chain."""

        def chain():
            r = KSuccess(0)
            for i in range(10):
                r = r.select(lambda x, i=i: KSuccess(x + i))
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

    def test_klaw_safe_success(self, benchmark):
        """Benchmark klaw @safe on success path."""

        @k_safe
        def divide(a: int, b: int) -> float:
            return a / b

        benchmark(divide, 10, 2)

    def test_returns_safe_success(self, benchmark):
        """Benchmark returns @safe on success path."""

        @r_safe
        def divide(a: int, b: int) -> float:
            return a / b

        benchmark(divide, 10, 2)

    def test_klaw_safe_failure(self, benchmark):
        """Benchmark klaw @safe on failure path."""

        @k_safe
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
# Pattern matching benchmarks
# =============================================================================


class TestPatternMatching:
    """Benchmark pattern matching against fold."""

    def test_klaw_match_statement(self, benchmark):
        """Benchmark klaw pattern matching on Success."""
        ok = KSuccess(42)

        def match_it():
            match ok:
                case KSuccess(value=v):
                    return v
                case KFailure(errors=e):
                    return e

        benchmark(match_it)

    def test_klaw_fold(self, benchmark):
        """Benchmark klaw fold on Success."""
        ok = KSuccess(42)
        benchmark(ok.fold, lambda v: v, lambda e: e)

    def test_returns_match_success(self, benchmark):
        """Benchmark returns pattern matching on Success."""
        ok = Success(42)

        def match_it():
            match ok:
                case Success(v):
                    return v
                case Failure(e):
                    return e

        benchmark(match_it)
