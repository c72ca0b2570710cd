"""AsyncResult type for chaining Result combinators across awaits.

AsyncResult wraps an Awaitable[Result[T]] and provides select/fold/match
methods that compose in async code without awaiting at every step.

Example:
    ```python
    async def fetch_user(id: int) -> Result[User]:
        ...

    result = await (
        AsyncResult(fetch_user(1))
        .select(validate_user)
        .select_async(load_profile)
    )
    ```
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Coroutine, Generator
from typing import Any

from klaw_outcome.types.result import Result, Success, failure

__all__ = ['AsyncResult']


class AsyncResult[T]:
    """Awaitable wrapper for composing async operations that produce Results.

    Methods returning AsyncResult build a lazy chain; nothing runs until the
    chain is awaited. Steps run strictly in order: in
    `AsyncResult(x).select_async(f).select_async(g)` the awaitable returned
    by `f` resolves before `g` is called.

    Note:
        AsyncResult is single-shot when wrapping a coroutine object.
        Coroutines can only be awaited once; awaiting the same AsyncResult
        twice raises RuntimeError. Wrap a Task/Future to await more than once.

    Example:
        ```python
        async def get_data() -> Result[int]:
            return Success(42)

        async def main():
            result = await AsyncResult(get_data()).select(lambda x: Success(x * 2))
            assert result == Success(84)
        ```
    """

    __slots__ = ('_awaitable',)

    def __init__(self, awaitable: Awaitable[Result[T]]) -> None:
        """Create an AsyncResult from an awaitable.

        Args:
            awaitable: An awaitable that produces a Result[T].
        """
        self._awaitable = awaitable

    def __await__(self) -> Generator[Any, Any, Result[T]]:
        return self._awaitable.__await__()

    @classmethod
    def from_result(cls, result: Result[T]) -> AsyncResult[T]:
        """Create an AsyncResult from an already computed Result."""

        async def _result() -> Result[T]:
            return result

        return cls(_result())

    @classmethod
    def from_success(cls, value: T) -> AsyncResult[T]:
        """Create an AsyncResult containing Success(value)."""
        return cls.from_result(Success(value))

    @classmethod
    def from_failure(cls, *errors: Any) -> AsyncResult[T]:
        """Create an AsyncResult containing a Failure with the given errors.

        Accepts the same arguments as `failure()`.
        """
        return cls.from_result(failure(*errors))

    def select[O](
        self,
        on_success: Callable[[T], Result[O]],
        on_failure: Callable[[tuple[str, ...]], Result[O]] | None = None,
    ) -> AsyncResult[O]:
        """Chain a sync Result-returning step.

        Args:
            on_success: Called with the value if the Result is Success.
            on_failure: Called with the errors if the Result is Failure.
                When omitted the Failure passes through unchanged.

        Returns:
            New AsyncResult resolving to the selected Result.
        """

        async def _selected() -> Result[O]:
            result = await self._awaitable
            return result.select(on_success, on_failure)

        return AsyncResult(_selected())

    def select_async[O](
        self,
        on_success: Callable[[T], Awaitable[Result[O]]],
        on_failure: Callable[[tuple[str, ...]], Awaitable[Result[O]]] | None = None,
    ) -> AsyncResult[O]:
        """Chain an async Result-returning step.

        Same branching as `select`, with callbacks returning awaitables.

        Example:
            ```python
            async def fetch_details(id: int) -> Result[dict]:
                return Success({'id': id})

            async def example():
                result = await AsyncResult.from_success(5).select_async(fetch_details)
                assert result == Success({'id': 5})
            ```
        """

        async def _selected() -> Result[O]:
            result = await self._awaitable
            return await result.select_async(on_success, on_failure)

        return AsyncResult(_selected())

    def fold[O](
        self,
        on_success: Callable[[T], O],
        on_failure: Callable[[tuple[str, ...]], O],
    ) -> Coroutine[Any, Any, O]:
        """Resolve the Result and fold it with sync callbacks."""

        async def _folded() -> O:
            result = await self._awaitable
            return result.fold(on_success, on_failure)

        return _folded()

    def fold_async[O](
        self,
        on_success: Callable[[T], Awaitable[O]],
        on_failure: Callable[[tuple[str, ...]], Awaitable[O]],
    ) -> Coroutine[Any, Any, O]:
        """Resolve the Result and fold it with async callbacks."""

        async def _folded() -> O:
            result = await self._awaitable
            return await result.fold_async(on_success, on_failure)

        return _folded()

    def match(
        self,
        on_success: Callable[[T], Any],
        on_failure: Callable[[tuple[str, ...]], Any],
    ) -> Coroutine[Any, Any, None]:
        """Resolve the Result and run one sync side-effect callback."""

        async def _matched() -> None:
            result = await self._awaitable
            result.match(on_success, on_failure)

        return _matched()

    def match_async(
        self,
        on_success: Callable[[T], Awaitable[Any]],
        on_failure: Callable[[tuple[str, ...]], Awaitable[Any]],
    ) -> Coroutine[Any, Any, None]:
        """Resolve the Result and await one async side-effect callback."""

        async def _matched() -> None:
            result = await self._awaitable
            await result.match_async(on_success, on_failure)

        return _matched()

    def value_or_default(self, default: T) -> Coroutine[Any, Any, T]:
        """Resolve to the Success value or the default."""

        async def _value() -> T:
            result = await self._awaitable
            return result.value_or_default(default)

        return _value()

    def value_or_raise(self, factory: Callable[[], BaseException] | None = None) -> Coroutine[Any, Any, T]:
        """Resolve to the Success value, raising on Failure.

        Raises:
            InvalidStateError: On Failure when no factory is given.
            BaseException: The factory's exception on Failure.
        """

        async def _value() -> T:
            result = await self._awaitable
            return result.value_or_raise(factory)

        return _value()

    def errors_or_empty(self) -> Coroutine[Any, Any, tuple[str, ...]]:
        """Resolve to the Failure errors, or an empty tuple."""

        async def _errors() -> tuple[str, ...]:
            result = await self._awaitable
            return result.errors_or_empty()

        return _errors()

    def __repr__(self) -> str:
        return f'AsyncResult({self._awaitable!r})'
