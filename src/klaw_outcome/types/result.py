"""Result type: Success[T] | Failure[T] for explicit, string-based failures."""

from collections.abc import Awaitable, Callable, Iterable
from typing import Any, NoReturn, TypeIs, overload

import msgspec
import msgspec.structs

from klaw_outcome.errors import InvalidStateError, UnsupportedVariantError

__all__ = ['Failure', 'Result', 'Success', 'failure', 'fold', 'success']

# Evaluated lazily, so the variants can be defined below.
type Result[T] = Success[T] | Failure[T]


class Success[T](msgspec.Struct, frozen=True, gc=False, tag='success'):
    """Success variant of Result containing a value of type T.

    Success represents the successful outcome of an operation. Its value can
    be extracted, folded into a plain value, or chained into a dependent
    computation that may itself fail.

    Examples:
        >>> ok = Success(5)
        >>> ok.value_or_raise()
        5
        >>> ok.select(lambda v: Success(str(v)))
        Success(value='5')
    """

    value: T

    def is_success(self) -> TypeIs['Success[T]']:
        """Return True since this is Success.

        This method provides type narrowing - after checking is_success(),
        the type checker knows the result is Success[T].
        """
        return True

    def is_failure(self) -> TypeIs['Failure[T]']:
        """Return False since this is Success."""
        return False

    def value_or_raise(self, factory: Callable[[], BaseException] | None = None) -> T:  # noqa: ARG002
        """Return the contained value. The factory is never called."""
        return self.value

    def value_or_default(self, default: T) -> T:  # noqa: ARG002
        """Return the contained value, ignoring the default."""
        return self.value

    def errors_or_empty(self) -> tuple[str, ...]:
        """Return an empty tuple since Success carries no errors."""
        return ()

    def fold[O](
        self,
        on_success: Callable[[T], O],
        on_failure: Callable[[tuple[str, ...]], O],  # noqa: ARG002
    ) -> O:
        """Convert to a plain value by applying on_success to the value.

        Args:
            on_success: Function applied to the value.
            on_failure: Not called for Success.

        Returns:
            Whatever on_success returns.
        """
        return on_success(self.value)

    def select[O](
        self,
        on_success: Callable[[T], Result[O]],
        on_failure: Callable[[tuple[str, ...]], Result[O]] | None = None,  # noqa: ARG002
    ) -> Result[O]:
        """Chain the value into a computation that returns a Result.

        Args:
            on_success: Function that takes T and returns Result[O].
            on_failure: Not called for Success.

        Returns:
            The Result returned by on_success, Success or Failure.
        """
        return on_success(self.value)

    def match(
        self,
        on_success: Callable[[T], Any],
        on_failure: Callable[[tuple[str, ...]], Any],  # noqa: ARG002
    ) -> None:
        """Run on_success for its side effects."""
        on_success(self.value)

    async def select_async[O](
        self,
        on_success: Callable[[T], Awaitable[Result[O]]],
        on_failure: Callable[[tuple[str, ...]], Awaitable[Result[O]]] | None = None,  # noqa: ARG002
    ) -> Result[O]:
        """Await on_success(value) and return the Result it resolves to."""
        return await on_success(self.value)

    async def match_async(
        self,
        on_success: Callable[[T], Awaitable[Any]],
        on_failure: Callable[[tuple[str, ...]], Awaitable[Any]],  # noqa: ARG002
    ) -> None:
        """Await on_success(value) for its side effects."""
        await on_success(self.value)

    async def fold_async[O](
        self,
        on_success: Callable[[T], Awaitable[O]],
        on_failure: Callable[[tuple[str, ...]], Awaitable[O]],  # noqa: ARG002
    ) -> O:
        """Await on_success(value) and return what it resolves to."""
        return await on_success(self.value)


class Failure[T](msgspec.Struct, frozen=True, gc=False, tag='failure'):
    """Failure variant of Result containing one or more error messages.

    The errors are an ordered tuple of opaque strings. Order is preserved
    and duplicates are kept. Any iterable given at construction is stored as
    a tuple, so the errors cannot change after the Failure is built.

    Examples:
        >>> err = Failure(['error'])
        >>> err.value_or_default(10)
        10
        >>> err.select(lambda v: Success(v), lambda e: Failure([*e, 'new error']))
        Failure(errors=('error', 'new error'))
    """

    errors: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        errors = self.errors
        if isinstance(errors, (str, bytes)):
            msgspec.structs.force_setattr(self, 'errors', (errors,))
        elif not isinstance(errors, tuple):
            msgspec.structs.force_setattr(self, 'errors', tuple(errors))

    def is_success(self) -> TypeIs['Success[T]']:
        """Return False since this is Failure."""
        return False

    def is_failure(self) -> TypeIs['Failure[T]']:
        """Return True since this is Failure.

        This method provides type narrowing - after checking is_failure(),
        the type checker knows the result is Failure[T].
        """
        return True

    def value_or_raise(self, factory: Callable[[], BaseException] | None = None) -> NoReturn:
        """Raise since Failure has no value.

        Args:
            factory: Optional callable producing the exception to raise.
                Called exactly once.

        Raises:
            InvalidStateError: If no factory is given.
            BaseException: Whatever the factory produces.
        """
        if factory is None:
            raise InvalidStateError
        raise factory()

    def value_or_default(self, default: T) -> T:
        """Return the default since this is Failure."""
        return default

    def errors_or_empty(self) -> tuple[str, ...]:
        """Return the errors."""
        return self.errors

    def fold[O](
        self,
        on_success: Callable[[T], O],  # noqa: ARG002
        on_failure: Callable[[tuple[str, ...]], O],
    ) -> O:
        """Convert to a plain value by applying on_failure to the errors."""
        return on_failure(self.errors)

    def select[O](
        self,
        on_success: Callable[[T], Result[O]],  # noqa: ARG002
        on_failure: Callable[[tuple[str, ...]], Result[O]] | None = None,
    ) -> Result[O]:
        """Recover from or extend the errors, or propagate them unchanged.

        Args:
            on_success: Not called for Failure.
            on_failure: Optional function that takes the errors and returns
                a new Result. When omitted this Failure is returned as is.

        Returns:
            The Result returned by on_failure, or self.
        """
        if on_failure is None:
            return self  # type: ignore[return-value]
        return on_failure(self.errors)

    def match(
        self,
        on_success: Callable[[T], Any],  # noqa: ARG002
        on_failure: Callable[[tuple[str, ...]], Any],
    ) -> None:
        """Run on_failure for its side effects."""
        on_failure(self.errors)

    async def select_async[O](
        self,
        on_success: Callable[[T], Awaitable[Result[O]]],  # noqa: ARG002
        on_failure: Callable[[tuple[str, ...]], Awaitable[Result[O]]] | None = None,
    ) -> Result[O]:
        """Await on_failure(errors), or return self when it is omitted."""
        if on_failure is None:
            return self  # type: ignore[return-value]
        return await on_failure(self.errors)

    async def match_async(
        self,
        on_success: Callable[[T], Awaitable[Any]],  # noqa: ARG002
        on_failure: Callable[[tuple[str, ...]], Awaitable[Any]],
    ) -> None:
        """Await on_failure(errors) for its side effects."""
        await on_failure(self.errors)

    async def fold_async[O](
        self,
        on_success: Callable[[T], Awaitable[O]],  # noqa: ARG002
        on_failure: Callable[[tuple[str, ...]], Awaitable[O]],
    ) -> O:
        """Await on_failure(errors) and return what it resolves to."""
        return await on_failure(self.errors)


def success[T](value: T) -> Success[T]:
    """Create a Success wrapping value."""
    return Success(value)


@overload
def failure(*errors: str) -> Failure[Any]: ...


@overload
def failure(errors: Iterable[str], /) -> Failure[Any]: ...


def failure(*errors: Any) -> Failure[Any]:
    """Create a Failure from error messages.

    Accepts the messages as separate arguments or as a single iterable.
    A single str or bytes argument is always one message, never iterated.

    Examples:
        >>> failure('error1', 'error2')
        Failure(errors=('error1', 'error2'))
        >>> failure(['error1', 'error2'])
        Failure(errors=('error1', 'error2'))
    """
    if len(errors) == 1 and not isinstance(errors[0], (str, bytes)):
        return Failure(tuple(errors[0]))
    return Failure(errors)


def fold[T, O](
    result: Result[T],
    on_success: Callable[[T], O],
    on_failure: Callable[[tuple[str, ...]], O],
) -> O:
    """Dispatch on the variant of result and return the callback's value.

    Args:
        result: A Success or Failure.
        on_success: Applied to the value of a Success.
        on_failure: Applied to the errors of a Failure.

    Returns:
        What the invoked callback returns.

    Raises:
        UnsupportedVariantError: If result is neither Success nor Failure.
    """
    match result:
        case Success(value=value):
            return on_success(value)
        case Failure(errors=errors):
            return on_failure(errors)
        case _:
            raise UnsupportedVariantError(result)
