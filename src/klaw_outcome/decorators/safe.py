"""@safe and @safe_async decorators for turning exceptions into Failure."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any, overload

import wrapt

from klaw_outcome._config import ErrorFormat, get_config
from klaw_outcome._logging import get_logger
from klaw_outcome.types.result import Failure, Success

__all__ = ['format_exception', 'safe', 'safe_async']

logger = get_logger(__name__)


def format_exception(exc: BaseException, error_format: ErrorFormat | None = None) -> str:
    """Render an exception as a single error string.

    Args:
        exc: The exception to render.
        error_format: Format to use. Defaults to the configured one.

    Returns:
        `str(exc)` (or the class name when that is empty) for MESSAGE,
        `"ClassName: message"` for QUALIFIED.
    """
    if error_format is None:
        error_format = get_config().error_format
    name = type(exc).__name__
    message = str(exc)
    if error_format is ErrorFormat.QUALIFIED:
        return f'{name}: {message}' if message else name
    return message or name


def _capture(wrapped: Any, exc: BaseException) -> Failure[Any]:
    error = format_exception(exc)
    logger.debug(
        'Captured exception as Failure',
        function=getattr(wrapped, '__qualname__', repr(wrapped)),
        exception_type=type(exc).__name__,
        error=error,
    )
    return Failure((error,))


@overload
def safe[**P, T](
    func: Callable[P, T],
) -> Callable[P, Success[T] | Failure[T]]: ...


@overload
def safe[**P, T](
    func: None = None,
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Callable[[Callable[P, T]], Callable[P, Success[T] | Failure[T]]]: ...


def safe[**P, T](
    func: Callable[P, T] | None = None,
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Any:
    """Decorator that catches exceptions and returns Failure.

    Wraps a function so that it returns Success(value) on success and
    Failure(error message) if one of the caught exceptions is raised.
    Other exceptions propagate.

    Can be used with or without arguments:
        @safe
        def risky(): ...

        @safe(exceptions=(ValueError, TypeError))
        def specific(): ...

    Args:
        func: The function to wrap (when used without parentheses).
        exceptions: Tuple of exception types to catch. Defaults to (Exception,).

    Example:
        ```python
        @safe
        def divide(a: int, b: int) -> float:
            return a / b
        divide(10, 2)
        # Success(value=5.0)
        divide(10, 0)
        # Failure(errors=('division by zero',))
        ```
    """
    catch = exceptions if exceptions is not None else (Exception,)

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[P, T],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Success[T] | Failure[T]:
        try:
            return Success(wrapped(*args, **kwargs))
        except catch as e:
            return _capture(wrapped, e)

    if func is not None:
        return wrapper(func)
    return wrapper


@overload
def safe_async[**P, T](
    func: Callable[P, Awaitable[T]],
) -> Callable[P, Awaitable[Success[T] | Failure[T]]]: ...


@overload
def safe_async[**P, T](
    func: None = None,
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Callable[[Callable[P, Awaitable[T]]], Callable[P, Awaitable[Success[T] | Failure[T]]]]: ...


def safe_async[**P, T](
    func: Callable[P, Awaitable[T]] | None = None,
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Any:
    """Async decorator that catches exceptions and returns Failure.

    Same as `safe` for coroutine functions. Cancellation is not caught
    unless asked for explicitly, since CancelledError is a BaseException.

    Example:
        ```python
        @safe_async
        async def fetch(url: str) -> str:
            return await http_get(url)
        ```
    """
    catch = exceptions if exceptions is not None else (Exception,)

    @wrapt.decorator
    async def wrapper(
        wrapped: Callable[P, Awaitable[T]],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Success[T] | Failure[T]:
        try:
            return Success(await wrapped(*args, **kwargs))
        except catch as e:
            return _capture(wrapped, e)

    if func is not None:
        return wrapper(func)
    return wrapper
