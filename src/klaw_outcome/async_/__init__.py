"""Async utilities: AsyncResult for chaining Result combinators across awaits.

Examples:
    >>> from klaw_outcome import Result, Success
    >>> from klaw_outcome.async_ import AsyncResult
    >>>
    >>> async def fetch(id: int) -> Result[dict]:
    ...     return Success({'id': id})
    >>>
    >>> async def main():
    ...     result = await AsyncResult(fetch(1)).select(lambda d: Success(d['id']))
"""

from klaw_outcome.async_.result import AsyncResult

__all__ = ['AsyncResult']
