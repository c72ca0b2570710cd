"""Decorators: @safe and @safe_async."""

from klaw_outcome.decorators.safe import format_exception, safe, safe_async

__all__ = [
    'format_exception',
    'safe',
    'safe_async',
]
