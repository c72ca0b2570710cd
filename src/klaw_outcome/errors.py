"""Error types raised on contract violations.

Domain failures travel as the Failure variant. These exceptions are only
raised when a caller breaks the contract of the Result type.
"""

from __future__ import annotations

from typing import Any

__all__ = [
    'InvalidStateError',
    'OutcomeError',
    'UnsupportedVariantError',
]


class OutcomeError(Exception):
    """Base class for klaw-outcome exceptions."""


class InvalidStateError(OutcomeError, RuntimeError):
    """A value was requested from a Failure without a fallback."""

    def __init__(self, message: str = 'Failure does not have a value') -> None:
        super().__init__(message)


class UnsupportedVariantError(OutcomeError, TypeError):
    """An object that is neither Success nor Failure reached a dispatch."""

    def __init__(self, obj: Any) -> None:
        self.obj = obj
        super().__init__(f'Expected Success or Failure, got {type(obj).__name__}')
