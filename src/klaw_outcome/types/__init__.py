"""Core types: Result, Success, Failure."""

from klaw_outcome.types.result import Failure, Result, Success, failure, fold, success

__all__ = [
    'Failure',
    'Result',
    'Success',
    'failure',
    'fold',
    'success',
]
