"""klaw-outcome: Result type with string errors for Python 3.13+.

Flat imports (preferred):
    from klaw_outcome import Result, Success, Failure, success, failure
    from klaw_outcome import AsyncResult, safe, safe_async

Submodule imports (for organization):
    from klaw_outcome.types import Result, Success, Failure
    from klaw_outcome.async_ import AsyncResult
    from klaw_outcome.codec import encode, decode
"""

# Types
from klaw_outcome.types import Failure, Result, Success, failure, fold, success

# Async
from klaw_outcome.async_ import AsyncResult

# Decorators
from klaw_outcome.decorators import format_exception, safe, safe_async

# Codec
from klaw_outcome.codec import decode, decode_msgpack, encode, encode_msgpack

# Errors
from klaw_outcome.errors import InvalidStateError, OutcomeError, UnsupportedVariantError

# Configuration and logging
from klaw_outcome._config import ErrorFormat, OutcomeConfig, get_config, init
from klaw_outcome._logging import configure_logging, get_logger

__all__ = [
    'AsyncResult',
    'ErrorFormat',
    'Failure',
    'InvalidStateError',
    'OutcomeConfig',
    'OutcomeError',
    'Result',
    'Success',
    'UnsupportedVariantError',
    'configure_logging',
    'decode',
    'decode_msgpack',
    'encode',
    'encode_msgpack',
    'failure',
    'fold',
    'format_exception',
    'get_config',
    'get_logger',
    'init',
    'safe',
    'safe_async',
    'success',
]
