"""JSON and MessagePack encoding of Results using msgspec.

Success and Failure are tagged structs, so a Result encodes as:

    {"type": "success", "value": 5}
    {"type": "failure", "errors": ["error", "new error"]}

Decoding validates the payload against `Success[T] | Failure[T]` for the
requested value type. Decoders are cached per value type and shared; they
are reentrant, so the cache is safe to use from several threads.

Usage:
    >>> from klaw_outcome import Success
    >>> from klaw_outcome.codec import decode, encode
    >>> encode(Success(5))
    b'{"type":"success","value":5}'
    >>> decode(b'{"type":"failure","errors":["boom"]}', int)
    Failure(errors=('boom',))
"""

from __future__ import annotations

import functools
from typing import Any

import msgspec

from klaw_outcome.types.result import Failure, Result, Success

__all__ = [
    'decode',
    'decode_msgpack',
    'encode',
    'encode_msgpack',
]


def _result_type(value_type: Any) -> Any:
    return Success[value_type] | Failure[value_type]


@functools.lru_cache(maxsize=128)
def _json_decoder(value_type: Any) -> msgspec.json.Decoder:
    return msgspec.json.Decoder(_result_type(value_type))


@functools.lru_cache(maxsize=128)
def _msgpack_decoder(value_type: Any) -> msgspec.msgpack.Decoder:
    return msgspec.msgpack.Decoder(_result_type(value_type))


def encode(result: Result[Any]) -> bytes:
    """Encode a Result as JSON."""
    return msgspec.json.encode(result)


def decode[T](data: bytes | str, value_type: type[T] | Any = Any) -> Result[T]:
    """Decode a JSON-encoded Result.

    Args:
        data: JSON produced by `encode` (or any matching document).
        value_type: Expected type of the Success value. Defaults to Any.

    Returns:
        The decoded Success or Failure.

    Raises:
        msgspec.ValidationError: If the document does not match the type.
        msgspec.DecodeError: If the input is not valid JSON.
    """
    return _json_decoder(value_type).decode(data)


def encode_msgpack(result: Result[Any]) -> bytes:
    """Encode a Result as MessagePack."""
    return msgspec.msgpack.encode(result)


def decode_msgpack[T](data: bytes, value_type: type[T] | Any = Any) -> Result[T]:
    """Decode a MessagePack-encoded Result. See `decode`."""
    return _msgpack_decoder(value_type).decode(data)
