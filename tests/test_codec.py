"""Tests for JSON and MessagePack encoding of Results."""

import msgspec
import pytest

from klaw_outcome import Failure, Success, decode, decode_msgpack, encode, encode_msgpack, failure


class TestJsonCodec:
    """Tests for encode() and decode()."""

    def test_encode_success(self):
        """Success encodes as a tagged object with its value."""
        assert msgspec.json.decode(encode(Success(5))) == {'type': 'success', 'value': 5}

    def test_encode_failure(self):
        """Failure encodes its errors as an ordered array."""
        assert msgspec.json.decode(encode(failure('error', 'new error'))) == {
            'type': 'failure',
            'errors': ['error', 'new error'],
        }

    def test_decode_success(self):
        """decode() produces a typed Success."""
        assert decode(b'{"type":"success","value":5}', int) == Success(5)

    def test_decode_failure(self):
        """decode() produces a Failure with tuple errors."""
        result = decode('{"type":"failure","errors":["a","a"]}', int)
        assert result == Failure(('a', 'a'))
        assert isinstance(result.errors, tuple)

    def test_decode_without_value_type(self):
        """The value type defaults to Any."""
        assert decode(encode(Success({'id': 1}))) == Success({'id': 1})

    def test_roundtrip(self):
        """encode then decode returns an equal Result."""
        for result in (Success([1, 2]), failure('x'), failure()):
            assert decode(encode(result), list[int]) == result

    def test_decode_wrong_value_type(self):
        """A value of the wrong type is rejected."""
        with pytest.raises(msgspec.ValidationError):
            decode(b'{"type":"success","value":"five"}', int)

    def test_decode_unknown_tag(self):
        """An unknown variant tag is rejected."""
        with pytest.raises(msgspec.ValidationError):
            decode(b'{"type":"pending"}', int)

    def test_decode_invalid_json(self):
        """Malformed JSON raises DecodeError."""
        with pytest.raises(msgspec.DecodeError):
            decode(b'{not json', int)


class TestMsgpackCodec:
    """Tests for encode_msgpack() and decode_msgpack()."""

    def test_roundtrip(self):
        """MessagePack round trip preserves both variants."""
        assert decode_msgpack(encode_msgpack(Success('v')), str) == Success('v')
        assert decode_msgpack(encode_msgpack(failure('a', 'b')), str) == Failure(('a', 'b'))
