"""Tests for base58 encoding/decoding."""

import pytest

from basen.base58 import CHARS, ENCODING, decode, decode_int, encode, encode_int
from basen.encoding import InvalidCharacterError


def test_alphabet_has_no_lookalikes():
    assert len(CHARS) == 58
    for c in "0OIl":
        assert c not in CHARS


def test_encode_hello():
    assert encode(b"Hello") == "9Ajdvzr"


def test_decode_hello():
    assert decode("9Ajdvzr") == b"Hello"


def test_known_vectors():
    assert encode(b" ") == "Z"
    assert encode(b"hello world") == "StV1DL6CwTryKyV"
    assert decode("Z") == b" "
    assert decode("StV1DL6CwTryKyV") == b"hello world"


def test_int():
    assert encode_int(32) == "Z"
    assert decode_int("Z") == 32
    assert ENCODING.encode_int64(32) == "Z"
    assert ENCODING.decode_int64("Z") == 32


def test_roundtrip():
    for b in (0x01, 0xAA, 0xFF):
        data = bytes([b])
        for _ in range(5):
            data += data
            assert decode(encode(data)) == data


def test_leading_zeros_dropped():
    # Not Base58Check: no "1" prefix per leading zero byte.
    assert encode(b"\x00\x01") == "2"
    assert encode(b"\x01") == "2"
    assert encode(b"\x00" * 8) == ""


def test_decode_invalid_char():
    with pytest.raises(InvalidCharacterError, match="invalid base58 character: '-'") as excinfo:
        decode("-")
    assert excinfo.value == InvalidCharacterError(58, "-")


def test_decode_lookalike_rejected():
    for c in "0OIl":
        with pytest.raises(InvalidCharacterError) as excinfo:
            decode("2" + c)
        assert excinfo.value.char == c
