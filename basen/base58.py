"""Base58 encoding/decoding.

The Bitcoin alphabet: "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz".
It is base62 with 0, O, I and l removed, so a string copied by eye from
a screen or paper cannot mix up look-alike characters. Every symbol is
alphanumeric, so a double-click selects the whole string and it goes into
a URL without escaping.

Unlike Bitcoin's Base58Check, leading zero bytes are NOT kept as leading
"1"s: the input is treated as a number, so b"\\x00\\x01" and b"\\x01" both
encode to "2".
"""

from basen.encoding import BASE58

ENCODING = BASE58
CHARS = ENCODING.alphabet


def encode(data: bytes) -> str:
    return ENCODING.encode(data)


def decode(s: str) -> bytes:
    return ENCODING.decode(s)


def encode_int(n: int) -> str:
    return ENCODING.encode_int(n)


def decode_int(s: str) -> int:
    return ENCODING.decode_int(s)
