"""Base62 encoding/decoding.

Alphabet: "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz",
i.e. the RFC 4648 base64 alphabet with "+" and "/" dropped and digits
moved to the front so that digit order follows ASCII order.

Output length for n input bytes is at most ceil(n*8 / log2(62)):
  16 bytes (UUID)    → 22 chars
  32 bytes (SHA-256) → 43 chars
"""

from basen.encoding import BASE62

ENCODING = BASE62
CHARS = ENCODING.alphabet


def encode(data: bytes) -> str:
    return ENCODING.encode(data)


def decode(s: str) -> bytes:
    return ENCODING.decode(s)


def encode_int(n: int) -> str:
    return ENCODING.encode_int(n)


def decode_int(s: str) -> int:
    return ENCODING.decode_int(s)
