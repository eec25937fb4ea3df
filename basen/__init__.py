"""basen — radix encodings over custom alphabets (base58, base62, ...)."""

from basen.encoding import (
    BASE58,
    BASE62,
    ENCODINGS,
    AlphabetError,
    BasenError,
    Encoding,
    InvalidCharacterError,
    NegativeValueError,
    get_encoding,
)

__all__ = [
    "Encoding", "get_encoding", "ENCODINGS",
    "BASE58", "BASE62",
    "BasenError", "InvalidCharacterError", "AlphabetError", "NegativeValueError",
]
