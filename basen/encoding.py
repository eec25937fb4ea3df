"""Radix encoding over an arbitrary N-symbol alphabet.

An Encoding treats its alphabet size as the base of a positional number
system. Input bytes are read as one big-endian unsigned integer, which is
then written out in base N using the alphabet as digits:

    b"Hello" → 0x48656c6c6f → 310939249775 → "5TP3P3v"   (base62)

Digits come out least-significant first from repeated divmod and are
reversed at the end. Decoding runs the other way: n = n * N + digit, left
to right, then the integer is converted back to its minimal big-endian bytes.

Because the input is a number and not a fixed-width buffer, leading zero
bytes carry no value and are lost:

    encode(b"") == encode(b"\\x00") == encode(b"\\x00\\x00") == ""

The inverse table is indexed by byte value (0-255), so every alphabet
symbol must be a single-byte character and appear exactly once.
"""

import logging
import math
from dataclasses import dataclass, field
from types import MappingProxyType

logger = logging.getLogger(__name__)

NOT_A_DIGIT = -1
INT64_MAX = (1 << 63) - 1
_UINT64_MASK = (1 << 64) - 1


class BasenError(ValueError):
    pass


class InvalidCharacterError(BasenError):
    """A decoded string contains a symbol outside the alphabet."""

    def __init__(self, radix: int, char: str):
        self.radix = radix
        self.char = char
        super().__init__(radix, char)

    def __str__(self):
        return f"string contains invalid base{self.radix} character: {self.char!r}"

    def __eq__(self, other):
        if not isinstance(other, InvalidCharacterError):
            return NotImplemented
        return (self.radix, self.char) == (other.radix, other.char)

    def __hash__(self):
        return hash((self.radix, self.char))


class AlphabetError(BasenError):
    pass


class NegativeValueError(BasenError):
    pass


@dataclass(frozen=True)
class Encoding:
    """A radix encoding/decoding scheme defined by an N-character alphabet."""

    alphabet: str
    radix: int = field(init=False)
    bits_per_symbol: float = field(init=False, repr=False)
    decode_map: tuple[int, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        alphabet = self.alphabet
        if len(alphabet) < 2:
            raise AlphabetError(f"alphabet needs at least 2 symbols, got {len(alphabet)}")

        decode_map = [NOT_A_DIGIT] * 256
        for i, c in enumerate(alphabet):
            code = ord(c)
            if code > 0xFF:
                raise AlphabetError(f"alphabet symbol {c!r} is not a single-byte character")
            if decode_map[code] != NOT_A_DIGIT:
                raise AlphabetError(f"alphabet symbol {c!r} appears more than once")
            decode_map[code] = i

        radix = len(alphabet)
        # Frozen dataclass: derived fields go through object.__setattr__.
        object.__setattr__(self, "radix", radix)
        object.__setattr__(self, "bits_per_symbol", math.log2(radix))
        object.__setattr__(self, "decode_map", tuple(decode_map))
        logger.debug("built base%d encoding for alphabet %r", radix, alphabet)

    # --- Length estimation ---

    def encoded_len(self, n: int) -> int:
        """Upper bound on the symbols needed to encode n bytes."""
        return math.ceil(n * 8 / self.bits_per_symbol)

    def decoded_len(self, n: int) -> int:
        """Upper bound on the bytes produced by decoding n symbols."""
        return math.ceil(n * self.bits_per_symbol / 8)

    # --- Digits ---

    def digit(self, ch: str) -> int:
        """Digit value of a single alphabet symbol."""
        if len(ch) != 1:
            raise BasenError(f"expected a single character, got {ch!r}")
        code = ord(ch)
        i = self.decode_map[code] if code <= 0xFF else NOT_A_DIGIT
        if i < 0:
            raise InvalidCharacterError(self.radix, ch)
        return i

    def _digits(self, s: str):
        """Yield the digit value of each character of s, most significant first.

        Iterating a str yields whole code points, so a multi-byte character
        is reported intact rather than as a stray byte.
        """
        decode_map = self.decode_map
        for ch in s:
            code = ord(ch)
            i = decode_map[code] if code <= 0xFF else NOT_A_DIGIT
            if i < 0:
                raise InvalidCharacterError(self.radix, ch)
            yield i

    # --- Arbitrary precision ---

    def encode_int(self, n: int) -> str:
        """Encode a non-negative integer. Zero encodes to the empty string."""
        if n < 0:
            raise NegativeValueError(f"cannot encode negative integer {n}")
        alphabet = self.alphabet
        radix = self.radix
        out = []
        while n > 0:
            n, rem = divmod(n, radix)
            out.append(alphabet[rem])
        out.reverse()
        return "".join(out)

    def decode_int(self, s: str) -> int:
        radix = self.radix
        n = 0
        for d in self._digits(s):
            n = n * radix + d
        return n

    def encode(self, data: bytes) -> str:
        """Encode bytes, read as a big-endian unsigned integer."""
        return self.encode_int(int.from_bytes(data, "big"))

    def decode(self, s: str) -> bytes:
        """Decode to the minimal big-endian byte string (no leading zeros)."""
        n = self.decode_int(s)
        return n.to_bytes((n.bit_length() + 7) // 8, "big")

    # --- Signed 64-bit ---

    def encode_int64(self, n: int) -> str:
        if n < 0:
            raise NegativeValueError(f"cannot encode negative integer {n}")
        if n > INT64_MAX:
            raise OverflowError(f"{n} does not fit in a signed 64-bit integer")
        return self.encode_int(n)

    def decode_int64(self, s: str) -> int:
        """Decode to a signed 64-bit integer.

        Overflow wraps modulo 2**64 the way native int64 arithmetic does;
        it is not reported. Strings longer than encoded_len(8) symbols are
        the ones that can wrap.
        """
        radix = self.radix
        n = 0
        for d in self._digits(s):
            n = (n * radix + d) & _UINT64_MASK
        if n > INT64_MAX:
            n -= 1 << 64
        return n


BASE58 = Encoding("123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz")
BASE62 = Encoding("0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz")

ENCODINGS = MappingProxyType({
    "base58": BASE58,
    "base62": BASE62,
})


def get_encoding(name_or_alphabet: str) -> Encoding:
    """Look up a preset by name, or build an Encoding from a custom alphabet."""
    enc = ENCODINGS.get(name_or_alphabet)
    if enc is not None:
        return enc
    return Encoding(name_or_alphabet)
