#!/usr/bin/env python3
"""basen — encode and decode data in base58, base62 or a custom alphabet."""

import argparse
import logging
import os
import sys

from basen.encoding import Encoding, get_encoding

logger = logging.getLogger(__name__)

DEFAULT_ENCODING = "base58"


def _encoding(args):
    if args.alphabet:
        return Encoding(args.alphabet)
    name = args.encoding or os.environ.get("BASEN_ENCODING") or DEFAULT_ENCODING
    logger.debug("using encoding %s", name)
    return get_encoding(name)


def _read_value(value: str) -> str:
    if value == "-":
        return sys.stdin.read().rstrip("\n")
    return value


def cmd_encode(args):
    enc = _encoding(args)
    value = _read_value(args.value)
    if args.int:
        print(enc.encode_int(int(value)))
    elif args.hex:
        print(enc.encode(bytes.fromhex(value)))
    else:
        print(enc.encode(value.encode()))


def cmd_decode(args):
    enc = _encoding(args)
    value = _read_value(args.value)
    if args.int:
        print(enc.decode_int(value))
    elif args.hex:
        print(enc.decode(value).hex())
    else:
        sys.stdout.write(enc.decode(value).decode("utf-8", errors="replace") + "\n")


def cmd_len(args):
    enc = _encoding(args)
    if args.decoded:
        print(enc.decoded_len(args.n))
    else:
        print(enc.encoded_len(args.n))


def _add_encoding_args(p):
    p.add_argument("--encoding", "-e", help="Preset name: base58 or base62 (default: $BASEN_ENCODING or base58)")
    p.add_argument("--alphabet", "-a", help="Custom alphabet, overrides --encoding")


def main(argv=None):
    parser = argparse.ArgumentParser(prog="basen", description="Radix encodings over custom alphabets")
    parser.add_argument("--verbose", "-v", action="store_true")
    sub = parser.add_subparsers(dest="command")

    # encode
    p = sub.add_parser("encode", help="Encode text, hex bytes or an integer")
    p.add_argument("value", nargs="?", default="-", help="Value to encode (or - for stdin)")
    kind = p.add_mutually_exclusive_group()
    kind.add_argument("--hex", action="store_true", help="Value is hex-encoded bytes")
    kind.add_argument("--int", action="store_true", help="Value is a decimal integer")
    _add_encoding_args(p)
    p.set_defaults(func=cmd_encode)

    # decode
    p = sub.add_parser("decode", help="Decode a string to text, hex bytes or an integer")
    p.add_argument("value", nargs="?", default="-", help="String to decode (or - for stdin)")
    kind = p.add_mutually_exclusive_group()
    kind.add_argument("--hex", action="store_true", help="Print decoded bytes as hex")
    kind.add_argument("--int", action="store_true", help="Print decoded value as a decimal integer")
    _add_encoding_args(p)
    p.set_defaults(func=cmd_decode)

    # len
    p = sub.add_parser("len", help="Estimate encoded (or decoded) length")
    p.add_argument("n", type=int, help="Number of input bytes (or symbols with --decoded)")
    p.add_argument("--decoded", action="store_true", help="Estimate decoded bytes for n symbols")
    _add_encoding_args(p)
    p.set_defaults(func=cmd_len)

    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
    if not args.command:
        parser.print_help()
        sys.exit(1)
    try:
        args.func(args)
    except ValueError as e:  # BasenError, bad --hex or --int input
        print(f"error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
