"""
Command-line interface for BaseInt.

Usage:
    baseint encode 65535                  # RDB
    baseint decode RDB                    # 65535
    baseint encode-uuid b9b03417-a52a-47cf-8638-3c26b2628c98
    baseint decode-uuid FoYGiVxbLcGdqtB3H0Qzbi
    baseint --alphabet base36 encode 1234567890
    echo 1 2 3 | baseint encode -

Environment:
    BASEINT_CHARSET     Default alphabet name (default: base62)
"""
from __future__ import annotations

import argparse
import logging
import os
import sys
from collections.abc import Callable, Iterable

from ..core.alphabets import ALPHABETS, get_alphabet
from ..core.codec import BaseInt
from ..core.errors import BaseIntError
from ..core.integers import to_hex

DEFAULT_ALPHABET = "base62"

logger = logging.getLogger(__name__)


def read_values(values: list[str]) -> Iterable[str]:
    """Expand '-' into whitespace-separated values read from stdin."""
    for value in values:
        if value == "-":
            yield from sys.stdin.read().split()
        else:
            yield value


def build_codec(args: argparse.Namespace) -> BaseInt:
    """Build the codec selected by --charset / --alphabet / environment."""
    if args.charset is not None:
        logger.debug("Using literal charset %r", args.charset)
        return BaseInt(args.charset)
    logger.debug("Using alphabet %r", args.alphabet)
    return BaseInt(get_alphabet(args.alphabet))


def _each(args: argparse.Namespace, fn: Callable[[str], str]) -> int:
    for value in read_values(args.values):
        print(fn(value))
    return 0


def cmd_encode(args: argparse.Namespace) -> int:
    """Encode decimal integers."""
    return _each(args, build_codec(args).encode)


def cmd_decode(args: argparse.Namespace) -> int:
    """Decode to decimal integers."""
    return _each(args, build_codec(args).decode)


def cmd_encode_uuid(args: argparse.Namespace) -> int:
    """Encode UUID text."""
    return _each(args, build_codec(args).encode_uuid)


def cmd_decode_uuid(args: argparse.Namespace) -> int:
    """Decode to UUID text."""
    codec = build_codec(args)
    return _each(args, lambda text: codec.decode_to_uuid(text, canonical=args.canonical))


def cmd_hex(args: argparse.Namespace) -> int:
    """Show decimal integers as even-length hex."""
    return _each(args, to_hex)


def cmd_alphabets(args: argparse.Namespace) -> int:
    """List the registered alphabets."""
    width = max(len(name) for name in ALPHABETS)
    for name, charset in ALPHABETS.items():
        print(f"{name:<{width}}  {len(charset):>2}  {charset}")
    return 0


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    default_alphabet = os.environ.get("BASEINT_CHARSET", DEFAULT_ALPHABET)
    parser = argparse.ArgumentParser(
        prog="baseint",
        description="Encode integers and UUIDs in any custom base (not RFC 4648)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "-a", "--alphabet",
        default=default_alphabet,
        help=f"Registered alphabet name (default: {default_alphabet})",
    )
    source.add_argument(
        "-c", "--charset",
        help="Literal charset string, overrides --alphabet",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    encode_parser = subparsers.add_parser("encode", help="Encode decimal integers")
    encode_parser.add_argument("values", nargs="+", help="Decimal integers ('-' for stdin)")
    encode_parser.set_defaults(func=cmd_encode)

    decode_parser = subparsers.add_parser("decode", help="Decode to decimal")
    decode_parser.add_argument("values", nargs="+", help="Encoded strings ('-' for stdin)")
    decode_parser.set_defaults(func=cmd_decode)

    encode_uuid_parser = subparsers.add_parser("encode-uuid", help="Encode UUIDs")
    encode_uuid_parser.add_argument("values", nargs="+", help="UUID text ('-' for stdin)")
    encode_uuid_parser.set_defaults(func=cmd_encode_uuid)

    decode_uuid_parser = subparsers.add_parser("decode-uuid", help="Decode to UUID text")
    decode_uuid_parser.add_argument("values", nargs="+", help="Encoded strings ('-' for stdin)")
    decode_uuid_parser.add_argument(
        "--canonical",
        action="store_true",
        help="Always pad to 32 hex digits (8-4-4-4-12)",
    )
    decode_uuid_parser.set_defaults(func=cmd_decode_uuid)

    hex_parser = subparsers.add_parser("hex", help="Show decimal integers as hex")
    hex_parser.add_argument("values", nargs="+", help="Decimal integers ('-' for stdin)")
    hex_parser.set_defaults(func=cmd_hex)

    alphabets_parser = subparsers.add_parser("alphabets", help="List registered alphabets")
    alphabets_parser.set_defaults(func=cmd_alphabets)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        return args.func(args)
    except BaseIntError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
