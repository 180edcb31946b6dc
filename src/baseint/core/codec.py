"""Arbitrary-radix integer codec.

A BaseInt is bound to one charset; the charset's length is the radix and
each symbol's position is its digit value. Encoded strings are most
significant digit first, with no sign and no leading zero digit (zero
itself encodes to the single symbol charset[0]).

    >>> codec = BaseInt(BASE62)
    >>> codec.encode(65535)
    'RDB'
    >>> codec.decode("RDB")
    '65535'
    >>> codec.decode_to_uuid("RDB")
    '00000000-0000-0000-0000-ffff'

This is not RFC 4648: no padding and no bit-group packing, just positional
numerals over an arbitrary alphabet.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, field

from .alphabets import BASE62, validate_charset
from .errors import DecodeError
from .integers import int_to_decimal, parse_integer
from .uuid_format import int_to_uuid, uuid_to_int

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class BaseInt:
    """Encoder/decoder for one charset. Immutable and safe to share."""

    charset: str | None = None
    base: int = field(init=False, compare=False)
    _index: dict[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        charset = BASE62 if self.charset is None else validate_charset(self.charset)
        object.__setattr__(self, "charset", charset)
        object.__setattr__(self, "base", len(charset))
        object.__setattr__(self, "_index", {c: i for i, c in enumerate(charset)})
        logger.debug("BaseInt bound to base-%d charset %r", self.base, charset)

    # ---- integer <-> string ----

    def encode(self, value: int | str) -> str:
        """Encode a non-negative integer (int or decimal string)."""
        n = parse_integer(value)
        if n == 0:
            return self.charset[0]

        digits = []
        while n:
            n, rem = divmod(n, self.base)
            digits.append(self.charset[rem])
        return "".join(reversed(digits))

    def decode_int(self, text: str) -> int:
        """Decode an encoded string to an int."""
        if not isinstance(text, str):
            raise DecodeError(f"Expected an encoded string, got {type(text).__name__}")
        if not text:
            raise DecodeError("Cannot decode an empty string")

        acc = 0
        for pos, char in enumerate(text):
            digit = self._index.get(char)
            if digit is None:
                raise DecodeError(
                    f"Invalid character {char!r} at position {pos} for base-{self.base} charset"
                )
            acc = acc * self.base + digit
        return acc

    def decode(self, text: str) -> str:
        """Decode an encoded string to its decimal representation."""
        return int_to_decimal(self.decode_int(text))

    # ---- UUID adapter ----

    def encode_uuid(self, value: str | uuid.UUID) -> str:
        """Encode UUID text (hyphens optional) or a uuid.UUID."""
        return self.encode(uuid_to_int(value))

    def decode_to_uuid(self, text: str, canonical: bool = False) -> str:
        """Decode to hyphenated UUID text.

        Raises UUIDRangeError when the value needs more than 128 bits.
        See int_to_uuid for the padding rules and the canonical flag.
        """
        return int_to_uuid(self.decode_int(text), canonical=canonical)
