"""UUID text <-> 128-bit integer conversion.

Formatting is deliberately lenient on the way in (any hex digit string,
hyphens anywhere) and range-checked on the way out.
"""

import uuid

from .errors import EncodeError, UUIDRangeError

UUID_MAX = (1 << 128) - 1

# Hex digits per group of the 8-4-4-4-* layout
_GROUPS = (8, 4, 4, 4)

# Values below 2**96 are padded to 24 hex digits, leaving a 4-digit final
# group; everything else (and canonical output) pads to the full 32.
SHORT_WIDTH = 24
CANONICAL_WIDTH = 32
SHORT_LIMIT = 1 << (SHORT_WIDTH * 4)


def uuid_to_int(value: str | uuid.UUID) -> int:
    """Parse UUID text (or a uuid.UUID) to its integer value.

    Hyphens are stripped and the hex digits parsed as one number. The digit
    count is not checked: fewer than 32 digits zero-extend, more than 32
    give a value beyond UUID_MAX.
    """
    if isinstance(value, uuid.UUID):
        return value.int
    if not isinstance(value, str):
        raise EncodeError(f"Expected UUID text, got {type(value).__name__}")

    hex_str = value.replace("-", "")
    if not hex_str:
        raise EncodeError(f"No hex digits in UUID text {value!r}")
    if len(hex_str) % 2:
        hex_str = "0" + hex_str
    try:
        return int(hex_str, 16)
    except ValueError:
        raise EncodeError(f"Invalid hex digits in UUID text {value!r}") from None


def int_to_uuid(n: int, canonical: bool = False) -> str:
    """Format a 128-bit integer as hyphenated UUID text.

    Values that fit in 24 hex digits come out short by default:
    65535 -> "00000000-0000-0000-0000-ffff". Anything larger is padded to
    32 digits and split 8-4-4-4-12, so every real UUID keeps its shape.
    Pass canonical=True to pad small values to 32 digits as well.
    """
    if n < 0:
        raise EncodeError("UUID value cannot be negative")
    if n > UUID_MAX:
        raise UUIDRangeError(
            "The string cannot be converted to UUID because it is too large "
            f"({n.bit_length()} bits, max 128)"
        )

    if canonical or n >= SHORT_LIMIT:
        width = CANONICAL_WIDTH
    else:
        width = SHORT_WIDTH
    hex_str = format(n, "x").zfill(width)

    parts = []
    pos = 0
    for size in _GROUPS:
        parts.append(hex_str[pos:pos + size])
        pos += size
    parts.append(hex_str[pos:])
    return "-".join(parts)
