"""Integer normalization, decimal conversion and the hex helper.

Callers hand us integers as native ints or as decimal strings; both are
normalized to a single Python int before any radix arithmetic happens.

int() and str() refuse decimal text longer than the interpreter's
int_max_str_digits limit (4300 by default), so decimal text is converted
in chunks that stay below the smallest limit Python allows.
"""

from .errors import EncodeError

# Below sys.int_info.str_digits_check_threshold (640), so never limited
_CHUNK_DIGITS = 600
_CHUNK = 10 ** _CHUNK_DIGITS


def decimal_to_int(digits: str) -> int:
    """Parse a string of ASCII decimal digits of any length."""
    head = len(digits) % _CHUNK_DIGITS or _CHUNK_DIGITS
    n = int(digits[:head])
    for pos in range(head, len(digits), _CHUNK_DIGITS):
        n = n * _CHUNK + int(digits[pos:pos + _CHUNK_DIGITS])
    return n


def int_to_decimal(n: int) -> str:
    """Format a non-negative int as decimal text of any length."""
    chunks = []
    while n >= _CHUNK:
        n, rem = divmod(n, _CHUNK)
        chunks.append(str(rem).zfill(_CHUNK_DIGITS))
    chunks.append(str(n))
    return "".join(reversed(chunks))


def parse_integer(value: int | str) -> int:
    """Normalize an int or decimal-digit string to a non-negative int."""
    if isinstance(value, bool):
        raise EncodeError(f"Expected an integer or decimal string, got {value!r}")
    if isinstance(value, int):
        n = value
    elif isinstance(value, str):
        text = value.strip()
        digits = text[1:] if text[:1] in "+-" else text
        if not digits.isdigit() or not digits.isascii():
            raise EncodeError(f"Not a decimal integer: {value[:40]!r}")
        n = decimal_to_int(digits)
        if text[:1] == "-" and n:
            raise EncodeError(f"Cannot encode negative values, got -{digits[:40]}")
    else:
        raise EncodeError(
            f"Expected an integer or decimal string, got {type(value).__name__}"
        )
    if n < 0:
        raise EncodeError(f"Cannot encode negative values, got -{int_to_decimal(-n)}")
    return n


def to_hex(value: bytes | bytearray | memoryview | int | str) -> str:
    """Return a lowercase hex string for a byte buffer or an integer.

    Byte buffers map to two hex characters per byte. Integers (native or
    decimal strings) are formatted in base 16 and padded with a single
    leading zero when needed to keep whole-byte alignment.
    """
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value).hex()

    hex_str = format(parse_integer(value), "x")
    if len(hex_str) % 2:
        hex_str = "0" + hex_str
    return hex_str
