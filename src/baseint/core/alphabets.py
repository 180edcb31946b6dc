"""Named alphabets usable as BaseInt charsets.

These are NOT RFC 4648 alphabets in practice: the codec treats each symbol
as one digit of a plain positional number, so BASE64 output will not match
base64.b64encode() and BASE32 output will not match base64.b32encode().
"""

from types import MappingProxyType

from .errors import CharsetError

BASE2 = "01"
BASE8 = "01234567"
BASE16 = "0123456789ABCDEF"
BASE32 = "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"
BASE32HEX = "0123456789ABCDEFGHIJKLMNOPQRSTUV"
BASE32Z = "ybndrfg8ejkmcpqxot1uwisza345h769"
BASE36 = "0123456789abcdefghijklmnopqrstuvwxyz"
BASE62 = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789"
BASE64 = BASE62 + "+/"
BASE64URL = BASE62 + "-_"

# Registry: lowercase name -> charset (read-only)
ALPHABETS = MappingProxyType({
    "base2": BASE2,
    "base8": BASE8,
    "base16": BASE16,
    "base32": BASE32,
    "base32hex": BASE32HEX,
    "base32z": BASE32Z,
    "base36": BASE36,
    "base62": BASE62,
    "base64": BASE64,
    "base64url": BASE64URL,
})


def validate_charset(charset: str) -> str:
    """Return charset unchanged if it can serve as a radix alphabet.

    A charset must be a string of at least two unique characters. A
    repeated symbol would map two digit values to the same character, and a
    single symbol gives radix 1, which has no positional representation.
    """
    if not isinstance(charset, str):
        raise CharsetError(f"Charset must be a string, got {type(charset).__name__}")
    if not charset:
        raise CharsetError("Charset must not be empty")
    if len(charset) < 2:
        raise CharsetError(f"Charset needs at least 2 symbols, got {charset!r}")
    seen = set()
    for i, c in enumerate(charset):
        if c in seen:
            raise CharsetError(f"Duplicate character {c!r} in charset at position {i}")
        seen.add(c)
    return charset


def get_alphabet(name: str) -> str:
    """Look up a registered alphabet by name (case-insensitive)."""
    try:
        return ALPHABETS[name.lower()]
    except KeyError:
        known = ", ".join(ALPHABETS)
        raise CharsetError(f"Unknown alphabet {name!r} (known: {known})") from None
