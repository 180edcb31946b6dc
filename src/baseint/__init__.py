"""
BaseInt - shorten integers and UUIDs with any custom base.

Usage:
    from baseint import BaseInt, BASE62

    codec = BaseInt(BASE62)
    codec.encode_uuid("b9b03417-a52a-47cf-8638-3c26b2628c98")
    # 'FoYGiVxbLcGdqtB3H0Qzbi'

WARNING: the named alphabets are not RFC 4648 compliant; BASE64 and
BASE32 here will not match the standard library's base64 module.
"""

from .core.alphabets import (
    ALPHABETS,
    BASE2,
    BASE8,
    BASE16,
    BASE32,
    BASE32HEX,
    BASE32Z,
    BASE36,
    BASE62,
    BASE64,
    BASE64URL,
    get_alphabet,
    validate_charset,
)

from .core.codec import BaseInt

from .core.errors import (
    BaseIntError,
    CharsetError,
    DecodeError,
    EncodeError,
    UUIDRangeError,
)

from .core.integers import (
    decimal_to_int,
    int_to_decimal,
    parse_integer,
    to_hex,
)

from .core.uuid_format import (
    UUID_MAX,
    int_to_uuid,
    uuid_to_int,
)

__all__ = [
    # Alphabets
    "ALPHABETS",
    "BASE2",
    "BASE8",
    "BASE16",
    "BASE32",
    "BASE32HEX",
    "BASE32Z",
    "BASE36",
    "BASE62",
    "BASE64",
    "BASE64URL",
    "get_alphabet",
    "validate_charset",
    # Codec
    "BaseInt",
    # Errors
    "BaseIntError",
    "CharsetError",
    "DecodeError",
    "EncodeError",
    "UUIDRangeError",
    # Helpers
    "decimal_to_int",
    "int_to_decimal",
    "parse_integer",
    "to_hex",
    "UUID_MAX",
    "int_to_uuid",
    "uuid_to_int",
]
