"""Exception hierarchy for the BaseInt codec.

Every error is a ValueError so callers that only care about bad input can
catch that; the subclasses let them tell the failure modes apart.
"""


class BaseIntError(ValueError):
    """Root of all codec errors."""


class CharsetError(BaseIntError):
    """Charset is empty, has duplicate symbols, or names no known alphabet."""


class EncodeError(BaseIntError):
    """Value cannot be encoded (negative, not an integer, malformed text)."""


class DecodeError(BaseIntError):
    """Encoded text contains a symbol outside the bound charset."""


class UUIDRangeError(BaseIntError, OverflowError):
    """Decoded value does not fit in 128 bits."""
