"""
hexseq - Hex Value

The canonical byte-sequence type and the validation gate every other
operation goes through.
"""

import re

from ..constants import HEX_PREFIX, HEX_PREFIX_UPPER, HEX_DIGITS, DIGITS_PER_BYTE
from ..errors import EncodingError


_LENIENT_HEX = re.compile(r"(0x)?[0-9a-f]*", re.IGNORECASE)


class HexValue(str):
    """
    Canonical hex value: ``0x`` followed by an even number of lowercase
    hex digits.

    A HexValue is a ``str``, so it compares equal to the plain canonical
    string and can be handed to anything expecting text (JSON-RPC params,
    ABI encoders).

    Example:
        >>> HexValue("0xDEADbeef")
        HexValue('0xdeadbeef')
        >>> HexValue("0xab") == "0xab"
        True
        >>> HexValue("0x").byte_length
        0
    """

    __slots__ = ()

    def __new__(cls, value):
        if type(value) is cls:
            return value
        return super().__new__(cls, _normalize(value))

    @classmethod
    def _from_digits(cls, digits: str) -> "HexValue":
        # Trusted path: digits must already be lowercase and even-length.
        return super().__new__(cls, HEX_PREFIX + digits)

    @classmethod
    def from_raw(cls, data: bytes) -> "HexValue":
        """Build from raw bytes without any validation step."""
        return cls._from_digits(bytes(data).hex())

    @property
    def digits(self) -> str:
        """Hex digits without the prefix."""
        return self[len(HEX_PREFIX):]

    @property
    def byte_length(self) -> int:
        """Number of bytes represented."""
        return len(self.digits) // DIGITS_PER_BYTE

    @property
    def raw(self) -> bytes:
        """The represented bytes."""
        return bytes.fromhex(self.digits)

    def __repr__(self) -> str:
        return f"HexValue({str.__repr__(self)})"


def _normalize(value) -> str:
    """Validate ``value`` and return its lowercase canonical text."""
    if not isinstance(value, str):
        raise EncodingError(
            f"Hex value must be a string, got {type(value).__name__}",
            value=value,
            reason="type"
        )

    if not (value.startswith(HEX_PREFIX) or value.startswith(HEX_PREFIX_UPPER)):
        raise EncodingError("Hex value must start with 0x", value=value, reason="prefix")

    digits = value[len(HEX_PREFIX):]
    for position, char in enumerate(digits):
        if char not in HEX_DIGITS:
            raise EncodingError(
                f"Invalid hex character {char!r} at position {position + len(HEX_PREFIX)}",
                value=value,
                reason="character"
            )

    if len(digits) % DIGITS_PER_BYTE != 0:
        raise EncodingError(
            f"Hex value must have an even number of digits, got {len(digits)}",
            value=value,
            reason="odd_length"
        )

    return HEX_PREFIX + digits.lower()


def to_hex_value(value) -> HexValue:
    """
    Accept a hex value from outside the library.

    Args:
        value: Candidate hex string (any case, ``0x`` or ``0X`` prefix).

    Returns:
        The canonical HexValue.

    Raises:
        EncodingError: Missing prefix, odd digit count, non-hex character
            or non-string input.
    """
    return HexValue(value)


def is_hex_strict(value) -> bool:
    """True if ``value`` would be accepted as a canonical hex value."""
    try:
        _normalize(value)
    except EncodingError:
        return False
    return True


def is_hex(value) -> bool:
    """
    Lenient check: optional ``0x`` prefix, hex digits only, any length.

    Useful for sniffing whether user input looks like hex at all before
    deciding how to treat it.
    """
    if not isinstance(value, str):
        return False
    return _LENIENT_HEX.fullmatch(value) is not None
