"""
hexseq - Conversions

Every conversion into and out of the canonical hex value: ASCII and
UTF-8 text, native integers, natural numbers, byte arrays and raw
buffers. Numeric conversions are unsigned and big-endian.
"""

import numbers
import re
from typing import Iterable, List, Union

from ..constants import DIGITS_PER_BYTE, MAX_BYTE, MAX_SAFE_INTEGER
from ..errors import PrecisionError, ValidationError
from ..models import TextResult
from .hexvalue import HexValue


_DECIMAL = re.compile(r"[0-9]+")

BytesLike = Union[bytes, bytearray, memoryview]


# =============================================================================
# Text
# =============================================================================

def from_ascii(text: str) -> HexValue:
    """
    One byte per character, equal to its code point.

    Raises:
        ValidationError: If a code point does not fit in one byte.
    """
    if not isinstance(text, str):
        raise ValidationError(f"Expected str, got {type(text).__name__}", value=text)
    try:
        data = text.encode("latin-1")
    except UnicodeEncodeError as e:
        char = text[e.start]
        raise ValidationError(
            f"Character {char!r} (code point {ord(char)}) does not fit in one byte",
            value=text,
            position=e.start
        ) from e
    return HexValue.from_raw(data)


def to_ascii(x: str) -> str:
    """One character per byte, equal to the byte value."""
    return HexValue(x).raw.decode("latin-1")


def from_string(text: str) -> TextResult:
    """
    UTF-8 encode ``text``.

    Returns:
        TextResult holding the HexValue, or a failed result if the text
        cannot be encoded (lone surrogates, non-str input).
    """
    if not isinstance(text, str):
        return TextResult.failed(f"expected str, got {type(text).__name__}")
    try:
        data = text.encode("utf-8")
    except UnicodeEncodeError as e:
        return TextResult.failed(str(e))
    return TextResult.ok(HexValue.from_raw(data))


def to_string(x: str, strip_padding: bool = False) -> TextResult:
    """
    UTF-8 decode the bytes of ``x``.

    Args:
        x: Hex value to decode.
        strip_padding: Drop leading and trailing zero bytes first, as found
            around ABI-encoded strings.

    Returns:
        TextResult holding the text, or a failed result if the bytes are
        not valid UTF-8.

    Raises:
        EncodingError: If ``x`` is not a valid hex value.
    """
    raw = HexValue(x).raw
    if strip_padding:
        raw = raw.strip(b"\x00")
    try:
        return TextResult.ok(raw.decode("utf-8"))
    except UnicodeDecodeError as e:
        return TextResult.failed(str(e))


# =============================================================================
# Numbers
# =============================================================================

def _natural(n, kind: str) -> int:
    if isinstance(n, bool) or not isinstance(n, numbers.Integral):
        raise ValidationError(f"{kind} must be an integer, got {type(n).__name__}", value=n)
    if n < 0:
        raise ValidationError(f"{kind} must be non-negative", value=n)
    return int(n)


def _encode_natural(value: int) -> HexValue:
    digits = format(value, "x")
    if len(digits) % DIGITS_PER_BYTE:
        digits = "0" + digits
    return HexValue._from_digits(digits)


def from_number(n: int, max_safe_integer: int = MAX_SAFE_INTEGER) -> HexValue:
    """
    Encode a native integer as its minimal big-endian byte sequence.

    An odd digit count gets one leading zero digit: ``10 -> 0x0a``,
    ``0 -> 0x00``, ``256 -> 0x0100``.

    Raises:
        ValidationError: Negative or non-integral input.
        PrecisionError: ``n`` is above ``max_safe_integer``.
    """
    value = _natural(n, "Number")
    if value > max_safe_integer:
        raise PrecisionError(value.bit_length(), max_safe_integer)
    return _encode_natural(value)


def to_number(x: str, max_safe_integer: int = MAX_SAFE_INTEGER) -> int:
    """
    Decode as an unsigned big-endian native integer.

    Leading zero bytes are accepted; ``0x`` decodes to 0.

    Raises:
        PrecisionError: The magnitude is above ``max_safe_integer``.
    """
    value = int.from_bytes(HexValue(x).raw, "big")
    if value > max_safe_integer:
        raise PrecisionError(value.bit_length(), max_safe_integer)
    return value


def from_nat(n: Union[int, str]) -> HexValue:
    """
    Encode an arbitrary-precision natural number.

    Accepts an ``int`` or a string of decimal digits. Zero encodes as a
    single zero byte.

    Raises:
        ValidationError: Negative, non-integral or non-decimal input.
    """
    if isinstance(n, str):
        if not _DECIMAL.fullmatch(n):
            raise ValidationError("Natural number string must contain only decimal digits", value=n)
        n = int(n)
    return _encode_natural(_natural(n, "Natural number"))


def to_nat(x: str) -> int:
    """Decode as an unsigned big-endian natural number. Total."""
    return int.from_bytes(HexValue(x).raw, "big")


# =============================================================================
# Byte Arrays and Buffers
# =============================================================================

def from_array(values: Iterable[int]) -> HexValue:
    """
    Encode a sequence of byte values.

    Raises:
        ValidationError: An element is not an integer in 0-255.
    """
    data = bytearray()
    for index, item in enumerate(values):
        if isinstance(item, bool) or not isinstance(item, numbers.Integral):
            raise ValidationError(
                f"Byte at index {index} must be an integer, got {type(item).__name__}",
                value=item,
                index=index
            )
        if not 0 <= item <= MAX_BYTE:
            raise ValidationError(
                f"Byte at index {index} is out of range 0-255",
                value=item,
                index=index
            )
        data.append(int(item))
    return HexValue.from_raw(data)


def to_array(x: str) -> List[int]:
    """Decode into a list of byte values."""
    return list(HexValue(x).raw)


def from_bytes(buf: BytesLike) -> HexValue:
    """
    Encode a raw binary buffer byte-for-byte.

    Raises:
        ValidationError: ``buf`` is not bytes, bytearray or memoryview.
    """
    if not isinstance(buf, (bytes, bytearray, memoryview)):
        raise ValidationError(f"Expected a binary buffer, got {type(buf).__name__}", value=buf)
    return HexValue.from_raw(bytes(buf))


def to_bytes(x: str) -> bytes:
    """Decode into a raw buffer of ``length(x)`` bytes."""
    return HexValue(x).raw
