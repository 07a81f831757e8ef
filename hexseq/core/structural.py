"""
hexseq - Structural Operations

Length, concatenation, slicing, reversal, padding and flattening of
canonical hex values. Every index and length is counted in bytes.
"""

import numbers
from collections.abc import Iterable as IterableABC
from typing import Iterable, Iterator, Union

from ..constants import DIGITS_PER_BYTE
from ..errors import EncodingError, RangeError
from .hexvalue import HexValue


NestedHex = Union[str, Iterable["NestedHex"]]

_ZERO_BYTE = "00"

# Iterable, but never a container of hex values.
_BYTES_LIKE = (bytes, bytearray, memoryview)


def _is_index(n) -> bool:
    return isinstance(n, numbers.Integral) and not isinstance(n, bool)


def length(x: str) -> int:
    """Number of bytes in ``x``."""
    return HexValue(x).byte_length


def concat(a: str, b: str, *rest: str) -> HexValue:
    """
    Join byte sequences in order.

    Args:
        a: First hex value.
        b: Second hex value.
        *rest: Further hex values appended after ``b``.

    Returns:
        Hex value holding the bytes of every argument, left to right.
    """
    parts = [HexValue(a), HexValue(b)] + [HexValue(part) for part in rest]
    return HexValue._from_digits("".join(part.digits for part in parts))


def flatten(seq: NestedHex) -> HexValue:
    """
    Concatenate a nested structure of hex values depth-first, left to
    right. Lists, tuples, generators and any other non-string iterable
    are walked; an empty structure yields ``0x``.

    Example:
        >>> flatten(["0x01", ["0x02", ["0x03"]], [], "0x04"])
        HexValue('0x01020304')
    """
    return HexValue._from_digits("".join(part.digits for part in _walk(seq)))


def _walk(node: NestedHex) -> Iterator[HexValue]:
    # Explicit stack so deeply nested input cannot hit the recursion limit.
    stack = [iter([node])]
    while stack:
        try:
            item = next(stack[-1])
        except StopIteration:
            stack.pop()
            continue

        if isinstance(item, str):
            yield HexValue(item)
        elif isinstance(item, IterableABC) and not isinstance(item, _BYTES_LIKE):
            stack.append(iter(item))
        else:
            raise EncodingError(
                f"Cannot flatten element of type {type(item).__name__}",
                value=item,
                reason="type"
            )


def slice_bytes(i: int, j: int, x: str) -> HexValue:
    """
    Bytes ``[i, j)`` of ``x``.

    Raises:
        RangeError: If ``i`` or ``j`` is not an integer, ``i < 0``,
            ``i > j`` or ``j > length(x)``.
    """
    value = HexValue(x)
    size = value.byte_length
    if not (_is_index(i) and _is_index(j)) or i < 0 or i > j or j > size:
        raise RangeError(
            f"Slice [{i}, {j}) is outside a {size}-byte value",
            start=i, end=j, length=size
        )
    digits = value.digits[int(i) * DIGITS_PER_BYTE:int(j) * DIGITS_PER_BYTE]
    return HexValue._from_digits(digits)


def reverse(x: str) -> HexValue:
    """Reverse byte order; the two digits of each byte stay together."""
    return HexValue.from_raw(HexValue(x).raw[::-1])


def pad(l: int, x: str) -> HexValue:
    """
    Left-pad ``x`` with zero bytes to ``l`` bytes.

    Raises:
        RangeError: If ``l`` is not an integer or ``x`` is already longer
            than ``l`` bytes.
    """
    value = HexValue(x)
    missing = _padding_needed(l, value)
    return HexValue._from_digits(_ZERO_BYTE * missing + value.digits)


def pad_right(l: int, x: str) -> HexValue:
    """
    Right-pad ``x`` with zero bytes to ``l`` bytes.

    Raises:
        RangeError: If ``l`` is not an integer or ``x`` is already longer
            than ``l`` bytes.
    """
    value = HexValue(x)
    missing = _padding_needed(l, value)
    return HexValue._from_digits(value.digits + _ZERO_BYTE * missing)


def _padding_needed(l: int, value: HexValue) -> int:
    size = value.byte_length
    if not _is_index(l) or l < 0 or size > l:
        raise RangeError(
            f"Cannot pad a {size}-byte value to {l} bytes",
            target=l, length=size
        )
    return int(l) - size


def trim_left(x: str) -> HexValue:
    """Drop leading zero bytes: ``0x0000ab01`` -> ``0xab01``."""
    raw = HexValue(x).raw
    return HexValue.from_raw(raw.lstrip(b"\x00"))


def trim_right(x: str) -> HexValue:
    """Drop trailing zero bytes, e.g. the padding after an ABI string."""
    raw = HexValue(x).raw
    return HexValue.from_raw(raw.rstrip(b"\x00"))
