"""Core layer package: the value type and the pure operations on it."""

from .hexvalue import HexValue, to_hex_value, is_hex, is_hex_strict
from .structural import (
    length,
    concat,
    flatten,
    slice_bytes,
    reverse,
    pad,
    pad_right,
    trim_left,
    trim_right,
)
from .convert import (
    from_ascii,
    to_ascii,
    from_string,
    to_string,
    from_number,
    to_number,
    from_nat,
    to_nat,
    from_array,
    to_array,
    from_bytes,
    to_bytes,
)
from .rand import random_hex

__all__ = [
    "HexValue",
    "to_hex_value",
    "is_hex",
    "is_hex_strict",
    "length",
    "concat",
    "flatten",
    "slice_bytes",
    "reverse",
    "pad",
    "pad_right",
    "trim_left",
    "trim_right",
    "from_ascii",
    "to_ascii",
    "from_string",
    "to_string",
    "from_number",
    "to_number",
    "from_nat",
    "to_nat",
    "from_array",
    "to_array",
    "from_bytes",
    "to_bytes",
    "random_hex",
]
