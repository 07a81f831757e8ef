"""
hexseq - Canonical Byte-Sequence Representation

The single place a blockchain client converts into and out of the
canonical hex value: ``0x`` followed by an even number of lowercase hex
digits.

Usage (Functions - pure, no logging):
    from hexseq import concat, pad, from_number, to_nat, from_string

    concat("0x1234", "0x56")            # HexValue('0x123456')
    pad(4, "0xab")                      # HexValue('0x000000ab')
    from_number(255)                    # HexValue('0xff')
    to_nat("0x" + "ff" * 32)            # 2**256 - 1

    result = from_string("héllo")
    if result.success:
        payload = result.value

Usage (Codec - injected entropy, config and logging):
    from hexseq import HexCodec, CodecConfig

    codec = HexCodec(config=CodecConfig(max_safe_integer=2**63 - 1))
    nonce = codec.random(32)

Usage (Tests - deterministic randomness):
    codec = HexCodec.deterministic(seed=1)
"""

# Value type and validation
from .core.hexvalue import HexValue, to_hex_value, is_hex, is_hex_strict

# Structural operations
from .core.structural import (
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

# Conversions
from .core.convert import (
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

# Randomness
from .core.rand import random_hex
from .providers import (
    EntropySource,
    SystemEntropySource,
    SeededEntropySource,
    FixedEntropySource,
)

# Results
from .models import TextResult

# Facade and configuration
from .codec import HexCodec
from .config import CodecConfig

# Error types
from .errors import (
    HexSeqError,
    EncodingError,
    RangeError,
    ValidationError,
    PrecisionError,
    EntropyError,
    ConfigurationError,
)

# Logging
from .logging import CodecLogger, OperationRecord, create_callback_logger

__version__ = "0.1.0"
__all__ = [
    # Value type
    "HexValue",
    "to_hex_value",
    "is_hex",
    "is_hex_strict",

    # Structural
    "length",
    "concat",
    "flatten",
    "slice_bytes",
    "reverse",
    "pad",
    "pad_right",
    "trim_left",
    "trim_right",

    # Conversions
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

    # Randomness
    "random_hex",
    "EntropySource",
    "SystemEntropySource",
    "SeededEntropySource",
    "FixedEntropySource",

    # Results
    "TextResult",

    # Codec
    "HexCodec",
    "CodecConfig",

    # Errors
    "HexSeqError",
    "EncodingError",
    "RangeError",
    "ValidationError",
    "PrecisionError",
    "EntropyError",
    "ConfigurationError",

    # Logging
    "CodecLogger",
    "OperationRecord",
    "create_callback_logger",
]
