"""
hexseq - Codec Facade

A single object holding the configuration, the entropy source and an
optional operation logger, exposing every operation as a method.

Example:
    from hexseq import HexCodec

    codec = HexCodec()
    codec.concat("0x1234", "0x56")      # HexValue('0x123456')
    codec.from_number(255)              # HexValue('0xff')
    codec.random(32)                    # 32 bytes from the OS CSPRNG

Example (tests - reproducible randomness):
    codec = HexCodec.deterministic(seed=7)
    assert codec.random(4) == HexCodec.deterministic(seed=7).random(4)

Example (logging from environment):
    export HEXSEQ_LOG_LEVEL=DEBUG
    codec = HexCodec.from_env()
"""

from typing import Any, Callable, Iterable, List, Optional, Union

from .config import CodecConfig
from .core import convert, structural
from .core.hexvalue import HexValue, is_hex_strict
from .core.rand import random_hex
from .logging import CodecLogger
from .models import TextResult
from .providers import EntropySource, SystemEntropySource, SeededEntropySource


# Operations whose arguments are never hex, even when they look like it.
_TEXT_OR_NUMBER_INPUT = frozenset({"from_ascii", "from_string", "from_number", "from_nat", "from_array"})


class HexCodec:
    """
    Canonical hex codec with injected capabilities.

    The module-level functions are pure and never log; HexCodec adds the
    configured limits, the entropy source used by ``random`` and, when a
    logger is given, a timed log entry per call.
    """

    def __init__(
        self,
        config: Optional[CodecConfig] = None,
        entropy: Optional[EntropySource] = None,
        logger: Optional[CodecLogger] = None
    ):
        """
        Initialize codec.

        Args:
            config: Limits and logging settings (defaults if None).
            entropy: Random byte source (OS CSPRNG if None).
            logger: Per-call operation logger; no logging if None.
        """
        self.config = config or CodecConfig()
        self.entropy = entropy or SystemEntropySource()
        self.logger = logger

    # =========================================================================
    # Factory Methods
    # =========================================================================

    @classmethod
    def from_config(cls, config: CodecConfig, entropy: Optional[EntropySource] = None) -> "HexCodec":
        """
        Build a codec whose logger follows ``config.log_level`` and
        ``config.json_logs``. The level belongs to this codec alone.
        """
        logger = CodecLogger(level=config.log_level, json_output=config.json_logs)
        return cls(config=config, entropy=entropy, logger=logger)

    @classmethod
    def from_config_file(cls, path: str, entropy: Optional[EntropySource] = None) -> "HexCodec":
        """Build a codec from a JSON config file."""
        return cls.from_config(CodecConfig.from_file(path), entropy=entropy)

    @classmethod
    def from_env(cls, entropy: Optional[EntropySource] = None) -> "HexCodec":
        """Build a codec from ``HEXSEQ_*`` environment variables."""
        return cls.from_config(CodecConfig.from_env(), entropy=entropy)

    @classmethod
    def deterministic(cls, seed: int = 0, config: Optional[CodecConfig] = None) -> "HexCodec":
        """
        Build a codec with a seeded entropy source.

        WARNING: Tests only. The stream is predictable.
        """
        return cls(config=config, entropy=SeededEntropySource(seed))

    # =========================================================================
    # Internals
    # =========================================================================

    def _run(self, name: str, func: Callable, *args, **kwargs):
        if self.logger is None:
            return func(*args, **kwargs)

        inputs = None if name in _TEXT_OR_NUMBER_INPUT else _input_length(args)
        with self.logger.operation(name, inputs) as op:
            result = func(*args, **kwargs)
            op.set_output_bytes(_result_length(result))
            if isinstance(result, TextResult) and not result.success:
                op.add_detail("text_error", result.error)
        return result

    # =========================================================================
    # Structural Operations
    # =========================================================================

    def length(self, x: str) -> int:
        return self._run("length", structural.length, x)

    def concat(self, a: str, b: str, *rest: str) -> HexValue:
        return self._run("concat", structural.concat, a, b, *rest)

    def flatten(self, seq) -> HexValue:
        return self._run("flatten", structural.flatten, seq)

    def slice_bytes(self, i: int, j: int, x: str) -> HexValue:
        return self._run("slice_bytes", structural.slice_bytes, i, j, x)

    def reverse(self, x: str) -> HexValue:
        return self._run("reverse", structural.reverse, x)

    def pad(self, l: int, x: str) -> HexValue:
        return self._run("pad", structural.pad, l, x)

    def pad_right(self, l: int, x: str) -> HexValue:
        return self._run("pad_right", structural.pad_right, l, x)

    def trim_left(self, x: str) -> HexValue:
        return self._run("trim_left", structural.trim_left, x)

    def trim_right(self, x: str) -> HexValue:
        return self._run("trim_right", structural.trim_right, x)

    # =========================================================================
    # Conversions
    # =========================================================================

    def from_ascii(self, text: str) -> HexValue:
        return self._run("from_ascii", convert.from_ascii, text)

    def to_ascii(self, x: str) -> str:
        return self._run("to_ascii", convert.to_ascii, x)

    def from_string(self, text: str) -> TextResult:
        return self._run("from_string", convert.from_string, text)

    def to_string(self, x: str, strip_padding: bool = False) -> TextResult:
        return self._run("to_string", convert.to_string, x, strip_padding=strip_padding)

    def from_number(self, n: int) -> HexValue:
        return self._run("from_number", convert.from_number, n, self.config.max_safe_integer)

    def to_number(self, x: str) -> int:
        return self._run("to_number", convert.to_number, x, self.config.max_safe_integer)

    def from_nat(self, n: Union[int, str]) -> HexValue:
        return self._run("from_nat", convert.from_nat, n)

    def to_nat(self, x: str) -> int:
        return self._run("to_nat", convert.to_nat, x)

    def from_array(self, values: Iterable[int]) -> HexValue:
        return self._run("from_array", convert.from_array, values)

    def to_array(self, x: str) -> List[int]:
        return self._run("to_array", convert.to_array, x)

    def from_bytes(self, buf) -> HexValue:
        return self._run("from_bytes", convert.from_bytes, buf)

    def to_bytes(self, x: str) -> bytes:
        return self._run("to_bytes", convert.to_bytes, x)

    # =========================================================================
    # Randomness
    # =========================================================================

    def random(self, n: int) -> HexValue:
        """``n`` random bytes from the codec's entropy source."""
        return self._run("random", random_hex, n, self.entropy, self.config.max_random_bytes)

    def __repr__(self) -> str:
        return f"HexCodec(entropy={self.entropy!r}, logging={'on' if self.logger else 'off'})"


def _result_length(result: Any) -> Optional[int]:
    if isinstance(result, TextResult):
        result = result.value
    if isinstance(result, HexValue):
        return result.byte_length
    if isinstance(result, (bytes, list)):
        return len(result)
    return None


def _input_length(args: tuple) -> Optional[int]:
    # Bytes carried by hex and buffer arguments; other arguments don't count.
    total = None
    for arg in args:
        if isinstance(arg, str) and is_hex_strict(arg):
            n = HexValue(arg).byte_length
        elif isinstance(arg, (bytes, bytearray, memoryview)):
            n = memoryview(arg).nbytes
        else:
            continue
        total = (total or 0) + n
    return total
