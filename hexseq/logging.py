"""
hexseq - Codec Logging

One record per codec call: which operation ran, how many bytes went in and
came out, how long it took and, on failure, which error with its reason and
details. The pure functions in ``hexseq.core`` never log; only a HexCodec
given a CodecLogger does.

Each CodecLogger filters by its own level, so two codecs configured with
different levels never change each other's output.
"""

import json
import logging
import time
from dataclasses import dataclass, asdict
from typing import Any, Callable, Dict, Optional

from .constants import LOG_LEVELS


_LEVELNO = {name: getattr(logging, name) for name in LOG_LEVELS}

# Attribute carrying the record dict on the stdlib LogRecord.
_RECORD_ATTR = "hexseq_record"


@dataclass
class OperationRecord:
    """What happened during one codec call."""
    operation: str
    event: str                              # "start", "done" or "failed"
    level: str = "DEBUG"
    input_bytes: Optional[int] = None
    output_bytes: Optional[int] = None
    duration_ms: Optional[float] = None
    error_type: Optional[str] = None
    reason: Optional[str] = None
    details: Optional[Dict[str, Any]] = None

    def to_dict(self) -> dict:
        """Convert to dictionary, excluding None values."""
        return {k: v for k, v in asdict(self).items() if v is not None}

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), default=str)

    def to_text(self) -> str:
        """Single plain line, e.g. ``[DEBUG] concat done 2->2 bytes 0.012ms``."""
        line = f"[{self.level}] {self.operation} {self.event}"
        if self.input_bytes is not None or self.output_bytes is not None:
            line += f" {_or_dash(self.input_bytes)}->{_or_dash(self.output_bytes)} bytes"
        if self.duration_ms is not None:
            line += f" {self.duration_ms:.3f}ms"
        if self.error_type:
            line += f" {self.error_type}"
            if self.reason:
                line += f"({self.reason})"
        return line


class CodecLogger:
    """
    Emits OperationRecords for a single codec.

    Example:
        logger = CodecLogger(level="DEBUG")

        with logger.operation("concat", input_bytes=3) as op:
            result = concat(a, b)
            op.set_output_bytes(result.byte_length)
    """

    def __init__(
        self,
        level: str = "WARNING",
        json_output: bool = True,
        logger: Optional[logging.Logger] = None
    ):
        """
        Args:
            level: Minimum level this codec emits.
            json_output: JSON lines if True, plain text otherwise.
            logger: Destination stdlib logger (the shared ``hexseq`` logger if None).
        """
        self.level = level
        self.json_output = json_output
        self._logger = logger or _default_logger()

    @property
    def level(self) -> str:
        return self._level

    @level.setter
    def level(self, value: str) -> None:
        value = str(value).upper()
        if value not in _LEVELNO:
            raise ValueError(f"Unknown log level: {value}")
        self._level = value

    @property
    def logger(self) -> logging.Logger:
        """The stdlib logger records are written to."""
        return self._logger

    def enabled(self, level: str) -> bool:
        return _LEVELNO[level] >= _LEVELNO[self._level]

    def emit(self, record: OperationRecord) -> None:
        if not self.enabled(record.level):
            return
        message = record.to_json() if self.json_output else record.to_text()
        self._logger.log(
            _LEVELNO[record.level],
            message,
            extra={_RECORD_ATTR: record.to_dict()}
        )

    def operation(self, name: str, input_bytes: Optional[int] = None) -> "OperationContext":
        """Timing context for one call of ``name``."""
        return OperationContext(self, name, input_bytes)


class OperationContext:
    """Logs start and outcome of one operation; exceptions propagate unchanged."""

    def __init__(self, logger: CodecLogger, operation: str, input_bytes: Optional[int] = None):
        self.logger = logger
        self.operation = operation
        self.input_bytes = input_bytes
        self.output_bytes: Optional[int] = None
        self.details: Dict[str, Any] = {}
        self.start_time: float = 0

    def __enter__(self) -> "OperationContext":
        self.start_time = time.perf_counter()
        self.logger.emit(OperationRecord(
            operation=self.operation,
            event="start",
            input_bytes=self.input_bytes
        ))
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        duration_ms = (time.perf_counter() - self.start_time) * 1000

        if exc_val is not None:
            details = dict(getattr(exc_val, "details", None) or {})
            details.update(self.details)
            details.pop("reason", None)
            self.logger.emit(OperationRecord(
                operation=self.operation,
                event="failed",
                level="ERROR",
                input_bytes=self.input_bytes,
                duration_ms=duration_ms,
                error_type=type(exc_val).__name__,
                reason=getattr(exc_val, "reason", None),
                details=details or None
            ))
        else:
            self.logger.emit(OperationRecord(
                operation=self.operation,
                event="done",
                input_bytes=self.input_bytes,
                output_bytes=self.output_bytes,
                duration_ms=duration_ms,
                details=self.details or None
            ))

    def set_output_bytes(self, n: Optional[int]) -> None:
        self.output_bytes = n

    def add_detail(self, key: str, value: Any) -> None:
        self.details[key] = value


def _or_dash(n: Optional[int]) -> str:
    return "-" if n is None else str(n)


def _default_logger() -> logging.Logger:
    # Shared by every codec; per-codec filtering happens in CodecLogger.
    logger = logging.getLogger("hexseq")
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter('%(message)s'))
        logger.addHandler(handler)
        logger.setLevel(logging.DEBUG)
    return logger


class _CallbackHandler(logging.Handler):
    def __init__(self, callback: Callable[[dict], None]):
        super().__init__(logging.DEBUG)
        self.callback = callback

    def emit(self, record: logging.LogRecord) -> None:
        self.callback(getattr(record, _RECORD_ATTR))


def create_callback_logger(
    callback: Callable[[dict], None],
    level: str = "DEBUG"
) -> CodecLogger:
    """
    Create a logger that hands every record to ``callback`` as a dict.

    The stdlib logger behind it is private to the returned CodecLogger: it
    is not registered with ``logging.getLogger`` and does not propagate.
    """
    logger = logging.Logger("hexseq.callback", logging.DEBUG)
    logger.propagate = False
    logger.addHandler(_CallbackHandler(callback))
    return CodecLogger(level=level, logger=logger)
