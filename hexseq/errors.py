"""
hexseq - Error Types

Specific exception classes for every failure the codec can signal.
"""

from typing import Optional


class HexSeqError(Exception):
    """Base exception for all hexseq errors."""

    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self):
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


# =============================================================================
# Representation Errors
# =============================================================================

class EncodingError(HexSeqError):
    """Malformed hex value presented for decoding."""

    def __init__(self, message: str, value: Optional[object] = None, reason: Optional[str] = None):
        details = {}
        if reason:
            details["reason"] = reason
        if value is not None:
            details["value"] = _preview(value)
        super().__init__(message, details)
        self.value = value
        self.reason = reason


# =============================================================================
# Structural Errors
# =============================================================================

class RangeError(HexSeqError):
    """Index or target length outside the valid range."""

    def __init__(self, message: str, **details):
        super().__init__(message, details)


# =============================================================================
# Domain Errors
# =============================================================================

class ValidationError(HexSeqError):
    """Value outside the representable domain of the target encoding."""

    def __init__(self, message: str, value: Optional[object] = None, **details):
        if value is not None:
            details["value"] = _preview(value)
        super().__init__(message, details)
        self.value = value


class PrecisionError(HexSeqError):
    """Magnitude exceeds the exact-representation range of a native integer."""

    def __init__(self, value_bits: int, limit: int):
        super().__init__(
            f"Value of {value_bits} bits exceeds the native integer limit of {limit}",
            {"value_bits": value_bits, "limit": limit}
        )
        self.value_bits = value_bits
        self.limit = limit


# =============================================================================
# Entropy Errors
# =============================================================================

class EntropyError(HexSeqError):
    """The secure random source is unavailable or failed."""

    def __init__(self, message: str, requested: Optional[int] = None, received: Optional[int] = None):
        super().__init__(message, {"requested": requested, "received": received})
        self.requested = requested
        self.received = received


# =============================================================================
# Configuration Errors
# =============================================================================

class ConfigurationError(HexSeqError):
    """Invalid codec configuration."""
    pass


def _preview(value: object, limit: int = 48) -> str:
    text = repr(value)
    if len(text) > limit:
        return text[:limit] + "..."
    return text
