"""
hexseq - Constants

Centralized constants for the canonical hex representation.
"""

# =============================================================================
# Canonical Form
# =============================================================================

# Prefix of every canonical hex value
HEX_PREFIX = "0x"

# Accepted on input, never produced
HEX_PREFIX_UPPER = "0X"

# The zero-length byte sequence
EMPTY_HEX = HEX_PREFIX

# Hex digits per byte
DIGITS_PER_BYTE = 2

HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


# =============================================================================
# Numeric Limits
# =============================================================================

# Largest byte value
MAX_BYTE = 0xFF

# Largest integer a JSON-RPC peer can hold exactly in an IEEE-754 double
MAX_SAFE_INTEGER = 2 ** 53 - 1


# =============================================================================
# Randomness
# =============================================================================

# Upper bound on a single random_hex request
MAX_RANDOM_BYTES = 65536


# =============================================================================
# Configuration
# =============================================================================

ENV_PREFIX = "HEXSEQ_"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
