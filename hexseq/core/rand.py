"""
hexseq - Randomness

Random byte sequences drawn from an injected entropy source.
"""

import numbers
from typing import Optional

from ..constants import MAX_RANDOM_BYTES
from ..errors import EntropyError, RangeError
from ..providers import EntropySource, SystemEntropySource
from .hexvalue import HexValue


def random_hex(
    n: int,
    source: Optional[EntropySource] = None,
    max_bytes: int = MAX_RANDOM_BYTES
) -> HexValue:
    """
    Generate ``n`` random bytes.

    Args:
        n: Number of bytes, 0 to ``max_bytes``.
        source: Entropy source (defaults to the OS CSPRNG).
        max_bytes: Largest request accepted.

    Returns:
        HexValue of exactly ``n`` bytes.

    Raises:
        RangeError: ``n`` is not an integer in ``[0, max_bytes]``.
        EntropyError: The source failed or returned the wrong amount.
    """
    if isinstance(n, bool) or not isinstance(n, numbers.Integral) or not 0 <= n <= max_bytes:
        raise RangeError(
            f"Random size must be an integer between 0 and {max_bytes}, got {n!r}",
            requested=n, max_bytes=max_bytes
        )

    if source is None:
        source = SystemEntropySource()

    try:
        data = source.read(n)
    except EntropyError:
        raise
    except Exception as e:
        raise EntropyError(f"Entropy source {source!r} failed: {e}", requested=n) from e

    if not isinstance(data, (bytes, bytearray)) or len(data) != n:
        received = len(data) if isinstance(data, (bytes, bytearray)) else None
        raise EntropyError(
            f"Entropy source returned {received} bytes, expected {n}",
            requested=n,
            received=received
        )

    return HexValue.from_raw(data)
