"""
hexseq - Entropy Providers

Abstract interface for random byte sources with production and test
implementations. The codec never reaches for a global random generator;
it is handed one of these.
"""

import os
import random
from abc import ABC, abstractmethod

from .errors import EntropyError


class EntropySource(ABC):
    """
    Abstract base class for entropy sources.

    Implementations return exactly ``n`` bytes per call or raise
    EntropyError. They must never fall back to a weaker generator.

    Example implementations:
    - SystemEntropySource: OS CSPRNG (production)
    - SeededEntropySource: reproducible stream (tests only)
    - FixedEntropySource: predefined bytes (tests only)
    """

    @abstractmethod
    def read(self, n: int) -> bytes:
        """
        Read random bytes.

        Args:
            n: Number of bytes wanted.

        Returns:
            Exactly ``n`` bytes.

        Raises:
            EntropyError: If the source cannot deliver.
        """
        pass


class SystemEntropySource(EntropySource):
    """
    Operating system CSPRNG (``os.urandom``).

    Stateless and safe to share between threads; thread-safety of the
    underlying generator is the platform's.
    """

    def read(self, n: int) -> bytes:
        try:
            return os.urandom(n)
        except (OSError, NotImplementedError) as e:
            raise EntropyError(f"System entropy source failed: {e}", requested=n) from e

    def __repr__(self) -> str:
        return "SystemEntropySource()"


class SeededEntropySource(EntropySource):
    """
    Reproducible byte stream from a seed.

    WARNING: Not cryptographically secure and not thread-safe. Only use
    to make tests deterministic.

    Example:
        source = SeededEntropySource(42)
        codec = HexCodec(entropy=source)
    """

    def __init__(self, seed: int = 0):
        self.seed = seed
        self._rng = random.Random(seed)

    def read(self, n: int) -> bytes:
        return self._rng.randbytes(n)

    def reset(self) -> None:
        """Restart the stream from the seed."""
        self._rng = random.Random(self.seed)

    def __repr__(self) -> str:
        return f"SeededEntropySource(seed={self.seed})"


class FixedEntropySource(EntropySource):
    """
    Hands out a predefined buffer in order.

    WARNING: Only for tests. Raises EntropyError once the buffer runs out,
    which also makes it handy for exercising failure paths.
    """

    def __init__(self, data: bytes):
        self._data = bytes(data)
        self._offset = 0

    @property
    def remaining(self) -> int:
        return len(self._data) - self._offset

    def read(self, n: int) -> bytes:
        if n > self.remaining:
            raise EntropyError(
                f"Fixed entropy exhausted: {self.remaining} bytes left, {n} requested",
                requested=n,
                received=self.remaining
            )
        chunk = self._data[self._offset:self._offset + n]
        self._offset += n
        return chunk
