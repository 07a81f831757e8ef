"""
hexseq Test Configuration

Shared fixtures and test utilities.
"""

import pytest
from pathlib import Path
import sys

# Ensure hexseq is importable
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from hexseq import HexCodec, CodecConfig, FixedEntropySource, SeededEntropySource
from hexseq.logging import create_callback_logger


# =============================================================================
# Sample Values
# =============================================================================

@pytest.fixture
def sample_hex_values():
    """Assorted canonical hex values, including the empty sequence."""
    return ["0x", "0x00", "0xff", "0x1234", "0x010203", "0xdeadbeef", "0x" + "ab" * 32]


@pytest.fixture
def sample_word():
    """A 32-byte ABI word holding the number 1."""
    return "0x" + "00" * 31 + "01"


# =============================================================================
# Codec Fixtures
# =============================================================================

@pytest.fixture
def codec():
    """Codec with the real entropy source and no logging."""
    return HexCodec()


@pytest.fixture
def seeded_codec():
    """Codec with reproducible randomness - DO NOT USE IN PRODUCTION."""
    return HexCodec(entropy=SeededEntropySource(1234))


@pytest.fixture
def fixed_entropy():
    """Eight predictable entropy bytes."""
    return FixedEntropySource(bytes(range(1, 9)))


@pytest.fixture
def captured_logs():
    """List filled by a callback logger, plus the codec using it."""
    entries = []
    logger = create_callback_logger(entries.append)
    codec = HexCodec(config=CodecConfig(), logger=logger)
    return codec, entries


# =============================================================================
# Marker Helpers
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests (no external dependencies)")
    config.addinivalue_line("markers", "integration: Integration tests across modules")
    config.addinivalue_line("markers", "security: Security-focused tests")
