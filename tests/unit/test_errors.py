"""
Unit tests for the error hierarchy.
"""

import pytest

from hexseq.errors import (
    HexSeqError,
    EncodingError,
    RangeError,
    ValidationError,
    PrecisionError,
    EntropyError,
    ConfigurationError,
)


class TestHierarchy:
    """Every error is catchable through the base class."""

    @pytest.mark.unit
    @pytest.mark.parametrize("error_type", [
        EncodingError, RangeError, ValidationError, PrecisionError, EntropyError, ConfigurationError,
    ])
    def test_subclass_of_base(self, error_type):
        assert issubclass(error_type, HexSeqError)


class TestMessages:
    """Tests for message and details rendering."""

    @pytest.mark.unit
    def test_plain_message(self):
        assert str(HexSeqError("boom")) == "boom"

    @pytest.mark.unit
    def test_details_appended(self):
        err = RangeError("out of range", start=3, end=1)
        assert str(err) == "out of range | Details: {'start': 3, 'end': 1}"

    @pytest.mark.unit
    def test_precision_error_fields(self):
        err = PrecisionError(value_bits=64, limit=2 ** 53 - 1)
        assert err.value_bits == 64
        assert "64 bits" in err.message

    @pytest.mark.unit
    def test_long_values_truncated_in_details(self):
        err = EncodingError("bad", value="0x" + "z" * 200, reason="character")
        assert err.details["value"].endswith("...")
        assert len(err.details["value"]) < 60

    @pytest.mark.unit
    def test_validation_error_extra_details(self):
        err = ValidationError("bad byte", value=300, index=2)
        assert err.details == {"index": 2, "value": "300"}
        assert err.value == 300

    @pytest.mark.unit
    def test_entropy_error_fields(self):
        err = EntropyError("short", requested=4, received=3)
        assert (err.requested, err.received) == (4, 3)
