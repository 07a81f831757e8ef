"""
Unit tests for the canonical hex value and its validation gate.
"""

import pytest

from hexseq import HexValue, to_hex_value, is_hex, is_hex_strict, EncodingError


class TestHexValueAccepts:
    """Tests for valid input."""

    @pytest.mark.unit
    def test_lowercase_passes_through(self):
        """Test canonical input is kept as-is."""
        assert HexValue("0xabcd") == "0xabcd"

    @pytest.mark.unit
    def test_uppercase_digits_normalized(self):
        """Test uppercase digits are lowercased."""
        assert HexValue("0xABCD") == "0xabcd"

    @pytest.mark.unit
    def test_mixed_case_normalized(self):
        """Test mixed case is lowercased."""
        assert HexValue("0xDeAdBeEf") == "0xdeadbeef"

    @pytest.mark.unit
    def test_uppercase_prefix_normalized(self):
        """Test 0X prefix is accepted and rewritten as 0x."""
        assert HexValue("0XAB") == "0xab"

    @pytest.mark.unit
    def test_empty_sequence(self):
        """Test 0x is the empty byte sequence."""
        value = HexValue("0x")
        assert value == "0x"
        assert value.byte_length == 0
        assert value.raw == b""

    @pytest.mark.unit
    def test_is_a_string(self):
        """Test HexValue can be used wherever a str is expected."""
        value = HexValue("0x01")
        assert isinstance(value, str)
        assert value.upper() == "0X01"

    @pytest.mark.unit
    def test_existing_value_returned_unchanged(self):
        """Test wrapping a HexValue again returns the same object."""
        value = HexValue("0x01")
        assert HexValue(value) is value

    @pytest.mark.unit
    def test_properties(self):
        """Test digits, byte_length and raw."""
        value = HexValue("0x0102ff")
        assert value.digits == "0102ff"
        assert value.byte_length == 3
        assert value.raw == b"\x01\x02\xff"

    @pytest.mark.unit
    def test_repr(self):
        """Test repr names the type."""
        assert repr(HexValue("0xab")) == "HexValue('0xab')"

    @pytest.mark.unit
    def test_to_hex_value(self):
        """Test the functional entry point."""
        assert to_hex_value("0xFF") == HexValue("0xff")


class TestHexValueRejects:
    """Tests for malformed input."""

    @pytest.mark.unit
    def test_missing_prefix(self):
        """Test missing prefix raises EncodingError."""
        with pytest.raises(EncodingError, match="start with 0x") as exc:
            HexValue("abcd")
        assert exc.value.reason == "prefix"

    @pytest.mark.unit
    def test_odd_digit_count(self):
        """Test odd digit count raises EncodingError."""
        with pytest.raises(EncodingError, match="even number of digits") as exc:
            HexValue("0xabc")
        assert exc.value.reason == "odd_length"

    @pytest.mark.unit
    def test_non_hex_character(self):
        """Test non-hex character raises EncodingError."""
        with pytest.raises(EncodingError, match="Invalid hex character") as exc:
            HexValue("0xzz")
        assert exc.value.reason == "character"

    @pytest.mark.unit
    def test_non_hex_character_reported_before_length(self):
        """Test bad characters win over odd length."""
        with pytest.raises(EncodingError, match="'g' at position 3"):
            HexValue("0xag1")

    @pytest.mark.unit
    def test_spaces_rejected(self):
        """Test whitespace is not silently stripped."""
        with pytest.raises(EncodingError):
            HexValue("0xab cd")

    @pytest.mark.unit
    def test_negative_prefix_rejected(self):
        """Test signed hex is not a byte sequence."""
        with pytest.raises(EncodingError):
            HexValue("-0x01")

    @pytest.mark.unit
    def test_non_ascii_digit_rejected(self):
        """Test unicode digits are not hex digits."""
        with pytest.raises(EncodingError):
            HexValue("0x١٢")

    @pytest.mark.unit
    def test_non_string_rejected(self):
        """Test bytes and ints are not hex values."""
        with pytest.raises(EncodingError, match="must be a string"):
            HexValue(b"0x01")
        with pytest.raises(EncodingError, match="must be a string"):
            HexValue(1)

    @pytest.mark.unit
    def test_error_details_include_value(self):
        """Test the offending value appears in error details."""
        with pytest.raises(EncodingError) as exc:
            HexValue("nothex")
        assert "nothex" in exc.value.details["value"]
        assert "Details" in str(exc.value)


class TestIsHex:
    """Tests for the boolean checks."""

    @pytest.mark.unit
    def test_strict_accepts_canonical(self):
        assert is_hex_strict("0xabcd") is True
        assert is_hex_strict("0x") is True

    @pytest.mark.unit
    def test_strict_rejects_malformed(self):
        assert is_hex_strict("abcd") is False
        assert is_hex_strict("0xabc") is False
        assert is_hex_strict("0xgg") is False
        assert is_hex_strict(None) is False

    @pytest.mark.unit
    def test_lenient_accepts_unprefixed_and_odd(self):
        """Test lenient check accepts what the strict gate refuses."""
        assert is_hex("abc") is True
        assert is_hex("0xABC") is True
        assert is_hex("") is True

    @pytest.mark.unit
    def test_lenient_rejects_non_hex(self):
        assert is_hex("0xzz") is False
        assert is_hex("ab cd") is False
        assert is_hex("ab\n") is False
        assert is_hex(123) is False
