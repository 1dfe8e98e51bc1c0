"""
Unit tests for validation module.

Tests InputValidator for raw user input and ConfigValidator for carrier
configuration objects.
"""

import math

import numpy as np
import pytest

from carrier_modulator.error_handling import (
    BitCountMismatchError,
    InvalidBitStringError,
    InvalidDurationError,
)
from carrier_modulator.models import ModulationScheme
from carrier_modulator.validation import InputValidator


class TestBitStringValidation:
    """Test cases for bit input validation."""

    def test_valid_string(self):
        bits = InputValidator.validate_bit_string("10110")

        np.testing.assert_array_equal(bits, [1, 0, 1, 1, 0])
        assert bits.dtype == np.uint8
        assert not bits.flags.writeable

    def test_surrounding_whitespace_is_stripped(self):
        bits = InputValidator.validate_bit_string("  01 \n")
        np.testing.assert_array_equal(bits, [0, 1])

    @pytest.mark.parametrize("raw", ["", "   ", "0120", "01 10", "abc", "1.0"])
    def test_invalid_strings(self, raw):
        with pytest.raises(InvalidBitStringError) as exc_info:
            InputValidator.validate_bit_string(raw)

        assert exc_info.value.bits == raw
        assert "only 0 and 1" in exc_info.value.user_message

    def test_valid_sequences(self):
        np.testing.assert_array_equal(InputValidator.validate_bit_string([1, 0, 0]), [1, 0, 0])
        np.testing.assert_array_equal(
            InputValidator.validate_bit_string(np.array([0, 1], dtype=np.int64)), [0, 1]
        )

    def test_input_array_is_not_aliased(self):
        source = np.array([0, 1, 1])
        bits = InputValidator.validate_bit_string(source)
        source[0] = 1

        assert bits[0] == 0

    @pytest.mark.parametrize("raw", [[], [0, 2], [[0, 1]], [True, False], ["0", "1"], 101])
    def test_invalid_sequences(self, raw):
        with pytest.raises(InvalidBitStringError):
            InputValidator.validate_bit_string(raw)

    def test_max_bits(self):
        InputValidator.validate_bit_string("1010", max_bits=4)

        with pytest.raises(InvalidBitStringError, match="limit is 4") as exc_info:
            InputValidator.validate_bit_string("10101", max_bits=4)

        assert exc_info.value.limit == 4
        assert exc_info.value.user_message == "Bit sequence exceeds the 4-bit limit."


class TestSymbolDurationValidation:
    """Test cases for symbol duration validation."""

    @pytest.mark.parametrize(
        "raw,expected", [(0.01, 0.01), (1, 1.0), ("0.002", 0.002), (" 2e-3 ", 0.002)]
    )
    def test_valid(self, raw, expected):
        assert InputValidator.validate_symbol_duration(raw) == expected

    @pytest.mark.parametrize(
        "raw", [0, -0.01, "0", "abc", "", None, True, math.nan, math.inf, -math.inf, "nan"]
    )
    def test_invalid(self, raw):
        with pytest.raises(InvalidDurationError) as exc_info:
            InputValidator.validate_symbol_duration(raw)

        assert exc_info.value.user_message == "Please enter a valid symbol time (greater than 0)."


class TestBitCountValidation:
    """Test cases for bits-per-symbol divisibility."""

    def test_single_bit_schemes_accept_any_count(self):
        bits = InputValidator.validate_bit_string("101")

        for scheme in (ModulationScheme.ASK, ModulationScheme.PSK4, ModulationScheme.FSK):
            InputValidator.validate_bit_count(bits, scheme)

    def test_qam_divisibility(self):
        InputValidator.validate_bit_count(
            InputValidator.validate_bit_string("101100"), ModulationScheme.QAM8
        )

        odd_bits = InputValidator.validate_bit_string("10110")
        match = "5 bits is not a multiple of 2"
        with pytest.raises(BitCountMismatchError, match=match) as exc_info:
            InputValidator.validate_bit_count(odd_bits, ModulationScheme.QAM4)

        assert exc_info.value.order == 4
        assert exc_info.value.user_message == (
            "The number of bits must be a multiple of 2 for 4-QAM."
        )
