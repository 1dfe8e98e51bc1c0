"""
Unit tests for QAMModulator and the fixed symbol alphabets.
"""

import numpy as np
import pytest

from carrier_modulator.constellations import (
    QAM4_ALPHABET,
    QAM8_ALPHABET,
    bits_to_symbol_indices,
)
from carrier_modulator.error_handling import BitCountMismatchError, UnsupportedSchemeError
from carrier_modulator.models import ModulationScheme
from carrier_modulator.qam_modulator import QAMModulator
from carrier_modulator.validation import InputValidator


def bits(text):
    return InputValidator.validate_bit_string(text)


class TestAlphabets:
    """Test cases for the static alphabet tables."""

    def test_qam4_table(self):
        expected = np.array([[-1, -1], [-1, 1], [1, -1], [1, 1]], dtype=float)
        np.testing.assert_array_equal(QAM4_ALPHABET, expected)

    def test_qam8_star_layout(self):
        magnitudes = np.hypot(QAM8_ALPHABET[:, 0], QAM8_ALPHABET[:, 1])

        assert QAM8_ALPHABET.shape == (8, 2)
        np.testing.assert_allclose(magnitudes[[0, 2, 4, 6]], 1.0)
        np.testing.assert_allclose(magnitudes[[1, 3, 5, 7]], 2.0)
        np.testing.assert_allclose(QAM8_ALPHABET[5], [np.sqrt(2), np.sqrt(2)])

    def test_tables_read_only(self):
        with pytest.raises(ValueError):
            QAM4_ALPHABET[0, 0] = 5.0

    def test_bits_to_symbol_indices_msb_first(self):
        indices = bits_to_symbol_indices(bits("00011011"), 2)
        np.testing.assert_array_equal(indices, [0, 1, 2, 3])

        indices = bits_to_symbol_indices(bits("110001"), 3)
        np.testing.assert_array_equal(indices, [6, 1])


class TestQAMModulator:
    """Test suite for QAMModulator functionality."""

    def test_schemes(self):
        assert QAMModulator(4).scheme == ModulationScheme.QAM4
        assert QAMModulator(8).scheme == ModulationScheme.QAM8
        assert QAMModulator(8).bits_per_symbol == 3

    def test_unsupported_order(self):
        with pytest.raises(UnsupportedSchemeError, match="16-QAM is not supported"):
            QAMModulator(16)

    def test_qam4_scenario(self):
        result = QAMModulator(4).modulate(bits("00011011"), 0.001)

        assert result.num_symbols == 4
        assert result.num_samples == 40
        assert result.metadata["symbols"] == [[-1.0, -1.0], [-1.0, 1.0], [1.0, -1.0], [1.0, 1.0]]
        np.testing.assert_array_equal(result.constellation, QAM4_ALPHABET)
        assert result.annotations == []

    def test_qam8_symbols(self):
        modulator = QAMModulator(8)
        symbols = modulator.symbols(bits("000001010011100101110111"))

        np.testing.assert_array_equal(symbols, QAM8_ALPHABET)

    def test_qam8_constellation_is_full_table(self):
        result = QAMModulator(8).modulate(bits("000"), 0.001)

        assert result.num_symbols == 1
        assert len(result.constellation) == 8
        np.testing.assert_array_equal(result.constellation, QAM8_ALPHABET)

    @pytest.mark.parametrize("order,text", [(4, "101"), (8, "1011"), (8, "10")])
    def test_bit_count_mismatch(self, order, text):
        with pytest.raises(BitCountMismatchError) as exc_info:
            QAMModulator(order).modulate(bits(text), 0.001)

        error = exc_info.value
        assert error.bit_count == len(text)
        assert error.bits_per_symbol == int(np.log2(order))
        assert f"multiple of {error.bits_per_symbol} for {order}-QAM" in error.user_message

    def test_quadrature_combination(self):
        result = QAMModulator(4).modulate(bits("11"), 0.001)
        phase = 2 * np.pi * 2000.0 * result.time

        np.testing.assert_allclose(result.amplitude, np.cos(phase) + np.sin(phase))

    def test_symbol_switch_at_boundary(self):
        result = QAMModulator(4).modulate(bits("0011"), 0.001)
        phase = 2 * np.pi * 2000.0 * result.time

        np.testing.assert_allclose(result.amplitude[:10], -np.cos(phase[:10]) - np.sin(phase[:10]))
        np.testing.assert_allclose(result.amplitude[10:], np.cos(phase[10:]) + np.sin(phase[10:]))

    def test_constellation_copy_is_independent(self):
        modulator = QAMModulator(4)
        points = modulator.constellation()
        points[0] = [9.0, 9.0]

        np.testing.assert_array_equal(modulator.constellation(), QAM4_ALPHABET)
