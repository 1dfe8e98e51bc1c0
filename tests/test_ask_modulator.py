"""
Unit tests for ASKModulator.
"""

import numpy as np
import pytest

from carrier_modulator.ask_modulator import ASKModulator
from carrier_modulator.models import CarrierConfig, ModulationScheme, SymbolAnnotation
from carrier_modulator.validation import InputValidator


def bits(text):
    return InputValidator.validate_bit_string(text)


class TestASKModulator:
    """Test suite for ASKModulator functionality."""

    @pytest.fixture
    def modulator(self):
        return ASKModulator()

    def test_default_carrier(self, modulator):
        assert modulator.scheme == ModulationScheme.ASK
        assert modulator.carrier_frequency == 2000.0
        assert modulator.clock.sampling_rate == 10000.0

    def test_sample_count_and_annotations(self, modulator):
        result = modulator.modulate(bits("101"), 0.01)

        assert result.num_symbols == 3
        assert result.num_samples == 300
        assert result.amplitude[0] == 0.0
        assert [a.label for a in result.annotations] == ["1", "0", "1"]
        assert [a.position for a in result.annotations] == pytest.approx([0.005, 0.015, 0.025])
        assert isinstance(result.annotations[0], SymbolAnnotation)

    def test_bit_zero_interval_is_silent(self, modulator):
        result = modulator.modulate(bits("101"), 0.01)

        assert np.all(result.amplitude[100:200] == 0.0)
        assert np.all(result.get_symbol_samples(1) == 0.0)

    def test_bit_one_interval_is_full_carrier(self, modulator):
        result = modulator.modulate(bits("101"), 0.01)
        t = result.time[:100]

        np.testing.assert_allclose(result.amplitude[:100], np.sin(2 * np.pi * 2000.0 * t))
        assert np.max(np.abs(result.amplitude[200:300])) > 0.9

    def test_all_zero_bits(self, modulator):
        result = modulator.modulate(bits("0000"), 0.001)

        assert result.num_samples == 40
        assert np.all(result.amplitude == 0.0)

    def test_no_constellation(self, modulator):
        result = modulator.modulate(bits("1"), 0.01)

        assert result.constellation.shape == (0, 2)
        assert not result.has_constellation

    def test_custom_carrier(self):
        config = CarrierConfig(sampling_rate=8000.0, carrier_frequency=1000.0)
        modulator = ASKModulator(config)
        result = modulator.modulate(bits("1"), 0.01)

        assert result.num_samples == 80
        assert result.sampling_rate == 8000.0
        np.testing.assert_allclose(
            result.amplitude, np.sin(2 * np.pi * 1000.0 * np.arange(80) / 8000.0)
        )

    def test_stateless_between_calls(self, modulator):
        first = modulator.modulate(bits("110"), 0.002)
        modulator.modulate(bits("0"), 0.005)
        again = modulator.modulate(bits("110"), 0.002)

        np.testing.assert_array_equal(first.amplitude, again.amplitude)
        np.testing.assert_array_equal(first.time, again.time)

    def test_repr(self, modulator):
        assert "ASKModulator" in repr(modulator)
        assert "2000.0Hz" in repr(modulator)
