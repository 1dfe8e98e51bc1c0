"""
Binary frequency-shift keying modulator.
"""

import numpy as np

from .carrier import CarrierModulator
from .models import BitSequence, ModulationResult, ModulationScheme


class FSKModulator(CarrierModulator):
    """Binary FSK: bit 0 uses fc1, bit 1 uses fc2 for the whole symbol."""

    scheme = ModulationScheme.FSK

    @property
    def frequencies(self) -> tuple:
        """(bit 0, bit 1) carrier frequencies in Hz."""
        return self.carrier_config.fsk_frequencies

    def modulate(self, bits: BitSequence, symbol_duration: float) -> ModulationResult:
        num_symbols = len(bits)
        t = self.clock.time_vector(num_symbols, symbol_duration)
        indices = self.clock.symbol_indices(t, symbol_duration, num_symbols)

        fc1, fc2 = self.frequencies
        frequency = np.where(np.asarray(bits)[indices] == 0, fc1, fc2)
        signal = np.sin(2 * np.pi * frequency * t)

        return self._build_result(
            t,
            signal,
            num_symbols,
            symbol_duration,
            self._bit_annotations(bits, symbol_duration),
            fsk_frequencies=self.frequencies,
        )

    def __repr__(self) -> str:
        fc1, fc2 = self.frequencies
        return f"FSKModulator(fc1={fc1}Hz, fc2={fc2}Hz, fs={self.clock.sampling_rate}Hz)"
