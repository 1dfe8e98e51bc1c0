"""
Amplitude-shift keying (on-off keying) modulator.
"""

import numpy as np

from .carrier import CarrierModulator
from .models import BitSequence, ModulationResult, ModulationScheme


class ASKModulator(CarrierModulator):
    """Binary ASK: bit 1 transmits the full carrier, bit 0 transmits nothing.

    amplitude(t) = bit * sin(2 * pi * fc * t)
    """

    scheme = ModulationScheme.ASK

    def modulate(self, bits: BitSequence, symbol_duration: float) -> ModulationResult:
        num_symbols = len(bits)
        t = self.clock.time_vector(num_symbols, symbol_duration)
        indices = self.clock.symbol_indices(t, symbol_duration, num_symbols)

        levels = np.asarray(bits, dtype=np.float64)[indices]
        signal = levels * np.sin(2 * np.pi * self.carrier_frequency * t)

        return self._build_result(
            t,
            signal,
            num_symbols,
            symbol_duration,
            self._bit_annotations(bits, symbol_duration),
            carrier_frequency=self.carrier_frequency,
        )
