"""
Phase-shift keying modulator for M = 2 and M = 4.
"""

import logging
from typing import Optional

import numpy as np

from .carrier import CarrierModulator
from .constellations import PSK_ORDERS, psk_constellation
from .error_handling import UnsupportedSchemeError
from .models import BitSequence, CarrierConfig, ModulationResult, ModulationScheme

logger = logging.getLogger(__name__)


class PSKModulator(CarrierModulator):
    """M-ary PSK with a phase step of 2*pi/M.

    Every raw bit selects the phase ``bit * 2*pi/M``; bits are not grouped
    into log2(M)-bit symbols, so 4-PSK only ever uses phases 0 and pi/2.
    The returned constellation is still the full ideal M-point circle.
    """

    def __init__(self, order: int = 2, carrier_config: Optional[CarrierConfig] = None):
        """Initialize PSK modulator.

        Args:
            order: Alphabet size M (2 or 4)
            carrier_config: Carrier parameters

        Raises:
            UnsupportedSchemeError: If order is not 2 or 4
        """
        if order not in PSK_ORDERS:
            raise UnsupportedSchemeError(f"{order}-PSK is not supported", f"{order}PSK")

        super().__init__(carrier_config)
        self.order = order
        self.phase_step = 2 * np.pi / order
        self.scheme = ModulationScheme.PSK2 if order == 2 else ModulationScheme.PSK4

        logger.debug(f"PSKModulator initialized: M={order}, step={self.phase_step:.4f}rad")

    def modulate(self, bits: BitSequence, symbol_duration: float) -> ModulationResult:
        num_symbols = len(bits)
        t = self.clock.time_vector(num_symbols, symbol_duration)
        indices = self.clock.symbol_indices(t, symbol_duration, num_symbols, wrap=True)

        phase = np.asarray(bits, dtype=np.float64)[indices] * self.phase_step
        signal = np.sin(2 * np.pi * self.carrier_frequency * t + phase)

        return self._build_result(
            t,
            signal,
            num_symbols,
            symbol_duration,
            self._bit_annotations(bits, symbol_duration),
            carrier_frequency=self.carrier_frequency,
            phase_step=self.phase_step,
        )

    def constellation(self) -> np.ndarray:
        return psk_constellation(self.order)

    def __repr__(self) -> str:
        return f"PSKModulator(M={self.order}, fc={self.carrier_frequency}Hz)"
