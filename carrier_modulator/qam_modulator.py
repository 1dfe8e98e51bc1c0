"""
Quadrature amplitude modulator for M = 4 and M = 8.
"""

import logging
from typing import Optional

import numpy as np

from .carrier import CarrierModulator
from .constellations import QAM_ALPHABETS, bits_to_symbol_indices
from .error_handling import BitCountMismatchError, UnsupportedSchemeError
from .models import BitSequence, CarrierConfig, ModulationResult, ModulationScheme

logger = logging.getLogger(__name__)


class QAMModulator(CarrierModulator):
    """M-ary QAM over a fixed symbol alphabet.

    Bits are grouped MSB-first into log2(M)-bit symbols, each symbol is
    looked up in the alphabet table and the carrier is formed as

        amplitude(t) = re * cos(2*pi*fc*t) + im * sin(2*pi*fc*t)

    No per-bit annotations are produced.
    """

    def __init__(self, order: int = 4, carrier_config: Optional[CarrierConfig] = None):
        """Initialize QAM modulator.

        Args:
            order: Alphabet size M (4 or 8)
            carrier_config: Carrier parameters

        Raises:
            UnsupportedSchemeError: If order has no alphabet table
        """
        if order not in QAM_ALPHABETS:
            raise UnsupportedSchemeError(f"{order}-QAM is not supported", f"{order}QAM")

        super().__init__(carrier_config)
        self.order = order
        self.bits_per_symbol = int(np.log2(order))
        self.alphabet = QAM_ALPHABETS[order]
        self.scheme = ModulationScheme.QAM4 if order == 4 else ModulationScheme.QAM8

        logger.debug(f"QAMModulator initialized: M={order}, {self.bits_per_symbol} bits/symbol")

    def symbols(self, bits: BitSequence) -> np.ndarray:
        """Map bits to alphabet rows.

        Args:
            bits: Bit sequence

        Returns:
            (N, 2) array of (real, imaginary) symbol values

        Raises:
            BitCountMismatchError: If len(bits) is not a multiple of log2(M)
        """
        if len(bits) % self.bits_per_symbol != 0:
            raise BitCountMismatchError(
                f"{len(bits)} bits is not a multiple of {self.bits_per_symbol} "
                f"for {self.order}-QAM",
                bit_count=len(bits),
                bits_per_symbol=self.bits_per_symbol,
                order=self.order,
            )

        return self.alphabet[bits_to_symbol_indices(bits, self.bits_per_symbol)]

    def modulate(self, bits: BitSequence, symbol_duration: float) -> ModulationResult:
        symbols = self.symbols(bits)
        num_symbols = len(symbols)

        t = self.clock.time_vector(num_symbols, symbol_duration)
        indices = self.clock.symbol_indices(t, symbol_duration, num_symbols)

        real = symbols[indices, 0]
        imag = symbols[indices, 1]
        carrier_phase = 2 * np.pi * self.carrier_frequency * t
        signal = real * np.cos(carrier_phase) + imag * np.sin(carrier_phase)

        return self._build_result(
            t,
            signal,
            num_symbols,
            symbol_duration,
            [],
            carrier_frequency=self.carrier_frequency,
            bits_per_symbol=self.bits_per_symbol,
            symbols=symbols.tolist(),
        )

    def constellation(self) -> np.ndarray:
        return self.alphabet.copy()

    def __repr__(self) -> str:
        return f"QAMModulator(M={self.order}, fc={self.carrier_frequency}Hz)"
