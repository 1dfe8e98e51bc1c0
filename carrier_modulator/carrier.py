"""
Common machinery for carrier modulators.

Each modulator is stateless between calls: it samples its carrier on the
shared SampleClock and packages the samples, constellation and annotations
into a ModulationResult.
"""

import logging
from typing import List, Optional

import numpy as np

from .models import BitSequence, CarrierConfig, ModulationResult, ModulationScheme, SymbolAnnotation
from .time_axis import SampleClock

logger = logging.getLogger(__name__)


class CarrierModulator:
    """Base class for single-carrier modulators."""

    scheme: ModulationScheme

    def __init__(self, carrier_config: Optional[CarrierConfig] = None):
        """Initialize modulator.

        Args:
            carrier_config: Carrier parameters (defaults to 10 kHz / 2 kHz)
        """
        self.carrier_config = carrier_config or CarrierConfig()
        self.clock = SampleClock(self.carrier_config.sampling_rate)

    @property
    def carrier_frequency(self) -> float:
        return self.carrier_config.carrier_frequency

    def modulate(self, bits: BitSequence, symbol_duration: float) -> ModulationResult:
        """Generate the modulated waveform for a bit sequence.

        Args:
            bits: Validated bit sequence
            symbol_duration: Symbol duration Ts in seconds

        Returns:
            ModulationResult with waveform, constellation and annotations
        """
        raise NotImplementedError

    def constellation(self) -> np.ndarray:
        """Constellation points as an (M, 2) array; empty for ASK/FSK."""
        return np.zeros((0, 2))

    def _bit_annotations(self, bits: BitSequence, symbol_duration: float) -> List[SymbolAnnotation]:
        """One label per bit, centered in its symbol interval."""
        return [
            SymbolAnnotation(
                position=i * symbol_duration + symbol_duration / 2, label=str(int(bit))
            )
            for i, bit in enumerate(bits)
        ]

    def _build_result(
        self,
        time: np.ndarray,
        amplitude: np.ndarray,
        num_symbols: int,
        symbol_duration: float,
        annotations: List[SymbolAnnotation],
        **metadata,
    ) -> ModulationResult:
        result = ModulationResult(
            scheme=self.scheme,
            time=time,
            amplitude=amplitude,
            constellation=self.constellation(),
            annotations=annotations,
            symbol_duration=symbol_duration,
            num_symbols=num_symbols,
            sampling_rate=self.clock.sampling_rate,
            metadata=metadata,
        )

        logger.debug(
            f"Generated {self.scheme.selector} waveform: {num_symbols} symbols, "
            f"{result.num_samples} samples, Ts={symbol_duration}s"
        )
        return result

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(fc={self.carrier_frequency}Hz, "
            f"fs={self.clock.sampling_rate}Hz)"
        )
