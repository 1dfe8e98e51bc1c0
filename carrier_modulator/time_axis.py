"""
Shared sampling clock for all modulation schemes.

Every modulator samples its carrier on the same time axis: instants
``t_i = i / fs`` for ``i`` in ``[0, floor(N * fs * Ts))``.
"""

import logging
import math
from typing import Iterator

import numpy as np

logger = logging.getLogger(__name__)


class SampleClock:
    """Uniform sample clock at a fixed sampling frequency."""

    def __init__(self, sampling_rate: float = 10000.0):
        """Initialize sample clock.

        Args:
            sampling_rate: Sampling frequency in Hz
        """
        if sampling_rate <= 0:
            raise ValueError(f"sampling_rate must be positive, got {sampling_rate}")
        self.sampling_rate = float(sampling_rate)

    @property
    def sample_period(self) -> float:
        return 1.0 / self.sampling_rate

    def num_samples(self, num_symbols: int, symbol_duration: float) -> int:
        """Total sample count for ``num_symbols`` symbols.

        A fractional ``N * fs * Ts`` is truncated.
        """
        return math.floor(num_symbols * self.sampling_rate * symbol_duration)

    def samples_per_symbol(self, symbol_duration: float) -> int:
        return math.floor(self.sampling_rate * symbol_duration)

    def iter_instants(self, num_symbols: int, symbol_duration: float) -> Iterator[float]:
        """Lazily yield sample instants.

        Each call returns a fresh generator over the same instants.
        """
        for i in range(self.num_samples(num_symbols, symbol_duration)):
            yield i / self.sampling_rate

    def time_vector(self, num_symbols: int, symbol_duration: float) -> np.ndarray:
        """Sample instants as an array."""
        num_samples = self.num_samples(num_symbols, symbol_duration)
        if num_symbols > 0 and num_samples == 0:
            logger.warning(
                f"Symbol duration {symbol_duration}s is shorter than one sample period "
                f"({self.sample_period}s), waveform is empty"
            )

        time_vector = np.arange(num_samples) / self.sampling_rate

        logger.debug(f"Time vector setup: {num_samples} samples, dt={self.sample_period:.2e}s")
        return time_vector

    def symbol_indices(
        self, time: np.ndarray, symbol_duration: float, num_symbols: int, wrap: bool = False
    ) -> np.ndarray:
        """Index of the active symbol at each instant, ``floor(t / Ts)``.

        Args:
            time: Sample instants
            symbol_duration: Symbol duration Ts in seconds
            num_symbols: Number of symbols in the sequence
            wrap: Take indices modulo ``num_symbols`` instead of clipping

        Returns:
            Integer index array, same length as ``time``
        """
        indices = np.floor(time / symbol_duration).astype(np.int64)
        if wrap:
            return indices % num_symbols
        return np.minimum(indices, num_symbols - 1)

    def __repr__(self) -> str:
        return f"SampleClock(sampling_rate={self.sampling_rate}Hz)"
