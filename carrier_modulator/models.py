"""
Core data models for carrier modulation waveform generation.

This module defines the scheme enumeration, the carrier configuration, and
the request/result containers passed between the input layer, the
modulators and the renderers.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List, Optional, Tuple, Union

import numpy as np

# Read-only uint8 array of 0/1 values
BitSequence = np.ndarray


class ModulationScheme(Enum):
    """Supported modulation schemes, keyed by their UI selector string."""

    ASK = "ASK"
    PSK2 = "PSK"
    FSK = "FSK"
    PSK4 = "4PSK"
    QAM4 = "4QAM"
    QAM8 = "8QAM"

    @classmethod
    def from_selector(cls, selector: Union[str, "ModulationScheme"]) -> "ModulationScheme":
        """Resolve a selector string or enum member to a scheme.

        Accepts the UI selector ("4QAM") or the member name ("QAM4"),
        case-insensitively.

        Raises:
            UnsupportedSchemeError: If the selector matches no scheme
        """
        if isinstance(selector, cls):
            return selector

        if isinstance(selector, str):
            key = selector.strip().upper()
            for scheme in cls:
                if key in (scheme.value, scheme.name):
                    return scheme

        from .error_handling import UnsupportedSchemeError

        raise UnsupportedSchemeError(f"Unsupported modulation type: {selector!r}", selector)

    @property
    def selector(self) -> str:
        return self.value

    @property
    def order(self) -> int:
        """Alphabet size M."""
        return _SCHEME_ORDERS[self]

    @property
    def bits_per_symbol(self) -> int:
        """Bits consumed per transmitted symbol.

        Only QAM groups bits. 4-PSK selects a phase from every single bit.
        """
        if self in (ModulationScheme.QAM4, ModulationScheme.QAM8):
            return int(np.log2(self.order))
        return 1

    @property
    def has_constellation(self) -> bool:
        return self not in (ModulationScheme.ASK, ModulationScheme.FSK)


_SCHEME_ORDERS = {
    ModulationScheme.ASK: 2,
    ModulationScheme.PSK2: 2,
    ModulationScheme.FSK: 2,
    ModulationScheme.PSK4: 4,
    ModulationScheme.QAM4: 4,
    ModulationScheme.QAM8: 8,
}


@dataclass
class CarrierConfig:
    """Carrier and sampling parameters shared by all modulators.

    Attributes:
        sampling_rate: Sampling frequency in Hz
        carrier_frequency: Carrier frequency for ASK, PSK and QAM in Hz
        fsk_frequencies: (bit 0, bit 1) carrier frequencies for FSK in Hz
    """

    sampling_rate: float = 10000.0
    carrier_frequency: float = 2000.0
    fsk_frequencies: Tuple[float, float] = (2000.0, 4000.0)

    def __post_init__(self):
        """Validate configuration parameters after initialization."""
        from .validation import ConfigValidator

        self.fsk_frequencies = tuple(self.fsk_frequencies)
        ConfigValidator.validate_carrier_config(self)


@dataclass(frozen=True)
class SymbolAnnotation:
    """Display label placed at the center of a symbol interval."""

    position: float
    label: str


@dataclass
class ModulationRequest:
    """A single generation request.

    Raw inputs are normalized in place: ``bits`` becomes a read-only
    BitSequence, ``scheme`` a ModulationScheme and ``symbol_duration`` a
    float.

    Attributes:
        bits: Bit string ("0101") or sequence of 0/1 integers
        scheme: Scheme selector string or ModulationScheme
        symbol_duration: Symbol duration Ts in seconds
    """

    bits: Union[str, BitSequence, List[int]]
    scheme: Union[str, ModulationScheme]
    symbol_duration: Union[float, str]

    def __post_init__(self):
        from .validation import InputValidator

        self.bits = InputValidator.validate_bit_string(self.bits)
        self.symbol_duration = InputValidator.validate_symbol_duration(self.symbol_duration)
        self.scheme = ModulationScheme.from_selector(self.scheme)
        InputValidator.validate_bit_count(self.bits, self.scheme)

    @property
    def num_bits(self) -> int:
        return len(self.bits)

    @property
    def num_symbols(self) -> int:
        return self.num_bits // self.scheme.bits_per_symbol


@dataclass
class ModulationResult:
    """Output of one modulation run.

    Attributes:
        scheme: Scheme that produced the result
        time: Sample instants in seconds, spaced 1/fs apart
        amplitude: Modulated carrier sample at each instant
        constellation: Constellation points as an (M, 2) array of (real, imaginary)
        annotations: Per-bit display labels (empty for QAM)
        symbol_duration: Symbol duration Ts in seconds
        num_symbols: Number of transmitted symbols
        sampling_rate: Sampling frequency in Hz
        generation_timestamp: When the result was generated
        metadata: Additional information about the run
    """

    scheme: ModulationScheme
    time: np.ndarray
    amplitude: np.ndarray
    constellation: np.ndarray
    annotations: List[SymbolAnnotation]
    symbol_duration: float
    num_symbols: int
    sampling_rate: float
    generation_timestamp: datetime = field(default_factory=datetime.now)
    metadata: dict = field(default_factory=dict)

    def __post_init__(self):
        """Validate result arrays after initialization."""
        from .validation import ConfigValidator

        ConfigValidator.validate_result(self)

    @classmethod
    def empty(
        cls, scheme: ModulationScheme, symbol_duration: float, sampling_rate: float
    ) -> "ModulationResult":
        """Create a result with no samples, points or annotations."""
        return cls(
            scheme=scheme,
            time=np.zeros(0),
            amplitude=np.zeros(0),
            constellation=np.zeros((0, 2)),
            annotations=[],
            symbol_duration=symbol_duration,
            num_symbols=0,
            sampling_rate=sampling_rate,
        )

    @property
    def waveform(self) -> np.ndarray:
        """Waveform as an (n, 2) array of (time, amplitude) rows."""
        return np.column_stack((self.time, self.amplitude))

    @property
    def num_samples(self) -> int:
        return len(self.time)

    @property
    def samples_per_symbol(self) -> int:
        """Whole samples per symbol, truncated."""
        return int(np.floor(self.sampling_rate * self.symbol_duration))

    @property
    def constellation_points(self) -> List[Tuple[float, float]]:
        return [(float(re), float(im)) for re, im in self.constellation]

    @property
    def has_constellation(self) -> bool:
        return len(self.constellation) > 0

    def get_symbol_samples(self, index: int) -> np.ndarray:
        """Get the amplitude samples belonging to one symbol interval.

        Args:
            index: Symbol index (0-based)

        Returns:
            Amplitude samples whose instant falls inside the interval

        Raises:
            IndexError: If index is out of range
        """
        if index < 0 or index >= self.num_symbols:
            raise IndexError(f"Symbol index {index} out of range [0, {self.num_symbols - 1}]")
        symbol_index = np.floor(self.time / self.symbol_duration).astype(int)
        return self.amplitude[symbol_index == index]

    def summary(self) -> dict:
        """Short description of the result for logs and CLI output."""
        return {
            "scheme": self.scheme.selector,
            "num_symbols": self.num_symbols,
            "num_samples": self.num_samples,
            "symbol_duration": self.symbol_duration,
            "constellation_size": len(self.constellation),
            "num_annotations": len(self.annotations),
        }


def bits_to_string(bits: Optional[BitSequence]) -> str:
    """Render a BitSequence as a '0'/'1' string."""
    if bits is None:
        return ""
    return "".join(str(int(b)) for b in bits)
