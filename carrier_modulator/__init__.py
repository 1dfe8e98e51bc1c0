"""
Carrier Modulation Waveform Generator Package

Generates ASK, BPSK, FSK, 4-PSK, 4-QAM and 8-QAM carrier waveforms from a
bit sequence and symbol duration, together with constellation points and
per-bit labels for display.
"""

from .ask_modulator import ASKModulator
from .config_manager import ConfigurationError, ConfigurationManager, get_config
from .constellations import QAM4_ALPHABET, QAM8_ALPHABET, psk_constellation
from .error_handling import (
    BitCountMismatchError,
    ErrorHandler,
    ErrorReport,
    InvalidBitStringError,
    InvalidDurationError,
    ModulationError,
    UnsupportedSchemeError,
)
from .fsk_modulator import FSKModulator
from .main import ModulationEngine, create_engine, quick_modulate
from .models import (
    CarrierConfig,
    ModulationRequest,
    ModulationResult,
    ModulationScheme,
    SymbolAnnotation,
)
from .psk_modulator import PSKModulator
from .qam_modulator import QAMModulator
from .time_axis import SampleClock
from .validation import ConfigValidator, InputValidator, ValidationError
from .visualization import ConstellationRenderer, SignalVisualizer, WaveformRenderer

__version__ = "0.1.0"
__all__ = [
    # Core data models
    "CarrierConfig",
    "ModulationRequest",
    "ModulationResult",
    "ModulationScheme",
    "SymbolAnnotation",
    # Validation and configuration
    "InputValidator",
    "ConfigValidator",
    "ValidationError",
    "ConfigurationManager",
    "ConfigurationError",
    "get_config",
    # Errors
    "ModulationError",
    "InvalidBitStringError",
    "InvalidDurationError",
    "UnsupportedSchemeError",
    "BitCountMismatchError",
    "ErrorHandler",
    "ErrorReport",
    # Signal generation components
    "SampleClock",
    "ASKModulator",
    "PSKModulator",
    "FSKModulator",
    "QAMModulator",
    "QAM4_ALPHABET",
    "QAM8_ALPHABET",
    "psk_constellation",
    # Rendering
    "WaveformRenderer",
    "ConstellationRenderer",
    "SignalVisualizer",
    # Main interface (primary API)
    "ModulationEngine",
    "create_engine",
    "quick_modulate",
]
