"""
Main interface and high-level API for the carrier modulation generator.

This module provides the ModulationEngine, which validates requests,
dispatches them to the modulator for the selected scheme, and hands results
to the renderers. Each call recomputes its full output from fresh inputs.
"""

import logging
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Sequence, Union

import numpy as np
from matplotlib.figure import Figure

from .ask_modulator import ASKModulator
from .config_manager import ConfigurationManager, get_config
from .error_handling import (
    ErrorHandler,
    ErrorReport,
    InvalidBitStringError,
    InvalidDurationError,
    ModulationError,
    create_error_context,
)
from .fsk_modulator import FSKModulator
from .models import CarrierConfig, ModulationRequest, ModulationResult, ModulationScheme
from .psk_modulator import PSKModulator
from .qam_modulator import QAMModulator
from .time_axis import SampleClock
from .visualization import SignalVisualizer

logger = logging.getLogger(__name__)

BitsInput = Union[str, Sequence[int], np.ndarray]


class ModulationEngine:
    """Main interface for carrier modulation waveform generation.

    The engine owns one modulator per scheme and a dispatch table keyed by
    ModulationScheme. ``generate`` raises ModulationError subclasses on bad
    input; ``process`` returns an ErrorReport instead.
    """

    def __init__(
        self,
        config_file: Optional[str] = None,
        carrier_config: Optional[CarrierConfig] = None,
        create_default_config: bool = False,
    ):
        """Initialize the modulation engine.

        Args:
            config_file: Path to configuration file (uses config.toml if None)
            carrier_config: Carrier configuration object (loads from config if None)
            create_default_config: Create default config file if it doesn't exist

        Raises:
            ConfigurationError: If configuration cannot be loaded
        """
        self._error_handler = ErrorHandler()

        self.config_manager: ConfigurationManager = get_config(config_file, create_default_config)
        self.carrier_config = carrier_config or self.config_manager.create_carrier_config_object()
        self.clock = SampleClock(self.carrier_config.sampling_rate)

        self.ask_modulator = ASKModulator(self.carrier_config)
        self.fsk_modulator = FSKModulator(self.carrier_config)
        self.psk_modulators = {m: PSKModulator(m, self.carrier_config) for m in (2, 4)}
        self.qam_modulators = {m: QAMModulator(m, self.carrier_config) for m in (4, 8)}

        self._dispatch: Dict[ModulationScheme, Callable[[np.ndarray, float], ModulationResult]] = {
            ModulationScheme.ASK: self.ask_modulator.modulate,
            ModulationScheme.PSK2: self.psk_modulators[2].modulate,
            ModulationScheme.FSK: self.fsk_modulator.modulate,
            ModulationScheme.PSK4: self.psk_modulators[4].modulate,
            ModulationScheme.QAM4: self.qam_modulators[4].modulate,
            ModulationScheme.QAM8: self.qam_modulators[8].modulate,
        }

        self._visualizer: Optional[SignalVisualizer] = None
        self._last_result: Optional[ModulationResult] = None

        logger.info(
            f"ModulationEngine initialized: fs={self.carrier_config.sampling_rate}Hz, "
            f"fc={self.carrier_config.carrier_frequency}Hz, "
            f"schemes={', '.join(self.supported_schemes())}"
        )

    @property
    def error_handler(self) -> ErrorHandler:
        return self._error_handler

    @property
    def last_result(self) -> Optional[ModulationResult]:
        return self._last_result

    def generate(self, request: ModulationRequest) -> ModulationResult:
        """Generate waveform, constellation and annotations for a request.

        Args:
            request: Validated modulation request

        Returns:
            ModulationResult for the requested scheme

        Raises:
            InvalidBitStringError: If the request exceeds the configured bit limit
            InvalidDurationError: If the request would exceed the sample limit
            BitCountMismatchError: If bits do not split evenly into QAM symbols
        """
        self._check_limits(request)

        modulate = self._dispatch[request.scheme]
        result = modulate(request.bits, request.symbol_duration)

        self._last_result = result
        logger.info(
            f"Generated {request.scheme.selector}: {result.num_symbols} symbols, "
            f"{result.num_samples} samples"
        )
        return result

    def modulate(
        self,
        bits: BitsInput,
        scheme: Union[str, ModulationScheme],
        symbol_duration: Union[float, str],
    ) -> ModulationResult:
        """Validate raw input and generate the result.

        Args:
            bits: Bit string or sequence of 0/1 integers
            scheme: Scheme selector ("ASK", "PSK", "FSK", "4PSK", "4QAM", "8QAM")
            symbol_duration: Symbol duration Ts in seconds

        Returns:
            ModulationResult

        Raises:
            ModulationError: If any input is invalid
        """
        request = ModulationRequest(bits=bits, scheme=scheme, symbol_duration=symbol_duration)
        return self.generate(request)

    def process(
        self,
        bits: BitsInput,
        scheme: Union[str, ModulationScheme],
        symbol_duration: Union[float, str],
    ) -> Union[ModulationResult, ErrorReport]:
        """Run one request, returning either a result or an error report.

        User-input errors are reported, never raised; the caller may correct
        the input and resubmit.

        Args:
            bits: Bit string or sequence of 0/1 integers
            scheme: Scheme selector
            symbol_duration: Symbol duration Ts in seconds

        Returns:
            ModulationResult on success, ErrorReport on invalid input
        """
        try:
            return self.modulate(bits, scheme, symbol_duration)
        except ModulationError as e:
            context = create_error_context(
                "modulate",
                "ModulationEngine",
                bits=str(bits)[:200],
                scheme=str(scheme),
                symbol_duration=str(symbol_duration),
            )
            return self._error_handler.handle_error(e, context)

    def _check_limits(self, request: ModulationRequest) -> None:
        validation_config = self.config_manager.get_validation_config()

        max_bits = validation_config["max_bits"]
        if not self.config_manager.validate_bit_count_limit(request.num_bits):
            raise InvalidBitStringError(
                f"Bit sequence has {request.num_bits} bits, limit is {max_bits}",
                request.num_bits,
                limit=max_bits,
                user_message=f"Bit sequence exceeds the {max_bits}-bit limit.",
            )

        max_samples = validation_config["max_samples"]
        num_samples = self.clock.num_samples(request.num_symbols, request.symbol_duration)
        if num_samples > max_samples:
            message = f"Request needs {num_samples} samples, limit is {max_samples}"
            raise InvalidDurationError(
                message,
                request.symbol_duration,
                limit=max_samples,
                user_message=f"{message}; use a shorter symbol time or fewer bits.",
            )

    def render(
        self, result: ModulationResult, save_path: Optional[Union[str, Path]] = None
    ) -> Figure:
        """Plot waveform and constellation of a result.

        Args:
            result: Result to plot
            save_path: Optional path to save the figure

        Returns:
            Matplotlib Figure object
        """
        if self._visualizer is None:
            self._visualizer = SignalVisualizer(config_manager=self.config_manager)
        return self._visualizer.plot_result(result, save_path)

    def supported_schemes(self) -> List[str]:
        """Selector strings of all supported schemes."""
        return [scheme.selector for scheme in self._dispatch]

    def get_system_info(self) -> Dict[str, Any]:
        """Get engine configuration and capabilities.

        Returns:
            Dictionary with engine information
        """
        return {
            "sampling_rate": self.carrier_config.sampling_rate,
            "carrier_frequency": self.carrier_config.carrier_frequency,
            "fsk_frequencies": self.carrier_config.fsk_frequencies,
            "schemes": {
                scheme.selector: {
                    "order": scheme.order,
                    "bits_per_symbol": scheme.bits_per_symbol,
                    "has_constellation": scheme.has_constellation,
                }
                for scheme in self._dispatch
            },
            "config_file": self.config_manager.config_file,
            "error_statistics": self._error_handler.get_error_statistics(),
        }

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self._last_result = None

    def __repr__(self) -> str:
        """String representation of ModulationEngine."""
        return (
            f"ModulationEngine(fs={self.carrier_config.sampling_rate}Hz, "
            f"fc={self.carrier_config.carrier_frequency}Hz, "
            f"config='{self.config_manager.config_file}')"
        )


# Convenience functions for quick access
def create_engine(config_file: Optional[str] = None, **kwargs) -> ModulationEngine:
    """Create a ModulationEngine with default settings.

    Args:
        config_file: Path to configuration file
        **kwargs: Additional arguments passed to ModulationEngine

    Returns:
        Initialized ModulationEngine instance
    """
    return ModulationEngine(config_file=config_file, **kwargs)


def quick_modulate(
    bits: BitsInput,
    scheme: Union[str, ModulationScheme] = "ASK",
    symbol_duration: float = 0.01,
    config_file: Optional[str] = None,
) -> ModulationResult:
    """Quickly modulate a bit sequence with default settings.

    Args:
        bits: Bit string or sequence of 0/1 integers
        scheme: Scheme selector
        symbol_duration: Symbol duration Ts in seconds
        config_file: Path to configuration file

    Returns:
        ModulationResult
    """
    with create_engine(config_file) as engine:
        return engine.modulate(bits, scheme, symbol_duration)
