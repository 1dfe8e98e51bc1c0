"""
Input validation for carrier modulation requests and configuration.

This module validates raw user input (bit strings, symbol durations, bit
counts for grouped schemes) as well as the internal configuration and result
objects.
"""

import math
import re
from typing import TYPE_CHECKING, Any, Optional, Sequence, Union

import numpy as np

from .error_handling import BitCountMismatchError, InvalidBitStringError, InvalidDurationError

if TYPE_CHECKING:
    from .models import BitSequence, CarrierConfig, ModulationResult, ModulationScheme


_BIT_STRING_PATTERN = re.compile(r"^[01]+$")


class ValidationError(Exception):
    """Custom exception for configuration and result validation errors."""

    pass


class InputValidator:
    """Validator for raw user input."""

    @classmethod
    def validate_bit_string(
        cls, raw: Union[str, Sequence[int], np.ndarray], max_bits: Optional[int] = None
    ) -> "BitSequence":
        """Validate raw bit input and convert it to a BitSequence.

        Args:
            raw: Bit string such as "0110", or a sequence of 0/1 integers
            max_bits: Optional upper bound on the number of bits

        Returns:
            Read-only uint8 array of 0/1 values

        Raises:
            InvalidBitStringError: If the input is empty or not binary
        """
        if isinstance(raw, str):
            text = raw.strip()
            if not _BIT_STRING_PATTERN.match(text):
                raise InvalidBitStringError(
                    f"Bit string must contain only '0' and '1', got {raw!r}", raw
                )
            bits = np.frombuffer(text.encode("ascii"), dtype=np.uint8) - ord("0")
        elif isinstance(raw, (list, tuple, np.ndarray)):
            values = np.asarray(raw)
            if values.ndim != 1 or values.size == 0:
                raise InvalidBitStringError("Bit sequence must be a non-empty 1-D sequence", raw)
            if values.dtype == bool or not np.issubdtype(values.dtype, np.number):
                raise InvalidBitStringError("Bit sequence must contain integers 0 and 1", raw)
            if not np.all((values == 0) | (values == 1)):
                raise InvalidBitStringError("Bit sequence must contain only 0 and 1", raw)
            bits = values.astype(np.uint8)
        else:
            raise InvalidBitStringError(
                f"Bits must be a string or a sequence, got {type(raw).__name__}", raw
            )

        if max_bits is not None and len(bits) > max_bits:
            raise InvalidBitStringError(
                f"Bit sequence has {len(bits)} bits, limit is {max_bits}",
                raw,
                limit=max_bits,
                user_message=f"Bit sequence exceeds the {max_bits}-bit limit.",
            )

        bits = bits.copy()
        bits.setflags(write=False)
        return bits

    @classmethod
    def validate_symbol_duration(cls, raw: Any) -> float:
        """Validate a symbol duration in seconds.

        Args:
            raw: Number or numeric string

        Returns:
            Positive finite duration as float

        Raises:
            InvalidDurationError: If the value is not a positive finite number
        """
        if isinstance(raw, bool):
            raise InvalidDurationError("Symbol duration must be a number, got bool", raw)

        try:
            value = float(raw.strip() if isinstance(raw, str) else raw)
        except (TypeError, ValueError):
            raise InvalidDurationError(f"Symbol duration must be a number, got {raw!r}", raw)

        if not math.isfinite(value):
            raise InvalidDurationError(f"Symbol duration must be finite, got {value}", raw)
        if value <= 0:
            raise InvalidDurationError(f"Symbol duration must be positive, got {value}", raw)

        return value

    @classmethod
    def validate_bit_count(cls, bits: "BitSequence", scheme: "ModulationScheme") -> None:
        """Validate that the bit count splits evenly into symbols.

        Args:
            bits: Validated bit sequence
            scheme: Target modulation scheme

        Raises:
            BitCountMismatchError: If len(bits) is not a multiple of bits per symbol
        """
        bits_per_symbol = scheme.bits_per_symbol
        if len(bits) % bits_per_symbol != 0:
            raise BitCountMismatchError(
                f"{len(bits)} bits is not a multiple of {bits_per_symbol} "
                f"for {scheme.order}-QAM",
                bit_count=len(bits),
                bits_per_symbol=bits_per_symbol,
                order=scheme.order,
            )


class ConfigValidator:
    """Validator class for configuration and result objects."""

    MIN_SAMPLING_RATE = 1.0  # Hz
    MAX_SAMPLING_RATE = 1e9  # Hz

    @classmethod
    def validate_carrier_config(cls, config: "CarrierConfig") -> None:
        """Validate carrier configuration parameters.

        Args:
            config: CarrierConfig instance to validate

        Raises:
            ValidationError: If any parameter is invalid
        """
        if isinstance(config.sampling_rate, bool) or not isinstance(
            config.sampling_rate, (int, float)
        ):
            raise ValidationError("sampling_rate must be a number")
        if config.sampling_rate < cls.MIN_SAMPLING_RATE:
            raise ValidationError(f"sampling_rate must be >= {cls.MIN_SAMPLING_RATE}")
        if config.sampling_rate > cls.MAX_SAMPLING_RATE:
            raise ValidationError(f"sampling_rate must be <= {cls.MAX_SAMPLING_RATE}")

        if len(config.fsk_frequencies) != 2:
            raise ValidationError("fsk_frequencies must contain exactly two frequencies")

        nyquist = config.sampling_rate / 2
        named = [("carrier_frequency", config.carrier_frequency)] + [
            (f"fsk_frequencies[{i}]", f) for i, f in enumerate(config.fsk_frequencies)
        ]
        for name, frequency in named:
            if isinstance(frequency, bool) or not isinstance(frequency, (int, float)):
                raise ValidationError(f"{name} must be a number")
            if frequency <= 0:
                raise ValidationError(f"{name} must be positive")
            if frequency > nyquist:
                raise ValidationError(
                    f"{name} ({frequency:.0f} Hz) exceeds Nyquist limit ({nyquist:.0f} Hz)"
                )

        if config.fsk_frequencies[0] == config.fsk_frequencies[1]:
            raise ValidationError("fsk_frequencies must be distinct")

    @classmethod
    def validate_result(cls, result: "ModulationResult") -> None:
        """Validate modulation result arrays.

        Args:
            result: ModulationResult instance to validate

        Raises:
            ValidationError: If any array is malformed
        """
        if not isinstance(result.time, np.ndarray) or result.time.ndim != 1:
            raise ValidationError("time must be a 1-dimensional numpy array")
        if not isinstance(result.amplitude, np.ndarray) or result.amplitude.ndim != 1:
            raise ValidationError("amplitude must be a 1-dimensional numpy array")
        if result.time.shape != result.amplitude.shape:
            raise ValidationError(
                f"time ({result.time.shape}) and amplitude ({result.amplitude.shape}) "
                f"must have the same shape"
            )

        if not isinstance(result.constellation, np.ndarray):
            raise ValidationError("constellation must be a numpy array")
        if result.constellation.ndim != 2 or result.constellation.shape[1] != 2:
            raise ValidationError("constellation must have shape (M, 2)")

        if not isinstance(result.annotations, list):
            raise ValidationError("annotations must be a list")
        if result.num_symbols < 0:
            raise ValidationError("num_symbols must be non-negative")
        if result.symbol_duration <= 0:
            raise ValidationError("symbol_duration must be positive")
        if not isinstance(result.metadata, dict):
            raise ValidationError("metadata must be a dictionary")
