"""
Configuration management using Dynaconf for centralized parameter handling.

This module provides a centralized configuration system that loads carrier,
rendering and validation parameters from TOML files, with environment
variable overrides (prefix ``CARRIER_``) and default value management.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional

from dynaconf import Dynaconf

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = """# Carrier Modulator Configuration
# Parameters for waveform generation, rendering and input limits

[carrier]
sampling_rate = 10000.0  # Hz
carrier_frequency = 2000.0  # Hz (ASK, PSK, QAM)
fsk_frequencies = [2000.0, 4000.0]  # Hz (bit 0, bit 1)

[rendering]
line_color = "#007bff"
annotation_height = 1.5
annotation_color = "red"
annotation_size = 12
marker_color = "red"
marker_size = 10
constellation_range = [-2.0, 2.0]
figure_width = 14.0
figure_height = 5.0
dpi = 150

[validation]
max_bits = 4096
max_samples = 5000000

[logging]
level = "INFO"  # DEBUG, INFO, WARNING, ERROR, CRITICAL

[defaults]
scheme = "ASK"
symbol_duration = 0.01  # seconds
"""

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigurationError(Exception):
    """Exception raised for configuration-related errors."""

    pass


class ConfigurationManager:
    """Centralized configuration manager using Dynaconf.

    Values missing from the TOML file fall back to the built-in defaults,
    so an absent file yields the standard 10 kHz / 2 kHz setup.
    """

    def __init__(self, config_file: Optional[str] = None, create_default: bool = True):
        """Initialize configuration manager.

        Args:
            config_file: Path to configuration file (defaults to config.toml)
            create_default: Whether to create default config if file doesn't exist
        """
        self.config_file = str(config_file or "config.toml")
        self.config_path = Path(self.config_file)

        if not self.config_path.exists() and create_default:
            self._create_default_config()

        try:
            self.settings = Dynaconf(
                settings_files=[self.config_file],
                load_dotenv=True,
                envvar_prefix="CARRIER",
            )
        except Exception as e:
            raise ConfigurationError(f"Failed to load configuration: {e}")

        self._validate_configuration()

        logger.info(f"Configuration loaded from {self.config_file}")

    def _create_default_config(self) -> None:
        """Create a default configuration file."""
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.config_path, "w") as f:
            f.write(DEFAULT_CONFIG)

        logger.info(f"Created default configuration file: {self.config_file}")

    def _validate_configuration(self) -> None:
        """Validate configuration parameters."""
        errors = []

        try:
            carrier = self.get_carrier_config()

            if carrier["sampling_rate"] <= 0:
                errors.append("carrier.sampling_rate must be positive")

            if carrier["carrier_frequency"] <= 0:
                errors.append("carrier.carrier_frequency must be positive")

            if len(carrier["fsk_frequencies"]) != 2:
                errors.append("carrier.fsk_frequencies must contain two frequencies")
            elif carrier["fsk_frequencies"][0] == carrier["fsk_frequencies"][1]:
                errors.append("carrier.fsk_frequencies must be distinct")

            for frequency in carrier["fsk_frequencies"]:
                if frequency <= 0:
                    errors.append("carrier.fsk_frequencies must be positive")
                    break

            nyquist = carrier["sampling_rate"] / 2
            for frequency in [carrier["carrier_frequency"], *carrier["fsk_frequencies"]]:
                if frequency > nyquist:
                    errors.append(
                        f"Carrier frequency {frequency} violates Nyquist criterion for "
                        f"sampling rate {carrier['sampling_rate']}"
                    )

        except Exception as e:
            errors.append(f"Error validating carrier configuration: {e}")

        if not errors:
            try:
                self.create_carrier_config_object()
            except ConfigurationError as e:
                errors.append(str(e))

        try:
            rendering = self.get_rendering_config()

            low, high = rendering["constellation_range"]
            if low >= high:
                errors.append("rendering.constellation_range must be increasing")

            if rendering["dpi"] <= 0:
                errors.append("rendering.dpi must be positive")

        except Exception as e:
            errors.append(f"Error validating rendering configuration: {e}")

        try:
            validation = self.get_validation_config()

            if validation["max_bits"] <= 0:
                errors.append("validation.max_bits must be positive")

            if validation["max_samples"] <= 0:
                errors.append("validation.max_samples must be positive")

        except Exception as e:
            errors.append(f"Error validating validation configuration: {e}")

        level = self.get_logging_config()["level"]
        if level not in VALID_LOG_LEVELS:
            errors.append(f"logging.level must be one of {', '.join(VALID_LOG_LEVELS)}")

        if errors:
            error_msg = "Configuration validation failed:\n" + "\n".join(
                f"  - {error}" for error in errors
            )
            raise ConfigurationError(error_msg)

    def get_carrier_config(self) -> Dict[str, Any]:
        """Get carrier configuration parameters.

        Returns:
            Dictionary with carrier configuration
        """
        return {
            "sampling_rate": float(self.settings.get("carrier.sampling_rate", 10000.0)),
            "carrier_frequency": float(self.settings.get("carrier.carrier_frequency", 2000.0)),
            "fsk_frequencies": tuple(
                float(f) for f in self.settings.get("carrier.fsk_frequencies", [2000.0, 4000.0])
            ),
        }

    def get_rendering_config(self) -> Dict[str, Any]:
        """Get rendering configuration parameters.

        Returns:
            Dictionary with rendering configuration
        """
        return {
            "line_color": str(self.settings.get("rendering.line_color", "#007bff")),
            "annotation_height": float(self.settings.get("rendering.annotation_height", 1.5)),
            "annotation_color": str(self.settings.get("rendering.annotation_color", "red")),
            "annotation_size": int(self.settings.get("rendering.annotation_size", 12)),
            "marker_color": str(self.settings.get("rendering.marker_color", "red")),
            "marker_size": int(self.settings.get("rendering.marker_size", 10)),
            "constellation_range": tuple(
                float(v) for v in self.settings.get("rendering.constellation_range", [-2.0, 2.0])
            ),
            "figure_width": float(self.settings.get("rendering.figure_width", 14.0)),
            "figure_height": float(self.settings.get("rendering.figure_height", 5.0)),
            "dpi": int(self.settings.get("rendering.dpi", 150)),
        }

    def get_validation_config(self) -> Dict[str, Any]:
        """Get validation configuration parameters.

        Returns:
            Dictionary with validation configuration
        """
        return {
            "max_bits": int(self.settings.get("validation.max_bits", 4096)),
            "max_samples": int(self.settings.get("validation.max_samples", 5000000)),
        }

    def get_logging_config(self) -> Dict[str, Any]:
        """Get logging configuration parameters.

        Returns:
            Dictionary with logging configuration
        """
        return {
            "level": str(self.settings.get("logging.level", "INFO")).upper(),
        }

    def get_defaults_config(self) -> Dict[str, Any]:
        """Get default values configuration.

        Returns:
            Dictionary with default values
        """
        return {
            "scheme": str(self.settings.get("defaults.scheme", "ASK")),
            "symbol_duration": float(self.settings.get("defaults.symbol_duration", 0.01)),
        }

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value by key.

        Args:
            key: Configuration key (supports dot notation, e.g., 'carrier.sampling_rate')
            default: Default value if key is not found

        Returns:
            Configuration value
        """
        return self.settings.get(key, default)

    def set(self, key: str, value: Any) -> None:
        """Set a configuration value.

        Args:
            key: Configuration key (supports dot notation)
            value: Value to set
        """
        self.settings.set(key, value)

    def reload(self) -> None:
        """Reload configuration from file."""
        try:
            self.settings.reload()
        except Exception as e:
            raise ConfigurationError(f"Failed to reload configuration: {e}")

        self._validate_configuration()
        logger.info("Configuration reloaded successfully")

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary.

        Returns:
            Dictionary representation of configuration
        """
        return {
            "carrier": self.get_carrier_config(),
            "rendering": self.get_rendering_config(),
            "validation": self.get_validation_config(),
            "logging": self.get_logging_config(),
            "defaults": self.get_defaults_config(),
        }

    def create_carrier_config_object(self):
        """Create CarrierConfig object from configuration.

        Returns:
            CarrierConfig instance

        Raises:
            ConfigurationError: If the carrier values are rejected by CarrierConfig
        """
        from .models import CarrierConfig
        from .validation import ValidationError

        try:
            return CarrierConfig(**self.get_carrier_config())
        except ValidationError as e:
            raise ConfigurationError(f"Invalid carrier configuration: {e}")

    def validate_bit_count_limit(self, num_bits: int) -> bool:
        """Check a bit count against the configured limit.

        Args:
            num_bits: Number of bits in a request

        Returns:
            True if within limit, False otherwise
        """
        return 0 < num_bits <= self.get_validation_config()["max_bits"]

    def __repr__(self) -> str:
        """String representation of ConfigurationManager."""
        return f"ConfigurationManager(config_file='{self.config_file}')"


# Global configuration instance
_global_config: Optional[ConfigurationManager] = None


def get_config(
    config_file: Optional[str] = None, create_default: bool = True
) -> ConfigurationManager:
    """Get global configuration instance.

    Args:
        config_file: Path to configuration file
        create_default: Whether to create default config if file doesn't exist

    Returns:
        ConfigurationManager instance
    """
    global _global_config

    if _global_config is None or config_file is not None:
        _global_config = ConfigurationManager(config_file, create_default)

    return _global_config


def reload_config() -> None:
    """Reload global configuration."""
    global _global_config

    if _global_config is not None:
        _global_config.reload()


def reset_config() -> None:
    """Reset global configuration (force reload on next access)."""
    global _global_config
    _global_config = None
