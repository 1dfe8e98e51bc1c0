"""
Command-line front end for the carrier modulation generator.

Run with: carrier-modulator --bits 1011 --scheme 4QAM --symbol-duration 0.001
"""

import argparse
import logging
import sys
from typing import List, Optional

import matplotlib.pyplot as plt

from .config_manager import ConfigurationError, get_config
from .error_handling import ErrorReport
from .main import ModulationEngine
from .models import ModulationScheme

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_CONFIG_ERROR = 1
EXIT_INPUT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="carrier-modulator",
        description="Generate ASK, PSK, FSK and QAM carrier waveforms from a bit sequence",
    )
    parser.add_argument("--bits", "-b", help="Bit sequence, e.g. 10110")
    parser.add_argument(
        "--scheme",
        "-s",
        help="Modulation scheme: " + ", ".join(s.selector for s in ModulationScheme),
    )
    parser.add_argument(
        "--symbol-duration", "-t", help="Symbol duration in seconds (default from config)"
    )
    parser.add_argument("--config", "-c", help="Path to TOML configuration file")
    parser.add_argument("--output", "-o", help="Save waveform and constellation plot to this file")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override logging level from config",
    )
    parser.add_argument(
        "--list-schemes", action="store_true", help="List supported schemes and exit"
    )
    return parser


def _print_error(report: ErrorReport) -> None:
    print(f"Error: {report.user_message}", file=sys.stderr)
    for suggestion in report.suggestions:
        print(f"  - {suggestion}", file=sys.stderr)


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point.

    Returns:
        Process exit status
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config_manager = get_config(args.config, create_default=False)
        engine = ModulationEngine(config_file=args.config)
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    level = args.log_level or config_manager.get_logging_config()["level"]
    logging.basicConfig(
        level=getattr(logging, level), format="%(levelname)s %(name)s: %(message)s"
    )

    if args.list_schemes:
        for scheme in ModulationScheme:
            print(
                f"{scheme.selector:6s} M={scheme.order} bits/symbol={scheme.bits_per_symbol}"
            )
        return EXIT_OK

    if args.bits is None:
        parser.error("--bits is required")

    defaults = config_manager.get_defaults_config()
    scheme = args.scheme or defaults["scheme"]
    symbol_duration = (
        args.symbol_duration if args.symbol_duration is not None else defaults["symbol_duration"]
    )

    outcome = engine.process(args.bits, scheme, symbol_duration)

    if isinstance(outcome, ErrorReport):
        _print_error(outcome)
        return EXIT_INPUT_ERROR

    summary = outcome.summary()
    print(f"Scheme:             {summary['scheme']}")
    print(f"Symbols:            {summary['num_symbols']}")
    print(f"Samples:            {summary['num_samples']}")
    print(f"Symbol duration:    {summary['symbol_duration']} s")
    print(f"Constellation size: {summary['constellation_size']}")

    if args.output:
        fig = engine.render(outcome, save_path=args.output)
        plt.close(fig)
        print(f"Plot saved to {args.output}")

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
