#!/usr/bin/env python3
"""
Quick start demonstration of the Carrier Modulator.

This example shows the simplest way to get started with the system:
modulating a bit sequence with each supported scheme and saving a plot.

Run with: python examples/quick_start_demo.py
"""

from carrier_modulator import ErrorReport, ModulationEngine, quick_modulate


def quick_start_example():
    """Demonstrate the quickest way to use the system."""
    print("🚀 Carrier Modulator - Quick Start")
    print("=" * 50)

    # Method 1: Use the convenience function (simplest)
    print("\n1️⃣ Using quick_modulate:")

    result = quick_modulate("101", "ASK", 0.01)
    print(f"✓ ASK: {result.num_symbols} symbols, {result.num_samples} samples")

    # Method 2: Use main interface (more control)
    print("\n2️⃣ Using ModulationEngine:")

    with ModulationEngine() as engine:
        for scheme in engine.supported_schemes():
            bits = "011011" if scheme in ("4QAM", "8QAM") else "0110"
            result = engine.modulate(bits, scheme, 0.005)
            print(
                f"✓ {scheme:5s} {result.num_samples:4d} samples, "
                f"{len(result.constellation)} constellation points"
            )

        # Invalid input is reported, not raised
        report = engine.process("10110", "4QAM", 0.01)
        if isinstance(report, ErrorReport):
            print(f"\n✗ {report.user_message}")
            for suggestion in report.suggestions:
                print(f"  → {suggestion}")

        fig_path = "quick_start_8qam.png"
        engine.render(engine.modulate("000011101111", "8QAM", 0.002), save_path=fig_path)
        print(f"\n✓ Plot saved to {fig_path}")

    print("\n✅ Quick start completed!")
    print("\nNext steps:")
    print("• Run carrier-modulator --help for the command-line interface")
    print("• Modify config.toml to customize carrier and rendering parameters")


if __name__ == "__main__":
    quick_start_example()
