"""
Shared pytest configuration.

Uses a non-interactive matplotlib backend and isolates every test from the
global configuration instance and from config files in the working directory.
"""

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import pytest

from carrier_modulator.config_manager import reset_config


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Run each test in an empty directory with a fresh global config."""
    monkeypatch.chdir(tmp_path)
    reset_config()
    yield
    reset_config()
    plt.close("all")
