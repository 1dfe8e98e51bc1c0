"""
Waveform and constellation rendering for modulation results.

The renderers only consume ModulationResult objects; they never feed back
into waveform generation.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.figure import Figure

from .config_manager import ConfigurationManager
from .models import ModulationResult

logger = logging.getLogger(__name__)

NO_CONSTELLATION_MESSAGE = "No constellation data available."

DEFAULT_STYLE = {
    "line_color": "#007bff",
    "annotation_height": 1.5,
    "annotation_color": "red",
    "annotation_size": 12,
    "marker_color": "red",
    "marker_size": 10,
    "constellation_range": (-2.0, 2.0),
    "figure_width": 14.0,
    "figure_height": 5.0,
    "dpi": 150,
}


def _resolve_style(
    style: Optional[Dict[str, Any]], config_manager: Optional[ConfigurationManager]
) -> Dict[str, Any]:
    resolved = dict(DEFAULT_STYLE)
    if config_manager is not None:
        resolved.update(config_manager.get_rendering_config())
    if style:
        resolved.update(style)
    return resolved


class WaveformRenderer:
    """Line chart of the modulated signal with per-bit labels."""

    def __init__(
        self,
        style: Optional[Dict[str, Any]] = None,
        config_manager: Optional[ConfigurationManager] = None,
    ):
        self.style = _resolve_style(style, config_manager)

    def render(self, result: ModulationResult, ax: Optional[Axes] = None) -> Axes:
        """Draw the waveform of a result.

        Args:
            result: Modulation result to plot
            ax: Axes to draw into (creates a new figure if None)

        Returns:
            The Axes that was drawn into
        """
        if ax is None:
            _, ax = plt.subplots(figsize=(self.style["figure_width"], self.style["figure_height"]))

        ax.plot(
            result.time,
            result.amplitude,
            color=self.style["line_color"],
            label="Modulated Signal",
        )

        for annotation in result.annotations:
            ax.text(
                annotation.position,
                self.style["annotation_height"],
                annotation.label,
                color=self.style["annotation_color"],
                fontsize=self.style["annotation_size"],
                ha="center",
                va="center",
            )

        if result.annotations:
            ax.set_ylim(
                min(-self.style["annotation_height"], ax.get_ylim()[0]),
                self.style["annotation_height"] * 1.2,
            )

        ax.set_title("Modulated Signal")
        ax.set_xlabel("Time (s)")
        ax.set_ylabel("Amplitude")
        ax.grid(True, alpha=0.3)

        return ax


class ConstellationRenderer:
    """Scatter plot of constellation points.

    An empty constellation is shown as a text notice instead of an empty
    plot.
    """

    def __init__(
        self,
        style: Optional[Dict[str, Any]] = None,
        config_manager: Optional[ConfigurationManager] = None,
    ):
        self.style = _resolve_style(style, config_manager)

    def render(self, result: ModulationResult, ax: Optional[Axes] = None) -> Axes:
        """Draw the constellation of a result.

        Args:
            result: Modulation result to plot
            ax: Axes to draw into (creates a new figure if None)

        Returns:
            The Axes that was drawn into
        """
        if ax is None:
            _, ax = plt.subplots(figsize=(self.style["figure_height"], self.style["figure_height"]))

        ax.set_title("Constellation Diagram")

        if not result.has_constellation:
            ax.text(
                0.5,
                0.5,
                NO_CONSTELLATION_MESSAGE,
                color="red",
                ha="center",
                va="center",
                transform=ax.transAxes,
            )
            ax.set_axis_off()
            logger.debug(f"No constellation for {result.scheme.selector}")
            return ax

        ax.scatter(
            result.constellation[:, 0],
            result.constellation[:, 1],
            color=self.style["marker_color"],
            s=self.style["marker_size"] ** 2,
            label="Constellation",
        )

        low, high = self.style["constellation_range"]
        ax.set_xlim(low, high)
        ax.set_ylim(low, high)
        ax.set_xlabel("Real Component")
        ax.set_ylabel("Imaginary Component")
        ax.axhline(0, color="gray", linewidth=0.5)
        ax.axvline(0, color="gray", linewidth=0.5)
        ax.set_aspect("equal")
        ax.grid(True, alpha=0.3)

        return ax


class SignalVisualizer:
    """Draws waveform and constellation side by side."""

    def __init__(
        self,
        style: Optional[Dict[str, Any]] = None,
        config_manager: Optional[ConfigurationManager] = None,
    ):
        self.style = _resolve_style(style, config_manager)
        self.waveform_renderer = WaveformRenderer(self.style)
        self.constellation_renderer = ConstellationRenderer(self.style)

    def plot_result(
        self, result: ModulationResult, save_path: Optional[Union[str, Path]] = None
    ) -> Figure:
        """Plot a modulation result.

        Args:
            result: Modulation result to plot
            save_path: Optional path to save the plot

        Returns:
            Matplotlib Figure object
        """
        fig, (wave_ax, const_ax) = plt.subplots(
            1,
            2,
            figsize=(self.style["figure_width"], self.style["figure_height"]),
            gridspec_kw={"width_ratios": [3, 1]},
        )

        self.waveform_renderer.render(result, wave_ax)
        self.constellation_renderer.render(result, const_ax)

        fig.tight_layout()

        if save_path:
            fig.savefig(save_path, dpi=self.style["dpi"], bbox_inches="tight")
            logger.info(f"Saved plot to {save_path}")

        return fig
