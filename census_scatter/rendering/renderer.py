# census_scatter/rendering/renderer.py
"""
Scatter chart rendering with matplotlib.

The plot-area axes use pixel data coordinates: x runs 0..plot_width and y
runs plot_height..0 (downward), so every position produced by the scales is
drawn as-is and circle radii stay round.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.axes import Axes
from matplotlib.figure import Figure
from matplotlib.patches import Circle
from matplotlib.text import Text

from census_scatter.config.chart_config import (
    ChartStyle,
    DEFAULT_STYLE,
    DEFAULT_SURFACE,
    SurfaceConfig,
)
from census_scatter.geometry.marks import compute_mark_positions
from census_scatter.geometry.scales import ChartScales, LinearScale, compute_scales
from census_scatter.models.data_types import MarkPosition, Record


logger = logging.getLogger(__name__)


def mark_gid(index: int) -> str:
    """Group id of the circle drawn for mark ``index``."""
    return f"mark-{index}"


def label_gid(index: int) -> str:
    """Group id of the text label drawn for mark ``index``."""
    return f"label-{index}"


@dataclass
class RenderedChart:
    """Everything drawn for one chart."""

    figure: Figure
    surface: SurfaceConfig
    axes: Optional[Axes] = None
    scales: Optional[ChartScales] = None
    positions: List[MarkPosition] = field(default_factory=list)
    circles: List[Circle] = field(default_factory=list)
    labels: List[Text] = field(default_factory=list)

    @property
    def is_blank(self) -> bool:
        """True when nothing but the empty surface was drawn."""
        return self.axes is None

    @property
    def records(self) -> List[Record]:
        return [p.record for p in self.positions]

    def close(self) -> None:
        """Release the matplotlib figure."""
        plt.close(self.figure)


class ScatterChartRenderer:
    """
    Draws the poverty vs. healthcare scatter chart.

    Uses the surface configuration for every size and the style
    configuration for every colour and font. Holds no per-chart state, so
    one renderer can draw any number of charts.
    """

    def __init__(
        self,
        surface: Optional[SurfaceConfig] = None,
        style: Optional[ChartStyle] = None,
    ) -> None:
        """
        Initialize renderer with optional configuration.

        Args:
            surface: Drawing surface size and margins
            style: Colours, fonts and axis titles

        Raises:
            InvalidSurfaceError: If the margins leave no plot area
        """
        self.surface = surface or DEFAULT_SURFACE
        self.style = style or DEFAULT_STYLE
        self.surface.validate()
        self.logger = logging.getLogger(__name__)

        self.logger.info(
            f"ScatterChartRenderer initialized for {self.surface.width}x{self.surface.height} surface"
        )

    def create_surface(self) -> Figure:
        """Empty figure of the configured pixel size."""
        return plt.figure(figsize=self.surface.figsize, dpi=self.surface.dpi, facecolor="white")

    def render(self, dataset: Sequence[Record], figure: Optional[Figure] = None) -> RenderedChart:
        """
        Draw axes, marks and axis titles for a dataset.

        Args:
            dataset: Records to plot
            figure: Surface to draw on; a new one is created if omitted

        Returns:
            RenderedChart holding the figure, scales and drawn artists
        """
        figure = figure if figure is not None else self.create_surface()

        if not dataset:
            self.logger.warning("Rendering an empty dataset, scales are degenerate")

        scales = compute_scales(dataset, self.surface)
        positions = compute_mark_positions(dataset, scales)
        self.logger.info(f"Rendering {len(positions)} marks")

        ax = self._create_plot_axes(figure)
        self._draw_axis(ax, scales.x, axis="x")
        self._draw_axis(ax, scales.y, axis="y")

        circles = [self._draw_circle(ax, p) for p in positions]
        labels = [self._draw_label(ax, p) for p in positions]
        self._draw_axis_titles(figure)

        return RenderedChart(
            figure=figure,
            surface=self.surface,
            axes=ax,
            scales=scales,
            positions=positions,
            circles=circles,
            labels=labels,
        )

    # ==================== AXES ====================

    def _create_plot_axes(self, figure: Figure) -> Axes:
        """Axes covering the plot area, in pixel data coordinates."""
        ax = figure.add_axes(self.surface.plot_bounds)
        ax.set_autoscale_on(False)
        ax.set_xlim(0, self.surface.plot_width)
        ax.set_ylim(self.surface.plot_height, 0)
        ax.set_facecolor("none")

        # Only a bottom and a left axis are drawn
        ax.spines["top"].set_visible(False)
        ax.spines["right"].set_visible(False)
        return ax

    def _draw_axis(self, ax: Axes, scale: LinearScale, axis: str) -> None:
        """Place ticks at the scale's round values, labelled in data units."""
        values = scale.ticks(self.style.TICK_COUNT)
        fmt = scale.tick_format(self.style.TICK_COUNT)
        pixels = np.atleast_1d(scale(values))
        tick_labels = [fmt(v) for v in values]

        if axis == "x":
            ax.set_xticks(pixels)
            ax.set_xticklabels(tick_labels)
        else:
            ax.set_yticks(pixels)
            ax.set_yticklabels(tick_labels)

        self.logger.debug(f"{axis}-axis ticks: {tick_labels}")

    # ==================== MARKS ====================

    def _draw_circle(self, ax: Axes, position: MarkPosition) -> Circle:
        circle = Circle(
            position.center,
            radius=self.style.MARK_RADIUS,
            facecolor=self.style.MARK_FILL,
            edgecolor="none",
            clip_on=False,
        )
        circle.set_gid(mark_gid(position.index))
        # NaN coordinates hide the mark
        circle.set_visible(bool(np.isfinite(position.center).all()))
        ax.add_patch(circle)
        return circle

    def _draw_label(self, ax: Axes, position: MarkPosition) -> Text:
        label = ax.text(
            position.x,
            position.y + self.style.LABEL_DY,
            position.label,
            ha="center",
            va="baseline",
            color=self.style.LABEL_COLOR,
            fontfamily=self.style.LABEL_FONT_FAMILY,
            fontsize=self.surface.px_to_points(self.style.LABEL_FONT_SIZE_PX),
            clip_on=False,
        )
        label.set_gid(label_gid(position.index))
        label.set_visible(bool(np.isfinite(position.center).all()))
        return label

    # ==================== TITLES ====================

    def _draw_axis_titles(self, figure: Figure) -> None:
        """Axis titles, placed in surface pixels."""
        surface = self.surface
        fontsize = surface.px_to_points(self.style.AXIS_TITLE_FONT_SIZE_PX)

        # Y title: rotated, its left edge Y_TITLE_INSET px from the surface edge
        plot_center_y = surface.margin_top + surface.plot_height / 2
        figure.text(
            self.style.Y_TITLE_INSET / surface.width,
            1 - plot_center_y / surface.height,
            self.style.Y_TITLE,
            rotation=90,
            ha="left",
            va="center",
            fontsize=fontsize,
        )

        # X title: baseline margin_top + X_TITLE_OFFSET px below the plot bottom
        title_x = surface.margin_left + surface.plot_width / 2
        title_y = surface.margin_top + surface.plot_height + surface.margin_top + self.style.X_TITLE_OFFSET
        figure.text(
            title_x / surface.width,
            1 - title_y / surface.height,
            self.style.X_TITLE,
            ha="center",
            va="baseline",
            fontsize=fontsize,
        )
