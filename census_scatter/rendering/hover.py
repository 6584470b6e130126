"""Interactive hover tooltips for a rendered chart.

:class:`HoverTooltipBinding` listens to pointer motion on the matplotlib
canvas, resolves the mark under the pointer through a
:class:`~census_scatter.geometry.marks.MarkIndex` and lets a
:class:`~census_scatter.rendering.tooltip.TooltipController` decide what
is shown. A single annotation artist displays the tooltip.

Marks are drawn unclipped, so a mark on the plot edge reaches past the
axes. Pointer positions are therefore resolved from display coordinates
rather than from the axes hit test.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from census_scatter.config.chart_config import ChartRenderError, ChartStyle, DEFAULT_STYLE
from census_scatter.geometry.marks import MarkIndex
from census_scatter.rendering.renderer import RenderedChart
from census_scatter.rendering.tooltip import TooltipController


logger = logging.getLogger(__name__)


class HoverTooltipBinding:
    """Binds pointer motion on a chart's canvas to its tooltip."""

    def __init__(self, chart: RenderedChart, style: Optional[ChartStyle] = None) -> None:
        if chart.is_blank:
            raise ChartRenderError("Cannot attach tooltips to a blank chart")

        self.chart = chart
        self.style = style or DEFAULT_STYLE
        self.index = MarkIndex(chart.positions, radius=self.style.MARK_RADIUS)
        self.controller = TooltipController(chart.records)
        self.annotation = chart.axes.annotate(
            "",
            xy=(0, 0),
            xytext=self.style.TOOLTIP_OFFSET,
            textcoords="offset points",
            color=self.style.TOOLTIP_TEXT_COLOR,
            bbox=dict(boxstyle="round,pad=0.4", fc=self.style.TOOLTIP_BACKGROUND, ec="none"),
            annotation_clip=False,
            zorder=10,
        )
        self.annotation.set_visible(False)
        self._cids: List[int] = []

    @property
    def connected(self) -> bool:
        return bool(self._cids)

    def connect(self) -> "HoverTooltipBinding":
        """Start listening to pointer motion and to the pointer leaving the figure."""
        if not self._cids:
            canvas = self.chart.figure.canvas
            self._cids = [
                canvas.mpl_connect("motion_notify_event", self.on_motion),
                canvas.mpl_connect("figure_leave_event", self.on_leave),
            ]
            logger.info(f"Hover tooltips connected for {len(self.index)} marks")
        return self

    def disconnect(self) -> None:
        for cid in self._cids:
            self.chart.figure.canvas.mpl_disconnect(cid)
        self._cids = []

    def plot_position(self, event) -> Optional[Tuple[float, float]]:
        """Pointer position of a mouse event in plot-area pixels."""
        if event.x is None or event.y is None:
            return None
        # Axes data coordinates are plot-area pixels
        px, py = self.chart.axes.transData.inverted().transform((event.x, event.y))
        return float(px), float(py)

    def mark_at(self, event) -> Optional[int]:
        """Mark index under the pointer of a matplotlib mouse event."""
        position = self.plot_position(event)
        if position is None:
            return None
        return self.index.find(*position)

    def on_motion(self, event) -> None:
        hit = self.mark_at(event)
        shown = self.controller.shown_index

        changed = False
        if shown is not None and shown != hit:
            changed = self.controller.leave(shown) or changed
        if hit is not None:
            changed = self.controller.enter(hit) or changed

        if changed:
            self._sync_annotation(self.plot_position(event))
            self.chart.figure.canvas.draw_idle()

    def on_leave(self, event) -> None:
        """Hide the tooltip when the pointer leaves the figure."""
        shown = self.controller.shown_index
        if shown is not None and self.controller.leave(shown):
            self._sync_annotation(None)
            self.chart.figure.canvas.draw_idle()

    def _sync_annotation(self, position: Optional[Tuple[float, float]]) -> None:
        content = self.controller.content
        if content is None or position is None:
            self.annotation.set_visible(False)
            return

        self.annotation.xy = position
        self.annotation.set_text(content.text)
        self.annotation.set_visible(True)
