"""Load-then-render orchestration.

A failed load never reaches the renderer: the error is logged and the
caller gets the blank surface that was prepared before loading.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from census_scatter.config.chart_config import (
    ChartRenderError,
    ChartStyle,
    DataLoadError,
    SUPPORTED_OUTPUT_FORMATS,
    SurfaceConfig,
)
from census_scatter.data.loader import load_dataset
from census_scatter.rendering.renderer import RenderedChart, ScatterChartRenderer
from census_scatter.rendering.svg_export import export_svg


logger = logging.getLogger(__name__)


def render_chart_from_file(
    csv_path: str | Path,
    surface: Optional[SurfaceConfig] = None,
    style: Optional[ChartStyle] = None,
) -> RenderedChart:
    """Load a census CSV and render its scatter chart.

    Returns
    -------
    RenderedChart
        The full chart, or a blank one (``is_blank``) when loading failed.
    """
    renderer = ScatterChartRenderer(surface=surface, style=style)
    figure = renderer.create_surface()

    try:
        dataset = load_dataset(csv_path)
    except DataLoadError as exc:
        logger.error(f"Failed to load data, chart left blank: {exc}")
        return RenderedChart(figure=figure, surface=renderer.surface)

    return renderer.render(dataset, figure=figure)


def save_chart(chart: RenderedChart, output_path: str | Path) -> Path:
    """Write a chart to disk; the suffix picks the format.

    ``.svg`` goes through the tooltip-aware SVG exporter, other supported
    formats straight through matplotlib.

    Raises
    ------
    ChartRenderError
        If the suffix is not a supported output format.
    """
    path = Path(output_path)
    suffix = path.suffix.lower()
    if suffix not in SUPPORTED_OUTPUT_FORMATS:
        raise ChartRenderError(
            f"Unsupported output format: {path.suffix or '(none)'}. "
            f"Supported formats: {', '.join(SUPPORTED_OUTPUT_FORMATS)}"
        )

    if suffix == ".svg":
        return export_svg(chart, path)

    path.parent.mkdir(parents=True, exist_ok=True)
    chart.figure.savefig(path, dpi=chart.surface.dpi)
    logger.info(f"Saved chart to {path}")
    return path
