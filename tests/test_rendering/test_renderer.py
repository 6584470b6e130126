"""
Tests for ScatterChartRenderer.

Tests cover:
- Surface: figure size, plot-area axes and limits
- Marks: one circle and one label per record, positions, style
- Axes: tick positions and labels from the scales
- Edge cases: NaN records, empty dataset, invalid surface
"""
import sys
from pathlib import Path

import numpy as np
import pytest
from matplotlib.colors import to_rgba

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from census_scatter.config.chart_config import (
    ChartStyle,
    InvalidSurfaceError,
    SurfaceConfig,
)
from census_scatter.rendering.renderer import ScatterChartRenderer, label_gid, mark_gid


# ==================== TestSurface ====================

class TestSurface:
    """Test figure and axes geometry."""

    def test_figure_pixel_size(self, two_state_chart):
        width, height = two_state_chart.figure.get_size_inches() * two_state_chart.figure.dpi
        assert width == pytest.approx(750)
        assert height == pytest.approx(500)

    def test_axes_cover_plot_area(self, two_state_chart):
        bounds = two_state_chart.axes.get_position().bounds
        assert bounds == pytest.approx((100 / 750, 50 / 500, 610 / 750, 420 / 500))

    def test_axes_use_pixel_coordinates(self, two_state_chart):
        ax = two_state_chart.axes
        assert ax.get_xlim() == (0, 610)
        assert ax.get_ylim() == (420, 0)

    def test_only_bottom_and_left_spines(self, two_state_chart):
        spines = two_state_chart.axes.spines
        assert spines["bottom"].get_visible() and spines["left"].get_visible()
        assert not spines["top"].get_visible()
        assert not spines["right"].get_visible()

    def test_not_blank(self, two_state_chart):
        assert not two_state_chart.is_blank

    def test_blank_surface(self, renderer):
        figure = renderer.create_surface()
        assert figure.axes == []

    def test_renders_onto_given_figure(self, renderer, two_state_dataset):
        figure = renderer.create_surface()
        chart = renderer.render(two_state_dataset, figure=figure)
        assert chart.figure is figure


# ==================== TestMarks ====================

class TestMarks:
    """Test circles and labels."""

    def test_mark_count_matches_records(self, two_state_chart, two_state_dataset):
        assert len(two_state_chart.circles) == len(two_state_dataset)
        assert len(two_state_chart.labels) == len(two_state_dataset)

    def test_label_text_is_abbr(self, two_state_chart):
        assert [label.get_text() for label in two_state_chart.labels] == ["AL", "AK"]

    def test_circle_at_scaled_position(self, two_state_chart):
        scales = two_state_chart.scales
        alabama = two_state_chart.circles[0]
        assert alabama.center == pytest.approx((scales.x(19.1), scales.y(11.9)))

    def test_circle_style(self, two_state_chart):
        circle = two_state_chart.circles[0]
        assert circle.get_radius() == 15
        assert circle.get_facecolor() == pytest.approx(to_rgba("#89bdd3"))

    def test_label_baseline_on_circle_center(self, two_state_chart):
        label = two_state_chart.labels[1]
        position = two_state_chart.positions[1]
        assert label.get_position() == pytest.approx(position.center)
        assert label.get_va() == "baseline"
        assert label.get_ha() == "center"

    def test_label_offset_moves_label(self, surface, two_state_dataset):
        renderer = ScatterChartRenderer(surface=surface, style=ChartStyle(LABEL_DY=5.0))
        chart = renderer.render(two_state_dataset)
        assert chart.labels[0].get_position()[1] == pytest.approx(chart.positions[0].y + 5.0)

    def test_gids(self, two_state_chart):
        assert two_state_chart.circles[1].get_gid() == mark_gid(1) == "mark-1"
        assert two_state_chart.labels[0].get_gid() == label_gid(0) == "label-0"

    def test_nan_record_hidden(self, renderer, dataset_with_nan):
        chart = renderer.render(dataset_with_nan)
        assert len(chart.circles) == 3
        assert [c.get_visible() for c in chart.circles] == [True, False, True]
        assert not chart.labels[1].get_visible()

    def test_records_property(self, two_state_chart, two_state_dataset):
        assert two_state_chart.records == list(two_state_dataset)


# ==================== TestAxes ====================

class TestAxes:
    """Test tick placement and axis titles."""

    def test_x_ticks(self, two_state_chart):
        ax = two_state_chart.axes
        two_state_chart.figure.canvas.draw()

        expected = two_state_chart.scales.x(np.arange(10, 20))
        np.testing.assert_allclose(ax.get_xticks(), expected)
        assert [t.get_text() for t in ax.get_xticklabels()] == [str(v) for v in range(10, 20)]

    def test_y_ticks(self, two_state_chart):
        ax = two_state_chart.axes
        two_state_chart.figure.canvas.draw()

        expected = two_state_chart.scales.y(np.arange(0, 20, 2))
        np.testing.assert_allclose(ax.get_yticks(), expected)
        assert [t.get_text() for t in ax.get_yticklabels()] == [str(v) for v in range(0, 20, 2)]

    def test_axis_titles(self, two_state_chart):
        texts = [t.get_text() for t in two_state_chart.figure.texts]
        assert "In Poverty (%)" in texts
        assert "Lacks Healthcare (%)" in texts

    def test_y_title_rotated(self, two_state_chart):
        title = next(t for t in two_state_chart.figure.texts if t.get_text() == "Lacks Healthcare (%)")
        assert title.get_rotation() == 90
        assert title.get_position() == pytest.approx((50 / 750, 1 - 240 / 500))

    def test_x_title_position(self, two_state_chart):
        title = next(t for t in two_state_chart.figure.texts if t.get_text() == "In Poverty (%)")
        assert title.get_position() == pytest.approx((405 / 750, 0.0))


# ==================== TestEdgeCases ====================

class TestEdgeCases:
    """Test degenerate input and configuration."""

    def test_empty_dataset(self, renderer):
        chart = renderer.render(())
        chart.figure.canvas.draw()

        assert chart.positions == []
        assert chart.circles == []
        assert len(chart.axes.get_xticks()) == 0

    def test_single_record(self, renderer, two_state_dataset):
        chart = renderer.render(two_state_dataset[:1])
        # Equal x domain endpoints map to the middle of the plot
        assert chart.positions[0].x == pytest.approx(305)

    def test_invalid_surface(self):
        with pytest.raises(InvalidSurfaceError, match="Plot area must be positive"):
            ScatterChartRenderer(surface=SurfaceConfig(width=120))

    def test_defaults(self):
        renderer = ScatterChartRenderer()
        assert renderer.surface.plot_width == 610
        assert renderer.surface.plot_height == 420
