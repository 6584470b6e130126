"""
Tests for SVG export with native tooltips.
"""
import sys
import xml.etree.ElementTree as ET
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from census_scatter.rendering.renderer import RenderedChart
from census_scatter.rendering.svg_export import SVG_NS, build_svg_tree, export_svg


TITLE_TAG = f"{{{SVG_NS}}}title"


def _by_id(root, element_id):
    return root.find(f".//*[@id='{element_id}']")


# ==================== TestBuildSvgTree ====================

class TestBuildSvgTree:
    """Test tooltip injection into the rendered SVG."""

    def test_one_title_per_mark(self, two_state_chart):
        root = build_svg_tree(two_state_chart)
        titles = root.findall(f".//{TITLE_TAG}")
        assert len(titles) == 2

    def test_title_is_first_child_of_mark(self, two_state_chart):
        root = build_svg_tree(two_state_chart)
        group = _by_id(root, "mark-0")

        assert group is not None
        assert group[0].tag == TITLE_TAG
        assert group[0].text == "Alabama\nPoverty: 19.1%\nHealthcare: 11.9%"

    def test_labels_ignore_pointer(self, two_state_chart):
        root = build_svg_tree(two_state_chart)
        assert _by_id(root, "label-1").get("pointer-events") == "none"

    def test_hidden_marks_have_no_title(self, renderer, dataset_with_nan):
        chart = renderer.render(dataset_with_nan)
        root = build_svg_tree(chart)

        assert _by_id(root, "mark-1") is None
        assert len(root.findall(f".//{TITLE_TAG}")) == 2


# ==================== TestExportSvg ====================

class TestExportSvg:
    """Test writing SVG files."""

    def test_writes_file(self, two_state_chart, tmp_path):
        path = export_svg(two_state_chart, tmp_path / "out" / "chart.svg")

        assert path.exists()
        assert path.read_text(encoding="utf-8").startswith("<?xml")
        root = ET.parse(path).getroot()
        assert root.tag == f"{{{SVG_NS}}}svg"

    def test_written_file_contains_tooltips(self, two_state_chart, tmp_path):
        path = export_svg(two_state_chart, tmp_path / "chart.svg")
        root = ET.parse(path).getroot()
        texts = [t.text for t in root.iter(f"{{{SVG_NS}}}title")]
        assert any(text.startswith("Alaska") for text in texts)

    def test_blank_chart(self, renderer, tmp_path):
        blank = RenderedChart(figure=renderer.create_surface(), surface=renderer.surface)
        path = export_svg(blank, tmp_path / "blank.svg")

        root = ET.parse(path).getroot()
        assert root.findall(f".//{TITLE_TAG}") == []
