"""Standalone SVG export with native hover tooltips.

The figure is saved through matplotlib's SVG backend, where every mark
circle is wrapped in a group carrying its gid. A ``<title>`` child is then
inserted into each of those groups; browsers show a group's title while the
pointer is over it and hide it when the pointer leaves.
"""

from __future__ import annotations

import io
import logging
import xml.etree.ElementTree as ET
from pathlib import Path

from census_scatter.rendering.renderer import RenderedChart, label_gid, mark_gid
from census_scatter.rendering.tooltip import tooltip_content


logger = logging.getLogger(__name__)

SVG_NS = "http://www.w3.org/2000/svg"

# Keep the prefixes matplotlib writes instead of ns0, ns1, ...
for _prefix, _uri in (
    ("", SVG_NS),
    ("xlink", "http://www.w3.org/1999/xlink"),
    ("rdf", "http://www.w3.org/1999/02/22-rdf-syntax-ns#"),
    ("cc", "http://creativecommons.org/ns#"),
    ("dc", "http://purl.org/dc/elements/1.1/"),
):
    ET.register_namespace(_prefix, _uri)


def _find_by_id(root: ET.Element, element_id: str):
    return root.find(f".//*[@id='{element_id}']")


def build_svg_tree(chart: RenderedChart) -> ET.Element:
    """Render the chart to SVG and attach a tooltip title to every mark.

    Marks that were not drawn (NaN positions) have no group and get no title.
    Labels ignore the pointer so hovering a label still hovers its circle.
    """
    buffer = io.BytesIO()
    chart.figure.savefig(buffer, format="svg")
    root = ET.fromstring(buffer.getvalue())

    attached = 0
    for position in chart.positions:
        group = _find_by_id(root, mark_gid(position.index))
        if group is None:
            continue

        title = ET.Element(f"{{{SVG_NS}}}title")
        title.text = tooltip_content(position.record).text
        group.insert(0, title)
        attached += 1

        label = _find_by_id(root, label_gid(position.index))
        if label is not None:
            label.set("pointer-events", "none")

    logger.debug(f"Attached {attached} tooltip(s) of {len(chart.positions)} marks")
    return root


def export_svg(chart: RenderedChart, output_path: str | Path) -> Path:
    """Write the chart as an SVG file with hover tooltips.

    Parameters
    ----------
    chart:
        Chart from :class:`~census_scatter.rendering.renderer.ScatterChartRenderer`
        (a blank chart is written as an empty surface).
    output_path:
        Destination ``.svg`` file; parent directories are created.
    """
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)

    root = build_svg_tree(chart)
    ET.ElementTree(root).write(path, encoding="utf-8", xml_declaration=True)

    logger.info(f"Saved SVG chart to {path}")
    return path
