"""Rendering package for census-scatter.

This package contains the matplotlib renderer, tooltip state, interactive
hover binding and SVG export.
"""

__all__ = [
    "hover",
    "renderer",
    "svg_export",
    "tooltip",
]
