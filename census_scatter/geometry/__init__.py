"""Geometry package for census-scatter.

This package contains the pure scale computation and mark placement logic.
Nothing here touches a drawing surface.
"""

from .scales import ChartScales, LinearScale, compute_scales
from .marks import MarkIndex, compute_mark_positions

__all__ = [
    "ChartScales",
    "LinearScale",
    "MarkIndex",
    "compute_mark_positions",
    "compute_scales",
]
