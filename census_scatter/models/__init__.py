"""Models package for census-scatter.

This package contains the data types shared by loading, geometry and
rendering.
"""
from .data_types import (
    Record,
    MarkPosition,
    TooltipContent,
)

__all__ = [
    "Record",
    "MarkPosition",
    "TooltipContent",
]
