"""Configuration module for Census Scatter."""

from .chart_config import (
    ChartRenderError,
    ChartStyle,
    DataLoadError,
    DEFAULT_STYLE,
    DEFAULT_SURFACE,
    InvalidSurfaceError,
    MissingColumnError,
    SurfaceConfig,
)

__all__ = [
    "ChartRenderError",
    "ChartStyle",
    "DataLoadError",
    "DEFAULT_STYLE",
    "DEFAULT_SURFACE",
    "InvalidSurfaceError",
    "MissingColumnError",
    "SurfaceConfig",
]
