# census_scatter/config/chart_config.py
"""
Configuration for the scatter chart drawing surface and visual style.

Centralizes every size, margin and colour used while rendering, plus the
exception hierarchy shared by loading and rendering.
"""
from dataclasses import dataclass
from typing import Tuple


# ==================== CUSTOM EXCEPTIONS ====================

class ChartRenderError(Exception):
    """Base exception for chart rendering failures"""
    pass


class DataLoadError(ChartRenderError):
    """Raised when the data file cannot be read or parsed"""
    pass


class MissingColumnError(DataLoadError):
    """Raised when the CSV header lacks a required column"""
    pass


class InvalidSurfaceError(ChartRenderError):
    """Raised when margins leave no room for the plot area"""
    pass


# ==================== SURFACE CONFIGURATION ====================

@dataclass(frozen=True)
class SurfaceConfig:
    """
    Drawing surface descriptor.

    Width and height are the full surface in pixels; the plot area is what
    remains after subtracting the margins.

    Attributes:
        width: Surface width in pixels
        height: Surface height in pixels
        margin_top: Space above the plot area
        margin_right: Space right of the plot area
        margin_bottom: Space below the plot area (holds the x-axis)
        margin_left: Space left of the plot area (holds the y-axis)
        dpi: Figure resolution; 100 keeps one figure pixel per surface pixel
    """

    width: int = 750
    height: int = 500
    margin_top: int = 30
    margin_right: int = 40
    margin_bottom: int = 50
    margin_left: int = 100
    dpi: int = 100

    @property
    def plot_width(self) -> int:
        """Width of the plot area in pixels."""
        return self.width - self.margin_left - self.margin_right

    @property
    def plot_height(self) -> int:
        """Height of the plot area in pixels."""
        return self.height - self.margin_top - self.margin_bottom

    @property
    def figsize(self) -> Tuple[float, float]:
        """Matplotlib figure size in inches."""
        return (self.width / self.dpi, self.height / self.dpi)

    @property
    def plot_bounds(self) -> Tuple[float, float, float, float]:
        """
        Plot area as (left, bottom, width, height) figure fractions.

        Matplotlib measures from the bottom-left corner, so the bottom
        margin is the offset on the vertical axis.
        """
        return (
            self.margin_left / self.width,
            self.margin_bottom / self.height,
            self.plot_width / self.width,
            self.plot_height / self.height,
        )

    def validate(self) -> None:
        """
        Check that the margins leave a drawable plot area.

        Raises:
            InvalidSurfaceError: If the plot area has no positive extent
        """
        if self.plot_width <= 0 or self.plot_height <= 0:
            raise InvalidSurfaceError(
                f"Plot area must be positive, got {self.plot_width}x{self.plot_height} "
                f"for surface {self.width}x{self.height}"
            )

    def px_to_points(self, px: float) -> float:
        """Convert surface pixels to typographic points (1/72 inch)."""
        return px * 72.0 / self.dpi


# ==================== STYLE CONFIGURATION ====================

@dataclass(frozen=True)
class ChartStyle:
    """Visual style of the marks, axis titles and tooltip."""

    # ==================== Marks ====================
    MARK_RADIUS: float = 15.0  # Pixels
    MARK_FILL: str = "#89bdd3"

    # ==================== Mark Labels ====================
    LABEL_FONT_FAMILY: str = "sans-serif"
    LABEL_FONT_SIZE_PX: float = 15.0
    LABEL_COLOR: str = "#fff"
    # Baseline sits on the circle centre; positive values move the label down
    LABEL_DY: float = 0.0

    # ==================== Axis Titles ====================
    X_TITLE: str = "In Poverty (%)"
    Y_TITLE: str = "Lacks Healthcare (%)"
    X_TITLE_OFFSET: float = 20.0  # Pixels below plot bottom, added to margin_top
    Y_TITLE_INSET: float = 50.0  # Pixels right of the surface's left edge
    AXIS_TITLE_FONT_SIZE_PX: float = 16.0

    # ==================== Axes ====================
    TICK_COUNT: int = 10

    # ==================== Tooltip ====================
    TOOLTIP_OFFSET: Tuple[float, float] = (12.0, 12.0)  # Points from pointer
    TOOLTIP_BACKGROUND: str = "#333"
    TOOLTIP_TEXT_COLOR: str = "#fff"


# ==================== Supported Formats ====================
SUPPORTED_OUTPUT_FORMATS: Tuple[str, ...] = (".svg", ".png", ".pdf")


# Default configuration instances
DEFAULT_SURFACE = SurfaceConfig()
DEFAULT_STYLE = ChartStyle()
