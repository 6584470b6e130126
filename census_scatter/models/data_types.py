"""
Data types for Census Scatter.

Provides type-safe dataclasses for:
- Record: One row of the census dataset
- MarkPosition: Pixel position of the mark drawn for a record
- TooltipContent: Lines shown while the pointer is over a mark
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Tuple


@dataclass(frozen=True)
class Record:
    """One state of the census dataset."""

    state: str
    abbr: str
    poverty: float
    healthcare: float

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "state": self.state,
            "abbr": self.abbr,
            "poverty": self.poverty,
            "healthcare": self.healthcare,
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "Record":
        """Create from dictionary with already numeric fields."""
        return cls(
            state=d["state"],
            abbr=d["abbr"],
            poverty=float(d["poverty"]),
            healthcare=float(d["healthcare"]),
        )


@dataclass(frozen=True)
class MarkPosition:
    """Plot-area pixel position of one record's circle and label."""

    index: int
    x: float
    y: float
    record: Record

    @property
    def center(self) -> Tuple[float, float]:
        """Center point (x, y)."""
        return (self.x, self.y)

    @property
    def label(self) -> str:
        """Text drawn over the circle."""
        return self.record.abbr


@dataclass(frozen=True)
class TooltipContent:
    """Text lines of a tooltip."""

    lines: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def text(self) -> str:
        """Multi-line text, one line per row of the tooltip."""
        return "\n".join(self.lines)

    def as_single_line(self) -> str:
        """Single-line form: lines joined by ' / '."""
        return " / ".join(self.lines)
