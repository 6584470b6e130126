"""Tooltip text and show/hide state."""

from __future__ import annotations

import logging
import math
from typing import Optional

from census_scatter.models.data_types import Record, TooltipContent


logger = logging.getLogger(__name__)


def format_number(value: float) -> str:
    """Shortest text for a number: ``8.0`` -> ``8``, ``19.1`` -> ``19.1``."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == int(value):
        return str(int(value))
    return repr(value)


def tooltip_content(record: Record) -> TooltipContent:
    """Tooltip lines for a record: state, poverty and healthcare."""
    return TooltipContent(
        lines=(
            record.state,
            f"Poverty: {format_number(record.poverty)}%",
            f"Healthcare: {format_number(record.healthcare)}%",
        )
    )


class TooltipController:
    """
    Two-state tooltip machine shared by every mark.

    Every mark starts hidden. Entering a mark shows its tooltip (replacing
    any other); leaving the mark that is shown hides it. Leaves for other
    marks are ignored, so at most one tooltip is ever visible.
    """

    def __init__(self, records) -> None:
        self.records = tuple(records)
        self._shown: Optional[int] = None

    @property
    def visible(self) -> bool:
        return self._shown is not None

    @property
    def shown_index(self) -> Optional[int]:
        """Index of the mark whose tooltip is visible, if any."""
        return self._shown

    @property
    def content(self) -> Optional[TooltipContent]:
        if self._shown is None:
            return None
        return tooltip_content(self.records[self._shown])

    def enter(self, index: int) -> bool:
        """
        Pointer entered mark ``index``.

        Returns True if the visible tooltip changed.
        """
        if not 0 <= index < len(self.records):
            raise IndexError(f"No mark with index {index}")
        if self._shown == index:
            return False
        self._shown = index
        logger.debug(f"Tooltip shown for {self.records[index].abbr}")
        return True

    def leave(self, index: int) -> bool:
        """
        Pointer left mark ``index``.

        Returns True if the tooltip was hidden.
        """
        if self._shown != index:
            return False
        self._shown = None
        logger.debug(f"Tooltip hidden for {self.records[index].abbr}")
        return True
