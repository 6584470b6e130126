"""Mark placement and pointer hit testing.

:func:`compute_mark_positions` turns records into plot-area pixel positions.
:class:`MarkIndex` answers "which mark is under this pixel?" so that pointer
events can be resolved to a mark index instead of per-mark callbacks.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

import numpy as np
from scipy.spatial import KDTree

from census_scatter.geometry.scales import ChartScales
from census_scatter.models.data_types import MarkPosition, Record


logger = logging.getLogger(__name__)


def compute_mark_positions(dataset: Sequence[Record], scales: ChartScales) -> List[MarkPosition]:
    """Position one mark per record, in dataset order.

    Parameters
    ----------
    dataset:
        Records to place.
    scales:
        Scales from :func:`~census_scatter.geometry.scales.compute_scales`.

    Returns
    -------
    list of MarkPosition
        ``x = scales.x(poverty)`` and ``y = scales.y(healthcare)``. Records
        with NaN values get NaN coordinates.
    """
    if not dataset:
        return []

    xs = scales.x([record.poverty for record in dataset])
    ys = scales.y([record.healthcare for record in dataset])

    return [
        MarkPosition(index=i, x=float(x), y=float(y), record=record)
        for i, (x, y, record) in enumerate(zip(xs, ys, dataset))
    ]


class MarkIndex:
    """Spatial lookup table from plot-area pixels to mark indices.

    Built once over the mark centres. Marks with non-finite coordinates are
    never drawn and therefore never hit.
    """

    def __init__(self, positions: Sequence[MarkPosition], radius: float) -> None:
        self.radius = float(radius)
        self.positions = list(positions)

        centers = np.array([p.center for p in self.positions], dtype=float).reshape(-1, 2)
        finite = np.all(np.isfinite(centers), axis=1)
        self._indices = np.array([p.index for p in self.positions], dtype=int)[finite]
        self._tree = KDTree(centers[finite]) if finite.any() else None

        skipped = int((~finite).sum())
        if skipped:
            logger.warning(f"{skipped} mark(s) have non-finite positions and cannot be hovered")

    def __len__(self) -> int:
        return len(self._indices)

    def find(self, x: float, y: float) -> Optional[int]:
        """Index of the mark whose circle contains (x, y), or None.

        When circles overlap, the mark with the nearest centre wins.
        """
        if self._tree is None or not np.isfinite([x, y]).all():
            return None

        distance, i = self._tree.query((x, y), k=1, distance_upper_bound=self.radius)
        if not np.isfinite(distance):
            return None
        return int(self._indices[i])
