# census_scatter/geometry/scales.py
"""
Linear scales mapping data values to plot-area pixels.

The X scale spans the poverty extent; the Y scale starts at zero and reaches
the larger of the healthcare and poverty maxima, with its pixel range
inverted because pixel y grows downward.
"""

import logging
import math
from dataclasses import dataclass
from typing import Callable, Iterable, Sequence, Tuple, Union

import numpy as np

from census_scatter.config.chart_config import SurfaceConfig
from census_scatter.models.data_types import Record


logger = logging.getLogger(__name__)

ArrayLike = Union[float, Sequence[float], np.ndarray]

# Thresholds for picking a 10, 5, 2 or 1 multiple of the tick power
_E10 = math.sqrt(50)
_E5 = math.sqrt(10)
_E2 = math.sqrt(2)


# ==================== AGGREGATES ====================

def _valid_values(values: Iterable[float]) -> np.ndarray:
    """Float array of the values with NaN removed."""
    arr = np.asarray(list(values), dtype=float)
    return arr[~np.isnan(arr)]


def extent(values: Iterable[float]) -> Tuple[float, float]:
    """
    Minimum and maximum of the values, ignoring NaN.

    Returns (nan, nan) when no valid value exists.
    """
    valid = _valid_values(values)
    if valid.size == 0:
        return (math.nan, math.nan)
    return (float(valid.min()), float(valid.max()))


def max_value(values: Iterable[float]) -> float:
    """Maximum of the values ignoring NaN, or NaN when none is valid."""
    valid = _valid_values(values)
    if valid.size == 0:
        return math.nan
    return float(valid.max())


# ==================== TICKS ====================

def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _tick_spec(start: float, stop: float, count: float) -> Tuple[int, int, float]:
    """
    Integer tick bounds and increment for a "nice" step.

    The step is 1, 2, 5 or 10 times a power of ten. A negative increment
    means ticks are ``i / -inc`` rather than ``i * inc`` to avoid float drift.
    """
    step = (stop - start) / max(0, count)
    power = math.floor(math.log10(step))
    error = step / math.pow(10, power)
    if error >= _E10:
        factor = 10
    elif error >= _E5:
        factor = 5
    elif error >= _E2:
        factor = 2
    else:
        factor = 1

    if power < 0:
        inc = math.pow(10, -power) / factor
        i1 = _round_half_up(start * inc)
        i2 = _round_half_up(stop * inc)
        if i1 / inc < start:
            i1 += 1
        if i2 / inc > stop:
            i2 -= 1
        inc = -inc
    else:
        inc = math.pow(10, power) * factor
        i1 = _round_half_up(start / inc)
        i2 = _round_half_up(stop / inc)
        if i1 * inc < start:
            i1 += 1
        if i2 * inc > stop:
            i2 -= 1

    if i2 < i1 and 0.5 <= count < 2:
        return _tick_spec(start, stop, count * 2)
    return i1, i2, inc


def tick_values(start: float, stop: float, count: int = 10) -> np.ndarray:
    """
    Roughly ``count`` evenly spaced round values between start and stop.

    Values are inclusive of the bounds when those are themselves round.
    A reversed interval yields descending ticks.
    """
    if not count > 0 or math.isnan(start) or math.isnan(stop):
        return np.array([], dtype=float)
    if start == stop:
        return np.array([start], dtype=float)

    reverse = stop < start
    if reverse:
        start, stop = stop, start

    i1, i2, inc = _tick_spec(start, stop, count)
    if not i2 >= i1:
        return np.array([], dtype=float)

    steps = np.arange(i1, i2 + 1, dtype=float)
    ticks = steps / -inc if inc < 0 else steps * inc
    return ticks[::-1] if reverse else ticks


def tick_step(start: float, stop: float, count: int = 10) -> float:
    """Distance between consecutive ticks from :func:`tick_values`."""
    if math.isnan(start) or math.isnan(stop) or start == stop or not count > 0:
        return math.nan
    lo, hi = min(start, stop), max(start, stop)
    _, _, inc = _tick_spec(lo, hi, count)
    return 1 / -inc if inc < 0 else inc


def tick_formatter(step: float) -> Callable[[float], str]:
    """
    Fixed-point formatter with just enough decimals for the tick step.

    Thousands are comma grouped.
    """
    if math.isnan(step) or step <= 0:
        precision = 0
    else:
        precision = max(0, -math.floor(math.log10(step)))
    return lambda value: f"{value:,.{precision}f}"


# ==================== SCALES ====================

@dataclass(frozen=True)
class LinearScale:
    """
    Linear mapping from a data domain to a pixel range.

    Calling the scale with a number returns a float; with a sequence or
    array it returns a numpy array of the same shape.

    A domain with equal endpoints maps everything to the middle of the
    range; a NaN domain maps everything to NaN.
    """

    domain: Tuple[float, float]
    range: Tuple[float, float]

    def __call__(self, value: ArrayLike) -> Union[float, np.ndarray]:
        values = np.asarray(value, dtype=float)
        d0, d1 = self.domain
        span = d1 - d0

        if span == 0:
            t = np.full_like(values, 0.5)
        else:
            t = (values - d0) / span

        r0, r1 = self.range
        out = r0 * (1 - t) + r1 * t
        if out.ndim == 0:
            return float(out)
        return out

    def ticks(self, count: int = 10) -> np.ndarray:
        """Round domain values to place axis ticks at."""
        return tick_values(self.domain[0], self.domain[1], count)

    def tick_format(self, count: int = 10) -> Callable[[float], str]:
        """Formatter matching the precision of :meth:`ticks`."""
        return tick_formatter(tick_step(self.domain[0], self.domain[1], count))


@dataclass(frozen=True)
class ChartScales:
    """The two scales of the chart."""

    x: LinearScale
    y: LinearScale


def compute_scales(dataset: Sequence[Record], surface: SurfaceConfig) -> ChartScales:
    """
    Build the X and Y scales for a dataset on a surface.

    Args:
        dataset: Records in any order
        surface: Drawing surface; only its plot-area size is used

    Returns:
        ChartScales with x over the poverty extent and y over
        [0, max(healthcare max, poverty max)]
    """
    poverty = [record.poverty for record in dataset]
    healthcare = [record.healthcare for record in dataset]

    poverty_min, poverty_max = extent(poverty)
    healthcare_max = max_value(healthcare)

    # The y-axis encodes healthcare but must also fit the poverty maximum
    if healthcare_max > poverty_max:
        y_max = healthcare_max
    else:
        y_max = poverty_max

    x_scale = LinearScale(
        domain=(poverty_min, poverty_max),
        range=(0.0, float(surface.plot_width)),
    )
    y_scale = LinearScale(
        domain=(0.0, y_max),
        range=(float(surface.plot_height), 0.0),
    )

    logger.debug(f"x domain={x_scale.domain} range={x_scale.range}")
    logger.debug(f"y domain={y_scale.domain} range={y_scale.range}")
    return ChartScales(x=x_scale, y=y_scale)
