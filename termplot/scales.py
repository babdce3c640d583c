from __future__ import annotations

from dataclasses import dataclass
import logging
import math
from typing import TYPE_CHECKING, Literal, TypeAlias, overload

import numpy as np

from termplot.errors import PlotConfigError, PlotDataError

if TYPE_CHECKING:
    from termplot.series import DataMatrix


LOGGER = logging.getLogger(__name__)

# Columns/rows of margin reserved by the mappings.
PAD = 2
# Distance, in multiples of the data range, within which an axis gets pinned to zero.
CROSS_PAD = 2.0
# Slack allowed when checking a rasterized value against the frame bounds.
CMP_PAD = 1e-3

Axis = Literal["x", "y"]
Values: TypeAlias = "float | np.ndarray"


@overload
def round_half_away(value: float) -> int: ...


@overload
def round_half_away(value: np.ndarray) -> np.ndarray: ...


def round_half_away(value: Values) -> Values:
    """Round to nearest, ties away from zero (Python's round() ties to even)."""
    if isinstance(value, np.ndarray):
        magnitude = np.abs(value)
        whole = np.floor(magnitude)
        rounded = whole + (magnitude - whole >= 0.5)
        return np.copysign(rounded, value).astype(np.int64)
    v = float(value)
    magnitude = abs(v)
    whole = math.floor(magnitude)
    rounded = whole + 1 if magnitude - whole >= 0.5 else whole
    return -rounded if v < 0 else rounded


def pin_to_zero(lo: float, hi: float) -> tuple[float, float, float]:
    """Return (lo, hi, range) after widening degenerate bounds and applying the zero-crossing heuristic."""
    if lo == hi:
        hi = lo + 1.0
    span = hi - lo
    if lo <= 0.0 <= hi:
        return lo, hi, span
    if lo > 0.0 and lo - span * CROSS_PAD < 0.0:
        return 0.0, hi, hi
    if hi < 0.0 and hi + span * CROSS_PAD > 0.0:
        return lo, 0.0, -lo
    return lo, hi, span


@dataclass(frozen=True)
class Frame:
    """Axis bounds of one plot and the data-to-cell mappings derived from them."""

    width: int
    height: int
    min_x: float
    max_x: float
    range_x: float
    min_y: float
    max_y: float
    range_y: float

    @classmethod
    def new_over(cls, width: int, height: int, data: DataMatrix) -> Frame:
        if width <= PAD or height <= PAD:
            raise PlotConfigError(f"width and height must be > {PAD}, got {width}x{height}")
        x_extent = data.x_extent()
        if x_extent is None:
            raise PlotDataError("no finite samples on the x axis")
        y_extent = data.y_extent()
        if y_extent is None:
            raise PlotDataError("no finite samples on the y axis")

        min_x, max_x, range_x = pin_to_zero(*x_extent)
        min_y, max_y, range_y = pin_to_zero(*y_extent)
        LOGGER.debug(
            "frame %dx%d: x=[%g, %g] (data [%g, %g]) y=[%g, %g] (data [%g, %g])",
            width,
            height,
            min_x,
            max_x,
            *x_extent,
            min_y,
            max_y,
            *y_extent,
        )
        return cls(
            width=width,
            height=height,
            min_x=min_x,
            max_x=max_x,
            range_x=range_x,
            min_y=min_y,
            max_y=max_y,
            range_y=range_y,
        )

    @property
    def plot_width(self) -> int:
        return self.width - PAD

    @property
    def plot_height(self) -> int:
        return self.height - PAD

    def x_bounds(self) -> tuple[float, float]:
        return (self.min_x, self.max_x)

    def y_bounds(self) -> tuple[float, float]:
        return (self.min_y, self.max_y)

    def range_xy(self) -> tuple[float, float]:
        return (self.range_x, self.range_y)

    def x_to_column(self, x: Values) -> Values:
        return self.value_to_column(x, axis="x")

    def y_to_row(self, y: Values) -> Values:
        cell_from_bottom = round_half_away(self.plot_height * ((y - self.min_y) / self.range_y))
        # row 0 is the top of the grid
        return self.height - cell_from_bottom - 1

    def point_to_cell(self, point: tuple[float, float]) -> tuple[int, int]:
        x, y = point
        return (self.y_to_row(y), self.x_to_column(x))

    def value_to_column(self, value: Values, axis: Axis = "y") -> Values:
        lo, span = self._origin(axis)
        return round_half_away(self.plot_width * ((value - lo) / span))

    def column_to_value(self, column: Values, axis: Axis = "y") -> Values:
        lo, span = self._origin(axis)
        return lo + (column / self.plot_width) * span

    def _origin(self, axis: Axis) -> tuple[float, float]:
        if axis == "x":
            return self.min_x, self.range_x
        if axis == "y":
            return self.min_y, self.range_y
        raise ValueError(f"axis must be 'x' or 'y', got {axis!r}")
