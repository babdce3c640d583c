from __future__ import annotations

from enum import Enum
import math
from typing import TYPE_CHECKING

from termplot.errors import RasterConsistencyError
from termplot.glyphs import COUNT_MAX, COUNT_MIN
from termplot.raster.grid import Cell, CellKind, Grid
from termplot.scales import CMP_PAD, Frame

if TYPE_CHECKING:
    from termplot.series import DataMatrix


class DrawMode(str, Enum):
    DOT = "dot"
    COUNT = "count"


def next_count(cell: Cell, series_index: int) -> Cell:
    """Saturating overlap counter.

    The first sample in a cell keeps its series mark so lone points stay
    attributable; the second turns the cell into a count of 2, which then
    climbs through the base-36 digits and sticks at saturated after 'z'.
    """
    if cell.kind in (CellKind.BLANK, CellKind.AXIS):
        return Cell.series(series_index)
    if cell.kind is CellKind.SERIES:
        return Cell.count(COUNT_MIN)
    if cell.kind is CellKind.COUNT and cell.value < COUNT_MAX:
        return Cell.count(cell.value + 1)
    if cell.kind in (CellKind.COUNT, CellKind.SATURATED):
        return Cell.saturated()
    raise RasterConsistencyError(f"unexpected cell content {cell!r}")


def draw_markers(grid: Grid, frame: Frame, data: DataMatrix, mode: DrawMode = DrawMode.DOT) -> int:
    """Plot every finite sample of every series; returns the number of samples drawn."""
    min_x, max_x = frame.x_bounds()
    drawn = 0
    for row, x in enumerate(data.xs.tolist()):
        if not math.isfinite(x):
            # an unreadable x leaves the whole row without a position
            continue
        if data.flipped:
            x_cell = frame.y_to_row(x)
        else:
            x_cell = frame.x_to_column(x)
        for column, ys in enumerate(data.ys):
            y = float(ys[row])
            if not math.isfinite(y):
                continue

            # the value mapped onto grid columns must lie inside the bounds the frame was built from
            along = y if data.flipped else x
            if not (min_x - CMP_PAD <= along <= max_x + CMP_PAD):
                raise RasterConsistencyError(
                    f"value {along} of data point ({x}, {y}) is outside frame bounds [{min_x}, {max_x}]"
                )

            if data.flipped:
                cell_at = (x_cell, frame.x_to_column(y))
            else:
                cell_at = (frame.y_to_row(y), x_cell)
            current = grid.cell(*cell_at)
            if current is None:
                raise RasterConsistencyError(f"invalid cell {cell_at} for data point ({x}, {y})")

            if mode is DrawMode.DOT:
                grid.set_cell(*cell_at, Cell.series(column))
            else:
                grid.set_cell(*cell_at, next_count(current, column))
            drawn += 1
    return drawn
