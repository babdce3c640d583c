from __future__ import annotations

from dataclasses import dataclass

from termplot.errors import RasterConsistencyError
from termplot.glyphs import BLANK_GLYPH, BOUNDARY_GLYPH, HORIZONTAL_GLYPH, TICK_EVERY, TICK_GLYPH, VERTICAL_GLYPH
from termplot.raster.grid import Cell, Grid
from termplot.scales import Frame


@dataclass(frozen=True)
class AxisPlacement:
    x0_visible: bool
    y0_visible: bool
    vertical_at_x: float
    horizontal_at_y: float
    column: int
    row: int


def axis_positions(frame: Frame) -> AxisPlacement:
    """Locate the X=0 / Y=0 lines, or the nearest data boundary when zero is off the plot."""
    y0_visible = frame.min_y <= 0.0 <= frame.max_y
    x0_visible = frame.min_x <= 0.0 <= frame.max_x

    vertical_at_x = 0.0
    horizontal_at_y = 0.0
    if not x0_visible:
        vertical_at_x = frame.min_x if frame.min_x > 0.0 else frame.max_x
    if not y0_visible:
        horizontal_at_y = frame.min_y if frame.min_y > 0.0 else frame.max_y

    row = frame.point_to_cell((0.0, horizontal_at_y))[0]
    column = frame.point_to_cell((vertical_at_x, 0.0))[1]
    return AxisPlacement(
        x0_visible=x0_visible,
        y0_visible=y0_visible,
        vertical_at_x=vertical_at_x,
        horizontal_at_y=horizontal_at_y,
        column=column,
        row=row,
    )


def axis_glyph(index: int, *, solid: bool, line_glyph: str) -> str:
    if solid:
        return TICK_GLYPH if index % TICK_EVERY == 0 else line_glyph
    return BOUNDARY_GLYPH if index % TICK_EVERY == 0 else BLANK_GLYPH


def draw_axes(grid: Grid, frame: Frame) -> AxisPlacement:
    placement = axis_positions(frame)

    # vertical line, where X = 0
    for row in range(grid.n_rows):
        if not grid.contains(row, placement.column):
            raise RasterConsistencyError(
                f"invalid cell ({row}, {placement.column}) for axis component ({placement.vertical_at_x}, _)"
            )
        glyph = axis_glyph(row, solid=placement.x0_visible, line_glyph=VERTICAL_GLYPH)
        grid.set_cell(row, placement.column, Cell.axis(glyph))

    # horizontal line, where Y = 0
    for column in range(grid.n_columns):
        if not grid.contains(placement.row, column):
            raise RasterConsistencyError(
                f"invalid cell ({placement.row}, {column}) for axis component (_, {placement.horizontal_at_y})"
            )
        glyph = axis_glyph(column, solid=placement.y0_visible, line_glyph=HORIZONTAL_GLYPH)
        grid.set_cell(placement.row, column, Cell.axis(glyph))

    grid.set_cell(placement.row, placement.column, Cell.axis(TICK_GLYPH))
    return placement
