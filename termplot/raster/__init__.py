from .draw_axes import AxisPlacement, axis_positions, draw_axes
from .draw_markers import DrawMode, draw_markers, next_count
from .grid import Cell, CellKind, Grid

__all__ = [
    "AxisPlacement",
    "Cell",
    "CellKind",
    "DrawMode",
    "Grid",
    "axis_positions",
    "draw_axes",
    "draw_markers",
    "next_count",
]
