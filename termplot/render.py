from __future__ import annotations

import math

from termplot.api import PlotResult
from termplot.raster import DrawMode


def format_bound(value: float) -> str:
    if math.isfinite(value) and value.is_integer():
        return str(int(value))
    return repr(value)


def render_header(result: PlotResult) -> str:
    config = result.config
    min_x, max_x = result.frame.x_bounds()
    min_y, max_y = result.frame.y_bounds()
    # labels follow the screen axes; under flip the stored X values are drawn vertically
    log_horizontal, log_vertical = (config.log_y, config.log_x) if result.data.flipped else (config.log_x, config.log_y)
    x_label = "log x" if log_horizontal else "x"
    y_label = "log y" if log_vertical else "y"
    header = (
        f"    {x_label}: [{format_bound(min_x)} - {format_bound(max_x)}]"
        f"    {y_label}: [{format_bound(min_y)} - {format_bound(max_y)}]"
    )
    if config.mode is DrawMode.DOT:
        marks = result.grid.marks
        legend = ", ".join(f"{column}: {marks[column]}" for column in range(result.data.n_series))
        header += f" -- {legend}"
    return header


def render(result: PlotResult) -> str:
    lines = [render_header(result), *result.grid.rows()]
    return "\n".join(lines) + "\n"
