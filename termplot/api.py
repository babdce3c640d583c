from __future__ import annotations

from dataclasses import dataclass
import logging

from termplot.config import PlotConfig
from termplot.raster import Grid, draw_axes, draw_markers
from termplot.scales import Frame
from termplot.series import DataMatrix
from termplot.transforms import cdf_transform, log_transform


LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlotResult:
    grid: Grid
    frame: Frame
    data: DataMatrix
    config: PlotConfig


def prepare(data: DataMatrix, config: PlotConfig) -> tuple[DataMatrix, Frame]:
    """Apply the data transforms and return the matrix to draw with the frame it maps through."""
    if config.flip and not data.flipped:
        data = data.flip()
    data = log_transform(data, log_x=config.log_x, log_y=config.log_y)
    frame = Frame.new_over(config.width, config.height, data)
    if config.cdf:
        if not config.x_is_row:
            LOGGER.warning("CDF is only over the Y value; explicit X values are ignored")
        data = cdf_transform(data, frame)
        frame = Frame.new_over(config.width, config.height, data)
    return data, frame


def plot(data: DataMatrix, config: PlotConfig | None = None) -> PlotResult:
    config = (config or PlotConfig()).validate()
    data, frame = prepare(data, config)

    grid = Grid(rows=config.height, columns=config.width)
    if config.draw_axes:
        draw_axes(grid, frame)
    drawn = draw_markers(grid, frame, data, config.mode)
    LOGGER.debug("drew %d samples from %d series in %s mode", drawn, data.n_series, config.mode.value)
    return PlotResult(grid=grid, frame=frame, data=data, config=config)
