from termplot.api import PlotResult, plot
from termplot.config import PlotConfig
from termplot.errors import PlotConfigError, PlotDataError, RasterConsistencyError
from termplot.raster import DrawMode, Grid
from termplot.render import render
from termplot.scales import Frame
from termplot.series import DataMatrix

__all__ = [
    "DataMatrix",
    "DrawMode",
    "Frame",
    "Grid",
    "PlotConfig",
    "PlotConfigError",
    "PlotDataError",
    "PlotResult",
    "RasterConsistencyError",
    "plot",
    "render",
]
