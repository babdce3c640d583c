from __future__ import annotations


class PlotDataError(ValueError):
    """Input data cannot be turned into a plot."""


class PlotConfigError(ValueError):
    """Rejected option or option combination."""


class RasterConsistencyError(RuntimeError):
    """Bounds model and rasterizer disagree; never caused by user input."""
