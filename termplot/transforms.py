from __future__ import annotations

import logging

import numpy as np

from termplot.errors import RasterConsistencyError
from termplot.scales import Frame
from termplot.series import DataMatrix


LOGGER = logging.getLogger(__name__)


def _log10_keep_zero(values: np.ndarray) -> np.ndarray:
    with np.errstate(divide="ignore", invalid="ignore"):
        logged = np.log10(values)
    # exactly zero stays zero; negatives end up NaN and are treated as missing
    return np.where(values == 0.0, 0.0, logged)


def log_transform(data: DataMatrix, *, log_x: bool = False, log_y: bool = False) -> DataMatrix:
    if not (log_x or log_y):
        return data
    xs = _log10_keep_zero(data.xs) if log_x else data.xs
    ys = tuple(_log10_keep_zero(y) for y in data.ys) if log_y else data.ys
    return DataMatrix(xs=xs, ys=ys, flipped=data.flipped)


def cdf_histogram(values: np.ndarray, frame: Frame) -> np.ndarray:
    """Count finite samples per future grid column; index i holds the count for column i."""
    finite = values[np.isfinite(values)]
    if finite.size == 0:
        return np.zeros(0, dtype=np.int64)
    columns = frame.value_to_column(finite, axis="y")
    if columns.min() < 0 or columns.max() > frame.width:
        raise RasterConsistencyError(
            f"histogram column range [{columns.min()}, {columns.max()}] is outside [0, {frame.width}]"
        )
    return np.bincount(columns)


def cdf_transform(data: DataMatrix, frame: Frame) -> DataMatrix:
    """Replace each series by its empirical CDF.

    The new X axis is in the original Y units, one step per grid column of
    `frame`, and the new Y values are the fraction of the series' samples at
    or below that step. X values of the input are discarded.
    """
    percentiles: list[np.ndarray] = []
    for index, ys in enumerate(data.ys):
        counts = cdf_histogram(ys, frame)
        total = int(counts.sum())
        percentiles.append(np.cumsum(counts) / total if total else np.empty(0, dtype=np.float64))
        LOGGER.debug("cdf series %d: %d samples over %d bins", index, total, counts.size)

    n_bins = max((p.size for p in percentiles), default=0)
    xs = frame.column_to_value(np.arange(n_bins, dtype=np.float64), axis="y")
    padded = tuple(_pad_tail(p, n_bins) for p in percentiles)
    return DataMatrix(xs=xs, ys=padded)


def _pad_tail(values: np.ndarray, length: int) -> np.ndarray:
    fill = values[-1] if values.size else np.nan
    out = np.full(length, fill, dtype=np.float64)
    out[: values.size] = values
    return out
