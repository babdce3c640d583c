from __future__ import annotations

from dataclasses import dataclass, field, replace
import logging
from typing import Sequence

import numpy as np

from termplot.errors import PlotDataError
from termplot.glyphs import MARKS


LOGGER = logging.getLogger(__name__)
MAX_SERIES = len(MARKS)


@dataclass(frozen=True)
class DataMatrix:
    """One X column and any number of Y series of the same length; NaN marks a missing sample."""

    xs: np.ndarray
    ys: tuple[np.ndarray, ...] = ()
    flipped: bool = False

    def __post_init__(self) -> None:
        xs = np.asarray(self.xs, dtype=np.float64)
        if xs.ndim != 1:
            raise PlotDataError("xs must be 1-D")
        ys = tuple(np.asarray(y, dtype=np.float64) for y in self.ys)
        for index, y in enumerate(ys):
            if y.shape != xs.shape:
                raise PlotDataError(f"series {index} length mismatch: {y.size} != {xs.size}")
        if len(ys) > MAX_SERIES:
            raise PlotDataError(f"at most {MAX_SERIES} series can be plotted, got {len(ys)}")
        object.__setattr__(self, "xs", xs)
        object.__setattr__(self, "ys", ys)

    @property
    def n_rows(self) -> int:
        return int(self.xs.size)

    @property
    def n_series(self) -> int:
        return len(self.ys)

    def flip(self) -> DataMatrix:
        return replace(self, flipped=not self.flipped)

    def x_extent(self) -> tuple[float, float] | None:
        """Finite extent of the values mapped onto grid columns."""
        return _finite_extent(self._ys_flat()) if self.flipped else _finite_extent(self.xs)

    def y_extent(self) -> tuple[float, float] | None:
        """Finite extent of the values mapped onto grid rows."""
        return _finite_extent(self.xs) if self.flipped else _finite_extent(self._ys_flat())

    def _ys_flat(self) -> np.ndarray:
        if not self.ys:
            return np.empty(0, dtype=np.float64)
        return np.concatenate(self.ys)


@dataclass
class SeriesBuilder:
    """Accumulates rows while keeping every series back-filled to the row count."""

    max_series: int = MAX_SERIES
    _xs: list[float] = field(default_factory=list)
    _ys: list[list[float]] = field(default_factory=list)
    _dropped_warned: bool = False

    def push_row(self, x: float, values: Sequence[float]) -> None:
        row = len(self._xs)
        for column, value in enumerate(values):
            if column >= len(self._ys):
                if column >= self.max_series:
                    if not self._dropped_warned:
                        LOGGER.warning(
                            "dropping series beyond the first %d; no mark left to draw them with",
                            self.max_series,
                        )
                        self._dropped_warned = True
                    break
                assert column == len(self._ys), "series are only ever appended one at a time"
                self._ys.append([np.nan] * row)
            self._ys[column].append(float(value))
        self._xs.append(float(x))
        for ys in self._ys:
            if len(ys) < len(self._xs):
                ys.append(np.nan)

    def build(self) -> DataMatrix:
        return DataMatrix(
            xs=np.asarray(self._xs, dtype=np.float64),
            ys=tuple(np.asarray(ys, dtype=np.float64) for ys in self._ys),
        )


def _finite_extent(values: np.ndarray) -> tuple[float, float] | None:
    finite = values[np.isfinite(values)]
    if finite.size == 0:
        return None
    return float(np.min(finite)), float(np.max(finite))
