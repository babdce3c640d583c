from __future__ import annotations

from collections.abc import Iterable
import logging
import math
import re

from termplot.series import DataMatrix, SeriesBuilder


LOGGER = logging.getLogger(__name__)
_TOKEN_SEPARATORS = re.compile(r"[\s,;:]+")


def parse_token(token: str) -> float:
    """Parse one numeric token; anything unreadable is a missing sample, not an error."""
    try:
        value = float(token)
    except ValueError:
        return math.nan
    if math.isinf(value):
        return math.nan
    return value


def parse_line(line: str) -> list[float]:
    return [parse_token(tok) for tok in _TOKEN_SEPARATORS.split(line.strip()) if tok]


def read_rows(lines: Iterable[str], *, x_is_row: bool = False) -> DataMatrix:
    """Build a data matrix from text lines.

    The first value on a line is its X and the rest are Y values for series
    0, 1, 2, ... in order. With `x_is_row` the 0-based line number is X and
    every value on the line is a Y value. Lines without tokens add no row.
    """
    builder = SeriesBuilder()
    skipped = 0
    for line_no, line in enumerate(lines):
        values = parse_line(line)
        if not values:
            skipped += 1
            continue
        if x_is_row:
            builder.push_row(float(line_no), values)
        else:
            builder.push_row(values[0], values[1:])
    data = builder.build()
    LOGGER.debug("read %d rows x %d series (%d empty lines)", data.n_rows, data.n_series, skipped)
    return data
