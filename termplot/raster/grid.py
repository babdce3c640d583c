from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterator

import numpy as np

from termplot.errors import RasterConsistencyError
from termplot.glyphs import AXIS_GLYPHS, BLANK_GLYPH, COUNT_DIGITS, COUNT_MAX, COUNT_MIN, MARKS, SATURATED_GLYPH


class CellKind(IntEnum):
    BLANK = 0
    AXIS = 1
    SERIES = 2
    COUNT = 3
    SATURATED = 4


@dataclass(frozen=True)
class Cell:
    """Tagged cell content; turned into a display glyph only when the grid is rendered."""

    kind: CellKind
    value: int = 0

    @classmethod
    def blank(cls) -> Cell:
        return cls(CellKind.BLANK)

    @classmethod
    def axis(cls, glyph: str) -> Cell:
        if glyph not in AXIS_GLYPHS:
            raise ValueError(f"not an axis glyph: {glyph!r}")
        if glyph == BLANK_GLYPH:
            return cls.blank()
        return cls(CellKind.AXIS, ord(glyph))

    @classmethod
    def series(cls, index: int) -> Cell:
        return cls(CellKind.SERIES, index)

    @classmethod
    def count(cls, n: int) -> Cell:
        if n < COUNT_MIN or n > COUNT_MAX:
            raise ValueError(f"count must be within [{COUNT_MIN}, {COUNT_MAX}], got {n}")
        return cls(CellKind.COUNT, n)

    @classmethod
    def saturated(cls) -> Cell:
        return cls(CellKind.SATURATED)


class Grid:
    """Fixed rows x columns array of cells, row 0 at the top."""

    def __init__(self, rows: int, columns: int, marks: str = MARKS) -> None:
        if rows <= 0 or columns <= 0:
            raise ValueError("rows and columns must be > 0")
        self.n_rows = rows
        self.n_columns = columns
        self.marks = marks
        self._kind = np.full((rows, columns), int(CellKind.BLANK), dtype=np.uint8)
        self._value = np.zeros((rows, columns), dtype=np.int32)

    @property
    def shape(self) -> tuple[int, int]:
        return (self.n_rows, self.n_columns)

    def contains(self, row: int, column: int) -> bool:
        return 0 <= row < self.n_rows and 0 <= column < self.n_columns

    def cell(self, row: int, column: int) -> Cell | None:
        if not self.contains(row, column):
            return None
        return Cell(CellKind(int(self._kind[row, column])), int(self._value[row, column]))

    def set_cell(self, row: int, column: int, cell: Cell) -> None:
        if not self.contains(row, column):
            raise RasterConsistencyError(f"cell ({row}, {column}) is outside the {self.n_rows}x{self.n_columns} grid")
        self._kind[row, column] = int(cell.kind)
        self._value[row, column] = cell.value

    def glyph_of(self, cell: Cell) -> str:
        if cell.kind is CellKind.BLANK:
            return BLANK_GLYPH
        if cell.kind is CellKind.AXIS:
            return chr(cell.value)
        if cell.kind is CellKind.SERIES:
            return self.marks[cell.value]
        if cell.kind is CellKind.COUNT:
            return COUNT_DIGITS[cell.value]
        return SATURATED_GLYPH

    def rows(self) -> Iterator[str]:
        for kinds, values in zip(self._kind.tolist(), self._value.tolist(), strict=True):
            yield "".join(self.glyph_of(Cell(CellKind(k), v)) for k, v in zip(kinds, values, strict=True))

    def __str__(self) -> str:
        return "\n".join(self.rows())
