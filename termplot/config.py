from __future__ import annotations

from dataclasses import dataclass

from termplot.errors import PlotConfigError
from termplot.glyphs import AXIS_GLYPHS, COUNT_DIGITS, MARKS, SATURATED_GLYPH
from termplot.raster.draw_markers import DrawMode
from termplot.scales import PAD


DEFAULT_SIZE = (72, 40)
COMPACT_SIZE = (90, 25)


def check_glyph_alphabets(marks: str = MARKS) -> None:
    """Series marks must not be confusable with axis or counter glyphs."""
    if len(set(marks)) != len(marks):
        raise PlotConfigError(f"mark alphabet contains duplicates: {marks!r}")
    reserved = AXIS_GLYPHS | set(COUNT_DIGITS) | {SATURATED_GLYPH}
    clash = sorted(set(marks) & reserved)
    if clash:
        raise PlotConfigError(f"mark alphabet overlaps axis/counter glyphs: {''.join(clash)!r}")


def parse_dimensions(value: str) -> tuple[int, int]:
    width, sep, height = value.partition("x")
    if not sep:
        raise PlotConfigError(
            f"dimensions must be given as WxH (eg, {DEFAULT_SIZE[0]}x{DEFAULT_SIZE[1]}, which is the default)"
        )
    try:
        return int(width), int(height)
    except ValueError as exc:
        raise PlotConfigError(f"invalid dimensions {value!r}") from exc


@dataclass(frozen=True)
class PlotConfig:
    width: int = DEFAULT_SIZE[0]
    height: int = DEFAULT_SIZE[1]
    log_x: bool = False
    log_y: bool = False
    x_is_row: bool = False
    flip: bool = False
    mode: DrawMode = DrawMode.DOT
    cdf: bool = False
    draw_axes: bool = True

    def validate(self) -> PlotConfig:
        if self.width <= PAD or self.height <= PAD:
            raise PlotConfigError(f"width and height must be > {PAD}, got {self.width}x{self.height}")
        if self.cdf:
            if self.flip:
                raise PlotConfigError("CDF is only over the Y value; it cannot be combined with swapped axes")
            if self.log_x:
                raise PlotConfigError(
                    "CDF is only over the Y value and changes the axes; logarithmic X would have no effect"
                )
        check_glyph_alphabets()
        return self
