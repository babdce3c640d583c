from __future__ import annotations


# One mark per series, assigned by column index.
MARKS = "@*^!~%ABCDEFGHIJKLMNOPQRSTUVWXYZ"

BLANK_GLYPH = " "
AXIS_GLYPHS = frozenset("+-|. ")
TICK_GLYPH = "+"
VERTICAL_GLYPH = "|"
HORIZONTAL_GLYPH = "-"
BOUNDARY_GLYPH = "."

# Base-36 overlap counter; a single occupant shows its mark, so counting starts at 2.
COUNT_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
COUNT_MIN = 2
COUNT_MAX = len(COUNT_DIGITS) - 1
SATURATED_GLYPH = "#"

TICK_EVERY = 5
