from __future__ import annotations

import argparse
from dataclasses import replace
import io
import logging
from pathlib import Path
import sys
from typing import Sequence, TextIO

from termplot.adapters import read_rows
from termplot.api import plot
from termplot.config import COMPACT_SIZE, PlotConfig, parse_dimensions
from termplot.errors import PlotConfigError, PlotDataError
from termplot.raster import DrawMode
from termplot.render import render


LOGGER = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="termplot",
        description="Scatter-plot whitespace-separated numeric columns as text.",
    )
    parser.add_argument("input", nargs="?", type=Path, default=None, help="Input file. Default: stdin.")
    parser.add_argument("-d", "--dimensions", default=None, metavar="WxH", help="Plot size. Default: 72x40.")
    parser.add_argument(
        "--compact",
        action="store_true",
        help=f"Use the compact {COMPACT_SIZE[0]}x{COMPACT_SIZE[1]} plot size.",
    )
    parser.add_argument(
        "-l",
        "--log",
        action="append",
        choices=["x", "y"],
        default=[],
        help="Plot the base-10 log of an axis (zero is kept as zero). May be repeated.",
    )
    parser.add_argument(
        "-r",
        "--row-index",
        action="store_true",
        help="Use the line number as X; every value on a line is then a Y value.",
    )
    parser.add_argument("--flip", action="store_true", help="Swap the X and Y axes.")
    parser.add_argument("-m", "--mode", choices=[m.value for m in DrawMode], default=DrawMode.DOT.value)
    parser.add_argument("--cdf", action="store_true", help="Plot the cumulative distribution of each series.")
    parser.add_argument("-A", "--no-axes", action="store_true", help="Do not draw axis lines.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log pipeline details to stderr.")
    return parser


def config_from_args(args: argparse.Namespace) -> PlotConfig:
    config = PlotConfig(
        log_x="x" in args.log,
        log_y="y" in args.log,
        x_is_row=args.row_index,
        flip=args.flip,
        mode=DrawMode(args.mode),
        cdf=args.cdf,
        draw_axes=not args.no_axes,
    )
    if args.compact:
        config = replace(config, width=COMPACT_SIZE[0], height=COMPACT_SIZE[1])
    if args.dimensions is not None:
        width, height = parse_dimensions(args.dimensions)
        config = replace(config, width=width, height=height)
    return config.validate()


def run(args: argparse.Namespace, stdin: TextIO, stdout: TextIO) -> None:
    config = config_from_args(args)
    if args.input is None:
        if isinstance(stdin, io.TextIOWrapper):
            # decode stdin as leniently as an input file
            stdin.reconfigure(errors="replace")
        data = read_rows(stdin, x_is_row=config.x_is_row)
    else:
        with args.input.open("r", encoding="utf-8", errors="replace") as fh:
            data = read_rows(fh, x_is_row=config.x_is_row)
    result = plot(data, config)
    stdout.write(render(result))


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    try:
        run(args, sys.stdin, sys.stdout)
    except (PlotConfigError, PlotDataError) as exc:
        LOGGER.debug("plot failed", exc_info=True)
        print(f"{parser.prog}: error: {exc}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
