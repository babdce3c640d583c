from __future__ import annotations

import math
import unittest

import numpy as np

from termplot import DataMatrix, Frame, PlotConfigError, PlotDataError
from termplot.scales import PAD, pin_to_zero, round_half_away


def _frame(xs, ys, width: int = 12, height: int = 12, flipped: bool = False) -> Frame:
    return Frame.new_over(width, height, DataMatrix(xs=xs, ys=ys, flipped=flipped))


class RoundingTests(unittest.TestCase):
    def test_ties_round_away_from_zero(self) -> None:
        self.assertEqual(round_half_away(2.5), 3)
        self.assertEqual(round_half_away(-2.5), -3)
        self.assertEqual(round_half_away(0.49), 0)
        self.assertEqual(round_half_away(3.5), 4)

    def test_value_just_below_half_rounds_down(self) -> None:
        below_half = 0.49999999999999994
        self.assertEqual(round_half_away(below_half), 0)
        self.assertEqual(round_half_away(-below_half), 0)
        self.assertEqual(round_half_away(np.asarray([below_half, -below_half])).tolist(), [0, 0])

    def test_array_rounding_matches_scalar(self) -> None:
        out = round_half_away(np.asarray([0.5, 1.5, 2.4, -0.5, -2.5]))
        self.assertEqual(out.tolist(), [1, 2, 2, -1, -3])


class ZeroCrossingTests(unittest.TestCase):
    def test_data_far_from_zero_keeps_its_extent(self) -> None:
        frame = _frame([5.0, 6.0, 7.0], [[1.0, 2.0, 3.0]])
        self.assertEqual(frame.x_bounds(), (5.0, 7.0))
        self.assertEqual(frame.range_x, 2.0)

    def test_data_close_to_zero_pins_minimum(self) -> None:
        frame = _frame([0.1, 0.2], [[1.0, 2.0]])
        self.assertEqual(frame.min_x, 0.0)
        self.assertEqual(frame.max_x, 0.2)
        self.assertEqual(frame.range_x, 0.2)

    def test_negative_data_close_to_zero_pins_maximum(self) -> None:
        lo, hi, span = pin_to_zero(-0.2, -0.1)
        self.assertEqual((lo, hi, span), (-0.2, 0.0, 0.2))

    def test_negative_data_far_from_zero_is_left_alone(self) -> None:
        self.assertEqual(pin_to_zero(-7.0, -5.0), (-7.0, -5.0, 2.0))

    def test_crossing_data_is_left_alone(self) -> None:
        self.assertEqual(pin_to_zero(-1.0, 2.0), (-1.0, 2.0, 3.0))

    def test_y_axis_is_handled_independently(self) -> None:
        frame = _frame([5.0, 6.0, 7.0], [[1.0, 2.0, 3.0]])
        self.assertEqual(frame.y_bounds(), (0.0, 3.0))
        self.assertEqual(frame.range_y, 3.0)


class DegenerateBoundsTests(unittest.TestCase):
    def test_single_value_is_widened_by_one(self) -> None:
        frame = _frame([3.0, 3.0], [[3.0, 3.0]])
        self.assertEqual(frame.x_bounds(), (3.0, 4.0))
        self.assertEqual(frame.range_xy(), (1.0, 1.0))

    def test_single_point_maps_inside_the_grid(self) -> None:
        frame = _frame([3.0], [[-3.0]])
        row, column = frame.point_to_cell((3.0, -3.0))
        self.assertTrue(0 <= row < 12)
        self.assertTrue(0 <= column < 12)

    def test_non_finite_values_are_ignored(self) -> None:
        frame = _frame([1.0, math.nan, 3.0, math.inf], [[-1.0, 2.0, math.nan, 1.0]])
        self.assertEqual(frame.x_bounds(), (0.0, 3.0))
        self.assertEqual(frame.y_bounds(), (-1.0, 2.0))

    def test_no_finite_x_is_a_data_error(self) -> None:
        with self.assertRaises(PlotDataError):
            _frame([math.nan], [[1.0]])

    def test_too_small_grid_is_a_config_error(self) -> None:
        with self.assertRaises(PlotConfigError):
            _frame([0.0, 1.0], [[0.0, 1.0]], width=2)

    def test_no_series_is_a_data_error(self) -> None:
        with self.assertRaises(PlotDataError):
            _frame([1.0, 2.0], [])


class MappingTests(unittest.TestCase):
    def setUp(self) -> None:
        self.frame = _frame([0.0, 4.0], [[0.0, 4.0]])

    def test_x_extremes_map_to_first_and_last_plot_column(self) -> None:
        self.assertEqual(self.frame.x_to_column(0.0), 0)
        self.assertEqual(self.frame.x_to_column(4.0), 12 - PAD)

    def test_x_midpoint_tie_rounds_away_from_zero(self) -> None:
        # 10 * 1/4 = 2.5
        self.assertEqual(self.frame.x_to_column(1.0), 3)

    def test_rows_are_flipped(self) -> None:
        self.assertEqual(self.frame.y_to_row(0.0), 11)
        self.assertEqual(self.frame.y_to_row(4.0), 1)
        self.assertEqual(self.frame.y_to_row(1.0), 8)

    def test_point_to_cell_is_row_then_column(self) -> None:
        self.assertEqual(self.frame.point_to_cell((4.0, 0.0)), (11, 10))

    def test_mappings_accept_arrays(self) -> None:
        columns = self.frame.x_to_column(np.asarray([0.0, 2.0, 4.0]))
        self.assertEqual(columns.tolist(), [0, 5, 10])

    def test_column_round_trip_on_y_axis(self) -> None:
        self.assertEqual(self.frame.value_to_column(2.0, axis="y"), 5)
        self.assertEqual(self.frame.column_to_value(5, axis="y"), 2.0)

    def test_unknown_axis_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            self.frame.value_to_column(1.0, axis="z")  # type: ignore[arg-type]


class FlippedExtentTests(unittest.TestCase):
    def test_flipped_data_swaps_extents(self) -> None:
        data = DataMatrix(xs=[0.0, 10.0], ys=[[1.0, 2.0]], flipped=True)
        self.assertEqual(data.x_extent(), (1.0, 2.0))
        self.assertEqual(data.y_extent(), (0.0, 10.0))

    def test_flip_only_toggles_metadata(self) -> None:
        data = DataMatrix(xs=[0.0, 10.0], ys=[[1.0, 2.0]])
        flipped = data.flip()
        self.assertTrue(flipped.flipped)
        np.testing.assert_array_equal(flipped.xs, data.xs)


if __name__ == "__main__":
    unittest.main()
