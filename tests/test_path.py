"""
Tests for the path model and arc approximation.
"""

import math
import unittest

from vecdraw.models.path import CLOSE, CURVE, LINE, MOVE, Path, arc_beziers, format_number
from vecdraw.models.point import Point, distance
from vecdraw.models.transform import Transform


class TestFormatNumber(unittest.TestCase):
    """Tests for coordinate formatting."""

    def test_format(self):
        self.assertEqual(format_number(1.0), "1")
        self.assertEqual(format_number(1.23456), "1.235")
        self.assertEqual(format_number(-0.0001), "0")
        self.assertEqual(format_number(2.5, 0), "2")
        self.assertEqual(format_number(10.50), "10.5")


class TestArcBeziers(unittest.TestCase):
    """Tests for arc_beziers."""

    def test_full_circle_uses_quarter_segments(self):
        start, curves = arc_beziers((0, 0), 10, 0, 2 * math.pi)
        self.assertEqual(len(curves), 4)
        self.assertTrue(start.isclose((10, 0)))
        self.assertTrue(curves[0][2].isclose((0, 10)))
        self.assertTrue(curves[-1][2].isclose((10, 0)))

    def test_endpoints_on_circle(self):
        _, curves = arc_beziers((5, 5), 3, 0.2, 2.9)
        for _, _, end in curves:
            self.assertAlmostEqual(distance((5, 5), end), 3)

    def test_clockwise_wraps_forward(self):
        start, curves = arc_beziers((0, 0), 1, math.pi / 2, 0)
        # Clockwise from 90 to 0 degrees goes the long way round
        self.assertEqual(len(curves), 3)
        self.assertTrue(start.isclose((0, 1)))
        self.assertTrue(curves[-1][2].isclose((1, 0)))

    def test_huge_angles_reduce_to_one_turn(self):
        start, curves = arc_beziers((0, 0), 10, 1e9, 0)
        self.assertLessEqual(len(curves), 4)
        self.assertAlmostEqual(distance((0, 0), start), 10)
        self.assertAlmostEqual(distance((0, 0), curves[-1][2]), 10)
        _, curves = arc_beziers((0, 0), 10, -1e9, 0, clockwise=False)
        self.assertLessEqual(len(curves), 4)

    def test_counter_clockwise(self):
        _, curves = arc_beziers((0, 0), 1, math.pi / 2, 0, clockwise=False)
        self.assertEqual(len(curves), 1)
        self.assertTrue(curves[0][2].isclose((1, 0)))


class TestPath(unittest.TestCase):
    """Tests for the Path class."""

    def test_build_and_serialise(self):
        path = Path().move_to((0, 0)).line_to((10, 0)).line_to((10, 10)).close()
        self.assertEqual([s.command for s in path.segments], [MOVE, LINE, LINE, CLOSE])
        self.assertEqual(path.to_svg_data(), "M0,0 L10,0 L10,10 Z")
        self.assertEqual(path.current_point, Point(0, 0))

    def test_line_without_current_point_moves(self):
        path = Path().line_to((3, 4))
        self.assertEqual(path.segments[0].command, MOVE)
        self.assertFalse(path.is_paintable)

    def test_curve_without_current_point(self):
        path = Path().curve_to((1, 1), (2, 2), (3, 3))
        self.assertEqual([s.command for s in path.segments], [MOVE, CURVE])
        self.assertEqual(path.current_point, Point(3, 3))

    def test_close_is_not_repeated(self):
        path = Path().move_to((0, 0)).line_to((1, 0)).close().close()
        self.assertEqual(len(path), 3)

    def test_clear(self):
        path = Path().move_to((0, 0)).line_to((1, 1))
        path.clear()
        self.assertTrue(path.is_empty)
        self.assertFalse(path.has_current_point)

    def test_transformed_and_bounds(self):
        path = Path().move_to((0, 0)).line_to((2, 3))
        moved = path.transformed(Transform.translate(10, 20))
        self.assertEqual(moved.bounds(), (Point(10, 20), Point(12, 23)))
        self.assertEqual(path.bounds(), (Point(0, 0), Point(2, 3)))
        self.assertIsNone(Path().bounds())

    def test_svg_data_with_transform(self):
        path = Path().move_to((10, 10)).line_to((20, 10))
        data = path.to_svg_data(Transform.translate(-10, -10))
        self.assertEqual(data, "M0,0 L10,0")

    def test_copy_is_independent(self):
        path = Path().move_to((0, 0))
        copy = path.copy()
        copy.line_to((1, 1))
        self.assertEqual(len(path), 1)
        self.assertEqual(len(copy), 2)

    def test_extend(self):
        path = Path().move_to((0, 0)).line_to((1, 0))
        path.extend(Path().move_to((5, 5)).line_to((6, 6)))
        self.assertEqual(len(path), 4)
        self.assertEqual(path.current_point, Point(6, 6))


if __name__ == "__main__":
    unittest.main()
