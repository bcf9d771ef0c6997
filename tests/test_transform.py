"""
Tests for affine transforms.
"""

import math
import unittest

from vecdraw.models.point import Point
from vecdraw.models.transform import Transform, TransformError


class TestTransform(unittest.TestCase):
    """Tests for the Transform class."""

    def test_identity(self):
        t = Transform.identity()
        self.assertTrue(t.is_identity)
        self.assertEqual(t.to_svg_string(), "")
        self.assertEqual(t.transform_point((3, 4)), Point(3, 4))

    def test_invalid_matrix(self):
        with self.assertRaises(TransformError):
            Transform((1, 0, 0, 1))

    def test_translate_scale_rotate(self):
        self.assertEqual(Transform.translate(5, 6).transform_point((1, 1)), Point(6, 7))
        self.assertEqual(Transform.scale(2).transform_point((1, 3)), Point(2, 6))
        self.assertEqual(Transform.scale(2, 3).transform_point((1, 1)), Point(2, 3))
        rotated = Transform.rotate(math.pi / 2).transform_point((1, 0))
        self.assertTrue(rotated.isclose((0, 1)))

    def test_multiply_applies_other_first(self):
        t = Transform.translate(10, 0).multiply(Transform.scale(2))
        self.assertEqual(t.transform_point((1, 1)), Point(12, 2))
        self.assertEqual(Transform.translate(10, 0) @ Transform.scale(2), t)

    def test_inverse(self):
        t = Transform.translate(5, -3).multiply(Transform.rotate(0.3)).multiply(Transform.scale(2, 4))
        p = Point(7, 11)
        self.assertTrue(t.inverse.transform_point(t.transform_point(p)).isclose(p))
        self.assertIsNone(Transform.scale(0).inverse)
        self.assertFalse(Transform.scale(0, 1).is_invertible)

    def test_determinant_and_mean_scale(self):
        t = Transform.scale(2, 8)
        self.assertAlmostEqual(t.determinant, 16)
        self.assertAlmostEqual(t.mean_scale, 4)

    def test_transform_distance_ignores_translation(self):
        t = Transform.translate(100, 100).multiply(Transform.scale(2))
        self.assertEqual(t.transform_distance((1, 2)), Point(2, 4))

    def test_svg_string(self):
        self.assertEqual(Transform.translate(300, 300).to_svg_string(), "matrix(1,0,0,1,300,300)")

    def test_equality(self):
        self.assertEqual(Transform.translate(1, 2), Transform.translate(1, 2))
        self.assertNotEqual(Transform.translate(1, 0), Transform.identity())
        self.assertEqual(hash(Transform.translate(1, 2)), hash(Transform.translate(1, 2)))

    def test_isclose_tolerates_rounding(self):
        self.assertTrue(Transform.rotate(2 * math.pi).isclose(Transform.identity()))
        self.assertFalse(Transform.translate(1e-3, 0).isclose(Transform.identity()))

    def test_hash_matches_equality(self):
        a = Transform((1, 0, 0, 1, 0, 0))
        b = Transform((1, 0, 0, 1, 1e-12, 0))
        self.assertNotEqual(a, b)
        self.assertEqual(len({a, b}), 2)
        self.assertEqual(len({a, Transform.identity()}), 1)


if __name__ == "__main__":
    unittest.main()
