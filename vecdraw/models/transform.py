"""
Affine transformation matrices.
Matrices use SVG component order (a, b, c, d, e, f) and angles in radians.
"""

import math
from typing import Iterable, List, Optional, Sequence, Tuple

from vecdraw.models.point import Point, PointLike

# Type definitions
Matrix = Tuple[float, float, float, float, float, float]

# Constants
IDENTITY_MATRIX: Matrix = (1.0, 0.0, 0.0, 1.0, 0.0, 0.0)
EPSILON = 1e-10


class TransformError(Exception):
    """Exception raised for invalid or singular transforms."""
    pass


class Transform:
    """
    Immutable 2D transformation matrix.

    Represents the matrix
    [a c e]
    [b d f]
    [0 0 1]
    mapping user coordinates to the parent coordinate system.
    """

    __slots__ = ('_matrix', '_hash')

    def __init__(self, matrix: Sequence[float] = IDENTITY_MATRIX):
        """
        Initialize transformation matrix.

        Args:
            matrix: Six matrix components (a, b, c, d, e, f)

        Raises:
            TransformError: If the matrix does not have six numeric components
        """
        if len(matrix) != 6:
            raise TransformError(f"A transform needs 6 components, got {len(matrix)}")
        try:
            self._matrix: Matrix = tuple(float(v) for v in matrix)
        except (TypeError, ValueError):
            raise TransformError(f"Transform components must be numbers, got {matrix!r}")
        self._hash = hash(self._matrix)

    @classmethod
    def identity(cls) -> 'Transform':
        return cls(IDENTITY_MATRIX)

    @classmethod
    def translate(cls, tx: float, ty: float) -> 'Transform':
        return cls((1, 0, 0, 1, tx, ty))

    @classmethod
    def scale(cls, sx: float, sy: Optional[float] = None) -> 'Transform':
        """
        Create scaling transformation.

        Args:
            sx: Scale factor in x direction
            sy: Scale factor in y direction (defaults to sx)
        """
        if sy is None:
            sy = sx
        return cls((sx, 0, 0, sy, 0, 0))

    @classmethod
    def rotate(cls, angle: float) -> 'Transform':
        """
        Create rotation transformation.

        Args:
            angle: Rotation angle in radians, clockwise on a y-down canvas
        """
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        return cls((cos_a, sin_a, -sin_a, cos_a, 0, 0))

    @classmethod
    def skew(cls, ax: float, ay: float = 0.0) -> 'Transform':
        """
        Create skew transformation.

        Args:
            ax: Skew angle along the x axis in radians
            ay: Skew angle along the y axis in radians
        """
        return cls((1, math.tan(ay), math.tan(ax), 1, 0, 0))

    @property
    def matrix(self) -> Matrix:
        return self._matrix

    @property
    def is_identity(self) -> bool:
        return all(abs(a - b) <= EPSILON for a, b in zip(self._matrix, IDENTITY_MATRIX))

    @property
    def determinant(self) -> float:
        a, b, c, d, _, _ = self._matrix
        return a * d - b * c

    @property
    def is_invertible(self) -> bool:
        return abs(self.determinant) > EPSILON

    @property
    def inverse(self) -> Optional['Transform']:
        """
        Get the inverse transformation if it exists.

        Returns:
            Inverse transform or None if not invertible
        """
        if not self.is_invertible:
            return None

        a, b, c, d, e, f = self._matrix
        det = self.determinant

        return Transform((
            d / det,
            -b / det,
            -c / det,
            a / det,
            (c * f - d * e) / det,
            (b * e - a * f) / det,
        ))

    @property
    def mean_scale(self) -> float:
        """Geometric mean of the scale factors (square root of |det|)."""
        return math.sqrt(abs(self.determinant))

    def multiply(self, other: 'Transform') -> 'Transform':
        """
        Multiply with another transformation (this * other).

        The result applies `other` first, then this transform.
        """
        a1, b1, c1, d1, e1, f1 = self._matrix
        a2, b2, c2, d2, e2, f2 = other._matrix

        return Transform((
            a1 * a2 + c1 * b2,
            b1 * a2 + d1 * b2,
            a1 * c2 + c1 * d2,
            b1 * c2 + d1 * d2,
            a1 * e2 + c1 * f2 + e1,
            b1 * e2 + d1 * f2 + f1,
        ))

    __matmul__ = multiply

    def transform_point(self, point: PointLike) -> Point:
        x, y = point
        a, b, c, d, e, f = self._matrix
        return Point(a * x + c * y + e, b * x + d * y + f)

    def transform_points(self, points: Iterable[PointLike]) -> List[Point]:
        a, b, c, d, e, f = self._matrix
        return [Point(a * x + c * y + e, b * x + d * y + f) for x, y in points]

    def transform_distance(self, vector: PointLike) -> Point:
        """Transform a vector, ignoring the translation part."""
        x, y = vector
        a, b, c, d, _, _ = self._matrix
        return Point(a * x + c * y, b * x + d * y)

    def to_svg_string(self, precision: int = 6) -> str:
        """
        Convert to SVG transform attribute string.

        Returns:
            SVG transform string, empty for the identity
        """
        if self.is_identity:
            return ""
        return "matrix(" + ",".join(f"{v:.{precision}g}" for v in self._matrix) + ")"

    def isclose(self, other: 'Transform', tolerance: float = EPSILON) -> bool:
        """Componentwise comparison within `tolerance`."""
        return all(abs(a - b) <= tolerance for a, b in zip(self._matrix, other._matrix))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Transform):
            return False
        return self._matrix == other._matrix

    def __hash__(self) -> int:
        return self._hash

    def __str__(self) -> str:
        return self.to_svg_string()

    def __repr__(self) -> str:
        return f"Transform({self._matrix})"
