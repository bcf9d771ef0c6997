"""
Point model and planar geometry helpers.
Points are immutable (x, y) values in canvas units, with y growing downwards.
"""

import math
import numbers
from typing import Iterable, List, NamedTuple, Sequence, Tuple, Union

PointLike = Union['Point', Tuple[float, float], Sequence[float]]


class Point(NamedTuple):
    """Immutable 2D point with vector arithmetic."""

    x: float
    y: float

    def __add__(self, other: PointLike) -> 'Point':
        ox, oy = other
        return Point(self.x + ox, self.y + oy)

    def __radd__(self, other: PointLike) -> 'Point':
        return self.__add__(other)

    def __sub__(self, other: PointLike) -> 'Point':
        ox, oy = other
        return Point(self.x - ox, self.y - oy)

    def __rsub__(self, other: PointLike) -> 'Point':
        ox, oy = other
        return Point(ox - self.x, oy - self.y)

    def __mul__(self, k: float) -> 'Point':
        return Point(self.x * k, self.y * k)

    __rmul__ = __mul__

    def __truediv__(self, k: float) -> 'Point':
        return Point(self.x / k, self.y / k)

    def __neg__(self) -> 'Point':
        return Point(-self.x, -self.y)

    @property
    def norm(self) -> float:
        """Distance from the origin."""
        return math.hypot(self.x, self.y)

    def dot(self, other: PointLike) -> float:
        ox, oy = other
        return self.x * ox + self.y * oy

    def isclose(self, other: PointLike, abs_tol: float = 1e-9) -> bool:
        ox, oy = other
        return math.isclose(self.x, ox, abs_tol=abs_tol) and math.isclose(self.y, oy, abs_tol=abs_tol)


# The origin
O = Point(0.0, 0.0)


def as_point(value: PointLike) -> Point:
    """
    Coerce a 2-sequence into a Point.

    Raises:
        TypeError: If the value is not a pair of numbers
    """
    if isinstance(value, Point):
        return value
    try:
        x, y = value
        return Point(float(x), float(y))
    except (TypeError, ValueError):
        raise TypeError(f"Expected a point (x, y), got {value!r}")


def is_point_like(value) -> bool:
    """Check whether a value can be used as a point."""
    if isinstance(value, Point):
        return True
    if isinstance(value, (str, bytes)):
        return False
    try:
        x, y = value
    except (TypeError, ValueError):
        return False
    return isinstance(x, numbers.Real) and isinstance(y, numbers.Real)


def distance(a: PointLike, b: PointLike) -> float:
    """Euclidean distance between two points."""
    return (as_point(b) - as_point(a)).norm


def midpoint(a: PointLike, b: PointLike) -> Point:
    """Point halfway between a and b."""
    return between(a, b, 0.5)


def between(a: PointLike, b: PointLike, t: float = 0.5) -> Point:
    """
    Linear interpolation between two points.

    Args:
        a: Start point (returned for t=0)
        b: End point (returned for t=1)
        t: Interpolation parameter

    Returns:
        Interpolated point
    """
    a = as_point(a)
    b = as_point(b)
    return Point(a.x + (b.x - a.x) * t, a.y + (b.y - a.y) * t)


def polar(r: float, theta: float) -> Point:
    """Point at distance r from the origin and angle theta (radians, clockwise)."""
    return Point(r * math.cos(theta), r * math.sin(theta))


def perpendicular(a: PointLike, b: PointLike, d: float) -> Point:
    """
    Point at distance d from a, perpendicular to the line a-b.

    Positive distances lie to the left when walking from a to b on the canvas.
    """
    a = as_point(a)
    b = as_point(b)
    length = distance(a, b)
    if length == 0:
        raise ValueError("Cannot find a perpendicular to a zero-length line")
    dx = (b.x - a.x) / length
    dy = (b.y - a.y) / length
    return Point(a.x + dy * d, a.y - dx * d)


def rotate_point(p: PointLike, angle: float, about: PointLike = O) -> Point:
    """Rotate p by angle radians around the point `about`."""
    p = as_point(p)
    about = as_point(about)
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    dx = p.x - about.x
    dy = p.y - about.y
    return Point(about.x + dx * cos_a - dy * sin_a, about.y + dx * sin_a + dy * cos_a)


def bounding_box(points: Iterable[PointLike]) -> Tuple[Point, Point]:
    """
    Smallest axis-aligned box containing all points.

    Returns:
        Tuple of (top-left, bottom-right) corners

    Raises:
        ValueError: If no points are given
    """
    pts = [as_point(p) for p in points]
    if not pts:
        raise ValueError("Cannot compute the bounding box of no points")
    xs = [p.x for p in pts]
    ys = [p.y for p in pts]
    return Point(min(xs), min(ys)), Point(max(xs), max(ys))


def ngon_points(
    center: PointLike,
    radius: float,
    sides: int,
    orientation: float = 0.0
) -> List[Point]:
    """
    Vertices of a regular polygon.

    Args:
        center: Polygon center
        radius: Distance from the center to each vertex
        sides: Number of sides (at least 3)
        orientation: Angle of the first vertex in radians

    Returns:
        List of vertices, in clockwise order
    """
    if sides < 3:
        raise ValueError(f"A polygon needs at least 3 sides, got {sides}")
    center = as_point(center)
    step = 2 * math.pi / sides
    return [center + polar(radius, orientation + i * step) for i in range(sides)]


def star_points(
    center: PointLike,
    radius: float,
    npoints: int = 5,
    ratio: float = 0.5,
    orientation: float = 0.0
) -> List[Point]:
    """
    Vertices of a star, alternating outer and inner points.

    Args:
        center: Star center
        radius: Outer radius
        npoints: Number of tips (at least 2)
        ratio: Inner radius as a fraction of the outer radius
        orientation: Angle of the first tip in radians

    Returns:
        List of 2 * npoints vertices
    """
    if npoints < 2:
        raise ValueError(f"A star needs at least 2 points, got {npoints}")
    center = as_point(center)
    step = math.pi / npoints
    vertices = []
    for i in range(2 * npoints):
        r = radius if i % 2 == 0 else radius * ratio
        vertices.append(center + polar(r, orientation + i * step))
    return vertices
