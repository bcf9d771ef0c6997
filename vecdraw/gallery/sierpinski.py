"""
Recursive Sierpinski triangle.
"""

import math
from typing import List, Sequence, Tuple

from vecdraw import api
from vecdraw.macros import draw
from vecdraw.models.color import Color
from vecdraw.models.point import O, Point, PointLike, as_point, midpoint, ngon_points

Triangle = Tuple[Point, Point, Point]


def sierpinski_triangles(points: Sequence[PointLike], depth: int) -> List[Triangle]:
    """
    Subdivide a triangle `depth` times.

    Args:
        points: The three corners of the outer triangle
        depth: Number of subdivisions (0 returns the triangle itself)

    Returns:
        The 3**depth triangles of the deepest level
    """
    if depth < 0:
        raise ValueError(f"Depth cannot be negative, got {depth}")
    if len(points) != 3:
        raise ValueError(f"A triangle needs 3 points, got {len(points)}")

    a, b, c = (as_point(p) for p in points)
    if depth == 0:
        return [(a, b, c)]

    ab, bc, ca = midpoint(a, b), midpoint(b, c), midpoint(c, a)
    return (
        sierpinski_triangles((a, ab, ca), depth - 1)
        + sierpinski_triangles((ab, b, bc), depth - 1)
        + sierpinski_triangles((ca, bc, c), depth - 1)
    )


def sierpinski(filename: str = "sierpinski.svg", depth: int = 6, size: float = 600):
    """
    Draw a Sierpinski triangle, filling each smallest triangle with a hue
    taken from its horizontal position.

    Returns:
        The finish() result of the drawing
    """
    radius = size * 0.45
    outline = ngon_points(O, radius, 3, -math.pi / 2)
    triangles = sierpinski_triangles(outline, depth)

    with draw(filename, size, size) as d:
        for triangle in triangles:
            centroid = (triangle[0] + triangle[1] + triangle[2]) / 3
            hue = api.rescale(centroid.x, -radius, radius, 0, 300)
            api.sethue(Color.from_hsl(hue, 0.7, 0.5))
            api.poly(triangle, "fill", close=True)
    return d.finish()
