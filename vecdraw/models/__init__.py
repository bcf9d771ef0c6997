"""
vecdraw - Models Package
======================
Value types used by drawings: points, colors, transforms and paths.
"""

from vecdraw.models.point import (
    Point, O, as_point, distance, midpoint, between, polar, perpendicular,
    rotate_point, bounding_box, ngon_points, star_points
)
from vecdraw.models.color import Color, ColorError, parse_color, named_colors
from vecdraw.models.transform import Transform, TransformError
from vecdraw.models.path import Path, PathSegment, arc_beziers, format_number

__all__ = [
    "Point", "O", "as_point", "distance", "midpoint", "between", "polar",
    "perpendicular", "rotate_point", "bounding_box", "ngon_points", "star_points",
    "Color", "ColorError", "parse_color", "named_colors",
    "Transform", "TransformError",
    "Path", "PathSegment", "arc_beziers", "format_number",
]
