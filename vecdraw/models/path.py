"""
Path model for vecdraw drawings.

A path is a list of move/line/curve/close segments. The drawing keeps its
current path in device coordinates: points are mapped through the current
transform when they are added, so later transform changes do not move
segments that already exist.
"""

import math
from typing import Iterator, List, NamedTuple, Optional, Tuple

from vecdraw.models.point import Point, PointLike, as_point
from vecdraw.models.transform import Transform

MOVE = "M"
LINE = "L"
CURVE = "C"
CLOSE = "Z"

# Largest arc span converted to a single cubic Bezier
MAX_ARC_SEGMENT = math.pi / 2


class PathSegment(NamedTuple):
    """One path command and its points."""

    command: str
    points: Tuple[Point, ...]


def format_number(value: float, precision: int = 3) -> str:
    """
    Format a coordinate for SVG output.

    Trailing zeros are dropped and negative zero is written as 0.
    """
    text = f"{value:.{precision}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text in ("-0", ""):
        text = "0"
    return text


def arc_beziers(
    center: PointLike,
    radius: float,
    start_angle: float,
    end_angle: float,
    clockwise: bool = True
) -> Tuple[Point, List[Tuple[Point, Point, Point]]]:
    """
    Approximate a circular arc with cubic Bezier curves.

    Angles are in radians and measured clockwise from the positive x axis
    on a y-down canvas. A clockwise arc sweeps from `start_angle` with
    increasing angle until it reaches `end_angle`; a counter-clockwise arc
    sweeps with decreasing angle.

    Returns:
        The arc start point and a list of (control1, control2, end) triples
    """
    center = as_point(center)
    sweep = end_angle - start_angle
    if clockwise and sweep < 0:
        sweep = math.fmod(sweep, 2 * math.pi)
        if sweep < 0:
            sweep += 2 * math.pi
    elif not clockwise and sweep > 0:
        sweep = math.fmod(sweep, 2 * math.pi)
        if sweep > 0:
            sweep -= 2 * math.pi

    count = max(1, int(math.ceil(abs(sweep) / MAX_ARC_SEGMENT - 1e-9)))
    step = sweep / count
    k = 4.0 / 3.0 * math.tan(step / 4.0)

    def on_circle(theta: float) -> Point:
        return Point(center.x + radius * math.cos(theta), center.y + radius * math.sin(theta))

    start = on_circle(start_angle)
    curves = []
    for i in range(count):
        t0 = start_angle + i * step
        t1 = t0 + step
        p0 = on_circle(t0)
        p3 = on_circle(t1)
        c1 = Point(p0.x - k * radius * math.sin(t0), p0.y + k * radius * math.cos(t0))
        c2 = Point(p3.x + k * radius * math.sin(t1), p3.y - k * radius * math.cos(t1))
        curves.append((c1, c2, p3))
    return start, curves


class Path:
    """Mutable sequence of path segments with a current point."""

    def __init__(self, segments: Optional[List[PathSegment]] = None):
        self._segments: List[PathSegment] = []
        self._current: Optional[Point] = None
        self._start: Optional[Point] = None
        for segment in segments or []:
            self._add(segment.command, segment.points)

    @property
    def segments(self) -> List[PathSegment]:
        return list(self._segments)

    @property
    def current_point(self) -> Optional[Point]:
        return self._current

    @property
    def has_current_point(self) -> bool:
        return self._current is not None

    @property
    def is_empty(self) -> bool:
        return not self._segments

    @property
    def is_paintable(self) -> bool:
        """True if the path contains anything besides move commands."""
        return any(segment.command != MOVE for segment in self._segments)

    def _add(self, command: str, points: Tuple[Point, ...]) -> None:
        if command == MOVE:
            self._start = points[0]
            self._current = points[0]
        elif command == CLOSE:
            self._current = self._start
        else:
            self._current = points[-1]
        self._segments.append(PathSegment(command, tuple(points)))

    def move_to(self, point: PointLike) -> 'Path':
        self._add(MOVE, (as_point(point),))
        return self

    def line_to(self, point: PointLike) -> 'Path':
        """Add a line; without a current point this behaves like move_to."""
        if self._current is None:
            return self.move_to(point)
        self._add(LINE, (as_point(point),))
        return self

    def curve_to(self, control1: PointLike, control2: PointLike, end: PointLike) -> 'Path':
        """Add a cubic Bezier; without a current point it starts at control1."""
        if self._current is None:
            self.move_to(control1)
        self._add(CURVE, (as_point(control1), as_point(control2), as_point(end)))
        return self

    def close(self) -> 'Path':
        if self._current is not None and self._segments and self._segments[-1].command != CLOSE:
            self._add(CLOSE, ())
        return self

    def clear(self) -> 'Path':
        self._segments = []
        self._current = None
        self._start = None
        return self

    def extend(self, other: 'Path') -> 'Path':
        for segment in other._segments:
            self._add(segment.command, segment.points)
        return self

    def copy(self) -> 'Path':
        return Path(self._segments)

    def transformed(self, transform: Transform) -> 'Path':
        """Return a copy with every point mapped through `transform`."""
        return Path([
            PathSegment(seg.command, tuple(transform.transform_points(seg.points)))
            for seg in self._segments
        ])

    def points(self) -> Iterator[Point]:
        for segment in self._segments:
            yield from segment.points

    def bounds(self) -> Optional[Tuple[Point, Point]]:
        """Bounding box of all points (control points included)."""
        pts = list(self.points())
        if not pts:
            return None
        xs = [p.x for p in pts]
        ys = [p.y for p in pts]
        return Point(min(xs), min(ys)), Point(max(xs), max(ys))

    def to_svg_data(self, transform: Optional[Transform] = None, precision: int = 3) -> str:
        """
        Serialise to SVG path data.

        Args:
            transform: Optional transform applied to every point
            precision: Decimal places for coordinates

        Returns:
            SVG path data string
        """
        parts = []
        for segment in self._segments:
            points = segment.points
            if transform is not None:
                points = transform.transform_points(points)
            coords = " ".join(
                f"{format_number(p.x, precision)},{format_number(p.y, precision)}" for p in points
            )
            parts.append(f"{segment.command}{coords}" if coords else segment.command)
        return " ".join(parts)

    def __len__(self) -> int:
        return len(self._segments)

    def __repr__(self) -> str:
        return f"Path({self.to_svg_data()!r})"
