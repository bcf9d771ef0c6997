"""
Functional drawing API.

Every function acts on the current drawing (the most recently created
Drawing) and raises NoDrawingError when there is none. Angles are in
radians and the y axis points down, so positive rotation is clockwise.
"""

import math
import random
from contextlib import contextmanager
from typing import Iterator, List, Optional, Sequence, Tuple, Union

from vecdraw.drawing import (
    Drawing, DrawingError, get_current, currentdrawing, normalise_action
)
from vecdraw.models.color import Color, parse_color
from vecdraw.models.path import arc_beziers
from vecdraw.models.point import (
    O, Point, PointLike, as_point, is_point_like, ngon_points, polar, star_points
)
from vecdraw.models.transform import Transform

LABEL_DIRECTIONS = {
    "N": ((0, -1), "center", "bottom"),
    "S": ((0, 1), "center", "top"),
    "E": ((1, 0), "left", "middle"),
    "W": ((-1, 0), "right", "middle"),
    "NE": ((1, -1), "left", "bottom"),
    "NW": ((-1, -1), "right", "bottom"),
    "SE": ((1, 1), "left", "top"),
    "SW": ((-1, 1), "right", "top"),
}


def _start_shape(action: str) -> str:
    """Validate the action and start a fresh path unless it extends the current one."""
    action = normalise_action(action)
    drawing = get_current()
    if action != "path":
        drawing.new_path()
    return action


# ----------------------------------------------------------------------
# Document
# ----------------------------------------------------------------------

def finish():
    """Finish the current drawing and write it out."""
    return get_current().finish()


def preview():
    """Render the current drawing to a PIL Image."""
    return get_current().preview()


def origin(*args) -> None:
    """
    Reset the transform and put the origin at the page center.

    origin(pt) or origin(x, y) puts it at the given device position instead.
    """
    if len(args) == 2:
        point = Point(args[0], args[1])
    elif len(args) == 1:
        point = as_point(args[0])
    elif not args:
        point = None
    else:
        raise TypeError(f"origin() takes 0 to 2 arguments, got {len(args)}")
    get_current().origin(point)


def background(*color) -> None:
    get_current().background(parse_color(*color))


def rescale(
    value: float,
    from_min: float,
    from_max: float,
    to_min: float = 0.0,
    to_max: float = 1.0
) -> float:
    """
    Map a value linearly from one range onto another.

    Raises:
        ValueError: If the source range is empty
    """
    if from_max == from_min:
        raise ValueError("Cannot rescale from an empty range")
    return to_min + (value - from_min) * (to_max - to_min) / (from_max - from_min)


# ----------------------------------------------------------------------
# State and style
# ----------------------------------------------------------------------

def gsave() -> None:
    get_current().gsave()


def grestore() -> None:
    get_current().grestore()


@contextmanager
def layer() -> Iterator[Drawing]:
    """Save the graphics state on entry and restore it on exit."""
    drawing = get_current()
    drawing.gsave()
    try:
        yield drawing
    finally:
        drawing.grestore()


def sethue(*color) -> Color:
    """Set the current color without changing the opacity."""
    value = parse_color(*color)
    get_current().set_hue(value)
    return value


def setcolor(*color) -> Color:
    """Set the current color, taking the opacity from its alpha."""
    value = parse_color(*color)
    get_current().set_color(value)
    return value


def setopacity(opacity: float) -> None:
    get_current().set_opacity(opacity)


def randomhue(rng: Optional[random.Random] = None) -> Color:
    """Set a random opaque hue and return it."""
    color = Color.random(rng)
    get_current().set_hue(color)
    return color


def getcolor() -> Color:
    """Current color with the current opacity as alpha."""
    state = get_current().state
    return state.color.with_alpha(state.opacity)


def setline(width: float) -> None:
    get_current().set_line_width(width)


def getline() -> float:
    return get_current().state.line_width


def setlinecap(cap: str = "butt") -> None:
    get_current().set_line_cap(cap)


def setlinejoin(join: str = "miter") -> None:
    get_current().set_line_join(join)


def setdash(dash: Union[str, Sequence[float]]) -> None:
    get_current().set_dash(dash)


def fontface(name: str) -> None:
    get_current().set_font_face(name)


def fontsize(size: float) -> None:
    get_current().set_font_size(size)


def getmatrix() -> Tuple[float, ...]:
    return get_current().get_matrix()


def setmatrix(matrix: Union[Transform, Sequence[float]]) -> None:
    get_current().set_matrix(matrix)


# ----------------------------------------------------------------------
# Transforms
# ----------------------------------------------------------------------

def translate(*args) -> None:
    """translate(pt) or translate(x, y)."""
    if len(args) == 1:
        x, y = as_point(args[0])
    elif len(args) == 2:
        x, y = args
    else:
        raise TypeError(f"translate() takes 1 or 2 arguments, got {len(args)}")
    get_current().translate(x, y)


def rotate(angle: float) -> None:
    get_current().rotate(angle)


def scale(sx: float, sy: Optional[float] = None) -> None:
    get_current().scale(sx, sy)


# ----------------------------------------------------------------------
# Paths
# ----------------------------------------------------------------------

def newpath() -> None:
    get_current().new_path()


def move(*args) -> None:
    """move(pt) or move(x, y)."""
    get_current().move_to(_point_args(args, "move"))


def line(*args, action: Optional[str] = None) -> None:
    """
    Extend the path with a line, or draw a segment.

    line(pt) and line(x, y) add a line to the current path.
    line(p1, p2, action) starts a new path with the segment p1-p2 and
    applies the action.
    """
    if len(args) >= 2 and is_point_like(args[0]) and is_point_like(args[1]):
        if len(args) == 3:
            action = args[2]
        elif len(args) > 3:
            raise TypeError(f"line() takes at most 3 positional arguments, got {len(args)}")
        action = _start_shape(action or "none")
        drawing = get_current()
        drawing.move_to(args[0])
        drawing.line_to(args[1])
        drawing.do_action(action)
        return

    get_current().line_to(_point_args(args, "line"))
    if action is not None:
        do_action(action)


def rmove(*args) -> None:
    get_current().rel_move(_point_args(args, "rmove"))


def rline(*args) -> None:
    get_current().rel_line(_point_args(args, "rline"))


def curve(control1: PointLike, control2: PointLike, end: PointLike) -> None:
    get_current().curve_to(control1, control2, end)


def arc(
    center: PointLike,
    radius: float,
    start_angle: float,
    end_angle: float,
    action: str = "none"
) -> None:
    """Add a clockwise arc to the current path, then apply the action."""
    action = normalise_action(action)
    get_current().arc(center, radius, start_angle, end_angle, clockwise=True)
    do_action(action)


def carc(
    center: PointLike,
    radius: float,
    start_angle: float,
    end_angle: float,
    action: str = "none"
) -> None:
    """Add a counter-clockwise arc to the current path, then apply the action."""
    action = normalise_action(action)
    get_current().arc(center, radius, start_angle, end_angle, clockwise=False)
    do_action(action)


def closepath() -> None:
    get_current().close_path()


def currentpoint() -> Point:
    """
    Current point in user coordinates.

    Raises:
        DrawingError: If there is no current point
    """
    point = get_current().current_point()
    if point is None:
        raise DrawingError("There is no current point")
    return point


def hascurrentpoint() -> bool:
    return get_current().has_current_point()


def _point_args(args: tuple, name: str) -> Point:
    if len(args) == 1:
        return as_point(args[0])
    if len(args) == 2:
        return Point(args[0], args[1])
    raise TypeError(f"{name}() takes a point or x and y, got {len(args)} arguments")


# ----------------------------------------------------------------------
# Actions
# ----------------------------------------------------------------------

def do_action(action: str):
    return get_current().do_action(action)


def strokepath():
    return get_current().stroke_path()


def fillpath():
    return get_current().fill_path()


def fillstroke():
    return get_current().fill_stroke()


def strokepreserve():
    return get_current().stroke_path(preserve=True)


def fillpreserve():
    return get_current().fill_path(preserve=True)


def clip() -> str:
    return get_current().clip()


def clippreserve() -> str:
    return get_current().clip(preserve=True)


def clipreset() -> None:
    get_current().clip_reset()


# ----------------------------------------------------------------------
# Shapes
# ----------------------------------------------------------------------

def circle(*args, action: Optional[str] = None) -> None:
    """
    circle(center, radius, action) or circle(x, y, radius, action).
    """
    args = list(args)
    if args and is_point_like(args[0]):
        center = as_point(args.pop(0))
    elif len(args) >= 3:
        center = Point(args.pop(0), args.pop(0))
    else:
        raise TypeError("circle() needs a center point or x and y, and a radius")
    if not args:
        raise TypeError("circle() missing radius")
    radius = args.pop(0)
    if args:
        action = args.pop(0)
    if args:
        raise TypeError("circle() got too many arguments")

    action = _start_shape(action or "none")
    drawing = get_current()
    drawing.arc(center, radius, 0.0, 2 * math.pi)
    drawing.close_path()
    drawing.do_action(action)


def ellipse(center: PointLike, width: float, height: float, action: str = "none") -> None:
    """Ellipse with the given overall width and height, centered on `center`."""
    if width < 0 or height < 0:
        raise ValueError(f"Ellipse size cannot be negative, got {width} x {height}")
    action = _start_shape(action)
    center = as_point(center)
    rx, ry = width / 2, height / 2

    def stretch(p: Point) -> Point:
        return Point(center.x + p.x * rx, center.y + p.y * ry)

    start, curves = arc_beziers(O, 1.0, 0.0, 2 * math.pi)
    drawing = get_current()
    drawing.move_to(stretch(start))
    for control1, control2, end in curves:
        drawing.curve_to(stretch(control1), stretch(control2), stretch(end))
    drawing.close_path()
    drawing.do_action(action)


def rect(corner: PointLike, width: float, height: float, action: str = "none") -> List[Point]:
    """
    Rectangle with its top-left corner at `corner`.

    Returns:
        The four corners, clockwise from `corner`
    """
    action = _start_shape(action)
    x, y = as_point(corner)
    vertices = [Point(x, y), Point(x + width, y), Point(x + width, y + height), Point(x, y + height)]
    _add_polygon(vertices, close=True)
    get_current().do_action(action)
    return vertices


def box(*args, action: Optional[str] = None) -> List[Point]:
    """
    box(center, width, height, action) or box(corner1, corner2, action).

    Returns:
        The four corners of the box
    """
    if len(args) >= 2 and is_point_like(args[0]) and is_point_like(args[1]):
        if len(args) > 3:
            raise TypeError("box(corner1, corner2, action) got too many arguments")
        (x1, y1), (x2, y2) = as_point(args[0]), as_point(args[1])
        if len(args) == 3:
            action = args[2]
        return rect((min(x1, x2), min(y1, y2)), abs(x2 - x1), abs(y2 - y1), action or "none")

    if len(args) < 3 or len(args) > 4:
        raise TypeError("box() takes (center, width, height[, action]) or (corner1, corner2[, action])")
    center, width, height = as_point(args[0]), args[1], args[2]
    if len(args) == 4:
        action = args[3]
    return rect(center - (width / 2, height / 2), width, height, action or "none")


def poly(points: Sequence[PointLike], action: str = "none", close: bool = False) -> List[Point]:
    """
    Polygon or polyline through `points`.

    Raises:
        ValueError: If there are no points
    """
    vertices = [as_point(p) for p in points]
    if not vertices:
        raise ValueError("poly() needs at least one point")
    action = _start_shape(action)
    _add_polygon(vertices, close=close)
    get_current().do_action(action)
    return vertices


def _add_polygon(vertices: Sequence[Point], close: bool) -> None:
    drawing = get_current()
    drawing.move_to(vertices[0])
    for vertex in vertices[1:]:
        drawing.line_to(vertex)
    if close:
        drawing.close_path()


def ngon(
    center: PointLike,
    radius: float,
    sides: int = 5,
    orientation: float = 0.0,
    action: str = "none",
    vertices: bool = False
) -> List[Point]:
    """
    Regular polygon.

    With vertices=True only the vertex list is computed and nothing is drawn.
    """
    points = ngon_points(center, radius, sides, orientation)
    if not vertices:
        poly(points, action, close=True)
    return points


def star(
    center: PointLike,
    radius: float,
    npoints: int = 5,
    ratio: float = 0.5,
    orientation: float = 0.0,
    action: str = "none",
    vertices: bool = False
) -> List[Point]:
    """Star with `npoints` tips; the inner radius is `ratio` times `radius`."""
    points = star_points(center, radius, npoints, ratio, orientation)
    if not vertices:
        poly(points, action, close=True)
    return points


def sector(
    center: PointLike,
    inner_radius: float,
    outer_radius: float,
    start_angle: float,
    end_angle: float,
    action: str = "none"
) -> None:
    """Annular sector between two radii, swept clockwise from start to end."""
    if inner_radius < 0 or outer_radius < 0:
        raise ValueError("Sector radii cannot be negative")
    action = _start_shape(action)
    center = as_point(center)
    drawing = get_current()
    drawing.move_to(center + polar(inner_radius, start_angle))
    drawing.arc(center, outer_radius, start_angle, end_angle, clockwise=True)
    drawing.arc(center, inner_radius, end_angle, start_angle, clockwise=False)
    drawing.close_path()
    drawing.do_action(action)


def pie(
    center: PointLike,
    radius: float,
    start_angle: float,
    end_angle: float,
    action: str = "none"
) -> None:
    """Pie slice from the center, swept clockwise from start to end."""
    action = _start_shape(action)
    center = as_point(center)
    drawing = get_current()
    drawing.move_to(center)
    drawing.arc(center, radius, start_angle, end_angle, clockwise=True)
    drawing.close_path()
    drawing.do_action(action)


def rule(point: PointLike, angle: float = 0.0) -> None:
    """Stroke a line through `point` that crosses the whole page."""
    drawing = get_current()
    scale_factor = drawing.state.transform.mean_scale or 1.0
    half_length = (drawing.width + drawing.height) / scale_factor
    point = as_point(point)
    offset = polar(half_length, angle)
    drawing.new_path()
    drawing.move_to(point - offset)
    drawing.line_to(point + offset)
    drawing.stroke_path()


def arrow(
    start: PointLike,
    end: PointLike,
    arrowheadlength: float = 10.0,
    arrowheadangle: float = math.pi / 8
) -> None:
    """Stroke a line from start to end and fill an arrowhead at end."""
    start, end = as_point(start), as_point(end)
    length = (end - start).norm
    if length == 0:
        raise ValueError("Arrow start and end are the same point")
    heading = math.atan2(end.y - start.y, end.x - start.x)

    drawing = get_current()
    shaft_end = end - polar(min(length, arrowheadlength * math.cos(arrowheadangle)), heading)
    drawing.new_path()
    drawing.move_to(start)
    drawing.line_to(shaft_end)
    drawing.stroke_path()

    drawing.move_to(end)
    drawing.line_to(end - polar(arrowheadlength, heading - arrowheadangle))
    drawing.line_to(end - polar(arrowheadlength, heading + arrowheadangle))
    drawing.close_path()
    drawing.fill_path()


# ----------------------------------------------------------------------
# Text
# ----------------------------------------------------------------------

def text(
    s: str,
    point: PointLike = O,
    halign: str = "left",
    valign: str = "baseline",
    angle: float = 0.0
):
    return get_current().text(s, point, halign, valign, angle)


def textcentered(s: str, point: PointLike = O):
    return text(s, point, halign="center")


def textright(s: str, point: PointLike = O):
    return text(s, point, halign="right")


def label(s: str, direction: str = "N", point: PointLike = O, offset: float = 5.0):
    """
    Place text beside a point, on the side given by a compass direction.

    Raises:
        ValueError: If the direction is unknown
    """
    key = direction.lstrip(":").upper()
    if key not in LABEL_DIRECTIONS:
        raise ValueError(f"Unknown label direction {direction!r}; expected one of {', '.join(LABEL_DIRECTIONS)}")
    (dx, dy), halign, valign = LABEL_DIRECTIONS[key]
    if dx and dy:
        dx, dy = dx * math.sqrt(0.5), dy * math.sqrt(0.5)
    position = as_point(point) + (dx * offset, dy * offset)
    return text(s, position, halign=halign, valign=valign)


def textextents(s: str) -> Tuple[float, float, float, float, float, float]:
    return get_current().text_extents(s)


__all__ = [
    "Drawing", "currentdrawing", "finish", "preview", "origin", "background", "rescale",
    "gsave", "grestore", "layer", "sethue", "setcolor", "setopacity", "randomhue",
    "getcolor", "setline", "getline", "setlinecap", "setlinejoin", "setdash",
    "fontface", "fontsize", "getmatrix", "setmatrix",
    "translate", "rotate", "scale",
    "newpath", "move", "line", "rmove", "rline", "curve", "arc", "carc",
    "closepath", "currentpoint", "hascurrentpoint",
    "do_action", "strokepath", "fillpath", "fillstroke", "strokepreserve",
    "fillpreserve", "clip", "clippreserve", "clipreset",
    "circle", "ellipse", "rect", "box", "poly", "ngon", "star", "sector", "pie",
    "rule", "arrow",
    "text", "textcentered", "textright", "label", "textextents",
]
