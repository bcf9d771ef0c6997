"""
Drawing context for vecdraw.

A Drawing owns the page size, the output target, the graphics-state stack
and the current path. Painting operations turn the current path into SVG
elements; finish() writes the document in the format selected by the
output filename extension.
"""

import math
import os
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field, replace
from pathlib import Path as FilePath
from typing import Dict, List, Optional, Sequence, Tuple, Union

from vecdraw.core import CONFIG, Profiler
from vecdraw.core.renderer import SVGRenderer, format_from_filename
from vecdraw.core.validator import SVGValidator
from vecdraw.models.color import Color, ColorValue
from vecdraw.models.path import Path, arc_beziers, format_number
from vecdraw.models.point import Point, PointLike, as_point
from vecdraw.models.transform import Transform
from vecdraw.utils.logger import get_logger

logger = get_logger(__name__)

SVG_NAMESPACE = "http://www.w3.org/2000/svg"
XML_SPACE = "{http://www.w3.org/XML/1998/namespace}space"
IN_MEMORY_PREFIX = ":"

# Paper sizes in points (portrait)
PAPER_SIZES: Dict[str, Tuple[float, float]] = {
    "A0": (2384, 3370), "A1": (1684, 2384), "A2": (1191, 1684),
    "A3": (842, 1191), "A4": (595, 842), "A5": (420, 595),
    "A6": (298, 420), "A7": (210, 298), "A8": (147, 210),
    "letter": (612, 792), "legal": (612, 1008), "tabloid": (792, 1224),
    "11x17": (792, 1224), "ledger": (1224, 792),
}

ACTIONS = frozenset((
    "none", "path", "stroke", "fill", "fillstroke",
    "fillpreserve", "strokepreserve", "clip", "clippreserve",
))

LINE_CAPS = ("butt", "round", "square")
LINE_JOINS = ("miter", "round", "bevel")

DASH_PATTERNS: Dict[str, Tuple[float, ...]] = {
    "solid": (),
    "dashed": (50.0, 10.0),
    "dotted": (1.0, 8.0),
    "dotdashed": (1.0, 8.0, 10.0, 8.0),
    "longdashed": (50.0, 20.0),
    "shortdashed": (20.0, 20.0),
    "dot": (1.0, 4.0),
    "dashdot": (8.0, 4.0, 1.0, 4.0),
}

HALIGN_ANCHORS = {"left": "start", "center": "middle", "right": "end"}
VALIGNS = ("baseline", "top", "middle", "bottom")


class DrawingError(Exception):
    """Base exception for drawing operations."""
    pass


class NoDrawingError(DrawingError):
    """Raised when an operation needs a current drawing and there is none."""
    pass


class StateStackError(DrawingError):
    """Raised when grestore() has no matching gsave()."""
    pass


class UnsupportedFormatError(DrawingError):
    """Raised for output filenames with an unsupported extension."""
    pass


def _default_line_width() -> float:
    return float(CONFIG["line_width"])


def _default_font_face() -> str:
    return str(CONFIG["font_face"])


def _default_font_size() -> float:
    return float(CONFIG["font_size"])


@dataclass
class GraphicsState:
    """Transform and style settings saved and restored by gsave/grestore."""

    transform: Transform = field(default_factory=Transform.identity)
    color: Color = field(default_factory=lambda: Color("black"))
    opacity: float = 1.0
    line_width: float = field(default_factory=_default_line_width)
    line_cap: str = "butt"
    line_join: str = "miter"
    dash: Tuple[float, ...] = ()
    font_face: str = field(default_factory=_default_font_face)
    font_size: float = field(default_factory=_default_font_size)
    clips: Tuple[str, ...] = ()

    def copy(self) -> 'GraphicsState':
        return replace(self)


# The drawing that module-level API calls act on
_current_drawing: Optional['Drawing'] = None


def currentdrawing() -> Optional['Drawing']:
    """Return the current drawing, or None if no drawing has been created."""
    return _current_drawing


def get_current() -> 'Drawing':
    """
    Return the current drawing.

    Raises:
        NoDrawingError: If no drawing has been created
    """
    if _current_drawing is None:
        raise NoDrawingError("No current drawing; create one with Drawing() first")
    return _current_drawing


def set_current(drawing: Optional['Drawing']) -> None:
    """Make `drawing` the target of module-level API calls."""
    global _current_drawing
    _current_drawing = drawing


def normalise_action(action: str) -> str:
    """
    Validate a painting action name.

    Raises:
        ValueError: If the action is unknown
    """
    name = str(action).lstrip(":").lower()
    if name not in ACTIONS:
        raise ValueError(f"Unknown action {action!r}; expected one of {', '.join(sorted(ACTIONS))}")
    return name


def paper_size(name: str) -> Tuple[float, float]:
    """
    Page size in points for a paper name such as "A4" or "A4landscape".

    Raises:
        ValueError: If the paper name is unknown
    """
    key = name.strip()
    landscape = key.lower().endswith("landscape")
    if landscape:
        key = key[:-len("landscape")]
    lookup = {k.lower(): v for k, v in PAPER_SIZES.items()}
    if key.lower() not in lookup:
        raise ValueError(f"Unknown paper size: {name!r}")
    width, height = lookup[key.lower()]
    return (height, width) if landscape else (width, height)


class Drawing:
    """
    A page being drawn, plus its graphics state.

    Creating a drawing makes it the current drawing for the module-level API.
    """

    def __init__(
        self,
        width: Union[float, str, None] = None,
        height: Union[float, str, None] = None,
        filename: Optional[str] = None
    ):
        """
        Initialize a drawing.

        Args:
            width: Page width in points, or a paper name such as "A4"
            height: Page height in points; when `width` is a paper name this
                position may hold the filename instead
            filename: Output file; the extension selects PNG, SVG, PDF or EPS.
                ":svg" or ":png" keep the drawing in memory.

        Raises:
            UnsupportedFormatError: If the filename extension is not supported
            ValueError: If the size is not positive or the paper is unknown
        """
        if isinstance(width, str):
            if isinstance(height, str) and filename is None:
                filename = height
            width, height = paper_size(width)
        if width is None:
            width = CONFIG["default_width"]
        if height is None:
            height = CONFIG["default_height"]

        width = float(width)
        height = float(height)
        if width <= 0 or height <= 0:
            raise ValueError(f"Drawing size must be positive, got {width} x {height}")

        self.width = width
        self.height = height

        filename = filename or CONFIG["default_filename"]
        if filename.startswith(IN_MEMORY_PREFIX):
            fmt = filename[len(IN_MEMORY_PREFIX):].lower()
            if fmt not in ("svg", "png"):
                raise UnsupportedFormatError(f"In-memory drawings support :svg and :png, got {filename!r}")
            self._filename = None
        else:
            fmt = format_from_filename(filename)
            if fmt is None:
                raise UnsupportedFormatError(
                    f"Unsupported file extension for {filename!r}; use .png, .svg, .pdf or .eps"
                )
            if CONFIG.get("output_dir") and not os.path.isabs(filename):
                filename = os.path.join(CONFIG["output_dir"], filename)
            self._filename = filename
        self._format = fmt

        self._state = GraphicsState()
        self._stack: List[GraphicsState] = []
        self._path = Path()
        self._elements: List[ET.Element] = []
        self._clip_defs: List[ET.Element] = []
        self._clip_counter = 0
        self._finished = False
        self._result: Union[FilePath, str, None] = None
        self._renderer = SVGRenderer()
        self.image = None

        set_current(self)
        logger.debug(f"Created {self._format} drawing {self.width:g}x{self.height:g} -> {self._filename or 'memory'}")

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def filename(self) -> Optional[str]:
        return self._filename

    @property
    def format(self) -> str:
        return self._format

    @property
    def in_memory(self) -> bool:
        return self._filename is None

    @property
    def finished(self) -> bool:
        return self._finished

    @property
    def state(self) -> GraphicsState:
        """The live graphics state."""
        return self._state

    @property
    def stack_depth(self) -> int:
        """Number of saved states waiting for grestore()."""
        return len(self._stack)

    @property
    def element_count(self) -> int:
        return len(self._elements)

    @property
    def path(self) -> Path:
        """Copy of the current path in device coordinates."""
        return self._path.copy()

    @property
    def precision(self) -> int:
        return int(CONFIG["precision"])

    # ------------------------------------------------------------------
    # Graphics state
    # ------------------------------------------------------------------

    def gsave(self) -> None:
        """Push a copy of the graphics state."""
        self._stack.append(self._state.copy())

    def grestore(self) -> None:
        """
        Pop the most recently saved graphics state.

        Raises:
            StateStackError: If there is no saved state
        """
        if not self._stack:
            raise StateStackError("grestore() called without a matching gsave()")
        self._state = self._stack.pop()

    def translate(self, tx: float, ty: float) -> None:
        self._state.transform = self._state.transform.multiply(Transform.translate(tx, ty))

    def rotate(self, angle: float) -> None:
        self._state.transform = self._state.transform.multiply(Transform.rotate(angle))

    def scale(self, sx: float, sy: Optional[float] = None) -> None:
        self._state.transform = self._state.transform.multiply(Transform.scale(sx, sy))

    def get_matrix(self) -> Tuple[float, ...]:
        return self._state.transform.matrix

    def set_matrix(self, matrix: Union[Transform, Sequence[float]]) -> None:
        self._state.transform = matrix if isinstance(matrix, Transform) else Transform(matrix)

    def origin(self, point: Optional[PointLike] = None) -> None:
        """Reset the transform and move the origin to `point` (default: page center)."""
        if point is None:
            point = (self.width / 2, self.height / 2)
        x, y = as_point(point)
        self._state.transform = Transform.translate(x, y)

    def set_hue(self, color: ColorValue) -> None:
        """Change the current color, keeping the current opacity."""
        self._state.color = Color(color, alpha=1.0)

    def set_color(self, color: ColorValue) -> None:
        """Change the current color and take the opacity from it."""
        color = color if isinstance(color, Color) else Color(color)
        self._state.color = color.with_alpha(1.0)
        self._state.opacity = color.alpha

    def set_opacity(self, opacity: float) -> None:
        if not 0.0 <= opacity <= 1.0:
            raise ValueError(f"Opacity must be between 0 and 1, got {opacity}")
        self._state.opacity = float(opacity)

    def set_line_width(self, width: float) -> None:
        if width < 0:
            raise ValueError(f"Line width cannot be negative, got {width}")
        self._state.line_width = float(width)

    def set_line_cap(self, cap: str) -> None:
        cap = cap.lstrip(":").lower()
        if cap not in LINE_CAPS:
            raise ValueError(f"Unknown line cap {cap!r}; expected one of {', '.join(LINE_CAPS)}")
        self._state.line_cap = cap

    def set_line_join(self, join: str) -> None:
        join = join.lstrip(":").lower()
        if join not in LINE_JOINS:
            raise ValueError(f"Unknown line join {join!r}; expected one of {', '.join(LINE_JOINS)}")
        self._state.line_join = join

    def set_dash(self, dash: Union[str, Sequence[float]]) -> None:
        """
        Set the dash pattern from a name or a sequence of dash/gap lengths.

        Raises:
            ValueError: For unknown names or invalid sequences
        """
        if isinstance(dash, str):
            name = dash.lstrip(":").lower()
            if name not in DASH_PATTERNS:
                raise ValueError(f"Unknown dash style {dash!r}; expected one of {', '.join(DASH_PATTERNS)}")
            self._state.dash = DASH_PATTERNS[name]
            return

        pattern = tuple(float(v) for v in dash)
        if any(v < 0 for v in pattern):
            raise ValueError(f"Dash lengths cannot be negative: {pattern}")
        if pattern and not any(pattern):
            raise ValueError("Dash pattern cannot be all zeros")
        self._state.dash = pattern

    def set_font_face(self, face: str) -> None:
        self._state.font_face = face

    def set_font_size(self, size: float) -> None:
        if size <= 0:
            raise ValueError(f"Font size must be positive, got {size}")
        self._state.font_size = float(size)

    # ------------------------------------------------------------------
    # Path construction (coordinates are in user space)
    # ------------------------------------------------------------------

    def _to_device(self, point: PointLike) -> Point:
        return self._state.transform.transform_point(as_point(point))

    def new_path(self) -> None:
        self._path.clear()

    def move_to(self, point: PointLike) -> None:
        self._path.move_to(self._to_device(point))

    def line_to(self, point: PointLike) -> None:
        self._path.line_to(self._to_device(point))

    def curve_to(self, control1: PointLike, control2: PointLike, end: PointLike) -> None:
        self._path.curve_to(self._to_device(control1), self._to_device(control2), self._to_device(end))

    def close_path(self) -> None:
        self._path.close()

    def has_current_point(self) -> bool:
        return self._path.has_current_point

    def current_point(self) -> Optional[Point]:
        """Current point in user coordinates, or None if there is none."""
        device = self._path.current_point
        if device is None:
            return None
        inverse = self._state.transform.inverse
        if inverse is None:
            raise DrawingError("Current transform is not invertible")
        return inverse.transform_point(device)

    def rel_move(self, offset: PointLike) -> None:
        current = self.current_point()
        if current is None:
            raise DrawingError("rmove() needs a current point")
        self.move_to(current + as_point(offset))

    def rel_line(self, offset: PointLike) -> None:
        current = self.current_point()
        if current is None:
            raise DrawingError("rline() needs a current point")
        self.line_to(current + as_point(offset))

    def arc(
        self,
        center: PointLike,
        radius: float,
        start_angle: float,
        end_angle: float,
        clockwise: bool = True
    ) -> None:
        """
        Add a circular arc, joined to the current point by a line if there is one.

        Angles are in radians; clockwise arcs sweep with increasing angle.
        """
        if radius < 0:
            raise ValueError(f"Arc radius cannot be negative, got {radius}")
        start, curves = arc_beziers(center, radius, start_angle, end_angle, clockwise)
        if self._path.has_current_point:
            self.line_to(start)
        else:
            self.move_to(start)
        for control1, control2, end in curves:
            self.curve_to(control1, control2, end)

    # ------------------------------------------------------------------
    # Painting
    # ------------------------------------------------------------------

    def _check_open(self) -> None:
        if self._finished:
            raise DrawingError("Drawing has already been finished")

    def _append(self, element: ET.Element) -> None:
        """Add an element, nested inside groups for every active clip."""
        self._check_open()
        for clip_id in reversed(self._state.clips):
            group = ET.Element('g')
            group.set('clip-path', f"url(#{clip_id})")
            group.append(element)
            element = group
        self._elements.append(element)

    def _set_paint(self, element: ET.Element, fill: bool, stroke: bool) -> None:
        state = self._state
        color = state.color.to_svg_string()
        opacity = format_number(state.opacity, 4)

        if fill:
            element.set('fill', color)
            if state.opacity < 1.0:
                element.set('fill-opacity', opacity)
        else:
            element.set('fill', 'none')

        if stroke:
            element.set('stroke', color)
            element.set('stroke-width', format_number(state.line_width, self.precision))
            if state.opacity < 1.0:
                element.set('stroke-opacity', opacity)
            if state.line_cap != "butt":
                element.set('stroke-linecap', state.line_cap)
            if state.line_join != "miter":
                element.set('stroke-linejoin', state.line_join)
            if state.dash:
                element.set('stroke-dasharray', ",".join(format_number(v, self.precision) for v in state.dash))

    def paint(self, fill: bool = False, stroke: bool = False, preserve: bool = False) -> Optional[ET.Element]:
        """
        Paint the current path.

        The path is emitted in the user space of the current transform so
        that line widths and dashes scale with it.

        Args:
            fill: Fill the path
            stroke: Stroke the path
            preserve: Keep the current path afterwards

        Returns:
            The emitted element, or None if nothing was painted
        """
        self._check_open()
        element = None
        ctm = self._state.transform
        inverse = ctm.inverse

        if not self._path.is_paintable:
            logger.debug("Nothing to paint: current path is empty")
        elif inverse is None:
            logger.debug("Skipping paint: current transform is not invertible")
        else:
            element = ET.Element('path')
            element.set('d', self._path.to_svg_data(inverse, self._user_precision(ctm)))
            transform = ctm.to_svg_string()
            if transform:
                element.set('transform', transform)
            self._set_paint(element, fill, stroke)
            self._append(element)

        if not preserve:
            self._path.clear()
        return element

    def _user_precision(self, ctm: Transform) -> int:
        # user-space data is scaled back up by the CTM, so keep enough digits
        # to hold the configured precision in device units
        largest = max(abs(v) for v in ctm.matrix[:4])
        if largest <= 1:
            return self.precision
        return self.precision + int(math.ceil(math.log10(largest)))

    def stroke_path(self, preserve: bool = False) -> Optional[ET.Element]:
        return self.paint(stroke=True, preserve=preserve)

    def fill_path(self, preserve: bool = False) -> Optional[ET.Element]:
        return self.paint(fill=True, preserve=preserve)

    def fill_stroke(self) -> Optional[ET.Element]:
        return self.paint(fill=True, stroke=True)

    def clip(self, preserve: bool = False) -> str:
        """
        Intersect the clip region with the current path.

        Returns:
            Id of the new clip path
        """
        self._clip_counter += 1
        clip_id = f"clip{self._clip_counter}"

        clip_path = ET.Element('clipPath')
        clip_path.set('id', clip_id)
        clip_path.set('clipPathUnits', 'userSpaceOnUse')
        shape = ET.SubElement(clip_path, 'path')
        shape.set('d', self._path.to_svg_data(None, self.precision) if self._path.is_paintable else "M0,0")
        self._clip_defs.append(clip_path)

        self._state.clips = self._state.clips + (clip_id,)
        if not preserve:
            self._path.clear()
        logger.debug(f"Clip {clip_id} added; {len(self._state.clips)} active")
        return clip_id

    def clip_reset(self) -> None:
        self._state.clips = ()

    def do_action(self, action: str) -> Optional[ET.Element]:
        """
        Apply a painting action to the current path.

        Returns:
            The painted element, if any
        """
        action = normalise_action(action)
        if action in ("none", "path"):
            return None
        if action == "stroke":
            return self.stroke_path()
        if action == "fill":
            return self.fill_path()
        if action == "fillstroke":
            return self.fill_stroke()
        if action == "fillpreserve":
            return self.fill_path(preserve=True)
        if action == "strokepreserve":
            return self.stroke_path(preserve=True)
        self.clip(preserve=(action == "clippreserve"))
        return None

    def background(self, color: ColorValue) -> ET.Element:
        """Paint the whole page, ignoring the transform but respecting the clip."""
        color = color if isinstance(color, Color) else Color(color)
        rect = ET.Element('rect')
        rect.set('x', '0')
        rect.set('y', '0')
        rect.set('width', format_number(self.width, self.precision))
        rect.set('height', format_number(self.height, self.precision))
        rect.set('fill', color.to_svg_string())
        if color.alpha < 1.0:
            rect.set('fill-opacity', format_number(color.alpha, 4))
        self._append(rect)
        return rect

    # ------------------------------------------------------------------
    # Text
    # ------------------------------------------------------------------

    def text_extents(self, text: str) -> Tuple[float, float, float, float, float, float]:
        """
        Estimate text extents from the font size.

        Returns:
            (x_bearing, y_bearing, width, height, x_advance, y_advance)
        """
        size = self._state.font_size
        width = len(text) * float(CONFIG["glyph_width"]) * size
        ascent = float(CONFIG["ascent"]) * size
        descent = float(CONFIG["descent"]) * size
        return (0.0, -ascent, width, ascent + descent, width, 0.0)

    def text(
        self,
        text: str,
        point: PointLike = (0.0, 0.0),
        halign: str = "left",
        valign: str = "baseline",
        angle: float = 0.0
    ) -> ET.Element:
        """
        Place text at a point.

        Args:
            text: Text to draw
            point: Anchor point in user coordinates
            halign: "left", "center" or "right"
            valign: "baseline", "top", "middle" or "bottom"
            angle: Rotation in radians around the anchor point

        Returns:
            The emitted text element
        """
        halign = halign.lstrip(":").lower()
        valign = valign.lstrip(":").lower()
        if halign not in HALIGN_ANCHORS:
            raise ValueError(f"Unknown horizontal alignment {halign!r}")
        if valign not in VALIGNS:
            raise ValueError(f"Unknown vertical alignment {valign!r}")

        state = self._state
        size = state.font_size
        ascent = float(CONFIG["ascent"]) * size
        descent = float(CONFIG["descent"]) * size
        offset = {
            "baseline": 0.0,
            "top": ascent,
            "middle": (ascent - descent) / 2,
            "bottom": -descent,
        }[valign]

        x, y = as_point(point)
        transform = state.transform.multiply(Transform.translate(x, y))
        if angle:
            transform = transform.multiply(Transform.rotate(angle))

        element = ET.Element('text')
        element.set('x', '0')
        element.set('y', format_number(offset, self.precision))
        svg_transform = transform.to_svg_string()
        if svg_transform:
            element.set('transform', svg_transform)
        element.set('font-family', state.font_face)
        element.set('font-size', format_number(size, self.precision))
        if halign != "left":
            element.set('text-anchor', HALIGN_ANCHORS[halign])
        element.set('fill', state.color.to_svg_string())
        if state.opacity < 1.0:
            element.set('fill-opacity', format_number(state.opacity, 4))
        element.set(XML_SPACE, 'preserve')
        element.text = str(text)

        self._append(element)
        return element

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def to_svg(self) -> ET.Element:
        """
        Build the SVG root element for the drawing.

        Returns:
            XML element representing the document
        """
        svg = ET.Element('svg')
        svg.set('xmlns', SVG_NAMESPACE)
        svg.set('version', '1.1')
        svg.set('width', format_number(self.width, self.precision))
        svg.set('height', format_number(self.height, self.precision))
        svg.set('viewBox', f"0 0 {format_number(self.width, self.precision)} {format_number(self.height, self.precision)}")

        if self._clip_defs:
            defs = ET.SubElement(svg, 'defs')
            defs.extend(self._clip_defs)

        svg.extend(self._elements)
        return svg

    def svgstring(self) -> str:
        """Return the SVG document text."""
        with Profiler("drawing_to_svg_string"):
            svg_string = ET.tostring(self.to_svg(), encoding='unicode')
        return '<?xml version="1.0" encoding="UTF-8" standalone="no"?>\n' + svg_string

    def validate(self) -> Tuple[bool, Optional[str]]:
        """Validate the current SVG document."""
        return SVGValidator().validate(self.svgstring())

    def finish(self) -> Union[FilePath, str]:
        """
        Complete the drawing and write it out.

        An unbalanced state stack is unwound with a warning.

        Returns:
            Path of the written file, or the SVG text for in-memory drawings
        """
        if self._finished:
            return self._result

        if self._stack:
            logger.warning(f"Finishing drawing with {len(self._stack)} unmatched gsave() call(s)")
            self._state = self._stack[0]
            self._stack.clear()

        svg_string = self.svgstring()

        if CONFIG["validate_output"]:
            valid, message = SVGValidator().validate(svg_string)
            if not valid:
                raise DrawingError(f"Generated SVG is invalid: {message}")

        if self.in_memory:
            result = svg_string
        else:
            result = self._renderer.render(svg_string, self._filename, self._format)

        self._finished = True
        self._result = result
        logger.info(f"Finished drawing with {len(self._elements)} element(s) -> {self._filename or 'memory'}")
        return result

    def preview(self):
        """
        Render the drawing to a PIL Image, finishing it first if necessary.

        Returns:
            PIL Image of the drawing
        """
        if not self._finished:
            self.finish()
        return self._renderer.render_image(self.svgstring())

    def __repr__(self) -> str:
        return (f"Drawing({self.width:g}x{self.height:g}, format={self._format!r}, "
                f"filename={self._filename!r}, elements={len(self._elements)})")
