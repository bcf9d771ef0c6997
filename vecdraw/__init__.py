"""
vecdraw
=======
A small 2D vector-graphics drawing library.

Drawing commands act on the current drawing; finish() writes it as PNG,
SVG, PDF or EPS depending on the output filename extension.
"""

__version__ = "0.1.0"

from vecdraw.api import *  # noqa: F401,F403
from vecdraw.api import __all__ as _api_all
from vecdraw.drawing import (
    Drawing, GraphicsState, DrawingError, NoDrawingError, StateStackError,
    UnsupportedFormatError, PAPER_SIZES, paper_size
)
from vecdraw.macros import draw, png, svg, pdf, eps, with_drawing
from vecdraw.models import (
    Point, O, distance, midpoint, between, polar, perpendicular, rotate_point,
    bounding_box, Color, ColorError, Transform, TransformError
)
from vecdraw.tiles import Tiler
from vecdraw.core import CONFIG, configure
from vecdraw.core.renderer import SVGRenderer, RenderError
from vecdraw.core.validator import SVGValidator

__all__ = list(_api_all) + [
    "GraphicsState", "DrawingError", "NoDrawingError", "StateStackError",
    "UnsupportedFormatError", "PAPER_SIZES", "paper_size",
    "draw", "png", "svg", "pdf", "eps", "with_drawing",
    "Point", "O", "distance", "midpoint", "between", "polar", "perpendicular",
    "rotate_point", "bounding_box", "Color", "ColorError", "Transform", "TransformError",
    "Tiler", "CONFIG", "configure", "SVGRenderer", "RenderError", "SVGValidator",
]
