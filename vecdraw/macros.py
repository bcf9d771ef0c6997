"""
Setup and teardown wrappers for drawings.

    with png("circle.png", 400, 400):
        circle(O, 100, "fill")

creates the drawing, moves the origin to the page center, paints the
background and sets the hue to black. On a clean exit the drawing is
finished (and optionally previewed). If the body raises, the drawing is
closed without writing anything and the exception propagates.
"""

import functools
import logging
from contextlib import contextmanager
from typing import Callable, Iterator, Optional

from vecdraw.core import CONFIG
from vecdraw.drawing import Drawing, set_current, currentdrawing
from vecdraw.models.color import ColorValue

logger = logging.getLogger(__name__)


def _with_extension(filename: str, extension: str) -> str:
    if filename.lower().endswith("." + extension):
        return filename
    return f"{filename}.{extension}"


@contextmanager
def draw(
    filename: Optional[str] = None,
    width: Optional[float] = None,
    height: Optional[float] = None,
    background: Optional[ColorValue] = None,
    preview: bool = False
) -> Iterator[Drawing]:
    """
    Context manager that creates a drawing and finishes it on exit.

    Args:
        filename: Output file; the extension selects the format
        width: Page width in points (or paper name)
        height: Page height in points
        background: Page color; defaults to the configured background
        preview: Render the finished drawing to a PIL Image as `d.image`

    Yields:
        The new drawing
    """
    previous = currentdrawing()
    d = Drawing(width, height, filename or CONFIG["default_filename"])
    d.origin()
    d.background(background if background is not None else CONFIG["background"])
    d.set_hue("black")

    try:
        yield d
    except BaseException:
        logger.debug(f"Drawing body raised; discarding {d!r}")
        if currentdrawing() is d:
            set_current(previous)
        raise

    d.finish()
    if preview:
        d.image = d.preview()


@contextmanager
def png(filename: str = "vecdraw-drawing", width=None, height=None, background=None, preview=False) -> Iterator[Drawing]:
    with draw(_with_extension(filename, "png"), width, height, background, preview) as d:
        yield d


@contextmanager
def svg(filename: str = "vecdraw-drawing", width=None, height=None, background=None, preview=False) -> Iterator[Drawing]:
    with draw(_with_extension(filename, "svg"), width, height, background, preview) as d:
        yield d


@contextmanager
def pdf(filename: str = "vecdraw-drawing", width=None, height=None, background=None, preview=False) -> Iterator[Drawing]:
    with draw(_with_extension(filename, "pdf"), width, height, background, preview) as d:
        yield d


@contextmanager
def eps(filename: str = "vecdraw-drawing", width=None, height=None, background=None, preview=False) -> Iterator[Drawing]:
    with draw(_with_extension(filename, "eps"), width, height, background, preview) as d:
        yield d


def with_drawing(
    filename: Optional[str] = None,
    width: Optional[float] = None,
    height: Optional[float] = None,
    background: Optional[ColorValue] = None
) -> Callable:
    """
    Decorator form of draw(): the decorated function's body is drawn into a
    new drawing and the call returns the finish() result.
    """
    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            with draw(filename, width, height, background) as d:
                func(*args, **kwargs)
            return d.finish()
        return wrapper
    return decorator
