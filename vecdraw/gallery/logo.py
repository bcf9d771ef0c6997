"""
Logo composition: three colored circles in a triangle with a word mark.
"""

import math
from typing import List, Tuple

from vecdraw import api
from vecdraw.macros import draw
from vecdraw.models.color import LOGO_BLUE, LOGO_GREEN, LOGO_PURPLE, LOGO_RED, Color
from vecdraw.models.point import O, Point, PointLike, as_point, polar


def logo_circles(center: PointLike, radius: float) -> List[Tuple[Point, Color]]:
    """
    Centers and colors of the logo circles.

    The circles sit at the corners of an equilateral triangle whose
    circumradius is `radius`: green on top, red bottom left, purple bottom right.
    """
    center = as_point(center)
    return [
        (center + polar(radius, -math.pi / 2), LOGO_GREEN),
        (center + polar(radius, 5 * math.pi / 6), LOGO_RED),
        (center + polar(radius, math.pi / 6), LOGO_PURPLE),
    ]


def logo(filename: str = "logo.svg", size: float = 500, word: str = "vecdraw"):
    """
    Draw the logo.

    Returns:
        The finish() result of the drawing
    """
    with draw(filename, size, size) as d:
        with api.layer():
            api.translate(0, -size * 0.08)
            api.scale(size / 500)

            api.setline(6)
            api.sethue(LOGO_BLUE)
            with api.layer():
                # Ring of short dashes around the circles
                for _ in range(24):
                    api.rotate(2 * math.pi / 24)
                    api.line(Point(170, 0), Point(185, 0), "stroke")

            for center, color in logo_circles(O, 90):
                with api.layer():
                    api.translate(center)
                    api.sethue(color)
                    api.circle(O, 70, "fill")
                    api.sethue(color.darken(0.15))
                    api.setline(4)
                    api.circle(O, 70, "stroke")

        api.sethue(LOGO_BLUE)
        api.fontsize(size / 10)
        api.text(word, Point(0, size * 0.42), halign="center", valign="middle")
    return d.finish()
