"""
Sector chart of benchmark results.

Each value gets a sector of equal angle; its outer radius is proportional
to the value relative to the largest one.
"""

import math
from pathlib import Path
from typing import List, Mapping, Sequence, Tuple, Union

from vecdraw import api
from vecdraw.macros import draw
from vecdraw.models.color import Color
from vecdraw.models.point import O, polar
from vecdraw.utils.io import find_column, load_csv

ChartData = Union[Mapping[str, float], str, Path]


def sector_layout(
    values: Sequence[float],
    max_radius: float,
    inner_radius: float = 0.0
) -> List[Tuple[float, float, float]]:
    """
    Angles and radii for a sector chart.

    Sectors start at the top and go clockwise.

    Returns:
        List of (start_angle, end_angle, outer_radius) per value

    Raises:
        ValueError: If there are no values or a value is not positive
    """
    if not values:
        raise ValueError("Sector chart needs at least one value")
    if any(v <= 0 for v in values):
        raise ValueError("Sector chart values must be positive")

    largest = max(values)
    step = 2 * math.pi / len(values)
    layout = []
    for i, value in enumerate(values):
        start = -math.pi / 2 + i * step
        outer = inner_radius + (max_radius - inner_radius) * value / largest
        layout.append((start, start + step, outer))
    return layout


def load_chart_data(data: ChartData) -> List[Tuple[str, float]]:
    """Read (label, value) pairs from a mapping or a CSV with label/value columns."""
    if isinstance(data, (str, Path)):
        df = load_csv(data)
        label_column = find_column(df, "label", "name")
        value_column = find_column(df, "value", "time")
        return [(str(label), float(value)) for label, value in zip(df[label_column], df[value_column])]
    return [(str(label), float(value)) for label, value in data.items()]


def sector_chart(
    filename: str = "chart.svg",
    data: ChartData = None,
    title: str = "",
    size: float = 600,
    inner_radius: float = 40.0
):
    """
    Draw a labelled sector chart.

    Returns:
        The finish() result of the drawing
    """
    if data is None:
        raise ValueError("Sector chart needs data")
    items = load_chart_data(data)
    if not items:
        raise ValueError("Sector chart needs at least one value")

    labels = [label for label, _ in items]
    max_radius = size * 0.35
    layout = sector_layout([value for _, value in items], max_radius, inner_radius)

    with draw(filename, size, size) as d:
        api.setline(1)
        for i, ((start, end, outer), label) in enumerate(zip(layout, labels)):
            color = Color.from_hsl(360 * i / len(items), 0.6, 0.55)
            api.sethue(color)
            api.sector(O, inner_radius, outer, start, end, "fillpreserve")
            api.sethue("white")
            api.strokepath()

            api.sethue("black")
            api.fontsize(10)
            middle = (start + end) / 2
            api.text(label, polar(outer + 12, middle), halign="center", valign="middle")

        if title:
            api.fontsize(16)
            api.text(title, (0, -size / 2 + 30), halign="center", valign="middle")
    return d.finish()
