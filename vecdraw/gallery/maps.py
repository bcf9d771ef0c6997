"""
World map from a shapefile, with optional airport locations.

Country outlines are read with pyshp and projected onto the canvas with an
equirectangular projection; airports come from a CSV file read with pandas.
"""

import logging
from pathlib import Path
from typing import List, Union

import numpy as np
import shapefile

from vecdraw import api
from vecdraw.macros import draw
from vecdraw.models.point import Point
from vecdraw.utils.io import find_column, load_csv

logger = logging.getLogger(__name__)

LAND_COLOR = "darkseagreen"
COAST_COLOR = "darkslategray"
SEA_COLOR = "aliceblue"
AIRPORT_COLOR = "orangered"


def project(lonlat: np.ndarray, width: float, height: float) -> np.ndarray:
    """
    Equirectangular projection of (longitude, latitude) pairs.

    Args:
        lonlat: Array of shape (n, 2) with degrees of longitude and latitude
        width: Canvas width covering 360 degrees of longitude
        height: Canvas height covering 180 degrees of latitude

    Returns:
        Array of shape (n, 2) with canvas coordinates, origin at the center
    """
    lonlat = np.asarray(lonlat, dtype=float).reshape(-1, 2)
    xy = np.empty_like(lonlat)
    xy[:, 0] = lonlat[:, 0] / 360.0 * width
    xy[:, 1] = -lonlat[:, 1] / 180.0 * height
    return xy


def lonlat_to_canvas(lon: float, lat: float, width: float, height: float) -> Point:
    """Canvas position of a single longitude/latitude, origin at the center."""
    x, y = project(np.array([[lon, lat]]), width, height)[0]
    return Point(float(x), float(y))


def shape_parts(shape) -> List[np.ndarray]:
    """Split a pyshp shape into one (n, 2) array per ring."""
    points = np.asarray(shape.points, dtype=float)
    if points.size == 0:
        return []
    bounds = list(getattr(shape, "parts", None) or [0]) + [len(points)]
    return [points[start:end] for start, end in zip(bounds[:-1], bounds[1:]) if end - start > 1]


def draw_shapes(reader: shapefile.Reader, width: float, height: float) -> int:
    """
    Draw every polygon in a shapefile on the current drawing.

    Returns:
        Number of rings drawn
    """
    rings = 0
    for index, shape in enumerate(reader.iterShapes()):
        parts = shape_parts(shape)
        if not parts:
            logger.warning(f"Skipping shapefile record {index}: no points")
            continue
        for part in parts:
            outline = [Point(float(x), float(y)) for x, y in project(part, width, height)]
            api.sethue(LAND_COLOR)
            api.poly(outline, "fillpreserve", close=True)
            api.sethue(COAST_COLOR)
            api.strokepath()
            rings += 1
    logger.debug(f"Drew {rings} rings from {reader.shapeType} shapefile")
    return rings


def draw_airports(csv_path: Union[str, Path], width: float, height: float, radius: float = 1.5) -> int:
    """
    Plot airports from a CSV with latitude and longitude columns as dots.

    Returns:
        Number of airports plotted
    """
    df = load_csv(csv_path)
    lat_column = find_column(df, "latitude", "lat")
    lon_column = find_column(df, "longitude", "lon", "lng")

    coordinates = df[[lon_column, lat_column]].astype(float).dropna().to_numpy()
    dropped = len(df) - len(coordinates)
    if dropped:
        logger.warning(f"Skipped {dropped} airport rows without coordinates")

    api.sethue(AIRPORT_COLOR)
    for x, y in project(coordinates, width, height):
        api.circle(Point(float(x), float(y)), radius, "fill")
    return len(coordinates)


def world_map(
    filename: str = "world.pdf",
    shapefile_path: Union[str, Path, None] = None,
    airports_csv: Union[str, Path, None] = None,
    width: float = 800,
    height: float = 400
):
    """
    Draw a world map from a shapefile, optionally with airports.

    Args:
        filename: Output file
        shapefile_path: Shapefile with country outlines in longitude/latitude
        airports_csv: Optional CSV file with airport coordinates
        width: Page width
        height: Page height

    Returns:
        The finish() result of the drawing
    """
    if shapefile_path is None:
        raise ValueError("world_map() needs a shapefile")

    with shapefile.Reader(str(shapefile_path)) as reader:
        logger.info(f"Reading {len(reader)} shapes from {shapefile_path}")
        with draw(filename, width, height, background=SEA_COLOR) as d:
            api.setline(0.5)
            draw_shapes(reader, width, height)
            if airports_csv is not None:
                draw_airports(airports_csv, width, height)
    return d.finish()
