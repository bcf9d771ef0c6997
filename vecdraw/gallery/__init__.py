"""
vecdraw - Gallery Package
=======================
Gallery programs built on the drawing API.
"""

from vecdraw.gallery.sierpinski import sierpinski, sierpinski_triangles
from vecdraw.gallery.logo import logo, logo_circles
from vecdraw.gallery.maps import world_map, lonlat_to_canvas, project
from vecdraw.gallery.charts import sector_chart, sector_layout, load_chart_data

GALLERY = {
    "sierpinski": sierpinski,
    "logo": logo,
    "map": world_map,
    "chart": sector_chart,
}

__all__ = [
    "GALLERY",
    "sierpinski", "sierpinski_triangles",
    "logo", "logo_circles",
    "world_map", "lonlat_to_canvas", "project",
    "sector_chart", "sector_layout", "load_chart_data",
]
