"""
Tests for the gallery programs.
"""

import math
import os
import shutil
import tempfile
import unittest
import xml.etree.ElementTree as ET

import shapefile

from vecdraw.drawing import set_current
from vecdraw.gallery import (
    GALLERY, load_chart_data, logo, logo_circles, lonlat_to_canvas, project,
    sector_chart, sector_layout, sierpinski, sierpinski_triangles, world_map
)
from vecdraw.models.color import LOGO_GREEN
from vecdraw.models.point import O, Point
from vecdraw.utils.logger import LogCapture

SVG_NS = "{http://www.w3.org/2000/svg}"


def parse(svg_string):
    return ET.fromstring(svg_string.encode("utf-8"))


class GalleryTestCase(unittest.TestCase):
    """Base class with a temporary directory."""

    def setUp(self):
        self.temp_dir = tempfile.mkdtemp()

    def tearDown(self):
        set_current(None)
        shutil.rmtree(self.temp_dir)


class TestSierpinski(GalleryTestCase):
    """Tests for the Sierpinski triangle."""

    def test_triangle_count(self):
        outline = [(0, 0), (8, 0), (4, 8)]
        self.assertEqual(len(sierpinski_triangles(outline, 0)), 1)
        self.assertEqual(len(sierpinski_triangles(outline, 3)), 27)

    def test_subdivision(self):
        triangles = sierpinski_triangles([(0, 0), (8, 0), (4, 8)], 1)
        self.assertEqual(triangles[0], (Point(0, 0), Point(4, 0), Point(2, 4)))

    def test_invalid(self):
        with self.assertRaises(ValueError):
            sierpinski_triangles([(0, 0), (1, 0), (0, 1)], -1)
        with self.assertRaises(ValueError):
            sierpinski_triangles([(0, 0), (1, 0)], 1)

    def test_drawing(self):
        root = parse(sierpinski(":svg", depth=2, size=200))
        paths = root.findall(f"{SVG_NS}path")
        self.assertEqual(len(paths), 9)
        self.assertGreater(len({p.get("fill") for p in paths}), 1)

    def test_writes_file(self):
        path = os.path.join(self.temp_dir, "sierpinski.svg")
        sierpinski(path, depth=1)
        self.assertTrue(os.path.exists(path))


class TestLogo(GalleryTestCase):
    """Tests for the logo composition."""

    def test_circle_placement(self):
        circles = logo_circles(O, 10)
        self.assertEqual(len(circles), 3)
        top, color = circles[0]
        self.assertTrue(top.isclose((0, -10)))
        self.assertEqual(color, LOGO_GREEN)
        for center, _ in circles:
            self.assertAlmostEqual(center.norm, 10)

    def test_drawing(self):
        svg_string = logo(":svg", word="hello")
        root = parse(svg_string)
        self.assertEqual(root.find(f"{SVG_NS}text").text, "hello")
        # 24 ring dashes plus a fill and an outline per circle
        self.assertEqual(len(root.findall(f"{SVG_NS}path")), 30)


class TestMaps(GalleryTestCase):
    """Tests for the map projection and the world map."""

    def test_project(self):
        xy = project([[180, 90], [-180, -90], [0, 0]], 360, 180)
        self.assertEqual(xy.tolist(), [[180, -90], [-180, 90], [0, 0]])

    def test_lonlat_to_canvas(self):
        self.assertEqual(lonlat_to_canvas(0, 0, 800, 400), Point(0, 0))
        self.assertEqual(lonlat_to_canvas(-180, -90, 800, 400), Point(-400, 200))
        self.assertEqual(lonlat_to_canvas(90, 45, 800, 400), Point(200, -100))

    def write_shapefile(self):
        base = os.path.join(self.temp_dir, "countries")
        writer = shapefile.Writer(base, shapeType=shapefile.POLYGON)
        writer.field("NAME", "C")
        writer.poly([[[-10, -10], [-10, 10], [10, 10], [10, -10], [-10, -10]]])
        writer.record("square")
        writer.poly([
            [[20, 20], [20, 30], [30, 30], [20, 20]],
            [[40, 40], [40, 50], [50, 50], [40, 40]],
        ])
        writer.record("islands")
        writer.null()
        writer.record("empty")
        writer.close()
        return base

    def write_airports(self):
        path = os.path.join(self.temp_dir, "airports.csv")
        with open(path, "w", encoding="utf-8") as f:
            f.write("Name,Lat,Lon\n")
            f.write("North,60.0,10.0\n")
            f.write("South,-30.5,20.25\n")
            f.write("Unknown,,5\n")
        return path

    def test_world_map(self):
        base = self.write_shapefile()
        with LogCapture("vecdraw.gallery.maps") as capture:
            svg_string = world_map(":svg", base, width=360, height=180)
        root = parse(svg_string)
        # Each ring is filled and then outlined
        self.assertEqual(len(root.findall(f"{SVG_NS}path")), 6)
        self.assertTrue(any("no points" in m for m in capture.messages))

    def test_world_map_with_airports(self):
        base = self.write_shapefile()
        airports = self.write_airports()
        with LogCapture("vecdraw.gallery.maps") as capture:
            svg_string = world_map(":svg", base, airports, width=360, height=180)
        root = parse(svg_string)
        self.assertEqual(len(root.findall(f"{SVG_NS}path")), 8)
        self.assertTrue(any("without coordinates" in m for m in capture.messages))

    def test_world_map_needs_shapefile(self):
        with self.assertRaises(ValueError):
            world_map(":svg")


class TestCharts(GalleryTestCase):
    """Tests for the sector chart."""

    def test_layout(self):
        layout = sector_layout([1, 2], 100)
        self.assertEqual(len(layout), 2)
        start, end, radius = layout[0]
        self.assertAlmostEqual(start, -math.pi / 2)
        self.assertAlmostEqual(end, math.pi / 2)
        self.assertAlmostEqual(radius, 50)
        self.assertAlmostEqual(layout[1][2], 100)

    def test_layout_with_inner_radius(self):
        layout = sector_layout([1, 4], 100, inner_radius=20)
        self.assertAlmostEqual(layout[0][2], 40)
        self.assertAlmostEqual(layout[1][2], 100)

    def test_layout_invalid(self):
        with self.assertRaises(ValueError):
            sector_layout([], 100)
        with self.assertRaises(ValueError):
            sector_layout([1, 0], 100)
        with self.assertRaises(ValueError):
            sector_layout([1, -2], 100)

    def test_chart(self):
        root = parse(sector_chart(":svg", {"julia": 1.2, "python": 3.4, "c": 1.0}, title="Benchmarks"))
        self.assertEqual(len(root.findall(f"{SVG_NS}path")), 6)
        labels = [t.text for t in root.findall(f"{SVG_NS}text")]
        self.assertEqual(labels, ["julia", "python", "c", "Benchmarks"])

    def test_chart_from_csv(self):
        path = os.path.join(self.temp_dir, "bench.csv")
        with open(path, "w", encoding="utf-8") as f:
            f.write("Label,Value\nfib,2.5\nsort,1.5\n")
        self.assertEqual(load_chart_data(path), [("fib", 2.5), ("sort", 1.5)])
        root = parse(sector_chart(":svg", path))
        self.assertEqual(len(root.findall(f"{SVG_NS}text")), 2)

    def test_chart_invalid(self):
        with self.assertRaises(ValueError):
            sector_chart(":svg", {})
        with self.assertRaises(ValueError):
            sector_chart(":svg", {"a": 0})
        with self.assertRaises(ValueError):
            sector_chart(":svg")


class TestRegistry(unittest.TestCase):
    """The gallery registry names every program."""

    def test_names(self):
        self.assertEqual(sorted(GALLERY), ["chart", "logo", "map", "sierpinski"])


if __name__ == "__main__":
    unittest.main()
