"""
Tests for the rendering backend.
"""

import os
import shutil
import tempfile
import unittest

from vecdraw.core.renderer import RenderError, SVGRenderer, format_from_filename
from vecdraw.drawing import Drawing, set_current

try:
    import cairosvg  # noqa: F401
    HAS_CAIRO = True
except (ImportError, OSError):
    HAS_CAIRO = False

SIMPLE_SVG = """<svg xmlns="http://www.w3.org/2000/svg" width="40" height="30" viewBox="0 0 40 30">
<rect x="0" y="0" width="40" height="30" fill="#ff0000"/>
</svg>"""


class TestFormatFromFilename(unittest.TestCase):
    """Tests for format_from_filename."""

    def test_formats(self):
        self.assertEqual(format_from_filename("a.png"), "png")
        self.assertEqual(format_from_filename("dir/b.PDF"), "pdf")
        self.assertEqual(format_from_filename("c.eps"), "eps")
        self.assertIsNone(format_from_filename("d.jpg"))
        self.assertIsNone(format_from_filename("noext"))


class TestSVGRenderer(unittest.TestCase):
    """Tests for the SVGRenderer class."""

    def setUp(self):
        self.temp_dir = tempfile.mkdtemp()
        self.renderer = SVGRenderer()

    def tearDown(self):
        set_current(None)
        shutil.rmtree(self.temp_dir)

    def test_svg_written_directly(self):
        path = self.renderer.render(SIMPLE_SVG, os.path.join(self.temp_dir, "out", "a.svg"))
        with open(path, encoding="utf-8") as f:
            self.assertEqual(f.read(), SIMPLE_SVG)

    def test_unsupported_format(self):
        with self.assertRaises(RenderError):
            self.renderer.render(SIMPLE_SVG, os.path.join(self.temp_dir, "a.gif"))

    def test_convert_missing_file(self):
        with self.assertRaises(FileNotFoundError):
            self.renderer.convert_file(os.path.join(self.temp_dir, "missing.svg"), "x.png")

    @unittest.skipUnless(HAS_CAIRO, "cairosvg is not available")
    def test_png_pdf_eps(self):
        for ext, magic in (("png", b"\x89PNG"), ("pdf", b"%PDF"), ("eps", b"%!PS")):
            path = self.renderer.render(SIMPLE_SVG, os.path.join(self.temp_dir, f"a.{ext}"))
            with open(path, "rb") as f:
                self.assertTrue(f.read(4).startswith(magic), ext)

    @unittest.skipUnless(HAS_CAIRO, "cairosvg is not available")
    def test_render_image(self):
        image = self.renderer.render_image(SIMPLE_SVG)
        self.assertEqual(image.size, (40, 30))
        self.assertEqual(image.convert("RGB").getpixel((5, 5)), (255, 0, 0))
        self.assertEqual(self.renderer.render_image(SIMPLE_SVG, size=(80, 60)).size, (80, 60))

    @unittest.skipUnless(HAS_CAIRO, "cairosvg is not available")
    def test_backend_error_wrapped(self):
        with self.assertRaises(RenderError) as context:
            self.renderer.render("<svg", os.path.join(self.temp_dir, "bad.png"))
        self.assertIsNotNone(context.exception.__cause__)

    @unittest.skipUnless(HAS_CAIRO, "cairosvg is not available")
    def test_drawing_to_png_and_preview(self):
        path = os.path.join(self.temp_dir, "drawing.png")
        d = Drawing(64, 32, path)
        d.background("blue")
        d.finish()
        self.assertTrue(os.path.exists(path))
        image = d.preview()
        self.assertEqual(image.size, (64, 32))
        self.assertEqual(image.convert("RGB").getpixel((10, 10)), (0, 0, 255))

    @unittest.skipUnless(HAS_CAIRO, "cairosvg is not available")
    def test_convert_file(self):
        source = os.path.join(self.temp_dir, "in.svg")
        with open(source, "w", encoding="utf-8") as f:
            f.write(SIMPLE_SVG)
        result = self.renderer.convert_file(source, os.path.join(self.temp_dir, "out.pdf"))
        self.assertTrue(result.exists())


if __name__ == "__main__":
    unittest.main()
