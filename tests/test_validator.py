"""
Tests for the SVG validator.
"""

import unittest

from vecdraw.core.validator import SVGValidator

VALID_SVG = """<svg xmlns="http://www.w3.org/2000/svg" width="10" height="10" viewBox="0 0 10 10">
<defs><clipPath id="clip1" clipPathUnits="userSpaceOnUse"><path d="M0,0 L5,0 L5,5 Z"/></clipPath></defs>
<g clip-path="url(#clip1)"><rect x="0" y="0" width="10" height="10" fill="#ff0000"/></g>
<text x="0" y="0" xml:space="preserve" font-size="3">hi</text>
</svg>"""


class TestSVGValidator(unittest.TestCase):
    """Tests for the SVGValidator class."""

    def setUp(self):
        self.validator = SVGValidator()

    def test_valid(self):
        self.assertEqual(self.validator.validate(VALID_SVG), (True, None))

    def test_malformed(self):
        valid, message = self.validator.validate("<svg><path></svg>")
        self.assertFalse(valid)
        self.assertIn("Invalid XML", message)

    def test_wrong_root(self):
        valid, message = self.validator.validate("<path d='M0,0'/>")
        self.assertFalse(valid)
        self.assertIn("Root element", message)

    def test_disallowed_element(self):
        valid, message = self.validator.validate('<svg><script>alert(1)</script></svg>')
        self.assertFalse(valid)
        self.assertIn("script", message)

    def test_disallowed_attribute(self):
        valid, message = self.validator.validate('<svg><rect onclick="x()"/></svg>')
        self.assertFalse(valid)
        self.assertIn("onclick", message)

    def test_external_clip_reference(self):
        valid, message = self.validator.validate('<svg><g clip-path="url(http://evil.test/#c)"/></svg>')
        self.assertFalse(valid)
        self.assertIn("clip-path", message)

    def test_embedded_data(self):
        valid, _ = self.validator.validate('<svg><g id="data:text/html,x"/></svg>')
        self.assertFalse(valid)

    def test_entities_forbidden(self):
        svg = '<!DOCTYPE svg [<!ENTITY x "boom">]><svg><text>&x;</text></svg>'
        valid, _ = self.validator.validate(svg)
        self.assertFalse(valid)

    def test_size_limit(self):
        valid, message = SVGValidator(max_svg_size=10).validate(VALID_SVG)
        self.assertFalse(valid)
        self.assertIn("size", message)


if __name__ == "__main__":
    unittest.main()
