"""
Tests for the command-line interface.
"""

import json
import os
import shutil
import tempfile
import unittest

from vecdraw.cli import main, parse_args
from vecdraw.core import CONFIG, reset_config
from vecdraw.drawing import set_current


class TestCLI(unittest.TestCase):
    """Tests for the vecdraw command."""

    def setUp(self):
        self.temp_dir = tempfile.mkdtemp()

    def tearDown(self):
        set_current(None)
        reset_config()
        shutil.rmtree(self.temp_dir)

    def path(self, name):
        return os.path.join(self.temp_dir, name)

    def write(self, name, content):
        with open(self.path(name), "w", encoding="utf-8") as f:
            f.write(content)
        return self.path(name)

    def test_parse_args(self):
        args = parse_args(["--verbose", "gallery", "sierpinski", "-o", "out.svg", "--depth", "3"])
        self.assertTrue(args.verbose)
        self.assertEqual(args.command, "gallery")
        self.assertEqual(args.depth, 3)
        with self.assertRaises(SystemExit):
            parse_args(["gallery", "unknown", "-o", "x.svg"])

    def test_gallery_sierpinski(self):
        output = self.path("tri.svg")
        self.assertEqual(main(["gallery", "sierpinski", "-o", output, "--depth", "1", "--size", "100"]), 0)
        self.assertTrue(os.path.exists(output))

    def test_gallery_chart(self):
        data = self.write("data.csv", "label,value\na,1\nb,2\n")
        output = self.path("chart.svg")
        self.assertEqual(main(["gallery", "chart", "-o", output, "--data", data, "--title", "T"]), 0)
        self.assertTrue(os.path.exists(output))

    def test_gallery_missing_input(self):
        self.assertEqual(main(["gallery", "chart", "-o", self.path("c.svg")]), 1)
        self.assertEqual(main(["gallery", "map", "-o", self.path("m.svg")]), 1)

    def test_unsupported_output(self):
        self.assertEqual(main(["gallery", "logo", "-o", self.path("logo.bmp")]), 1)

    def test_check(self):
        valid = self.write("ok.svg", '<svg xmlns="http://www.w3.org/2000/svg"><rect width="1" height="1"/></svg>')
        invalid = self.write("bad.svg", '<svg><script/></svg>')
        self.assertEqual(main(["check", valid]), 0)
        self.assertEqual(main(["check", invalid]), 1)
        self.assertEqual(main(["check", self.path("missing.svg")]), 1)

    def test_convert_missing_input(self):
        self.assertEqual(main(["convert", self.path("missing.svg"), self.path("out.png")]), 1)

    def test_config_file(self):
        config = self.write("config.json", json.dumps({"precision": 1}))
        self.assertEqual(main(["--config", config, "gallery", "logo", "-o", self.path("logo.svg")]), 0)
        self.assertEqual(CONFIG["precision"], 1)

    def test_config_unknown_key(self):
        config = self.write("config.json", json.dumps({"colour": "red"}))
        self.assertEqual(main(["--config", config, "gallery", "logo", "-o", self.path("logo.svg")]), 1)


if __name__ == "__main__":
    unittest.main()
