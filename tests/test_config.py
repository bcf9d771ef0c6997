"""
Tests for configuration, logging and file helpers.
"""

import json
import logging
import os
import shutil
import tempfile
import unittest
from unittest import mock

from vecdraw.config import DEFAULT_CONFIG
from vecdraw.core import CONFIG, Profiler, _load_config, configure, reset_config
from vecdraw.utils.io import find_column, load_config, load_csv, load_svg, save_config, save_svg
from vecdraw.utils.logger import JsonFormatter, LogCapture, log_exception, setup_logger


class TestConfig(unittest.TestCase):
    """Tests for the global configuration."""

    def tearDown(self):
        reset_config()

    def test_defaults(self):
        for key, value in DEFAULT_CONFIG.items():
            if key != "output_dir":
                self.assertEqual(CONFIG[key], value)

    def test_configure(self):
        configure({"line_width": 4.0})
        self.assertEqual(CONFIG["line_width"], 4.0)
        reset_config()
        self.assertEqual(CONFIG["line_width"], DEFAULT_CONFIG["line_width"])

    def test_unknown_key(self):
        with self.assertRaises(KeyError):
            configure({"no_such_setting": 1})

    def test_environment(self):
        with mock.patch.dict(os.environ, {"VECDRAW_OUTPUT_DIR": "/tmp/out", "VECDRAW_LOG_LEVEL": "debug"}):
            config = _load_config()
        self.assertEqual(config["output_dir"], "/tmp/out")
        self.assertEqual(config["log_level"], "DEBUG")

    def test_profiler(self):
        with Profiler("work", enabled=True) as profiler:
            sum(range(100))
        self.assertIsNotNone(profiler.duration)
        with Profiler("skipped", enabled=False) as profiler:
            pass
        self.assertIsNone(profiler.duration)


class TestLogging(unittest.TestCase):
    """Tests for the logging helpers."""

    def setUp(self):
        self.temp_dir = tempfile.mkdtemp()

    def tearDown(self):
        package_logger = logging.getLogger("vecdraw")
        for handler in package_logger.handlers[:]:
            package_logger.removeHandler(handler)
            handler.close()
        package_logger.setLevel(logging.NOTSET)
        shutil.rmtree(self.temp_dir)

    def test_setup_logger_file(self):
        log_file = os.path.join(self.temp_dir, "logs", "vecdraw.log")
        setup_logger(level="INFO", log_file=log_file, console=False)
        logging.getLogger("vecdraw.test").info("hello file")
        for handler in logging.getLogger("vecdraw").handlers:
            handler.flush()
        with open(log_file, encoding="utf-8") as f:
            self.assertIn("hello file", f.read())

    def test_setup_logger_uses_configured_level(self):
        with mock.patch.dict(CONFIG, {"log_level": "ERROR"}):
            package_logger = setup_logger(console=False)
        self.assertEqual(package_logger.level, logging.ERROR)

    def test_json_formatter(self):
        record = logging.LogRecord("vecdraw", logging.INFO, __file__, 1, "value %d", (3,), None)
        record.drawing = "a.svg"
        data = json.loads(JsonFormatter().format(record))
        self.assertEqual(data["message"], "value 3")
        self.assertEqual(data["level"], "INFO")
        self.assertEqual(data["drawing"], "a.svg")

    def test_log_capture_and_exception(self):
        logger = logging.getLogger("vecdraw.capture")
        with LogCapture("vecdraw.capture") as capture:
            log_exception(logger, ValueError("bad"), context={"file": "x"})
        self.assertEqual(len(capture.records), 1)
        self.assertIn("ValueError: bad", capture.messages[0])
        self.assertIn("file=x", capture.messages[0])


class TestIO(unittest.TestCase):
    """Tests for file helpers."""

    def setUp(self):
        self.temp_dir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.temp_dir)

    def test_csv(self):
        path = os.path.join(self.temp_dir, "data.csv")
        with open(path, "w", encoding="utf-8") as f:
            f.write(" Name , Latitude\nA, 1.5\n")
        df = load_csv(path)
        self.assertEqual(list(df.columns), ["name", "latitude"])
        self.assertEqual(find_column(df, "lat", "latitude"), "latitude")
        with self.assertRaises(KeyError):
            find_column(df, "longitude", "lon")
        with self.assertRaises(FileNotFoundError):
            load_csv(os.path.join(self.temp_dir, "missing.csv"))

    def test_svg_files(self):
        path = save_svg("<svg/>", os.path.join(self.temp_dir, "sub", "a.svg"))
        self.assertEqual(load_svg(path), "<svg/>")
        with self.assertRaises(FileNotFoundError):
            load_svg(os.path.join(self.temp_dir, "missing.svg"))

    def test_config_files(self):
        path = os.path.join(self.temp_dir, "conf", "settings.json")
        save_config({"precision": 2}, path)
        self.assertEqual(load_config(path), {"precision": 2})
        with open(path, "w", encoding="utf-8") as f:
            f.write("[1, 2]")
        with self.assertRaises(ValueError):
            load_config(path)


if __name__ == "__main__":
    unittest.main()
