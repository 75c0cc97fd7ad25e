#!/usr/bin/env python3
"""
Tests for configuration loading.
"""

import json
import os
import sys
import tempfile
import unittest

# Add package to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from geokalman import Config, GeoKalmanFilter, GeoProcessNoise

class TestConfig(unittest.TestCase):
    """Test Config class."""

    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.path = os.path.join(self.tmpdir.name, "geokalman.json")

    def tearDown(self):
        self.tmpdir.cleanup()

    def write(self, content):
        with open(self.path, 'w') as f:
            f.write(content)

    def test_defaults(self):
        config = Config()
        self.assertEqual(config.log_level, "INFO")
        self.assertEqual(config.geo_process_noise, GeoProcessNoise())

    def test_missing_file_uses_defaults(self):
        config = Config(self.path)
        self.assertEqual(config.geo_process_noise, GeoProcessNoise())
        self.assertFalse(os.path.exists(self.path))

    def test_load_merges_over_defaults(self):
        self.write(json.dumps({"process_noise": {"base_latitude": 43.0, "distance_per_second": 2.0}}))
        config = Config(self.path)

        self.assertEqual(config.geo_process_noise, GeoProcessNoise(
            base_latitude=43.0, distance_per_second=2.0, speed_per_second=0.0))
        self.assertEqual(config.log_level, "INFO")

    def test_defaults_not_shared(self):
        self.write(json.dumps({"process_noise": {"base_latitude": 10.0}}))
        Config(self.path)
        self.assertEqual(Config.DEFAULT_CONFIG["process_noise"]["base_latitude"], 0.0)
        self.assertEqual(Config().get("process_noise.base_latitude"), 0.0)

    def test_load_without_file(self):
        config = Config()
        self.assertFalse(config.load_config())
        self.assertEqual(config.geo_process_noise, GeoProcessNoise())

    def test_invalid_json(self):
        self.write("{not json")
        config = Config(self.path)
        self.assertFalse(config.load_config())
        self.assertEqual(config.geo_process_noise, GeoProcessNoise())

    def test_get_and_set(self):
        config = Config()
        config.set("process_noise.speed_per_second", 0.3)
        config.set("output.precision", 6)

        self.assertEqual(config.get("process_noise.speed_per_second"), 0.3)
        self.assertEqual(config.get("output.precision"), 6)
        self.assertIsNone(config.get("process_noise.missing"))
        self.assertEqual(config.get("missing.key", 1), 1)

    def test_save_and_reload(self):
        config = Config(self.path)
        config.set("process_noise.distance_per_second", 1.5)
        config.set("log_level", "DEBUG")
        self.assertTrue(config.save_config())

        reloaded = Config(self.path)
        self.assertEqual(reloaded.geo_process_noise.distance_per_second, 1.5)
        self.assertEqual(reloaded.log_level, "DEBUG")

    def test_filter_from_config(self):
        self.write(json.dumps({"process_noise": {"base_latitude": 43.0,
                                                 "distance_per_second": 1.0,
                                                 "speed_per_second": 0.1}}))
        g = GeoKalmanFilter.from_config(Config(self.path))
        self.assertEqual(g.process_noise.base_latitude, 43.0)
        self.assertEqual(g.process_noise.distance_per_second, 1.0)
        self.assertIsNone(g.estimate())

if __name__ == '__main__':
    unittest.main()
