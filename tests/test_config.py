"""Tests for settings loading and saving in sw.core.config."""

import json
import shutil
import tempfile
import unittest
from pathlib import Path


class TestConfig(unittest.TestCase):

    def setUp(self):
        self.tmpdir = tempfile.mkdtemp()
        self._tmppath = Path(self.tmpdir)

        # Monkey-patch the settings path to use temp dir
        from sw.core import config
        self._orig_settings_path = config.SETTINGS_PATH
        config.SETTINGS_PATH = self._tmppath / "settings.json"

    def tearDown(self):
        from sw.core import config
        config.SETTINGS_PATH = self._orig_settings_path
        shutil.rmtree(self.tmpdir, ignore_errors=True)

    def _write(self, payload):
        from sw.core import config
        with open(config.SETTINGS_PATH, "w", encoding="utf-8") as f:
            if isinstance(payload, str):
                f.write(payload)
            else:
                json.dump(payload, f)

    def test_fresh_start_returns_defaults(self):
        from sw.core import config
        settings = config.load_settings()
        self.assertNotIn("tick_interval_ms", settings)
        self.assertEqual(settings["datetime_format"], "%d/%m/%Y %H:%M")
        self.assertFalse(settings["always_on_top"])
        self.assertTrue(settings["confirm_delete"])
        self.assertTrue(settings["seed_sample_records"])
        self.assertEqual(set(settings["state_colors"]), {"WAITING", "ACTIVE", "EXPIRED", "FREE"})
        # Loading never writes anything
        self.assertFalse(config.SETTINGS_PATH.exists())

    def test_defaults_are_independent_copies(self):
        from sw.core import config
        first = config.build_default_settings()
        first["state_colors"]["ACTIVE"] = "#000000"
        self.assertEqual(config.build_default_settings()["state_colors"]["ACTIVE"], "#ffffe0")

    def test_save_and_load_roundtrip(self):
        from sw.core import config
        settings = config.load_settings()
        settings["always_on_top"] = True
        settings["state_colors"]["EXPIRED"] = "#ff0000"
        config.save_settings(settings)

        loaded = config.load_settings()
        self.assertTrue(loaded["always_on_top"])
        self.assertEqual(loaded["state_colors"]["EXPIRED"], "#ff0000")

    def test_missing_keys_filled(self):
        from sw.core import config
        self._write({"always_on_top": True})
        loaded = config.load_settings()
        self.assertTrue(loaded["always_on_top"])
        self.assertEqual(loaded["state_colors"]["FREE"], "#90ee90")

    def test_wrong_types_defaulted(self):
        from sw.core import config
        self._write({
            "confirm_delete": "yes",
            "datetime_format": 5,
        })
        loaded = config.load_settings()
        self.assertTrue(loaded["confirm_delete"])
        self.assertEqual(loaded["datetime_format"], "%d/%m/%Y %H:%M")

    def test_partial_state_colors_filled(self):
        from sw.core import config
        self._write({"state_colors": {"ACTIVE": "#123456", "FREE": 7}})
        colors = config.load_settings()["state_colors"]
        self.assertEqual(colors["ACTIVE"], "#123456")
        self.assertEqual(colors["FREE"], "#90ee90")
        self.assertEqual(colors["WAITING"], "#add8e6")

    def test_corrupted_json_falls_back_to_defaults(self):
        from sw.core import config
        self._write("{invalid json!!")
        settings = config.load_settings()
        self.assertEqual(settings, config.build_default_settings())

    def test_non_object_json_falls_back_to_defaults(self):
        from sw.core import config
        self._write([1, 2, 3])
        self.assertEqual(config.load_settings(), config.build_default_settings())


if __name__ == "__main__":
    unittest.main()
