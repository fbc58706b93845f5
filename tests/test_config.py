from __future__ import annotations

import json
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from termselect import config


class ConfigBehaviorTests(unittest.TestCase):
    def _with_config(self, payload: str):
        tmp = tempfile.TemporaryDirectory()
        self.addCleanup(tmp.cleanup)
        config_path = Path(tmp.name) / "config.json"
        config_path.write_text(payload, encoding="utf-8")
        patcher = mock.patch("termselect.config.CONFIG_PATH", config_path)
        patcher.start()
        self.addCleanup(patcher.stop)

    def test_theme_and_marker_are_loaded(self) -> None:
        self._with_config(json.dumps({"theme": " ocean ", "cursor_marker": "*"}))
        self.assertEqual(config.load_theme_name(), "ocean")
        self.assertEqual(config.load_cursor_marker(), "*")

    def test_malformed_config_falls_back_to_defaults(self) -> None:
        self._with_config("{not json")
        self.assertEqual(config.load_config(), {})
        self.assertIsNone(config.load_theme_name())
        self.assertIsNone(config.load_cursor_marker())

    def test_non_object_config_is_ignored(self) -> None:
        self._with_config("[1, 2]")
        self.assertEqual(config.load_config(), {})

    def test_invalid_marker_values_are_rejected(self) -> None:
        for value in ("", "ab", " ", 5, None):
            self._with_config(json.dumps({"cursor_marker": value}))
            self.assertIsNone(config.load_cursor_marker(), value)

    def test_missing_file_returns_empty_config(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with mock.patch("termselect.config.CONFIG_PATH", Path(tmp) / "missing.json"):
                self.assertEqual(config.load_config(), {})


if __name__ == "__main__":
    unittest.main()
