import json
import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from letetris_settings import (JsonSettings, MemorySettings, SettingsError,
                               default_settings_path)


class TestMemorySettings(unittest.TestCase):

    def test_get_default_and_set(self):
        s = MemorySettings()
        self.assertEqual(s.get("internalSpacing", 4.0), 4.0)
        s.set("internalSpacing", 2.5)
        self.assertEqual(s.get("internalSpacing", 4.0), 2.5)

    def test_initial_values_are_copied(self):
        values = {"a": 1}
        s = MemorySettings(values)
        s.set("a", 2)
        self.assertEqual(values, {"a": 1})


class TestJsonSettings(unittest.TestCase):

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.path = Path(self.tmp.name) / "sub" / "settings.json"

    def tearDown(self):
        self.tmp.cleanup()

    def test_missing_file_uses_defaults(self):
        s = JsonSettings(self.path)
        self.assertEqual(s.get("internalSpacing", 4.0), 4.0)
        self.assertFalse(self.path.exists())

    def test_set_writes_and_reloads(self):
        JsonSettings(self.path).set("internalSpacing", 6.0)
        self.assertEqual(json.loads(self.path.read_text(encoding="utf-8")),
                         {"internalSpacing": 6.0})
        self.assertEqual(JsonSettings(self.path).get("internalSpacing"), 6.0)

    def test_malformed_file_is_ignored(self):
        self.path.parent.mkdir(parents=True)
        self.path.write_text("{not json", encoding="utf-8")
        with self.assertLogs("letetris_settings", level="WARNING"):
            s = JsonSettings(self.path)
        self.assertEqual(s.get("internalSpacing", 4.0), 4.0)

    def test_non_object_file_is_ignored(self):
        self.path.parent.mkdir(parents=True)
        self.path.write_text("[1, 2]", encoding="utf-8")
        with self.assertLogs("letetris_settings", level="WARNING"):
            s = JsonSettings(self.path)
        self.assertEqual(s.values, {})

    def test_write_failure_raises(self):
        blocker = Path(self.tmp.name) / "blocker"
        blocker.write_text("", encoding="utf-8")
        s = JsonSettings(blocker / "settings.json")
        with self.assertRaises(SettingsError):
            s.set("internalSpacing", 1.0)
        # still applied for the running session
        self.assertEqual(s.get("internalSpacing"), 1.0)

    def test_default_path_override(self):
        with mock.patch.dict(os.environ, {"LETETRIS_SETTINGS": str(self.path)}):
            self.assertEqual(default_settings_path(), self.path)
        with mock.patch.dict(os.environ, {"LETETRIS_SETTINGS": ""}):
            self.assertEqual(default_settings_path().name, "settings.json")
            self.assertEqual(default_settings_path().parent.name, ".letetris")


if __name__ == '__main__':
    unittest.main()
