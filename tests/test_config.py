import os
import unittest
from pathlib import Path
from unittest.mock import patch

from diranalyzer.config import DEFAULT_CONFIG_FILE, Settings


class TestSettings(unittest.TestCase):

    def test_defaults_without_environment(self):
        with patch.dict(os.environ):
            os.environ.pop("DIRANALYZER_CONFIG_FILE", None)
            os.environ.pop("DIRANALYZER_LOG_LEVEL", None)
            settings = Settings.from_env()
        self.assertEqual(settings.config_file, DEFAULT_CONFIG_FILE)
        self.assertEqual(settings.log_level, "WARNING")

    def test_reads_environment(self):
        env = {
            "DIRANALYZER_CONFIG_FILE": "/tmp/dirs.json",
            "DIRANALYZER_LOG_LEVEL": "debug",
        }
        with patch.dict(os.environ, env):
            settings = Settings.from_env()
        self.assertEqual(settings.config_file, Path("/tmp/dirs.json"))
        self.assertEqual(settings.log_level, "DEBUG")

    def test_config_file_tilde_is_expanded(self):
        settings = Settings(config_file="~/dirs.json")
        self.assertEqual(settings.config_file, Path("~/dirs.json").expanduser())

    def test_unknown_log_level_is_rejected(self):
        with patch.dict(os.environ, {"DIRANALYZER_LOG_LEVEL": "chatty"}):
            with self.assertRaises(ValueError):
                Settings.from_env()


if __name__ == '__main__':
    unittest.main()
