import json
import re
import tempfile
import unittest
from pathlib import Path

from typer.testing import CliRunner

from diranalyzer import __version__
from diranalyzer.cli import app
from project_fixture import make_project

ANSI_ESCAPE = re.compile(r"\x1b\[[0-9;]*m")


def plain(output: str) -> str:
    return ANSI_ESCAPE.sub("", output)


class TestCli(unittest.TestCase):

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp = Path(self._tmp.name)
        self.config_file = self.tmp / "config" / "directories.json"
        self.project = make_project(self.tmp / "project").resolve()
        self.runner = CliRunner()

    def tearDown(self):
        self._tmp.cleanup()

    def invoke(self, *args, **kwargs):
        return self.runner.invoke(app, ["--config", str(self.config_file), *args], **kwargs)

    def stored(self):
        return json.loads(self.config_file.read_text())["directories"]

    def test_add_saves_directory(self):
        result = self.invoke("add", str(self.project))
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("has been saved!", plain(result.output))
        self.assertEqual(self.stored(), [str(self.project)])

    def test_add_twice_keeps_one_entry(self):
        self.invoke("add", str(self.project))
        result = self.invoke("add", str(self.project))
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("already stored", plain(result.output))
        self.assertEqual(self.stored(), [str(self.project)])

    def test_add_missing_directory(self):
        result = self.invoke("add", str(self.tmp / "missing"))
        self.assertEqual(result.exit_code, 1)
        self.assertIn("Error: Directory does not exist!", plain(result.output))
        self.assertEqual(self.stored(), [])

    def test_interactive_prompt_without_command(self):
        result = self.invoke(input=f"{self.project}\n")
        self.assertEqual(result.exit_code, 0, result.output)
        output = plain(result.output)
        self.assertIn("Welcome to Directory Analyzer!", output)
        self.assertIn("Please enter the path to the directory you want to analyze", output)
        self.assertEqual(self.stored(), [str(self.project)])

    def test_list(self):
        self.invoke("add", str(self.project))
        result = self.invoke("list")
        self.assertEqual(result.exit_code, 0, result.output)
        output = plain(result.output)
        self.assertIn("Stored directories:", output)
        self.assertIn(f"1. {self.project}", output)

    def test_remove(self):
        self.invoke("add", str(self.project))
        result = self.invoke("remove", str(self.project))
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(self.stored(), [])

        result = self.invoke("remove", str(self.project))
        self.assertEqual(result.exit_code, 1)

    def test_analyze_without_directories(self):
        result = self.invoke("analyze")
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("No stored directories", plain(result.output))

    def test_analyze_reports_scores_and_ranking(self):
        self.invoke("add", str(self.project))
        result = self.invoke("analyze")
        self.assertEqual(result.exit_code, 0, result.output)

        output = plain(result.output)
        self.assertIn("Dependency Usage Chart:", output)
        self.assertIn("react@18.2.0 - Used 2 times", output)
        self.assertIn("lodash@4.17.21 - Used 2 times", output)
        self.assertIn("Import Analysis Score: 3", output)
        self.assertIn("Package Importance", output)
        self.assertIn("Overall Score: 52/100", output)
        self.assertIn("=== DEPENDENCY USAGE RANKING ===", output)
        self.assertIn("v18.2.0 | 1 dirs", output)
        self.assertIn("Total Dependencies: 2 | Import Score: 3.00", output)

    def test_analyze_tallies_across_directories(self):
        second = make_project(self.tmp / "second").resolve()
        self.invoke("add", str(self.project))
        self.invoke("add", str(second))

        result = self.invoke("analyze")
        self.assertEqual(result.exit_code, 0, result.output)

        output = plain(result.output)
        self.assertIn("v18.2.0 | 2 dirs", output)
        self.assertIn("Total Dependencies: 2 | Import Score: 3.00", output)

    def test_analyze_vanished_directory_scores_zero(self):
        self.config_file.parent.mkdir(parents=True)
        self.config_file.write_text(json.dumps({"directories": [str(self.tmp / "gone")]}))

        result = self.invoke("analyze")
        self.assertEqual(result.exit_code, 0, result.output)
        output = plain(result.output)
        self.assertIn("No dependencies found or no package.json present", output)
        self.assertIn("Overall Score: 0/100", output)
        self.assertIn("Total Dependencies: 0 | Import Score: 0.00", output)

    def test_analyze_continues_past_malformed_manifest(self):
        broken = make_project(self.tmp / "broken").resolve()
        (broken / "package.json").write_text(json.dumps({"dependencies": 5}))
        self.invoke("add", str(broken))
        self.invoke("add", str(self.project))

        result = self.invoke("analyze")
        self.assertEqual(result.exit_code, 0, result.output)

        output = plain(result.output)
        self.assertNotIn("❌ Error", output)
        self.assertIn("No dependencies found or no package.json present", output)
        self.assertIn("v18.2.0 | 1 dirs", output)
        self.assertIn("Total Dependencies: 2 | Import Score: 3.00", output)

    def test_unknown_command(self):
        result = self.invoke("frobnicate")
        self.assertNotEqual(result.exit_code, 0)

    def test_version(self):
        result = self.invoke("version")
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn(__version__, plain(result.output))


if __name__ == '__main__':
    unittest.main()
