"""CLI behavior tests.

Verifies how ``lazyprompt.cli.main`` turns shell-supplied arguments into a
prompt, and how ``--init`` emits shell integration snippets.
"""

from __future__ import annotations

import argparse
import io
import sys
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from lazyprompt import cli
from lazyprompt.ansi import strip_ansi
from lazyprompt.init_scripts import EXE_PATH_ERROR_SCRIPT
from lazyprompt.render import CONTINUATION_MARKER, SEGMENT_SEPARATOR


class CliPromptTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.root = Path(self._tmp.name).resolve() / "workspace"
        self.root.mkdir()
        config_patch = mock.patch("lazyprompt.config.CONFIG_PATH", Path(self._tmp.name) / "missing.json")
        config_patch.start()
        self.addCleanup(config_patch.stop)
        no_git = mock.patch("lazyprompt.segments.git.collect_repo_info", return_value=None)
        no_git.start()
        self.addCleanup(no_git.stop)

    def _run(self, *argv: str) -> str:
        stdout = io.StringIO()
        with mock.patch.object(cli, "_current_dir", return_value=self.root), mock.patch.object(sys, "stdout", stdout):
            cli.main(list(argv))
        return stdout.getvalue()

    def test_wide_terminal_renders_single_line(self) -> None:
        output = self._run("--columns", "200", "--status", "0 1", "--jobs", "2")
        plain = strip_ansi(output)
        self.assertNotIn("\n", plain)
        self.assertTrue(plain.startswith(" ✓ ✘ "))
        self.assertIn(" 2 ⚙ ", plain)
        self.assertIn("workspace", plain)
        self.assertTrue(plain.endswith(f"{SEGMENT_SEPARATOR} "))

    def test_successful_status_and_no_jobs_are_omitted(self) -> None:
        plain = strip_ansi(self._run("--columns", "200", "--status", "0", "--jobs", "0"))
        self.assertNotIn("✓", plain)
        self.assertNotIn("⚙", plain)

    def test_narrow_terminal_splits_line(self) -> None:
        plain = strip_ansi(self._run("--columns", "30", "--status", "1"))
        first, second = plain.split("\n")
        self.assertEqual(second, f"{CONTINUATION_MARKER}{SEGMENT_SEPARATOR} ")
        self.assertLessEqual(len(first), 30 - cli.COLUMNS_MARGIN)

    def test_tiny_terminal_overflows(self) -> None:
        output = self._run("--columns", "4", "--status", "1")
        self.assertEqual(strip_ansi(output), SEGMENT_SEPARATOR)

    def test_empty_columns_means_unbounded(self) -> None:
        plain = strip_ansi(self._run("--columns", ""))
        self.assertNotIn("\n", plain)

    def test_no_color_flag(self) -> None:
        output = self._run("--columns", "200", "--status", "1", "--no-color")
        self.assertNotIn("\033", output)

    def test_min_headroom_flag_overrides_default(self) -> None:
        plain = strip_ansi(self._run("--columns", "200", "--min-headroom", "500"))
        self.assertIn("\n", plain)

    def test_unresolvable_cwd_drops_path_segment(self) -> None:
        stdout = io.StringIO()
        with mock.patch.object(cli, "_current_dir", return_value=None), mock.patch.object(sys, "stdout", stdout):
            cli.main(["--columns", "200"])
        self.assertEqual(strip_ansi(stdout.getvalue()), " ")


class CliArgumentTests(unittest.TestCase):
    def test_optional_int_accepts_blank(self) -> None:
        self.assertIsNone(cli._optional_nonnegative_int("  "))
        self.assertEqual(cli._optional_nonnegative_int("12"), 12)

    def test_optional_int_rejects_garbage(self) -> None:
        with self.assertRaises(argparse.ArgumentTypeError):
            cli._optional_nonnegative_int("wide")
        with self.assertRaises(argparse.ArgumentTypeError):
            cli._optional_nonnegative_int("-1")

    def test_terminal_width_reserves_margin(self) -> None:
        self.assertEqual(cli.terminal_width_for_columns(80), 77)
        self.assertEqual(cli.terminal_width_for_columns(2), 0)
        self.assertIsNone(cli.terminal_width_for_columns(None))


class CliInitTests(unittest.TestCase):
    def _run_init(self, shell: str, exe: str | None) -> str:
        stdout = io.StringIO()
        with mock.patch.object(cli, "resolve_exe_command", return_value=exe), mock.patch.object(sys, "stdout", stdout):
            cli.main(["--init", shell])
        return stdout.getvalue()

    def test_zsh_init_uses_precmd(self) -> None:
        script = self._run_init("zsh", "/usr/bin/lazyprompt")
        self.assertIn("precmd()", script)
        self.assertIn('/usr/bin/lazyprompt --columns="$COLUMNS"', script)

    def test_bash_init_sets_prompt_command(self) -> None:
        script = self._run_init("bash", "/usr/bin/lazyprompt")
        self.assertIn("PROMPT_COMMAND=__lazyprompt_precmd", script)
        self.assertIn("${PIPESTATUS[*]}", script)

    def test_fish_init_defines_fish_prompt(self) -> None:
        script = self._run_init("fish", "/usr/bin/lazyprompt")
        self.assertTrue(script.startswith("function fish_prompt\n"))
        self.assertTrue(script.endswith("end\n"))

    def test_missing_executable_prints_error_fallback(self) -> None:
        self.assertEqual(self._run_init("zsh", None), EXE_PATH_ERROR_SCRIPT + "\n")

    def test_unknown_shell_is_rejected(self) -> None:
        with mock.patch.object(sys, "stderr", io.StringIO()), self.assertRaises(SystemExit):
            cli.main(["--init", "tcsh"])


if __name__ == "__main__":
    unittest.main()
