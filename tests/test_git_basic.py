"""Test subprocess invocation and error classification."""

import shutil
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from rich.console import Console

from gitcli.git_basic import (
    GitCommandError,
    GitError,
    GitLaunchError,
    GitResult,
    run_git,
    run_git_checked,
)

HAS_GIT = shutil.which("git") is not None


class TestErrorTypes(unittest.TestCase):
    """Test the error hierarchy and messages."""

    def test_command_error_joins_stderr_lines(self):
        error = GitCommandError(["checkout", "nope"], 1, ["error: first", "hint: second"])
        self.assertEqual(str(error), "error: first;hint: second")
        self.assertEqual(error.returncode, 1)
        self.assertEqual(error.args_list, ["checkout", "nope"])

    def test_all_errors_are_git_errors(self):
        for error_class in (GitLaunchError, GitCommandError):
            with self.subTest(error_class=error_class):
                self.assertTrue(issubclass(error_class, GitError))

    def test_result_success(self):
        self.assertTrue(GitResult(stdout=b"").success)
        self.assertFalse(GitResult(stdout=b"", returncode=128).success)


class TestRunGit(unittest.TestCase):
    """Test running git as a subprocess."""

    def setUp(self):
        self.tmp_dir = tempfile.mkdtemp(prefix="gitcli-test-")

    def tearDown(self):
        shutil.rmtree(self.tmp_dir, ignore_errors=True)

    def test_missing_executable_is_launch_error(self):
        with mock.patch("gitcli.git_basic.GIT_EXECUTABLE", "gitcli-no-such-executable"):
            with self.assertRaises(GitLaunchError) as cm:
                run_git(["version"], Path(self.tmp_dir))
        self.assertIsInstance(cm.exception.__cause__, OSError)

    def test_missing_working_directory_is_launch_error(self):
        with self.assertRaises(GitLaunchError):
            run_git(["version"], Path(self.tmp_dir) / "missing")

    @unittest.skipUnless(HAS_GIT, "git executable not available")
    def test_successful_command(self):
        result = run_git(["version"], Path(self.tmp_dir))
        self.assertTrue(result.success)
        self.assertTrue(result.stdout.startswith(b"git version"))
        self.assertEqual(result.stderr_lines, [])

    @unittest.skipUnless(HAS_GIT, "git executable not available")
    def test_failed_command_is_command_error(self):
        with self.assertRaises(GitCommandError) as cm:
            run_git_checked(["gitcli-not-a-subcommand"], Path(self.tmp_dir))
        self.assertNotEqual(cm.exception.returncode, 0)
        self.assertIn("gitcli-not-a-subcommand", str(cm.exception))

    @unittest.skipUnless(HAS_GIT, "git executable not available")
    def test_verbose_console_echoes_command(self):
        console = Console(record=True, width=120)
        run_git(["version"], Path(self.tmp_dir), console)
        self.assertIn("$ git version", console.export_text())


if __name__ == "__main__":
    unittest.main()
