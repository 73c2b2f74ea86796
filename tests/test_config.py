"""Test YAML configuration handling."""

import shutil
import tempfile
import unittest
from pathlib import Path
from unittest import mock

import typer
import yaml

from gitcli import config
from gitcli.git_interface import GitCLI

HAS_GIT = shutil.which("git") is not None


class TestConfig(unittest.TestCase):
    """Test loading and saving configuration in an isolated directory."""

    def setUp(self):
        self.tmp_dir = tempfile.mkdtemp(prefix="gitcli-config-")
        self.config_dir = Path(self.tmp_dir)
        patcher = mock.patch("gitcli.config.get_config_dir", return_value=self.config_dir)
        patcher.start()
        self.addCleanup(patcher.stop)

    def tearDown(self):
        shutil.rmtree(self.tmp_dir, ignore_errors=True)

    def test_defaults_without_file(self):
        loaded = config.load_config()
        self.assertIsNone(loaded["default"]["repo_path"])
        self.assertEqual(config.get_identity(), (None, None))
        self.assertEqual(config.get_default_format(), "table")
        self.assertIsNone(config.get_repo_path())

    def test_save_and_load_round_trip(self):
        config.save_config({"preferences": {"default_format": "json"}})
        self.assertEqual(config.get_default_format(), "json")

    def test_set_identity(self):
        config.set_identity_command("Ada", "ada@example.com")
        self.assertEqual(config.get_identity(), ("Ada", "ada@example.com"))

        with open(self.config_dir / "config.yml") as f:
            stored = yaml.safe_load(f)
        self.assertEqual(stored["identity"]["email"], "ada@example.com")

    @unittest.skipUnless(HAS_GIT, "git executable not available")
    def test_set_repo_requires_git_directory(self):
        with self.assertRaises(typer.Exit):
            config.set_repo_command(self.tmp_dir)

    def test_set_repo_requires_existing_path(self):
        with self.assertRaises(typer.Exit):
            config.set_repo_command(str(self.config_dir / "missing"))

    @unittest.skipUnless(HAS_GIT, "git executable not available")
    def test_set_repo(self):
        repo = self.config_dir / "repo"
        repo.mkdir()
        GitCLI(repo).init()

        config.set_repo_command(str(repo))
        self.assertEqual(config.get_repo_path(), str(repo.resolve()))

    @unittest.skipUnless(HAS_GIT, "git executable not available")
    def test_set_repo_rejects_empty_git_directory(self):
        """Test a bare .git folder is not mistaken for a repository."""
        fake = self.config_dir / "fake"
        (fake / ".git").mkdir(parents=True)

        with self.assertRaises(typer.Exit):
            config.set_repo_command(str(fake))
        self.assertIsNone(config.get_repo_path())

    def test_empty_file_loads_as_empty_dict(self):
        (self.config_dir / "config.yml").write_text("")
        self.assertEqual(config.load_config(), {})
        self.assertEqual(config.get_identity(), (None, None))


if __name__ == "__main__":
    unittest.main()
