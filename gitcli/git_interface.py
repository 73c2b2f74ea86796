"""Typed interface over the git command line."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union

from packaging.version import Version
from rich.console import Console

from .git_basic import GitCommandError, GitParseError, read_lines, run_git_checked
from .git_parser import StatusEntry, parse_git_version, parse_status_output


@dataclass(frozen=True)
class GitCLI:
    """
    Interface to a single repository through the git executable.

    Every operation is one synchronous round trip: build the argument
    list, run git inside repo_path, then parse stdout or raise. The handle
    holds no mutable state and can be shared freely.

    When verbose is set, each git command line is echoed to the console
    before it runs.
    """

    repo_path: Path
    console: Optional[Console] = field(default=None, compare=False, repr=False)
    verbose: bool = False

    def __post_init__(self) -> None:
        # Ensure repo_path is a Path object
        if isinstance(self.repo_path, str):
            object.__setattr__(self, "repo_path", Path(self.repo_path))

    @classmethod
    def open(
        cls,
        repo_path: Optional[Union[str, Path]] = None,
        console: Optional[Console] = None,
        verbose: bool = False,
    ) -> "GitCLI":
        """Create an interface rooted at repo_path, or the current directory."""
        return cls(Path(repo_path) if repo_path else Path.cwd(), console, verbose)

    def _run(self, *args: str) -> bytes:
        echo_console = (self.console or Console(stderr=True)) if self.verbose else None
        return run_git_checked(list(args), self.repo_path, echo_console)

    def run_command(self, *args: str) -> List[str]:
        """Execute git command and return stdout lines."""
        return read_lines(self._run(*args))

    def run_command_text(self, *args: str) -> str:
        """Execute git command and return stdout untouched, decoded as UTF-8.

        Bytes that are not valid UTF-8 are kept as surrogate escapes, so
        `text.encode("utf-8", "surrogateescape")` gives back the raw output.
        """
        return self._run(*args).decode("utf-8", errors="surrogateescape")

    def _first_line(self, *args: str) -> str:
        lines = self.run_command(*args)
        if not lines:
            raise GitParseError(f"No output from git {' '.join(args)}")
        return lines[0]

    def version(self) -> str:
        """Return the first line of `git version`."""
        return self._first_line("version")

    def version_info(self) -> Version:
        """Return the git version as a comparable Version."""
        return parse_git_version(self.version())

    def init(self) -> None:
        """Initialize a new repository at repo_path."""
        self._run("init")

    def status(self) -> List[StatusEntry]:
        """List changed paths in the order git reports them."""
        return parse_status_output(self.run_command("status", "-s"))

    def index_all(self) -> None:
        """Stage all changes in the working tree."""
        self._run("add", "-A")

    def commit(self, message: str) -> None:
        """Create a commit with the given message."""
        self._run("commit", "-m", message)

    def configure_user(self, username: str, email: str) -> None:
        """Set the local identity used for commits."""
        self._run("config", "--local", "user.name", username)
        self._run("config", "--local", "user.email", email)

    def rev_parse(self, revision: str) -> str:
        """Resolve a reference to a commit identifier."""
        return self._first_line("rev-parse", revision)

    def current_branch(self) -> str:
        """Get the name of the current branch."""
        return self._first_line("rev-parse", "--abbrev-ref", "HEAD")

    def git_dir(self) -> str:
        """Get the path of the .git directory, failing outside a repository."""
        return self._first_line("rev-parse", "--git-dir")

    def has_commits(self) -> bool:
        """Check if HEAD points at a commit.

        Raises GitCommandError when repo_path is not inside a repository.
        """
        self.git_dir()
        try:
            self._run("rev-parse", "--verify", "-q", "HEAD")
            return True
        except GitCommandError:
            return False

    def create_branch(self, name: str) -> None:
        """Create a branch and check it out."""
        self._run("checkout", "-b", name)

    def merge_base(self, first: str, second: str) -> str:
        """Get the best common ancestor of two commits."""
        return self._first_line("merge-base", first, second)

    def log(self) -> List[str]:
        """Get commit identifiers of the current branch, most recent first."""
        # git log exits non-zero on a branch with no commits yet
        if not self.has_commits():
            return []
        return self.run_command("log", "--pretty=%H")

    def checkout(self, revision: str) -> None:
        """Check out a branch or commit."""
        self._run("checkout", revision)

    def diff(self, from_sha: str, to_sha: str) -> List[str]:
        """List paths that differ between two commits."""
        return self.run_command(
            "diff-tree", "--no-commit-id", "-r", "--name-only", from_sha, to_sha
        )

    def blob(self, sha: str, path: str) -> str:
        """Read the content of path as stored in commit sha."""
        return self.run_command_text("show", f"{sha}:{path}")

    def ls_tree(self, sha: str) -> List[str]:
        """List every file path in commit sha, recursively."""
        return self.run_command("ls-tree", "--name-only", "-r", sha)
