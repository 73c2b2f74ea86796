"""Core git subprocess runner and error types."""

import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union

from rich.console import Console

GIT_EXECUTABLE = "git"


class GitError(Exception):
    """Git operation failed."""

    pass


class GitLaunchError(GitError):
    """The git executable could not be started."""

    pass


class GitCommandError(GitError):
    """Git ran but exited with a non-zero status."""

    def __init__(self, args: List[str], returncode: int, stderr_lines: List[str]):
        self.args_list = list(args)
        self.returncode = returncode
        self.stderr_lines = list(stderr_lines)
        super().__init__(";".join(self.stderr_lines))


class GitParseError(GitError):
    """Git output did not have the expected shape."""

    def __init__(self, message: str, line: Optional[str] = None):
        self.line = line
        super().__init__(message)


@dataclass
class GitResult:
    """Fully buffered outcome of one git invocation."""

    stdout: bytes
    stderr_lines: List[str] = field(default_factory=list)
    returncode: int = 0

    @property
    def success(self) -> bool:
        return self.returncode == 0


def read_lines(data: Union[bytes, str]) -> List[str]:
    """
    Split command output into lines.

    Lines are separated by newlines, a trailing carriage return is dropped
    from each line, and the empty segment after a final newline is not
    returned. Leading whitespace is kept, since it is significant in
    short-format status output.
    """
    text = data.decode("utf-8", errors="replace") if isinstance(data, bytes) else data
    if not text:
        return []

    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def run_git(
    args: List[str],
    repo_path: Path,
    console: Optional[Console] = None,
) -> GitResult:
    """Run git with args inside repo_path and collect its output.

    Raises:
        GitLaunchError: if the git executable could not be started.
    """
    if console is not None:
        console.print(f"[dim]$ {GIT_EXECUTABLE} {' '.join(args)}[/dim]")

    try:
        result = subprocess.run([GIT_EXECUTABLE] + args, cwd=repo_path, capture_output=True)
    except OSError as e:
        raise GitLaunchError(f"Unable to run {GIT_EXECUTABLE} {' '.join(args)}: {e}") from e

    return GitResult(
        stdout=result.stdout,
        stderr_lines=read_lines(result.stderr),
        returncode=result.returncode,
    )


def run_git_checked(
    args: List[str],
    repo_path: Path,
    console: Optional[Console] = None,
) -> bytes:
    """Run git and return raw stdout, raising GitCommandError on a non-zero exit."""
    result = run_git(args, repo_path, console)
    if not result.success:
        raise GitCommandError(args, result.returncode, result.stderr_lines)
    return result.stdout
