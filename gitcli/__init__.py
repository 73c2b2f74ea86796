"""gitcli - typed interface over the git command line."""

from .git_basic import GitCommandError, GitError, GitLaunchError, GitParseError
from .git_interface import GitCLI
from .git_parser import STATUS_TABLE, ChangeKind, StatusEntry

__version__ = "0.1.0"

__all__ = [
    "ChangeKind",
    "GitCLI",
    "GitCommandError",
    "GitError",
    "GitLaunchError",
    "GitParseError",
    "STATUS_TABLE",
    "StatusEntry",
    "__version__",
]
