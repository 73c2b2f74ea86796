"""Parsing of git short-format status and version output."""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional

from packaging.version import InvalidVersion, Version

from .git_basic import GitParseError


class ChangeKind(str, Enum):
    """Kind of change reported for a path."""

    UNTRACKED = "U"
    ADDED = "A"
    MODIFIED = "M"
    RENAMED = "R"
    DELETED = "D"


# Short status codes emitted by `git status -s`
STATUS_TABLE: Dict[str, ChangeKind] = {
    "??": ChangeKind.UNTRACKED,
    "A": ChangeKind.ADDED,
    "M": ChangeKind.MODIFIED,
    "D": ChangeKind.DELETED,
    "R": ChangeKind.RENAMED,
}

# A blank index column is allowed before the code (" M file" is a worktree edit)
STATUS_LINE_PATTERN = re.compile(r"^\s*(\?\?|A|M|D|R)\s+(.*)$")

VERSION_PATTERN = re.compile(r"(\d+(?:\.\d+)+)")


@dataclass(frozen=True)
class StatusEntry:
    """A single path reported by `git status -s`."""

    path: str
    status: Optional[ChangeKind]


def parse_status_line(line: str) -> StatusEntry:
    """Parse one short-format status line.

    Lines have the form "<code> <path>". Leading whitespace before the code
    is accepted, so unstaged edits reported as " M path" parse as Modified.
    Codes that match the pattern but are missing from STATUS_TABLE map to
    None rather than failing.
    """
    match = STATUS_LINE_PATTERN.match(line)
    if match is None:
        raise GitParseError(f"Unable to parse status string: {line!r}", line=line)

    return StatusEntry(path=match.group(2), status=STATUS_TABLE.get(match.group(1)))


def parse_status_output(lines: List[str]) -> List[StatusEntry]:
    """Parse every status line, failing on the first malformed one."""
    return [parse_status_line(line) for line in lines]


def parse_git_version(version_line: str) -> Version:
    """
    Extract a comparable version from `git version` output.

    Handles formats like:
    - "git version 2.39.2"
    - "git version 2.39.3 (Apple Git-145)"
    - "git version 2.45.1.windows.1"
    """
    match = VERSION_PATTERN.search(version_line)
    if match is None:
        raise GitParseError(f"Unable to parse git version: {version_line!r}", line=version_line)

    try:
        return Version(match.group(1))
    except InvalidVersion as e:
        raise GitParseError(
            f"Unable to parse git version: {version_line!r}", line=version_line
        ) from e
