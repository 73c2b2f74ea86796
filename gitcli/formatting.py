"""Common formatting utilities for gitcli output."""

from typing import Optional

from .git_parser import ChangeKind

CHANGE_KIND_STYLES = {
    ChangeKind.UNTRACKED: "red",
    ChangeKind.ADDED: "green",
    ChangeKind.MODIFIED: "yellow",
    ChangeKind.RENAMED: "cyan",
    ChangeKind.DELETED: "red",
}


def format_short_sha(sha: str) -> str:
    """
    Format SHA to 8-character abbreviated format for display.

    Args:
        sha: Full or partial SHA string

    Returns:
        8-character SHA or original if shorter than 8 chars
    """
    if not sha:
        return ""
    return sha[:8] if len(sha) >= 8 else sha


def format_change_kind(kind: Optional[ChangeKind]) -> str:
    """Format a change kind as a colored label using Rich markup."""
    if kind is None:
        return "[dim]unknown[/dim]"
    style = CHANGE_KIND_STYLES[kind]
    return f"[{style}]{kind.name.lower()}[/{style}]"
