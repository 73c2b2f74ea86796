"""Table creation and data display functionality for gitcli CLI."""

import json
from typing import Any, List

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .formatting import format_change_kind, format_short_sha
from .git_parser import StatusEntry

console = Console()


def print_json(data: Any) -> None:
    """Print data as JSON without Rich markup or wrapping."""
    console.print(
        json.dumps(data, indent=2), markup=False, highlight=False, emoji=False, soft_wrap=True
    )


def create_status_table(entries: List[StatusEntry]) -> Table:
    """Create a table of changed paths."""
    table = Table(title="[bold]Working Tree Status[/bold]", show_header=True)
    table.add_column("Status", style="bold")
    table.add_column("Path")

    for entry in entries:
        table.add_row(format_change_kind(entry.status), escape(entry.path))

    return table


def create_commit_table(shas: List[str], title: str = "Commits") -> Table:
    """Create a table of commit identifiers, most recent first."""
    table = Table(title=f"[bold]{title}[/bold]", show_header=True)
    table.add_column("#", justify="right", style="dim")
    table.add_column("SHA", style="cyan")
    table.add_column("Full SHA", style="dim")

    for i, sha in enumerate(shas, 1):
        table.add_row(str(i), format_short_sha(sha), sha)

    return table


def create_path_table(paths: List[str], title: str) -> Table:
    """Create a single-column table of file paths."""
    table = Table(title=f"[bold]{title}[/bold]", show_header=True)
    table.add_column("Path")

    for path in paths:
        table.add_row(escape(path))

    return table


def display_status(entries: List[StatusEntry], format_type: str = "table") -> None:
    """Display working tree status."""
    if format_type == "json":
        print_json(
            {
                "entries": [
                    {"path": e.path, "status": e.status.name.lower() if e.status else None}
                    for e in entries
                ]
            }
        )
        return

    if not entries:
        console.print("[green]Nothing to commit, working tree clean[/green]")
        return

    console.print(create_status_table(entries))


def display_commits(shas: List[str], format_type: str = "table") -> None:
    """Display a commit log."""
    if format_type == "json":
        print_json({"commits": shas})
        return

    if not shas:
        console.print("[yellow]No commits yet[/yellow]")
        return

    console.print(create_commit_table(shas))


def display_paths(paths: List[str], title: str, format_type: str = "table") -> None:
    """Display a list of file paths."""
    if format_type == "json":
        print_json({"paths": paths})
        return

    if not paths:
        console.print("[dim]No files[/dim]")
        return

    console.print(create_path_table(paths, title))
