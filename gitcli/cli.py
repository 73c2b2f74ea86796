"""gitcli CLI - typed access to git repositories from the command line."""

from contextlib import contextmanager
from typing import Iterator, Optional

import typer
from rich import print
from rich.console import Console
from rich.markup import escape

from . import __version__
from .config import (
    get_default_format,
    get_identity,
    get_repo_path,
    set_identity_command,
    set_repo_command,
    show_config_command,
)
from .git_basic import GitError, GitLaunchError, GitParseError
from .git_interface import GitCLI
from .tables import display_commits, display_paths, display_status

app = typer.Typer(
    name="gitcli",
    help="Run git commands and get typed, parsed results",
    no_args_is_help=True,
)

console = Console()


def get_git(ctx: typer.Context) -> GitCLI:
    """Get the GitCLI built by the main callback."""
    git: GitCLI = ctx.obj
    return git


@contextmanager
def git_errors() -> Iterator[None]:
    """Report git failures and exit with status 1."""
    try:
        yield
    except GitLaunchError as e:
        console.print(f"[red]Error: could not run git: {escape(str(e))}[/red]")
        raise typer.Exit(1) from None
    except GitParseError as e:
        console.print(f"[red]Error: unexpected git output: {escape(str(e))}[/red]")
        raise typer.Exit(1) from None
    except GitError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1) from None


def resolve_format(format_type: Optional[str]) -> str:
    """Use the configured default format when none was given."""
    return format_type or get_default_format()


FORMAT_HELP = "Output format: table or json"


@app.callback()
def main_callback(
    ctx: typer.Context,
    repo: Optional[str] = typer.Option(
        None,
        "--repo",
        "-C",
        help="Repository path. Defaults to the configured path, then the current directory",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Echo each git command"),
) -> None:
    """Set up the repository handle shared by all commands."""
    ctx.obj = GitCLI.open(repo or get_repo_path(), console=console, verbose=verbose)


@app.command("git-version")
def git_version(ctx: typer.Context) -> None:
    """Show the installed git version."""
    with git_errors():
        console.print(get_git(ctx).version(), markup=False, highlight=False)


@app.command("init")
def init(ctx: typer.Context) -> None:
    """Initialize a new repository."""
    git = get_git(ctx)
    with git_errors():
        git.init()
    console.print(f"[green]✅ Initialized repository in {git.repo_path}[/green]")


@app.command("status")
def status(
    ctx: typer.Context,
    format_type: Optional[str] = typer.Option(None, "--format", help=FORMAT_HELP),
) -> None:
    """Show changed paths in the working tree."""
    with git_errors():
        entries = get_git(ctx).status()
    display_status(entries, resolve_format(format_type))


@app.command("add-all")
def add_all(ctx: typer.Context) -> None:
    """Stage every change in the working tree."""
    with git_errors():
        get_git(ctx).index_all()
    console.print("[green]✅ Staged all changes[/green]")


@app.command("commit")
def commit(
    ctx: typer.Context,
    message: str = typer.Option(..., "--message", "-m", help="Commit message"),
) -> None:
    """Commit staged changes."""
    git = get_git(ctx)
    with git_errors():
        git.commit(message)
        head = git.rev_parse("HEAD")
    console.print(f"[green]✅ Committed {head}[/green]")


@app.command("configure-user")
def configure_user(
    ctx: typer.Context,
    name: Optional[str] = typer.Option(None, "--name", help="Commit author name"),
    email: Optional[str] = typer.Option(None, "--email", help="Commit author email"),
) -> None:
    """Set the local commit identity, falling back to the configured identity."""
    default_name, default_email = get_identity()
    name = name or default_name
    email = email or default_email

    if not name or not email:
        console.print("[red]Error: No identity given and none configured[/red]")
        console.print("Run: gitcli config set-identity NAME EMAIL")
        raise typer.Exit(1)

    with git_errors():
        get_git(ctx).configure_user(name, email)
    console.print(f"[green]✅ Identity set to {escape(name)} <{escape(email)}>[/green]")


@app.command("merge-base")
def merge_base(
    ctx: typer.Context,
    first: str = typer.Argument(help="First commit or branch"),
    second: str = typer.Argument(help="Second commit or branch"),
) -> None:
    """Show the common ancestor of two commits."""
    with git_errors():
        console.print(get_git(ctx).merge_base(first, second), markup=False, highlight=False)


@app.command("log")
def log(
    ctx: typer.Context,
    format_type: Optional[str] = typer.Option(None, "--format", help=FORMAT_HELP),
) -> None:
    """List commits on the current branch, most recent first."""
    with git_errors():
        shas = get_git(ctx).log()
    display_commits(shas, resolve_format(format_type))


@app.command("checkout")
def checkout(
    ctx: typer.Context,
    revision: str = typer.Argument(help="Branch name or commit to check out"),
) -> None:
    """Switch the working tree to a branch or commit."""
    with git_errors():
        get_git(ctx).checkout(revision)
    console.print(f"[green]✅ Checked out {escape(revision)}[/green]")


@app.command("branch")
def branch(
    ctx: typer.Context,
    name: str = typer.Argument(help="Name of the new branch"),
) -> None:
    """Create a new branch and check it out."""
    with git_errors():
        get_git(ctx).create_branch(name)
    console.print(f"[green]✅ Created and checked out {escape(name)}[/green]")


@app.command("diff")
def diff(
    ctx: typer.Context,
    from_sha: str = typer.Argument(help="Starting commit"),
    to_sha: str = typer.Argument(help="Ending commit"),
    format_type: Optional[str] = typer.Option(None, "--format", help=FORMAT_HELP),
) -> None:
    """List paths that differ between two commits."""
    with git_errors():
        paths = get_git(ctx).diff(from_sha, to_sha)
    display_paths(paths, f"Changed between {from_sha} and {to_sha}", resolve_format(format_type))


@app.command("show")
def show(
    ctx: typer.Context,
    sha: str = typer.Argument(help="Commit to read from"),
    path: str = typer.Argument(help="File path inside the commit"),
) -> None:
    """Print a file as stored in a commit."""
    with git_errors():
        content = get_git(ctx).blob(sha, path)
    typer.echo(content.encode("utf-8", "surrogateescape"), nl=False)


@app.command("ls-tree")
def ls_tree(
    ctx: typer.Context,
    sha: str = typer.Argument(help="Commit to list"),
    format_type: Optional[str] = typer.Option(None, "--format", help=FORMAT_HELP),
) -> None:
    """List every file in a commit."""
    with git_errors():
        paths = get_git(ctx).ls_tree(sha)
    display_paths(paths, f"Files in {sha}", resolve_format(format_type))


@app.command("rev-parse")
def rev_parse(
    ctx: typer.Context,
    revision: str = typer.Argument(help="Reference to resolve, e.g. HEAD or HEAD~1"),
) -> None:
    """Resolve a reference to a commit identifier."""
    with git_errors():
        console.print(get_git(ctx).rev_parse(revision), markup=False, highlight=False)


# Create config subcommand group
config_app = typer.Typer(name="config", help="Manage gitcli configuration")
app.add_typer(config_app)


@config_app.command("set-repo")
def set_repo(
    repo_path: str = typer.Argument(help="Path to a git repository"),
) -> None:
    """Set the default repository path."""
    set_repo_command(repo_path)


@config_app.command("set-identity")
def set_identity(
    name: str = typer.Argument(help="Commit author name"),
    email: str = typer.Argument(help="Commit author email"),
) -> None:
    """Set the identity used by configure-user."""
    set_identity_command(name, email)


@config_app.command("show")
def show_config(
    format_type: str = typer.Option("table", "--format", help=FORMAT_HELP),
) -> None:
    """Show current configuration."""
    show_config_command(format_type)


@app.command()
def version() -> None:
    """Show version information."""
    print(f"gitcli version: [bold]{__version__}[/bold]")


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
