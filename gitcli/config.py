"""Configuration management for gitcli."""

from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import typer
import yaml
from rich.console import Console
from rich.markup import escape

from .git_basic import GitError
from .git_interface import GitCLI
from .tables import print_json

console = Console()


def get_config_dir() -> Path:
    """Get gitcli configuration directory."""
    config_dir = Path.home() / ".gitcli"
    config_dir.mkdir(exist_ok=True)
    return config_dir


def get_config_file() -> Path:
    """Get configuration file path."""
    return get_config_dir() / "config.yml"


def load_config() -> Dict[str, Any]:
    """Load configuration from file."""
    config_file = get_config_file()
    if not config_file.exists():
        return {
            "default": {"repo_path": None},
            "identity": {"name": None, "email": None},
            "preferences": {"default_format": "table"},
        }

    with open(config_file) as f:
        return yaml.safe_load(f) or {}


def save_config(config: Dict[str, Any]) -> None:
    """Save configuration to file."""
    config_file = get_config_file()
    with open(config_file, "w") as f:
        yaml.dump(config, f, default_flow_style=False)


def set_repo_command(repo_path: str) -> None:
    """Set the default repository path."""
    # Expand ~ to home directory
    expanded_path = Path(repo_path).expanduser().resolve()

    if not expanded_path.exists():
        console.print(f"[red]Error: Path does not exist: {expanded_path}[/red]")
        raise typer.Exit(1)

    try:
        GitCLI(expanded_path).git_dir()
    except GitError as e:
        console.print(f"[red]Error: Not a git repository: {expanded_path}[/red]")
        console.print(f"[dim]{escape(str(e))}[/dim]")
        raise typer.Exit(1) from None

    config = load_config()
    config.setdefault("default", {})["repo_path"] = str(expanded_path)
    save_config(config)

    console.print(f"[green]✅ Repository path set to: {expanded_path}[/green]")


def set_identity_command(name: str, email: str) -> None:
    """Set the default commit identity."""
    config = load_config()
    config["identity"] = {"name": name, "email": email}
    save_config(config)

    console.print(f"[green]✅ Identity set to: {name} <{email}>[/green]")


def show_config_command(format_type: str = "table") -> None:
    """Show current configuration."""
    config = load_config()

    repo_path = get_repo_path()
    name, email = get_identity()
    default_format = config.get("preferences", {}).get("default_format", "table")

    if format_type == "json":
        output = {
            "repo_path": repo_path,
            "identity": {"name": name, "email": email},
            "default_format": default_format,
            "config_file": str(get_config_file()),
        }
        print_json(output)
    else:
        console.print("[bold]gitcli Configuration[/bold]")
        console.print(f"Repository: {repo_path or '[dim]current directory[/dim]'}")
        if name and email:
            console.print(f"Identity: {name} <{email}>")
        else:
            console.print("Identity: [red]Not set[/red]")
        console.print(f"Default format: {default_format}")
        console.print(f"Config file: {get_config_file()}")


def get_repo_path() -> Optional[str]:
    """Get configured repository path."""
    config = load_config()
    default_config = config.get("default", {})
    if isinstance(default_config, dict):
        repo_path = default_config.get("repo_path")
        return repo_path if isinstance(repo_path, str) else None
    return None


def get_identity() -> Tuple[Optional[str], Optional[str]]:
    """Get configured commit identity as (name, email)."""
    config = load_config()
    identity = config.get("identity", {})
    if not isinstance(identity, dict):
        return None, None
    return identity.get("name"), identity.get("email")


def get_default_format() -> str:
    """Get configured default output format."""
    config = load_config()
    return config.get("preferences", {}).get("default_format") or "table"
