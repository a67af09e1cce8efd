"""Main CLI implementation using Typer."""

from pathlib import Path
from typing import Optional, Callable, Any

import typer
from rich.console import Console
from rich.markup import escape

from quadforge.cli.commands import (
    list_resources,
    render_files,
    validate_project,
)
from quadforge.errors import QuadforgeError
from quadforge.loader import ProjectLoader
from quadforge.resources.base import ResourceKind
from quadforge.utils.logging import setup_logging


# Create Typer app
app = typer.Typer(
    name="quadforge",
    help="Quadforge - Generate Podman quadlet and systemd socket units",
    add_completion=False,
)

# Console for rich output
console = Console()


def _run_cli_command(handler: Callable[..., Any], project_file: Path, **kwargs: Any):
    """Helper to build a project and run a CLI command with error handling."""
    try:
        project = ProjectLoader(project_file).build()
        handler(project, **kwargs)
    except (QuadforgeError, FileNotFoundError, ValueError) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1) from e


def _check_kind(kind: Optional[str]) -> Optional[str]:
    if kind is None:
        return None
    try:
        return ResourceKind(kind.lower()).value
    except ValueError:
        valid = ", ".join(k.value for k in ResourceKind)
        raise typer.BadParameter(f"Unknown kind {kind!r}, expected one of: {valid}")


@app.callback()
def main_callback(
    log_level: str = typer.Option(
        "WARNING", "--log-level", "-l", help="Logging level"
    ),
):
    """Quadforge - Generate Podman quadlet and systemd socket units."""
    setup_logging(log_level)


@app.command("validate")
def validate_command(
    project_file: Path = typer.Argument(..., help="Project file"),
):
    """Validate a project and render all of its units."""
    _run_cli_command(validate_project, project_file)


@app.command("list")
def list_command(
    project_file: Path = typer.Argument(..., help="Project file"),
    kind: Optional[str] = typer.Option(
        None, "--kind", "-k", help="Resource kind to list"
    ),
):
    """List resources declared in a project."""
    _run_cli_command(list_resources, project_file, kind=_check_kind(kind))


@app.command("render")
def render_command(
    project_file: Path = typer.Argument(..., help="Project file"),
    user: Optional[str] = typer.Option(
        None, "--user", "-u", help="Only render files for this user"
    ),
    kind: Optional[str] = typer.Option(
        None, "--kind", "-k", help="Only render files of this kind"
    ),
):
    """Print generated unit files and their install paths."""
    _run_cli_command(render_files, project_file, user=user, kind=_check_kind(kind))


def main():
    """Main entry point for CLI."""
    app()
