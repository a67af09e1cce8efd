"""Command implementations for CLI."""

from typing import Optional

from rich.console import Console
from rich.table import Table

from quadforge.generator import generate_artifacts
from quadforge.loader import Project
from quadforge.resources.base import ResourceKind


console = Console()


def _details(resource) -> str:
    """Short description of a resource for listings."""
    config = resource.config()
    kind = resource.kind
    if kind is ResourceKind.NETWORK:
        return f"{config.subnet} via {config.gateway}"
    if kind is ResourceKind.VOLUME:
        if config.is_bind_mount:
            return f"{config.host_path} -> {config.resolved_mount_path}"
        return f"managed -> {config.resolved_mount_path}"
    if kind is ResourceKind.SOCKET:
        ports = ", ".join(str(p) for p in config.ports)
        return f"{ports} -> {config.activate_service}.service"
    if kind is ResourceKind.CONTAINER:
        pod = resource.pod
        return f"{config.image}" + (f" (pod {pod.id})" if pod else "")
    if kind is ResourceKind.POD:
        members = ", ".join(c.id for c in resource.get_dependencies().containers)
        return members or "-"
    return ""


def list_resources(project: Project, kind: Optional[str] = None):
    """List resources with formatted output."""
    kinds = [ResourceKind(kind)] if kind else list(ResourceKind)

    for resource_kind in kinds:
        registry = project.registry(resource_kind)
        if not len(registry):
            continue

        table = Table(title=f"{resource_kind.value.capitalize()}s")
        table.add_column("ID", style="cyan")
        table.add_column("File", style="magenta")
        table.add_column("Details", style="dim")

        for resource in registry:
            file_name = resource.file_name
            if resource_kind is ResourceKind.VOLUME and resource.is_bind_mount:
                file_name = "-"
            table.add_row(resource.id, file_name, _details(resource))

        console.print(table)
        console.print()


def render_files(project: Project, user: Optional[str] = None, kind: Optional[str] = None):
    """Print generated files with their install paths."""
    extension = ResourceKind(kind).extension if kind else None
    artifacts = generate_artifacts(project)

    if user is not None:
        artifacts = [a for a in artifacts if a.user == user.lower()]
        if not artifacts:
            console.print(f"[yellow]No files configured for user {user}[/yellow]")
            return

    for user_artifacts in artifacts:
        for path, generated in user_artifacts.paths():
            if extension and not generated.file_name.endswith(f".{extension}"):
                continue
            console.print(f"[bold cyan]# {path}[/bold cyan]")
            console.print(generated.contents, markup=False, highlight=False, soft_wrap=True)
            console.print()


def validate_project(project: Project):
    """Render every resource and report problems."""
    rendered = 0
    for resource in project.resources():
        if resource.kind is ResourceKind.VOLUME and resource.is_bind_mount:
            continue
        resource.generate_file_template()
        rendered += 1

    artifacts = generate_artifacts(project)
    files = sum(len(a.files) for a in artifacts)

    console.print(
        f"[green]✓[/green] Project is valid: {rendered} unit files, "
        f"{files} installed across {len(artifacts)} users"
    )
