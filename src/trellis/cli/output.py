"""Rich terminal output for the trellis commands.

Renders the post-generation summary, the install warning, error messages
and the architecture listing.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich import box
from rich.console import Console
from rich.table import Table

from trellis.errors import ConfigValidationError, InstallError, TrellisError

if TYPE_CHECKING:
    from trellis.architectures.base import ArchitectureInfo
    from trellis.scaffold.project import ScaffoldOutcome


def render_summary(outcome: ScaffoldOutcome, console: Console) -> None:
    """Render what was generated and how to start it."""
    config = outcome.config
    table = Table(box=box.SIMPLE, show_header=False, padding=(0, 2))
    table.add_column("Key", style="bold")
    table.add_column("Value")

    table.add_row("Project", config.project_name)
    table.add_row("Directory", str(outcome.directory))
    table.add_row("Type", config.project_type)
    if config.architecture is not None:
        table.add_row("Architecture", config.architecture)
    if config.frontend_framework is not None:
        css = f", CSS: {config.css_tool}" if config.css_tool != "none" else ""
        table.add_row("Frontend", f"{config.frontend_framework}{css}")
    if config.project_type != "frontend":
        table.add_row("Database", config.database)
    if outcome.result.frontend_dir is not None:
        table.add_row("Embedded frontend", str(outcome.result.frontend_dir.relative_to(outcome.directory)))

    console.print()
    console.print(f"[green][bold]{config.project_type.capitalize()} project created successfully![/bold][/green]")
    console.print(table)

    pm = config.package_manager
    start_script = "dev" if config.project_type == "frontend" else "start"
    console.print("[yellow]To start your project:[/yellow]")
    console.print(f"  [dim]cd {outcome.directory.name}[/dim]")
    if not outcome.installed:
        console.print(f"  [dim]{pm} install[/dim]")
    console.print(f"  [dim]{pm} run {start_script}[/dim]")
    if outcome.result.frontend_dir is not None:
        console.print(f"  [dim]{pm} run frontend:dev[/dim]")


def render_install_warning(error: InstallError, console: Console) -> None:
    console.print("[yellow]Project created, but installing dependencies failed.[/yellow]")
    console.print(f"[dim]{error.reason}[/dim]")
    console.print(f"[dim]Install manually with: {error.manual_command}[/dim]")


def render_error(error: TrellisError, console: Console) -> None:
    """Render an error, listing every field for validation errors."""
    if isinstance(error, ConfigValidationError):
        console.print("[bold red]Error:[/bold red] invalid project configuration")
        for detail in error.errors:
            console.print(f"  [red]{detail.field}[/red]: {detail.message}")
        return
    console.print(f"[bold red]Error:[/bold red] {error}")


def render_architectures(infos: list[ArchitectureInfo], console: Console) -> None:
    """Render the registered architectures as a table."""
    table = Table(box=box.SIMPLE, padding=(0, 2))
    table.add_column("Name", style="bold")
    table.add_column("Aliases")
    table.add_column("Description")
    for info in infos:
        table.add_row(info.name, ", ".join(info.aliases) or "-", info.description)
    console.print(table)
