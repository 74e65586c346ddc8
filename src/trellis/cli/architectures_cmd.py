"""trellis architectures -- list the available backend architectures."""

from __future__ import annotations

import typer
from rich.console import Console

from trellis.architectures.registry import default_registry
from trellis.cli.output import render_architectures


def architectures(
    verbose: bool = typer.Option(False, "-V", "--verbose", help="Show features too"),
) -> None:
    """List the architectures `trellis new --model` accepts."""
    console = Console()
    infos = default_registry().list()
    render_architectures(infos, console)
    if verbose:
        for info in infos:
            console.print(f"[bold]{info.display_name}[/bold]")
            for feature in info.features:
                console.print(f"  - {feature}")
