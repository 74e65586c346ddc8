"""trellis new -- generate a backend, frontend or fullstack project.

Passing any of --type, --frontend, --backend or --database (or the
legacy --model) generates directly from flags. Otherwise the command asks
its questions interactively.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from trellis.cli.output import render_error, render_install_warning, render_summary
from trellis.errors import TrellisError
from trellis.logging import get_logger, setup_logging
from trellis.models.config import FlagSource, load_settings
from trellis.scaffold.options import RawOptions
from trellis.scaffold.project import scaffold_project
from trellis.scaffold.prompts import ConsolePrompter

console = Console(stderr=True)
logger = get_logger(__name__)

# Parameter sources that mean the caller supplied the value.
_EXPLICIT_SOURCES: frozenset[str] = frozenset({"COMMANDLINE", "ENVIRONMENT"})

# Command parameter name -> flag name used for provenance tracking.
_FLAG_PARAMETERS: dict[str, str] = {
    "model": "model",
    "project_type": "type",
    "frontend": "frontend",
    "css": "css",
    "frontend_architecture": "frontend_architecture",
    "backend": "backend",
    "database": "database",
    "directory": "directory",
    "name": "name",
    "description": "description",
    "author": "author",
    "package_manager": "package_manager",
    "yes": "yes",
}


def flag_provenance(ctx: typer.Context) -> dict[str, FlagSource]:
    """Tag every flag as EXPLICIT, DEFAULT or ABSENT from the parameter sources.

    Sources are compared by member name: typer may run on its own bundled
    copy of click, whose ParameterSource is a distinct enum class.
    """
    provenance: dict[str, FlagSource] = {}
    for parameter, flag in _FLAG_PARAMETERS.items():
        source = ctx.get_parameter_source(parameter)
        if source is not None and source.name in _EXPLICIT_SOURCES:
            provenance[flag] = FlagSource.EXPLICIT
        elif source is None or ctx.params.get(parameter) is None:
            provenance[flag] = FlagSource.ABSENT
        else:
            provenance[flag] = FlagSource.DEFAULT
    return provenance


def new(
    ctx: typer.Context,
    model: Optional[str] = typer.Option(
        None, "-m", "--model", help="Architecture to generate directly (mvc, clean, hexa)"
    ),
    project_type: Optional[str] = typer.Option(
        None, "-t", "--type", help="Project type (backend, frontend, fullstack)"
    ),
    frontend: Optional[str] = typer.Option(
        None, "--frontend", help="Frontend framework (react, vue, angular)"
    ),
    css: str = typer.Option("none", "--css", help="CSS tool (tailwind, none)"),
    frontend_architecture: str = typer.Option(
        "default",
        "--frontend-architecture",
        help="Frontend folder layout (default, mvc, clean, hexa)",
    ),
    backend: str = typer.Option("node", "--backend", help="Backend runtime (node)"),
    database: str = typer.Option(
        "none", "--database", help="Database (postgres, mysql, mongodb, sqlite, none)"
    ),
    directory: str = typer.Option("./", "-d", "--directory", help="Target directory"),
    name: Optional[str] = typer.Option(None, "-n", "--name", help="Project name"),
    description: Optional[str] = typer.Option(None, "--description", help="Project description"),
    author: Optional[str] = typer.Option(None, "--author", help="Project author"),
    package_manager: Optional[str] = typer.Option(
        None, "--package-manager", help="Package manager (npm, yarn, pnpm)"
    ),
    yes: bool = typer.Option(
        False, "-y", "--yes", help="Use default metadata and skip the directory confirmation"
    ),
    force: bool = typer.Option(False, "--force", help="Generate into a non-empty directory"),
    install: Optional[bool] = typer.Option(
        None, "--install/--no-install", help="Install dependencies after generation"
    ),
    verbose: bool = typer.Option(False, "-V", "--verbose", help="Show install output and debug logs"),
    config_path: Optional[Path] = typer.Option(
        None, "--config", help="Path to a trellis.yaml settings file"
    ),
) -> None:
    """Generate a new project with a professional architecture."""
    setup_logging(verbose=verbose)
    options = RawOptions(
        model=model,
        type=project_type,
        frontend=frontend,
        css=css,
        frontend_architecture=frontend_architecture,
        backend=backend,
        database=database,
        directory=directory,
        name=name,
        description=description,
        author=author,
        package_manager=package_manager,
        yes=yes,
    )
    provenance = flag_provenance(ctx)

    try:
        settings = load_settings(config_path)
        # --yes keeps the stack questions; it only skips metadata and confirmation
        prompter = ConsolePrompter(console)
        outcome = asyncio.run(
            scaffold_project(
                options,
                provenance,
                prompter=prompter,
                settings=settings,
                force=force,
                install=settings.install if install is None else install,
                verbose=verbose,
                console=console,
            )
        )
    except TrellisError as exc:
        render_error(exc, console)
        if verbose:
            console.print_exception()
        raise typer.Exit(code=1)

    render_summary(outcome, console)
    if outcome.install_error is not None:
        render_install_warning(outcome.install_error, console)
