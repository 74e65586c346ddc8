"""Trellis CLI entry point."""

import typer

from trellis import __version__
from trellis.cli.architectures_cmd import architectures
from trellis.cli.new_cmd import new

app = typer.Typer(
    name="trellis",
    help="Generate backend, frontend or fullstack projects with professional architectures",
    no_args_is_help=True,
)

# Register subcommands
app.command()(architectures)
app.command()(new)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"trellis {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """Generate backend, frontend or fullstack projects."""
