"""Root Typer application for the Deconstructor CLI."""

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from .. import __version__

app = typer.Typer(
    name="deconstructor",
    help="Break words into etymological parts and rebuild them layer by layer.",
    no_args_is_help=True,
)

console = Console()


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"deconstructor {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show provider logs."),
) -> None:
    """Deconstructor CLI - decompose, validate and export word etymologies."""
    if verbose:
        logging.basicConfig(
            level=logging.INFO,
            format="%(message)s",
            handlers=[RichHandler(console=console, show_path=False)],
        )


# Register commands
from .commands import config, deconstruct, graph, models, validate  # noqa: E402,F401
