"""Validate command: check a saved decomposition against its word."""

from pathlib import Path

import typer

from ...validation import validate_decomposition
from ..app import app, console
from ..utils import load_record, print_violations


@app.command("validate")
def validate_command(
    record_file: Path = typer.Argument(..., help="Decomposition JSON file"),
    word: str = typer.Argument(..., help="Word the decomposition should spell"),
):
    """Validate a saved decomposition. Exits 1 if any violation is found."""
    record = load_record(record_file)
    violations = validate_decomposition(word.strip(), record)

    if violations:
        console.print(f"[red]✗[/red] {len(violations)} violation(s) for '{word}':")
        print_violations(violations)
        raise typer.Exit(1)

    console.print(f"[green]✓[/green] Decomposition of '{word}' is valid")
