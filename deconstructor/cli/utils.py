"""Shared helpers for CLI commands."""

import json
from pathlib import Path

import typer
from pydantic import ValidationError
from rich.markup import escape
from rich.table import Table

from ..core.models import DecompositionRecord
from .app import console


def load_record(path: Path) -> DecompositionRecord:
    """Read a saved decomposition, exiting with code 1 on bad input."""
    if not path.exists():
        console.print(f"[red]File not found:[/red] {path}")
        raise typer.Exit(1)
    try:
        with open(path) as f:
            return DecompositionRecord.model_validate(json.load(f))
    except (json.JSONDecodeError, ValidationError) as e:
        console.print(f"[red]Invalid decomposition file:[/red] {e}")
        raise typer.Exit(1) from e


def render_record(word: str, record: DecompositionRecord) -> None:
    """Print parts and combination layers as tables."""
    if record.thought:
        console.print(f"[dim]{escape(record.thought)}[/dim]\n")

    parts = Table(title=f"Parts of '{escape(word)}'")
    parts.add_column("ID")
    parts.add_column("Text", style="bold")
    parts.add_column("Original")
    parts.add_column("Origin")
    parts.add_column("Meaning")
    for part in record.parts:
        parts.add_row(
            *(escape(cell) for cell in (part.id, part.text, part.original_word, part.origin, part.meaning))
        )
    console.print(parts)

    for layer_index, layer in enumerate(record.combinations, start=1):
        table = Table(title=f"Layer {layer_index}")
        table.add_column("ID")
        table.add_column("Text", style="bold")
        table.add_column("Sources")
        table.add_column("Definition")
        for combo in layer:
            table.add_row(
                *(escape(cell) for cell in (combo.id, combo.text, " + ".join(combo.source_ids), combo.definition))
            )
        console.print(table)


def print_violations(violations: list[str]) -> None:
    for message in violations:
        console.print(f"  [red]ERROR:[/red] {escape(message)}")
