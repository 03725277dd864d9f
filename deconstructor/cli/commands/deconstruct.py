"""Deconstruct command: decompose a word with the configured LLM."""

import json

import typer
from rich.markup import escape

from ...core.providers import GenerationError
from ...decompose import OrchestratorState, deconstruct_word
from ...validation import validate_decomposition
from ..app import app, console
from ..utils import print_violations, render_record


@app.command("deconstruct")
def deconstruct_command(
    word: str = typer.Argument(..., help="Single word to decompose"),
    model: str | None = typer.Option(None, "--model", "-m", help="Model name"),
    provider: str | None = typer.Option(
        None, "--provider", "-p", help="LLM provider: openai or claude"
    ),
    retry_count: int = typer.Option(
        0, "--retry-count", help="Times this request was already retried"
    ),
    max_attempts: int | None = typer.Option(
        None, "--max-attempts", help="Attempt budget for this request"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the record as JSON"),
):
    """Decompose WORD into etymological parts and combination layers."""

    def on_attempt(state: OrchestratorState, attempt: int, total: int) -> None:
        if state is OrchestratorState.ATTEMPTING and not as_json:
            console.print(f"[dim]Attempt {attempt}/{total}...[/dim]")

    def on_retry(attempt: int, total: int, summary: str) -> None:
        if not as_json:
            console.print(f"[yellow]Retrying ({attempt}/{total}):[/yellow] {escape(summary)}")

    try:
        record = deconstruct_word(
            word,
            retry_count=retry_count,
            model=model,
            provider=provider,
            max_attempts=max_attempts,
            on_attempt=on_attempt,
            on_retry=on_retry,
        )
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from e
    except GenerationError as e:
        console.print(f"[red]Generation failed:[/red] {e}")
        console.print("Run again with --retry-count 1 to allow the default fallback.")
        raise typer.Exit(1) from e

    word = word.strip()
    if as_json:
        typer.echo(json.dumps(record.to_wire(), indent=2, ensure_ascii=False))
        return

    render_record(word, record)
    violations = validate_decomposition(word, record)
    if violations:
        console.print("\n[yellow]Returned best-effort result with issues:[/yellow]")
        print_violations(violations)
