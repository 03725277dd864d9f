"""Graph command: export nodes and edges for a saved decomposition."""

from pathlib import Path

import typer

from ...decompose import build_graph
from ..app import app
from ..utils import load_record


@app.command("graph")
def graph_command(
    record_file: Path = typer.Argument(..., help="Decomposition JSON file"),
):
    """Print the decomposition DAG as JSON nodes and edges."""
    record = load_record(record_file)
    graph = build_graph(record)
    typer.echo(graph.model_dump_json(indent=2))
