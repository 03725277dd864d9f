"""Models command: list the models offered for OpenAI."""

from rich.table import Table

from ...config import get_config
from ...core.providers.openai import AVAILABLE_MODELS
from ..app import app, console


@app.command("models")
def models_command():
    """List available OpenAI models and mark the configured one."""
    config = get_config()
    selected = config.llm.model or next(iter(AVAILABLE_MODELS))

    table = Table(title="Available models (openai)")
    table.add_column("Model")
    table.add_column("Description")
    table.add_column("Selected")
    for model_id, description in AVAILABLE_MODELS.items():
        table.add_row(model_id, description, "✓" if model_id == selected else "")
    console.print(table)
