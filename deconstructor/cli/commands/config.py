"""Config command: show or update persisted settings."""

import typer
from pydantic import ValidationError
from rich.table import Table

from ...config import (
    CONFIG_KEYS,
    get_config,
    get_config_path,
    save_config,
    set_config_value,
)
from ..app import app, console


@app.command("config")
def config_command(
    action: str = typer.Argument(..., help="show or set"),
    key: str | None = typer.Argument(None, help="Dotted key, e.g. llm.model"),
    value: str | None = typer.Argument(None, help="New value"),
):
    """Show or set configuration values."""
    config = get_config()

    if action == "show":
        data = config.model_dump()
        table = Table(title=f"Configuration ({get_config_path()})")
        table.add_column("Key")
        table.add_column("Value")
        for dotted in CONFIG_KEYS:
            section, field = dotted.split(".", 1)
            table.add_row(dotted, str(data[section][field]))
        console.print(table)
        return

    if action == "set":
        if key is None or value is None:
            console.print("[red]Usage:[/red] deconstructor config set KEY VALUE")
            raise typer.Exit(1)
        try:
            updated = set_config_value(config, key, value)
        except KeyError:
            console.print(f"[red]Unknown key:[/red] {key}")
            console.print(f"Valid keys: {', '.join(CONFIG_KEYS)}")
            raise typer.Exit(1) from None
        except (ValueError, ValidationError) as e:
            console.print(f"[red]{e}[/red]")
            raise typer.Exit(1) from e
        path = save_config(updated)
        console.print(f"[green]✓[/green] Set {key} = {value} ({path})")
        return

    console.print(f"[red]Unknown action:[/red] {action}. Use 'show' or 'set'.")
    raise typer.Exit(1)
