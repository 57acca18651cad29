"""Config CLI - show the effective wrapper configuration."""

import json
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from helpwrap.core.config import get_user_env_path, load_config
from helpwrap.core.delegate import ToolNotFoundError, find_tool

console = Console()


def config(
    json_output: Annotated[
        bool,
        typer.Option("--json", help="Output as JSON"),
    ] = False,
) -> None:
    """Show the effective configuration and where the tool resolves."""
    cfg = load_config()
    try:
        resolved: str | None = str(find_tool(cfg.tool))
    except ToolNotFoundError:
        resolved = None

    if json_output:
        data = cfg.model_dump(exclude={"program_name"})
        data["resolved_tool"] = resolved
        data["user_env_file"] = str(get_user_env_path())
        console.print(json.dumps(data, indent=2), markup=False, highlight=False, soft_wrap=True)
        return

    table = Table(title="helpwrap configuration", show_header=False)
    table.add_column("Setting", style="cyan")
    table.add_column("Value")
    table.add_row("tool", cfg.tool)
    table.add_row("resolved", resolved or "[red]not found[/red]")
    table.add_row("debug", "yes" if cfg.debug else "no")
    table.add_row("warnings", "suppressed" if cfg.suppress_warning else "shown")
    table.add_row("user env file", str(get_user_env_path()))
    console.print(table)

    if resolved is None:
        raise typer.Exit(1)
