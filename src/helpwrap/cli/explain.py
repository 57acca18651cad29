"""
Explain CLI - show how the wrapper would rewrite an argument list.

Nothing is executed; the capture result and the rewritten arguments are
printed as a table (or JSON with ``--json``).

Arguments that look like options other than ``-h`` pass straight through;
put ``--`` first to explain ``--help`` or a separator:

    helpwrap-ctl explain build -h ./...
    helpwrap-ctl explain -- run -- prog --help
"""

import json
from dataclasses import asdict
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from helpwrap.core.capture import HelpFlagFound, capture_help
from helpwrap.core.rewrite import reinterpret_args

console = Console()

EXPLAIN_CONTEXT = {
    "ignore_unknown_options": True,
    "help_option_names": ["--help"],
}


def explain(
    args: Annotated[
        list[str] | None,
        typer.Argument(help="Arguments as they would follow the tool name"),
    ] = None,
    json_output: Annotated[
        bool,
        typer.Option("--json", help="Output as JSON"),
    ] = False,
) -> None:
    """Show the help flag capture and rewritten arguments for ARGS."""
    capture = capture_help(args or [])
    final_args = reinterpret_args(capture)

    if json_output:
        data = asdict(capture)
        data["original_args"] = list(capture.original_args)
        data["help_flag_found"] = capture.help_flag_found
        data["final_args"] = final_args
        console.print(json.dumps(data, indent=2), markup=False, highlight=False, soft_wrap=True)
        return

    table = Table(title="Help flag capture", show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value")

    table.add_row("arguments", escape(" ".join(capture.original_args)) or "[dim](none)[/dim]")
    table.add_row("subcommand", escape(capture.subcommand) or "[dim](none)[/dim]")
    if isinstance(capture, HelpFlagFound):
        table.add_row("help flag", f"[green]{capture.token}[/green]")
        table.add_row("position", str(capture.position + 1))
    else:
        table.add_row("help flag", "[dim]not found[/dim]")
    table.add_row("rewritten", escape(" ".join(final_args)) or "[dim](none)[/dim]")

    console.print(table)
