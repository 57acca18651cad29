"""
helpwrap CLI.

Two entry points:
- ``helpwrap``: the wrapper itself (see helpwrap.cli.shim), plain argv
- ``helpwrap-ctl``: this Typer app, for inspecting what the wrapper does
"""

import typer
from rich.console import Console

from helpwrap import __version__
from helpwrap.cli import config_cmd, explain
from helpwrap.cli.shim import cli_main

app = typer.Typer(
    name="helpwrap-ctl",
    help="Inspect how helpwrap reinterprets help flags",
    no_args_is_help=True,
    add_completion=False,
)

console = Console()

app.command(name="explain", context_settings=explain.EXPLAIN_CONTEXT)(explain.explain)
app.command(name="config")(config_cmd.config)


@app.command()
def version() -> None:
    """Show helpwrap version and exit."""
    console.print(f"helpwrap version {__version__}")
    raise typer.Exit(0)


def ctl_main() -> None:
    """Console script entry point for helpwrap-ctl."""
    app()


__all__ = ["app", "cli_main", "ctl_main"]
