"""
Exit codes and error messages for helpwrap.

The wrapper's own failures (tool missing, tool not startable) use the
shell's conventional codes so callers cannot mistake them for the
tool's exit status.
"""

from enum import IntEnum

from rich.console import Console
from rich.markup import escape

err_console = Console(stderr=True)


class ExitCode(IntEnum):
    """Standard exit codes for helpwrap."""

    SUCCESS = 0
    """Operation completed successfully."""

    GENERAL_ERROR = 1
    """Generic error."""

    USER_ERROR = 2
    """User configuration or input error."""

    TOOL_NOT_EXECUTABLE = 126
    """Tool found but could not be started - shell convention."""

    TOOL_NOT_FOUND = 127
    """Tool not found - shell convention."""

    SIGINT = 130
    """Terminated by SIGINT (Ctrl+C) - Unix standard."""


def print_error(
    problem: str,
    *,
    reason: str | None = None,
    solution: str | None = None,
) -> None:
    """
    Print a standardized error message to stderr.

    Args:
        problem: Brief description of what went wrong
        reason: Optional explanation of why it happened
        solution: Optional command or action to fix it
    """
    err_console.print(
        f"[red]Error:[/red] {escape(problem)}", emoji=False, highlight=False, soft_wrap=True
    )

    if reason:
        err_console.print(
            f"[dim]{escape(reason)}[/dim]", emoji=False, highlight=False, soft_wrap=True
        )

    if solution:
        err_console.print(
            f"[cyan]→ Try:[/cyan] {escape(solution)}", emoji=False, highlight=False, soft_wrap=True
        )


def print_tool_not_found_error(tool: str, detail: str | None = None) -> None:
    """Print error when the wrapped tool cannot be located."""
    print_error(
        f"Could not launch '{tool}'",
        reason=detail or "The executable was not found",
        solution="install it, or set HELPWRAP_TOOL to its full path",
    )


def print_tool_not_executable_error(tool: str, detail: str) -> None:
    """Print error when the wrapped tool exists but cannot be started."""
    print_error(
        f"Could not launch '{tool}'",
        reason=detail,
        solution=f"chmod +x {tool}  # or point HELPWRAP_TOOL at a working binary",
    )
