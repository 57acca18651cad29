"""
Process entry point for the wrapper.

Installed as the ``helpwrap`` console script (typically symlinked or
aliased as ``go``). It does not use Typer: Click would swallow a leading
``--``, and every argument here has to reach the tool verbatim unless a
help flag is reinterpreted.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Mapping, Sequence

from helpwrap.cli.errors import (
    ExitCode,
    err_console,
    print_tool_not_executable_error,
    print_tool_not_found_error,
)
from helpwrap.core.capture import HelpCapture, HelpFlagFound, capture_help
from helpwrap.core.config import WrapperConfig, load_config
from helpwrap.core.delegate import ToolLaunchError, ToolNotFoundError, run_tool
from helpwrap.core.rewrite import reinterpret_args

logger = logging.getLogger(__name__)

WARNING_MARKER = "@@@"


def setup_logging(debug: bool = False) -> None:
    """Route debug records to stderr when the toggle is set."""
    if not debug:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="DEBUG: %(message)s",
        stream=sys.stderr,
    )


def _quote(value: str) -> str:
    """Double-quote ``value`` with backslash escapes."""
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def format_warning(
    capture: HelpFlagFound,
    args: Sequence[str],
    program_name: str,
    tool: str,
) -> list[str]:
    """
    Build the warning block shown when a help flag is reinterpreted.

    Args:
        capture: The help flag that was found
        args: Rewritten arguments
        program_name: Label of this wrapper (basename of argv[0])
        tool: The tool being delegated to

    Returns:
        Four lines, bracketed by marker lines
    """
    return [
        WARNING_MARKER,
        f"{WARNING_MARKER} WARNING: help flag {_quote(capture.token)} at position "
        f"{capture.position + 1} reinterpreted by {_quote(program_name)}",
        f"{WARNING_MARKER} WARNING: -> running '{' '.join([tool, *args])}'",
        WARNING_MARKER,
    ]


def _emit_warning(capture: HelpCapture, args: list[str], config: WrapperConfig) -> None:
    if not isinstance(capture, HelpFlagFound) or config.suppress_warning:
        return
    for line in format_warning(capture, args, config.program_name, config.tool):
        err_console.print(line, markup=False, emoji=False, highlight=False, soft_wrap=True)


def _delegate(config: WrapperConfig, args: list[str]) -> int:
    """Run the tool and map launch failures to distinct exit codes."""
    try:
        return run_tool(config.tool, args)
    except ToolNotFoundError as e:
        print_tool_not_found_error(config.tool, str(e))
        return ExitCode.TOOL_NOT_FOUND
    except ToolLaunchError as e:
        print_tool_not_executable_error(config.tool, str(e))
        return ExitCode.TOOL_NOT_EXECUTABLE
    except KeyboardInterrupt:
        return ExitCode.SIGINT


def main(argv: Sequence[str] | None = None, environ: Mapping[str, str] | None = None) -> int:
    """
    Run the wrapper once.

    Args:
        argv: Full argument vector including the program name
            (defaults to sys.argv)
        environ: Process environment (defaults to os.environ)

    Returns:
        Exit code of the delegated tool, or an ExitCode on launch failure
    """
    if argv is None:
        argv = sys.argv
    argv0 = argv[0] if argv else None
    args = list(argv[1:])

    config = load_config(argv0, environ)
    setup_logging(config.debug)

    capture = capture_help(args)
    if config.debug:
        logger.debug("argv: %s", list(argv))
        logger.debug("%r", capture)

    final_args = reinterpret_args(capture)
    _emit_warning(capture, final_args, config)

    return int(_delegate(config, final_args))


def cli_main() -> None:
    """Console script entry point."""
    sys.exit(main())


__all__ = ["cli_main", "format_warning", "main", "setup_logging"]
