"""
Delegation to the wrapped tool.

Runs the real executable with the rewritten arguments. It handles:
- Locating the tool (PATH lookup or explicit path)
- Inheriting stdin/stdout/stderr untouched
- Exit code passthrough, including signal deaths
- Distinguishing launch failures from the tool's own exit codes
"""

import logging
import os
import shutil
import subprocess
from pathlib import Path

logger = logging.getLogger(__name__)


class ToolNotFoundError(RuntimeError):
    """Raised when the wrapped tool cannot be located."""

    pass


class ToolLaunchError(RuntimeError):
    """Raised when the wrapped tool was found but could not be started."""

    def __init__(self, tool: Path, cause: OSError) -> None:
        super().__init__(f"{tool}: {cause.strerror or cause}")
        self.tool = tool
        self.cause = cause


def find_tool(tool: str) -> Path:
    """
    Locate the wrapped tool.

    A value containing a path separator is taken as a path and must name
    an existing file; a bare name is looked up on PATH.

    Args:
        tool: Executable name (e.g. 'go') or path

    Returns:
        Path to the executable

    Raises:
        ToolNotFoundError: If the tool cannot be found
    """
    if os.sep in tool or (os.altsep and os.altsep in tool):
        path = Path(tool)
        if path.is_file():
            return path
        raise ToolNotFoundError(f"{tool}: no such file")

    if system_path := shutil.which(tool):
        return Path(system_path)

    raise ToolNotFoundError(f"{tool}: executable file not found in PATH")


def exit_code_from_returncode(returncode: int) -> int:
    """Map a subprocess returncode to a shell-style exit code.

    POSIX children killed by a signal report ``-signum``; shells report
    those as ``128 + signum``.
    """
    if returncode < 0:
        return 128 + (-returncode)
    return returncode


def run_tool(tool: str, args: list[str]) -> int:
    """
    Run the tool with ``args`` and wait for it to exit.

    Standard streams are inherited, so output is neither captured nor
    buffered. There is no timeout and no retry.

    Args:
        tool: Executable name or path
        args: Final argument list (after rewriting)

    Returns:
        The child's exit code

    Raises:
        ToolNotFoundError: If the tool cannot be located
        ToolLaunchError: If the tool exists but could not be started
        KeyboardInterrupt: Propagated after the child has been reaped
    """
    path = find_tool(tool)
    cmd = [str(path), *args]
    logger.debug("exec: %s", cmd)

    try:
        proc = subprocess.Popen(cmd)
    except OSError as e:
        raise ToolLaunchError(path, e) from e

    try:
        returncode = proc.wait()
    except KeyboardInterrupt:
        # The child shares our process group and got the SIGINT too
        proc.wait()
        raise

    logger.debug("exit: %d", returncode)
    return exit_code_from_returncode(returncode)
