"""
Help flag capture.

Scans the arguments that follow the program name and locates the first
``-h`` / ``--help`` flag, recording the subcommand seen before it:

- ``go build -h``          → found at 1, subcommand ``build``
- ``go -h``                → found at 0, no subcommand
- ``go run -- prog -h``    → not found (scan stops at ``--``)
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

HELP_FLAGS = frozenset({"-h", "--help"})
SEPARATOR = "--"


@dataclass(frozen=True)
class HelpFlagFound:
    """A help flag was located before any separator."""

    subcommand: str
    position: int
    token: str
    original_args: tuple[str, ...]

    @property
    def help_flag_found(self) -> bool:
        return True


@dataclass(frozen=True)
class HelpFlagNotFound:
    """No help flag was located (or the scan hit a separator first)."""

    subcommand: str
    original_args: tuple[str, ...]

    @property
    def help_flag_found(self) -> bool:
        return False


HelpCapture = HelpFlagFound | HelpFlagNotFound


def capture_help(args: Sequence[str]) -> HelpCapture:
    """Locate the first help flag in ``args``.

    The first token not starting with ``-`` is taken as the subcommand and is
    never replaced. The scan ends at the first ``--`` separator, and returns
    immediately on the first help flag, so a later separator has no effect
    on an earlier match.

    Args:
        args: Arguments following the program name

    Returns:
        HelpFlagFound or HelpFlagNotFound; never raises
    """
    original = tuple(args)
    subcommand = ""
    for i, arg in enumerate(original):
        if not arg.startswith("-") and not subcommand:
            subcommand = arg
        if arg == SEPARATOR:
            break
        if arg in HELP_FLAGS:
            return HelpFlagFound(
                subcommand=subcommand,
                position=i,
                token=arg,
                original_args=original,
            )
    return HelpFlagNotFound(subcommand=subcommand, original_args=original)
