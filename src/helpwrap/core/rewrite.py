"""
Rewrite policy for captured help flags.

Turns a capture result into the argument list handed to the real tool:

- ``build -h ./...``  → ``help build``
- ``-h anything``     → ``help``
- ``help -h``         → ``help``
- ``-v -h``           → ``help ""`` (no subcommand was seen)
- anything else       → unchanged
"""

from __future__ import annotations

from collections.abc import Sequence

from helpwrap.core.capture import HelpCapture, HelpFlagFound, capture_help

HELP_COMMAND = "help"


def reinterpret_args(capture: HelpCapture) -> list[str]:
    """Return the final argument list for ``capture``.

    Trailing arguments after a help flag are dropped: the request always
    resolves to help for the detected subcommand.
    """
    if not isinstance(capture, HelpFlagFound):
        return list(capture.original_args)

    if capture.position == 0 or capture.subcommand == HELP_COMMAND:
        return [HELP_COMMAND]
    return [HELP_COMMAND, capture.subcommand]


def preprocess_argv(args: Sequence[str]) -> list[str]:
    """Capture and rewrite in one step."""
    return reinterpret_args(capture_help(args))
