"""
helpwrap - help flag reinterpreting wrapper for build tools.

Rewrites ``tool subcmd -h`` into ``tool help subcmd`` before delegating
to the real tool executable (``go`` by default).
"""

__version__ = "0.3.0"

from helpwrap.core.capture import HelpCapture, HelpFlagFound, HelpFlagNotFound, capture_help
from helpwrap.core.rewrite import preprocess_argv, reinterpret_args

__all__ = [
    "HelpCapture",
    "HelpFlagFound",
    "HelpFlagNotFound",
    "capture_help",
    "preprocess_argv",
    "reinterpret_args",
    "__version__",
]
