"""
Configuration loading.

Maps the layered environment onto WrapperConfig. The toggles are
presence-only: ``HELPWRAP_DEBUG=`` and ``HELPWRAP_DEBUG=0`` both enable
debug output.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from pathlib import Path

from .env import ENV_PREFIX, LEGACY_ENV_PREFIX, layered_environ
from .models import DEFAULT_PROGRAM_NAME, WrapperConfig

TOOL_VAR = f"{ENV_PREFIX}TOOL"
DEBUG_VARS = (f"{ENV_PREFIX}DEBUG", f"{LEGACY_ENV_PREFIX}DEBUG")
WARN_SUPPRESS_VARS = (f"{ENV_PREFIX}WARN_SUPPRESS", f"{LEGACY_ENV_PREFIX}WARN_SUPPRESS")


def program_name_from_argv0(argv0: str | None) -> str:
    """Return the basename of ``argv0``, or the default label."""
    if not argv0:
        return DEFAULT_PROGRAM_NAME
    return Path(argv0).name or DEFAULT_PROGRAM_NAME


def load_config(
    argv0: str | None = None,
    environ: Mapping[str, str] | None = None,
    *,
    project_dir: Path | None = None,
    user_env_paths: Iterable[Path] | None = None,
    project_env_paths: Iterable[Path] | None = None,
) -> WrapperConfig:
    """
    Build the configuration for one invocation.

    Args:
        argv0: Program path as invoked (used for the warning label)
        environ: Process environment (defaults to os.environ)
        project_dir: Directory searched for project .env files
        user_env_paths: Override user env files (tests)
        project_env_paths: Override project env files (tests)

    Returns:
        Frozen WrapperConfig
    """
    env = layered_environ(
        environ,
        project_dir=project_dir,
        user_env_paths=user_env_paths,
        project_env_paths=project_env_paths,
    )
    return WrapperConfig(
        tool=env.get(TOOL_VAR, ""),
        debug=any(var in env for var in DEBUG_VARS),
        suppress_warning=any(var in env for var in WARN_SUPPRESS_VARS),
        program_name=program_name_from_argv0(argv0),
    )
