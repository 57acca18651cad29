"""Environment loading helpers.

helpwrap reads its toggles from layered sources:
- OS environment (highest precedence)
- Project environment files (.env, .env.local in the working directory)
- User environment file (~/.config/helpwrap/.env)

Values from .env files are only *read*; they are never written into
os.environ, so the delegated tool inherits the caller's environment as-is.

Precedence implemented here:
  os.environ > project .env > user .env
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Mapping
from pathlib import Path

from dotenv import dotenv_values

logger = logging.getLogger(__name__)

ENV_PREFIX = "HELPWRAP_"
LEGACY_ENV_PREFIX = "GOLANG_HELP_WRAPPER_"


def get_xdg_config_home(environ: Mapping[str, str] | None = None) -> Path:
    """Return the XDG config home (defaults to ~/.config)."""
    if environ is None:
        environ = os.environ
    if xdg_home := environ.get("XDG_CONFIG_HOME"):
        return Path(xdg_home)
    return Path.home() / ".config"


def get_user_env_path(environ: Mapping[str, str] | None = None) -> Path:
    """Return the path of the user-level env file."""
    return get_xdg_config_home(environ) / "helpwrap" / ".env"


def _is_wrapper_key(key: str) -> bool:
    return key.startswith(ENV_PREFIX) or key.startswith(LEGACY_ENV_PREFIX)


def read_env_file(path: Path) -> dict[str, str]:
    """Read wrapper keys from a dotenv file; missing files yield {}."""
    if not path.is_file():
        return {}
    out: dict[str, str] = {}
    for k, v in dotenv_values(path).items():
        if k is None or not _is_wrapper_key(k):
            continue
        # A bare ``KEY`` line parses as None; it still counts as "set"
        out[str(k)] = "" if v is None else str(v)
    logger.debug("loaded %d wrapper keys from %s", len(out), path)
    return out


def layered_environ(
    environ: Mapping[str, str] | None = None,
    *,
    project_dir: Path | None = None,
    user_env_paths: Iterable[Path] | None = None,
    project_env_paths: Iterable[Path] | None = None,
) -> dict[str, str]:
    """Merge user env, project env and the process environment.

    Args:
        environ: process environment (defaults to os.environ)
        project_dir: base directory for project env paths (defaults to cwd)
        user_env_paths: explicit user env file paths
        project_env_paths: explicit project env file paths

    Returns:
        Wrapper-relevant keys only, highest precedence winning
    """
    if environ is None:
        environ = os.environ
    if project_dir is None:
        project_dir = Path.cwd()

    if user_env_paths is None:
        user_env_paths = [get_user_env_path(environ)]
    if project_env_paths is None:
        project_env_paths = [project_dir / ".env", project_dir / ".env.local"]

    merged: dict[str, str] = {}
    for p in user_env_paths:
        merged.update(read_env_file(Path(p)))
    for p in project_env_paths:
        merged.update(read_env_file(Path(p)))
    merged.update({k: v for k, v in environ.items() if _is_wrapper_key(k)})
    return merged
