"""
Configuration model and loading.

Toggles come from the environment, layered over project and user .env
files: user < project < process environment.
"""

from .env import get_user_env_path, layered_environ, read_env_file
from .loader import load_config, program_name_from_argv0
from .models import DEFAULT_TOOL, WrapperConfig

__all__ = [
    # Models
    "DEFAULT_TOOL",
    "WrapperConfig",
    # Loader functions
    "get_user_env_path",
    "layered_environ",
    "load_config",
    "program_name_from_argv0",
    "read_env_file",
]
