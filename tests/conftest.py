"""
Pytest configuration and shared fixtures.

Provides an isolated environment (no stray HELPWRAP_* variables, no user
or project .env files) and a fake tool executable for delegation tests.
"""

import os
import stat
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """
    Keep tests independent of the developer's environment.

    Removes wrapper variables, points XDG_CONFIG_HOME at an empty
    directory and changes into an empty working directory.
    """
    for key in list(os.environ):
        if key.startswith(("HELPWRAP_", "GOLANG_HELP_WRAPPER_")):
            monkeypatch.delenv(key, raising=False)

    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))

    config_home = tmp_path / "xdg"
    config_home.mkdir()
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))

    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    return workdir


@pytest.fixture
def fake_tool(tmp_path: Path) -> Path:
    """Provide an executable script standing in for the wrapped tool."""
    tool = tmp_path / "bin" / "go"
    tool.parent.mkdir()
    tool.write_text("#!/bin/sh\nexit 0\n")
    tool.chmod(tool.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return tool
