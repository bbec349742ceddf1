"""Shared fixtures: stand-in executables for zopen, zopen-generate and ssh."""

import os
import stat
from collections.abc import Callable
from pathlib import Path

import pytest

from zopen_mcp.config import Config, Settings
from zopen_mcp.dependencies import Dependencies

ScriptFactory = Callable[[str, str], Path]

# Prints each argument on its own line
ECHO_ARGS = 'printf "%s\\n" "$@"'


@pytest.fixture
def bin_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Directory prepended to PATH for fake executables."""
    directory = tmp_path / "bin"
    directory.mkdir()
    monkeypatch.setenv("PATH", f"{directory}{os.pathsep}{os.environ.get('PATH', '')}")
    return directory


@pytest.fixture
def make_script(bin_dir: Path) -> ScriptFactory:
    """Create an executable /bin/sh script in bin_dir."""

    def factory(name: str, body: str) -> Path:
        script = bin_dir / name
        script.write_text(f"#!/bin/sh\n{body}\n")
        script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return script

    return factory


@pytest.fixture
def settings() -> Settings:
    """Default settings, independent of the test environment."""
    return Settings()


@pytest.fixture
def local_deps(settings: Settings) -> Dependencies:
    """Dependencies for local execution."""
    return Dependencies.from_config(Config(), settings)


@pytest.fixture
def remote_config() -> Config:
    """Remote config used across builder tests."""
    return Config(remote=True, host="h", user="u", key="/k", port=2222)


@pytest.fixture
def fake_zopen(make_script: ScriptFactory) -> Path:
    """zopen stand-in that echoes its arguments."""
    return make_script("zopen", ECHO_ARGS)


@pytest.fixture
def fake_generate(make_script: ScriptFactory) -> Path:
    """zopen-generate stand-in that echoes arguments and reports on stderr."""
    return make_script("zopen-generate", f"{ECHO_ARGS}\necho generating >&2")


@pytest.fixture
def fake_ssh(make_script: ScriptFactory) -> Path:
    """ssh stand-in that echoes the argument vector it received."""
    return make_script("ssh", ECHO_ARGS)
