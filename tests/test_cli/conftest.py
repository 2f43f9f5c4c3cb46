"""Fixtures for CLI tests."""

from __future__ import annotations

import logging
import pathlib
import typing

import pytest
import typer.testing

from jobtrace import config


@pytest.fixture(scope="session")
def runner() -> typer.testing.CliRunner:
    """One cli runner is enough."""
    return typer.testing.CliRunner()


@pytest.fixture(autouse=True)
def isolated_config(
    tmp_path: pathlib.Path, monkeypatch: pytest.MonkeyPatch
) -> pathlib.Path:
    """Run from an empty directory with an empty user config dir."""
    user_dir = tmp_path / "user-config"
    user_dir.mkdir()
    monkeypatch.setattr(config, "USER_CONFIG_DIR", user_dir)
    monkeypatch.chdir(tmp_path)
    return user_dir


@pytest.fixture(autouse=True)
def reset_log_level() -> typing.Iterator[None]:
    """Undo the level '--verbose' sets on the package logger."""
    yield
    logging.getLogger("jobtrace").setLevel(logging.NOTSET)
