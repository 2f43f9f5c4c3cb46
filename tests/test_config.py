"""Test config lookup."""

from __future__ import annotations

import pathlib

import pytest

from jobtrace import config


@pytest.fixture(autouse=True)
def user_config_dir(
    tmp_path: pathlib.Path, monkeypatch: pytest.MonkeyPatch
) -> pathlib.Path:
    """Keep the real user config out of the tests."""
    user_dir = tmp_path / "user"
    user_dir.mkdir()
    monkeypatch.setattr(config, "USER_CONFIG_DIR", user_dir)
    return user_dir


def test_defaults(tmp_path: pathlib.Path) -> None:
    """No config file means defaults."""
    assert config.load_config(cwd=tmp_path) == config.Config()


def test_local_file(tmp_path: pathlib.Path) -> None:
    """A local config file resolves the graph file next to itself."""
    (tmp_path / config.CONFIG_FILE_NAME).write_text(
        "graph_file: graphs/main.yaml\nmemoize: false\n"
    )
    loaded = config.load_config(cwd=tmp_path)
    assert loaded.graph_file == tmp_path / "graphs" / "main.yaml"
    assert loaded.memoize is False


def test_user_file(tmp_path: pathlib.Path, user_config_dir: pathlib.Path) -> None:
    """The user config is used when there is no local one."""
    (user_config_dir / config.CONFIG_FILE_NAME).write_text("memoize: false\n")
    assert config.load_config(cwd=tmp_path) == config.Config(memoize=False)


def test_explicit_file_wins(tmp_path: pathlib.Path) -> None:
    """An explicitly given file is preferred over the local one."""
    (tmp_path / config.CONFIG_FILE_NAME).write_text("memoize: false\n")
    explicit = tmp_path / "other.yaml"
    explicit.write_text("graph_file: /abs/graph.json\n")
    loaded = config.load_config(explicit, cwd=tmp_path)
    assert loaded == config.Config(graph_file=pathlib.Path("/abs/graph.json"))


def test_empty_file(tmp_path: pathlib.Path) -> None:
    """An empty config file means defaults."""
    (tmp_path / config.CONFIG_FILE_NAME).write_text("")
    assert config.load_config(cwd=tmp_path) == config.Config()
