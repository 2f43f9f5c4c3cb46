"""
Settings for the jobtrace commandline.

A config file is looked up next to where jobtrace runs first, then in the
user config directory.
"""

from __future__ import annotations

import dataclasses
import pathlib

import platformdirs
from cattrs.preconf.pyyaml import make_converter

__all__ = ["CONFIG_FILE_NAME", "Config", "get_user_config_dir", "load_config"]

CONFIG_FILE_NAME = "jobtrace.yaml"
USER_CONFIG_DIR = pathlib.Path(platformdirs.user_config_dir("jobtrace"))
CONVERTER = make_converter()
CONVERTER.register_structure_hook(pathlib.Path, lambda v, _: pathlib.Path(v))
CONVERTER.register_unstructure_hook(pathlib.Path, str)


@dataclasses.dataclass
class Config:
    """jobtrace configuration."""

    graph_file: pathlib.Path | None = None
    memoize: bool = True


def get_user_config_dir() -> pathlib.Path:
    """Location of the per-user config directory."""
    return USER_CONFIG_DIR


def find_config_file(
    explicit: pathlib.Path | None = None, cwd: pathlib.Path | None = None
) -> pathlib.Path | None:
    """Pick the first existing config file, if any."""
    if explicit is not None:
        return explicit
    candidates = [
        (cwd or pathlib.Path()) / CONFIG_FILE_NAME,
        get_user_config_dir() / CONFIG_FILE_NAME,
    ]
    return next((c for c in candidates if c.exists()), None)


def load_config(
    explicit: pathlib.Path | None = None, cwd: pathlib.Path | None = None
) -> Config:
    """
    Read the config, falling back to defaults.

    Relative ``graph_file`` entries are resolved against the config file's
    directory.
    """
    path = find_config_file(explicit, cwd)
    if path is None:
        return Config()
    config = CONVERTER.loads(path.read_text(encoding="utf-8") or "{}", Config)
    if config.graph_file is not None and not config.graph_file.is_absolute():
        config.graph_file = path.parent / config.graph_file
    return config
