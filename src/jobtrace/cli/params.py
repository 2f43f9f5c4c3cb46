"""Parameter types and shared options for the jobtrace commandline."""

from __future__ import annotations

import json
import pathlib

import cattrs
import typer
import yaml
from typing_extensions import Annotated

from jobtrace import config, declarations, sample
from jobtrace.cli import comms
from jobtrace.graph import Graph, Job

__all__ = [
    "ConfigOption",
    "GraphOption",
    "TargetArgument",
    "config_from_options",
    "graph_from_options",
    "parse_job_id",
]


TargetArgument = Annotated[
    str,
    typer.Argument(
        help=(
            "Job id. Ids made of ASCII digits are read as integers, "
            "so string ids consisting only of digits cannot be queried."
        )
    ),
]
GraphOption = Annotated[
    pathlib.Path | None,
    typer.Option(
        "--graph",
        exists=True,
        file_okay=True,
        dir_okay=False,
        help="YAML or JSON declaration file, defaults to the configured graph.",
    ),
]
ConfigOption = Annotated[
    pathlib.Path | None,
    typer.Option("--config", exists=True, file_okay=True, dir_okay=False),
]


def parse_job_id(value: str) -> Job:
    """Turn a commandline job id into an integer if it looks like one."""
    if value.isascii() and value.isdecimal():
        return int(value)
    return value


def graph_from_options(
    graph_file: pathlib.Path | None,
    cfg: config.Config,
    ucomm: comms.Communicator,
) -> Graph:
    """Load the graph named on the commandline or in the config, else the sample."""
    path = graph_file or cfg.graph_file
    if path is None:
        return sample.build_sample_graph()
    try:
        return declarations.load_graph(path)
    except (
        OSError,
        ValueError,
        yaml.YAMLError,
        json.JSONDecodeError,
        cattrs.BaseValidationError,
    ) as err:
        ucomm.report_fail(f"could not load graph from {path}: {err}")
        raise typer.Exit(code=2) from err


def config_from_options(
    config_file: pathlib.Path | None, ucomm: comms.Communicator
) -> config.Config:
    """Load the config, exiting with a message if it is broken."""
    try:
        return config.load_config(config_file)
    except (OSError, ValueError, yaml.YAMLError, cattrs.BaseValidationError) as err:
        ucomm.report_fail(f"could not read config: {err}")
        raise typer.Exit(code=2) from err
