"""Load job graphs from YAML or JSON declaration files."""

from __future__ import annotations

import dataclasses
import pathlib
import typing

import cattrs
from cattrs.preconf import json as cattrs_json
from cattrs.preconf import pyyaml as cattrs_yaml
from typing_extensions import Self

from jobtrace.graph import Graph, Job

__all__ = [
    "CONVERTERS",
    "Declaration",
    "DeclarationFile",
    "load_declarations",
    "load_graph",
]


def structure_job(value: typing.Any, _: typing.Any) -> Job:  # noqa: ANN401  # raw file content
    """Accept integer or string job ids only."""
    if isinstance(value, bool) or not isinstance(value, int | str):
        msg = f"job ids must be integers or strings, got {value!r}"
        raise ValueError(msg)
    return value


def configure(converter: cattrs.Converter) -> cattrs.Converter:
    """Teach a converter about job ids."""
    converter.register_structure_hook_func(lambda t: t == Job, structure_job)
    return converter


CONVERTERS: dict[str, cattrs.Converter] = {
    ".yaml": configure(cattrs_yaml.make_converter()),
    ".yml": configure(cattrs_yaml.make_converter()),
    ".json": configure(cattrs_json.make_converter()),
}


@dataclasses.dataclass
class Declaration:
    """One job and the jobs it runs after."""

    job: Job
    predecessors: list[Job] = dataclasses.field(default_factory=list)


@dataclasses.dataclass
class DeclarationFile:
    """Contents of a graph file."""

    declarations: list[Declaration] = dataclasses.field(default_factory=list)

    def to_graph(self: Self) -> Graph:
        """Build the graph in declaration order."""
        return Graph.from_declarations(
            (d.job, d.predecessors) for d in self.declarations
        )


def load_declarations(path: pathlib.Path) -> DeclarationFile:
    """Read a declaration file, the suffix picks the format."""
    converter = CONVERTERS.get(path.suffix.lower())
    if converter is None:
        msg = (
            f"unsupported graph file type '{path.suffix}', "
            f"use one of {', '.join(CONVERTERS)}"
        )
        raise ValueError(msg)
    return converter.loads(  # type: ignore[attr-defined] # preconf converters only
        path.read_text(encoding="utf-8"), DeclarationFile
    )


def load_graph(path: pathlib.Path) -> Graph:
    """Read a declaration file into a new graph."""
    return load_declarations(path).to_graph()
