"""Common fixtures."""

from __future__ import annotations

import pathlib
import textwrap

import pytest

from jobtrace import sample
from jobtrace.graph import Graph


def make_cycle_graph() -> Graph:
    """1 -> 2 -> 3 -> 4, with 3 -> 2 closing a cycle."""
    return Graph.from_declarations([(2, [1, 3]), (3, [2]), (4, [3])])


def make_rootless_graph() -> Graph:
    """1 <-> 2 -> 3, no job is free of predecessors upstream of 3."""
    return Graph.from_declarations([(1, [2]), (2, [1]), (3, [2])])


def make_pipeline_graph() -> Graph:
    """A release pipeline with string job ids."""
    return Graph.from_declarations(
        [
            ("build", ["fetch"]),
            ("test", ["build"]),
            ("deploy", ["build", "test"]),
            ("docs", ["fetch"]),
        ]
    )


def make_chain_graph(length: int) -> Graph:
    """0 -> 1 -> ... -> length - 1."""
    return Graph.from_declarations((i, [i - 1]) for i in range(1, length))


def make_wide_diamond_graph() -> Graph:
    """Two stacked diamonds plus an unrelated component."""
    return Graph.from_declarations(
        [
            (2, [1]),
            (3, [1]),
            (4, [2, 3]),
            (5, [4]),
            (6, [4]),
            (7, [5, 6]),
            (11, [10]),
        ]
    )


ALL_GRAPHS = {
    "sample": sample.build_sample_graph,
    "cycle": make_cycle_graph,
    "rootless": make_rootless_graph,
    "pipeline": make_pipeline_graph,
    "wide_diamond": make_wide_diamond_graph,
}


@pytest.fixture
def sample_graph() -> Graph:
    """The built-in example graph."""
    return sample.build_sample_graph()


@pytest.fixture
def cycle_graph() -> Graph:
    """A graph with a cycle reachable from its root."""
    return make_cycle_graph()


@pytest.fixture
def rootless_graph() -> Graph:
    """A graph where the target only has cyclic ancestors."""
    return make_rootless_graph()


@pytest.fixture
def pipeline_graph() -> Graph:
    """A graph with string job ids."""
    return make_pipeline_graph()


@pytest.fixture(params=sorted(ALL_GRAPHS))
def any_graph(request: pytest.FixtureRequest) -> Graph:
    """Each of the example graphs in turn."""
    return ALL_GRAPHS[request.param]()


@pytest.fixture
def pipeline_yaml(tmp_path: pathlib.Path) -> pathlib.Path:
    """The pipeline graph as a YAML declaration file."""
    path = tmp_path / "pipeline.yaml"
    path.write_text(
        textwrap.dedent(
            """
            declarations:
              - job: build
                predecessors: [fetch]
              - job: test
                predecessors: [build]
              - job: deploy
                predecessors: [build, test]
              - job: docs
                predecessors: [fetch]
            """
        )
    )
    return path


@pytest.fixture
def cycle_yaml(tmp_path: pathlib.Path) -> pathlib.Path:
    """The cycle graph as a YAML declaration file."""
    path = tmp_path / "cycle.yaml"
    path.write_text(
        textwrap.dedent(
            """
            declarations:
              - job: 2
                predecessors: [1, 3]
              - job: 3
                predecessors: [2]
              - job: 4
                predecessors: [3]
            """
        )
    )
    return path


@pytest.fixture
def long_chain() -> Graph:
    """A chain far deeper than the interpreter's recursion limit."""
    return make_chain_graph(5000)
