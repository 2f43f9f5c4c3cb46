"""The built-in example job graph."""

from __future__ import annotations

from jobtrace.graph import Graph, Job

__all__ = ["SAMPLE_DECLARATIONS", "build_sample_graph"]


#: 1 -> {2, 3} -> 4 -> 5 -> {6, 7}, and 8 -> 7
SAMPLE_DECLARATIONS: list[tuple[Job, list[Job]]] = [
    (1, []),
    (2, [1]),
    (3, [1]),
    (4, [2, 3]),
    (5, [4]),
    (6, [5]),
    (8, []),
    (7, [5, 8]),
]


def build_sample_graph() -> Graph:
    """Build a fresh copy of the example graph."""
    return Graph.from_declarations(SAMPLE_DECLARATIONS)
