"""Job dependency graph store."""

from __future__ import annotations

import dataclasses
import typing

import networkx as nx
from typing_extensions import Self

__all__ = ["Graph", "Job", "JobNode", "JobNotFoundError", "job_sort_key"]


Job = int | str


def job_sort_key(job: Job) -> tuple[int, int | str]:
    """
    Order job ids totally.

    Integers come first in numeric order, then strings in lexicographic order.
    """
    if isinstance(job, int):
        return (0, job)
    return (1, job)


class JobNotFoundError(LookupError):
    """The requested job is not part of the graph."""

    def __init__(self: Self, job: Job) -> None:
        super().__init__(job)
        self.job = job

    def __str__(self: Self) -> str:
        """Format error message."""
        return f"Job '{self.job}' not found."


@dataclasses.dataclass
class JobNode:
    """Position of one job in the graph."""

    job: Job
    pre_jobs: set[Job] = dataclasses.field(default_factory=set)
    post_jobs: set[Job] = dataclasses.field(default_factory=set)

    @property
    def is_root(self: Self) -> bool:
        """A job without predecessors."""
        return not self.pre_jobs

    def sorted_post_jobs(self: Self) -> list[Job]:
        """Successors in deterministic order."""
        return sorted(self.post_jobs, key=job_sort_key)


@dataclasses.dataclass
class Graph:
    """
    Mapping from job id to its node.

    Edges are kept symmetric: ``b in graph[a].post_jobs`` exactly when
    ``a in graph[b].pre_jobs``. Every id mentioned in an edge is a node.
    """

    nodes: dict[Job, JobNode] = dataclasses.field(default_factory=dict)

    @classmethod
    def from_declarations(
        cls: type[Self], declarations: typing.Iterable[tuple[Job, typing.Iterable[Job]]]
    ) -> Self:
        """Build a graph from ``(job, predecessors)`` pairs, in order."""
        graph = cls()
        for job, predecessors in declarations:
            graph.add_dependency(job, *predecessors)
        return graph

    def _ensure(self: Self, job: Job) -> JobNode:
        node = self.nodes.get(job)
        if node is None:
            node = self.nodes[job] = JobNode(job)
        return node

    def add_dependency(self: Self, job: Job, *predecessors: Job) -> None:
        """Declare that ``job`` runs after each of ``predecessors``."""
        node = self._ensure(job)
        for predecessor in predecessors:
            node.pre_jobs.add(predecessor)
            self._ensure(predecessor).post_jobs.add(job)

    def lookup(self: Self, job: Job) -> JobNode:
        """Read-only access to a node, raise if absent."""
        try:
            return self.nodes[job]
        except KeyError:
            raise JobNotFoundError(job) from None

    def jobs(self: Self) -> list[Job]:
        """All job ids, sorted."""
        return sorted(self.nodes, key=job_sort_key)

    def __contains__(self: Self, job: object) -> bool:
        return job in self.nodes

    def __len__(self: Self) -> int:
        return len(self.nodes)

    def to_networkx(self: Self) -> nx.DiGraph:
        """Export as a directed graph with edges pointing in execution order."""
        dag = nx.DiGraph()
        dag.add_nodes_from(self.nodes)
        dag.add_edges_from(
            (pre, node.job) for node in self.nodes.values() for pre in node.pre_jobs
        )
        return dag
