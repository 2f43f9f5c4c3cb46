"""Decide whether a job lies on some path towards a target job."""

from __future__ import annotations

import dataclasses
import functools
import typing

from typing_extensions import Self

if typing.TYPE_CHECKING:
    from jobtrace.graph import Graph, Job

__all__ = ["ReachabilityOracle", "leads_to"]


def leads_to(graph: Graph, source: Job, target: Job) -> bool:
    """
    Check for a path along successor edges from ``source`` to ``target``.

    The visited set belongs to this call only; a job seen before contributes
    nothing instead of being explored again.
    """
    visited: set[Job] = set()
    stack = [source]
    while stack:
        job = stack.pop()
        if job == target:
            return True
        if job in visited:
            continue
        visited.add(job)
        stack.extend(graph.lookup(job).post_jobs - visited)
    return False


@dataclasses.dataclass
class ReachabilityOracle:
    """
    Answer ``leads_to(job, target)`` for a fixed target.

    One backward sweep over predecessor edges collects every job that can
    reach the target, after that each question is a set membership test.
    """

    graph: Graph
    target: Job

    @functools.cached_property
    def reaching(self: Self) -> frozenset[Job]:
        """All jobs with a path to the target, the target included."""
        seen = {self.target}
        stack = [self.target]
        while stack:
            for predecessor in self.graph.lookup(stack.pop()).pre_jobs:
                if predecessor not in seen:
                    seen.add(predecessor)
                    stack.append(predecessor)
        return frozenset(seen)

    def __call__(self: Self, source: Job) -> bool:
        """Check whether ``source`` leads to the target."""
        return source in self.reaching
