"""Find the root jobs a target job transitively depends on."""

from __future__ import annotations

import logging
import typing

from typing_extensions import Self

from jobtrace.graph import job_sort_key

if typing.TYPE_CHECKING:
    from jobtrace.graph import Graph, Job

__all__ = ["NoRootFoundError", "find_roots"]

logger = logging.getLogger(__name__)


class NoRootFoundError(LookupError):
    """Every backward path from the target cycles before reaching a root."""

    def __init__(self: Self, job: Job) -> None:
        super().__init__(job)
        self.job = job

    def __str__(self: Self) -> str:
        """Format error message."""
        return "No root job found (circular dependency detected)."


def find_roots(graph: Graph, target: Job) -> list[Job]:
    """
    Collect the jobs without predecessors that lead to ``target``.

    Walks predecessor edges depth-first from ``target``; a job already seen is
    not expanded again, which terminates on cycles and diamond merges. The
    result is sorted and free of duplicates. It is empty when no backward path
    reaches a predecessor-free job.
    """
    roots: set[Job] = set()
    visited: set[Job] = set()
    stack = [target]
    while stack:
        job = stack.pop()
        if job in visited:
            continue
        visited.add(job)
        node = graph.lookup(job)
        if node.is_root:
            roots.add(job)
        else:
            stack.extend(node.pre_jobs - visited)
    result = sorted(roots, key=job_sort_key)
    logger.debug("roots of job %s: %s", target, result)
    return result
