"""Trace and render the jobs that lead to a target job in a dependency graph."""

from __future__ import annotations

from jobtrace import cli, config, declarations, graph, reach, render, roots, sample
from jobtrace.graph import Graph, Job, JobNode, JobNotFoundError
from jobtrace.reach import ReachabilityOracle, leads_to
from jobtrace.render import print_reverse_job_dependency_tree, render_tree
from jobtrace.roots import NoRootFoundError, find_roots

__all__ = [
    "Graph",
    "Job",
    "JobNode",
    "JobNotFoundError",
    "NoRootFoundError",
    "ReachabilityOracle",
    "cli",
    "config",
    "declarations",
    "find_roots",
    "graph",
    "leads_to",
    "print_reverse_job_dependency_tree",
    "reach",
    "render",
    "render_tree",
    "roots",
    "sample",
]
