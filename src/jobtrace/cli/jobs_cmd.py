"""The jobtrace jobs command."""

from __future__ import annotations

import networkx as nx

from jobtrace.cli import comms, params
from jobtrace.cli.app import app
from jobtrace.graph import Job, job_sort_key

__all__ = ["list_jobs"]


def normalize_cycle(cycle: list[Job]) -> list[Job]:
    """Rotate a cycle to start at its smallest job."""
    start = cycle.index(min(cycle, key=job_sort_key))
    return cycle[start:] + cycle[:start]


def format_cycle(cycle: list[Job]) -> str:
    """Show a cycle in execution order, back to where it started."""
    return " -> ".join(f"job{job}" for job in [*cycle, cycle[0]])


@app.command("jobs")
def list_jobs(
    graph_file: params.GraphOption = None,
    config_file: params.ConfigOption = None,
) -> None:
    """List all jobs with their predecessors and check for cycles."""
    ucomm = comms.Communicator()
    cfg = params.config_from_options(config_file, ucomm)
    graph = params.graph_from_options(graph_file, cfg, ucomm)
    lines = []
    for job in graph.jobs():
        pre_jobs = sorted(graph.lookup(job).pre_jobs, key=job_sort_key)
        after = ", ".join(f"job{pre}" for pre in pre_jobs) or "-"
        lines.append(f"job{job} <- {after}\n")
    ucomm.print_text("".join(lines))

    dag = graph.to_networkx()
    if nx.is_directed_acyclic_graph(dag):
        ucomm.report_success(f"{len(graph)} jobs, no circular dependencies")
        return
    cycles = sorted(
        (normalize_cycle(c) for c in nx.simple_cycles(dag)),
        key=lambda c: [job_sort_key(j) for j in c],
    )
    ucomm.report_fail(
        "circular dependencies:\n" + "\n".join(format_cycle(c) for c in cycles)
    )
