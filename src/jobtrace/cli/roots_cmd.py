"""The jobtrace roots command."""

from __future__ import annotations

import typer

from jobtrace import roots
from jobtrace.cli import comms, params
from jobtrace.cli.app import app
from jobtrace.graph import JobNotFoundError

__all__ = ["list_roots"]


@app.command("roots")
def list_roots(
    target: params.TargetArgument,
    graph_file: params.GraphOption = None,
    config_file: params.ConfigOption = None,
) -> None:
    """List the root jobs TARGET transitively depends on."""
    ucomm = comms.Communicator()
    cfg = params.config_from_options(config_file, ucomm)
    graph = params.graph_from_options(graph_file, cfg, ucomm)
    job = params.parse_job_id(target)
    try:
        found = roots.find_roots(graph, job)
    except JobNotFoundError as err:
        ucomm.print_text(f"{err}\n")
        raise typer.Exit(code=1) from err
    if not found:
        ucomm.print_text(f"{roots.NoRootFoundError(job)}\n")
        raise typer.Exit(code=3)
    ucomm.print_text("".join(f"job{root}\n" for root in found))
