"""The jobtrace tree command."""

from __future__ import annotations

import typer
from typing_extensions import Annotated

from jobtrace import render
from jobtrace.cli import comms, params
from jobtrace.cli.app import app
from jobtrace.graph import JobNotFoundError
from jobtrace.roots import NoRootFoundError

__all__ = ["tree"]


@app.command()
def tree(
    target: params.TargetArgument,
    graph_file: params.GraphOption = None,
    config_file: params.ConfigOption = None,
    no_memoize: Annotated[
        bool,
        typer.Option(
            "--no-memoize", help="Search forward for the target on every branch."
        ),
    ] = False,
) -> None:
    """Print every path from a root job down to TARGET as a tree."""
    ucomm = comms.Communicator()
    cfg = params.config_from_options(config_file, ucomm)
    graph = params.graph_from_options(graph_file, cfg, ucomm)
    job = params.parse_job_id(target)
    try:
        lines = render.render_tree(graph, job, memoize=cfg.memoize and not no_memoize)
    except JobNotFoundError as err:
        ucomm.print_text(f"{err}\n")
        raise typer.Exit(code=1) from err
    except NoRootFoundError as err:
        ucomm.print_text(render.format_report(job, [str(err)]))
        raise typer.Exit(code=3) from err
    ucomm.print_text(render.format_report(job, lines))
