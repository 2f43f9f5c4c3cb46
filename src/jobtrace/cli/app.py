"""CLI typer app."""

from __future__ import annotations

import logging

import rich.console
import rich.logging
import typer
from typing_extensions import Annotated

__all__ = ["app"]


app = typer.Typer(name="jobtrace", no_args_is_help=True)


@app.callback()
def main(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Log graph traversal details.")
    ] = False,
) -> None:
    """Trace which jobs lead to a target job in a dependency graph."""
    if verbose:
        logging.basicConfig(
            format="%(message)s",
            handlers=[
                rich.logging.RichHandler(
                    console=rich.console.Console(stderr=True), show_time=False
                )
            ],
        )
        logging.getLogger("jobtrace").setLevel(logging.DEBUG)
