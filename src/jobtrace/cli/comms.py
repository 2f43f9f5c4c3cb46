"""User communication utils for the jobtrace commandline."""

from __future__ import annotations

import dataclasses
import textwrap

import rich.console

__all__ = ["Communicator"]


@dataclasses.dataclass
class Communicator:
    """Standardize user communication from the jobtrace cli."""

    console: rich.console.Console = dataclasses.field(
        default_factory=rich.console.Console
    )

    def print_text(self, text: str) -> None:
        """Print text verbatim, without styling or wrapping."""
        self.console.print(
            text, end="", markup=False, emoji=False, highlight=False, soft_wrap=True
        )

    def report_success(self, msg: str) -> None:
        """Communicate a check passed."""
        self.console.print(textwrap.indent(msg, prefix=" ✅ "), markup=False)

    def report_fail(self, msg: str) -> None:
        """Communicate something went wrong."""
        self.console.print(textwrap.indent(msg, prefix=" ❌ "), markup=False)
