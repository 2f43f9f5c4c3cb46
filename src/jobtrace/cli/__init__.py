"""
The jobtrace CLI.

Commands:
- tree: print the jobs leading to a target as one tree per root
- roots: list the root jobs a target depends on
- jobs: list all jobs and check the graph for cycles
"""

from __future__ import annotations

from jobtrace.cli import jobs_cmd, roots_cmd, tree_cmd
from jobtrace.cli.app import app

__all__ = ["app", "jobs_cmd", "roots_cmd", "tree_cmd"]
