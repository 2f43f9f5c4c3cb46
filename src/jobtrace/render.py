"""Render the jobs leading to a target as trees, one per root."""

from __future__ import annotations

import functools
import logging
import typing

import rich.console

from jobtrace.graph import JobNotFoundError
from jobtrace.reach import ReachabilityOracle, leads_to
from jobtrace.roots import NoRootFoundError, find_roots

if typing.TYPE_CHECKING:
    from jobtrace.graph import Graph, Job

__all__ = [
    "CYCLE_MARKER",
    "format_report",
    "format_reverse_dependency_tree",
    "iter_tree_lines",
    "print_reverse_job_dependency_tree",
    "render_tree",
]

logger = logging.getLogger(__name__)

BRANCH_MID = "├── "
BRANCH_LAST = "└── "
INDENT_MID = "│   "
INDENT_LAST = "    "
TARGET_SUFFIX = " (TARGET)"
CYCLE_MARKER = "(circular dependency detected)"


def job_label(job: Job, target: Job) -> str:
    """Label a job, marking the target."""
    label = f"job{job}"
    if job == target:
        label += TARGET_SUFFIX
    return label


class _Frame(typing.NamedTuple):
    job: Job
    prefix: str
    is_last: bool
    depth: int


def iter_tree_lines(
    graph: Graph,
    root: Job,
    target: Job,
    keep: typing.Callable[[Job], bool],
) -> typing.Iterator[str]:
    """
    Yield the lines of the tree below ``root``, depth first.

    Only successors accepted by ``keep`` are descended into. A cycle is
    reported only where one root-to-job path revisits a job; sibling branches
    do not see each other's jobs.
    """
    path: list[Job] = []
    on_path: set[Job] = set()
    stack = [_Frame(root, "", True, 0)]
    while stack:
        job, prefix, is_last, depth = stack.pop()
        while len(path) > depth:
            on_path.discard(path.pop())
        branch = BRANCH_LAST if is_last else BRANCH_MID
        yield f"{prefix}{branch}{job_label(job, target)}"
        child_prefix = prefix + (INDENT_LAST if is_last else INDENT_MID)
        if job in on_path:
            logger.debug("cycle through job %s", job)
            yield f"{child_prefix}{BRANCH_LAST}{CYCLE_MARKER}"
            continue
        path.append(job)
        on_path.add(job)
        children = []
        for child in graph.lookup(job).sorted_post_jobs():
            if keep(child):
                children.append(child)
            else:
                logger.debug("pruned job %s below job %s", child, job)
        stack.extend(
            _Frame(child, child_prefix, i == len(children) - 1, depth + 1)
            for i, child in reversed(list(enumerate(children)))
        )


def render_tree(graph: Graph, target: Job, memoize: bool = True) -> list[str]:
    """
    Render one tree per root of ``target``.

    Raises ``JobNotFoundError`` for an unknown target and ``NoRootFoundError``
    when no root leads to it.
    """
    graph.lookup(target)
    roots = find_roots(graph, target)
    if not roots:
        raise NoRootFoundError(target)
    keep: typing.Callable[[Job], bool]
    if memoize:
        keep = ReachabilityOracle(graph, target)
    else:
        keep = functools.partial(_leads_to_target, graph, target)
    lines: list[str] = []
    for root in roots:
        lines.extend(iter_tree_lines(graph, root, target, keep))
    return lines


def _leads_to_target(graph: Graph, target: Job, source: Job) -> bool:
    return leads_to(graph, source, target)


def format_report(target: Job, lines: typing.Iterable[str]) -> str:
    """Put the report header above ``lines``."""
    header = [
        f"Reverse dependency tree starting from root for job: {target}",
        "(-> indicates execution order)",
    ]
    return "\n".join([*header, *lines]) + "\n"


def format_reverse_dependency_tree(
    graph: Graph, target: Job, memoize: bool = True
) -> str:
    """Produce the full report for ``target``, errors included."""
    try:
        lines = render_tree(graph, target, memoize=memoize)
    except JobNotFoundError as err:
        return f"{err}\n"
    except NoRootFoundError as err:
        lines = [str(err)]
    return format_report(target, lines)


def print_reverse_job_dependency_tree(
    graph: Graph,
    target: Job,
    console: rich.console.Console | None = None,
    memoize: bool = True,
) -> None:
    """Print the report for ``target`` exactly as formatted."""
    console = console or rich.console.Console()
    console.print(
        format_reverse_dependency_tree(graph, target, memoize=memoize),
        end="",
        markup=False,
        emoji=False,
        highlight=False,
        soft_wrap=True,
    )
