"""Staleness analysis over the plan's topological order.

Every call recomputes from scratch: O(nodes + edges) for the ordering and
one timestamp lookup per node. Fine for project-sized graphs, and the
main cost of a large plan.
"""

from typing import Callable, List, Tuple

from .._internal.io.filesystem import last_modified as filesystem_last_modified
from .errors import ChangeTimeNotSetError
from .plan import Plan

TimestampSource = Callable[[str], float]


def refresh_change_times(plan: Plan, last_modified: TimestampSource = filesystem_last_modified) -> None:
    """Re-read the change time of every node from ``last_modified``.

    Errors from the timestamp source (e.g. FileNotFoundError) propagate
    and leave the table unchanged.
    """
    change_times = [last_modified(filename) for filename in plan.filenames()]
    plan._table.set_change_times(change_times)


def is_up_to_date(index: int, plan: Plan) -> bool:
    """True unless some direct dependency is strictly newer than the node.

    Nodes without dependencies are always up to date. Uses the change
    times from the last refresh; ChangeTimeNotSetError if the node or a
    dependency was added since.
    """
    dependencies = plan.dependencies(index)
    if not dependencies:
        return True
    change_time = _change_time(plan, index)
    return not any(change_time < _change_time(plan, dep) for dep in dependencies)


def _change_time(plan: Plan, index: int) -> float:
    change_time = plan._table.get(index, "change_time")
    if change_time is None:
        raise ChangeTimeNotSetError(plan.filename(index))
    return change_time


def stale_targets(
    plan: Plan, last_modified: TimestampSource = filesystem_last_modified
) -> Tuple[List[int], List[bool]]:
    """Topological order of all nodes and a stale flag for each.

    A node is stale when a direct dependency is newer than it, or when a
    direct dependency is itself stale. Raises CyclicGraphError on a cycle.
    """
    order = plan.topological_order()
    refresh_change_times(plan, last_modified)
    stale = {}
    for index in order:
        stale[index] = not is_up_to_date(index, plan) or any(
            stale[dep] for dep in plan.dependencies(index)
        )
    return order, [stale[index] for index in order]


def get_schedule(plan: Plan, last_modified: TimestampSource = filesystem_last_modified) -> List[int]:
    """Stale node indices in topological order."""
    order, flags = stale_targets(plan, last_modified)
    return [index for index, flag in zip(order, flags) if flag]
