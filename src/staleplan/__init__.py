"""staleplan: rebuild stale files from a dependency graph of scripts and data."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("staleplan")
except PackageNotFoundError:
    __version__ = "dev"

from staleplan.config import PlannerConfig
from staleplan.kernel.errors import (
    AmbiguousMatchError,
    ChangeTimeNotSetError,
    CyclicGraphError,
    DuplicateNodeError,
    InvalidAttributeError,
    NoProgressError,
    PlanError,
    PlanFileError,
    ReservedAttributeError,
    UnknownAttributeError,
    UnknownNodeError,
)
from staleplan.kernel.plan import (
    Plan,
    add_node,
    add_target,
    attribute_names,
    find_index,
    get_attribute,
    has_node,
    set_attribute,
    start_planning,
)
from staleplan.kernel.scheduler import RunResult, run_dependencies, run_plan
from staleplan.kernel.staleness import get_schedule, is_up_to_date, refresh_change_times, stale_targets

__all__ = [
    "__version__",
    "Plan",
    "PlannerConfig",
    "RunResult",
    "start_planning",
    "add_node",
    "add_target",
    "has_node",
    "get_attribute",
    "set_attribute",
    "attribute_names",
    "find_index",
    "refresh_change_times",
    "is_up_to_date",
    "stale_targets",
    "get_schedule",
    "run_dependencies",
    "run_plan",
    "PlanError",
    "DuplicateNodeError",
    "UnknownNodeError",
    "UnknownAttributeError",
    "ChangeTimeNotSetError",
    "InvalidAttributeError",
    "ReservedAttributeError",
    "AmbiguousMatchError",
    "CyclicGraphError",
    "NoProgressError",
    "PlanFileError",
]
