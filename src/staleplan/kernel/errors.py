"""Exceptions raised by the planning kernel."""

from typing import List, Optional


class PlanError(Exception):
    """Base exception for plan construction and analysis errors."""
    pass


class DuplicateNodeError(PlanError):
    """Raised when a node is added for a filename that is already tracked."""
    def __init__(self, filename: str):
        self.filename = filename
        super().__init__(f"Node already exists for filename: {filename}")


class UnknownNodeError(PlanError):
    """Raised when an index (or lookup value) does not match any node."""
    def __init__(self, index, detail: Optional[str] = None):
        self.index = index
        super().__init__(detail or f"No node with index {index}")


class UnknownAttributeError(PlanError):
    """Raised when an attribute name is not a column of the node table."""
    def __init__(self, name: str, detail: Optional[str] = None):
        self.name = name
        super().__init__(detail or f"Unknown node attribute: {name}")


class ChangeTimeNotSetError(UnknownAttributeError):
    """Raised when a staleness check reads a node whose change time was never refreshed."""
    def __init__(self, filename: str):
        self.filename = filename
        super().__init__(
            "change_time", f"Node {filename} has no change_time; refresh change times first"
        )


class InvalidAttributeError(PlanError, ValueError):
    """Raised when an attribute value fails validation."""
    def __init__(self, name: str, detail: str):
        self.name = name
        super().__init__(f"Invalid value for attribute '{name}': {detail}")


class ReservedAttributeError(PlanError):
    """Raised when a caller tries to overwrite index or filename."""
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Attribute '{name}' is reserved and cannot be set")


class AmbiguousMatchError(PlanError):
    """Raised when a reverse lookup matches more than one node."""
    def __init__(self, name: str, value, indices: List[int]):
        self.name = name
        self.value = value
        self.indices = indices
        super().__init__(f"{len(indices)} nodes have {name} == {value!r}: {indices}")


class CyclicGraphError(PlanError):
    """Raised when the dependency graph contains a cycle."""
    def __init__(self, cycle: List[str]):
        self.cycle = cycle
        cycle_str = " -> ".join(cycle) + f" -> {cycle[0]}"
        super().__init__(f"Cycle detected in dependency graph:\n  Cycle: {cycle_str}")


class NoProgressError(PlanError):
    """Raised when run_plan exceeds its configured iteration cap."""
    def __init__(self, iterations: int, stale: List[str]):
        self.iterations = iterations
        self.stale = stale
        super().__init__(
            f"Plan still stale after {iterations} iterations: {', '.join(stale)}"
        )


class PlanFileError(PlanError, ValueError):
    """Raised when a plan file cannot be read or fails validation."""
