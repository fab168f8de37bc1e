"""The Plan aggregate and the graph-building operations on it."""

from typing import Any, Iterable, List, Tuple

from .errors import PlanError
from .graph import DependencyGraph
from .node_table import NodeTable


class Plan:
    """Owns one DependencyGraph and one NodeTable.

    Vertex i of the graph and row i of the table always describe the same
    file. Mutate through the module-level functions, not the members.
    """

    def __init__(self):
        self._graph = DependencyGraph()
        self._table = NodeTable()

    @property
    def node_count(self) -> int:
        return len(self._table)

    @property
    def edge_count(self) -> int:
        return self._graph.edge_count

    def edges(self) -> List[Tuple[int, int]]:
        return self._graph.edge_list()

    def dependencies(self, index: int) -> List[int]:
        return self._graph.get_dependencies(index)

    def dependents(self, index: int) -> List[int]:
        return self._graph.get_dependents(index)

    def filename(self, index: int) -> str:
        return self._table.row(index).filename

    def filenames(self) -> List[str]:
        return [record.filename for record in self._table]

    def topological_order(self) -> List[int]:
        return self._graph.topological_order(label=self.filename)

    def __repr__(self) -> str:
        return f"Plan(nodes={self.node_count}, edges={self.edge_count})"


def start_planning() -> Plan:
    """Return an empty plan."""
    return Plan()


def has_node(plan: Plan, filename: str) -> bool:
    return filename in plan._table


def add_node(plan: Plan, filename: str, **attributes: Any) -> int:
    """Track ``filename`` as a new node and return its index.

    Extra keyword arguments become extension attributes of the node.
    Raises DuplicateNodeError if the filename is already tracked.
    """
    record = plan._table.append(filename, attributes)
    vertex = plan._graph.add_vertex()
    if vertex != record.index:
        raise PlanError(f"Graph vertex {vertex} does not match node index {record.index}")
    return record.index


def add_target(plan: Plan, outputs: Iterable[str], inputs: Iterable[str]) -> None:
    """Record that ``outputs`` are produced from ``inputs``.

    Missing files are added as nodes (inputs first), then an edge
    input -> output is added for every pair not already connected.
    Calling this twice with the same arguments changes nothing.
    """
    outputs = list(outputs)
    inputs = list(inputs)
    for filename in inputs + outputs:
        if not has_node(plan, filename):
            add_node(plan, filename)

    input_indices = [plan._table.index_of(f) for f in inputs]
    output_indices = [plan._table.index_of(f) for f in outputs]
    for i in input_indices:
        for o in output_indices:
            plan._graph.add_edge(i, o)


def get_attribute(index: int, plan: Plan, name: str) -> Any:
    """Value of attribute ``name`` on node ``index``.

    Raises UnknownNodeError for an invalid index and UnknownAttributeError
    when ``name`` is not a column of the table.
    """
    return plan._table.get(index, name)


def set_attribute(index: int, plan: Plan, name: str, value: Any) -> None:
    plan._table.set(index, name, value)


def attribute_names(plan: Plan) -> List[str]:
    return plan._table.columns


def find_index(value: Any, plan: Plan, name: str) -> int:
    """Index of the single node whose attribute ``name`` equals ``value``."""
    return plan._table.find(value, name)
