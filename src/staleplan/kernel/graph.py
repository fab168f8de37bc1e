"""Directed dependency graph over node indices.

An edge u -> v means "v depends on u". Vertices are the integers
1..vertex_count, matching node indices in the NodeTable.
"""

from typing import Callable, Dict, List, Set, Tuple

from .errors import CyclicGraphError, UnknownNodeError


class DependencyGraph:
    """Adjacency sets in both directions, no weights, no duplicate edges."""

    def __init__(self):
        self.vertex_count = 0
        self.edges: Dict[int, Set[int]] = {}  # node -> set of dependencies
        self.reverse_edges: Dict[int, Set[int]] = {}  # dependency -> set of dependents

    def add_vertex(self) -> int:
        self.vertex_count += 1
        self.edges[self.vertex_count] = set()
        self.reverse_edges[self.vertex_count] = set()
        return self.vertex_count

    def has_vertex(self, v: int) -> bool:
        return v in self.edges

    def has_edge(self, u: int, v: int) -> bool:
        return u in self.reverse_edges and v in self.reverse_edges[u]

    def add_edge(self, u: int, v: int) -> bool:
        """Add u -> v. Returns False if the edge was already present."""
        for endpoint in (u, v):
            if not self.has_vertex(endpoint):
                raise UnknownNodeError(endpoint)
        if self.has_edge(u, v):
            return False
        self.reverse_edges[u].add(v)
        self.edges[v].add(u)
        return True

    @property
    def edge_count(self) -> int:
        return sum(len(deps) for deps in self.edges.values())

    def edge_list(self) -> List[Tuple[int, int]]:
        return sorted((u, v) for v, deps in self.edges.items() for u in deps)

    def get_dependencies(self, node: int) -> List[int]:
        """Direct dependencies (in-neighbours), ascending."""
        if not self.has_vertex(node):
            raise UnknownNodeError(node)
        return sorted(self.edges[node])

    def get_dependents(self, node: int) -> List[int]:
        """Direct dependents (out-neighbours), ascending."""
        if not self.has_vertex(node):
            raise UnknownNodeError(node)
        return sorted(self.reverse_edges[node])

    def topological_order(self, label: Callable[[int], str] = str) -> List[int]:
        """Order vertices so every dependency precedes its dependents.

        Depth-first search from each unvisited vertex in index order,
        following dependents in index order; the result is the reverse of
        the finishing order. Raises CyclicGraphError (cycle rendered with
        ``label``) when a back edge is found.
        """
        WHITE = 0  # Unvisited
        GRAY = 1   # On the current DFS path
        BLACK = 2  # Finished

        color = {v: WHITE for v in self.edges}
        finished: List[int] = []

        for root in range(1, self.vertex_count + 1):
            if color[root] != WHITE:
                continue
            color[root] = GRAY
            path = [root]
            stack = [iter(self.get_dependents(root))]
            while stack:
                advanced = False
                for dependent in stack[-1]:
                    if color[dependent] == WHITE:
                        color[dependent] = GRAY
                        path.append(dependent)
                        stack.append(iter(self.get_dependents(dependent)))
                        advanced = True
                        break
                    if color[dependent] == GRAY:
                        cycle = path[path.index(dependent):]
                        raise CyclicGraphError([label(v) for v in cycle])
                if not advanced:
                    stack.pop()
                    done = path.pop()
                    color[done] = BLACK
                    finished.append(done)

        finished.reverse()
        return finished
