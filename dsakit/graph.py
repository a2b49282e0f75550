"""Undirected graphs with breadth-first and depth-first traversal, and Prim's tree."""

from __future__ import annotations

from collections import deque
from collections.abc import Hashable
from dataclasses import dataclass

_NONE = object()


def _lookup(adjacency: dict, label: Hashable) -> list:
    try:
        return adjacency[label]
    except KeyError:
        raise KeyError(f"no vertex {label!r}") from None


class Graph:
    """Undirected graph held as adjacency lists in vertex insertion order.

    New arcs go to the end of a vertex's list, or to the front when
    ``prepend_arcs`` is set; this decides the order in which neighbours are
    visited by the traversals.
    """

    def __init__(self, prepend_arcs: bool = False) -> None:
        self.prepend_arcs = prepend_arcs
        self._adjacency: dict[Hashable, list[Hashable]] = {}

    def add_vertex(self, label: Hashable) -> None:
        """Add a vertex; raise ValueError if the label is taken."""
        if label in self._adjacency:
            raise ValueError(f"vertex {label!r} already exists")
        self._adjacency[label] = []

    def _attach(self, arcs: list[Hashable], label: Hashable) -> None:
        if self.prepend_arcs:
            arcs.insert(0, label)
        else:
            arcs.append(label)

    def add_edge(self, first: Hashable, second: Hashable) -> None:
        """Join two existing vertices; raise KeyError if either is missing."""
        first_arcs = _lookup(self._adjacency, first)
        second_arcs = _lookup(self._adjacency, second)
        self._attach(first_arcs, second)
        self._attach(second_arcs, first)

    def neighbours(self, label: Hashable) -> list[Hashable]:
        """Neighbours of ``label`` in arc order."""
        return list(_lookup(self._adjacency, label))

    def format_adjacency(self) -> str:
        """Render the adjacency lists as text."""
        lines = []
        for label, arcs in self._adjacency.items():
            row = f"{label} <---> " + "".join(f"{n} ---> " for n in arcs) + "NULL"
            lines.extend([row, "|", "|"])
        lines.append("NULL")
        return "\n".join(lines) + "\n"

    def breadth_first(self) -> list[Hashable]:
        """Visit every vertex breadth first, restarting at the first unvisited one."""
        order: list[Hashable] = []
        seen: set[Hashable] = set()
        for start in self._adjacency:
            if start in seen:
                continue
            seen.add(start)
            queue = deque([start])
            while queue:
                vertex = queue.popleft()
                order.append(vertex)
                for neighbour in self._adjacency[vertex]:
                    if neighbour not in seen:
                        seen.add(neighbour)
                        queue.append(neighbour)
        return order

    def depth_first(self) -> list[Hashable]:
        """Visit every vertex depth first, restarting at the first unvisited one."""
        order: list[Hashable] = []
        visited: set[Hashable] = set()
        for start in self._adjacency:
            if start in visited:
                continue
            visited.add(start)
            order.append(start)
            stack = [start]
            while stack:
                following = next(
                    (n for n in self._adjacency[stack[-1]] if n not in visited), _NONE
                )
                if following is _NONE:
                    stack.pop()
                    continue
                visited.add(following)
                order.append(following)
                stack.append(following)
        return order

    def __len__(self) -> int:
        return len(self._adjacency)


@dataclass(frozen=True)
class WeightedEdge:
    """An edge of a spanning tree, from the tree side to the vertex it adds."""

    source: Hashable
    target: Hashable
    weight: float


@dataclass(frozen=True)
class SpanningTree:
    """Edges of a spanning tree in the order they were chosen, and their total."""

    edges: tuple[WeightedEdge, ...]
    cost: float


class WeightedGraph:
    """Undirected graph with weighted edges."""

    def __init__(self) -> None:
        self._adjacency: dict[Hashable, list[tuple[Hashable, float]]] = {}

    def add_vertex(self, label: Hashable) -> None:
        """Add a vertex; raise ValueError if the label is taken."""
        if label in self._adjacency:
            raise ValueError(f"vertex {label!r} already exists")
        self._adjacency[label] = []

    def add_edge(self, first: Hashable, second: Hashable, weight: float) -> None:
        """Join two existing vertices; raise KeyError if either is missing."""
        first_arcs = _lookup(self._adjacency, first)
        second_arcs = _lookup(self._adjacency, second)
        second_arcs.append((first, weight))
        first_arcs.append((second, weight))

    def format_adjacency(self) -> str:
        """Render the adjacency lists as text."""
        return "".join(
            f"{label} --- " + "".join(f"{n} --> " for n, _ in arcs) + "NULL\n"
            for label, arcs in self._adjacency.items()
        )

    def prim_mst(self) -> SpanningTree:
        """Grow a minimum spanning tree from the first vertex with Prim's method.

        Only the component of the first vertex is spanned. Among equal
        weights the arc met first, in vertex then arc order, is taken.
        """
        if not self._adjacency:
            raise ValueError("graph is empty")
        in_tree = {next(iter(self._adjacency))}
        edges: list[WeightedEdge] = []
        while True:
            best: WeightedEdge | None = None
            for vertex, arcs in self._adjacency.items():
                if vertex not in in_tree:
                    continue
                for neighbour, weight in arcs:
                    if neighbour not in in_tree and (best is None or weight < best.weight):
                        best = WeightedEdge(vertex, neighbour, weight)
            if best is None:
                break
            in_tree.add(best.target)
            edges.append(best)
        return SpanningTree(tuple(edges), sum(edge.weight for edge in edges))

    def __len__(self) -> int:
        return len(self._adjacency)