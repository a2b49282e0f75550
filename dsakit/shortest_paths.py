"""Single-source (Bellman-Ford) and all-pairs (Floyd-Warshall) shortest paths."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any


class NegativeCycleError(ValueError):
    """Raised when a negative-weight cycle is reachable from the source."""


@dataclass(frozen=True)
class Edge:
    """Directed weighted edge between zero-based vertex numbers."""

    source: int
    target: int
    weight: float


@dataclass
class ShortestPaths:
    """Distances and predecessors; ``math.inf`` and None mark what is unreachable."""

    distances: list[Any]
    predecessors: list[Any]


def bellman_ford(
    vertex_count: int, edges: Iterable[Edge | tuple[int, int, float]], source: int = 0
) -> ShortestPaths:
    """Shortest distances from ``source`` over vertices ``0..vertex_count-1``."""
    if vertex_count < 1:
        raise ValueError("vertex_count must be positive")
    if not 0 <= source < vertex_count:
        raise ValueError(f"source {source} out of range")
    edge_list = [edge if isinstance(edge, Edge) else Edge(*edge) for edge in edges]
    for edge in edge_list:
        if not (0 <= edge.source < vertex_count and 0 <= edge.target < vertex_count):
            raise ValueError(f"edge {edge} refers to a missing vertex")
    distances: list[float] = [math.inf] * vertex_count
    predecessors: list[int | None] = [None] * vertex_count
    distances[source] = 0
    for _ in range(vertex_count - 1):
        changed = False
        for edge in edge_list:
            candidate = distances[edge.source] + edge.weight
            if distances[edge.target] > candidate:
                distances[edge.target] = candidate
                predecessors[edge.target] = edge.source
                changed = True
        if not changed:
            break
    for edge in edge_list:
        if distances[edge.target] > distances[edge.source] + edge.weight:
            raise NegativeCycleError("graph has a negative-weight cycle")
    return ShortestPaths(distances, predecessors)


def floyd_warshall(weights: Sequence[Sequence[float]]) -> ShortestPaths:
    """All-pairs shortest paths from a square weight matrix.

    Absent edges are ``math.inf``. The result holds a distance matrix and a
    predecessor matrix whose entry ``[i][j]`` is the vertex before ``j`` on
    the path from ``i``, or None on the diagonal and where there is no path.
    """
    size = len(weights)
    if any(len(row) != size for row in weights):
        raise ValueError("weight matrix must be square")
    distances = [list(row) for row in weights]
    predecessors: list[list[int | None]] = [
        [None if i == j or math.isinf(w) else i for j, w in enumerate(row)]
        for i, row in enumerate(weights)
    ]
    for k in range(size):
        for i in range(size):
            if predecessors[i][k] is None:
                continue
            for j in range(size):
                if predecessors[k][j] is None:
                    continue
                through = distances[i][k] + distances[k][j]
                if distances[i][j] > through:
                    distances[i][j] = through
                    predecessors[i][j] = predecessors[k][j]
    return ShortestPaths(distances, predecessors)