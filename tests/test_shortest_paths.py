import math

import pytest
from hypothesis import given, strategies as st

from dsakit.shortest_paths import (
    Edge,
    NegativeCycleError,
    ShortestPaths,
    bellman_ford,
    floyd_warshall,
)

INF = math.inf


@st.composite
def weighted_digraphs(draw):
    n = draw(st.integers(1, 6))
    edges = draw(
        st.lists(
            st.tuples(st.integers(0, n - 1), st.integers(0, n - 1), st.integers(0, 20)),
            max_size=15,
        )
    )
    return n, edges


def matrix_of(n, edges):
    weights = [[0 if i == j else INF for j in range(n)] for i in range(n)]
    for u, v, w in edges:
        weights[u][v] = min(weights[u][v], w)
    return weights


def test_bellman_ford_negative_edge_without_cycle():
    result = bellman_ford(3, [Edge(0, 1, 4), Edge(0, 2, 5), Edge(2, 1, -3)])
    assert result.distances[1] == 2
    assert result.predecessors[1] == 2
    assert result.distances[0] == 0


def test_bellman_ford_unreachable_vertex():
    result = bellman_ford(3, [(0, 1, 7)])
    assert result.distances[2] == INF
    assert result.predecessors[2] is None
    assert result.predecessors[1] == 0


def test_bellman_ford_negative_cycle_raises():
    with pytest.raises(NegativeCycleError):
        bellman_ford(2, [(0, 1, 1), (1, 0, -2)])


def test_bellman_ford_rejects_bad_input():
    with pytest.raises(ValueError):
        bellman_ford(2, [(0, 5, 1)])
    with pytest.raises(ValueError):
        bellman_ford(2, [], source=3)
    with pytest.raises(ValueError):
        bellman_ford(0, [])


@given(data=weighted_digraphs())
def test_bellman_ford_invariants(data):
    n, edges = data
    result = bellman_ford(n, edges)
    d = result.distances
    assert d[0] == 0
    assert result.predecessors[0] is None
    for u, v, w in edges:
        assert d[v] <= d[u] + w
    for v, p in enumerate(result.predecessors):
        if p is not None:
            assert any(a == p and b == v and d[v] == d[p] + w for a, b, w in edges)


def test_floyd_warshall_example():
    result = floyd_warshall([[0, 4, 11], [6, 0, 2], [3, INF, 0]])
    assert result.distances == [[0, 4, 6], [5, 0, 2], [3, 7, 0]]
    assert [result.predecessors[i][i] for i in range(3)] == [None, None, None]


def test_floyd_warshall_unreachable():
    result = floyd_warshall([[0, INF], [1, 0]])
    assert result == ShortestPaths([[0, INF], [1, 0]], [[None, None], [1, None]])


def test_floyd_warshall_rejects_non_square():
    with pytest.raises(ValueError):
        floyd_warshall([[0, 1], [1]])


@given(data=weighted_digraphs())
def test_floyd_warshall_invariants(data):
    n, edges = data
    weights = matrix_of(n, edges)
    result = floyd_warshall(weights)
    d, pi = result.distances, result.predecessors
    for i in range(n):
        for j in range(n):
            assert d[i][j] <= weights[i][j]
            for k in range(n):
                assert d[i][j] <= d[i][k] + d[k][j]
            p = pi[i][j]
            if p is not None:
                assert d[i][j] == d[i][p] + weights[p][j]


@given(data=weighted_digraphs())
def test_floyd_warshall_agrees_with_bellman_ford(data):
    n, edges = data
    matrix = floyd_warshall(matrix_of(n, edges)).distances
    for source in range(n):
        assert bellman_ford(n, edges, source).distances == matrix[source]