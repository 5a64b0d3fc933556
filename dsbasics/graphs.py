"""Traversal, shortest paths and minimum spanning trees on small graphs.

Graphs given as matrices use ``matrix[u][v]`` for the edge from ``u`` to
``v``; a zero entry means no edge.
"""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Hashable, Iterable, Sequence
from dataclasses import dataclass
from operator import attrgetter
from typing import Union

Matrix = Sequence[Sequence[int]]


@dataclass(frozen=True)
class Edge:
    """Weighted edge between ``u`` and ``v``."""

    u: Hashable
    v: Hashable
    weight: int


def _order(matrix: Matrix) -> int:
    n = len(matrix)
    if any(len(row) != n for row in matrix):
        raise ValueError("adjacency matrix must be square")
    return n


def _check_vertex(vertex: int, n: int) -> None:
    if not 0 <= vertex < n:
        raise IndexError(f"starting vertex must be in 0 to {n - 1}")


def bfs(adjacency: Matrix, start: int) -> list[int]:
    """Return vertices in breadth-first order from ``start``.

    Only entries equal to 1 count as edges.
    """
    n = _order(adjacency)
    _check_vertex(start, n)
    visited = [False] * n
    visited[start] = True
    queue = deque([start])
    order = []
    while queue:
        current = queue.popleft()
        order.append(current)
        for neighbour, entry in enumerate(adjacency[current]):
            if entry == 1 and not visited[neighbour]:
                visited[neighbour] = True
                queue.append(neighbour)
    return order


def dfs(adjacency: Matrix, start: int) -> list[int]:
    """Return vertices in depth-first order from ``start``.

    Neighbours are explored in ascending index order; only entries equal to
    1 count as edges.
    """
    n = _order(adjacency)
    _check_vertex(start, n)
    visited = [False] * n
    visited[start] = True
    order = [start]
    pending = [(start, iter(range(n)))]
    while pending:
        vertex, neighbours = pending[-1]
        for neighbour in neighbours:
            if adjacency[vertex][neighbour] == 1 and not visited[neighbour]:
                visited[neighbour] = True
                order.append(neighbour)
                pending.append((neighbour, iter(range(n))))
                break
        else:
            pending.pop()
    return order


def dijkstra(graph: Matrix, start: int) -> list[float]:
    """Return shortest distances from ``start``; ``math.inf`` if unreachable."""
    n = _order(graph)
    _check_vertex(start, n)
    distance: list[float] = [math.inf] * n
    distance[start] = 0
    visited = [False] * n
    for _ in range(n - 1):
        u = min((i for i in range(n) if not visited[i]), key=distance.__getitem__)
        visited[u] = True
        if distance[u] == math.inf:
            break
        for v, weight in enumerate(graph[u]):
            if not visited[v] and weight and distance[u] + weight < distance[v]:
                distance[v] = distance[u] + weight
    return distance


def prim_mst(graph: Matrix) -> list[Edge]:
    """Return the edges of a minimum spanning tree grown from vertex 0.

    Edge ``i`` joins vertex ``i`` (for ``i >= 1``) to its parent. Raises
    ValueError when the graph is not connected.
    """
    n = _order(graph)
    if n == 0:
        return []
    key: list[float] = [math.inf] * n
    parent: list[int | None] = [None] * n
    in_tree = [False] * n
    key[0] = 0
    for _ in range(n - 1):
        candidates = [v for v in range(n) if not in_tree[v] and key[v] < math.inf]
        if not candidates:
            raise ValueError("graph is not connected")
        u = min(candidates, key=key.__getitem__)
        in_tree[u] = True
        for v, weight in enumerate(graph[u]):
            if weight and not in_tree[v] and weight < key[v]:
                parent[v] = u
                key[v] = weight
    edges = []
    for v in range(1, n):
        u = parent[v]
        if u is None:
            raise ValueError("graph is not connected")
        edges.append(Edge(u, v, graph[v][u]))
    return edges


def _find(parent: dict[Hashable, Hashable], vertex: Hashable) -> Hashable:
    root = vertex
    while parent.get(root, root) != root:
        root = parent[root]
    while vertex != root:
        parent[vertex], vertex = root, parent.get(vertex, vertex)
    return root


def kruskal_mst(
    vertex_count: int,
    edges: Iterable[Union[Edge, tuple[Hashable, Hashable, int]]],
) -> list[Edge]:
    """Return MST edges chosen by Kruskal's algorithm.

    Edges are considered in ascending weight, ties in their given order;
    selection stops after ``vertex_count - 1`` edges.
    """
    candidates = sorted(
        (edge if isinstance(edge, Edge) else Edge(*edge) for edge in edges),
        key=attrgetter("weight"),
    )
    parent: dict[Hashable, Hashable] = {}
    chosen: list[Edge] = []
    for edge in candidates:
        if len(chosen) >= vertex_count - 1:
            break
        u_root = _find(parent, edge.u)
        v_root = _find(parent, edge.v)
        if u_root != v_root:
            parent[v_root] = u_root
            chosen.append(edge)
    return chosen