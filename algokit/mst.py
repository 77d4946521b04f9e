"""Minimum and maximum spanning trees."""

import heapq
from dataclasses import dataclass

from algokit.dsu import DSU


@dataclass(frozen=True)
class Edge:
    """Undirected weighted edge between vertices ``u`` and ``v``."""

    u: int
    v: int
    weight: int


def _as_edge(edge, n):
    if not isinstance(edge, Edge):
        edge = Edge(*edge)
    if not (0 <= edge.u < n and 0 <= edge.v < n):
        raise ValueError(f"edge {edge} has a vertex outside 0..{n - 1}")
    return edge


def kruskal(n, edges):
    """Minimum spanning forest of vertices 0..n-1.

    Returns the total weight and the chosen edges in the order taken.
    """
    ordered = sorted((_as_edge(e, n) for e in edges), key=lambda e: e.weight)
    dsu = DSU(n)
    cost = 0
    chosen = []
    for edge in ordered:
        if not dsu.same(edge.u + 1, edge.v + 1):
            dsu.union(edge.u + 1, edge.v + 1)
            cost += edge.weight
            chosen.append(edge)
    return cost, chosen


def prim(n, edges):
    """Weight of the minimum spanning tree of the component holding vertex 0."""
    if n == 0:
        return 0
    adjacency = [[] for _ in range(n)]
    for edge in edges:
        edge = _as_edge(edge, n)
        adjacency[edge.u].append((edge.v, edge.weight))
        adjacency[edge.v].append((edge.u, edge.weight))
    visited = [False] * n
    heap = [(0, 0)]
    total = 0
    while heap:
        weight, u = heapq.heappop(heap)
        if visited[u]:
            continue
        visited[u] = True
        total += weight
        for v, w in adjacency[u]:
            if not visited[v]:
                heapq.heappush(heap, (w, v))
    return total


def max_power_spanning_tree(values, modulus):
    """Maximum spanning tree where edge (i, j) weighs (a_i^a_j + a_j^a_i) mod m."""
    values = list(values)
    if modulus < 1:
        raise ValueError("modulus must be positive")
    n = len(values)
    weighted = [
        ((pow(values[i], values[j], modulus) + pow(values[j], values[i], modulus)) % modulus, i, j)
        for i in range(n)
        for j in range(i + 1, n)
    ]
    weighted.sort(reverse=True)
    dsu = DSU(n)
    total = 0
    for weight, i, j in weighted:
        if dsu.union(i + 1, j + 1) is not None:
            total += weight
    return total