"""Counting problems on graphs: moves, tours and labelled graphs."""

from itertools import accumulate
from math import comb

from algokit.dsu import DSU

MODULUS = 1_000_000_007


def moves_needed(n, edges):
    """Moves to bring every piece onto the diagonal.

    Each ``(a, b)`` on vertices 1..n is a piece at row a, column b. Pieces
    already on the diagonal need nothing, every other piece one move, and
    each cycle among them one extra move.
    """
    dsu = DSU(n)
    on_diagonal = 0
    cycles = 0
    edges = list(edges)
    for a, b in edges:
        if a == b:
            on_diagonal += 1
            continue
        if dsu.same(a, b):
            cycles += 1
        dsu.union(a, b)
    return len(edges) - on_diagonal + cycles


def min_tour_length(n, tour):
    """Shortest tour over islands 1..n in a ring after closing one bridge.

    ``tour`` lists the islands visited in order; the best bridge to close is
    chosen.
    """
    if n < 1:
        raise ValueError("there must be at least one island")
    stops = [island - 1 for island in tour]
    if any(not 0 <= s < n for s in stops):
        raise ValueError(f"tour visits an island outside 1..{n}")
    diff = [0] * (n + 1)

    def dist(start, end):
        return end - start if start <= end else end + n - start

    def add(start, end, amount):
        diff[start] += amount
        if start <= end:
            diff[end] -= amount
        else:
            diff[n] -= amount
            diff[0] += amount
            diff[end] -= amount

    for a, b in zip(stops, stops[1:]):
        add(a, b, dist(b, a))
        add(b, a, dist(a, b))
    return min(accumulate(diff[:n]))


def connected_graph_counts(limit):
    """Connected labelled graphs on n vertices, modulo 1e9+7, for n = 0..limit."""
    if limit < 0:
        raise ValueError("limit must be non-negative")
    all_graphs = [pow(2, m * (m - 1) // 2, MODULUS) for m in range(limit + 1)]
    counts = [0] * (limit + 1)
    for m in range(1, limit + 1):
        disconnected = sum(
            k * comb(m, k) % MODULUS * counts[k] % MODULUS * all_graphs[m - k]
            for k in range(1, m)
        ) % MODULUS
        counts[m] = (all_graphs[m] - disconnected * pow(m, -1, MODULUS)) % MODULUS
    return counts


def count_graphs_with_components(n, k):
    """Labelled graphs on n vertices with exactly k components, modulo 1e9+7."""
    if n < 0 or k < 0:
        raise ValueError("n and k must be non-negative")
    if k > n:
        return 0
    connected = connected_graph_counts(n)
    ways = [[0] * (k + 1) for _ in range(n + 1)]
    ways[0][0] = 1
    for m in range(1, n + 1):
        for j in range(1, min(m, k) + 1):
            ways[m][j] = sum(
                comb(m - 1, s - 1) % MODULUS * connected[s] % MODULUS * ways[m - s][j - 1]
                for s in range(1, m + 1)
            ) % MODULUS
    return ways[n][k]