"""Travelling-salesman style dynamic programming over subsets."""

import math
from functools import lru_cache


def booster_tour(towns, chests):
    """Shortest time for a round trip from the origin visiting every town.

    Chests may be visited too; each one collected doubles the speed.
    """
    towns = [tuple(p) for p in towns]
    points = towns + [tuple(p) for p in chests]
    n = len(towns)
    total = len(points)
    if total == 0:
        return 0.0
    full = 1 << total
    inf = math.inf
    dist = [[math.hypot(ax - bx, ay - by) for bx, by in points] for ax, ay in points]
    home = [math.hypot(x, y) for x, y in points]
    dp = [[inf] * full for _ in range(total)]
    for i in range(total):
        dp[i][1 << i] = home[i]
    for subset in range(1, full):
        coef = 0.5 ** bin(subset >> n).count("1")
        for i in range(total):
            base = dp[i][subset]
            if not subset >> i & 1 or base == inf:
                continue
            for j in range(total):
                if subset >> j & 1:
                    continue
                target = subset | 1 << j
                value = base + dist[i][j] * coef
                if value < dp[j][target]:
                    dp[j][target] = value
    best = inf
    for subset in range((1 << n) - 1, full, 1 << n):
        coef = 0.5 ** bin(subset >> n).count("1")
        for i in range(total):
            best = min(best, dp[i][subset] + home[i] * coef)
    return best


def shortest_tour(start, points):
    """Length of the shortest Manhattan round trip from ``start`` through all points."""
    nodes = [tuple(start)] + [tuple(p) for p in points]
    n = len(nodes)
    dist = [[abs(ax - bx) + abs(ay - by) for bx, by in nodes] for ax, ay in nodes]
    full = (1 << n) - 1

    @lru_cache(maxsize=None)
    def tour(mask, u):
        if mask == full:
            return dist[u][0]
        return min(
            dist[u][v] + tour(mask | 1 << v, v) for v in range(n) if not mask >> v & 1
        )

    return tour(1, 0)