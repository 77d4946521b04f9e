import heapq
import random

import pytest

from algokit.shortest_paths import min_path_weight, switch_dungeon_distance, zero_one_bfs


def _dijkstra(n, adjacency, source):
    dist = [None] * n
    heap = [(0, source)]
    while heap:
        d, v = heapq.heappop(heap)
        if dist[v] is not None:
            continue
        dist[v] = d
        for u, w in adjacency[v]:
            if dist[u] is None:
                heapq.heappush(heap, (d + w, u))
    return dist


def test_zero_one_bfs_matches_dijkstra():
    rng = random.Random(8)
    for _ in range(30):
        n = rng.randint(1, 15)
        adjacency = [[] for _ in range(n)]
        for _ in range(rng.randint(0, 40)):
            u, v = rng.randrange(n), rng.randrange(n)
            adjacency[u].append((v, rng.randint(0, 1)))
        source = rng.randrange(n)
        assert zero_one_bfs(n, adjacency, source) == _dijkstra(n, adjacency, source)


def test_zero_one_bfs_rejects_heavy_edge():
    with pytest.raises(ValueError):
        zero_one_bfs(2, [[(1, 2)], []], 0)


def test_zero_one_bfs_unreachable_is_none():
    assert zero_one_bfs(2, [[], []], 0) == [0, None]


def test_switch_dungeon_sample():
    edges = [(1, 3, 0), (2, 3, 1), (5, 4, 1), (2, 1, 1), (1, 4, 0)]
    assert switch_dungeon_distance(5, edges, [3, 4]) == 5


def test_switch_dungeon_needs_switch():
    assert switch_dungeon_distance(2, [(1, 2, 0)], []) is None
    assert switch_dungeon_distance(2, [(1, 2, 0)], [1]) == 1


def test_min_path_weight_nonnegative_is_lightest_edge():
    assert min_path_weight(3, [(1, 2, 5), (2, 3, 3)]) == 3


def test_min_path_weight_negative_cycle():
    assert min_path_weight(3, [(1, 2, -1), (2, 3, -1), (3, 1, -1)]) == float("-inf")


def test_min_path_weight_matches_floyd():
    rng = random.Random(12)
    for _ in range(30):
        n = rng.randint(2, 8)
        edges = []
        for _ in range(rng.randint(1, 15)):
            u = rng.randint(1, n - 1)
            v = rng.randint(u + 1, n)
            edges.append((u, v, rng.randint(-10, 10)))
        inf = float("inf")
        d = [[inf] * (n + 1) for _ in range(n + 1)]
        for u, v, w in edges:
            d[u][v] = min(d[u][v], w)
        for k in range(1, n + 1):
            for i in range(1, n + 1):
                for j in range(1, n + 1):
                    if d[i][k] + d[k][j] < d[i][j]:
                        d[i][j] = d[i][k] + d[k][j]
        expected = min(d[i][j] for i in range(1, n + 1) for j in range(1, n + 1))
        if expected < 0:
            assert min_path_weight(n, edges) == expected
        else:
            assert min_path_weight(n, edges) == min(w for _, _, w in edges)


def test_min_path_weight_requires_edges():
    with pytest.raises(ValueError):
        min_path_weight(3, [])