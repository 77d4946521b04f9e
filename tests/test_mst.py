import itertools
import random

import pytest

from algokit.dsu import DSU
from algokit.mst import Edge, kruskal, max_power_spanning_tree, prim


def _random_connected(rng, n, extra):
    edges = [(i, rng.randrange(i), rng.randint(1, 20)) for i in range(1, n)]
    for _ in range(extra):
        u, v = rng.sample(range(n), 2)
        edges.append((u, v, rng.randint(1, 20)))
    return edges


def _is_spanning_tree(n, edges):
    dsu = DSU(n)
    for u, v, _ in edges:
        if dsu.union(u + 1, v + 1) is None:
            return False
    return dsu.count() == 1


def test_kruskal_triangle():
    cost, chosen = kruskal(3, [(0, 1, 1), (1, 2, 2), (0, 2, 3)])
    assert cost == 3
    assert [e.weight for e in chosen] == [1, 2]


def test_kruskal_accepts_edge_objects():
    cost, chosen = kruskal(2, [Edge(0, 1, 7)])
    assert cost == 7
    assert chosen == [Edge(0, 1, 7)]


def test_kruskal_matches_brute_force():
    rng = random.Random(1)
    for _ in range(20):
        n = 5
        edges = _random_connected(rng, n, 4)
        best = min(
            sum(w for _, _, w in subset)
            for subset in itertools.combinations(edges, n - 1)
            if _is_spanning_tree(n, subset)
        )
        cost, chosen = kruskal(n, edges)
        assert cost == best
        assert len(chosen) == n - 1


def test_prim_agrees_with_kruskal():
    rng = random.Random(2)
    for _ in range(30):
        n = rng.randint(2, 12)
        edges = _random_connected(rng, n, rng.randint(0, 15))
        assert prim(n, edges) == kruskal(n, edges)[0]


def test_prim_covers_only_component_of_zero():
    assert prim(4, [(0, 1, 5), (2, 3, 1)]) == 5


def test_kruskal_rejects_bad_vertex():
    with pytest.raises(ValueError):
        kruskal(2, [(0, 2, 1)])


def test_max_power_spanning_tree_matches_brute_force():
    rng = random.Random(4)
    for _ in range(15):
        n = rng.randint(2, 5)
        m = rng.randint(2, 30)
        values = [rng.randint(1, 9) for _ in range(n)]
        edges = [
            (i, j, (pow(values[i], values[j], m) + pow(values[j], values[i], m)) % m)
            for i in range(n)
            for j in range(i + 1, n)
        ]
        best = max(
            sum(w for _, _, w in subset)
            for subset in itertools.combinations(edges, n - 1)
            if _is_spanning_tree(n, subset)
        )
        assert max_power_spanning_tree(values, m) == best


def test_max_power_spanning_tree_rejects_bad_modulus():
    with pytest.raises(ValueError):
        max_power_spanning_tree([1, 2], 0)