import random

import pytest

from algokit.tree_paths import best_root_profit, tree_diameter


def _random_tree(seed, n):
    rng = random.Random(seed)
    return [(rng.randint(1, i - 1), i) for i in range(2, n + 1)]


@pytest.mark.parametrize("n", [1, 2, 7])
def test_path_diameter(n):
    edges = [(i, i + 1) for i in range(1, n)]
    assert tree_diameter(n, edges) == n - 1


def test_star_diameter():
    assert tree_diameter(5, [(1, 2), (1, 3), (1, 4), (1, 5)]) == 2


@pytest.mark.parametrize("seed", range(4))
def test_diameter_independent_of_root(seed):
    n = 12
    edges = _random_tree(seed, n)
    values = {tree_diameter(n, edges, root) for root in range(1, n + 1)}
    assert len(values) == 1


@pytest.mark.parametrize("seed", range(4))
def test_free_shift_gives_diameter(seed):
    n = 10
    edges = _random_tree(seed, n)
    assert best_root_profit(n, edges, 3, 0) == 3 * tree_diameter(n, edges)


@pytest.mark.parametrize("n", [2, 5])
def test_costly_shift_keeps_first_root(n):
    edges = [(i, i + 1) for i in range(1, n)]
    k = 4
    assert best_root_profit(n, edges, k, 10**6) == (n - 1) * k


def test_worked_example():
    assert best_root_profit(3, [(2, 1), (3, 1)], 2, 3) == 2


def test_profit_never_negative():
    assert best_root_profit(3, [(1, 2), (2, 3)], 0, 5) == 0


def test_wrong_edge_count():
    with pytest.raises(ValueError):
        tree_diameter(3, [(1, 2)])


def test_disconnected_edges():
    with pytest.raises(ValueError):
        tree_diameter(4, [(1, 2), (2, 3), (3, 1)])


def test_bad_root():
    with pytest.raises(ValueError):
        tree_diameter(2, [(1, 2)], root=3)