import random

import pytest

from algokit.fenwick import FenwickTree, FenwickTree2D


def _values(seed, n):
    rng = random.Random(seed)
    return [rng.randint(-50, 50) for _ in range(n)]


def test_range_sums_match_slices():
    values = _values(1, 30)
    tree = FenwickTree.from_values(values)
    for left in range(len(values)):
        for right in range(left, len(values)):
            assert tree.range_sum(left, right) == sum(values[left:right + 1])


def test_add_updates_prefix_sums():
    values = _values(2, 20)
    tree = FenwickTree.from_values(values)
    rng = random.Random(3)
    for _ in range(40):
        i = rng.randrange(len(values))
        delta = rng.randint(-9, 9)
        values[i] += delta
        tree.add(i, delta)
        j = rng.randrange(len(values))
        assert tree.prefix_sum(j) == sum(values[:j + 1])


def test_empty_prefix_is_zero():
    tree = FenwickTree.from_values([4, 5])
    assert tree.prefix_sum(-1) == 0
    assert len(tree) == 2


def test_fenwick_errors():
    tree = FenwickTree(3)
    with pytest.raises(IndexError):
        tree.add(3, 1)
    with pytest.raises(IndexError):
        tree.prefix_sum(3)
    with pytest.raises(ValueError):
        tree.range_sum(2, 1)


def test_2d_prefix_sums_match_grid():
    rng = random.Random(4)
    grid = [[rng.randint(-5, 5) for _ in range(7)] for _ in range(5)]
    tree = FenwickTree2D.from_grid(grid)
    assert tree.shape == (len(grid), len(grid[0]))
    for r in range(len(grid)):
        for c in range(len(grid[0])):
            expected = sum(sum(row[:c + 1]) for row in grid[:r + 1])
            assert tree.prefix_sum(r, c) == expected


def test_2d_add_and_bounds():
    tree = FenwickTree2D(3, 4)
    tree.add(1, 2, 7)
    assert tree.prefix_sum(2, 3) == 7
    assert tree.prefix_sum(0, 3) == 0
    assert tree.prefix_sum(-1, 3) == 0
    with pytest.raises(IndexError):
        tree.add(3, 0, 1)


def test_2d_ragged_grid_rejected():
    with pytest.raises(ValueError):
        FenwickTree2D.from_grid([[1, 2], [3]])
    with pytest.raises(ValueError):
        FenwickTree2D.from_grid([])