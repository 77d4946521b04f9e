import random

import pytest

from algokit.segment_tree import (
    IterativeSumTree,
    MaxSegmentTree,
    RangeAddMaxTree,
    SegmentTree,
)


def test_sum_tree_matches_slices_after_updates():
    rng = random.Random(31)
    values = [rng.randint(-20, 20) for _ in range(13)]
    tree = SegmentTree(values)
    for _ in range(30):
        i = rng.randrange(len(values))
        values[i] = rng.randint(-20, 20)
        tree.set(i, values[i])
        left = rng.randrange(len(values) + 1)
        right = rng.randrange(left, len(values) + 1)
        assert tree.query(left, right) == sum(values[left:right])
    assert tree[3] == values[3]


def test_order_preserved_for_non_commutative_combine():
    letters = list("segmenttree")
    tree = SegmentTree(letters, lambda a, b: a + b, "")
    for left in range(len(letters)):
        for right in range(left, len(letters) + 1):
            assert tree.query(left, right) == "".join(letters[left:right])


def test_segment_tree_bounds():
    tree = SegmentTree([1, 2, 3])
    with pytest.raises(IndexError):
        tree.set(3, 0)
    with pytest.raises(IndexError):
        tree.query(2, 1)


def test_find_first_at_least():
    rng = random.Random(32)
    values = [rng.randint(0, 50) for _ in range(11)]
    tree = MaxSegmentTree(values)
    for bound in range(-1, 53):
        expected = next((i for i, v in enumerate(values) if v >= bound), None)
        assert tree.find_first_at_least(bound) == expected
    tree.set(0, 99)
    assert tree.find_first_at_least(60) == 0
    assert tree.query(0, len(values)) == 99


def test_iterative_sum_worked_example():
    tree = IterativeSumTree([1, 2, 3])
    assert tree.query(1, 2) == 3
    tree.update(2, 10)
    assert tree.query(1, 3) == 14


def test_iterative_sum_errors():
    tree = IterativeSumTree([1, 2, 3])
    with pytest.raises(IndexError):
        tree.update(4, 1)
    with pytest.raises(ValueError):
        tree.query(3, 2)


def test_range_add_max_matches_naive():
    size = 23
    rng = random.Random(33)
    naive = [0] * size
    tree = RangeAddMaxTree(size)
    for _ in range(200):
        left = rng.randrange(size)
        right = rng.randrange(left + 1, size + 1)
        if rng.random() < 0.5:
            value = rng.randint(-10, 30)
            tree.increment(left, right, value)
            for i in range(left, right):
                naive[i] += value
        else:
            assert tree.query(left, right) == max(naive[left:right])


def test_range_add_max_empty_range():
    tree = RangeAddMaxTree(5)
    with pytest.raises(ValueError):
        tree.query(2, 2)
    with pytest.raises(ValueError):
        tree.increment(0, 6, 1)