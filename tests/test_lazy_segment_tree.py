import operator
import random

import pytest

from algokit.lazy_segment_tree import (
    AddAssignSegmentTree,
    LazySegmentTree,
    ProgressionSegmentTree,
)


def test_add_assign_matches_model():
    rng = random.Random(7)
    n = 30
    values = [rng.randint(-20, 20) for _ in range(n)]
    tree = AddAssignSegmentTree(values)
    model = values[:]
    for _ in range(400):
        left = rng.randint(1, n)
        right = rng.randint(left, n)
        op = rng.randrange(3)
        if op == 0:
            x = rng.randint(-5, 5)
            tree.increment(left, right, x)
            for i in range(left - 1, right):
                model[i] += x
        elif op == 1:
            x = rng.randint(-5, 5)
            tree.assign(left, right, x)
            for i in range(left - 1, right):
                model[i] = x
        else:
            assert tree.query(left, right) == sum(model[left - 1:right])


def test_assign_zero_is_propagated():
    tree = AddAssignSegmentTree([5, 5, 5, 5])
    tree.assign(1, 4, 0)
    tree.increment(2, 2, 3)
    assert tree.query(1, 1) == 0
    assert tree.query(2, 2) == 3


def test_add_assign_rejects_bad_ranges():
    tree = AddAssignSegmentTree([1, 2, 3])
    with pytest.raises(IndexError):
        tree.query(0, 2)
    with pytest.raises(IndexError):
        tree.query(3, 2)
    with pytest.raises(ValueError):
        AddAssignSegmentTree([])


def test_progression_anchored_at_right_end():
    tree = ProgressionSegmentTree([0, 0, 0, 0])
    tree.add_progression(0, 3, 1, 1)
    assert tree.query(3, 3) == 1
    assert tree.query(0, 0) == 4


def test_progression_matches_model():
    rng = random.Random(11)
    n = 25
    values = [rng.randint(-10, 10) for _ in range(n)]
    tree = ProgressionSegmentTree(values)
    model = values[:]
    for _ in range(300):
        left = rng.randrange(n)
        right = rng.randint(left, n - 1)
        if rng.random() < 0.5:
            base = rng.randint(-5, 5)
            step = rng.randint(-3, 3)
            tree.add_progression(left, right, base, step)
            for i in range(left, right + 1):
                model[i] += base + (right - i) * step
        else:
            assert tree.query(left, right) == sum(model[left:right + 1])


def test_progression_rejects_bad_range():
    tree = ProgressionSegmentTree([1, 2])
    with pytest.raises(IndexError):
        tree.add_progression(1, 2, 1, 1)


def test_generic_default_is_range_add_sum():
    rng = random.Random(3)
    n = 20
    values = [rng.randint(0, 9) for _ in range(n)]
    tree = LazySegmentTree(values)
    model = values[:]
    for _ in range(300):
        left = rng.randrange(n)
        right = rng.randint(left, n - 1)
        if rng.random() < 0.5:
            x = rng.randint(-4, 4)
            tree.update(left, right, x)
            for i in range(left, right + 1):
                model[i] += x
        else:
            assert tree.query(left, right) == sum(model[left:right + 1])


def test_generic_range_add_max():
    rng = random.Random(5)
    n = 17
    values = [rng.randint(-9, 9) for _ in range(n)]
    tree = LazySegmentTree(
        values,
        combine=max,
        identity=float("-inf"),
        apply=lambda value, update, size: value + update,
        compose=operator.add,
        no_update=0,
    )
    model = values[:]
    for _ in range(300):
        left = rng.randrange(n)
        right = rng.randint(left, n - 1)
        if rng.random() < 0.5:
            x = rng.randint(-4, 4)
            tree.update(left, right, x)
            for i in range(left, right + 1):
                model[i] += x
        else:
            assert tree.query(left, right) == max(model[left:right + 1])


def test_generic_rejects_bad_range():
    tree = LazySegmentTree([1, 2, 3])
    with pytest.raises(IndexError):
        tree.query(-1, 1)