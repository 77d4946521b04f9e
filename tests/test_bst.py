import random

import pytest

from algokit.bst import bst_children


def _inorder(children, root):
    out = []
    stack = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = children[node][0]
        node = stack.pop()
        out.append(node)
        node = children[node][1]
    return out


def test_small_tree():
    assert bst_children([2, 1, 3]) == {2: (1, 3), 1: (None, None), 3: (None, None)}


@pytest.mark.parametrize("seed", [1, 2, 3, 4])
def test_random_tree_is_valid_bst(seed):
    rng = random.Random(seed)
    values = rng.sample(range(1, 60), 30)
    children = bst_children(values)
    assert set(children) == set(values)
    assert _inorder(children, values[0]) == sorted(values)
    order = {v: i for i, v in enumerate(values)}
    for parent, (lch, rch) in children.items():
        if lch is not None:
            assert lch < parent and order[lch] > order[parent]
        if rch is not None:
            assert rch > parent and order[rch] > order[parent]


def test_empty_input():
    assert bst_children([]) == {}


def test_duplicates_rejected():
    with pytest.raises(ValueError):
        bst_children([3, 1, 3])