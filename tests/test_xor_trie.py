import random
from functools import reduce
from operator import xor

import pytest

from algokit.xor_trie import XorTrie, count_subarrays_xor_at_least


def _filled(seed, count=40, bits=8):
    rng = random.Random(seed)
    values = [rng.randrange(1 << bits) for _ in range(count)]
    trie = XorTrie(bits)
    for v in values:
        trie.insert(v)
    return trie, values


def test_count_less_matches_scan():
    trie, values = _filled(5)
    rng = random.Random(6)
    for _ in range(50):
        x, k = rng.randrange(256), rng.randrange(257)
        assert trie.count_less(x, k) == sum(1 for v in values if v ^ x < k)


def test_max_and_min_xor():
    trie, values = _filled(8)
    for x in range(0, 256, 7):
        assert trie.max_xor(x) == max(v ^ x for v in values)
        assert trie.min_xor(x) == min(v ^ x for v in values)


def test_length_counts_duplicates():
    trie = XorTrie(4)
    for v in (3, 3, 9):
        trie.insert(v)
    assert len(trie) == 3
    assert trie.min_xor(3) == 0


def test_empty_trie_errors():
    trie = XorTrie()
    with pytest.raises(ValueError):
        trie.max_xor(1)
    with pytest.raises(ValueError):
        trie.min_xor(1)


def test_insert_out_of_range():
    trie = XorTrie(4)
    with pytest.raises(ValueError):
        trie.insert(16)
    with pytest.raises(ValueError):
        trie.insert(-1)


@pytest.mark.parametrize("seed", [1, 2, 3])
def test_count_subarrays_matches_brute_force(seed):
    rng = random.Random(seed)
    values = [rng.randrange(32) for _ in range(15)]
    k = rng.randrange(32)
    expected = sum(
        1
        for i in range(len(values))
        for j in range(i + 1, len(values) + 1)
        if reduce(xor, values[i:j]) >= k
    )
    assert count_subarrays_xor_at_least(values, k) == expected