"""Counting light-bulb sets with xor hashing of colour pairs."""

import random
from collections import Counter

MODULUS = 998244353


def _count_block(jump, left, right):
    count = 0
    while left < right:
        target = jump[left]
        if target is not None and target < right:
            left = target
        else:
            count += 1
            left += 1
    return count


def light_bulb_sets(colors, seed=98275314):
    """Minimum number of bulbs to switch on and the number of ways to pick them.

    ``colors`` lists 2n bulbs, each colour 1..n appearing exactly twice.
    Returns ``(size, ways)`` with ``ways`` modulo 998244353.
    """
    colors = list(colors)
    if len(colors) % 2:
        raise ValueError("there must be an even number of bulbs")
    n = len(colors) // 2
    counts = Counter(colors)
    if set(counts) != set(range(1, n + 1)) or any(c != 2 for c in counts.values()):
        raise ValueError(f"each colour 1..{n} must appear exactly twice")
    rng = random.Random(seed)
    keys = {}
    for color in range(1, n + 1):
        key = 0
        while key == 0:
            key = rng.getrandbits(64)
        keys[color] = key
    jump = [None] * (2 * n)
    last = {0: 0}
    current = 0
    size = 0
    ways = 1
    for i, color in enumerate(colors):
        current ^= keys[color]
        if current == 0:
            size += 1
            ways = ways * _count_block(jump, last[0], i + 1) % MODULUS
            last.clear()
        elif current in last:
            jump[last[current]] = i + 1
        last[current] = i + 1
    return size, ways