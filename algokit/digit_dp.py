"""Digit dynamic programming over decimal representations."""

from collections import defaultdict


def count_digit_sum_divisible(limit):
    """How many of 1..limit are divisible by their own digit sum."""
    if limit < 0:
        raise ValueError("limit must be non-negative")
    digits = [int(c) for c in str(limit)]
    total = 0
    for target in range(1, 9 * len(digits) + 1):
        states = {(0, 0, True): 1}
        for top in digits:
            nxt = defaultdict(int)
            for (acc, rem, tight), ways in states.items():
                high = top if tight else 9
                for d in range(min(high, target - acc) + 1):
                    nxt[(acc + d, (rem * 10 + d) % target, tight and d == top)] += ways
            states = nxt
        total += states.get((target, 0, True), 0) + states.get((target, 0, False), 0)
    return total


def _count_upto(x, k):
    if x < 0:
        return 0
    states = {(0, 0, True): 1}
    for top in (int(c) for c in str(x)):
        nxt = defaultdict(int)
        for (number, digits, tight), ways in states.items():
            high = top if tight else 9
            for d in range(high + 1):
                nxt[((number * 10 + d) % k, (digits + d) % k, tight and d == top)] += ways
        states = nxt
    return sum(ways for (number, digits, _), ways in states.items() if number == 0 and digits == 0)


def count_investigation(low, high, k):
    """Numbers in [low, high] that, like their digit sum, are divisible by ``k``."""
    if k < 1:
        raise ValueError("k must be positive")
    if low < 0:
        raise ValueError("low must be non-negative")
    if low > high:
        return 0
    return _count_upto(high, k) - _count_upto(low - 1, k)