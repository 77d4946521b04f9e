"""Prefix sums, LIS, subset-sum transform and array-collapse counting."""

from bisect import bisect_left
from itertools import accumulate

COLLAPSE_MODULUS = 998244353


def prefix_sums(values):
    """Running totals from the left."""
    return list(accumulate(values))


def suffix_sums(values):
    """Running totals from the right, aligned with the input."""
    return list(accumulate(reversed(list(values))))[::-1]


def longest_increasing_subsequence(values):
    """Length of the longest strictly increasing subsequence."""
    tails = []
    for v in values:
        pos = bisect_left(tails, v)
        if pos == len(tails):
            tails.append(v)
        else:
            tails[pos] = v
    return len(tails)


def subset_sums(values):
    """For every mask, the sum of values over all its submasks.

    The number of values must be a power of two.
    """
    result = list(values)
    n = len(result)
    if n == 0 or n & (n - 1):
        raise ValueError("number of values must be a power of two")
    bit = 1
    while bit < n:
        for mask in range(n):
            if mask & bit:
                result[mask] += result[mask ^ bit]
        bit <<= 1
    return result


def count_collapsed_arrays(values):
    """Count arrays reachable by repeatedly keeping only a subarray's minimum.

    Values are expected to be distinct; the count is modulo 998244353.
    """
    a = list(values)
    if not a:
        raise ValueError("values must not be empty")
    mod = COLLAPSE_MODULUS
    dp = [0] * len(a)
    pref = [0] * len(a)
    stack = []
    running = 0
    for i, value in enumerate(a):
        while stack and a[stack[-1]] > value:
            running = (running - dp[stack.pop()]) % mod
        before = pref[i - 1] if i else 0
        if not stack:
            dp[i] = (before + 1) % mod
        else:
            dp[i] = (running + before - pref[stack[-1]]) % mod
        pref[i] = (before + dp[i]) % mod
        stack.append(i)
        running = (running + dp[i]) % mod
    total = 0
    suffix_min = a[-1]
    for i in range(len(a) - 1, -1, -1):
        suffix_min = min(suffix_min, a[i])
        if suffix_min == a[i]:
            total = (total + dp[i]) % mod
    return total