"""Chromatic number by inclusion-exclusion over independent sets."""

_MODULUS = 1_000_000_007


def chromatic_number(n, edges):
    """Fewest colours for the graph on vertices 0..n-1.

    Runs in O(n * 2^n); the count is checked modulo a large prime.
    """
    if n < 0:
        raise ValueError("number of vertices must be non-negative")
    adjacent = [0] * n
    for u, v in edges:
        if not (0 <= u < n and 0 <= v < n):
            raise ValueError(f"edge ({u}, {v}) is outside 0..{n - 1}")
        if u == v:
            raise ValueError(f"vertex {u} has a loop and cannot be coloured")
        adjacent[u] |= 1 << v
        adjacent[v] |= 1 << u
    size = 1 << n
    independent = [0] * size
    independent[0] = 1
    for subset in range(1, size):
        low = (subset & -subset).bit_length() - 1
        rest = subset ^ (1 << low)
        independent[subset] = independent[rest] + independent[rest & ~adjacent[low]]
    odd = [bin(subset).count("1") & 1 for subset in range(size)]
    power = [1] * size
    for k in range(1, n):
        total = 0
        for subset in range(size):
            power[subset] = power[subset] * independent[subset] % _MODULUS
            total += power[subset] if odd[subset] else -power[subset]
        if total % _MODULUS:
            return k
    return n