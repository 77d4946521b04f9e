"""Probability that a product of die rolls hits a target exactly."""

MODULUS = 998244353


def dice_product_probability(n):
    """Probability, modulo 998244353, of reaching exactly ``n``.

    Starting from 1, a fair die is rolled and the value multiplied by the
    result until it reaches at least ``n``; rolls of 1 change nothing, so
    each of 2..6 is taken with probability 1/5.
    """
    if n < 1:
        raise ValueError("target must be positive")
    inverse_five = pow(5, -1, MODULUS)
    memo = {}

    def reach(value):
        if value >= n:
            return 1 if value == n else 0
        if value not in memo:
            total = sum(reach(face * value) for face in range(2, 7))
            memo[value] = total * inverse_five % MODULUS
        return memo[value]

    return reach(1)