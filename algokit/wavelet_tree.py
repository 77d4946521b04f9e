"""Wavelet tree for order statistics on static arrays."""


class _WaveletNode:
    __slots__ = ("lo", "hi", "to_left", "sums", "left", "right")

    def __init__(self, values, lo, hi):
        self.lo = lo
        self.hi = hi
        self.left = self.right = None
        mid = (lo + hi) >> 1
        self.to_left = [0]
        self.sums = [0]
        for v in values:
            self.to_left.append(self.to_left[-1] + (v <= mid))
            self.sums.append(self.sums[-1] + v)
        if not values or lo == hi:
            return
        self.left = _WaveletNode([v for v in values if v <= mid], lo, mid)
        self.right = _WaveletNode([v for v in values if v > mid], mid + 1, hi)

    def kth(self, l, r, k):
        if l > r:
            return 0
        if self.lo == self.hi:
            return self.lo
        lb, rb = self.to_left[l - 1], self.to_left[r]
        in_left = rb - lb
        if k <= in_left:
            return self.left.kth(lb + 1, rb, k)
        return self.right.kth(l - lb, r - rb, k - in_left)

    def at_most(self, l, r, k):
        if l > r or k < self.lo:
            return 0
        if self.hi <= k:
            return r - l + 1
        lb, rb = self.to_left[l - 1], self.to_left[r]
        return self.left.at_most(lb + 1, rb, k) + self.right.at_most(l - lb, r - rb, k)

    def equal(self, l, r, k):
        if l > r or k < self.lo or k > self.hi:
            return 0
        if self.lo == self.hi:
            return r - l + 1
        lb, rb = self.to_left[l - 1], self.to_left[r]
        if k <= (self.lo + self.hi) >> 1:
            return self.left.equal(lb + 1, rb, k)
        return self.right.equal(l - lb, r - rb, k)

    def sum_at_most(self, l, r, k):
        if l > r or k < self.lo:
            return 0
        if self.hi <= k:
            return self.sums[r] - self.sums[l - 1]
        lb, rb = self.to_left[l - 1], self.to_left[r]
        return self.left.sum_at_most(lb + 1, rb, k) + self.right.sum_at_most(
            l - lb, r - rb, k
        )


class WaveletTree:
    """Static array queries over 1-indexed inclusive ranges [left, right]."""

    def __init__(self, values, low=None, high=None):
        values = list(values)
        if low is None:
            low = min(values, default=0)
        if high is None:
            high = max(values, default=0)
        if any(not low <= v <= high for v in values):
            raise ValueError(f"values must lie in [{low}, {high}]")
        self._n = len(values)
        self._root = _WaveletNode(values, low, high)

    def __len__(self):
        return self._n

    def _check(self, left, right):
        if left < 1 or right > self._n:
            raise IndexError(f"range [{left}, {right}] is out of bounds")

    def kth(self, left, right, k):
        """The k-th smallest value (1-based k) in [left, right]."""
        self._check(left, right)
        if not 1 <= k <= right - left + 1:
            raise ValueError(f"k={k} is outside the range size")
        return self._root.kth(left, right, k)

    def count_at_most(self, left, right, k):
        """How many values in [left, right] are <= k."""
        self._check(left, right)
        return self._root.at_most(left, right, k)

    def count_equal(self, left, right, k):
        """How many values in [left, right] equal k."""
        self._check(left, right)
        return self._root.equal(left, right, k)

    def sum_at_most(self, left, right, k):
        """Sum of values in [left, right] that are <= k."""
        self._check(left, right)
        return self._root.sum_at_most(left, right, k)