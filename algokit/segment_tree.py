"""Segment trees with point updates and a lazy range-add max tree."""

import operator


class SegmentTree:
    """Point assignment and range combine over half-open ranges [left, right)."""

    def __init__(self, values=(), combine=operator.add, identity=0):
        values = list(values)
        self._n = len(values)
        size = 1
        while size < self._n:
            size *= 2
        self._size = size
        self._combine = combine
        self._identity = identity
        self._tree = [identity] * (2 * size)
        self._tree[size:size + self._n] = values
        for i in range(size - 1, 0, -1):
            self._tree[i] = combine(self._tree[2 * i], self._tree[2 * i + 1])

    def __len__(self):
        return self._n

    def __getitem__(self, index):
        if not 0 <= index < self._n:
            raise IndexError(f"index {index} is out of range")
        return self._tree[index + self._size]

    def set(self, index, value):
        if not 0 <= index < self._n:
            raise IndexError(f"index {index} is out of range")
        i = index + self._size
        self._tree[i] = value
        i //= 2
        while i:
            self._tree[i] = self._combine(self._tree[2 * i], self._tree[2 * i + 1])
            i //= 2

    def query(self, left, right):
        """Combine of values[left:right]; the identity for an empty range."""
        if not 0 <= left <= right <= self._n:
            raise IndexError(f"range [{left}, {right}) is invalid")
        acc_left = acc_right = self._identity
        lo, hi = left + self._size, right + self._size
        while lo < hi:
            if lo & 1:
                acc_left = self._combine(acc_left, self._tree[lo])
                lo += 1
            if hi & 1:
                hi -= 1
                acc_right = self._combine(self._tree[hi], acc_right)
            lo //= 2
            hi //= 2
        return self._combine(acc_left, acc_right)


class MaxSegmentTree(SegmentTree):
    """Range maximum tree that can locate the first element above a bound."""

    def __init__(self, values):
        super().__init__(values, max, float("-inf"))

    def find_first_at_least(self, value):
        """Index of the first element >= value, or None."""
        if not self._n or self._tree[1] < value:
            return None
        i = 1
        while i < self._size:
            i = 2 * i if self._tree[2 * i] >= value else 2 * i + 1
        return i - self._size


class IterativeSumTree:
    """Bottom-up sum tree with 1-indexed positions and inclusive ranges."""

    def __init__(self, values):
        values = list(values)
        n = len(values)
        self._n = n
        self._tree = [0] * n + values
        for i in range(n - 1, 0, -1):
            self._tree[i] = self._tree[2 * i] + self._tree[2 * i + 1]

    def __len__(self):
        return self._n

    def update(self, position, value):
        """Set the element at 1-based ``position`` to ``value``."""
        if not 1 <= position <= self._n:
            raise IndexError(f"position {position} is out of range")
        p = position - 1 + self._n
        self._tree[p] = value
        p >>= 1
        while p:
            self._tree[p] = self._tree[2 * p] + self._tree[2 * p + 1]
            p >>= 1

    def query(self, left, right):
        """Sum over 1-based positions left..right inclusive."""
        if left < 1 or right > self._n:
            raise IndexError(f"range [{left}, {right}] is out of bounds")
        if left > right:
            raise ValueError("left must not exceed right")
        total = 0
        lo, hi = left - 1 + self._n, right + self._n
        while lo < hi:
            if lo & 1:
                total += self._tree[lo]
                lo += 1
            if hi & 1:
                hi -= 1
                total += self._tree[hi]
            lo >>= 1
            hi >>= 1
        return total


class RangeAddMaxTree:
    """Range add and range max over half-open ranges, starting from zeros."""

    def __init__(self, size):
        if size < 1:
            raise ValueError("size must be positive")
        n = 1
        while n < size:
            n *= 2
        self._size = size
        self._n = n
        self._height = n.bit_length()
        self._tree = [0] * (2 * n)
        self._pending = [0] * n

    def __len__(self):
        return self._size

    def _apply(self, p, value):
        self._tree[p] += value
        if p < self._n:
            self._pending[p] += value

    def _rebuild(self, p):
        while p > 1:
            p >>= 1
            self._tree[p] = max(self._tree[2 * p], self._tree[2 * p + 1]) + self._pending[p]

    def _push(self, p):
        for s in range(self._height, 0, -1):
            i = p >> s
            if self._pending[i]:
                self._apply(2 * i, self._pending[i])
                self._apply(2 * i + 1, self._pending[i])
                self._pending[i] = 0

    def _check(self, left, right):
        if not 0 <= left < right <= self._size:
            raise ValueError(f"range [{left}, {right}) is empty or out of bounds")

    def increment(self, left, right, value):
        """Add ``value`` to every element in [left, right)."""
        self._check(left, right)
        lo, hi = left + self._n, right + self._n
        lo0, hi0 = lo, hi
        while lo < hi:
            if lo & 1:
                self._apply(lo, value)
                lo += 1
            if hi & 1:
                hi -= 1
                self._apply(hi, value)
            lo >>= 1
            hi >>= 1
        self._rebuild(lo0)
        self._rebuild(hi0 - 1)

    def query(self, left, right):
        """Maximum over [left, right)."""
        self._check(left, right)
        lo, hi = left + self._n, right + self._n
        self._push(lo)
        self._push(hi - 1)
        best = None
        while lo < hi:
            if lo & 1:
                best = self._tree[lo] if best is None else max(best, self._tree[lo])
                lo += 1
            if hi & 1:
                hi -= 1
                best = self._tree[hi] if best is None else max(best, self._tree[hi])
            lo >>= 1
            hi >>= 1
        return best