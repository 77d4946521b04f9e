"""Lazy-propagation segment trees for range updates and range queries."""

import operator


def _add_to_range(value, update, size):
    return value + update * size


class AddAssignSegmentTree:
    """Range add, range assign and range sum over 1-based inclusive ranges."""

    def __init__(self, values):
        values = list(values)
        if not values:
            raise ValueError("values must not be empty")
        self._n = len(values)
        self._sum = [0] * (4 * self._n)
        self._add = [0] * (4 * self._n)
        self._assign = [None] * (4 * self._n)
        self._build(1, 1, self._n, values)

    def __len__(self):
        return self._n

    def _build(self, node, lo, hi, values):
        if lo == hi:
            self._sum[node] = values[lo - 1]
            return
        mid = (lo + hi) // 2
        self._build(2 * node, lo, mid, values)
        self._build(2 * node + 1, mid + 1, hi, values)
        self._sum[node] = self._sum[2 * node] + self._sum[2 * node + 1]

    def _apply_add(self, node, lo, hi, value):
        self._add[node] += value
        self._sum[node] += (hi - lo + 1) * value

    def _apply_assign(self, node, lo, hi, value):
        self._assign[node] = value
        self._add[node] = 0
        self._sum[node] = (hi - lo + 1) * value

    def _push(self, node, lo, hi):
        mid = (lo + hi) // 2
        if self._assign[node] is not None:
            self._apply_assign(2 * node, lo, mid, self._assign[node])
            self._apply_assign(2 * node + 1, mid + 1, hi, self._assign[node])
            self._assign[node] = None
        if self._add[node]:
            self._apply_add(2 * node, lo, mid, self._add[node])
            self._apply_add(2 * node + 1, mid + 1, hi, self._add[node])
            self._add[node] = 0

    def _update(self, node, lo, hi, left, right, action, value):
        if left > hi or right < lo:
            return
        if left <= lo and hi <= right:
            action(node, lo, hi, value)
            return
        self._push(node, lo, hi)
        mid = (lo + hi) // 2
        self._update(2 * node, lo, mid, left, right, action, value)
        self._update(2 * node + 1, mid + 1, hi, left, right, action, value)
        self._sum[node] = self._sum[2 * node] + self._sum[2 * node + 1]

    def _query(self, node, lo, hi, left, right):
        if left > hi or right < lo:
            return 0
        if left <= lo and hi <= right:
            return self._sum[node]
        self._push(node, lo, hi)
        mid = (lo + hi) // 2
        return self._query(2 * node, lo, mid, left, right) + self._query(
            2 * node + 1, mid + 1, hi, left, right
        )

    def _check(self, left, right):
        if not 1 <= left <= right <= self._n:
            raise IndexError(f"range [{left}, {right}] is invalid")

    def increment(self, left, right, value):
        """Add ``value`` to every element in [left, right]."""
        self._check(left, right)
        self._update(1, 1, self._n, left, right, self._apply_add, value)

    def assign(self, left, right, value):
        """Set every element in [left, right] to ``value``."""
        self._check(left, right)
        self._update(1, 1, self._n, left, right, self._apply_assign, value)

    def query(self, left, right):
        """Sum of the elements in [left, right]."""
        self._check(left, right)
        return self._query(1, 1, self._n, left, right)


class ProgressionSegmentTree:
    """Range sums with arithmetic progressions added right to left.

    Positions are 0-based and ranges inclusive. Adding a progression to
    [left, right] adds ``base`` at ``right``, ``base + step`` at ``right - 1``
    and so on towards ``left``.
    """

    def __init__(self, values):
        values = list(values)
        if not values:
            raise ValueError("values must not be empty")
        self._n = len(values)
        self._sum = [0] * (4 * self._n)
        self._base = [0] * (4 * self._n)
        self._step = [0] * (4 * self._n)
        self._build(1, 0, self._n - 1, values)

    def __len__(self):
        return self._n

    def _build(self, node, lo, hi, values):
        if lo == hi:
            self._sum[node] = values[lo]
            return
        mid = (lo + hi) // 2
        self._build(2 * node, lo, mid, values)
        self._build(2 * node + 1, mid + 1, hi, values)
        self._sum[node] = self._sum[2 * node] + self._sum[2 * node + 1]

    def _apply(self, node, lo, hi, base, step):
        length = hi - lo + 1
        self._sum[node] += length * base + length * (length - 1) // 2 * step
        if lo != hi:
            self._base[node] += base
            self._step[node] += step

    def _push(self, node, lo, hi):
        base, step = self._base[node], self._step[node]
        if not base and not step:
            return
        mid = (lo + hi) // 2
        self._apply(2 * node + 1, mid + 1, hi, base, step)
        self._apply(2 * node, lo, mid, base + (hi - mid) * step, step)
        self._base[node] = self._step[node] = 0

    def _update(self, node, lo, hi, left, right, base, step):
        if left > hi or right < lo:
            return
        if left <= lo and hi <= right:
            self._apply(node, lo, hi, base + (right - hi) * step, step)
            return
        self._push(node, lo, hi)
        mid = (lo + hi) // 2
        self._update(2 * node, lo, mid, left, right, base, step)
        self._update(2 * node + 1, mid + 1, hi, left, right, base, step)
        self._sum[node] = self._sum[2 * node] + self._sum[2 * node + 1]

    def _query(self, node, lo, hi, left, right):
        if left > hi or right < lo:
            return 0
        if left <= lo and hi <= right:
            return self._sum[node]
        self._push(node, lo, hi)
        mid = (lo + hi) // 2
        return self._query(2 * node, lo, mid, left, right) + self._query(
            2 * node + 1, mid + 1, hi, left, right
        )

    def _check(self, left, right):
        if not 0 <= left <= right < self._n:
            raise IndexError(f"range [{left}, {right}] is invalid")

    def add_progression(self, left, right, base, step):
        """Add ``base + (right - i) * step`` to each position i in [left, right]."""
        self._check(left, right)
        self._update(1, 0, self._n - 1, left, right, base, step)

    def query(self, left, right):
        """Sum over [left, right]."""
        self._check(left, right)
        return self._query(1, 0, self._n - 1, left, right)


class LazySegmentTree:
    """Generic lazy segment tree over 0-based inclusive ranges.

    ``combine(a, b)`` merges two node values and ``identity`` is its neutral
    element. ``apply(value, update, size)`` returns a node value after an
    update over ``size`` elements; ``compose(older, newer)`` merges pending
    updates and ``no_update`` is the empty update. The defaults give range
    add with range sum.
    """

    def __init__(
        self,
        values,
        combine=operator.add,
        identity=0,
        apply=_add_to_range,
        compose=operator.add,
        no_update=0,
    ):
        values = list(values)
        if not values:
            raise ValueError("values must not be empty")
        self._n = len(values)
        self._combine = combine
        self._identity = identity
        self._apply_fn = apply
        self._compose = compose
        self._no_update = no_update
        self._tree = [identity] * (4 * self._n)
        self._pending = [no_update] * (4 * self._n)
        self._lazy = [False] * (4 * self._n)
        self._build(1, 0, self._n - 1, values)

    def __len__(self):
        return self._n

    def _build(self, node, lo, hi, values):
        if lo == hi:
            self._tree[node] = values[lo]
            return
        mid = (lo + hi) // 2
        self._build(2 * node, lo, mid, values)
        self._build(2 * node + 1, mid + 1, hi, values)
        self._tree[node] = self._combine(self._tree[2 * node], self._tree[2 * node + 1])

    def _apply(self, node, lo, hi, update):
        if lo != hi:
            self._lazy[node] = True
            self._pending[node] = self._compose(self._pending[node], update)
        self._tree[node] = self._apply_fn(self._tree[node], update, hi - lo + 1)

    def _push(self, node, lo, hi):
        if not self._lazy[node]:
            return
        mid = (lo + hi) // 2
        self._apply(2 * node, lo, mid, self._pending[node])
        self._apply(2 * node + 1, mid + 1, hi, self._pending[node])
        self._pending[node] = self._no_update
        self._lazy[node] = False

    def _update(self, node, lo, hi, left, right, update):
        if left > hi or right < lo:
            return
        if left <= lo and hi <= right:
            self._apply(node, lo, hi, update)
            return
        self._push(node, lo, hi)
        mid = (lo + hi) // 2
        self._update(2 * node, lo, mid, left, right, update)
        self._update(2 * node + 1, mid + 1, hi, left, right, update)
        self._tree[node] = self._combine(self._tree[2 * node], self._tree[2 * node + 1])

    def _query(self, node, lo, hi, left, right):
        if left > hi or right < lo:
            return self._identity
        if left <= lo and hi <= right:
            return self._tree[node]
        self._push(node, lo, hi)
        mid = (lo + hi) // 2
        return self._combine(
            self._query(2 * node, lo, mid, left, right),
            self._query(2 * node + 1, mid + 1, hi, left, right),
        )

    def _check(self, left, right):
        if not 0 <= left <= right < self._n:
            raise IndexError(f"range [{left}, {right}] is invalid")

    def update(self, left, right, update):
        """Apply ``update`` to every element in [left, right]."""
        self._check(left, right)
        self._update(1, 0, self._n - 1, left, right, update)

    def query(self, left, right):
        """Combined value over [left, right]."""
        self._check(left, right)
        return self._query(1, 0, self._n - 1, left, right)