"""Fenwick (binary indexed) trees in one and two dimensions."""


class FenwickTree:
    """Point updates and prefix sums over indices 0..size-1."""

    def __init__(self, size):
        if size < 0:
            raise ValueError("size must be non-negative")
        self._tree = [0] * size

    @classmethod
    def from_values(cls, values):
        values = list(values)
        tree = cls(len(values))
        for index, value in enumerate(values):
            tree.add(index, value)
        return tree

    def __len__(self):
        return len(self._tree)

    def add(self, index, delta):
        """Add ``delta`` to the element at ``index``."""
        n = len(self._tree)
        if not 0 <= index < n:
            raise IndexError(f"index {index} is out of range")
        while index < n:
            self._tree[index] += delta
            index |= index + 1

    def prefix_sum(self, index):
        """Sum of elements 0..index inclusive; index -1 gives 0."""
        if not -1 <= index < len(self._tree):
            raise IndexError(f"index {index} is out of range")
        total = 0
        while index >= 0:
            total += self._tree[index]
            index = (index & (index + 1)) - 1
        return total

    def range_sum(self, left, right):
        """Sum of elements left..right inclusive."""
        if left > right:
            raise ValueError("left must not exceed right")
        return self.prefix_sum(right) - self.prefix_sum(left - 1)


class FenwickTree2D:
    """Point updates and prefix sums over a rows x cols grid."""

    def __init__(self, rows, cols):
        if rows < 0 or cols < 0:
            raise ValueError("dimensions must be non-negative")
        self._rows = rows
        self._cols = cols
        self._tree = [[0] * cols for _ in range(rows)]

    @classmethod
    def from_grid(cls, grid):
        grid = [list(row) for row in grid]
        if not grid:
            raise ValueError("grid must have at least one row")
        width = len(grid[0])
        if any(len(row) != width for row in grid):
            raise ValueError("grid rows must have equal length")
        tree = cls(len(grid), width)
        for r, row in enumerate(grid):
            for c, value in enumerate(row):
                tree.add(r, c, value)
        return tree

    @property
    def shape(self):
        return self._rows, self._cols

    def add(self, row, col, delta):
        """Add ``delta`` to cell (row, col)."""
        if not (0 <= row < self._rows and 0 <= col < self._cols):
            raise IndexError(f"cell ({row}, {col}) is out of range")
        i = row
        while i < self._rows:
            line = self._tree[i]
            j = col
            while j < self._cols:
                line[j] += delta
                j |= j + 1
            i |= i + 1

    def prefix_sum(self, row, col):
        """Sum of cells in rows 0..row and columns 0..col inclusive."""
        if not (-1 <= row < self._rows and -1 <= col < self._cols):
            raise IndexError(f"cell ({row}, {col}) is out of range")
        total = 0
        i = row
        while i >= 0:
            line = self._tree[i]
            j = col
            while j >= 0:
                total += line[j]
                j = (j & (j + 1)) - 1
            i = (i & (i + 1)) - 1
        return total