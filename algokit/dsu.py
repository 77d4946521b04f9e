"""Disjoint-set union with union by rank and path compression."""


class DSU:
    """Disjoint sets over the elements 1..n."""

    def __init__(self, n):
        if n < 0:
            raise ValueError("number of elements must be non-negative")
        self._parent = list(range(n + 1))
        self._rank = [0] * (n + 1)
        self._size = [1] * (n + 1)
        self._components = n

    def __len__(self):
        return len(self._parent) - 1

    def _check(self, i):
        if not 1 <= i < len(self._parent):
            raise IndexError(f"element {i} is out of range")

    def find(self, i):
        """Return the representative of the set holding ``i``."""
        self._check(i)
        root = i
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[i] != root:
            self._parent[i], i = root, self._parent[i]
        return root

    def same(self, i, j):
        """Whether ``i`` and ``j`` are in the same set."""
        return self.find(i) == self.find(j)

    def component_size(self, i):
        """Number of elements in the set holding ``i``."""
        return self._size[self.find(i)]

    def count(self):
        """Number of disjoint sets."""
        return self._components

    def union(self, i, j):
        """Join the sets of ``i`` and ``j``.

        Returns the new representative, or None if they were already joined.
        """
        i, j = self.find(i), self.find(j)
        if i == j:
            return None
        self._components -= 1
        if self._rank[i] > self._rank[j]:
            i, j = j, i
        self._parent[i] = j
        self._size[j] += self._size[i]
        if self._rank[i] == self._rank[j]:
            self._rank[j] += 1
        return j