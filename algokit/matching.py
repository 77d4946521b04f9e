"""Maximum bipartite matching: Hopcroft-Karp and Kuhn's algorithm."""

import random
from collections import Counter, deque

from algokit.two_sat import _strong_components

_INF = float("inf")


class HopcroftKarp:
    """Bipartite graph with left vertices 1..left and right vertices 1..right."""

    def __init__(self, left, right):
        if left < 0 or right < 0:
            raise ValueError("sides must be non-negative")
        self.left = left
        self.right = right
        self._adjacency = [[] for _ in range(left + 1)]
        self._match_left = [0] * (left + 1)
        self._match_right = [0] * (right + 1)
        self._dist = [0] * (left + 1)

    def add_edge(self, u, v):
        if not (1 <= u <= self.left and 1 <= v <= self.right):
            raise IndexError(f"edge ({u}, {v}) is out of range")
        self._adjacency[u].append(v)

    def _bfs(self):
        queue = deque()
        for u in range(1, self.left + 1):
            if self._match_left[u]:
                self._dist[u] = _INF
            else:
                self._dist[u] = 0
                queue.append(u)
        self._dist[0] = _INF
        while queue:
            u = queue.popleft()
            for v in self._adjacency[u]:
                w = self._match_right[v]
                if self._dist[w] == _INF:
                    self._dist[w] = self._dist[u] + 1
                    queue.append(w)
        return self._dist[0] != _INF

    def _dfs(self, u):
        if u == 0:
            return True
        for v in self._adjacency[u]:
            w = self._match_right[v]
            if self._dist[w] == self._dist[u] + 1 and self._dfs(w):
                self._match_left[u] = v
                self._match_right[v] = u
                return True
        self._dist[u] = _INF
        return False

    def maximum_matching(self):
        """Size of a maximum matching."""
        while self._bfs():
            for u in range(1, self.left + 1):
                if not self._match_left[u]:
                    self._dfs(u)
        return sum(1 for v in self._match_left[1:] if v)


class Kuhn:
    """Augmenting-path matching with randomised order of exploration."""

    def __init__(self, left, right, seed=None):
        if left < 0 or right < 0:
            raise ValueError("sides must be non-negative")
        self.left = left
        self.right = right
        self._rng = random.Random(seed)
        self._adjacency = [[] for _ in range(left + 1)]
        self._match_left = [None] * (left + 1)
        self._match_right = [None] * (right + 1)

    def add_edge(self, u, v):
        if not (1 <= u <= self.left and 1 <= v <= self.right):
            raise IndexError(f"edge ({u}, {v}) is out of range")
        self._adjacency[u].append(v)

    def _augment(self, u, seen):
        if seen[u]:
            return False
        seen[u] = True
        for v in self._adjacency[u]:
            owner = self._match_right[v]
            if owner is None or self._augment(owner, seen):
                self._match_left[u] = v
                self._match_right[v] = u
                return True
        return False

    def maximum_matching(self):
        """Size of a maximum matching."""
        for neighbours in self._adjacency:
            self._rng.shuffle(neighbours)
        order = list(range(1, self.left + 1))
        self._rng.shuffle(order)
        progress = True
        while progress:
            progress = False
            seen = [False] * (self.left + 1)
            for u in order:
                if self._match_left[u] is None and self._augment(u, seen):
                    progress = True
        return sum(1 for v in self._match_left[1:] if v is not None)

    def partner(self, u):
        """Right vertex matched to left vertex ``u``, or None."""
        if not 1 <= u <= self.left:
            raise IndexError(f"vertex {u} is out of range")
        return self._match_left[u]


def count_replaceable_edges(n, edges):
    """Edges of a bipartite graph that are absent from some perfect matching.

    Both sides hold vertices 1..n; ``edges`` lists ``(left, right)`` pairs
    and must admit a perfect matching.
    """
    edges = [tuple(edge) for edge in edges]
    matcher = Kuhn(n, n)
    for u, v in edges:
        matcher.add_edge(u, v)
    if matcher.maximum_matching() != n:
        raise ValueError("graph has no perfect matching")
    graph = [[] for _ in range(2 * n)]
    unmatched = Counter(edges)
    matched = []
    for u in range(1, n + 1):
        v = matcher.partner(u)
        matched.append((u, v))
        unmatched[(u, v)] -= 1
        graph[u - 1].append(n + v - 1)
    for (u, v), copies in unmatched.items():
        graph[n + v - 1].extend([u - 1] * copies)
    component = _strong_components(graph)
    replaceable = sum(component[u - 1] == component[n + v - 1] for u, v in matched)
    return len(edges) - n + replaceable