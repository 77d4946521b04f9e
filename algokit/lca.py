"""Rooted trees with binary lifting: depths, ancestors and lowest common ancestors."""


class Tree:
    """Tree on vertices 1..n answering ancestor queries after ``build``."""

    def __init__(self, n):
        if n < 1:
            raise ValueError("a tree needs at least one vertex")
        self.n = n
        self._adj = [[] for _ in range(n + 1)]
        self._edges = 0
        self._built = False
        self._root = None
        self._depth = []
        self._size = []
        self._up = []

    def _check_vertex(self, u):
        if not 1 <= u <= self.n:
            raise IndexError(f"vertex {u} is outside 1..{self.n}")

    def _require_built(self):
        if not self._built:
            raise RuntimeError("call build() before querying the tree")

    def add_edge(self, u, v):
        """Join vertices ``u`` and ``v``."""
        self._check_vertex(u)
        self._check_vertex(v)
        self._adj[u].append(v)
        self._adj[v].append(u)
        self._edges += 1
        self._built = False

    def build(self, root=1):
        """Root the tree at ``root`` and prepare the lifting tables."""
        self._check_vertex(root)
        if self._edges != self.n - 1:
            raise ValueError("a tree on n vertices has n - 1 edges")
        depth = [0] * (self.n + 1)
        parent = [0] * (self.n + 1)
        seen = [False] * (self.n + 1)
        parent[root] = root
        seen[root] = True
        order = [root]
        stack = [root]
        while stack:
            u = stack.pop()
            for v in self._adj[u]:
                if not seen[v]:
                    seen[v] = True
                    parent[v] = u
                    depth[v] = depth[u] + 1
                    order.append(v)
                    stack.append(v)
        if len(order) != self.n:
            raise ValueError("edges do not form a connected tree")
        size = [1] * (self.n + 1)
        for u in reversed(order):
            if u != root:
                size[parent[u]] += size[u]
        levels = max(1, self.n.bit_length())
        up = [parent]
        for _ in range(1, levels):
            prev = up[-1]
            up.append([prev[prev[v]] for v in range(self.n + 1)])
        self._root = root
        self._depth = depth
        self._size = size
        self._up = up
        self._built = True

    def depth(self, u):
        """Edges between ``u`` and the root."""
        self._require_built()
        self._check_vertex(u)
        return self._depth[u]

    def subtree_size(self, u):
        """Vertices in the subtree rooted at ``u``."""
        self._require_built()
        self._check_vertex(u)
        return self._size[u]

    def _lift(self, u, k):
        j = 0
        while k:
            if k & 1:
                u = self._up[j][u]
            k >>= 1
            j += 1
        return u

    def lca(self, a, b):
        """Lowest common ancestor of ``a`` and ``b``."""
        self._require_built()
        self._check_vertex(a)
        self._check_vertex(b)
        if self._depth[a] < self._depth[b]:
            a, b = b, a
        a = self._lift(a, self._depth[a] - self._depth[b])
        if a == b:
            return a
        for table in reversed(self._up):
            if table[a] != table[b]:
                a, b = table[a], table[b]
        return self._up[0][a]

    def dist(self, a, b):
        """Edges on the path between ``a`` and ``b``."""
        top = self.lca(a, b)
        return self._depth[a] + self._depth[b] - 2 * self._depth[top]

    def kth_ancestor(self, u, k):
        """The ancestor ``k`` levels above ``u``, or None past the root."""
        self._require_built()
        self._check_vertex(u)
        if k < 0:
            raise ValueError("k must be non-negative")
        if k > self._depth[u]:
            return None
        return self._lift(u, k)

    def kth_on_path(self, u, v, k):
        """The vertex ``k`` steps from ``u`` along the path to ``v``."""
        top = self.lca(u, v)
        length = self._depth[u] + self._depth[v] - 2 * self._depth[top]
        if not 0 <= k <= length:
            raise ValueError(f"step {k} is outside 0..{length}")
        if k <= self._depth[u] - self._depth[top]:
            return self._lift(u, k)
        return self._lift(v, length - k)


def kth_ancestors(parents, queries):
    """Answer ``(vertex, k)`` queries on a tree given by parent links.

    ``parents[i]`` is the parent of vertex ``i + 2``; vertex 1 is the root.
    Each answer is the k-th ancestor, or None if it does not exist.
    """
    parents = list(parents)
    n = len(parents) + 1
    base = [0, 0]
    for p in parents:
        if not 1 <= p <= n:
            raise ValueError(f"parent {p} is outside 1..{n}")
        base.append(p)
    levels = n.bit_length() + 1
    up = [base]
    for _ in range(1, levels):
        prev = up[-1]
        up.append([prev[prev[v]] for v in range(n + 1)])
    answers = []
    for vertex, k in queries:
        if not 1 <= vertex <= n:
            raise IndexError(f"vertex {vertex} is outside 1..{n}")
        if k < 0:
            raise ValueError("k must be non-negative")
        if k >= 1 << levels:
            answers.append(None)
            continue
        j = 0
        while k and vertex:
            if k & 1:
                vertex = up[j][vertex]
            k >>= 1
            j += 1
        answers.append(vertex or None)
    return answers