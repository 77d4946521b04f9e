"""Heavy-light decomposition for path maximum queries with point updates."""

_NEG = float("-inf")


class HeavyLight:
    """Tree on vertices 1..n carrying values; ``values[i]`` belongs to vertex i + 1."""

    def __init__(self, values, edges):
        values = list(values)
        n = len(values)
        if n < 1:
            raise ValueError("a tree needs at least one vertex")
        edges = list(edges)
        if len(edges) != n - 1:
            raise ValueError("a tree on n vertices has n - 1 edges")
        self.n = n
        adj = [[] for _ in range(n + 1)]
        for u, v in edges:
            if not (1 <= u <= n and 1 <= v <= n):
                raise ValueError(f"edge ({u}, {v}) is outside 1..{n}")
            adj[u].append(v)
            adj[v].append(u)
        parent = [0] * (n + 1)
        depth = [0] * (n + 1)
        seen = [False] * (n + 1)
        seen[1] = True
        order = [1]
        stack = [1]
        while stack:
            u = stack.pop()
            for v in adj[u]:
                if not seen[v]:
                    seen[v] = True
                    parent[v] = u
                    depth[v] = depth[u] + 1
                    order.append(v)
                    stack.append(v)
        if len(order) != n:
            raise ValueError("edges do not form a connected tree")
        size = [1] * (n + 1)
        heavy = [0] * (n + 1)
        for u in reversed(order):
            p = parent[u]
            if p:
                size[p] += size[u]
                if heavy[p] == 0 or size[heavy[p]] < size[u]:
                    heavy[p] = u
        head = [0] * (n + 1)
        pos = [0] * (n + 1)
        counter = 0
        chains = [1]
        while chains:
            top = chains.pop()
            v = top
            while v:
                head[v] = top
                pos[v] = counter
                counter += 1
                chains.extend(c for c in adj[v] if c != parent[v] and c != heavy[v])
                v = heavy[v]
        self._parent = parent
        self._depth = depth
        self._head = head
        self._pos = pos
        self._tree = [_NEG] * (2 * n)
        for vertex in range(1, n + 1):
            self._tree[n + pos[vertex]] = values[vertex - 1]
        for i in range(n - 1, 0, -1):
            self._tree[i] = max(self._tree[2 * i], self._tree[2 * i + 1])

    def _check(self, node):
        if not 1 <= node <= self.n:
            raise IndexError(f"vertex {node} is outside 1..{self.n}")

    def _range_max(self, left, right):
        result = _NEG
        left += self.n
        right += self.n + 1
        while left < right:
            if left & 1:
                result = max(result, self._tree[left])
                left += 1
            if right & 1:
                right -= 1
                result = max(result, self._tree[right])
            left >>= 1
            right >>= 1
        return result

    def set_value(self, node, value):
        """Replace the value carried by ``node``."""
        self._check(node)
        i = self._pos[node] + self.n
        self._tree[i] = value
        i >>= 1
        while i:
            self._tree[i] = max(self._tree[2 * i], self._tree[2 * i + 1])
            i >>= 1

    def path_max(self, a, b):
        """Largest value on the path between ``a`` and ``b``, both included."""
        self._check(a)
        self._check(b)
        head, depth, pos = self._head, self._depth, self._pos
        best = _NEG
        while head[a] != head[b]:
            if depth[head[a]] < depth[head[b]]:
                a, b = b, a
            best = max(best, self._range_max(pos[head[a]], pos[a]))
            a = self._parent[head[a]]
        if depth[a] > depth[b]:
            a, b = b, a
        return max(best, self._range_max(pos[a], pos[b]))