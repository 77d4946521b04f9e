"""Tree shapes: mirror symmetry of rooted trees and isomorphism of free trees."""

from collections import Counter, deque


def _adjacency(n, edges):
    if n < 1:
        raise ValueError("a tree needs at least one vertex")
    edges = list(edges)
    if len(edges) != n - 1:
        raise ValueError("a tree on n vertices has n - 1 edges")
    adj = [[] for _ in range(n + 1)]
    for u, v in edges:
        if not (1 <= u <= n and 1 <= v <= n):
            raise ValueError(f"edge ({u}, {v}) is outside 1..{n}")
        adj[u].append(v)
        adj[v].append(u)
    return adj


def _traverse(adj, root):
    parent = [0] * len(adj)
    seen = [False] * len(adj)
    seen[root] = True
    order = [root]
    for u in order:
        for v in adj[u]:
            if not seen[v]:
                seen[v] = True
                parent[v] = u
                order.append(v)
    if len(order) != len(adj) - 1:
        raise ValueError("edges do not form a connected tree")
    return order, parent


def _distances(adj, source):
    dist = [-1] * len(adj)
    dist[source] = 0
    queue = deque([source])
    while queue:
        u = queue.popleft()
        for v in adj[u]:
            if dist[v] == -1:
                dist[v] = dist[u] + 1
                queue.append(v)
    return dist


def is_symmetric(n, edges):
    """Whether the tree rooted at vertex 1 equals its own mirror image."""
    adj = _adjacency(n, edges)
    order, parent = _traverse(adj, 1)
    table = {}
    symmetric = []
    shape = [0] * (n + 1)
    for u in reversed(order):
        kids = tuple(sorted(shape[v] for v in adj[u] if v != parent[u]))
        if kids not in table:
            odd = [t for t, c in Counter(kids).items() if c % 2]
            symmetric.append(len(odd) <= 1 and all(symmetric[t] for t in odd))
            table[kids] = len(table)
        shape[u] = table[kids]
    return symmetric[shape[1]]


def _centers(adj):
    n = len(adj) - 1
    from_one = _distances(adj, 1)
    v = max(range(1, n + 1), key=lambda i: from_one[i])
    from_v = _distances(adj, v)
    u = max(range(1, n + 1), key=lambda i: from_v[i])
    from_u = _distances(adj, u)
    length = from_u[v]
    return [
        i
        for i in range(1, n + 1)
        if from_u[i] + from_v[i] == length
        and from_u[i] >= length // 2
        and from_v[i] >= length // 2
    ]


def tree_centers(n, edges):
    """Vertices of least eccentricity (one or two), ascending."""
    adj = _adjacency(n, edges)
    _traverse(adj, 1)
    return _centers(adj)


def _shape(adj, root, table):
    order, parent = _traverse(adj, root)
    shape = [0] * len(adj)
    for u in reversed(order):
        kids = tuple(sorted(shape[v] for v in adj[u] if v != parent[u]))
        shape[u] = table.setdefault(kids, len(table))
    return shape[root]


def are_isomorphic(n, edges_a, edges_b):
    """Whether two trees on 1..n have the same shape up to relabelling."""
    adj_a = _adjacency(n, edges_a)
    adj_b = _adjacency(n, edges_b)
    _traverse(adj_a, 1)
    _traverse(adj_b, 1)
    table = {}
    shapes_a = {_shape(adj_a, c, table) for c in _centers(adj_a)}
    shapes_b = {_shape(adj_b, c, table) for c in _centers(adj_b)}
    return not shapes_a.isdisjoint(shapes_b)