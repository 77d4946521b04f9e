"""Centroids of trees and path counting by centroid decomposition."""

from collections import deque


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


def _rooted(adj, root, removed=None):
    """BFS order and parents of the part containing ``root``."""
    parent = {root: 0}
    order = [root]
    for u in order:
        for v in adj[u]:
            if v != parent[u] and (removed is None or not removed[v]):
                if v in parent:
                    raise ValueError("edges do not form a tree")
                parent[v] = u
                order.append(v)
    return order, parent


def _sizes(adj, order, parent, removed=None):
    size = {u: 1 for u in order}
    for u in reversed(order):
        if parent[u]:
            size[parent[u]] += size[u]
    return size


def _tree_parts(n, edges):
    adj = _adjacency(n, edges)
    order, parent = _rooted(adj, 1)
    if len(order) != n:
        raise ValueError("edges do not form a connected tree")
    return adj, order, parent, _sizes(adj, order, parent)


def find_centroid(n, edges):
    """A vertex of the tree on 1..n whose removal leaves parts of size <= n // 2."""
    adj, _, parent, size = _tree_parts(n, edges)
    node = 1
    while True:
        for v in adj[node]:
            if v != parent[node] and size[v] > n // 2:
                node = v
                break
        else:
            return node


def find_centroids(n, edges):
    """All centroids (one or two), ascending."""
    adj, _, parent, size = _tree_parts(n, edges)
    heaviest = {}
    for u in range(1, n + 1):
        parts = [size[v] for v in adj[u] if v != parent[u]]
        parts.append(n - size[u])
        heaviest[u] = max(parts)
    best = min(heaviest.values())
    return [u for u in range(1, n + 1) if heaviest[u] == best]


def _centroid_of(adj, removed, start):
    order, parent = _rooted(adj, start, removed)
    size = _sizes(adj, order, parent)
    total = len(order)
    node = start
    while True:
        for v in adj[node]:
            if not removed[v] and v != parent[node] and size[v] > total // 2:
                node = v
                break
        else:
            return node


def _depths(adj, removed, start, origin, limit):
    found = []
    queue = deque([(start, origin, 1)])
    while queue:
        u, p, d = queue.popleft()
        if d > limit:
            continue
        found.append(d)
        for v in adj[u]:
            if v != p and not removed[v]:
                queue.append((v, u, d + 1))
    return found


def count_paths_of_length(n, edges, k):
    """Number of unordered vertex pairs of the tree exactly ``k`` edges apart."""
    if k < 1:
        raise ValueError("k must be positive")
    adj, order, _, _ = _tree_parts(n, edges)
    removed = [False] * (n + 1)
    total = 0
    pending = [1]
    while pending:
        centroid = _centroid_of(adj, removed, pending.pop())
        removed[centroid] = True
        counts = [1]
        for nb in adj[centroid]:
            if removed[nb]:
                continue
            depths = _depths(adj, removed, nb, centroid, k)
            total += sum(counts[k - d] for d in depths if k - d < len(counts))
            for d in depths:
                if d >= len(counts):
                    counts.extend([0] * (d + 1 - len(counts)))
                counts[d] += 1
        pending.extend(nb for nb in adj[centroid] if not removed[nb])
    return total