"""Diameters and eccentricity-based profits on trees."""

from collections import deque


def _tree(n, edges):
    if n < 1:
        raise ValueError("a tree needs at least one vertex")
    edges = list(edges)
    if len(edges) != n - 1:
        raise ValueError("a tree on n vertices has n - 1 edges")
    adjacency = [[] for _ in range(n + 1)]
    for u, v in edges:
        if not (1 <= u <= n and 1 <= v <= n):
            raise ValueError(f"edge ({u}, {v}) is outside 1..{n}")
        adjacency[u].append(v)
        adjacency[v].append(u)
    if any(d is None for d in _distances(adjacency, 1)[1:]):
        raise ValueError("edges do not form a connected tree")
    return adjacency


def _distances(adjacency, source):
    dist = [None] * len(adjacency)
    dist[source] = 0
    queue = deque([source])
    while queue:
        u = queue.popleft()
        for v in adjacency[u]:
            if dist[v] is None:
                dist[v] = dist[u] + 1
                queue.append(v)
    return dist


def _farthest(dist):
    return max(range(1, len(dist)), key=lambda v: dist[v])


def tree_diameter(n, edges, root=1):
    """Number of edges on the longest path of the tree on 1..n."""
    adjacency = _tree(n, edges)
    if not 1 <= root <= n:
        raise ValueError(f"root {root} is outside 1..{n}")
    end = _farthest(_distances(adjacency, root))
    return max(_distances(adjacency, end)[1:])


def best_root_profit(n, edges, k, c):
    """Best value of ``k * height - c * shift`` over all choices of root.

    Moving the root from vertex 1 to a vertex at depth d costs ``c * d``;
    the height is the longest distance from the new root. The result is at
    least zero.
    """
    adjacency = _tree(n, edges)
    depth = _distances(adjacency, 1)
    a = _farthest(depth)
    from_a = _distances(adjacency, a)
    b = _farthest(from_a)
    from_b = _distances(adjacency, b)
    best = 0
    for v in range(1, n + 1):
        height = max(from_a[v], from_b[v])
        best = max(best, height * k - c * depth[v])
    return best