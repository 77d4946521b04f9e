"""Counting simple paths from a fixed start vertex."""

DEFAULT_LIMIT = 1_000_000


def count_simple_paths(n, edges, limit=DEFAULT_LIMIT):
    """Simple paths in an undirected graph on 1..n that start at vertex 1.

    The single-vertex path counts. Counting stops once ``limit`` is reached,
    which is then returned.
    """
    if n < 1:
        raise ValueError("graph must have at least one vertex")
    if limit < 1:
        raise ValueError("limit must be positive")
    adjacency = [[] for _ in range(n + 1)]
    for u, v in edges:
        if not (1 <= u <= n and 1 <= v <= n):
            raise ValueError(f"edge ({u}, {v}) is outside 1..{n}")
        adjacency[u].append(v)
        adjacency[v].append(u)
    visited = [False] * (n + 1)
    visited[1] = True
    count = 1
    if count >= limit:
        return count
    path = [1]
    stack = [iter(adjacency[1])]
    while stack:
        for v in stack[-1]:
            if not visited[v]:
                visited[v] = True
                count += 1
                if count >= limit:
                    return count
                path.append(v)
                stack.append(iter(adjacency[v]))
                break
        else:
            stack.pop()
            visited[path.pop()] = False
    return count