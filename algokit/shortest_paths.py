"""Shortest paths with 0/1 weights and with negative weights."""

from collections import deque


def zero_one_bfs(n, adjacency, source):
    """Distances from ``source`` where every edge weighs 0 or 1.

    ``adjacency[v]`` lists ``(u, w)`` pairs. Unreachable vertices get None.
    """
    if len(adjacency) != n:
        raise ValueError("adjacency must list every vertex")
    if not 0 <= source < n:
        raise IndexError(f"source {source} is out of range")
    dist = [None] * n
    dist[source] = 0
    queue = deque([source])
    while queue:
        v = queue.popleft()
        for u, w in adjacency[v]:
            if w not in (0, 1):
                raise ValueError(f"edge weight {w} is not 0 or 1")
            candidate = dist[v] + w
            if dist[u] is None or candidate < dist[u]:
                dist[u] = candidate
                if w == 0:
                    queue.appendleft(u)
                else:
                    queue.append(u)
    return dist


def switch_dungeon_distance(n, edges, switches):
    """Fewest moves from vertex 1 to vertex n in a dungeon with switches.

    An edge ``(u, v, a)`` is open in the initial state when ``a`` is 1 and in
    the flipped state when ``a`` is 0. Pressing the switch at a vertex costs
    nothing and flips the state. Returns None if vertex n cannot be reached.
    """
    adjacency = [[] for _ in range(2 * n)]

    def check(vertex):
        if not 1 <= vertex <= n:
            raise ValueError(f"vertex {vertex} is outside 1..{n}")
        return vertex - 1

    for u, v, a in edges:
        u, v = check(u), check(v)
        offset = 0 if a else n
        adjacency[u + offset].append((v + offset, 1))
        adjacency[v + offset].append((u + offset, 1))
    for s in switches:
        s = check(s)
        adjacency[s].append((s + n, 0))
        adjacency[s + n].append((s, 0))
    dist = zero_one_bfs(2 * n, adjacency, 0)
    reached = [d for d in (dist[n - 1], dist[2 * n - 1]) if d is not None]
    return min(reached, default=None)


def min_path_weight(n, edges):
    """Smallest total weight of any path in a directed graph on 1..n.

    A single edge counts as a path. With no negative edges this is the
    lightest edge; a reachable negative cycle gives minus infinity.
    """
    edges = list(edges)
    if not edges:
        raise ValueError("graph has no edges")
    adjacency = [[] for _ in range(n + 1)]
    for u, v, w in edges:
        if not (1 <= u <= n and 1 <= v <= n):
            raise ValueError(f"edge ({u}, {v}) is outside 1..{n}")
        adjacency[u].append((v, w))
    lightest = min(w for _, _, w in edges)
    if lightest >= 0:
        return lightest
    dist = [0] * (n + 1)
    hops = [0] * (n + 1)
    queue = deque(range(1, n + 1))
    queued = [False] + [True] * n
    while queue:
        u = queue.popleft()
        queued[u] = False
        for v, w in adjacency[u]:
            if dist[u] + w < dist[v]:
                dist[v] = dist[u] + w
                hops[v] = hops[u] + 1
                if hops[v] >= n:
                    return float("-inf")
                if not queued[v]:
                    queued[v] = True
                    queue.append(v)
    return min(dist[1:])