"""Eulerian paths in directed and undirected graphs."""


def _check_vertex(vertex, n):
    if not 1 <= vertex <= n:
        raise ValueError(f"vertex {vertex} is outside 1..{n}")


def euler_path_directed(n, edges):
    """A walk over vertices 1..n using every directed edge once, or None.

    Returns an empty list when there are no edges.
    """
    adjacency = [[] for _ in range(n + 1)]
    indeg = [0] * (n + 1)
    outdeg = [0] * (n + 1)
    count = 0
    for u, v in edges:
        _check_vertex(u, n)
        _check_vertex(v, n)
        adjacency[u].append(v)
        outdeg[u] += 1
        indeg[v] += 1
        count += 1
    starts = ends = 0
    root = 0
    for i in range(1, n + 1):
        diff = indeg[i] - outdeg[i]
        if abs(diff) > 1:
            return None
        if diff == 1:
            ends += 1
        elif diff == -1:
            starts += 1
            root = i
    if starts > 1 or ends > 1:
        return None
    if root == 0:
        root = max((i for i in range(1, n + 1) if outdeg[i]), default=0)
    if root == 0:
        return []
    pointer = [0] * (n + 1)
    stack = [root]
    path = []
    while stack:
        u = stack[-1]
        if pointer[u] < len(adjacency[u]):
            stack.append(adjacency[u][pointer[u]])
            pointer[u] += 1
        else:
            path.append(stack.pop())
    if len(path) != count + 1:
        return None
    path.reverse()
    return path


def _walk(adjacency, used, pointer, root):
    stack = [root]
    path = []
    while stack:
        u = stack[-1]
        neighbours = adjacency[u]
        while pointer[u] < len(neighbours) and used[neighbours[pointer[u]][1]]:
            pointer[u] += 1
        if pointer[u] < len(neighbours):
            v, edge_id = neighbours[pointer[u]]
            pointer[u] += 1
            used[edge_id] = True
            stack.append(v)
        else:
            path.append(stack.pop())
    path.reverse()
    return path


def _undirected(size, n, edges):
    adjacency = [[] for _ in range(size + 1)]
    count = 0
    for u, v in edges:
        _check_vertex(u, n)
        _check_vertex(v, n)
        adjacency[u].append((v, count))
        adjacency[v].append((u, count))
        count += 1
    return adjacency, count


def euler_path_undirected(n, edges):
    """A walk over vertices 1..n using every undirected edge once, or None.

    Returns an empty list when there are no edges.
    """
    adjacency, count = _undirected(n, n, edges)
    degree = [len(neighbours) for neighbours in adjacency]
    odd = [i for i in range(1, n + 1) if degree[i] % 2]
    if len(odd) > 2:
        return None
    if odd:
        root = odd[-1]
    else:
        root = max((i for i in range(1, n + 1) if degree[i]), default=0)
    if root == 0:
        return []
    path = _walk(adjacency, [False] * count, [0] * (n + 1), root)
    if len(path) != count + 1:
        return None
    return path


def orient_for_balance(n, edges):
    """Orient every edge to maximise vertices whose in-degree equals out-degree.

    Returns ``(balanced, oriented)`` where ``oriented`` lists each edge once as
    a directed ``(u, v)`` pair.
    """
    dummy = n + 1
    adjacency, count = _undirected(dummy, n, edges)
    for vertex in range(1, n + 1):
        if len(adjacency[vertex]) % 2:
            adjacency[vertex].append((dummy, count))
            adjacency[dummy].append((vertex, count))
            count += 1
    used = [False] * count
    pointer = [0] * (dummy + 1)
    oriented = []
    for root in range(dummy, 0, -1):
        path = _walk(adjacency, used, pointer, root)
        oriented.extend(
            (u, v) for u, v in zip(path, path[1:]) if u != dummy and v != dummy
        )
    indeg = [0] * (n + 1)
    outdeg = [0] * (n + 1)
    for u, v in oriented:
        outdeg[u] += 1
        indeg[v] += 1
    balanced = sum(indeg[i] == outdeg[i] for i in range(1, n + 1))
    return balanced, oriented