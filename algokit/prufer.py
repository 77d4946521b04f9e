"""Prufer codes of labelled trees on vertices 0..n-1."""


def prufer_code(n, edges):
    """Prufer sequence (length n - 2) of the tree on 0..n-1."""
    if n < 2:
        raise ValueError("a Prufer code needs at least two vertices")
    edges = list(edges)
    if len(edges) != n - 1:
        raise ValueError("a tree on n vertices has n - 1 edges")
    adj = [[] for _ in range(n)]
    for u, v in edges:
        if not (0 <= u < n and 0 <= v < n):
            raise ValueError(f"edge ({u}, {v}) is outside 0..{n - 1}")
        adj[u].append(v)
        adj[v].append(u)
    parent = [-1] * n
    seen = [False] * n
    seen[n - 1] = True
    stack = [n - 1]
    reached = 1
    while stack:
        u = stack.pop()
        for v in adj[u]:
            if not seen[v]:
                seen[v] = True
                parent[v] = u
                reached += 1
                stack.append(v)
    if reached != n:
        raise ValueError("edges do not form a connected tree")
    degree = [len(neighbours) for neighbours in adj]
    ptr = next(i for i in range(n) if degree[i] == 1)
    leaf = ptr
    code = []
    for _ in range(n - 2):
        nxt = parent[leaf]
        code.append(nxt)
        degree[nxt] -= 1
        if degree[nxt] == 1 and nxt < ptr:
            leaf = nxt
        else:
            ptr += 1
            while ptr < n and degree[ptr] != 1:
                ptr += 1
            leaf = ptr
    return code


def tree_from_prufer(code):
    """Edges of the tree on 0..len(code)+1 with the given Prufer code."""
    code = list(code)
    n = len(code) + 2
    degree = [1] * n
    for v in code:
        if not 0 <= v < n:
            raise ValueError(f"code entry {v} is outside 0..{n - 1}")
        degree[v] += 1
    ptr = 0
    while ptr < n and degree[ptr] != 1:
        ptr += 1
    leaf = ptr
    edges = []
    for v in code:
        edges.append((leaf, v))
        degree[leaf] -= 1
        degree[v] -= 1
        if degree[v] == 1 and v < ptr:
            leaf = v
        else:
            ptr += 1
            while ptr < n and degree[ptr] != 1:
                ptr += 1
            leaf = ptr
    edges.extend((v, n - 1) for v in range(n - 1) if degree[v] == 1)
    return edges