"""Cycles in functional graphs, where every vertex has exactly one successor."""


def _zero_based(successors):
    successors = list(successors)
    n = len(successors)
    for s in successors:
        if not 1 <= s <= n:
            raise ValueError(f"successor {s} is outside 1..{n}")
    return [s - 1 for s in successors]


def count_cycles(successors):
    """Number of cycles; ``successors[i]`` is the successor of vertex i + 1."""
    nxt = _zero_based(successors)
    state = [0] * len(nxt)
    cycles = 0
    for start in range(len(nxt)):
        if state[start]:
            continue
        path = []
        u = start
        while not state[u]:
            state[u] = 1
            path.append(u)
            u = nxt[u]
        if state[u] == 1:
            cycles += 1
        for v in path:
            state[v] = 2
    return cycles


def cycle_representatives(successors):
    """For each vertex, the first cycle vertex reached by following successors.

    Vertices are 1-based; a vertex on a cycle is its own representative.
    """
    nxt = _zero_based(successors)
    n = len(nxt)
    children = [[] for _ in range(n)]
    for vertex, successor in enumerate(nxt):
        children[successor].append(vertex)
    rep = [-1] * n
    for start in range(n):
        if rep[start] != -1:
            continue
        x = y = start
        while True:
            x = nxt[x]
            y = nxt[nxt[y]]
            if x == y:
                break
        while True:
            rep[x] = x
            x = nxt[x]
            if x == y:
                break
        while True:
            stack = [x]
            while stack:
                u = stack.pop()
                for child in children[u]:
                    if rep[child] == -1:
                        rep[child] = rep[u]
                        stack.append(child)
            x = nxt[x]
            if x == y:
                break
    return [r + 1 for r in rep]