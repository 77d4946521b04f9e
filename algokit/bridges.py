"""Bridges and articulation points of undirected graphs."""


def _checked(n, adjacency):
    adjacency = [list(neighbours) for neighbours in adjacency]
    if len(adjacency) != n:
        raise ValueError("adjacency must list every vertex")
    for neighbours in adjacency:
        for v in neighbours:
            if not 0 <= v < n:
                raise IndexError(f"vertex {v} is out of range")
    return adjacency


def _low_links(n, adjacency):
    adjacency = _checked(n, adjacency)
    tin = [-1] * n
    low = [-1] * n
    timer = 0
    bridges = []
    cut_points = set()
    for root in range(n):
        if tin[root] != -1:
            continue
        tin[root] = low[root] = timer
        timer += 1
        children = 0
        stack = [(root, -1, iter(adjacency[root]))]
        while stack:
            v, parent, neighbours = stack[-1]
            descended = False
            for to in neighbours:
                if to == parent:
                    continue
                if tin[to] != -1:
                    low[v] = min(low[v], tin[to])
                else:
                    tin[to] = low[to] = timer
                    timer += 1
                    stack.append((to, v, iter(adjacency[to])))
                    descended = True
                    break
            if descended:
                continue
            stack.pop()
            if not stack:
                continue
            up, up_parent, _ = stack[-1]
            low[up] = min(low[up], low[v])
            if low[v] > tin[up]:
                bridges.append((up, v))
            if low[v] >= tin[up] and up_parent != -1:
                cut_points.add(up)
            if up == root:
                children += 1
        if children > 1:
            cut_points.add(root)
    return bridges, cut_points


def find_bridges(n, adjacency):
    """Bridges of the graph on 0..n-1 as ``(parent, child)`` pairs of the DFS tree."""
    return _low_links(n, adjacency)[0]


def find_articulation_points(n, adjacency):
    """Articulation points of the graph on 0..n-1, ascending."""
    return sorted(_low_links(n, adjacency)[1])