"""Dynamic programming over trees on vertices 1..n, rooted at vertex 1."""

MODULUS = 998244353


def _rooted(n, edges):
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
    parent = [0] * (n + 1)
    seen = [False] * (n + 1)
    seen[1] = True
    order = [1]
    for u in order:
        for v in adj[u]:
            if not seen[v]:
                seen[v] = True
                parent[v] = u
                order.append(v)
    if len(order) != n:
        raise ValueError("edges do not form a connected tree")
    return adj, order, parent


def shuffle_max_leaves(n, edges):
    """Most leaves obtainable by re-rooting the tree at its best vertex.

    Equals the largest independent set avoiding the chosen root, plus one
    when that root is itself a leaf.
    """
    adj, order, parent = _rooted(n, edges)
    take = [0] * (n + 1)
    skip = [0] * (n + 1)
    for u in reversed(order):
        with_u, without_u = 1, 0
        for v in adj[u]:
            if v != parent[u]:
                with_u += skip[v]
                without_u += max(take[v], skip[v])
        take[u], skip[u] = with_u, without_u
    full_take = [0] * (n + 1)
    full_skip = [0] * (n + 1)
    full_take[1], full_skip[1] = take[1], skip[1]
    best = 0
    for u in order:
        if u != 1:
            p = parent[u]
            up_take = full_take[p] - skip[u]
            up_skip = full_skip[p] - max(take[u], skip[u])
            full_take[u] = take[u] + up_skip
            full_skip[u] = skip[u] + max(up_take, up_skip)
        best = max(best, full_skip[u] + (len(adj[u]) == 1))
    return best


def count_good_paths(colors, edges):
    """Pairs of equal-coloured vertices with no vertex of that colour between them.

    ``colors[i]`` is the colour of vertex i + 1.
    """
    colors = list(colors)
    n = len(colors)
    adj, order, parent = _rooted(n, edges)
    maps = [None] * (n + 1)
    total = 0
    for u in reversed(order):
        own = colors[u - 1]
        children = [v for v in adj[u] if v != parent[u]]
        child_maps = [maps[v] for v in children]
        for visible in child_maps:
            total += visible.pop(own, 0)
        base = max(child_maps, key=len, default={})
        for visible in child_maps:
            if visible is base:
                continue
            for color, count in visible.items():
                present = base.get(color, 0)
                total += present * count
                base[color] = present + count
        base[own] = 1
        maps[u] = base
        for v in children:
            maps[v] = None
    return total


def count_connected_subsets(n, edges):
    """Non-empty connected vertex subsets, modulo 998244353."""
    adj, order, parent = _rooted(n, edges)
    dp = [0] * (n + 1)
    for u in reversed(order):
        value = 1
        for v in adj[u]:
            if v != parent[u]:
                value = value * (1 + dp[v]) % MODULUS
        dp[u] = value
    return sum(dp[1:]) % MODULUS


def _degree_table(n, edges, weighted):
    adj, order, parent = _rooted(n, edges)
    dp = [None] * (n + 1)
    for u in reversed(order):
        current = [1]
        for v in adj[u]:
            if v == parent[u]:
                continue
            child = dp[v]
            merged = [0] * (len(current) + 1)
            for d, x in enumerate(current):
                if not x:
                    continue
                for now, y in enumerate(child):
                    if not y:
                        continue
                    product = x * y % MODULUS
                    merged[d] = (merged[d] + product) % MODULUS
                    if weighted:
                        product = product * (d + 1) * (now + 1) % MODULUS
                    merged[d + 1] = (merged[d + 1] + product) % MODULUS
            current = merged
            dp[v] = None
        dp[u] = current
    return dp[1]


def degree_factorial_subgraph_sum(n, edges):
    """Sum over edge subsets of the product of degree factorials, mod 998244353."""
    return sum(_degree_table(n, edges, True)) % MODULUS


def spanning_subgraph_degree_counts(n, edges):
    """Entry d counts edge subsets in which vertex 1 has degree d, for d < n."""
    table = _degree_table(n, edges, False)
    return (table + [0] * n)[:n]