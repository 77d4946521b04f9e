"""Strongly connected components and dynamic programming on the condensation."""

from algokit.two_sat import _strong_components


class SCC:
    """Directed graph on vertices 0..n-1 split into strongly connected components.

    Components are numbered in topological order of the condensed graph, so an
    edge between two components always leads to a higher number.
    """

    def __init__(self, n):
        if n < 0:
            raise ValueError("number of vertices must be non-negative")
        self._graph = [[] for _ in range(n)]

    def __len__(self):
        return len(self._graph)

    def add_vertex(self):
        """Add a vertex and return its index."""
        self._graph.append([])
        return len(self._graph) - 1

    def add_edge(self, start, end):
        n = len(self._graph)
        if not (0 <= start < n and 0 <= end < n):
            raise IndexError(f"edge ({start}, {end}) is out of range")
        self._graph[start].append(end)

    def component_ids(self):
        """Component number of every vertex."""
        return _strong_components(self._graph)

    def components(self):
        """Vertices of each component, ascending, in topological order."""
        ids = self.component_ids()
        groups = [[] for _ in range(max(ids, default=-1) + 1)]
        for vertex, component in enumerate(ids):
            groups[component].append(vertex)
        return groups


def _build(n, edges):
    graph = SCC(n)
    pairs = []
    for a, b in edges:
        if not (1 <= a <= n and 1 <= b <= n):
            raise ValueError(f"edge ({a}, {b}) is outside 1..{n}")
        graph.add_edge(a - 1, b - 1)
        pairs.append((a - 1, b - 1))
    return graph, pairs


def min_edges_to_strongly_connect(n, edges):
    """Fewest edges to add so the directed graph on 1..n is strongly connected."""
    if n < 0:
        raise ValueError("number of vertices must be non-negative")
    graph, pairs = _build(n, edges)
    ids = graph.component_ids()
    count = max(ids, default=-1) + 1
    if count <= 1:
        return 0
    has_in = [False] * count
    has_out = [False] * count
    for a, b in pairs:
        if ids[a] != ids[b]:
            has_out[ids[a]] = True
            has_in[ids[b]] = True
    return max(has_in.count(False), has_out.count(False))


def longest_path_min_weight(values, edges):
    """Most vertices visitable along one walk, and the least total value doing so.

    Vertex i (1-based) carries ``values[i - 1]``; ``edges`` are directed pairs.
    Returns ``(count, weight)``.
    """
    values = list(values)
    n = len(values)
    graph, pairs = _build(n, edges)
    ids = graph.component_ids()
    count = max(ids, default=-1) + 1
    size = [0] * count
    weight = [0] * count
    for vertex, component in enumerate(ids):
        size[component] += 1
        weight[component] += values[vertex]
    predecessors = [[] for _ in range(count)]
    for a, b in pairs:
        if ids[a] != ids[b]:
            predecessors[ids[b]].append(ids[a])
    best = []
    for component in range(count):
        best_size, best_weight = size[component], weight[component]
        for p in predecessors[component]:
            cand_size = best[p][0] + size[component]
            cand_weight = best[p][1] + weight[component]
            if cand_size > best_size or (cand_size == best_size and cand_weight < best_weight):
                best_size, best_weight = cand_size, cand_weight
        best.append((best_size, best_weight))
    if not best:
        return 0, 0
    top = max(s for s, _ in best)
    return top, min(w for s, w in best if s == top)