"""2-SAT via strongly connected components of the implication graph."""


def _strong_components(adjacency):
    """Kosaraju labels; components are numbered in topological order."""
    n = len(adjacency)
    seen = [False] * n
    order = []
    for start in range(n):
        if seen[start]:
            continue
        seen[start] = True
        stack = [(start, iter(adjacency[start]))]
        while stack:
            vertex, neighbours = stack[-1]
            for nxt in neighbours:
                if not seen[nxt]:
                    seen[nxt] = True
                    stack.append((nxt, iter(adjacency[nxt])))
                    break
            else:
                stack.pop()
                order.append(vertex)
    reverse = [[] for _ in range(n)]
    for vertex, neighbours in enumerate(adjacency):
        for nxt in neighbours:
            reverse[nxt].append(vertex)
    component = [-1] * n
    label = 0
    for start in reversed(order):
        if component[start] != -1:
            continue
        component[start] = label
        stack = [start]
        while stack:
            vertex = stack.pop()
            for nxt in reverse[vertex]:
                if component[nxt] == -1:
                    component[nxt] = label
                    stack.append(nxt)
        label += 1
    return component


class TwoSat:
    """Conjunction of two-literal clauses over variables 0..variables-1."""

    def __init__(self, variables):
        if variables < 0:
            raise ValueError("number of variables must be non-negative")
        self.variables = variables
        self._graph = [[] for _ in range(2 * variables)]

    def _literal(self, var, value):
        if not 0 <= var < self.variables:
            raise IndexError(f"variable {var} is out of range")
        return 2 * var + (0 if value else 1)

    def add_or(self, a, a_value, b, b_value):
        """Require (a == a_value) or (b == b_value)."""
        x = self._literal(a, a_value)
        y = self._literal(b, b_value)
        self._graph[x ^ 1].append(y)
        self._graph[y ^ 1].append(x)

    def add_xor(self, a, a_value, b, b_value):
        """Require exactly one of (a == a_value) and (b == b_value)."""
        self.add_or(a, a_value, b, b_value)
        self.add_or(a, not a_value, b, not b_value)

    def add_implication(self, a, a_value, b, b_value):
        """Require that a == a_value forces b == b_value."""
        x = self._literal(a, a_value)
        y = self._literal(b, b_value)
        self._graph[x].append(y)
        self._graph[y ^ 1].append(x ^ 1)

    def solve(self):
        """A satisfying assignment as a list of bools, or None."""
        component = _strong_components(self._graph)
        assignment = []
        for var in range(self.variables):
            true_side, false_side = component[2 * var], component[2 * var + 1]
            if true_side == false_side:
                return None
            assignment.append(true_side > false_side)
        return assignment


def assign_with_parity(n, constraints):
    """Choose a subset of 1..n meeting equality constraints.

    Each ``(u, v, same)`` requires u and v to be both chosen or both left
    out when ``same`` is true, and exactly one chosen otherwise. Returns the
    sorted chosen vertices, or None if impossible.
    """
    sat = TwoSat(n)
    for u, v, same in constraints:
        if not (1 <= u <= n and 1 <= v <= n):
            raise ValueError(f"constraint ({u}, {v}) is outside 1..{n}")
        u, v = u - 1, v - 1
        if same:
            sat.add_implication(u, False, v, False)
            sat.add_implication(u, True, v, True)
            sat.add_implication(v, False, u, False)
            sat.add_implication(v, True, u, True)
        else:
            sat.add_implication(u, False, v, True)
            sat.add_implication(u, True, v, False)
            sat.add_implication(v, False, u, True)
            sat.add_implication(v, True, u, False)
    assignment = sat.solve()
    if assignment is None:
        return None
    return [i + 1 for i, chosen in enumerate(assignment) if chosen]