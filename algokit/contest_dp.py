"""Assorted search and dynamic programming solutions."""

import math
from collections import deque
from itertools import combinations

_DIRECTIONS = ((-1, 0), (0, 1), (1, 0), (0, -1))


def synchronized_players(grid):
    """Fewest joint moves bringing both players ``P`` onto one cell, or None.

    Each move pushes both players one step in the same direction; a player
    facing a wall ``#`` or the border stays put.
    """
    rows = [str(row) for row in grid]
    if not rows:
        raise ValueError("grid is empty")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("grid rows must have equal length")
    height = len(rows)
    players = [i * width + j for i, row in enumerate(rows) for j, ch in enumerate(row) if ch == "P"]
    if len(players) != 2:
        raise ValueError("grid must hold exactly two players")
    moves = []
    for cell in range(height * width):
        i, j = divmod(cell, width)
        targets = []
        for di, dj in _DIRECTIONS:
            ni, nj = i + di, j + dj
            if 0 <= ni < height and 0 <= nj < width and rows[ni][nj] != "#":
                targets.append(ni * width + nj)
            else:
                targets.append(cell)
        moves.append(targets)
    start = tuple(players)
    dist = {start: 0}
    queue = deque([start])
    while queue:
        x, y = state = queue.popleft()
        if x == y:
            return dist[state]
        for k in range(4):
            nxt = (moves[x][k], moves[y][k])
            if nxt not in dist:
                dist[nxt] = dist[state] + 1
                queue.append(nxt)
    return None


def max_matching_pairs(a, b, k):
    """Most index ranges where ``a`` and ``b`` agree after marking letters.

    Up to ``k`` distinct letters of ``a`` may be marked; a marked letter
    matches anything. Counts pairs (l, r) on which every position matches.
    """
    if len(a) != len(b):
        raise ValueError("strings must have equal length")
    if k < 0:
        raise ValueError("k must be non-negative")
    letters = sorted(set(a))
    best = 0
    for chosen in combinations(letters, min(k, len(letters))):
        marked = set(chosen)
        total = run = 0
        for x, y in zip(a, b):
            if x == y or x in marked:
                run += 1
            else:
                total += run * (run + 1) // 2
                run = 0
        total += run * (run + 1) // 2
        best = max(best, total)
    return best


def taming_herd(log):
    """Least log entries to change for each number of breakouts 1..n.

    ``log[i]`` claims the days since the last breakout; a breakout happened
    on day 0.
    """
    log = list(log)
    n = len(log)
    if n == 0:
        raise ValueError("log is empty")
    inf = math.inf
    prev = [[inf] * (n + 2)]
    prev[0][1] = 0 if log[0] == 0 else 1
    for i in range(1, n):
        best = [min(row[k] for row in prev) for k in range(n + 2)]
        current = [[inf] * (n + 2) for _ in range(i + 1)]
        for j in range(i + 1):
            for k in range(1, i + 2):
                value = prev[j][k] if j < i else best[k - 1]
                if log[i] != i - j:
                    value += 1
                current[j][k] = value
        prev = current
    return [int(min(row[k] for row in prev)) for k in range(1, n + 1)]


def work_or_rest(values):
    """Best total productivity over a circular week of ``len(values)`` days.

    A working day that is the x-th from one end of its streak yields
    ``values[x - 1]`` counted from the nearer end; at least one day rests.
    """
    values = list(values)
    n = len(values)
    if n == 0:
        raise ValueError("week is empty")
    streak = [0] * (n + 1)
    for i in range(1, n + 1):
        streak[i] = streak[i - 1] + values[(i + 1) // 2 - 1]
    row = [None] * (n + 1)
    row[0] = 0
    for _ in range(1, n):
        nxt = [None] * (n + 1)
        for j, value in enumerate(row):
            if value is None:
                continue
            if nxt[j + 1] is None or value > nxt[j + 1]:
                nxt[j + 1] = value
            rest = value + streak[j]
            if nxt[0] is None or rest > nxt[0]:
                nxt[0] = rest
        row = nxt
    return max((row[i] + streak[i] for i in range(n) if row[i] is not None), default=0)


def circular_barn(rooms, doors):
    """Least total walking for cows to fill a circular barn through ``doors`` doors.

    ``rooms[i]`` cows must end in room i; cows walk clockwise from a door.
    """
    rooms = list(rooms)
    n = len(rooms)
    if n == 0:
        raise ValueError("barn has no rooms")
    if not 1 <= doors <= n:
        raise ValueError(f"doors must lie in 1..{n}")
    inf = math.inf
    best = inf
    for start in range(n):
        order = rooms[start:] + rooms[:start]
        prev = [inf] * (n + 1)
        prev[n] = 0
        for _ in range(doors):
            current = [inf] * (n + 1)
            for i in range(n):
                partial = 0
                for j in range(i + 1, n + 1):
                    partial += order[j - 1] * (j - i - 1)
                    candidate = prev[j] + partial
                    if candidate < current[i]:
                        current[i] = candidate
            prev = current
        best = min(best, prev[0])
    return int(best)