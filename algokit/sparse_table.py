"""Sparse table for static range-minimum queries."""


class SparseTable:
    """Answers min over an inclusive range in constant time."""

    def __init__(self, values):
        level = list(values)
        self._levels = [level]
        span = 1
        while 2 * span <= len(level):
            prev = self._levels[-1]
            self._levels.append(
                [min(prev[i], prev[i + span]) for i in range(len(prev) - span)]
            )
            span *= 2

    def __len__(self):
        return len(self._levels[0])

    def query(self, left, right):
        """Minimum of values[left..right], both ends inclusive."""
        if not 0 <= left <= right < len(self):
            raise IndexError(f"range [{left}, {right}] is invalid")
        k = (right - left + 1).bit_length() - 1
        level = self._levels[k]
        return min(level[left], level[right - (1 << k) + 1])