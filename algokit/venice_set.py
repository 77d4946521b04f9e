"""Multiset supporting a uniform decrease of every element."""

import heapq


class VeniceSet:
    """Multiset of integers where all elements can be lowered at once."""

    def __init__(self):
        self._counts = {}
        self._heap = []
        self._level = 0
        self._size = 0

    def __len__(self):
        return self._size

    def __contains__(self, value):
        return value + self._level in self._counts

    def add(self, value):
        key = value + self._level
        if key not in self._counts:
            self._counts[key] = 0
            heapq.heappush(self._heap, key)
        self._counts[key] += 1
        self._size += 1

    def remove(self, value):
        """Remove one occurrence of ``value``; KeyError if absent."""
        key = value + self._level
        if key not in self._counts:
            raise KeyError(value)
        self._counts[key] -= 1
        if not self._counts[key]:
            del self._counts[key]
        self._size -= 1

    def update_all(self, delta):
        """Lower every element by ``delta``."""
        self._level += delta

    def min(self):
        """Smallest element; ValueError when empty."""
        while self._heap and self._heap[0] not in self._counts:
            heapq.heappop(self._heap)
        if not self._heap:
            raise ValueError("set is empty")
        return self._heap[0] - self._level