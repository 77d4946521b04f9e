"""Binary trie over fixed-width integers for xor queries."""


class _Node:
    __slots__ = ("children", "size")

    def __init__(self):
        self.children = [None, None]
        self.size = 0


class XorTrie:
    """Multiset of non-negative integers answering xor queries."""

    def __init__(self, bits=31):
        if bits < 1:
            raise ValueError("bits must be positive")
        self.bits = bits
        self._root = _Node()

    def __len__(self):
        return self._root.size

    def insert(self, value):
        if not 0 <= value < 1 << self.bits:
            raise ValueError(f"value {value} does not fit in {self.bits} bits")
        node = self._root
        node.size += 1
        for i in range(self.bits - 1, -1, -1):
            bit = value >> i & 1
            if node.children[bit] is None:
                node.children[bit] = _Node()
            node = node.children[bit]
            node.size += 1

    def count_less(self, x, k):
        """Number of stored values v with v ^ x < k."""
        node = self._root
        count = 0
        for i in range(self.bits - 1, -1, -1):
            if node is None:
                break
            b1 = x >> i & 1
            if k >> i & 1:
                same = node.children[b1]
                if same is not None:
                    count += same.size
                node = node.children[b1 ^ 1]
            else:
                node = node.children[b1]
        return count

    def _require_values(self):
        if not self._root.size:
            raise ValueError("trie is empty")

    def max_xor(self, x):
        """Largest v ^ x over stored values v."""
        self._require_values()
        node = self._root
        result = 0
        for i in range(self.bits - 1, -1, -1):
            want = (x >> i & 1) ^ 1
            if node.children[want] is not None:
                node = node.children[want]
                result = result << 1 | 1
            else:
                node = node.children[want ^ 1]
                result <<= 1
        return result

    def min_xor(self, x):
        """Smallest v ^ x over stored values v."""
        self._require_values()
        node = self._root
        result = 0
        for i in range(self.bits - 1, -1, -1):
            want = x >> i & 1
            if node.children[want] is not None:
                node = node.children[want]
                result <<= 1
            else:
                node = node.children[want ^ 1]
                result = result << 1 | 1
        return result


def count_subarrays_xor_at_least(values, k):
    """Number of contiguous subarrays whose xor is at least ``k``."""
    values = list(values)
    n = len(values)
    total = n * (n + 1) // 2
    trie = XorTrie()
    prefix = 0
    trie.insert(prefix)
    for value in values:
        prefix ^= value
        total -= trie.count_less(prefix, k)
        trie.insert(prefix)
    return total