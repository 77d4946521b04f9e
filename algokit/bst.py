"""Shape of the binary search tree built by successive insertions."""

from bisect import bisect_right, insort


def bst_children(values):
    """Map each value to its (left, right) children after inserting in order.

    Missing children are None. Values must be distinct.
    """
    ordered = []
    left = {}
    right = {}
    for value in values:
        if ordered:
            pos = bisect_right(ordered, value)
            if pos > 0 and ordered[pos - 1] == value:
                raise ValueError(f"duplicate value {value}")
            if pos < len(ordered) and ordered[pos] not in left:
                left[ordered[pos]] = value
            else:
                right[ordered[pos - 1]] = value
        insort(ordered, value)
        left.setdefault(value, None) if False else None
    result = {}
    for value in values:
        result[value] = (left.get(value), right.get(value))
    return result