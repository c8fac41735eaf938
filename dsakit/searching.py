"""Linear and binary search returning an index, or -1 when absent."""

from __future__ import annotations

from collections.abc import Sequence

__all__ = ["binary_search", "linear_search"]


def binary_search(values: Sequence[int], key: int) -> int:
    """Return an index of key in the ascending sequence values, or -1."""
    lo, hi = 0, len(values) - 1
    while lo <= hi:
        mid = lo + (hi - lo) // 2
        current = values[mid]
        if current == key:
            return mid
        if current < key:
            lo = mid + 1
        else:
            hi = mid - 1
    return -1


def linear_search(values: Sequence[int], key: int) -> int:
    """Return the index of the first occurrence of key, or -1."""
    for index, value in enumerate(values):
        if value == key:
            return index
    return -1