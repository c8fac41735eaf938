"""Classic comparison sorts; each returns a new sorted list."""

from __future__ import annotations

from collections.abc import Iterable

__all__ = ["bubble_sort", "insertion_sort", "selection_sort", "merge_sort"]


def bubble_sort(values: Iterable[int]) -> list[int]:
    """Sort by repeated adjacent swaps, stopping early once a pass swaps nothing."""
    items = list(values)
    n = len(items)
    for rnd in range(1, n):
        swapped = False
        for j in range(n - rnd):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
                swapped = True
        if not swapped:
            break
    return items


def insertion_sort(values: Iterable[int]) -> list[int]:
    """Sort by inserting each element into the sorted prefix before it."""
    items = list(values)
    for i in range(1, len(items)):
        current = items[i]
        j = i - 1
        while j >= 0 and items[j] > current:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = current
    return items


def selection_sort(values: Iterable[int]) -> list[int]:
    """Sort by repeatedly moving the smallest remaining element to the front."""
    items = list(values)
    n = len(items)
    for i in range(n - 1):
        smallest = min(range(i, n), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]
    return items


def _merge(left: list[int], right: list[int]) -> list[int]:
    merged: list[int] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[int]) -> list[int]:
    """Sort by splitting in halves, sorting each, and merging."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = (len(items) - 1) // 2 + 1
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))