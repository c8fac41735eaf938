"""Small algorithms over sequences of integers."""

from __future__ import annotations

import operator
from collections.abc import Iterable, Sequence
from functools import reduce

__all__ = [
    "find_duplicates",
    "sorted_intersection",
    "max_subarray",
    "minimum",
    "maximum",
    "ncr",
    "pascal_row",
    "reverse",
    "sort_zeros_ones",
    "unique_element",
    "swap_alternate",
]


def find_duplicates(values: Iterable[int]) -> list[int]:
    """Return values equal to their successor once sorted, in ascending order.

    A value occurring k times is reported k - 1 times.
    """
    ordered = sorted(values)
    return [a for a, b in zip(ordered, ordered[1:]) if a == b]


def sorted_intersection(first: Sequence[int], second: Sequence[int]) -> list[int]:
    """Return the common elements of two ascending sequences, with multiplicity."""
    result: list[int] = []
    i = j = 0
    while i < len(first) and j < len(second):
        a, b = first[i], second[j]
        if a == b:
            result.append(a)
            i += 1
            j += 1
        elif a > b:
            j += 1
        else:
            i += 1
    return result


def max_subarray(values: Sequence[int]) -> list[int]:
    """Return the contiguous run with the largest sum (Kadane's algorithm).

    The earliest such run is returned; an empty input gives an empty list.
    """
    best: int | None = None
    best_span = (0, 0)
    running = 0
    start = 0
    for index, value in enumerate(values):
        if running == 0:
            start = index
        running += value
        if best is None or running > best:
            best = running
            best_span = (start, index + 1)
        if running < 0:
            running = 0
    return list(values[best_span[0]:best_span[1]])


def minimum(values: Iterable[int]) -> int:
    """Return the smallest value; raise ValueError on an empty input."""
    items = list(values)
    if not items:
        raise ValueError("minimum of an empty sequence")
    smallest = items[0]
    for value in items[1:]:
        if value < smallest:
            smallest = value
    return smallest


def maximum(values: Iterable[int]) -> int:
    """Return the largest value; raise ValueError on an empty input."""
    items = list(values)
    if not items:
        raise ValueError("maximum of an empty sequence")
    largest = items[0]
    for value in items[1:]:
        if value > largest:
            largest = value
    return largest


def ncr(n: int, r: int) -> int:
    """Return the binomial coefficient n choose r by the multiplicative formula."""
    result = 1
    for i in range(r):
        result = result * (n - i) // (i + 1)
    return result


def pascal_row(n: int) -> list[int]:
    """Return the n-th row (1-based) of Pascal's triangle."""
    if n < 1:
        raise ValueError("row number must be at least 1")
    row = [1]
    current = 1
    for i in range(1, n):
        current = current * (n - i) // i
        row.append(current)
    return row


def reverse(values: Iterable[int]) -> list[int]:
    """Return the values in reverse order."""
    return list(values)[::-1]


def sort_zeros_ones(values: Iterable[int]) -> list[int]:
    """Partition a sequence of 0s and 1s so all 0s come first.

    Raises ValueError if any value is neither 0 nor 1.
    """
    items = list(values)
    if any(v not in (0, 1) for v in items):
        raise ValueError("values must all be 0 or 1")
    i, j = 0, len(items) - 1
    while i < j:
        while items[i] == 0 and i < j:
            i += 1
        while items[j] == 1 and i < j:
            j -= 1
        if i < j:
            items[i], items[j] = items[j], items[i]
            i += 1
            j -= 1
    return items


def unique_element(values: Iterable[int]) -> int:
    """Return the element that appears an odd number of times when all others pair up."""
    return reduce(operator.xor, values, 0)


def swap_alternate(values: Iterable[int]) -> list[int]:
    """Swap each adjacent pair (0,1), (2,3), ...; a trailing odd element stays."""
    items = list(values)
    for i in range(0, len(items) - 1, 2):
        items[i], items[i + 1] = items[i + 1], items[i]
    return items