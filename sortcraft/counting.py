"""Counting sort in three variants."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import accumulate


def _non_negative(values: Iterable[int]) -> list[int]:
    items = list(values)
    if items and min(items) < 0:
        raise ValueError("this counting sort needs non-negative integers")
    return items


def counting_sort_int(values: Iterable[int]) -> list[int]:
    """Return a sorted copy of the non-negative integers in ``values``.

    Counts are turned into end positions and items are placed from the back,
    which keeps equal items in their original order.
    """
    items = _non_negative(values)
    if not items:
        return []

    counts = [0] * (max(items) + 1)
    for value in items:
        counts[value] += 1
    ends = list(accumulate(counts))

    result = [0] * len(items)
    for value in reversed(items):
        ends[value] -= 1
        result[ends[value]] = value
    return result


def counting_sort_shifted_int(values: Iterable[int]) -> list[int]:
    """Return a sorted copy of the non-negative integers in ``values``.

    Counts are stored one slot higher, so the running totals give each
    value's start position and items are placed from the front.
    """
    items = _non_negative(values)
    if not items:
        return []

    top = max(items)
    counts = [0] * (top + 1)
    for value in items:
        if value != top:
            counts[value + 1] += 1
    starts = list(accumulate(counts))

    result = [0] * len(items)
    for value in items:
        result[starts[value]] = value
        starts[value] += 1
    return result


def counting_sort_min_max_int(values: Iterable[int]) -> list[int]:
    """Return a sorted copy of the integers in ``values``, negatives included.

    The count table spans only the range from the minimum to the maximum, with
    counts shifted one slot higher as in :func:`counting_sort_shifted_int`.
    """
    items = list(values)
    if not items:
        return []

    low, high = min(items), max(items)
    counts = [0] * (high - low + 1)
    for value in items:
        if value != high:
            counts[value - low + 1] += 1
    starts = list(accumulate(counts))

    result = [0] * len(items)
    for value in items:
        result[starts[value - low]] = value
        starts[value - low] += 1
    return result