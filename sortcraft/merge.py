"""Merge sort, top-down and bottom-up."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

Predicate = Callable[[Any, Any], bool]


def _merge(items: list[Any], lo: int, mid: int, hi: int, cmp: Predicate) -> None:
    """Merge the runs ``items[lo:mid]`` and ``items[mid:hi]`` in place."""
    left = items[lo:mid]
    right = items[mid:hi]
    li = ri = 0
    k = lo

    while li < len(left) and ri < len(right):
        if cmp(left[li], right[ri]):
            items[k] = left[li]
            li += 1
        else:
            items[k] = right[ri]
            ri += 1
        k += 1

    items[k:hi] = left[li:] + right[ri:]


def _sort_range(items: list[Any], lo: int, hi: int, cmp: Predicate) -> None:
    if hi - lo > 1:
        mid = lo + (hi - lo) // 2
        _sort_range(items, lo, mid, cmp)
        _sort_range(items, mid, hi, cmp)
        _merge(items, lo, mid, hi, cmp)


def merge_sort_recursion(values: Iterable[Any], cmp: Predicate) -> list[Any]:
    """Return a sorted copy of ``values`` by recursive halving.

    While merging, the left item is taken when ``cmp(left, right)`` is true;
    ``less`` gives ascending order.
    """
    items = list(values)
    _sort_range(items, 0, len(items), cmp)
    return items


def merge_sort_iterative(values: Iterable[Any], cmp: Predicate) -> list[Any]:
    """Return a sorted copy of ``values`` by merging runs of doubling width."""
    items = list(values)
    size = len(items)
    width = 1

    while width < size:
        for start in range(0, size - width, width * 2):
            _merge(items, start, start + width, min(start + width * 2, size), cmp)
        width *= 2

    return items