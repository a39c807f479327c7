"""Quick sort with Lomuto and Hoare style partitioning."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

Predicate = Callable[[Any, Any], bool]


def quick_sort_lomuto(values: Iterable[Any], cmp: Predicate) -> list[Any]:
    """Return a sorted copy of ``values`` using Lomuto partitioning.

    The last item of each range is the pivot. Items for which
    ``cmp(item, pivot)`` is true go before it, so ``less`` gives ascending order.
    """
    items = list(values)
    pending = [(0, len(items) - 1)]

    while pending:
        low, high = pending.pop()
        if low >= high:
            continue

        pivot = items[high]
        i = low
        for j in range(low, high):
            if cmp(items[j], pivot):
                items[i], items[j] = items[j], items[i]
                i += 1
        items[i], items[high] = items[high], items[i]

        pending.append((low, i - 1))
        pending.append((i + 1, high))

    return items


def quick_sort_hoare(values: Iterable[Any], cmp: Predicate) -> list[Any]:
    """Return a copy of ``values`` reordered by Hoare-style partitioning.

    The pivot is whatever currently sits in the last slot of the range, and
    it is read afresh on every comparison, so a swap into that slot changes
    the pivot. ``cmp`` must be strict, such as ``less``.
    """
    items = list(values)
    pending = [(0, len(items) - 1)]

    while pending:
        low, high = pending.pop()
        if low >= high:
            continue

        i, j = low, high
        while i < j:
            while cmp(items[i], items[high]):
                i += 1
            while cmp(items[high], items[j]):
                j -= 1
            if i < j:
                items[i], items[j] = items[j], items[i]
                i += 1
                j -= 1

        pending.append((low, i - 1))
        pending.append((i, high))

    return items