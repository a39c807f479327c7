"""Selection sort, filling from the front or from the rear."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any


def selection_sort(values: Iterable[Any], cmp: Callable[[Any, Any], bool]) -> list[Any]:
    """Return a sorted copy of ``values``.

    Each slot receives the item that ``cmp`` ranks first among those left;
    ``less`` gives ascending order.
    """
    items = list(values)
    size = len(items)

    for i in range(size):
        best = i
        for j in range(i + 1, size):
            if cmp(items[j], items[best]):
                best = j
        items[i], items[best] = items[best], items[i]

    return items


def selection_sort_reverse(
    values: Iterable[Any], cmp: Callable[[Any, Any], bool]
) -> list[Any]:
    """Return the same order as :func:`selection_sort`, filling from the rear."""
    items = list(values)

    for i in range(len(items) - 1, -1, -1):
        best = i
        for j in range(i - 1, -1, -1):
            if not cmp(items[j], items[best]):
                best = j
        items[i], items[best] = items[best], items[i]

    return items