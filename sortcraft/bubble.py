"""Bubble sort with early exit."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any


def bubble_sort(values: Iterable[Any], cmp: Callable[[Any, Any], bool]) -> list[Any]:
    """Return a sorted copy of ``values``.

    Neighbours are swapped when ``cmp(left, right)`` is true; ``greater``
    gives ascending order. Stops after a pass with no swaps.
    """
    items = list(values)
    size = len(items)

    for rest in range(size - 1, 0, -1):
        swapped = False
        for j in range(rest):
            if cmp(items[j], items[j + 1]):
                items[j], items[j + 1] = items[j + 1], items[j]
                swapped = True
        if not swapped:
            break

    return items