"""Insertion sort, working from the front or from the rear."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any


def insertion_sort(values: Iterable[Any], cmp: Callable[[Any, Any], bool]) -> list[Any]:
    """Return a sorted copy of ``values``.

    Earlier items are shifted right while ``cmp(earlier, item)`` is true;
    ``greater`` gives ascending order.
    """
    items = list(values)

    for i in range(1, len(items)):
        held = items[i]
        j = i
        while j > 0 and cmp(items[j - 1], held):
            items[j] = items[j - 1]
            j -= 1
        items[j] = held

    return items


def insertion_sort_reverse(
    values: Iterable[Any], cmp: Callable[[Any, Any], bool]
) -> list[Any]:
    """Return the same order as :func:`insertion_sort`, building from the rear."""
    items = list(values)
    last = len(items) - 1

    for i in range(last - 1, -1, -1):
        held = items[i]
        j = i
        while j < last and not cmp(items[j + 1], held):
            items[j] = items[j + 1]
            j += 1
        items[j] = held

    return items