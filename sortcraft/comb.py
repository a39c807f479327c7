"""Comb sort."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

_SHRINK = 1.3


def comb_sort(values: Iterable[Any], cmp: Callable[[Any, Any], bool]) -> list[Any]:
    """Return a sorted copy of ``values``.

    Two items ``gap`` apart are swapped whenever ``cmp(left, right)`` is true,
    so ``greater`` gives ascending order and ``less`` descending order.
    """
    items = list(values)
    size = len(items)
    gap = size
    swapped = True

    while gap > 1 or swapped:
        swapped = False
        gap = max(int(gap / _SHRINK), 1)

        for i in range(size - gap):
            if cmp(items[i], items[i + gap]):
                items[i], items[i + gap] = items[i + gap], items[i]
                swapped = True

    return items