"""Shell sort with halving gaps."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any


def shell_sort(values: Iterable[Any], cmp: Callable[[Any, Any], bool]) -> list[Any]:
    """Return a sorted copy of ``values``.

    An item is shifted past an earlier one while ``cmp(earlier, item)`` is
    true, so ``greater`` gives ascending order.
    """
    items = list(values)
    size = len(items)
    gap = size // 2

    while gap > 0:
        for i in range(gap, size):
            held = items[i]
            j = i
            while j >= gap and cmp(items[j - gap], held):
                items[j] = items[j - gap]
                j -= gap
            items[j] = held
        gap //= 2

    return items