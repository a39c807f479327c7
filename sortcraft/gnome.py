"""Gnome sort, plain and with a remembered resume position."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any


def gnome_sort(values: Iterable[Any], cmp: Callable[[Any, Any], bool]) -> list[Any]:
    """Return a sorted copy of ``values``.

    ``cmp(current, previous)`` says whether the pair is already in order;
    ``greater_equal`` gives ascending order.
    """
    items = list(values)
    i = 1

    while i < len(items):
        if cmp(items[i], items[i - 1]):
            i += 1
        else:
            items[i], items[i - 1] = items[i - 1], items[i]
            if i > 1:
                i -= 1

    return items


def gnome_sort_memo(values: Iterable[Any], cmp: Callable[[Any, Any], bool]) -> list[Any]:
    """Return a sorted copy of ``values``, jumping back to where each walk began."""
    items = list(values)
    i = 1

    while i < len(items):
        if cmp(items[i], items[i - 1]):
            i += 1
        else:
            start = i
            while i > 0 and not cmp(items[i], items[i - 1]):
                items[i], items[i - 1] = items[i - 1], items[i]
                i -= 1
            i = start + 1

    return items