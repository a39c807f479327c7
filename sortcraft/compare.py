"""Ordering predicates used by the comparison-driven sorts.

Each predicate answers a yes/no question about two items. The sorting
functions use that answer to decide whether to move or keep elements.
"""

from __future__ import annotations

from typing import Any


def less(a: Any, b: Any) -> bool:
    """Return whether ``a`` is less than ``b``."""
    return a < b


def greater(a: Any, b: Any) -> bool:
    """Return whether ``a`` is greater than ``b``."""
    return a > b


def less_equal(a: Any, b: Any) -> bool:
    """Return whether ``a`` is less than or equal to ``b``."""
    return a <= b


def greater_equal(a: Any, b: Any) -> bool:
    """Return whether ``a`` is greater than or equal to ``b``."""
    return a >= b


def node_less(a: Any, b: Any) -> bool:
    """Return whether node ``a`` holds a smaller value than node ``b``."""
    return a.value < b.value


def node_greater(a: Any, b: Any) -> bool:
    """Return whether node ``a`` holds a larger value than node ``b``."""
    return a.value > b.value


def node_less_equal(a: Any, b: Any) -> bool:
    """Return whether node ``a`` holds a value no larger than node ``b``'s."""
    return a.value <= b.value


def node_greater_equal(a: Any, b: Any) -> bool:
    """Return whether node ``a`` holds a value no smaller than node ``b``'s."""
    return a.value >= b.value