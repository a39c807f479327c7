"""Rendering of sequences as bracketed, comma-separated lists."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any


def format_array(values: Iterable[Any], formatter: Callable[[Any], str] = str) -> str:
    """Render ``values`` as ``[a, b, c]`` using ``formatter`` for each item."""
    return "[" + ", ".join(formatter(value) for value in values) + "]"


def print_array(values: Iterable[Any], formatter: Callable[[Any], str] = str) -> None:
    """Print ``values`` on one line in bracketed form."""
    print(format_array(values, formatter))