"""A minimal singly linked list and helpers to build and show it."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False, repr=False)
class Node:
    """One cell of a singly linked list."""

    value: Any
    next: Optional[Node] = None

    def __iter__(self) -> Iterator[Any]:
        """Yield the values from this node to the end of the list."""
        node: Optional[Node] = self
        while node is not None:
            yield node.value
            node = node.next

    def __repr__(self) -> str:
        return f"Node({format_linked(self, repr)})"


def from_iterable(values: Iterable[Any]) -> Optional[Node]:
    """Build a linked list holding ``values`` in order; ``None`` if empty."""
    head: Optional[Node] = None
    for value in reversed(list(values)):
        head = Node(value, head)
    return head


def format_linked(head: Optional[Node], formatter: Callable[[Any], str] = str) -> str:
    """Render the list starting at ``head`` as ``[a, b, c]``."""
    items = head if head is not None else ()
    return "[" + ", ".join(formatter(value) for value in items) + "]"


def print_linked(head: Optional[Node], formatter: Callable[[Any], str] = str) -> None:
    """Print the list starting at ``head`` on one line."""
    print(format_linked(head, formatter))