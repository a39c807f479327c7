"""Strand sort for sequences and for singly linked lists."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, Optional

from sortcraft.linked import Node

Predicate = Callable[[Any, Any], bool]


def _merge_lists(left: list[Any], right: list[Any], cmp: Predicate) -> list[Any]:
    merged: list[Any] = []
    li = ri = 0
    while li < len(left) and ri < len(right):
        if cmp(left[li], right[ri]):
            merged.append(left[li])
            li += 1
        else:
            merged.append(right[ri])
            ri += 1
    merged.extend(left[li:])
    merged.extend(right[ri:])
    return merged


def strand_sort_array(
    values: Iterable[Any], cmp: Predicate, cmp_merge: Predicate
) -> list[Any]:
    """Return a sorted copy of ``values``.

    Each round pulls a strand out of the remaining items: the first one, then
    every later item for which ``cmp(item, strand_tail)`` is true. The strand
    is merged into the result, taking the result's item when
    ``cmp_merge(result_item, strand_item)`` is true. ``greater_equal`` with
    ``less`` gives ascending order.
    """
    remaining = list(values)
    result: list[Any] = []

    while remaining:
        strand = [remaining[0]]
        rest: list[Any] = []
        for item in remaining[1:]:
            if cmp(item, strand[-1]):
                strand.append(item)
            else:
                rest.append(item)
        result = _merge_lists(result, strand, cmp_merge)
        remaining = rest

    return result


def merge_linked(
    left: Optional[Node], right: Optional[Node], cmp: Predicate
) -> Optional[Node]:
    """Merge two linked lists by relinking their nodes; return the new head.

    The left node is taken when ``cmp(left_node, right_node)`` is true.
    """
    anchor = Node(None)
    tail = anchor

    while left is not None and right is not None:
        if cmp(left, right):
            tail.next = left
            left = left.next
        else:
            tail.next = right
            right = right.next
        tail = tail.next

    tail.next = right if left is None else left
    return anchor.next


def strand_sort_linked(
    head: Optional[Node], cmp: Predicate, cmp_merge: Predicate
) -> Optional[Node]:
    """Sort the linked list at ``head`` by relinking its nodes; return the new head.

    Each strand starts with the first remaining node; a later node joins it,
    at its front, when ``cmp(node, strand_head)`` is true. Strands are merged
    with :func:`merge_linked` using ``cmp_merge``. ``node_less_equal`` with
    ``node_less`` gives ascending order.
    """
    result: Optional[Node] = None

    while head is not None:
        strand = head
        head = head.next
        strand.next = None

        previous: Optional[Node] = None
        current = head
        while current is not None:
            following = current.next
            if cmp(current, strand):
                if previous is None:
                    head = following
                else:
                    previous.next = following
                current.next = strand
                strand = current
            else:
                previous = current
            current = following

        result = strand if result is None else merge_linked(result, strand, cmp_merge)

    return result