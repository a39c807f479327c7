"""Tournament sort over a binary tree of winners."""

from __future__ import annotations

import math
from collections.abc import Iterable


def tournament_sort_offline(values: Iterable[int]) -> list[int]:
    """Return a sorted copy of ``values`` by repeated knockout rounds.

    The tree keeps, at every inner node, the index of the smaller of its two
    children, the left one winning ties. After a winner is taken out, only
    the matches up to and including its own pair are played again.
    """
    scores: list[float] = list(values)
    size = len(scores)
    if size == 0:
        return []

    tree_len = size * 2 - 1
    # Inner nodes come first; leaf ``size - 1 + k`` holds item index ``k``.
    tree = [0] * (size - 1) + list(range(size))

    result: list[int] = []
    start = tree_len - 1

    for _ in range(size):
        for right in range(start, 0, -2):
            left = right - 1
            a, b = tree[left], tree[right]
            tree[left // 2] = a if scores[a] <= scores[b] else b

        winner = tree[0]
        result.append(int(scores[winner]))
        scores[winner] = math.inf

        # Resume from the right slot of the pair holding the winner's leaf.
        start = (tree_len - (size - winner) - 1) // 2 * 2 + 2

    return result