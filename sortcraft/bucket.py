"""Bucket sort for non-negative integers."""

from __future__ import annotations

from bisect import insort_left
from collections.abc import Iterable


def bucket_sort_int(values: Iterable[int]) -> list[int]:
    """Return a sorted copy of the non-negative integers in ``values``.

    There are as many buckets as items. Each item goes into the bucket chosen
    by scaling it against the maximum. It is inserted there in order, so the
    buckets never need sorting on their own.
    """
    items = list(values)
    if not items:
        return []
    if min(items) < 0:
        raise ValueError("bucket sort needs non-negative integers")

    size = len(items)
    top = max(items) + 1
    buckets: list[list[int]] = [[] for _ in range(size)]

    for value in reversed(items):
        insort_left(buckets[size * value // top], value)

    return [value for bucket in buckets for value in bucket]