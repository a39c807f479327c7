"""Radix sort for non-negative integers, least- and most-significant digit first."""

from __future__ import annotations

from collections.abc import Iterable

_BASE = 10


def _non_negative(values: Iterable[int]) -> list[int]:
    items = list(values)
    if items and min(items) < 0:
        raise ValueError("radix sort needs non-negative integers")
    return items


def radix_lsd_sort_int(values: Iterable[int]) -> list[int]:
    """Return a sorted copy of ``values``, distributing on the lowest digit first.

    Each pass spreads the items over ten buckets by one decimal digit, keeping
    their current order within a bucket. Passes stop once the digit exceeds
    the maximum.
    """
    items = _non_negative(values)
    if not items:
        return []

    top = max(items)
    digit = 1
    while top // digit > 0:
        buckets: list[list[int]] = [[] for _ in range(_BASE)]
        for value in items:
            buckets[value // digit % _BASE].append(value)
        items = [value for bucket in buckets for value in bucket]
        digit *= _BASE

    return items


def _msd(items: list[int], digit: int) -> list[int]:
    if digit == 0 or len(items) < 2:
        return items

    buckets: list[list[int]] = [[] for _ in range(_BASE)]
    # Items are pushed onto the front of their bucket, as a stack would.
    for value in reversed(items):
        buckets[value // digit % _BASE].append(value)
    buckets = [bucket[::-1] for bucket in buckets]
    for bucket in buckets:
        bucket.reverse()

    return [
        value
        for bucket in buckets
        for value in _msd(bucket, digit // _BASE)
    ]


def radix_msd_sort_int(values: Iterable[int]) -> list[int]:
    """Return a sorted copy of ``values``, distributing on the highest digit first.

    The items are split into ten buckets by their leading digit and each
    bucket is then sorted recursively on the next lower digit.
    """
    items = _non_negative(values)
    if not items:
        return []

    top = max(items)
    digit = 1
    while top // digit > 1:
        digit *= _BASE

    return _msd(items, digit)