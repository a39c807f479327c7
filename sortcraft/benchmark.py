"""Timing of repeated sort runs."""

from __future__ import annotations

import time
from collections.abc import Callable, Sequence
from typing import Any


def stress_test_sort(
    values: Sequence[Any], times: int, sort: Callable[..., Any], *args: Any
) -> int:
    """Run ``sort(values, *args)`` ``times`` times; return CPU milliseconds spent."""
    start = time.process_time()
    for _ in range(times):
        sort(values, *args)
    return int((time.process_time() - start) * 1000)