"""Command-line demonstrations of the sorting algorithms.

Each demonstration sorts a small fixed sample, prints it before and after,
and then times repeated runs over a large list of random integers.
"""

from __future__ import annotations

import argparse
import random
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Any, Optional

from sortcraft.benchmark import stress_test_sort
from sortcraft.bubble import bubble_sort
from sortcraft.bucket import bucket_sort_int
from sortcraft.comb import comb_sort
from sortcraft.compare import (
    greater,
    greater_equal,
    less,
    node_less,
    node_less_equal,
)
from sortcraft.counting import (
    counting_sort_int,
    counting_sort_min_max_int,
    counting_sort_shifted_int,
)
from sortcraft.display import format_array
from sortcraft.gnome import gnome_sort, gnome_sort_memo
from sortcraft.insertion import insertion_sort, insertion_sort_reverse
from sortcraft.linked import format_linked, from_iterable
from sortcraft.merge import merge_sort_iterative, merge_sort_recursion
from sortcraft.quick import quick_sort_hoare, quick_sort_lomuto
from sortcraft.radix import radix_lsd_sort_int, radix_msd_sort_int
from sortcraft.selection import selection_sort, selection_sort_reverse
from sortcraft.shell import shell_sort
from sortcraft.strand import strand_sort_array, strand_sort_linked
from sortcraft.tournament import tournament_sort_offline

_RAND_LIMIT = 2**31
_SAMPLE = (9, 5, 10, 7, 3, 2, 6, 4, 1)
_WIDE_SAMPLE = (9, 9, 5, 10, 7, 3, 2, 6, 4, 1, 3, 100, 8, 21)


@dataclass(frozen=True)
class _Showcase:
    """A fixed sample and the labelled sorts applied to it."""

    title: str
    sample: tuple[int, ...]
    results: tuple[tuple[str, Callable[[list[int]], str]], ...]


@dataclass(frozen=True)
class _Run:
    """One timed sort in the stress test."""

    label: Optional[str]
    sort: Callable[..., Any]
    args: tuple[Any, ...] = ()


@dataclass(frozen=True)
class _Demo:
    showcases: tuple[_Showcase, ...]
    length: int = 1_000_000
    times: int = 100
    runs: tuple[_Run, ...] = ()
    bounded: bool = field(default=False)


def _array(sort: Callable[..., list[int]], *args: Any) -> Callable[[list[int]], str]:
    return lambda sample: format_array(sort(sample, *args))


def _strand_linked(sample: list[int]) -> str:
    head = strand_sort_linked(from_iterable(sample), node_less_equal, node_less)
    return format_linked(head)


_DEMOS: dict[str, _Demo] = {
    "bubble": _Demo(
        showcases=(
            _Showcase("Initial", _SAMPLE, (("Sorted", _array(bubble_sort, greater)),)),
        ),
    ),
    "bucket": _Demo(
        showcases=(
            _Showcase("Initial", _WIDE_SAMPLE, (("Sorted", _array(bucket_sort_int)),)),
        ),
        runs=(_Run(None, bucket_sort_int),),
    ),
    "comb": _Demo(
        showcases=(
            _Showcase("Initial", _SAMPLE, (("Sorted", _array(comb_sort, greater)),)),
        ),
        runs=(_Run(None, comb_sort, (less,)),),
    ),
    "counting": _Demo(
        showcases=(
            _Showcase(
                "Initial (Non-Negative)",
                (2, 5, 3, 0, 2, 3, 0, 3, 6),
                (
                    ("Sorted (Original)", _array(counting_sort_int)),
                    ("Sorted (Shifted)", _array(counting_sort_shifted_int)),
                ),
            ),
            _Showcase(
                "Initial (Mixed)",
                (2, -5, 3, 0, -2, 3, 0, 3, -6),
                (("Sorted (Min Max)", _array(counting_sort_min_max_int)),),
            ),
        ),
        runs=(
            _Run("Original", counting_sort_int),
            _Run("Shifted", counting_sort_shifted_int),
            _Run("Min Max", counting_sort_min_max_int),
        ),
        bounded=True,
    ),
    "gnome": _Demo(
        showcases=(
            _Showcase(
                "Initial",
                _SAMPLE,
                (
                    ("Sorted (Original)", _array(gnome_sort, greater_equal)),
                    ("Sorted (Memoization)", _array(gnome_sort_memo, greater_equal)),
                ),
            ),
        ),
        length=10_000,
        runs=(
            _Run("Original", gnome_sort, (greater_equal,)),
            _Run("Memoization", gnome_sort_memo, (greater_equal,)),
        ),
    ),
    "insertion": _Demo(
        showcases=(
            _Showcase(
                "Initial",
                _SAMPLE,
                (
                    ("Sorted (Normal)", _array(insertion_sort, greater)),
                    ("Sorted (Reverse)", _array(insertion_sort_reverse, greater)),
                ),
            ),
        ),
    ),
    "merge": _Demo(
        showcases=(
            _Showcase(
                "Initial",
                _SAMPLE,
                (
                    ("Sorted (Recursion)", _array(merge_sort_recursion, less)),
                    ("Sorted (Iterative)", _array(merge_sort_iterative, less)),
                ),
            ),
        ),
        runs=(
            _Run("Recursion", merge_sort_recursion, (less,)),
            _Run("Iterative", merge_sort_iterative, (less,)),
        ),
    ),
    "quick": _Demo(
        showcases=(
            _Showcase(
                "Initial",
                _SAMPLE,
                (
                    ("Sorted (Lomuto)", _array(quick_sort_lomuto, less)),
                    ("Sorted (Hoare)", _array(quick_sort_hoare, less)),
                ),
            ),
        ),
        runs=(
            _Run("Lomuto", quick_sort_lomuto, (less,)),
            _Run("Hoare", quick_sort_hoare, (less,)),
        ),
    ),
    "radix": _Demo(
        showcases=(
            _Showcase(
                "Initial",
                _WIDE_SAMPLE,
                (
                    ("Sorted (LSD)", _array(radix_lsd_sort_int)),
                    ("Sorted (MSD)", _array(radix_msd_sort_int)),
                ),
            ),
        ),
        runs=(_Run("LSD", radix_lsd_sort_int), _Run("MSD", radix_msd_sort_int)),
    ),
    "selection": _Demo(
        showcases=(
            _Showcase(
                "Initial",
                _SAMPLE,
                (
                    ("Sorted (Normal)", _array(selection_sort, less)),
                    ("Sorted (Reverse)", _array(selection_sort_reverse, less)),
                ),
            ),
        ),
    ),
    "shell": _Demo(
        showcases=(
            _Showcase("Initial", _SAMPLE, (("Sorted", _array(shell_sort, greater)),)),
        ),
        runs=(_Run(None, shell_sort, (less,)),),
    ),
    "strand": _Demo(
        showcases=(
            _Showcase(
                "Initial (Array)",
                (9, 5, 10, 7, 3, 2, 6, 4, 1, 8, 12, 11, 13),
                (
                    (
                        "Sorted (Original)",
                        _array(strand_sort_array, greater_equal, less),
                    ),
                    ("Sorted (Linked List)", _strand_linked),
                ),
            ),
        ),
        length=100_000,
        runs=(_Run("Array", strand_sort_array, (greater_equal, less)),),
    ),
    "tournament": _Demo(
        showcases=(
            _Showcase(
                "Initial (Non-Negative)",
                _SAMPLE,
                (("Sorted (Original)", _array(tournament_sort_offline)),),
            ),
        ),
        length=10_000,
        runs=(_Run("Offline", tournament_sort_offline),),
    ),
}


def _positive(text: str) -> int:
    try:
        number = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1: {number}")
    return number


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sortcraft",
        description="Show a sorting algorithm on a sample and time it on random data.",
    )
    parser.add_argument("algorithm", choices=sorted(_DEMOS))
    parser.add_argument("--length", type=_positive, help="items in the stress test")
    parser.add_argument("--times", type=_positive, help="repetitions in the stress test")
    parser.add_argument("--seed", type=int, help="seed for the random data")
    parser.add_argument(
        "--skip-stress", action="store_true", help="only sort the fixed samples"
    )
    return parser


def _show(showcase: _Showcase, first: bool) -> None:
    prefix = "" if first else "\n"
    print(f"{prefix}{showcase.title}: {format_array(showcase.sample)}")
    for label, render in showcase.results:
        print(f"{label}: {render(list(showcase.sample))}")


def _stress(demo: _Demo, length: int, times: int, rng: random.Random) -> None:
    bound = length if demo.bounded else _RAND_LIMIT
    data = [rng.randrange(bound) for _ in range(length)]

    print("\nStress Test")
    print(f"Length\t\t: {length}")
    print(f"Times\t\t: {times}")

    for run in demo.runs:
        print()
        if run.label is not None:
            print(run.label)
        elapsed = stress_test_sort(data, times, run.sort, *run.args)
        print(f"Total Time (ms)\t: {elapsed}")
        print(f"Avg Time (ms)\t: {elapsed // times}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the demonstration chosen on the command line."""
    options = _parser().parse_args(argv)
    demo = _DEMOS[options.algorithm]

    for position, showcase in enumerate(demo.showcases):
        _show(showcase, position == 0)

    if demo.runs and not options.skip_stress:
        length = options.length or demo.length
        times = options.times or demo.times
        _stress(demo, length, times, random.Random(options.seed))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())