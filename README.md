# sortcraft

Classic sorting algorithms, written to be read and compared. Every sort takes
an iterable and returns a new list; the input is never modified.

## Installation

```
pip install .
```

For the test suite:

```
pip install .[test]
pytest
```

## Comparator-driven sorts

Most sorts take a comparator: a function of two values returning a truth
value. What the comparator means depends on the algorithm. `comb_sort`,
`bubble_sort`, `shell_sort` and `insertion_sort` move a pair when it holds,
so `greater` gives ascending order; `merge_sort_*`, `quick_sort_lomuto` and
`selection_sort` put the first argument first when it holds, so `less` gives
ascending order; `gnome_sort` treats it as "already in order", so
`greater_equal` gives ascending order.

Ready-made comparators live in `sortcraft.compare`: `less`, `greater`,
`less_equal`, `greater_equal`, and the node variants `node_less`,
`node_greater`, `node_less_equal`, `node_greater_equal`, which compare the
`value` of two linked-list nodes.

```python
from sortcraft.compare import greater, less, greater_equal
from sortcraft.comb import comb_sort
from sortcraft.merge import merge_sort_recursion
from sortcraft.gnome import gnome_sort

data = [9, 5, 10, 7, 3, 2, 6, 4, 1]

comb_sort(data, greater)            # [1, 2, 3, 4, 5, 6, 7, 9, 10]
merge_sort_recursion(data, less)    # [1, 2, 3, 4, 5, 6, 7, 9, 10]
gnome_sort(data, greater_equal)     # [1, 2, 3, 4, 5, 6, 7, 9, 10]
```

The full set:

| Module | Functions |
| --- | --- |
| `sortcraft.bubble` | `bubble_sort(values, cmp)` |
| `sortcraft.comb` | `comb_sort(values, cmp)` |
| `sortcraft.gnome` | `gnome_sort(values, cmp)`, `gnome_sort_memo(values, cmp)` |
| `sortcraft.insertion` | `insertion_sort(values, cmp)`, `insertion_sort_reverse(values, cmp)` |
| `sortcraft.merge` | `merge_sort_recursion(values, cmp)`, `merge_sort_iterative(values, cmp)` |
| `sortcraft.quick` | `quick_sort_lomuto(values, cmp)`, `quick_sort_hoare(values, cmp)` |
| `sortcraft.selection` | `selection_sort(values, cmp)`, `selection_sort_reverse(values, cmp)` |
| `sortcraft.shell` | `shell_sort(values, cmp)` |
| `sortcraft.strand` | `strand_sort_array(values, cmp, cmp_merge)` |

The `_reverse` variants produce the same order as their counterparts but
build it from the rear. `quick_sort_hoare` needs a strict comparator such as
`less`. `strand_sort_array` takes a strand comparator and a merge comparator;
`greater_equal` with `less` gives ascending order.

## Integer sorts

These work on integers only and take no comparator:

```python
from sortcraft.counting import counting_sort_int, counting_sort_min_max_int
from sortcraft.radix import radix_lsd_sort_int

counting_sort_int([2, 5, 3, 0, 2, 3, 0, 3, 6])   # [0, 0, 2, 2, 3, 3, 3, 5, 6]
counting_sort_min_max_int([2, -5, 3, 0, -2])      # negatives allowed
radix_lsd_sort_int([9, 100, 21, 3])               # [3, 9, 21, 100]
```

- `sortcraft.counting`: `counting_sort_int`, `counting_sort_shifted_int`,
  `counting_sort_min_max_int`
- `sortcraft.radix`: `radix_lsd_sort_int`, `radix_msd_sort_int` (base 10)
- `sortcraft.bucket`: `bucket_sort_int`
- `sortcraft.tournament`: `tournament_sort_offline`

`counting_sort_int`, `counting_sort_shifted_int`, both radix sorts and
`bucket_sort_int` raise `ValueError` when given a negative integer. Only
`counting_sort_min_max_int` accepts negatives.

## Linked lists

`sortcraft.linked` provides a singly linked `Node` (with `value` and `next`,
iterable over the values from that node on), plus `from_iterable`,
`format_linked` and `print_linked`. Strand sort works on these lists by
relinking nodes:

```python
from sortcraft.linked import from_iterable, format_linked
from sortcraft.strand import strand_sort_linked
from sortcraft.compare import node_less_equal, node_less

head = strand_sort_linked(from_iterable([3, 1, 2]), node_less_equal, node_less)
format_linked(head)   # "[1, 2, 3]"
```

`merge_linked(left, right, cmp)` merges two such lists and returns the new
head.

## Display and benchmarking

`sortcraft.display.format_array(values, formatter=str)` renders a sequence as
`[a, b, c]`; `print_array` writes that to standard output.

`sortcraft.benchmark.stress_test_sort(values, times, sort, *args)` calls
`sort(values, *args)` `times` times and returns the processor time spent, in
whole milliseconds.

## Command line

```
sortcraft quick
```

runs one demonstration: the chosen algorithm's variants sort a fixed sample,
which is printed before and after, and then they are timed on a list of
random integers. The algorithm is one of `bubble`, `bucket`, `comb`,
`counting`, `gnome`, `insertion`, `merge`, `quick`, `radix`, `selection`,
`shell`, `strand`, `tournament`.

Options:

- `--length N`: number of random items in the stress test
- `--times N`: number of timed repetitions
- `--seed N`: seed for the random data
- `--skip-stress`: only sort the fixed samples

`bubble`, `insertion` and `selection` only sort their samples and have no
stress test.

## What it does not do

The sorts return new lists; none sorts in place. The integer sorts do not
accept comparators or key functions, and there is no heap sort.