from hypothesis import given
from hypothesis import strategies as st

from sortcraft.compare import (
    greater,
    greater_equal,
    less,
    less_equal,
    node_greater,
    node_greater_equal,
    node_less,
    node_less_equal,
)
from sortcraft.linked import from_iterable
from sortcraft.strand import merge_linked, strand_sort_array, strand_sort_linked

SAMPLE = [9, 5, 10, 7, 3, 2, 6, 4, 1, 8, 12, 11, 13]


def _nodes(head):
    found = []
    while head is not None:
        found.append(head)
        head = head.next
    return found


def test_array_sample_ascending():
    assert strand_sort_array(SAMPLE, greater_equal, less) == sorted(SAMPLE)


def test_array_sample_descending():
    assert strand_sort_array(SAMPLE, less_equal, greater) == sorted(SAMPLE, reverse=True)


def test_array_input_untouched():
    data = list(SAMPLE)
    strand_sort_array(data, greater_equal, less)
    assert data == SAMPLE


def test_array_empty():
    assert strand_sort_array([], greater_equal, less) == []


@given(st.lists(st.integers(min_value=-1000, max_value=1000)))
def test_array_matches_sorted(data):
    assert strand_sort_array(data, greater_equal, less) == sorted(data)


def test_linked_sample_ascending():
    head = strand_sort_linked(from_iterable(SAMPLE), node_less_equal, node_less)
    assert list(head) == sorted(SAMPLE)


def test_linked_sample_descending():
    head = strand_sort_linked(from_iterable(SAMPLE), node_greater_equal, node_greater)
    assert list(head) == sorted(SAMPLE, reverse=True)


def test_linked_empty():
    assert strand_sort_linked(None, node_less_equal, node_less) is None


def test_linked_reuses_nodes():
    head = from_iterable(SAMPLE)
    before = {id(node) for node in _nodes(head)}
    result = strand_sort_linked(head, node_less_equal, node_less)
    assert {id(node) for node in _nodes(result)} == before


@given(st.lists(st.integers(min_value=-1000, max_value=1000), min_size=1))
def test_linked_matches_sorted(data):
    head = strand_sort_linked(from_iterable(data), node_less_equal, node_less)
    assert list(head) == sorted(data)


def test_merge_linked_interleaves():
    left = from_iterable([1, 4, 6])
    right = from_iterable([2, 3, 7, 8])
    assert list(merge_linked(left, right, node_less)) == sorted([1, 4, 6, 2, 3, 7, 8])


def test_merge_linked_with_empty_side():
    right = from_iterable([2, 3])
    assert merge_linked(None, right, node_less) is right
    left = from_iterable([5])
    assert merge_linked(left, None, node_less) is left


@given(
    st.lists(st.integers(min_value=-50, max_value=50)),
    st.lists(st.integers(min_value=-50, max_value=50)),
)
def test_merge_linked_of_sorted_lists(a, b):
    merged = merge_linked(from_iterable(sorted(a)), from_iterable(sorted(b)), node_less)
    values = list(merged) if merged is not None else []
    assert values == sorted(a + b)