from hypothesis import given
from hypothesis import strategies as st

from sortcraft.bubble import bubble_sort
from sortcraft.compare import greater, less

EXAMPLE = [9, 5, 10, 7, 3, 2, 6, 4, 1]


def test_example():
    assert bubble_sort(EXAMPLE, greater) == sorted(EXAMPLE)


def test_empty_and_single():
    assert bubble_sort([], greater) == []
    assert bubble_sort([1], greater) == [1]


def test_does_not_modify_input():
    data = list(EXAMPLE)
    bubble_sort(data, greater)
    assert data == EXAMPLE


def test_sorted_input_needs_one_pass():
    calls = []

    def cmp(a, b):
        calls.append((a, b))
        return a > b

    data = list(range(10))
    assert bubble_sort(data, cmp) == data
    assert len(calls) == len(data) - 1


@given(st.lists(st.integers()))
def test_ascending(values):
    assert bubble_sort(values, greater) == sorted(values)


@given(st.lists(st.integers()))
def test_descending(values):
    assert bubble_sort(values, less) == sorted(values, reverse=True)