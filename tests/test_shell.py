from hypothesis import given
from hypothesis import strategies as st

from sortcraft.compare import greater, less
from sortcraft.shell import shell_sort

EXAMPLE = [9, 5, 10, 7, 3, 2, 6, 4, 1]


def test_example():
    assert shell_sort(EXAMPLE, greater) == sorted(EXAMPLE)


def test_empty_and_single():
    assert shell_sort([], greater) == []
    assert shell_sort([3], greater) == [3]


def test_does_not_modify_input():
    data = list(EXAMPLE)
    shell_sort(data, greater)
    assert data == EXAMPLE


@given(st.lists(st.integers()))
def test_ascending(values):
    assert shell_sort(values, greater) == sorted(values)


@given(st.lists(st.integers()))
def test_descending(values):
    assert shell_sort(values, less) == sorted(values, reverse=True)


def test_stable_for_records_with_strict_compare():
    records = [(1, "a"), (0, "b"), (1, "c"), (0, "d")]
    result = shell_sort(records, lambda x, y: x[0] > y[0])
    assert [key for key, _ in result] == [0, 0, 1, 1]