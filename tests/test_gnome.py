from hypothesis import given
from hypothesis import strategies as st

from sortcraft.compare import greater_equal, less_equal
from sortcraft.gnome import gnome_sort, gnome_sort_memo

EXAMPLE = [9, 5, 10, 7, 3, 2, 6, 4, 1]
EXPECTED = [1, 2, 3, 4, 5, 6, 7, 9, 10]


def test_example():
    assert gnome_sort(EXAMPLE, greater_equal) == EXPECTED
    assert gnome_sort_memo(EXAMPLE, greater_equal) == EXPECTED


def test_empty_and_single():
    assert gnome_sort([], greater_equal) == []
    assert gnome_sort([7], greater_equal) == [7]
    assert gnome_sort_memo([], greater_equal) == []
    assert gnome_sort_memo([7], greater_equal) == [7]


def test_does_not_modify_input():
    data = list(EXAMPLE)
    assert gnome_sort(data, greater_equal) == EXPECTED
    assert gnome_sort_memo(data, greater_equal) == EXPECTED
    assert data == EXAMPLE


@given(st.lists(st.integers(), max_size=60))
def test_plain_matches_sorted(values):
    assert gnome_sort(values, greater_equal) == sorted(values)


@given(st.lists(st.integers(), max_size=60))
def test_memo_matches_sorted(values):
    assert gnome_sort_memo(values, greater_equal) == sorted(values)


@given(st.lists(st.integers(), max_size=60))
def test_descending_with_less_equal(values):
    assert gnome_sort(values, less_equal) == sorted(values, reverse=True)
    assert gnome_sort_memo(values, less_equal) == sorted(values, reverse=True)