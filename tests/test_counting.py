import pytest
from hypothesis import given
from hypothesis import strategies as st

from sortcraft.counting import (
    counting_sort_int,
    counting_sort_min_max_int,
    counting_sort_shifted_int,
)

NON_NEGATIVE = [2, 5, 3, 0, 2, 3, 0, 3, 6]
MIXED = [2, -5, 3, 0, -2, 3, 0, 3, -6]


@pytest.mark.parametrize(
    "sort", [counting_sort_int, counting_sort_shifted_int, counting_sort_min_max_int]
)
def test_demo_non_negative_array(sort):
    assert sort(NON_NEGATIVE) == sorted(NON_NEGATIVE)


def test_min_max_handles_mixed_signs():
    assert counting_sort_min_max_int(MIXED) == sorted(MIXED)


@pytest.mark.parametrize("sort", [counting_sort_int, counting_sort_shifted_int])
def test_negative_values_are_rejected(sort):
    with pytest.raises(ValueError):
        sort(MIXED)


@pytest.mark.parametrize(
    "sort", [counting_sort_int, counting_sort_shifted_int, counting_sort_min_max_int]
)
def test_empty_input_gives_empty_list(sort):
    assert sort([]) == []


@pytest.mark.parametrize(
    "sort", [counting_sort_int, counting_sort_shifted_int, counting_sort_min_max_int]
)
def test_single_repeated_value(sort):
    assert sort([4, 4, 4]) == [4, 4, 4]


@pytest.mark.parametrize(
    "sort", [counting_sort_int, counting_sort_shifted_int, counting_sort_min_max_int]
)
def test_input_is_left_untouched(sort):
    data = list(NON_NEGATIVE)
    sort(data)
    assert data == NON_NEGATIVE


@given(st.lists(st.integers(min_value=0, max_value=500)))
def test_non_negative_variants_match_builtin(data):
    expected = sorted(data)
    assert counting_sort_int(data) == expected
    assert counting_sort_shifted_int(data) == expected
    assert counting_sort_min_max_int(data) == expected


@given(st.lists(st.integers(min_value=-500, max_value=500)))
def test_min_max_matches_builtin(data):
    assert counting_sort_min_max_int(data) == sorted(data)