import pytest
from hypothesis import given, strategies as st

from classicalgo.sorting import (
    bubble_sort,
    count_sort,
    get_digit,
    insertion_sort,
    max_bits,
    radix_sort,
    selection_sort,
)


def test_selection_sort_fixed_case():
    arr = [6, 3, 4, 2, 1]
    selection_sort(arr)
    assert arr == [1, 2, 3, 4, 6]


def test_bubble_sort_fixed_case():
    arr = [6, 3, 4, 2, 1]
    bubble_sort(arr)
    assert arr == [1, 2, 3, 4, 6]


def test_insertion_sort_fixed_case():
    arr = [6, 3, 4, 2, 1]
    insertion_sort(arr)
    assert arr == [1, 2, 3, 4, 6]


@pytest.mark.parametrize("arr", [[], [7]])
def test_selection_sort_trivial(arr):
    expected = list(arr)
    selection_sort(arr)
    assert arr == expected


@pytest.mark.parametrize("arr", [[], [7]])
def test_bubble_sort_trivial(arr):
    expected = list(arr)
    bubble_sort(arr)
    assert arr == expected


@pytest.mark.parametrize("arr", [[], [7]])
def test_insertion_sort_trivial(arr):
    expected = list(arr)
    insertion_sort(arr)
    assert arr == expected


@given(st.lists(st.integers(min_value=1, max_value=1000), max_size=200))
def test_elementary_sorts_agree(values):
    a1, a2, a3 = list(values), list(values), list(values)
    selection_sort(a1)
    bubble_sort(a2)
    insertion_sort(a3)
    assert a1 == a2 == a3 == sorted(values)


def test_count_sort_fixed_case():
    arr = [6, 3, 4, 2, 1]
    count_sort(arr)
    assert arr == [1, 2, 3, 4, 6]


@given(st.lists(st.integers(min_value=0, max_value=199)))
def test_count_sort_matches_sorted(values):
    arr = list(values)
    count_sort(arr)
    assert arr == sorted(values)


@pytest.mark.parametrize("bad", [200, -1])
def test_count_sort_out_of_range(bad):
    with pytest.raises(ValueError):
        count_sort([1, bad])


def test_radix_sort_fixed_case():
    arr = [101, 20, 3, 43, 6]
    radix_sort(arr)
    assert arr == [3, 6, 20, 43, 101]


@given(st.lists(st.integers(min_value=0, max_value=10**6)))
def test_radix_sort_matches_sorted(values):
    arr = list(values)
    radix_sort(arr)
    assert arr == sorted(values)


def test_radix_sort_rejects_negative():
    with pytest.raises(ValueError):
        radix_sort([3, -1])


def test_get_digit():
    assert get_digit(103, 1) == 3
    assert get_digit(103, 2) == 0
    assert get_digit(103, 3) == 1


def test_max_bits():
    assert max_bits([101, 20, 3]) == 3
    assert max_bits([0, 0]) == 0
    assert max_bits([9]) == 1