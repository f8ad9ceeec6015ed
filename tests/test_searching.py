import pytest
from hypothesis import given, strategies as st

from classicalgo.searching import (
    contains,
    find_left,
    find_peak_element,
    find_right,
    local_minimum,
)

SORTED = [1, 2, 2, 3, 4, 6, 7, 8, 10]


def test_contains_odd_list():
    arr = [1, 3, 5, 7, 9]
    assert contains(arr, 5) is True
    assert contains(arr, 6) is False


@pytest.mark.parametrize("num, expected", [(5, False), (2, True), (6, True)])
def test_contains_with_duplicates(num, expected):
    assert contains(SORTED, num) is expected


def test_contains_empty():
    assert contains([], 1) is False


@given(st.lists(st.integers(-50, 50)), st.integers(-60, 60))
def test_contains_matches_membership(values, num):
    arr = sorted(values)
    assert contains(arr, num) == (num in arr)


def test_find_left_cases():
    arr = [1, 2, 3, 4, 4, 4, 5, 6, 7]
    assert find_left(arr, 4) == 3
    assert find_left(arr, 8) == -1


@pytest.mark.parametrize("num, expected", [(2, 1), (3, 3), (5, 5)])
def test_find_left_near(num, expected):
    assert find_left(SORTED, num) == expected


def test_find_right_cases():
    arr = [1, 2, 3, 4, 4, 4, 5, 6, 7]
    assert find_right(arr, 4) == 5
    assert find_right(arr, 0) == -1


@pytest.mark.parametrize("num, expected", [(2, 2), (3, 3), (5, 4)])
def test_find_right_near(num, expected):
    assert find_right(SORTED, num) == expected


def test_find_left_right_empty():
    assert find_left([], 3) == -1
    assert find_right([], 3) == -1


@given(st.lists(st.integers(-50, 50)), st.integers(-60, 60))
def test_find_left_invariant(values, num):
    arr = sorted(values)
    i = find_left(arr, num)
    if i == -1:
        assert all(v < num for v in arr)
    else:
        assert arr[i] >= num
        assert all(v < num for v in arr[:i])


@given(st.lists(st.integers(-50, 50)), st.integers(-60, 60))
def test_find_right_invariant(values, num):
    arr = sorted(values)
    i = find_right(arr, num)
    if i == -1:
        assert all(v > num for v in arr)
    else:
        assert arr[i] <= num
        assert all(v > num for v in arr[i + 1:])


def test_find_peak_fixed():
    assert find_peak_element([1, 2, 3, 1]) == 2
    assert find_peak_element([1, 2, 1, 3, 5, 6, 4]) in (1, 5)
    assert find_peak_element([]) == 0
    assert find_peak_element([4]) == 0


@given(st.lists(st.integers(), min_size=2, unique=True))
def test_find_peak_property(arr):
    i = find_peak_element(arr)
    assert 0 <= i < len(arr)
    left = arr[i - 1] if i > 0 else float("-inf")
    right = arr[i + 1] if i < len(arr) - 1 else float("-inf")
    assert arr[i] > left
    assert arr[i] > right


def test_local_minimum_fixed():
    arr = [5, 4, 3, 4, 3, 1, 2]
    i = local_minimum(arr)
    assert i == 2
    assert arr[i] < arr[i - 1] and arr[i] < arr[i + 1]


def test_local_minimum_edges():
    assert local_minimum([]) == -1
    assert local_minimum([3]) == 0
    assert local_minimum([1, 2]) == 0
    assert local_minimum([2, 1]) == 1


@given(st.lists(st.integers(), min_size=2, unique=True))
def test_local_minimum_property(arr):
    i = local_minimum(arr)
    left = arr[i - 1] if i > 0 else float("inf")
    right = arr[i + 1] if i < len(arr) - 1 else float("inf")
    assert arr[i] < left and arr[i] < right