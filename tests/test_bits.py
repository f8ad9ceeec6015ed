from hypothesis import given, strategies as st

from classicalgo.bits import (
    odd_times_num,
    only_k_times,
    two_odd_times_nums,
    xor_swap,
)


def test_xor_swap():
    arr = [1, 2, 3, 2, 4]
    xor_swap(arr, 1, 2)
    assert arr[1] == 3
    assert arr[2] == 2
    assert arr == [1, 3, 2, 2, 4]


def test_xor_swap_same_index_zeroes():
    arr = [5, 6]
    xor_swap(arr, 0, 0)
    assert arr == [0, 6]


@given(st.integers(), st.integers())
def test_xor_swap_exchanges(a, b):
    arr = [a, b]
    xor_swap(arr, 0, 1)
    assert arr == [b, a]


def test_odd_times_num():
    assert odd_times_num([1, 2, 1, 2, 4]) == 4


def test_two_odd_times_nums():
    assert two_odd_times_nums([1, 2, 1, 2, 4, 5]) == (4, 5)


@given(
    st.lists(st.integers(0, 1000), unique=True, min_size=2, max_size=2),
    st.lists(st.integers(0, 1000)),
)
def test_two_odd_times_nums_property(pair, evens):
    arr = list(pair) + evens + evens
    assert sorted(two_odd_times_nums(arr)) == sorted(pair)


def test_only_k_times_none():
    arr = [0, 0, 0, 1, 1, 1, 2, 1, 2, 2, 2, 3, 3, 3, 3]
    assert only_k_times(arr, 2, 4) == -1


def test_only_k_times_found():
    assert only_k_times([5, 5, 7, 7, 7], 2, 3) == 5


def test_only_k_times_zero():
    assert only_k_times([0, 0, 4, 4, 4], 2, 3) == 0
    assert only_k_times([0, 4, 4, 4], 2, 3) == -1


def test_only_k_times_bad_remainder():
    assert only_k_times([1, 1, 1, 2], 2, 3) == -1