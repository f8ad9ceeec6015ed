"""Elementary in-place sorts, counting sort and radix sort."""

from __future__ import annotations

from collections.abc import MutableSequence

_COUNT_SORT_RANGE = 200


def selection_sort(arr: MutableSequence[int]) -> None:
    """Sort ``arr`` in place by repeatedly selecting the minimum."""
    n = len(arr)
    for i in range(n - 1):
        min_index = min(range(i, n), key=arr.__getitem__)
        arr[i], arr[min_index] = arr[min_index], arr[i]


def bubble_sort(arr: MutableSequence[int]) -> None:
    """Sort ``arr`` in place by bubbling the largest value to the end."""
    for end in range(len(arr) - 1, 0, -1):
        for i in range(end):
            if arr[i] > arr[i + 1]:
                arr[i], arr[i + 1] = arr[i + 1], arr[i]


def insertion_sort(arr: MutableSequence[int]) -> None:
    """Sort ``arr`` in place by inserting each value into the sorted prefix."""
    for i in range(1, len(arr)):
        j = i
        while j > 0 and arr[j - 1] > arr[j]:
            arr[j - 1], arr[j] = arr[j], arr[j - 1]
            j -= 1


def count_sort(arr: MutableSequence[int]) -> None:
    """Sort values in the range 0..199 in place by counting occurrences."""
    if len(arr) <= 1:
        return
    buckets = [0] * _COUNT_SORT_RANGE
    for value in arr:
        if not 0 <= value < _COUNT_SORT_RANGE:
            raise ValueError(f"value {value} outside 0..{_COUNT_SORT_RANGE - 1}")
        buckets[value] += 1
    arr[:] = [num for num, count in enumerate(buckets) for _ in range(count)]


def get_digit(x: int, d: int) -> int:
    """Return the ``d``-th decimal digit of ``x``, 1 being the units digit."""
    return (x // 10 ** (d - 1)) % 10


def max_bits(arr: MutableSequence[int]) -> int:
    """Return the number of decimal digits of the largest value in ``arr``."""
    largest = max(arr, default=-99_999_999)
    return 0 if largest == 0 else len(str(abs(largest)))


def radix_sort(arr: MutableSequence[int]) -> None:
    """Sort non-negative integers in place, least significant digit first."""
    if len(arr) <= 1:
        return
    if any(value < 0 for value in arr):
        raise ValueError("radix sort needs non-negative values")
    for d in range(1, max_bits(arr) + 1):
        buckets: list[list[int]] = [[] for _ in range(10)]
        for value in arr:
            buckets[get_digit(value, d)].append(value)
        arr[:] = [value for bucket in buckets for value in bucket]