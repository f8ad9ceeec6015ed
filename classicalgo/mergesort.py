"""Merge sort and the counting problems solved during its merge step."""

from __future__ import annotations

import heapq
from collections.abc import Callable, Iterable, MutableSequence, Sequence
from itertools import accumulate


def _merge(arr: MutableSequence[int], left: int, mid: int, right: int) -> None:
    """Merge the sorted runs ``arr[left..mid]`` and ``arr[mid+1..right]``."""
    arr[left : right + 1] = list(
        heapq.merge(arr[left : mid + 1], arr[mid + 1 : right + 1])
    )


def merge_sort(arr: MutableSequence[int]) -> None:
    """Sort ``arr`` in place with recursive merge sort."""

    def sort(left: int, right: int) -> None:
        if left >= right:
            return
        mid = left + ((right - left) >> 1)
        sort(left, mid)
        sort(mid + 1, right)
        _merge(arr, left, mid, right)

    sort(0, len(arr) - 1)


def merge_sort_iterative(arr: MutableSequence[int]) -> None:
    """Sort ``arr`` in place with bottom-up merge sort."""
    n = len(arr)
    size = 1
    while size < n:
        left = 0
        while left < n:
            mid = left + size - 1
            if mid >= n - 1:
                break
            right = min(mid + size, n - 1)
            _merge(arr, left, mid, right)
            left = right + 1
        size <<= 1


def _count_by_merging(
    values: Iterable[int],
    count_pair: Callable[[list[int], list[int]], int],
) -> int:
    """Sort a copy of ``values`` by merging and sum what each merge counts.

    ``count_pair`` sees the two sorted halves before they are merged.
    """
    items = list(values)
    if not items:
        return 0

    def solve(left: int, right: int) -> int:
        if left == right:
            return 0
        mid = left + ((right - left) >> 1)
        total = solve(left, mid) + solve(mid + 1, right)
        lower, upper = items[left : mid + 1], items[mid + 1 : right + 1]
        total += count_pair(lower, upper)
        items[left : right + 1] = list(heapq.merge(lower, upper))
        return total

    return solve(0, len(items) - 1)


def small_sum(arr: Iterable[int]) -> int:
    """Return the sum, over every element, of the earlier elements smaller than it."""

    def count(left: list[int], right: list[int]) -> int:
        total = 0
        j = 0
        for value in left:
            while j < len(right) and right[j] <= value:
                j += 1
            total += value * (len(right) - j)
        return total

    return _count_by_merging(arr, count)


def reverse_pair_count(arr: Iterable[int]) -> int:
    """Return how many pairs ``i < j`` have ``arr[i] > arr[j]``."""

    def count(left: list[int], right: list[int]) -> int:
        total = 0
        i = 0
        for value in right:
            while i < len(left) and left[i] <= value:
                i += 1
            total += len(left) - i
        return total

    return _count_by_merging(arr, count)


def bigger_than_right_twice(arr: Iterable[int]) -> int:
    """Return how many pairs ``i < j`` have ``arr[i] > 2 * arr[j]``."""

    def count(left: list[int], right: list[int]) -> int:
        total = 0
        j = 0
        for value in left:
            while j < len(right) and value > 2 * right[j]:
                j += 1
            total += j
        return total

    return _count_by_merging(arr, count)


def count_of_range_sum(arr: Iterable[int], lower: int, upper: int) -> int:
    """Return how many contiguous subarrays have a sum in ``[lower, upper]``."""
    prefix = list(accumulate(arr))

    def count(left: list[int], right: list[int]) -> int:
        total = 0
        lo = hi = 0
        for value in right:
            while lo < len(left) and left[lo] < value - upper:
                lo += 1
            while hi < len(left) and left[hi] <= value - lower:
                hi += 1
            total += hi - lo
        return total

    # Subarrays starting at index 0 are the prefix sums themselves.
    from_start = sum(1 for value in prefix if lower <= value <= upper)
    return from_start + _count_by_merging(prefix, count)


def get_max(arr: Sequence[int]) -> int:
    """Return the largest element of ``arr``, found by halving recursively."""
    if not arr:
        raise ValueError("get_max of an empty sequence")

    def process(left: int, right: int) -> int:
        if left == right:
            return arr[left]
        mid = left + ((right - left) >> 1)
        return max(process(left, mid), process(mid + 1, right))

    return process(0, len(arr) - 1)