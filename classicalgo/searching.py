"""Binary searches over sorted arrays and local-extremum searches."""

from __future__ import annotations

from collections.abc import Sequence


def contains(arr: Sequence[int], num: int) -> bool:
    """Return whether sorted ``arr`` holds ``num``."""
    lo, hi = 0, len(arr) - 1
    while lo <= hi:
        mid = lo + ((hi - lo) >> 1)
        if arr[mid] == num:
            return True
        if arr[mid] < num:
            lo = mid + 1
        else:
            hi = mid - 1
    return False


def find_left(arr: Sequence[int], num: int) -> int:
    """Return the leftmost index of a value >= ``num`` in sorted ``arr``, or -1."""
    ans = -1
    lo, hi = 0, len(arr) - 1
    while lo <= hi:
        mid = lo + ((hi - lo) >> 1)
        if arr[mid] >= num:
            ans = mid
            hi = mid - 1
        else:
            lo = mid + 1
    return ans


def find_right(arr: Sequence[int], num: int) -> int:
    """Return the rightmost index of a value <= ``num`` in sorted ``arr``, or -1."""
    ans = -1
    lo, hi = 0, len(arr) - 1
    while lo <= hi:
        mid = lo + ((hi - lo) >> 1)
        if arr[mid] <= num:
            ans = mid
            lo = mid + 1
        else:
            hi = mid - 1
    return ans


def find_peak_element(arr: Sequence[int]) -> int:
    """Return an index whose value is strictly greater than its neighbours.

    Values outside the array count as minus infinity. Returns 0 for arrays
    of length 0 or 1 and -1 if no peak is found.
    """
    n = len(arr)
    if n <= 1:
        return 0
    if arr[0] > arr[1]:
        return 0
    if arr[n - 1] > arr[n - 2]:
        return n - 1
    # Both ends slope inwards, so 1..n-2 must hold a peak.
    lo, hi = 1, n - 2
    while lo <= hi:
        mid = lo + ((hi - lo) >> 1)
        if arr[mid] < arr[mid + 1]:
            lo = mid + 1
        elif arr[mid - 1] > arr[mid]:
            hi = mid - 1
        else:
            return mid
    return -1


def local_minimum(arr: Sequence[int]) -> int:
    """Return an index of a local minimum in ``arr``, whose neighbours all differ.

    Returns -1 for an empty array.
    """
    n = len(arr)
    if n == 0:
        return -1
    if n == 1 or arr[0] < arr[1]:
        return 0
    if arr[n - 1] < arr[n - 2]:
        return n - 1
    lo, hi = 1, n - 2
    while lo < hi:
        mid = lo + ((hi - lo) >> 1)
        if arr[mid] > arr[mid - 1]:
            hi = mid - 1
        elif arr[mid] > arr[mid + 1]:
            lo = mid + 1
        else:
            return mid
    return lo