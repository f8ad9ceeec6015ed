"""Exclusive-or tricks on integer arrays."""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence, Sequence
from functools import reduce
from operator import xor

_BITS = 32


def xor_swap(arr: MutableSequence[int], i: int, j: int) -> None:
    """Swap ``arr[i]`` and ``arr[j]`` with exclusive-or.

    When ``i == j`` the element becomes 0, as the trick requires two slots.
    """
    arr[i] ^= arr[j]
    arr[j] ^= arr[i]
    arr[i] ^= arr[j]


def odd_times_num(arr: Iterable[int]) -> int:
    """Return the one value that occurs an odd number of times."""
    return reduce(xor, arr, 0)


def two_odd_times_nums(arr: Sequence[int]) -> tuple[int, int]:
    """Return the two values that occur an odd number of times."""
    eor = reduce(xor, arr, 0)
    # The lowest set bit of eor separates the two values.
    right_one = eor & -eor
    first = reduce(xor, (v for v in arr if v & right_one == 0), 0)
    return first, eor ^ first


def only_k_times(arr: Sequence[int], k: int, m: int) -> int:
    """Return the value occurring ``k`` times when all others occur ``m`` times.

    Returns -1 if no value occurs exactly ``k`` times.
    """
    counts = [sum((v >> bit) & 1 for v in arr) for bit in range(_BITS)]
    ans = 0
    for bit, count in enumerate(counts):
        remainder = count % m
        if remainder == 0:
            continue
        if remainder != k:
            return -1
        ans |= 1 << bit
    # Zero leaves no bits behind, so count it directly.
    if ans == 0 and sum(1 for v in arr if v == 0) != k:
        return -1
    return ans