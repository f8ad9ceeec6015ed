"""Randomised quick sort with three-way (Dutch national flag) partitioning."""

from __future__ import annotations

import random
from collections.abc import MutableSequence


def netherlands_flag(arr: MutableSequence[int], left: int, right: int) -> tuple[int, int]:
    """Partition ``arr[left..right]`` around the pivot ``arr[right]``.

    Smaller values end up on the left, equal ones in the middle and larger
    ones on the right. Returns the bounds of the equal region, or
    ``(-1, -1)`` for an empty range.
    """
    if left > right:
        return -1, -1
    if left == right:
        return left, right
    pivot = arr[right]
    less = left - 1
    more = right
    index = left
    while index < more:
        if arr[index] < pivot:
            less += 1
            arr[less], arr[index] = arr[index], arr[less]
            index += 1
        elif arr[index] > pivot:
            more -= 1
            arr[more], arr[index] = arr[index], arr[more]
        else:
            index += 1
    arr[right], arr[more] = arr[more], arr[right]
    return less + 1, more


def quick_sort(arr: MutableSequence[int]) -> None:
    """Sort ``arr`` in place with randomised three-way quick sort."""

    def process(left: int, right: int) -> None:
        if left >= right:
            return
        pick = random.randint(left, right)
        arr[pick], arr[right] = arr[right], arr[pick]
        eq_left, eq_right = netherlands_flag(arr, left, right)
        process(left, eq_left - 1)
        process(eq_right + 1, right)

    process(0, len(arr) - 1)