"""Binary heaps, heap sort and problems solved with a heap."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, MutableSequence, Sequence
from typing import Any


def heap_insert(arr: MutableSequence[int], index: int) -> None:
    """Sift ``arr[index]`` up until ``arr[0..index]`` is a max-heap."""
    while index > 0:
        parent = (index - 1) // 2
        if arr[index] <= arr[parent]:
            break
        arr[index], arr[parent] = arr[parent], arr[index]
        index = parent


def heapify(arr: MutableSequence[int], index: int, heap_size: int) -> None:
    """Sift ``arr[index]`` down within the max-heap ``arr[0..heap_size)``."""
    left = index * 2 + 1
    while left < heap_size:
        child = left + 1 if left + 1 < heap_size and arr[left + 1] > arr[left] else left
        if arr[index] > arr[child]:
            break
        arr[index], arr[child] = arr[child], arr[index]
        index = child
        left = index * 2 + 1


class MaxHeap:
    """A max-heap of integers."""

    def __init__(self) -> None:
        self._items: list[int] = []

    def push(self, value: int) -> None:
        self._items.append(value)
        heap_insert(self._items, len(self._items) - 1)

    def pop(self) -> int:
        if not self._items:
            raise IndexError("pop from empty heap")
        items = self._items
        items[0], items[-1] = items[-1], items[0]
        top = items.pop()
        heapify(items, 0, len(items))
        return top

    def peek(self) -> int:
        if not self._items:
            raise IndexError("peek at empty heap")
        return self._items[0]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)


class MinHeap:
    """A min-heap."""

    def __init__(self) -> None:
        self._items: list[Any] = []

    def push(self, value: Any) -> None:
        heapq.heappush(self._items, value)

    def pop(self) -> Any:
        if not self._items:
            raise IndexError("pop from empty heap")
        return heapq.heappop(self._items)

    def peek(self) -> Any:
        if not self._items:
            raise IndexError("peek at empty heap")
        return self._items[0]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)


def heap_sort(arr: MutableSequence[int]) -> None:
    """Sort ``arr`` in place with heap sort."""
    n = len(arr)
    if n <= 1:
        return
    for i in range(n - 1, -1, -1):
        heapify(arr, i, n)
    for heap_size in range(n - 1, 0, -1):
        arr[0], arr[heap_size] = arr[heap_size], arr[0]
        heapify(arr, 0, heap_size)


def sort_almost_sorted(arr: MutableSequence[int], k: int) -> None:
    """Sort in place an array whose elements are at most ``k`` places from home."""
    if k < 0:
        raise ValueError("k must not be negative")
    if k == 0:
        return
    n = len(arr)
    heap = MinHeap()
    index = 0
    while index < min(n, k):
        heap.push(arr[index])
        index += 1
    i = 0
    while index < n:
        heap.push(arr[index])
        arr[i] = heap.pop()
        i += 1
        index += 1
    while not heap.is_empty():
        arr[i] = heap.pop()
        i += 1


def max_cover(lines: Iterable[Sequence[int]]) -> int:
    """Return the largest number of closed segments sharing an overlap of length >= 1."""
    ends = MinHeap()
    best = 0
    for start, end in sorted(((s, e) for s, e in lines), key=lambda line: line[0]):
        while not ends.is_empty() and ends.peek() <= start:
            ends.pop()
        ends.push(end)
        best = max(best, len(ends))
    return best