"""Stacks, queues and the classic structures composed from them."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Any


class Stack:
    """A last-in, first-out stack."""

    def __init__(self) -> None:
        self._items: list[Any] = []

    def push(self, value: Any) -> None:
        self._items.append(value)

    def pop(self) -> Any:
        if not self._items:
            raise IndexError("pop from empty stack")
        return self._items.pop()

    def peek(self) -> Any:
        if not self._items:
            raise IndexError("peek at empty stack")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)


class Queue:
    """A first-in, first-out queue."""

    def __init__(self) -> None:
        self._items: deque[Any] = deque()

    def enqueue(self, value: Any) -> None:
        self._items.append(value)

    def dequeue(self) -> Any:
        if not self._items:
            raise IndexError("dequeue from empty queue")
        return self._items.popleft()

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)


@dataclass(eq=False)
class _Node:
    value: Any
    next: _Node | None = None
    last: _Node | None = None


class DoubleEndsQueue:
    """A double-ended queue kept as a doubly linked list.

    Popping from an empty queue returns None.
    """

    def __init__(self) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0

    def push_front(self, value: Any) -> None:
        node = _Node(value)
        if self._head is None:
            self._head = self._tail = node
        else:
            node.next = self._head
            self._head.last = node
            self._head = node
        self._size += 1

    def push_back(self, value: Any) -> None:
        node = _Node(value)
        if self._tail is None:
            self._head = self._tail = node
        else:
            self._tail.next = node
            node.last = self._tail
            self._tail = node
        self._size += 1

    def pop_front(self) -> Any:
        node = self._head
        if node is None:
            return None
        if node is self._tail:
            self._head = self._tail = None
        else:
            self._head = node.next
            self._head.last = None
        self._size -= 1
        return node.value

    def pop_back(self) -> Any:
        node = self._tail
        if node is None:
            return None
        if node is self._head:
            self._head = self._tail = None
        else:
            self._tail = node.last
            self._tail.next = None
        self._size -= 1
        return node.value

    def is_empty(self) -> bool:
        return self._head is None

    def __len__(self) -> int:
        return self._size


class RingQueue:
    """A bounded queue stored in a fixed-size circular array."""

    def __init__(self, limit: int) -> None:
        if limit < 0:
            raise ValueError("limit must not be negative")
        self._limit = limit
        self._slots: list[Any] = [None] * limit
        self._push_index = 0
        self._pop_index = 0
        self._size = 0

    def _next_index(self, i: int) -> int:
        return 0 if i + 1 >= self._limit else i + 1

    def push(self, value: Any) -> None:
        if self._size == self._limit:
            raise OverflowError("queue is full")
        self._slots[self._push_index] = value
        self._size += 1
        self._push_index = self._next_index(self._push_index)

    def pop(self) -> Any:
        if self._size == 0:
            raise IndexError("pop from empty queue")
        value = self._slots[self._pop_index]
        self._size -= 1
        self._pop_index = self._next_index(self._pop_index)
        return value

    def is_empty(self) -> bool:
        return self._size == 0

    def __len__(self) -> int:
        return self._size


class MinStack:
    """A stack that reports its smallest element in constant time."""

    def __init__(self) -> None:
        self._data = Stack()
        self._mins = Stack()

    def push(self, value: Any) -> None:
        self._data.push(value)
        if self._mins.is_empty():
            self._mins.push(value)
        else:
            current = self._mins.peek()
            self._mins.push(current if value > current else value)

    def pop(self) -> Any:
        if self._data.is_empty():
            raise IndexError("pop from empty stack")
        self._mins.pop()
        return self._data.pop()

    def get_min(self) -> Any:
        if self._mins.is_empty():
            raise IndexError("stack is empty")
        return self._mins.peek()

    def is_empty(self) -> bool:
        return self._data.is_empty()


class TwoStackQueue:
    """A queue built from two stacks."""

    def __init__(self) -> None:
        self._push_stack = Stack()
        self._pop_stack = Stack()

    def _shift(self) -> None:
        # Only pour when the pop stack is empty, and pour everything at once.
        if self._pop_stack.is_empty():
            while not self._push_stack.is_empty():
                self._pop_stack.push(self._push_stack.pop())

    def enqueue(self, value: Any) -> None:
        self._push_stack.push(value)
        self._shift()

    def dequeue(self) -> Any:
        if self.is_empty():
            raise IndexError("dequeue from empty queue")
        self._shift()
        return self._pop_stack.pop()

    def is_empty(self) -> bool:
        return self._push_stack.is_empty() and self._pop_stack.is_empty()


class TwoQueueStack:
    """A stack built from two queues."""

    def __init__(self) -> None:
        self._queue = Queue()
        self._help = Queue()

    def push(self, value: Any) -> None:
        self._queue.enqueue(value)

    def pop(self) -> Any:
        if self._queue.is_empty():
            raise IndexError("pop from empty stack")
        while len(self._queue) > 1:
            self._help.enqueue(self._queue.dequeue())
        value = self._queue.dequeue()
        self._queue, self._help = self._help, self._queue
        return value

    def is_empty(self) -> bool:
        return self._queue.is_empty()