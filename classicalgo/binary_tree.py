"""Binary tree traversals and serialisation."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

from classicalgo.containers import Queue, Stack

_MISSING = object()


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    value: Any = None
    left: TreeNode | None = None
    right: TreeNode | None = None


def _pre(head: TreeNode | None) -> Iterator[Any]:
    if head is None:
        return
    yield head.value
    yield from _pre(head.left)
    yield from _pre(head.right)


def _in(head: TreeNode | None) -> Iterator[Any]:
    if head is None:
        return
    yield from _in(head.left)
    yield head.value
    yield from _in(head.right)


def _post(head: TreeNode | None) -> Iterator[Any]:
    if head is None:
        return
    yield from _post(head.left)
    yield from _post(head.right)
    yield head.value


def preorder(head: TreeNode | None) -> list[Any]:
    """Return the values in head, left, right order, visited recursively."""
    return list(_pre(head))


def inorder(head: TreeNode | None) -> list[Any]:
    """Return the values in left, head, right order, visited recursively."""
    return list(_in(head))


def postorder(head: TreeNode | None) -> list[Any]:
    """Return the values in left, right, head order, visited recursively."""
    return list(_post(head))


def preorder_iterative(head: TreeNode | None) -> list[Any]:
    """Return the preorder values, using an explicit stack."""
    result: list[Any] = []
    if head is None:
        return result
    stack = Stack()
    stack.push(head)
    while not stack.is_empty():
        node = stack.pop()
        result.append(node.value)
        # Right goes in first so that left comes out first.
        if node.right is not None:
            stack.push(node.right)
        if node.left is not None:
            stack.push(node.left)
    return result


def inorder_iterative(head: TreeNode | None) -> list[Any]:
    """Return the inorder values, using an explicit stack."""
    result: list[Any] = []
    stack = Stack()
    node = head
    while node is not None:
        stack.push(node)
        node = node.left
    while not stack.is_empty():
        current = stack.pop()
        result.append(current.value)
        node = current.right
        while node is not None:
            stack.push(node)
            node = node.left
    return result


def postorder_iterative(head: TreeNode | None) -> list[Any]:
    """Return the postorder values, using two explicit stacks."""
    result: list[Any] = []
    if head is None:
        return result
    pending = Stack()
    collected = Stack()
    pending.push(head)
    while not pending.is_empty():
        # head, right, left reversed gives left, right, head.
        node = pending.pop()
        collected.push(node)
        if node.left is not None:
            pending.push(node.left)
        if node.right is not None:
            pending.push(node.right)
    while not collected.is_empty():
        result.append(collected.pop().value)
    return result


def level_order(head: TreeNode | None) -> list[Any]:
    """Return the values level by level, left to right."""
    result: list[Any] = []
    if head is None:
        return result
    queue = Queue()
    queue.enqueue(head)
    while not queue.is_empty():
        node = queue.dequeue()
        result.append(node.value)
        if node.left is not None:
            queue.enqueue(node.left)
        if node.right is not None:
            queue.enqueue(node.right)
    return result


def pre_serialize(head: TreeNode | None) -> list[Any]:
    """Serialise a tree in preorder, writing None for every missing child.

    Node values must not themselves be None.
    """
    result: list[Any] = []

    def walk(node: TreeNode | None) -> None:
        if node is None:
            result.append(None)
            return
        result.append(node.value)
        walk(node.left)
        walk(node.right)

    walk(head)
    return result


def pre_deserialize(values: Iterable[Any]) -> TreeNode | None:
    """Rebuild a tree from its preorder serialisation.

    An empty input gives None; an input that ends too early raises ValueError.
    """
    items = iter(values)
    first = next(items, _MISSING)
    if first is _MISSING:
        return None

    def build(value: Any) -> TreeNode | None:
        if value is None:
            return None
        node = TreeNode(value)
        node.left = build(take())
        node.right = build(take())
        return node

    def take() -> Any:
        value = next(items, _MISSING)
        if value is _MISSING:
            raise ValueError("serialised tree ends too early")
        return value

    return build(first)


def level_serialize(head: TreeNode | None) -> list[Any]:
    """Serialise a tree level by level, writing None for every missing child."""
    if head is None:
        return [None]
    result: list[Any] = [head.value]
    queue = Queue()
    queue.enqueue(head)
    while not queue.is_empty():
        node = queue.dequeue()
        for child in (node.left, node.right):
            if child is not None:
                result.append(child.value)
                queue.enqueue(child)
            else:
                result.append(None)
    return result