"""Singly, doubly and random-pointer linked lists and the classic problems on them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    val: Any = 0
    next: ListNode | None = None


@dataclass(eq=False)
class DoubleNode:
    """A node of a doubly linked list; ``last`` points to the previous node."""

    val: Any = 0
    next: DoubleNode | None = None
    last: DoubleNode | None = None


@dataclass(eq=False)
class RandomNode:
    """A list node with an extra pointer to any node of the list, or None."""

    val: Any = 0
    next: RandomNode | None = None
    random: RandomNode | None = None


def _iter_nodes(head: Any) -> Iterator[Any]:
    while head is not None:
        yield head
        head = head.next


def from_values(values: Iterable[Any]) -> ListNode | None:
    """Build a singly linked list holding ``values`` in order."""
    dummy = ListNode()
    tail = dummy
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return dummy.next


def to_values(head: Any) -> list[Any]:
    """Return the values of an acyclic list, following ``next`` pointers."""
    return [node.val for node in _iter_nodes(head)]


def double_from_values(values: Iterable[Any]) -> DoubleNode | None:
    """Build a doubly linked list holding ``values`` in order."""
    head: DoubleNode | None = None
    tail: DoubleNode | None = None
    for value in values:
        node = DoubleNode(value, last=tail)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def reverse_list(head: ListNode | None) -> ListNode | None:
    """Reverse a singly linked list in place and return its new head."""
    pre: ListNode | None = None
    while head is not None:
        nxt = head.next
        head.next = pre
        pre = head
        head = nxt
    return pre


def reverse_double_list(head: DoubleNode | None) -> DoubleNode | None:
    """Reverse a doubly linked list in place and return its new head."""
    pre: DoubleNode | None = None
    while head is not None:
        nxt = head.next
        head.next = pre
        head.last = nxt
        pre = head
        head = nxt
    return pre


def merge_two_lists(h1: ListNode | None, h2: ListNode | None) -> ListNode | None:
    """Splice two ascending lists into one ascending list and return its head."""
    if h1 is None:
        return h2
    if h2 is None:
        return h1
    if h1.val < h2.val:
        head, cur1, cur2 = h1, h1.next, h2
    else:
        head, cur1, cur2 = h2, h2.next, h1
    tail = head
    while cur1 is not None and cur2 is not None:
        if cur1.val < cur2.val:
            tail.next = cur1
            cur1 = cur1.next
        else:
            tail.next = cur2
            cur2 = cur2.next
        tail = tail.next
    tail.next = cur2 if cur1 is None else cur1
    return head


def add_two_numbers(l1: ListNode | None, l2: ListNode | None) -> ListNode | None:
    """Add two numbers stored as reversed digit lists; return the sum the same way."""
    dummy = ListNode()
    tail = dummy
    carry = 0
    while l1 is not None or l2 is not None:
        total = carry
        if l1 is not None:
            total += l1.val
            l1 = l1.next
        if l2 is not None:
            total += l2.val
            l2 = l2.next
        carry, digit = divmod(total, 10)
        tail.next = ListNode(digit)
        tail = tail.next
    if carry:
        tail.next = ListNode(carry)
    return dummy.next


def partition(head: ListNode | None, x: Any) -> ListNode | None:
    """Move nodes below ``x`` before the others, keeping relative order in each part."""
    small = ListNode()
    big = ListNode()
    small_tail, big_tail = small, big
    for node in list(_iter_nodes(head)):
        if node.val < x:
            small_tail.next = node
            small_tail = node
        else:
            big_tail.next = node
            big_tail = node
    big_tail.next = None
    small_tail.next = big.next
    return small.next


def delete_value(head: ListNode | None, num: Any) -> ListNode | None:
    """Remove every node whose value equals ``num`` and return the new head."""
    while head is not None and head.val == num:
        head = head.next
    pre = head
    cur = head
    while cur is not None:
        if cur.val == num:
            pre.next = cur.next
        else:
            pre = cur
        cur = cur.next
    return head


def _walk_pair(slow: ListNode, fast: ListNode) -> ListNode:
    while fast.next is not None and fast.next.next is not None:
        fast = fast.next.next
        slow = slow.next
    return slow


def mid_or_up_mid(head: ListNode | None) -> ListNode | None:
    """Return the middle node, or the upper middle for an even length."""
    if head is None or head.next is None or head.next.next is None:
        return head
    return _walk_pair(head, head)


def mid_or_down_mid(head: ListNode | None) -> ListNode | None:
    """Return the middle node, or the lower middle for an even length."""
    if head is None or head.next is None:
        return head
    if head.next.next is None:
        return head.next
    return _walk_pair(head.next, head.next)


def mid_or_up_mid_pre(head: ListNode | None) -> ListNode | None:
    """Return the node before the middle (upper middle for even lengths), if any."""
    if head is None or head.next is None or head.next.next is None:
        return None
    return _walk_pair(head, head.next.next)


def mid_or_down_mid_pre(head: ListNode | None) -> ListNode | None:
    """Return the node before the middle (lower middle for even lengths), if any."""
    if head is None or head.next is None:
        return None
    if head.next.next is None:
        return head
    return _walk_pair(head, head.next)


def is_palindrome(head: ListNode | None) -> bool:
    """Return whether the values read the same both ways; the list is left unchanged."""
    if head is None or head.next is None:
        return True
    mid = _walk_pair(head, head)
    second = reverse_list(mid.next)
    result = True
    left, right = head, second
    while right is not None:
        if left.val != right.val:
            result = False
            break
        left = left.next
        right = right.next
    mid.next = reverse_list(second)
    return result


def smaller_equal_bigger(head: ListNode | None, pivot: Any) -> ListNode | None:
    """Rearrange into values below, equal to and above ``pivot``, keeping order in each."""
    parts = [ListNode(), ListNode(), ListNode()]
    tails = list(parts)
    for node in list(_iter_nodes(head)):
        node.next = None
        slot = 0 if node.val < pivot else 1 if node.val == pivot else 2
        tails[slot].next = node
        tails[slot] = node
    dummy = ListNode()
    tail = dummy
    for part, part_tail in zip(parts, tails):
        if part.next is not None:
            tail.next = part.next
            tail = part_tail
    return dummy.next


def copy_random_list_with_map(head: RandomNode | None) -> RandomNode | None:
    """Deep-copy a random-pointer list using a node-to-copy mapping."""
    copies = {node: RandomNode(node.val) for node in _iter_nodes(head)}
    for node, copy in copies.items():
        copy.next = copies.get(node.next)
        copy.random = copies.get(node.random)
    return copies.get(head)


def copy_random_list(head: RandomNode | None) -> RandomNode | None:
    """Deep-copy a random-pointer list with constant extra space."""
    if head is None:
        return None
    # Interleave: 1 -> 1' -> 2 -> 2' -> ...
    cur: RandomNode | None = head
    while cur is not None:
        nxt = cur.next
        cur.next = RandomNode(cur.val, next=nxt)
        cur = nxt
    cur = head
    while cur is not None:
        copy = cur.next
        copy.random = cur.random.next if cur.random is not None else None
        cur = copy.next
    result = head.next
    cur = head
    while cur is not None:
        copy = cur.next
        nxt = copy.next
        cur.next = nxt
        copy.next = nxt.next if nxt is not None else None
        cur = nxt
    return result


def get_loop_node(head: ListNode | None) -> ListNode | None:
    """Return the first node of the list's cycle, or None if it has none."""
    if head is None or head.next is None or head.next.next is None:
        return None
    slow = head.next
    fast = head.next.next
    while slow is not fast:
        if fast.next is None or fast.next.next is None:
            return None
        fast = fast.next.next
        slow = slow.next
    fast = head
    while slow is not fast:
        slow = slow.next
        fast = fast.next
    return slow


def _advance(node: ListNode, steps: int) -> ListNode:
    for _ in range(steps):
        node = node.next
    return node


def _first_common(head1: ListNode, len1: int, head2: ListNode, len2: int, stop: Any) -> Any:
    cur1 = _advance(head1, max(0, len1 - len2))
    cur2 = _advance(head2, max(0, len2 - len1))
    while cur1 is not cur2 and cur1 is not stop:
        cur1 = cur1.next
        cur2 = cur2.next
    return cur1 if cur1 is cur2 else None


def no_loop_intersect(head1: ListNode | None, head2: ListNode | None) -> ListNode | None:
    """Return the first shared node of two acyclic lists, or None."""
    if head1 is None or head2 is None:
        return None
    nodes1 = list(_iter_nodes(head1))
    nodes2 = list(_iter_nodes(head2))
    if nodes1[-1] is not nodes2[-1]:
        return None
    return _first_common(head1, len(nodes1), head2, len(nodes2), None)


def _length_to(head: ListNode, stop: ListNode) -> int:
    length = 0
    while head is not stop:
        length += 1
        head = head.next
    return length


def both_loop_intersect(
    head1: ListNode, loop1: ListNode, head2: ListNode, loop2: ListNode
) -> ListNode | None:
    """Return the first shared node of two lists with cycles entered at ``loop1``/``loop2``."""
    if loop1 is loop2:
        len1 = _length_to(head1, loop1)
        len2 = _length_to(head2, loop1)
        cur1 = _advance(head1, max(0, len1 - len2))
        cur2 = _advance(head2, max(0, len2 - len1))
        while cur1 is not cur2:
            cur1 = cur1.next
            cur2 = cur2.next
        return cur1
    cur = loop1.next
    while cur is not loop1:
        if cur is loop2:
            return loop1
        cur = cur.next
    return None


def find_first_intersect_node(
    head1: ListNode | None, head2: ListNode | None
) -> ListNode | None:
    """Return the first node shared by two lists that may contain cycles, or None."""
    if head1 is None or head2 is None:
        return None
    loop1 = get_loop_node(head1)
    loop2 = get_loop_node(head2)
    if loop1 is None and loop2 is None:
        return no_loop_intersect(head1, head2)
    if loop1 is not None and loop2 is not None:
        return both_loop_intersect(head1, loop1, head2, loop2)
    return None