# classicalgo

A small library of classic algorithms and data structures, written in plain
Python with no runtime dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `classicalgo.containers` | `Stack`, `Queue`, `DoubleEndsQueue`, `RingQueue`, `MinStack`, `TwoStackQueue`, `TwoQueueStack` |
| `classicalgo.sorting` | `selection_sort`, `bubble_sort`, `insertion_sort`, `count_sort`, `radix_sort`, `get_digit`, `max_bits` |
| `classicalgo.searching` | `contains`, `find_left`, `find_right`, `find_peak_element`, `local_minimum` |
| `classicalgo.bits` | `xor_swap`, `odd_times_num`, `two_odd_times_nums`, `only_k_times` |
| `classicalgo.mergesort` | `merge_sort`, `merge_sort_iterative`, `small_sum`, `reverse_pair_count`, `bigger_than_right_twice`, `count_of_range_sum`, `get_max` |
| `classicalgo.quicksort` | `quick_sort`, `netherlands_flag` |
| `classicalgo.heap` | `MaxHeap`, `MinHeap`, `heap_insert`, `heapify`, `heap_sort`, `sort_almost_sorted`, `max_cover` |
| `classicalgo.trie` | `Trie` |
| `classicalgo.linked_list` | `ListNode`, `DoubleNode`, `RandomNode`, `from_values`, `to_values`, `double_from_values` and list algorithms such as `reverse_list`, `merge_two_lists`, `add_two_numbers`, `partition`, `delete_value`, `is_palindrome`, `copy_random_list`, `find_first_intersect_node` |
| `classicalgo.binary_tree` | `TreeNode`, `preorder`, `inorder`, `postorder` and their `_iterative` forms, `level_order`, `pre_serialize`, `pre_deserialize`, `level_serialize` |

The sorting functions (`selection_sort`, `bubble_sort`, `insertion_sort`,
`count_sort`, `radix_sort`, `merge_sort`, `merge_sort_iterative`,
`quick_sort`, `heap_sort`, `sort_almost_sorted`) sort the list they are given
in place and return `None`. The counting functions in `classicalgo.mergesort`
(`small_sum`, `reverse_pair_count`, `bigger_than_right_twice`,
`count_of_range_sum`) work on a copy and leave their input as it was.

## Examples

```python
from classicalgo.sorting import insertion_sort
from classicalgo.searching import find_left

data = [6, 3, 4, 2, 1]
insertion_sort(data)          # data is now [1, 2, 3, 4, 6]
find_left([1, 2, 2, 3], 2)    # 1: leftmost index holding a value >= 2
```

```python
from classicalgo.containers import MinStack

stack = MinStack()
for value in (2, 2, 3, 1):
    stack.push(value)
stack.get_min()               # 1
```

```python
from classicalgo.trie import Trie

trie = Trie()
trie.insert("apple")
trie.insert("app")
trie.prefix_number("app")     # 2
trie.search("apple")          # 1
```

```python
from classicalgo.linked_list import from_values, to_values, reverse_list

to_values(reverse_list(from_values([1, 2, 3])))   # [3, 2, 1]
```

```python
from classicalgo.binary_tree import TreeNode, pre_serialize, pre_deserialize

tree = TreeNode(1, TreeNode(2), TreeNode(3))
pre_serialize(tree)                              # [1, 2, None, None, 3, None, None]
pre_serialize(pre_deserialize([1, 2, None, None, 3, None, None]))  # the same list
```

## Errors and limits

- `Stack`, `Queue`, `MinStack`, `TwoStackQueue`, `TwoQueueStack`, `MaxHeap`,
  `MinHeap` and `RingQueue` raise `IndexError` when popped or peeked while
  empty. `RingQueue` raises `OverflowError` when pushed while full.
- `DoubleEndsQueue.pop_front` and `pop_back` return `None` on an empty queue.
- `count_sort` accepts values from 0 to 199 and raises `ValueError` otherwise.
- `radix_sort` raises `ValueError` for negative values.
- `get_max` raises `ValueError` for an empty sequence.
- `sort_almost_sorted` raises `ValueError` for a negative `k`.
- `pre_deserialize` raises `ValueError` when its input ends too early.
- `xor_swap(arr, i, i)` sets the element to 0.

## What this package does not do

It is a library only: there is no command-line program, and nothing is read
from or written to files. The traversal functions in
`classicalgo.binary_tree` return lists of values rather than printing them.