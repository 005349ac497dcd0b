# dsakit

A library of well-known data-structure and algorithm routines written in
plain Python, with no third-party dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `dsakit.nodes` | `TreeNode`, `ListNode`, `tree_from_level_order`, `tree_to_level_order`, `list_from_values`, `list_to_values` |
| `dsakit.linked_lists` | `detect_cycle`, `reverse_list`, `delete_middle` |
| `dsakit.arrays` | `first_missing_positive`, `missing_number`, `find_duplicates`, `find_disappeared_numbers`, `find_error_nums` |
| `dsakit.sliding_window` | `length_of_longest_substring`, `total_fruit`, `subarrays_with_k_distinct` |
| `dsakit.stacks` | `is_valid_parentheses`, `trap`, `MinStack`, `next_greater_element`, `next_greater_elements`, `asteroid_collision`, `sub_array_ranges` |
| `dsakit.stock` | `max_profit`, `max_profit_two_transactions`, `max_profit_k_transactions`, `max_profit_with_cooldown`, `max_profit_with_fee` |
| `dsakit.trees` | `inorder_traversal`, `preorder_traversal`, `level_order`, `right_side_view`, `max_depth`, `is_balanced`, `max_path_sum`, `diameter_of_binary_tree`, `count_nodes`, `width_of_binary_tree`, `build_tree_from_preorder_inorder`, `build_tree_from_inorder_postorder`, `lowest_common_ancestor`, `distance_k` |
| `dsakit.bst` | `search_bst`, `insert_into_bst`, `delete_node`, `kth_smallest`, `bst_lowest_common_ancestor`, `find_target`, `closest_nodes` |
| `dsakit.dynamic_programming` | `unique_paths`, `unique_paths_with_obstacles`, `min_path_sum`, `climb_stairs`, `edit_distance`, `rob`, `length_of_lis`, `coin_change`, `can_partition`, `longest_common_subsequence`, `longest_palindrome_subseq`, `delete_distance`, `min_falling_path_sum`, `minimum_difference` |
| `dsakit.graphs` | `DisjointSet` (`find`, `union_by_rank`, `union_by_size`), `ladder_length`, `accounts_merge`, `network_delay_time`, `remove_stones`, `make_connected` |

## Examples

Trees are built from level-order lists, using `None` for missing children:

```python
from dsakit.nodes import tree_from_level_order, tree_to_level_order
from dsakit.trees import inorder_traversal, level_order, max_depth

root = tree_from_level_order([3, 9, 20, None, None, 15, 7])
inorder_traversal(root)   # [9, 3, 15, 20, 7]
level_order(root)         # [[3], [9, 20], [15, 7]]
max_depth(root)           # 3
tree_to_level_order(root) # [3, 9, 20, None, None, 15, 7]
```

Linked lists work the same way:

```python
from dsakit.nodes import list_from_values, list_to_values
from dsakit.linked_lists import reverse_list

head = list_from_values([1, 2, 3])
list_to_values(reverse_list(head))  # [3, 2, 1]
```

A stack that reports its minimum in constant time:

```python
from dsakit.stacks import MinStack

stack = MinStack()
stack.push(-2)
stack.push(0)
stack.push(-3)
stack.get_min()  # -3
stack.pop()      # -3
stack.top()      # 0
stack.get_min()  # -2
len(stack)       # 2
```

Dynamic programming and graphs:

```python
from dsakit.dynamic_programming import edit_distance, coin_change
from dsakit.graphs import network_delay_time

edit_distance("horse", "ros")                                # 3
coin_change([1, 2, 5], 11)                                   # 3
network_delay_time([[2, 1, 1], [2, 3, 1], [3, 4, 1]], 4, 2)  # 2
```

## Behaviour worth knowing

- The functions in `dsakit.arrays`, `dsakit.sliding_window` and
  `dsakit.stacks` accept any iterable and never modify the caller's list.
- `reverse_list`, `delete_middle`, `delete_node` and `insert_into_bst`
  change the nodes they are given and return the (possibly new) head or root.
- `find_error_nums` returns a `(duplicated, missing)` tuple, or `None` when
  the values already form a permutation of `1..n`. `closest_nodes` returns a
  `(floor, ceiling)` tuple per query, with `-1` where no such value exists.
- Invalid input raises rather than returning a sentinel: for example
  `delete_middle` on an empty list, `max_profit` on no prices,
  `max_path_sum` on an empty tree, `kth_smallest` with `k` out of range,
  `insert_into_bst` with a value already present, and the tree builders on
  traversals that disagree all raise `ValueError`. `MinStack.pop`, `top` and
  `get_min` on an empty stack raise `IndexError`, as does `DisjointSet.find`
  for a node outside `0..n-1`.
- Results that cannot be reached are reported as the problems define them:
  `coin_change`, `network_delay_time` and `make_connected` return `-1`, and
  `ladder_length` returns `0`.

## What it does not do

dsakit is a library only: it has no command-line tool, and it reads no input
files and stores nothing. Call its functions from your own code.