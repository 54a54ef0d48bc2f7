# algosuite

Well-known algorithm and data-structure routines in plain Python, with no
third-party dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `algosuite.tree_build`

- `TreeNode(val, left=None, right=None)`: a binary tree node. Nodes compare by
  identity.
- `tree_from_level_order(values)` / `tree_to_level_order(root)`: convert
  between a tree and a level-order list in which `None` marks a missing child.
  The output list has trailing `None` values trimmed.
- `bst_from_preorder(preorder)`, `build_tree_pre_in(preorder, inorder)`,
  `build_tree_in_post(inorder, postorder)`,
  `construct_from_pre_post(preorder, postorder)`: rebuild trees from
  traversals. The two-traversal builders raise `ValueError` when the
  traversals differ in length.
- `sorted_array_to_bst(nums)`: a height-balanced search tree from sorted data.

### `algosuite.tree_query`

`max_depth`, `is_same_tree`, `is_valid_bst`, `count_nodes` (for complete
trees), `lowest_common_ancestor`, `lowest_common_ancestor_bst`,
`binary_tree_paths` (strings such as `"1->2->5"`, left paths first),
`diameter_of_binary_tree` (in edges) and `search_bst` (the node, or `None`).

### `algosuite.bst_edit`

- `delete_node(root, key)`: remove the node holding `key`, returning the root.
- `trim_bst(root, low, high)`: drop nodes outside `[low, high]`.

### `algosuite.linked_lists`

- `ListNode(val, next=None)`, `from_values(values)`, `to_values(head)`.
- `reorder_list(head)` (in place), `swap_pairs`, `delete_duplicates` (drops
  every repeated value of a sorted list), `partition(head, x)`,
  `odd_even_list`, `split_list_to_parts(head, k)` (raises `ValueError` when
  `k < 1`).
- `LinkedList`: `get(index)` raises `IndexError` out of range;
  `add_at_head`, `add_at_tail`, `add_at_index` and `delete_at_index` ignore
  indices out of range. Supports `len()` and iteration over values.

### `algosuite.containers`

- `is_valid_parentheses(s)`: any character other than `()[]{}` makes the
  string invalid.
- `StackFromQueue` (`push`, `pop`, `top`, `empty`) and `QueueFromStacks`
  (`push`, `pop`, `peek`, `empty`); reading from an empty one raises
  `IndexError`.
- `KthLargest(k, nums)` with `add(val)` returning the current k-th largest.

### `algosuite.searching`

`binary_search`, `search_rotated`, `search_rotated_with_duplicates` (returns a
bool), `search_range` (a `(first, last)` tuple), `search_insert`,
`find_peak_element`, `peak_index_in_mountain_array`, `single_non_duplicate`,
`my_sqrt` and `is_perfect_square`. Index-returning searches give `-1` when
nothing is found.

### `algosuite.arrays`

`two_sum` (a tuple `(i, j)` with `i < j`, or `(-1, -1)`), `remove_element`,
`max_sub_array`, `max_product`, `three_consecutive_odds`, `chalk_replacer`,
`find_kth_largest`, `find_duplicate`, `top_k_frequent` (least frequent of the
top `k` first), `find_max_consecutive_ones`, `maximum_product`,
`find_closest_elements`, `add_to_array_form`, `check_sorted_rotated`,
`left_right_difference`, `find_missing_and_repeated_values` (a
`(repeated, missing)` tuple), `minimum_operations` and
`stable_mountains`. Inputs that leave no answer, such as an empty sequence for
`max_sub_array`, raise `ValueError`.

### `algosuite.strings`

`reverse_words`, `reverse_vowels`, `max_power`, `check_if_pangram`,
`largest_odd_number` and `score_of_string`.

### `algosuite.number_theory`

`reverse_integer` (0 when the result leaves the signed 32-bit range),
`is_palindrome`, `is_power_of_three`, `is_power_of_four`, `judge_square_sum`,
`pivot_integer` (`-1` when there is none) and `smallest_number`.

## Example

```python
from algosuite.tree_build import tree_from_level_order, sorted_array_to_bst
from algosuite.tree_query import max_depth, is_valid_bst
from algosuite.linked_lists import from_values, to_values, reorder_list
from algosuite.containers import KthLargest

root = tree_from_level_order([3, 9, 20, None, None, 15, 7])
print(max_depth(root))                                     # 3

print(is_valid_bst(sorted_array_to_bst([1, 2, 3, 4, 5])))  # True

head = from_values([1, 2, 3, 4, 5])
reorder_list(head)
print(to_values(head))                                     # [1, 5, 2, 4, 3]

stream = KthLargest(3, [4, 5, 8, 2])
print(stream.add(3))                                       # 4
```

## What it does not do

algosuite is a library only: it has no command-line program, and it reads
and writes no files.