# algonotes

A collection of well-known algorithms written as plain Python functions:
binary-tree traversals and measurements, a linked-list palindrome check,
grid searches, graph and union-find problems, interval handling, greedy
strategies and sliding-window counts. It has no dependencies beyond the
standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Building blocks

`algonotes.nodes` provides the `TreeNode` and `ListNode` dataclasses (both
compare by identity) and helpers to build them:

```python
from algonotes.nodes import build_tree, tree_to_list, build_linked_list

root = build_tree([3, 9, 20, None, None, 15, 7])
tree_to_list(root)                  # [3, 9, 20, None, None, 15, 7]
list(build_linked_list([1, 2, 3]))  # [1, 2, 3]
```

`build_tree` reads values in level order with `None` for a missing child;
`tree_to_list` writes them back the same way, dropping trailing `None`s.
Iterating over a `ListNode` yields the values from that node to the end.

## Modules

- `algonotes.traversal`: `level_order`, `level_order_bottom`,
  `zigzag_level_order`, `vertical_traversal`, `preorder`, `inorder`,
  `postorder`, `right_side_view`, `bottom_left_value`.
- `algonotes.tree_metrics`: `is_same_tree`, `max_depth`, `min_depth`,
  `is_balanced`, `max_path_sum`, `lowest_common_ancestor`, `diameter`,
  `max_width`.
- `algonotes.linked_lists`: `is_palindrome`.
- `algonotes.grids`: `oranges_rotting`, `count_enclaves`,
  `shortest_clear_path`, `capture_surrounded`, `count_islands`,
  `nearest_zero_distances`, `flood_fill`.
- `algonotes.graphs`: `DisjointSet` (with `find` and `union`),
  `make_connected`, `can_finish`, `find_order`, `count_provinces`,
  `merge_accounts`, `is_bipartite`, `remove_stones`.
- `algonotes.intervals`: `erase_overlap_intervals`, `merge_intervals`,
  `insert_interval`.
- `algonotes.greedy`: `distribute_candy`, `min_jumps`, `can_jump`,
  `find_content_children`, `check_valid_string`, `lemonade_change`.
- `algonotes.windows`: `number_of_nice_subarrays`,
  `count_substrings_with_abc`, `max_card_score`, `character_replacement`,
  `subarray_sum`, `num_subarrays_with_sum`.
- `algonotes.misc`: `is_valid_sudoku`, `subsets`, `merge_sorted`.

## Examples

```python
from algonotes.nodes import build_tree
from algonotes.traversal import zigzag_level_order
from algonotes.grids import count_islands
from algonotes.intervals import merge_intervals
from algonotes.graphs import find_order

zigzag_level_order(build_tree([3, 9, 20, None, None, 15, 7]))
# [[3], [20, 9], [15, 7]]

count_islands([
    ["1", "1", "0"],
    ["0", "1", "0"],
    ["0", "0", "1"],
])
# 2

merge_intervals([[1, 3], [2, 6], [8, 10]])
# [[1, 6], [8, 10]]

find_order(2, [[1, 0]])
# [0, 1]
```

## Behaviour worth knowing

- `capture_surrounded` and `merge_sorted` change the list they are given and
  return `None`. `flood_fill` leaves its input alone and returns a painted
  copy.
- `find_order` returns an empty list when the prerequisites contain a cycle;
  `make_connected` and `oranges_rotting` return `-1` when the goal cannot be
  reached, as does `shortest_clear_path` when there is no path.
- `ValueError` is raised by `bottom_left_value` and `max_path_sum` for an
  empty tree, by `distribute_candy` and `min_jumps` for an empty list, by
  `min_jumps` when the last position cannot be reached, and by
  `max_card_score` when `k` is outside `0 .. len(card_points)`.

## What it does not do

This is a library only: it installs no command-line program and reads no
input files. Call the functions from your own code.