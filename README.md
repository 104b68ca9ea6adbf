# dsakit

Classic data-structure and algorithm exercises as plain Python functions and
small classes, using only the standard library.

## What is inside

| Module | Contents |
| --- | --- |
| `dsakit.linked_list` | `ListNode`, `LinkedStack`; `from_values`, `to_values`, `iter_nodes`, `reverse_list`, `has_cycle`, `find_loop_start`, `remove_cycle`, `sorted_merge`, `merge_sort`, `sorted_insert`, `flatten` |
| `dsakit.list_arithmetic` | `add_lists` and `subtract_lists` on numbers stored one decimal digit per node, most significant first |
| `dsakit.list_ops` | `skip_and_delete`, `reverse_between`, `reverse_in_groups`, `rotate`, `sort_by_actual_value`, `delete_smaller_than_right`, `delete_middle`, `delete_at` |
| `dsakit.searching` | `binary_search`, `find_pivot`, `search_rotated`, `mountain_peak`, `is_allocation_possible`, `allocate_pages` |
| `dsakit.nqueens` | `is_safe`, `solve_n_queens`, `render_board` and the `dsakit-nqueens` command |
| `dsakit.heaps` | `MaxHeap`, `MinHeap`; `heapify_max`, `heapify_min`, `build_max_heap`, `build_min_heap`, `heap_sort`, `merge_heaps`, `kth_smallest`, `kth_largest`, `min_operations` |
| `dsakit.containers` | `ArrayStack` (fixed capacity), `QueueStack` (a stack from two queues), `StackQueue` (a queue from two stacks); `delete_middle_of_stack`, `insert_at_bottom`, `reverse_stack`, `sort_stack`, `min_at_pop`, `reverse_string` |
| `dsakit.stack_problems` | `asteroid_collision`, `stock_span`, `next_greater`, `next_smaller`, `is_valid_parentheses` |
| `dsakit.trees` | `TreeNode`; `from_level_order`, `inorder`, `preorder`, `postorder`, `level_order` |
| `dsakit.bst` | `insert`, `build_bst`, `delete`, `min_node`, `max_node`, `inorder_predecessor`, `inorder_successor`, `is_bst`, `largest_bst_size`, `bst_from_preorder`, `balance`, `merge_sorted`, `kth_smallest` |
| `dsakit.tree_convert` | `to_dll` and `to_circular_dll`, relinking a tree in place in inorder |
| `dsakit.tree_views` | `bottom_view`, `top_view`, `left_view`, `level_maximums`, `vertical_sums`, `boundary_traversal`, `connect_levels` |
| `dsakit.tree_properties` | `height`, `diameter`, `has_children_sum_property`, `is_sum_tree`, `to_sum_tree`, `kth_ancestor` |
| `dsakit.tree_build` | `from_inorder_postorder`, `from_inorder_preorder`, `serialize`, `deserialize`, `sorted_list_to_bst` |

Stacks handed to the functions in `dsakit.containers` are Python lists whose
top is the last item. Empty containers raise `IndexError` on `pop`, and a full
`ArrayStack` raises `OverflowError` on `push`.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Examples

Linked lists are built from ordinary Python sequences and read back the same
way:

```python
from dsakit.linked_list import from_values, to_values, reverse_list

head = from_values([9, 5, 8, 11, 21])
print(to_values(reverse_list(head)))   # [21, 11, 8, 5, 9]
```

Binary search problems take plain lists:

```python
from dsakit.searching import allocate_pages

print(allocate_pages([12, 34, 67, 90], 2))   # 113
```

Stack problems return lists or booleans:

```python
from dsakit.stack_problems import stock_span, is_valid_parentheses

print(stock_span([100, 80, 60, 70, 60, 75, 85]))   # [1, 1, 1, 2, 1, 4, 6]
print(is_valid_parentheses("{{{}}}(())"))          # True
```

Trees are made from a level-order list, where `None` marks a missing child,
and walked with the traversal functions:

```python
from dsakit.trees import from_level_order, inorder, level_order

root = from_level_order([1, 3, 2])
print(inorder(root))      # [3, 1, 2]
print(level_order(root))  # [1, 3, 2]
```

## Command line

The package installs one command, which prints every placement of N queens on
an N by N board so that no two attack each other. Each board is drawn with `Q`
for a queen and `-` for an empty square, followed by a blank line. The board
size defaults to 4:

```
dsakit-nqueens
dsakit-nqueens 6
```