# algokit

Compact implementations of well-known algorithm exercises over arrays,
sorted sequences, strings, integers, graphs, binary and n-ary trees, and
singly linked lists. The package has no runtime dependencies.

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

| Module              | Contents |
|---------------------|----------|
| `algokit.arrays`    | `two_sum`, `two_sum_sorted`, `remove_duplicates`, `intersect`, `merge_sorted`, `sort_by_parity`, `sorted_squares`, `distinct_elements`, `main` |
| `algokit.search`    | `binary_search`, `first_bad_version`, `search_insert`, `is_perfect_square`, `my_sqrt`, `peak_index_in_mountain` |
| `algokit.strings`   | `remove_adjacent_duplicates`, `is_valid_parentheses`, `reverse_string`, `is_subsequence`, `count_segments`, `length_of_last_word` |
| `algokit.numbers`   | `tribonacci`, `fib`, `climb_stairs`, `hamming_distance` |
| `algokit.graphs`    | `garden_no_adj`, `flood_fill`, `find_judge` |
| `algokit.trees`     | `TreeNode`, `NaryNode`, `build_tree`, `is_same_tree`, `is_symmetric`, `max_depth`, `min_depth`, `is_balanced`, `has_path_sum`, `binary_tree_paths`, `nary_max_depth`, `leaf_similar`, `increasing_bst` |
| `algokit.linked`    | `ListNode`, `build_list`, `list_values`, `merge_two_lists` |

## Examples

```python
from algokit.arrays import two_sum
from algokit.search import my_sqrt
from algokit.strings import is_valid_parentheses
from algokit.numbers import climb_stairs

two_sum([2, 7, 11, 15], 9)        # [0, 1]
my_sqrt(8)                        # 2
is_valid_parentheses("()[]{}")    # True
climb_stairs(5)                   # 8
```

Build trees from a level-order list, in which `None` marks a missing child:

```python
from algokit.trees import build_tree, max_depth, binary_tree_paths

root = build_tree([3, 9, 20, None, None, 15, 7])
max_depth(root)
binary_tree_paths(root)
```

Linked lists are built from and flattened back to plain lists:

```python
from algokit.linked import build_list, list_values, merge_two_lists

merged = merge_two_lists(build_list([1, 2, 4]), build_list([1, 3, 4]))
list_values(merged)               # [1, 1, 2, 3, 4, 4]
```

## Notes on behaviour

- `two_sum` returns an empty list when no pair matches. `two_sum_sorted`
  returns one-based positions and raises `ValueError` when no pair matches.
- `remove_duplicates`, `merge_sorted`, `sort_by_parity`, `reverse_string`,
  `flood_fill` and `increasing_bst` change their argument in place.
- `tribonacci` accepts `0 <= n <= 37`, `fib` accepts `0 <= n <= 32` and
  `climb_stairs` accepts `1 <= n <= 100000`. Other values raise `ValueError`.
- `hamming_distance` compares only the low 32 bits of its arguments.
- `garden_no_adj` and `find_judge` number gardens and people from 1. They raise
  `ValueError` for a number outside `1..n`.

## Command line

`algokit-distinct` takes nine integers as arguments, or reads them from
standard input when none are given. Extra values are ignored. It prints each
value that does not appear again later among the nine. The values are written
one after another with no separator and no trailing newline:

```
echo 1 2 3 2 4 5 1 6 7 | algokit-distinct
```

The command above prints `3245167`. If fewer than nine integers are given, or
a value is not an integer, the command writes a message to standard error and
exits with status 1.