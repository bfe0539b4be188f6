# dsakit

A small library of classic data structures and algorithms in plain Python.
It has no dependencies outside the standard library.

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
| `dsakit.matrix` | `is_present`, `row_sums`, `column_sums`, `largest_row_sum`, `search_matrix`, `wave_print` |
| `dsakit.sorting` | `partition`, `quick_sort`, `merge_sort`, `bubble_sort`, `insertion_sort`, `selection_sort` |
| `dsakit.searching` | `binary_search`, `first_occurrence`, `last_occurrence`, `first_and_last_position`, `get_pivot`, `find_position`, `sqrt_integer`, `sqrt_precise`, `aggressive_cows`, `allocate_books`, `median_of_two` |
| `dsakit.recursion` | `subsequences`, `subsets` |
| `dsakit.strings` | `to_lower_case`, `is_palindrome`, `reverse_string`, `count_words` |
| `dsakit.fibonacci` | `fib_iterative`, `fib_recursive`, `fib_table` |
| `dsakit.stack` | `next_smaller_indices`, `previous_smaller_indices`, `next_smaller_element`, `largest_rectangle_area` |
| `dsakit.heap` | `MaxHeap`, `heap_sort` |
| `dsakit.graph` | `Graph`, `articulation_points` |
| `dsakit.trie` | `Trie` |
| `dsakit.bst` | `BinarySearchTree` |
| `dsakit.singly_linked` | `Node`, `SinglyLinkedList`, `is_circular`, `detect_loop`, `floyd_detect_loop`, `loop_start`, `remove_loop` |
| `dsakit.doubly_linked` | `DoublyNode`, `DoublyLinkedList` |
| `dsakit.circular_linked` | `CircularLinkedList` |
| `dsakit.tree` | `TreeNode`, `build_tree`, `build_tree_preorder`, `build_from_level_order`, `level_order`, `inorder`, `preorder`, `postorder`, `height` |
| `dsakit.tree_views` | `left_view`, `right_view`, `top_view`, `bottom_view` |
| `dsakit.tree_traversals` | `boundary`, `vertical_order`, `zigzag` |
| `dsakit.tree_checks` | `is_balanced`, `diameter`, `is_identical`, `is_sum_tree` |

The sorting functions reorder the list they are given and also return it.
Linked lists count positions from 1. Bad input raises: `IndexError` for a
position outside a list or a `peek` on an empty heap, `ValueError` for things
such as a negative Fibonacci index, a word with characters other than `A`–`Z`
given to a `Trie`, or a value missing from a `CircularLinkedList`.

## Examples

Sorting and searching:

```python
from dsakit.sorting import merge_sort
from dsakit.searching import first_and_last_position

merge_sort([12, 11, 45, 5])                  # [5, 11, 12, 45]
first_and_last_position([1, 2, 2, 2, 3], 2)  # (1, 3)
```

Binary trees are built from a level-order string. `N` marks a missing child:

```python
from dsakit.tree import build_tree, inorder
from dsakit.tree_views import left_view

root = build_tree("1 2 3 N 4")
inorder(root)    # [2, 4, 1, 3]
left_view(root)  # [1, 2, 4]
```

A trie of upper-case words:

```python
from dsakit.trie import Trie

trie = Trie()
trie.insert_word("TIME")
trie.search_word("TIM")   # False
trie.search_word("TIME")  # True
```

A max-heap and articulation points:

```python
from dsakit.heap import MaxHeap
from dsakit.graph import articulation_points

heap = MaxHeap([60, 55, 52, 53, 50])
heap.peek()      # 60
heap.to_list()   # [60, 55, 52, 53, 50]

articulation_points(5, [(0, 3), (3, 4), (0, 4), (0, 1), (1, 2)])  # [0, 1]
```

## What it does not do

`dsakit` is a library only. It has no command-line program and reads
nothing from standard input: the tree builders `build_tree_preorder` and
`build_from_level_order` take an iterable of values rather than prompting for
them, and nothing is printed. Results are returned as lists, tuples, numbers
or strings for the caller to display.