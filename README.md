# dsbasics

A small library of classic data structures and algorithms in plain Python,
with no dependencies outside the standard library.

## Installation

```
pip install .
```

## What is inside

| Module | Contents |
| --- | --- |
| `dsbasics.matrix` | `multiply(a, b)` for integer matrices |
| `dsbasics.recursion` | `factorial`, `fibonacci`, `fibonacci_series` |
| `dsbasics.searching` | `linear_search`, `binary_search` |
| `dsbasics.counting` | `parity`, `repeat_counts`, `repeated_indices`, `repeated_exactly_twice` |
| `dsbasics.sorting` | `insertion_sort`, `merge_sort`, `quick_sort`, `heap_sort`, `sort_string` |
| `dsbasics.hash_table` | `LinearProbingTable`, `TableFullError` |
| `dsbasics.linked_list` | `LinkedList` with append, remove, reverse and palindrome check |
| `dsbasics.stack` | `BoundedStack`, `StackFullError` |
| `dsbasics.linear_queue` | `LinearQueue`, `QueueFullError` |
| `dsbasics.expressions` | `precedence`, `infix_to_postfix`, `evaluate_postfix` |
| `dsbasics.array_list` | `BoundedArray`, `ArrayFullError` |
| `dsbasics.bst` | `BinarySearchTree` with `inorder` and `kth_smallest` |
| `dsbasics.traversal` | `TreeNode`, `preorder`, `inorder`, `postorder` |
| `dsbasics.avl` | `AVLTree`, a self-balancing search tree |
| `dsbasics.graphs` | `bfs`, `dfs`, `dijkstra`, `prim_mst`, `kruskal_mst`, `Edge` |

## Examples

```python
from dsbasics.sorting import merge_sort
from dsbasics.expressions import infix_to_postfix, evaluate_postfix
from dsbasics.avl import AVLTree
from dsbasics.graphs import bfs

merge_sort([5, 2, 9, 1])            # [1, 2, 5, 9]

postfix = infix_to_postfix("2+3*4")  # "234*+"
evaluate_postfix(postfix)            # 14

tree = AVLTree([10, 20, 30, 40, 50, 25])
tree.delete(40)
tree.inorder()                       # [10, 20, 25, 30, 50]
25 in tree                           # True

adjacency = [
    [0, 1, 1],
    [1, 0, 0],
    [1, 0, 0],
]
bfs(adjacency, 0)                    # [0, 1, 2]
```

## Behaviour worth knowing

- The sorting functions return a new ascending list and leave their input
  untouched.
- `binary_search` returns an index of the target in an ascending sequence,
  or `None` when it is absent.
- `matrix.multiply`, `recursion.factorial` and `recursion.fibonacci` raise
  `ValueError` on mismatched shapes or negative arguments.
- `LinearProbingTable.insert` returns the slot index used and raises
  `TableFullError` when no slot is free; `display()` returns a text listing
  of every slot.
- `BoundedStack`, `LinearQueue` and `BoundedArray` raise `StackFullError`,
  `QueueFullError` and `ArrayFullError` when full. Popping, dequeueing or
  deleting from an empty one raises `IndexError`. A `LinearQueue` reuses its
  slots only after it has been emptied.
- `evaluate_postfix` works on single-digit operands with `+ - * / % ^`;
  division and remainder truncate toward zero.
- `dijkstra` returns `math.inf` for unreachable vertices; `prim_mst` raises
  `ValueError` for a disconnected graph. `kruskal_mst` accepts `Edge`
  objects or `(u, v, weight)` tuples.

## What this package does not do

It is a library only. It has no command-line program and no interactive
menus; input and output are up to the calling code.

## Running the tests

```
pip install ".[test]"
pytest
```