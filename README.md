# algokit

Classic algorithms and data structures in plain Python, with no dependencies
outside the standard library.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## What is inside

### `algokit.sorting`

`bitonic_sort(values, ascending=True)`, `bucket_sort`, `heap_sort`,
`merge_sort`, `bubble_sort`, `quick_sort`, `insertion_sort`.

Each function takes an iterable and returns a new sorted list. The input is
left as it is. There are two restrictions:

- `bitonic_sort` needs a length that is a power of two. An empty input is also
  accepted. Any other length raises `ValueError`.
- `bucket_sort` needs numbers in the range `[0, 1)`. Anything outside it raises
  `ValueError`.

### `algokit.searching`

`binary_search(values, target, low=0, high=None)`, `exponential_search`,
`fibonacci_search`, `interpolation_search`, `jump_search`.

All of them work on sorted sequences. They return the index of the target, or
`None` when it is not there. `binary_search` searches the inclusive range
`values[low..high]`; by default that is the whole sequence.

### `algokit.mathutils`

| Function | Returns |
| --- | --- |
| `factorial(n)` | The product of 1..n. Gives 1 for n below 1. |
| `fibonacci(n)` | The n-th Fibonacci number, counted from 1. `fibonacci(1) == 0`. Raises `ValueError` for n < 1. |
| `fibonacci_series(count)` | The first `count` Fibonacci numbers, starting with 0. |
| `prime_factors(n)` | The prime factors of n with multiplicity, in non-decreasing order. |
| `divisors(n)` | All positive divisors of n, in increasing order. |
| `floor_sqrt(x)` | The integer square root. Raises `ValueError` for negative x. |

### `algokit.graphs`

- `DisjointSet`: union-find over any hashable nodes. It has `find(node)`, which
  uses path halving, and `union(a, b)`. A node is created the first time it is
  used.
- `kruskal(edges)`: takes `(weight, a, b)` edges and returns the total weight
  of a minimum spanning forest.

### `algokit.trees`

`TreeNode(val, left=None, right=None)` is a binary tree node. Nodes compare by
identity. The module works on these nodes with the following functions.

Binary search trees:

- `bst_insert(root, value)`: inserts a value and returns the root. Values equal
  to a node go to its left.
- `search_bst(root, value)`: returns the node holding the value, or `None`.
- `floor_in_bst(root, key)`: the largest value not above `key`, or `None`.
- `kth_smallest(root, k)`: the k-th smallest value, counting from 1. Raises
  `ValueError` if k is below 1 or the tree has fewer than k nodes.

Traversals, each a generator of values:

- `inorder(root)`
- `preorder(root)`
- `postorder(root)`

Tree queries:

- `diameter(root)`: the number of edges on the longest path between any two
  nodes.
- `is_balanced(root)`: whether the subtree heights of every node differ by at
  most one.
- `path_sum(root, target)`: all root-to-leaf paths whose values add up to
  `target`.
- `vertical_traversal(root)`: values column by column from left to right.
  Within a column they are ordered by depth, then by value.

Building trees:

- `build_tree(inorder_values, postorder_values)`: rebuilds a tree of distinct
  values from its inorder and postorder sequences. Raises `ValueError` on
  inconsistent input.
- `tree_from_level_order(values)`: builds a tree from values listed in level
  order. `None` marks a missing child.

### `algokit.lru`

This module has two least-recently-used caches with a fixed capacity:

- `LRUCache(capacity)` keeps its entries in an ordered dict.
- `LinkedLRUCache(capacity)` keeps its entries in a doubly linked list with a
  key index.

Both caches work the same way:

- `get(key)` returns the value and marks the key as most recently used. It
  returns `None` for a missing key.
- `put(key, value)` stores the value. When the cache is full, it first evicts
  the least recently used key.
- Both support `len()` and `in`.
- Iterating over a cache yields its keys from most to least recently used.
- A capacity below 1 raises `ValueError`.

### `algokit.backtracking`

- `graph_coloring(graph, m)`: colours the vertices of an adjacency matrix with
  colours `1..m`. Returns the first valid colouring, or `None`.
- `solve_n_queens(n)`: returns every placement of n non-attacking queens. Each
  placement is a list of row strings made of `.` and `Q`.
- `solve_maze(maze)`: finds a path from the top-left cell to the bottom-right
  cell, moving only down or right. Returns a 0/1 grid that marks the path, or
  `None` if there is no path.
- `solve_sudoku(grid)`: fills the zeros of a 9x9 grid. Returns the solved grid
  as a new list, or `None` if the grid has no solution.

### `algokit.rps`

A rock-paper-scissors game against the computer. The module has:

- the `Choice` enum;
- `parse_choice(text)`;
- `judge(user, computer)`, which returns the result message;
- `play_round(user_text, rng)`;
- `main(argv=None)`.

## Example

```python
from algokit.sorting import merge_sort
from algokit.searching import exponential_search
from algokit.lru import LRUCache

merge_sort([4, 5, 2, 1, 3, 4, 6, 2])          # [1, 2, 2, 3, 4, 4, 5, 6]
exponential_search([2, 3, 4, 10, 40], 10)     # 3

cache = LRUCache(2)
cache.put(1, 1)
cache.put(2, 2)
cache.get(1)      # 1
cache.put(3, 3)   # evicts key 2
cache.get(2)      # None
```

## Playing rock-paper-scissors

```
algokit-rps
```

The game clears the screen first. At each prompt, type R, P or S in either
case; only the first letter counts. It keeps playing rounds until input ends
or you interrupt it.

Options:

- `--seed N` makes the computer's choices repeatable.
- `--no-clear` leaves the screen as it is.

## What it does not do

The package has no self-balancing search tree. `bst_insert` builds a plain
binary search tree, and nothing rebalances it when values arrive in sorted
order.