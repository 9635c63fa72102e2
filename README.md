# algonotes

A small collection of well-known algorithms and data structures, written as
plain, dependency-free Python.

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

| Module                 | Contents |
|------------------------|----------|
| `algonotes.dynamic`    | `max_subarray_sum` (Kadane), `knapsack` (0/1), `longest_increasing_subsequence` |
| `algonotes.arrays`     | `binary_search`, `sorted_squares`, `rotate_right`, `max_profit`, `three_sum`, `longest_mountain`, `minimum_abs_difference`, `median_of_sorted` |
| `algonotes.text`       | `prefix_function`, `kmp_search`, `longest_unique_substring`, `length_of_last_word`, `find_substring`, `postfix_to_infix` |
| `algonotes.numbers`    | `factorial`, `n_choose_r`, `is_prime`, `next_prime`, `hanoi_moves`, `Move`, `main` |
| `algonotes.structures` | `DisjointSet`, `FenwickTree`, `SegmentTree`, `LRUCache` |
| `algonotes.graphs`     | `bfs`, `dfs`, `dijkstra`, `topological_order`, `kruskal_mst`, `count_provinces`, `flood_fill`, `CycleError` |
| `algonotes.linked`     | `ListNode`, `DoublyLinkedList`, `linked_list_from`, `to_list`, `has_cycle`, `reverse_list` |
| `algonotes.trees`      | `TreeNode`, `inorder`, `preorder`, `postorder`, `level_order`, `vertical_traversal` |

Functions that search for something absent raise `ValueError` rather than
returning a sentinel: `binary_search` and `find_substring` do so when the
target is missing, and `max_subarray_sum` and `median_of_sorted` when given
no values.

## Examples

```python
from algonotes.arrays import binary_search, three_sum
from algonotes.dynamic import knapsack, max_subarray_sum
from algonotes.numbers import next_prime
from algonotes.text import kmp_search, postfix_to_infix

binary_search([2, 4, 6, 8, 10, 12, 14], 10)      # 4
three_sum([-1, 0, 1, 2, -1, -4])                 # [(-1, -1, 2), (-1, 0, 1)]
max_subarray_sum([-2, -3, 4, -1, -2, 1, 5, -3])  # 7
knapsack(50, [10, 20, 30], [60, 100, 120])       # 220
kmp_search("abxabcabcaby", "abcaby")             # [6]
postfix_to_infix("ab+c*")                        # "((a+b)*c)"
next_prime(13)                                   # 17
```

Data structures:

```python
from algonotes.structures import DisjointSet, FenwickTree, LRUCache, SegmentTree

sets = DisjointSet(5)
sets.union(0, 1)               # True
sets.find(0) == sets.find(1)   # True

tree = FenwickTree(5)          # positions 1..5
tree.add(1, 5)
tree.add(3, 2)
tree.add(5, 7)
tree.range_sum(1, 3)           # 7

segments = SegmentTree([1, 3, 5, 7, 9, 11])   # positions 0..5
segments.query(1, 3)           # 15
segments.update(2, 6)
segments.query(1, 3)           # 16

cache = LRUCache(2)
cache.put(1, 1)
cache.put(2, 2)
cache.get(1)                   # 1
cache.put(3, 3)                # evicts key 2
cache.get(2)                   # None
```

Graphs are given as adjacency lists indexed by vertex number:

```python
from algonotes.graphs import CycleError, bfs, dfs, kruskal_mst, topological_order

adjacency = [[1, 2], [0, 3], [0, 4], [1], [2]]
bfs(adjacency, 0)              # [0, 1, 2, 3, 4]
dfs(adjacency, 0)              # [0, 1, 3, 2, 4]

edges = [(0, 1, 10), (0, 2, 6), (0, 3, 5), (1, 3, 15), (2, 3, 4)]
kruskal_mst(4, edges)          # (19, [(2, 3, 4), (0, 3, 5), (0, 1, 10)])

try:
    topological_order([[1], [0]])
except CycleError:
    print("the graph has a cycle")
```

`dijkstra` takes lists of `(neighbour, weight)` pairs and returns a list of
distances, with `math.inf` for vertices that cannot be reached.
`flood_fill` returns a recoloured copy and leaves the given image unchanged.

## Command line

The Tower of Hanoi solver is available as a command. Give it the number of
disks; it prints every move and the total number of moves. Without an
argument it asks for the number on standard input.

```
algonotes-hanoi 3
```

The same moves are available from Python as `Move` objects:

```python
from algonotes.numbers import hanoi_moves

[str(move) for move in hanoi_moves(2)]
# ['Move disk 1 from rod A to rod B',
#  'Move disk 2 from rod A to rod C',
#  'Move disk 1 from rod B to rod C']
```

## What it does not do

The package has no sorting routines of its own: there is no heap sort, merge
sort, quicksort, quickselect or counting sort here. Use Python's built-in
`sorted` and `list.sort`, which `three_sum` and `minimum_abs_difference` rely
on themselves.