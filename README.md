# dsakit

A small, dependency-free collection of classic data structures and
algorithms in plain Python.

## What is inside

| Module | Contents |
| --- | --- |
| `dsakit.searching` | `linear_search`, `recursive_linear_search`, `binary_search`, `recursive_binary_search`, and `HashSearch`, integers chained into `value % size` buckets (7 by default) |
| `dsakit.stacks` | `ArrayStack` (fixed capacity, 5 by default) and the unbounded `LinkedStack`, with `StackOverflowError` and `StackUnderflowError` |
| `dsakit.linked_lists` | `SinglyLinkedList` with positional insertion and deletion; the ascending, duplicate-free `OrderedList`, `DoublyLinkedList` and `CircularDoublyLinkedList`; `DuplicateValueError` |
| `dsakit.bst` | `BinarySearchTree` with insertion, deletion, in/pre/post-order traversal, `smallest` and `largest` |
| `dsakit.graph` | `Graph` with `breadth_first` and `depth_first` traversal; `WeightedGraph` with Prim's minimum spanning tree (`prim_mst`, returning a `SpanningTree` of `WeightedEdge`s) |
| `dsakit.shortest_paths` | `bellman_ford` (raises `NegativeCycleError`) and `floyd_warshall`, both returning `ShortestPaths` |
| `dsakit.sorting` | bubble, insertion, merge, quick, randomized quick, heap, counting, radix and bucket sort |
| `dsakit.subarray` | maximum subarray by brute force and by divide and conquer, returning `MaxSubarray` |
| `dsakit.subset_sum` | `unique_sorted` and `subset_sums`, every subset adding up to a target, found by backtracking |
| `dsakit.inputs` | random input generators, `write_values`/`read_values` for tab-separated files, and the `dsakit-inputs` command |

## Installation

```
pip install dsakit
```

To run the test suite:

```
pip install "dsakit[test]"
pytest
```

## Examples

Searching returns an index, or `None` when the target is absent:

```python
from dsakit.searching import binary_search, HashSearch

print(binary_search([1, 3, 5, 7, 9], 7))   # 3

table = HashSearch(7)
for value in (10, 17, 24):
    table.insert(value)
print(17 in table, len(table))             # True 3
```

Stacks raise instead of returning status flags:

```python
from dsakit.stacks import ArrayStack, StackOverflowError

stack = ArrayStack(2)
stack.push(1)
stack.push(2)
try:
    stack.push(3)
except StackOverflowError:
    print("full")
print(stack.pop())    # 2
```

Ordered linked lists reject duplicates and report one-based positions:

```python
from dsakit.linked_lists import DoublyLinkedList

items = DoublyLinkedList([30, 10, 20])
print(list(items), list(reversed(items)))  # [10, 20, 30] [30, 20, 10]
print(items.position_from_head(20))        # 2
items.remove(10)
```

A binary search tree (equal values go to the right):

```python
from dsakit.bst import BinarySearchTree

tree = BinarySearchTree([50, 30, 70, 20, 40])
tree.delete(30)
print(list(tree.inorder()))        # [20, 40, 50, 70]
print(tree.smallest(), tree.largest())
```

Graphs keep vertices and arcs in insertion order, and traversals restart
at the first unvisited vertex so every vertex is visited:

```python
from dsakit.graph import Graph, WeightedGraph

g = Graph()
for label in "ABCD":
    g.add_vertex(label)
g.add_edge("A", "B")
g.add_edge("A", "C")
g.add_edge("B", "D")
print(g.breadth_first())   # ['A', 'B', 'C', 'D']
print(g.depth_first())     # ['A', 'B', 'D', 'C']

w = WeightedGraph()
for label in "XYZ":
    w.add_vertex(label)
w.add_edge("X", "Y", 4)
w.add_edge("Y", "Z", 1)
w.add_edge("X", "Z", 2)
print(w.prim_mst().cost)   # 3
```

Shortest paths use zero-based vertex numbers and `math.inf` for "no path":

```python
from dsakit.shortest_paths import bellman_ford

paths = bellman_ford(3, [(0, 1, 4), (0, 2, 1), (2, 1, 2)])
print(paths.distances, paths.predecessors)   # [0, 3, 1] [None, 2, 0]
```

Sorting: `bubble_sort`, `insertion_sort` and `merge_sort` return a sorted
list; the others return a `SortResult` holding `values` and the number of
basic `steps` counted.

```python
from dsakit.sorting import merge_sort, heap_sort

print(merge_sort([5, 2, 9, 1], reverse=True))  # [9, 5, 2, 1]
result = heap_sort([5, 2, 9, 1])
print(result.values, result.steps)
```

Maximum subarray and subset sums:

```python
from dsakit.subarray import max_subarray_brute
from dsakit.subset_sum import subset_sums, unique_sorted

best = max_subarray_brute([-2, 1, -3, 4, -1, 2, 1, -5, 4])
print(best.low, best.high, best.total)                 # 3 6 6
print(list(subset_sums(unique_sorted([3, 1, 2, 4]), 5)))  # [(1, 4), (2, 3)]
```

## Generating input files

`dsakit-inputs` writes a file of random values, each followed by a tab:

```
dsakit-inputs ints numbers.txt --count 1000 --low 0 --high 30000 --seed 1
dsakit-inputs fractions fractions.txt --count 1000
dsakit-inputs signed signed.txt --bound 30
```

`--count` defaults to 10000 and `--seed` makes the output repeatable. Read
such a file back with `dsakit.inputs.read_values(path, kind=float)`.

## What it does not do

The package is a library. Apart from `dsakit-inputs` it has no commands:
there is no interactive menu for the data structures, and no command that
sorts a file or prints step counts. Read values with `read_values`, call
the sorting functions, and write results with `write_values` yourself.