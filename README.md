# algokit

A small collection of classic algorithms and data structures written in plain
Python with no third-party dependencies.

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
| `algokit.sorting` | `counting_sort`, `radix_sort`, `quick_sort`, `kth_smallest` |
| `algokit.searching` | `binary_search`, `linear_search` (both return an index or `None`) |
| `algokit.hashmap` | `HashMap`: string keys, separate chaining with a polynomial hash, doubles its bucket count past a 0.7 load factor |
| `algokit.trie` | `Trie`: word insertion and membership with `in` |
| `algokit.segment_tree` | `SegmentTree`: inclusive range sums with point updates, 0-based |
| `algokit.fenwick` | `FenwickTree`: prefix sums with point additions, 1-based |
| `algokit.graph` | `Graph`: BFS, DFS, hop distances, components, topological sorts, cycle detection |
| `algokit.lca` | `LcaTree`: lowest common ancestor by Euler tour and a sparse table |
| `algokit.kruskal` | `Edge`, `kruskal`, `parse_graph`, `format_tree` and the `algokit-kruskal` command |
| `algokit.nqueens` | `solve_n_queens` (a generator of boards), `format_board` |
| `algokit.merge_sort_tree` | `MergeSortTree` (`count_greater`, `count_not_greater`) and `weakness`, which counts triples `i < j < k` with `values[i] > values[j] >= values[k]` |
| `algokit.contest` | `elevator_times`, `max_palindromes`, `min_parity_merge`, `min_reverse_cost`, `groom_fortunes`, `coprime_fix` |

Invalid arguments raise `ValueError`, `IndexError` or `KeyError` as appropriate;
for example `counting_sort` rejects values outside `[0, key_range)` and
`kruskal` raises `ValueError` when the edges do not connect every vertex.

## Examples

Sorting and searching:

```python
import random

from algokit.searching import binary_search, linear_search
from algokit.sorting import counting_sort, kth_smallest, quick_sort, radix_sort

data = [5, 2, 9, 1, 7]
ordered = quick_sort(data)                       # [1, 2, 5, 7, 9]
third = kth_smallest(data, 3, random.Random(0))  # 5
position = binary_search(ordered, 7)             # 3
first_hit = linear_search(data, 9)               # 2
counted = counting_sort([3, 0, 2, 3], 4)         # [0, 2, 3, 3]
by_digits = radix_sort([170, 45, 75, 2], 3)      # [2, 45, 75, 170]
```

A hash map and a trie:

```python
from algokit.hashmap import HashMap
from algokit.trie import Trie

prices = HashMap(7)
prices.insert("Mango", 100)
prices["Apple"] = 140
prices["Apple"] = 200
print(prices["Apple"], "Kiwi" in prices, len(prices))  # 200 False 2
print(prices.search("Kiwi"))                            # None
print(prices.render())  # one "index-->key,key," line per bucket

words = Trie()
for word in ("apple", "ap", "app", "apps"):
    words.insert(word)
print("app" in words, "apping" in words)  # True False
```

Range queries:

```python
from algokit.fenwick import FenwickTree
from algokit.segment_tree import SegmentTree

tree = SegmentTree([1, 2, 3, 4, 5])
tree.update(2, 10)
print(tree.query(2, 4))  # 19

bit = FenwickTree.from_values([1, 2, 3, 4, 5, 6])
print(bit.prefix_sum(6))  # 21
```

Graphs and trees:

```python
from algokit.graph import Graph
from algokit.lca import LcaTree

g = Graph()
for u, v in [(0, 1), (2, 1), (2, 4), (2, 3), (4, 3), (5, 3), (0, 4)]:
    g.add_edge(u, v, True)
print(g.bfs(0))             # [0, 1, 4, 2, 3, 5]
print(g.distance(0, 5))     # 3
print(g.has_cycle_bfs(0))   # True

tree = LcaTree({1: [2, 3], 2: [4, 5]}, root=1)
print(tree.lca(4, 5), tree.lca(4, 3))  # 2 1
```

Graph nodes must be hashable and mutually orderable: iteration over all
nodes (rendering, components, topological sorts, `has_cycle_dfs`) goes in
sorted node order. `topological_sort_bfs` leaves out nodes that lie on or
behind a cycle.

## Minimum spanning tree from the command line

`algokit-kruskal` reads a graph description from one file and writes the
edges of a minimum spanning tree to another:

```
algokit-kruskal graph.txt tree.txt
```

The input file starts with the number of vertices and the number of edges,
followed by whitespace-separated edges in the form `a,b,cost`, where vertices
are named by lower-case letters starting at `a`. The edge count is read but
not used. Each line of the output holds one chosen edge as `a,b`, in the
order the edges were picked (cheapest first). The same steps are available
in Python:

```python
from algokit.kruskal import format_tree, kruskal, parse_graph

count, edges = parse_graph("3 3\na,b,1\nb,c,2\na,c,3\n")
print(format_tree(kruskal(count, edges)), end="")  # a,b / b,c
```

## What it does not do

`HashMap` and `Trie` have no way to remove a key or word once added, and
`HashMap` accepts only string keys. The structures live in memory only;
nothing is saved to disk.