# algokit

A collection of classic algorithms and data structures, written in plain
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
| `algokit.shortest_paths` | `dijkstra`, `bellman_ford_path`, `find_negative_cycle`, `floyd_warshall`, `spfa_min_distance`, `dag_shortest_paths`, with `NegativeCycleError` and `NoPathError` |
| `algokit.tsp` | `shortest_tour` (bitmask DP travelling salesman) |
| `algokit.dsu` | `DisjointSet`, `has_cycle` |
| `algokit.mst` | `kruskal`, `prim` |
| `algokit.scc` | `kosaraju`, `tarjan` |
| `algokit.connectivity` | `articulation_points`, `bridges` |
| `algokit.traversal` | `euler_kind` / `EulerKind`, `is_bipartite`, `topological_order` |
| `algokit.lca` | `LowestCommonAncestor` (binary lifting) |
| `algokit.sorting` | `merge_sort` |
| `algokit.bst` | `BinarySearchTree` |
| `algokit.aho_corasick` | `AhoCorasick`, `min_pattern_cover` |
| `algokit.string_matching` | `prefix_function`, `kmp_search`, `z_array`, `longest_palindrome`, `count_distinct_substrings` |
| `algokit.suffix_array` | `suffix_array`, `lcp_array`, `count_distinct_substrings_in_length_range` |
| `algokit.palindromic_tree` | `PalindromicTree`, `count_palindromic_substrings` |
| `algokit.fenwick` | `FenwickTree`, `FenwickTree2D`, `longest_increasing_subsequence` |
| `algokit.segment_tree` | `MaxSegmentTree`, `LazySumSegmentTree` |
| `algokit.mo` | `weighted_square_sums` (Mo's algorithm) |
| `algokit.trie` | `XorTrie`, `WordTrie`, `min_pairwise_xor` |
| `algokit.number_theory` | `totients`, `linear_sieve`, `mobius`, `primes_up_to`, `power_mod`, `Binomial`, `fibonacci_mod`, `max_subset_xor` |
| `algokit.dp` | `count_digit_sum_divisible`, `coin_change_ways`, `knapsack`, `matrix_chain_cost`, `edit_distance` |
| `algokit.n_queens` | `solve_n_queens` |
| `algokit.geometry` | `Point`, `Line` and 2D helpers such as `cross`, `orientation`, `polygon_area`, `in_polygon`, `winding_number`, `segment_intersection` |
| `algokit.closest_pair` | `closest_pair_distance`, `closest_pair_indices` |

## Conventions

- Graph vertices are the integers `0 .. n-1`. Weighted edges are
  `(u, v, weight)` triples, unweighted edges `(u, v)` pairs. A vertex
  outside that range raises `IndexError`.
- An unreachable vertex has distance `math.inf`.
- `FenwickTree` and `FenwickTree2D` use 1-based positions; the segment
  trees and `weighted_square_sums` use 0-based positions with inclusive
  ranges.
- Problems reported by the algorithms are raised as exceptions:
  `bellman_ford_path` raises `NoPathError` when the target cannot be
  reached and `NegativeCycleError` when a negative cycle is reachable from
  the source; `floyd_warshall` and `spfa_min_distance` raise
  `NegativeCycleError` as well, and `topological_order` raises
  `ValueError` for a cyclic graph.

## Examples

Shortest paths on an undirected weighted graph:

```python
from algokit.shortest_paths import dijkstra

edges = [(0, 1, 4), (1, 2, 1), (0, 2, 7)]
dijkstra(3, edges, 0)   # [0, 4, 5]
```

Range sums with a Fenwick tree:

```python
from algokit.fenwick import FenwickTree

tree = FenwickTree(10)
tree.update(3, 5)
tree.update(7, 2)
tree.range_sum(1, 7)   # 7
```

Pattern search:

```python
from algokit.string_matching import kmp_search

kmp_search("abababa", "aba")   # [0, 2, 4]
```

Binomial coefficients modulo a prime:

```python
from algokit.number_theory import Binomial

binom = Binomial(1000, 1_000_000_007)
binom.choose(10, 3)   # 120
```

Polygon area:

```python
from algokit.geometry import Point, polygon_area

polygon_area([Point(0, 0), Point(4, 0), Point(4, 3)])   # 6.0
```

## What it does not do

algokit is a library only. It has no command-line program and does not
read problem input from standard input or files: every algorithm takes
ordinary Python values (lists, tuples, strings, integers) and returns its
result.