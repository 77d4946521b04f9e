# algokit

A collection of classic algorithms and data structures in plain Python:
disjoint sets, Fenwick and segment trees, sparse tables, xor tries, wavelet
trees, shortest paths, spanning trees, bipartite matching, 2-SAT, strongly
connected components, bridges, Euler paths, tree techniques (LCA, heavy-light
decomposition, centroids, Prüfer codes, isomorphism) and a set of
dynamic-programming solutions.

The package needs nothing beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

Disjoint sets (elements are numbered from 1):

```python
from algokit.dsu import DSU

dsu = DSU(5)
dsu.union(1, 2)
dsu.union(2, 3)
dsu.same(1, 3)           # True
dsu.component_size(1)    # 3
dsu.count()              # 3 sets left
```

Range queries:

```python
from algokit.fenwick import FenwickTree
from algokit.sparse_table import SparseTable
from algokit.segment_tree import SegmentTree

tree = FenwickTree.from_values([1, 2, 3, 4])
tree.range_sum(1, 3)     # 2 + 3 + 4 = 9

table = SparseTable([5, 2, 7, 1])
table.query(0, 2)        # 2, minimum over positions 0..2

seg = SegmentTree([1, 2, 3], combine=max, identity=0)
seg.set(0, 10)
seg.query(0, 3)          # 10, half-open range [0, 3)
```

Graphs:

```python
from algokit.mst import kruskal
from algokit.scc import SCC
from algokit.two_sat import TwoSat

cost, chosen = kruskal(3, [(0, 1, 4), (1, 2, 1), (0, 2, 3)])
# cost == 4; chosen == [Edge(u=1, v=2, weight=1), Edge(u=0, v=2, weight=3)]

scc = SCC(3)
scc.add_edge(0, 1)
scc.add_edge(1, 0)
scc.components()         # components in topological order

sat = TwoSat(2)
sat.add_or(0, True, 1, True)
sat.add_or(0, False, 0, False)   # forces variable 0 to be false
sat.solve()              # [False, True]; None when unsatisfiable
```

Trees:

```python
from algokit.lca import Tree

tree = Tree(4)
tree.add_edge(1, 2)
tree.add_edge(1, 3)
tree.add_edge(3, 4)
tree.build(1)
tree.lca(2, 4)           # 1
tree.dist(2, 4)          # 3
```

## Modules

| Module | Contents |
| --- | --- |
| `algokit.dsu` | `DSU` |
| `algokit.fenwick` | `FenwickTree`, `FenwickTree2D` |
| `algokit.sparse_table` | `SparseTable` |
| `algokit.xor_trie` | `XorTrie`, `count_subarrays_xor_at_least` |
| `algokit.venice_set` | `VeniceSet` |
| `algokit.wavelet_tree` | `WaveletTree` |
| `algokit.bst` | `bst_children` |
| `algokit.segment_tree` | `SegmentTree`, `MaxSegmentTree`, `IterativeSumTree`, `RangeAddMaxTree` |
| `algokit.lazy_segment_tree` | `AddAssignSegmentTree`, `ProgressionSegmentTree`, `LazySegmentTree` |
| `algokit.array_dp` | `prefix_sums`, `suffix_sums`, `longest_increasing_subsequence`, `subset_sums`, `count_collapsed_arrays` |
| `algokit.mst` | `Edge`, `kruskal`, `prim`, `max_power_spanning_tree` |
| `algokit.shortest_paths` | `zero_one_bfs`, `switch_dungeon_distance`, `min_path_weight` |
| `algokit.graph_counting` | `moves_needed`, `min_tour_length`, `connected_graph_counts`, `count_graphs_with_components` |
| `algokit.matching` | `HopcroftKarp`, `Kuhn`, `count_replaceable_edges` |
| `algokit.two_sat` | `TwoSat`, `assign_with_parity` |
| `algokit.xor_hashing` | `light_bulb_sets` |
| `algokit.dice` | `dice_product_probability` |
| `algokit.scc` | `SCC`, `min_edges_to_strongly_connect`, `longest_path_min_weight` |
| `algokit.bridges` | `find_bridges`, `find_articulation_points` |
| `algokit.euler` | `euler_path_directed`, `euler_path_undirected`, `orient_for_balance` |
| `algokit.coloring` | `chromatic_number` |
| `algokit.functional_graph` | `count_cycles`, `cycle_representatives` |
| `algokit.simple_paths` | `count_simple_paths` |
| `algokit.tree_paths` | `tree_diameter`, `best_root_profit` |
| `algokit.lca` | `Tree`, `kth_ancestors` |
| `algokit.hld` | `HeavyLight` |
| `algokit.centroid` | `find_centroid`, `find_centroids`, `count_paths_of_length` |
| `algokit.prufer` | `prufer_code`, `tree_from_prufer` |
| `algokit.tree_isomorphism` | `is_symmetric`, `tree_centers`, `are_isomorphic` |
| `algokit.tree_dp` | `shuffle_max_leaves`, `count_good_paths`, `count_connected_subsets`, `degree_factorial_subgraph_sum`, `spanning_subgraph_degree_counts` |
| `algokit.contest_dp` | `synchronized_players`, `max_matching_pairs`, `taming_herd`, `work_or_rest`, `circular_barn` |
| `algokit.bitmask_dp` | `booster_tour`, `shortest_tour` |
| `algokit.digit_dp` | `count_digit_sum_divisible`, `count_investigation` |

Each function's docstring states its indexing convention (0- or 1-based,
inclusive or half-open ranges) and what it returns. Invalid input is
rejected with an exception, mostly `ValueError` or `IndexError`.

## What is not included

- There are no maximum-flow or minimum-cut solvers.
- The package is a library only: it installs no command-line programs and
  reads no input files; every function takes its data as Python arguments.