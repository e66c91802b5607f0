# algokit

Classic algorithms and data structures for contest-style problems, written as
plain Python classes and functions. The only third-party dependency is
`sortedcontainers`.

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

### Range structures and sets

| Module | Contents |
| --- | --- |
| `algokit.fenwick` | `FenwickTree`: point `add`, `prefix_sum`, inclusive `range_sum`, `lower_bound` |
| `algokit.segment_tree` | `SegmentTree` (point assignment, range sum), `LazySegmentTree` (range add, range sum) |
| `algokit.merge_sort_tree` | `MergeSortTree`, `UpdatableMergeSortTree`: `count_greater(left, right, k)` |
| `algokit.sparse_table` | `SparseTable(values, combine)` for idempotent inclusive range queries |
| `algokit.wavelet_tree` | `WaveletTree`: `kth`, `count_less_equal`, `count` |
| `algokit.dsu` | `DisjointSet`, `RollbackDSU` (with `time()` / `rollback(t)` and a `components` counter) |
| `algokit.dynamic_connectivity` | `OfflineConnectivity`: edges alive over time intervals, `solve(callback)`, `component_counts()` |
| `algokit.mono_queue` | `MaxStack`, `MaxQueue`, `MinMaxQueue` |
| `algokit.xor_trie` | `BinaryTrie` (`count_xor_less`), `XorTrie` (`max_xor`) |

### Geometry

Two point representations are provided.

* Complex numbers: `algokit.vec` (dot, cross, orientation, rotations, angles,
  `is_convex`), `algokit.line` (`Line`, line intersection, bisectors, segment
  distances and intersections), `algokit.shapes` (circle–line and
  circle–circle intersections, polygon area, `in_polygon`, `convex_hull`,
  triangle areas) and `algokit.formulas` (Soddy radius, triangle areas from
  medians, altitudes or angles, regular polygons, sectors, frustums, `Circle`,
  `intersection_inside`, `lattice_hull`).
* The `Point` dataclass: `algokit.point` (vector operations, projections,
  `angle_between`, `angle_at`), `algokit.segments` (line, segment and ray
  distances and intersections, `find_intersecting_pair` sweep),
  `algokit.polygon` (`polygon_area`, `in_polygon`, `in_hull`, `convex_hull`,
  `hull_diameter`, `hull_width`), `algokit.circles` (circumcircle,
  `minimum_enclosing_circle`, `circle_intersection_area`, `closest_pair`) and
  `algokit.halfplane` (`HalfPlane`, `halfplane_intersection`).

### Graphs and trees

| Module | Contents |
| --- | --- |
| `algokit.dinic` | `Dinic` maximum flow with `left_of_min_cut` |
| `algokit.hungarian` | `Hungarian` minimum-cost assignment |
| `algokit.mincost_flow` | `MinCostFlow`, `BellmanFordFlow`, `DijkstraFlow`; results are `FlowResult(flow, cost)` |
| `algokit.cost_scaling_flow` | `CostScalingFlow`, min-cost max-flow that allows negative cycles |
| `algokit.two_sat` | `TwoSat` |
| `algokit.connectivity` | `find_bridges`, `cut_points`, `bridge_tree` |
| `algokit.scc` | `kosaraju`, `tarjan_scc`, `condensation_order` |
| `algokit.lca` | `BinaryLifting`: `lca`, `kth_ancestor`, `is_ancestor` |
| `algokit.hld` | `HLD`: `path`, `edge_path`, `subtree`, `lca`, `dist`, `is_ancestor` |
| `algokit.trees` | `tree_shape_id`, `tree_hash`, `centroid_decomposition` |

### Strings

`algokit.string_match` (`z_function`, `prefix_function`, `kmp_automaton`,
`prefix_occurrences`, `manacher`), `algokit.string_hash` (`StringHash`),
`algokit.string_trie` (`StringTrie`), `algokit.aho_corasick` (`AhoCorasick`),
`algokit.suffix_array` (`SuffixArray` with `sa`, `rank`, `lcp`) and
`algokit.suffix_automaton` (`SuffixAutomaton`).

### Math and sequences

`algokit.fft` (`fft`, `convolve_mod`, `ntt`, `ntt_convolve`),
`algokit.transforms` (`xor_transform`, `xor_convolution`), `algokit.primes`
(`is_prime`, `segmented_sieve`, `mobius_table`), `algokit.number_theory`
(`extended_gcd`, `mod_inverse`, `crt`, `congruence_solutions`,
`diophantine_solution`, `count_solutions` and helpers for shifting a
Diophantine solution past a bound), `algokit.combinatorics` (`Binomial`,
`LagrangePoly`) and `algokit.sequences` (`compress`, `kth_balanced`,
`next_balanced`, `long_division`).

## Examples

```python
from algokit.fenwick import FenwickTree
from algokit.segment_tree import SegmentTree
from algokit.dsu import DisjointSet
from algokit.dinic import Dinic
from algokit.point import Point
from algokit.polygon import convex_hull, polygon_area
from algokit.suffix_automaton import SuffixAutomaton
from algokit.string_match import z_function
from algokit.number_theory import crt
from algokit.primes import is_prime

tree = FenwickTree(10)
tree.add(3, 5)
tree.add(7, 2)
print(tree.range_sum(0, 5))   # 5

seg = SegmentTree(5)
seg.update(1, 4)
seg.update(3, 6)
print(seg.query(0, 4))        # 10, positions [0, 4)

dsu = DisjointSet(4)
dsu.union(0, 1)
print(dsu.same(0, 1), dsu.size(0))   # True 2

flow = Dinic(4)
flow.add_edge(0, 1, 3, 0)
flow.add_edge(1, 3, 2, 0)
flow.add_edge(0, 2, 1, 0)
flow.add_edge(2, 3, 4, 0)
print(flow.max_flow(0, 3))   # 3

hull = convex_hull([Point(0, 0), Point(2, 0), Point(1, 1), Point(2, 2), Point(0, 2)])
print(len(hull), polygon_area(hull))   # 4 4.0

sam = SuffixAutomaton("abab")
print(sam.count_distinct(), sam.occurrences("ab"))   # 7 2

print(z_function("aaab"))     # [0, 2, 1, 0]
print(crt([2, 3], [3, 5]))    # 8
print(is_prime(998244353))    # True
```

## Conventions

* `SegmentTree`, `LazySegmentTree` and the merge sort trees take half-open
  ranges `[left, right)`.
* `FenwickTree.range_sum`, `SparseTable.query` and the `WaveletTree` queries
  take 0-based inclusive bounds; `HLD` returns inclusive position ranges.
* Errors are raised as exceptions (`ValueError`, `IndexError`, `KeyError`);
  queries with no answer, such as an unsolvable CRT system or an unsatisfiable
  2-SAT instance, return `None`.

## Scope

This is a library only: it has no command-line program and reads no input
files. Problem-specific input handling and output are left to the caller.