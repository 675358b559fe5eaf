# graphopt

A library of graph algorithms and small optimisation models. The linear and
0-1 integer programs are solved with SciPy's `milp`.

## Graphs

- `graphopt.graph`
  - `DirectedGraph(num_nodes)` is an adjacency-list multigraph whose nodes are `0..n-1`. It provides `add_arc`, `num_nodes`, `num_arcs`, `out_degree` and `neighbors`, which returns a tuple in insertion order. `make_simple` drops self-arcs and repeated arcs.
  - `UndirectedGraph(num_nodes)` provides `add_edge`, `num_nodes`, `num_edges`, `degree`, `neighbors`, `nodes_connected_to` and `connected_components`.
  - Node numbers out of range raise `IndexError`.
- `graphopt.bfs`
  - `bfs(graph, src)` returns the BFS parent tree. The root is its own parent, and nodes that were not reached have parent `-1`.
  - `bfs_distances(parent)` gives the depths in that tree, with `-1` for unreached nodes.
  - `shortest_path_from_rooted_tree(parent, target)` gives the path from the root to `target`. The path is empty when `target` was not reached.
- `graphopt.toposort.topological_sort(graph)` orders the nodes with leaves first. It returns `[]` when the graph has a cycle.
- `graphopt.rng`
  - `Random(seed)` is a 32-bit Mersenne Twister with `rand_int`, `rand_double`, `rand_exp` and `uniform(bound)`. Calling the object itself returns a raw 32-bit output.
  - `shuffle(items, rng)` is a deterministic in-place shuffle.
- `graphopt.generators`
  - Builders: `complete_graph`, `anti_graph`, `erdos_renyi`, `barabasi_albert`, `subgraph`, `largest_component` and `to_directed`.
  - Checks and output: `is_connected`, plus `format_undirected` and `format_directed`, which return text listings.
- `graphopt.diameter` gives heuristics that run for a budget of CPU time. The budget is 40% of `50 ms + (N + M) µs`.
  - `diameter_lower_bound(graph, rng)` returns two far-apart nodes.
  - `diameter_upper_bound(graph, rng)` returns a central node or a central clique. A single node of radius R bounds the diameter by 2R, and a clique of radius R bounds it by 2R + 1.
  - `farthest(bfs_parents, rng)` returns `(node, depth)` for a deepest node in a BFS tree.

## Optimisation models

- `graphopt.starter.first_solver(n)` solves a small covering LP. It minimises the sum of `x` subject to `x_i + x_{n-1-i} >= 1`.
- `graphopt.menu.cheapest_menu(ajr, contributions, prices)` returns the quantity of each ingredient in the cheapest diet that meets every minimum intake. It raises `ValueError` on inconsistent or infeasible input.
- `graphopt.flow` routes multi-commodity flow on a capacitated backbone.
  - Inputs are the dataclasses `BackboneArc`, `FlowDemand` and `FlowOnArc`.
  - `best_flow` maximises revenue.
  - `best_flow_with_penalty` also charges `penalty_cost * (U - ratio)` on arcs whose utilisation `U` is above `max_free_utilization_ratio`.
  - Zero flows are left out of the result.
- `graphopt.jobs` assigns jobs to machines under CPU, RAM and disk limits (`Resources`).
  - `best_job_assignment` maximises the number of jobs placed.
  - `best_job_assignment_local_exclusive` adds a rule: jobs listed together never share a machine.
  - `best_job_assignment_local_dependencies` adds a rule: for each pair `(a, b)`, if `a` runs then `b` runs on the same machine.
  - The result lists each job's machine, with `-1` for jobs left unassigned.
- `graphopt.jobs_global` adds two more constraint types.
  - `best_job_assignment_global_exclusive` lets at most one job of each list run, on any machine.
  - `best_job_assignment_global_dependencies` makes each pair run together or not at all, not necessarily on the same machine.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Examples

```python
from graphopt.graph import UndirectedGraph
from graphopt.bfs import bfs, bfs_distances, shortest_path_from_rooted_tree

g = UndirectedGraph(4)
g.add_edge(0, 1)
g.add_edge(1, 2)
parent = bfs(g, 0)                                # [0, 0, 1, -1]
print(bfs_distances(parent))                      # [0, 1, 2, -1]
print(shortest_path_from_rooted_tree(parent, 2))  # [0, 1, 2]
```

```python
from graphopt.flow import BackboneArc, FlowDemand, best_flow

flows = best_flow(2, [BackboneArc(0, 1, 10.0)], [FlowDemand(0, 1, 20.0, 5.0)])
print(sum(f.flow for f in flows))  # 10.0
```

```python
from graphopt.jobs import Resources, best_job_assignment

jobs = [Resources(0.1, 0.2, 0.3)] * 3
machines = [Resources(0.2, 0.4, 0.6)]
print(best_job_assignment(jobs, machines))  # two jobs on machine 0, one left at -1
```

## What it does not do

- This is a library only. It has no command-line tool and no benchmark or scoring runner.
- The diameter heuristics stop on a CPU-time deadline. The bounds they find can therefore vary with machine speed, even with a fixed seed.
- There is no heuristic for the maximum acyclic subgraph problem. There is also no model for the student-to-course assignment problem.