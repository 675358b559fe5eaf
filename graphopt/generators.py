"""Graph generators and utilities: random graphs, complements, components, printing."""

from __future__ import annotations

from collections.abc import Sequence

from graphopt.graph import DirectedGraph, UndirectedGraph
from graphopt.rng import Random


def complete_graph(n: int) -> UndirectedGraph:
    """The complete simple graph on ``n`` nodes."""
    graph = UndirectedGraph(n)
    for i in range(n):
        for j in range(i + 1, n):
            graph.add_edge(i, j)
    return graph


def anti_graph(graph: UndirectedGraph, include_loops: bool) -> UndirectedGraph:
    """The complement of ``graph``: every edge that is not in it.

    With ``include_loops`` the missing self-loops are added as well.
    """
    n = graph.num_nodes()
    anti = UndirectedGraph(n)
    for i in range(n):
        present = set(graph.neighbors(i))
        if not include_loops:
            present.add(i)
        for j in range(i, n):
            if j not in present:
                anti.add_edge(i, j)
    return anti


def erdos_renyi(n: int, m: int, force_simple: bool, rng: Random) -> UndirectedGraph:
    """A random graph with ``m`` edges drawn uniformly.

    With ``force_simple`` loops and multi-edges are forbidden; otherwise both
    may occur.
    """
    anti_m = n * (n - 1) // 2 - m
    if force_simple and anti_m < m:
        if anti_m < 0:
            raise ValueError(
                f"a simple graph on {n} nodes cannot have {m} edges"
            )
        return anti_graph(erdos_renyi(n, anti_m, True, rng), include_loops=False)
    graph = UndirectedGraph(n)
    if not force_simple:
        for _ in range(m):
            a = rng.uniform(n)
            b = rng.uniform(n)
            graph.add_edge(a, b)
        return graph
    edges: set[tuple[int, int]] = set()
    while len(edges) < m:
        a = rng.uniform(n)
        b = rng.uniform(n)
        if a == b:
            continue
        if a > b:
            a, b = b, a
        if (a, b) not in edges:
            edges.add((a, b))
            graph.add_edge(a, b)
    return graph


def barabasi_albert(n: int, m: int, rng: Random) -> UndirectedGraph:
    """Preferential-attachment graph with a skewed (power-law) degree distribution.

    The seed edge is only used for attachment and is not part of the graph,
    so the result has ``m - 1`` edges.
    """
    graph = UndirectedGraph(n)
    first = rng.uniform(n)
    second = rng.uniform(n)
    edges = [(first, second)]
    node = 0
    while len(edges) < m:
        edge = edges[rng.uniform(len(edges))]
        a = edge[0] if rng.uniform(2) == 0 else edge[1]
        if node < n:
            b = node % n
            node += 1
        else:
            b = rng.uniform(n)
        edges.append((a, b))
        graph.add_edge(a, b)
    return graph


def format_undirected(graph: UndirectedGraph) -> str:
    """Human-readable listing of the edges of ``graph``."""
    lines = [
        f"Graph with {graph.num_nodes()} nodes and {graph.num_edges()}"
        " edges (listed below): ["
    ]
    for node in range(graph.num_nodes()):
        for neigh in sorted(graph.neighbors(node)):
            if neigh > node:
                lines.append(f"  {node} -- {neigh}")
    lines.append("]")
    return "\n".join(lines) + "\n"


def format_directed(graph: DirectedGraph) -> str:
    """Human-readable listing of the arcs of ``graph``."""
    lines = [
        f"Graph with {graph.num_nodes()} nodes and {graph.num_arcs()}"
        " arcs (listed below): ["
    ]
    for node in range(graph.num_nodes()):
        for neigh in sorted(graph.neighbors(node)):
            lines.append(f"  {node} -> {neigh}")
    lines.append("]")
    return "\n".join(lines) + "\n"


def is_connected(graph: UndirectedGraph) -> bool:
    """Whether every node can reach every other node."""
    n = graph.num_nodes()
    if n <= 1:
        return True
    visited = {0}
    stack = [0]
    while stack:
        node = stack.pop()
        for neigh in graph.neighbors(node):
            if neigh not in visited:
                visited.add(neigh)
                stack.append(neigh)
    return len(visited) == n


def subgraph(graph: UndirectedGraph, nodes_to_keep: Sequence[int]) -> UndirectedGraph:
    """The subgraph induced by ``nodes_to_keep``; node ``nodes_to_keep[i]`` becomes ``i``."""
    new_index = {node: i for i, node in enumerate(nodes_to_keep)}
    result = UndirectedGraph(len(nodes_to_keep))
    for node in nodes_to_keep:
        new_node = new_index[node]
        for neigh in graph.neighbors(node):
            if neigh >= node and neigh in new_index:
                result.add_edge(new_node, new_index[neigh])
    return result


def largest_component(graph: UndirectedGraph) -> UndirectedGraph:
    """The subgraph induced by the largest connected component (first one on ties)."""
    n = graph.num_nodes()
    visited = [False] * n
    largest: list[int] = []
    for root in range(n):
        if visited[root]:
            continue
        visited[root] = True
        component = [root]
        for node in component:
            for neigh in graph.neighbors(node):
                if not visited[neigh]:
                    visited[neigh] = True
                    component.append(neigh)
        if len(component) > len(largest):
            largest = component
    return subgraph(graph, largest)


def to_directed(ugraph: UndirectedGraph, p_keep_rev_arc: float, rng: Random) -> DirectedGraph:
    """Orient every edge ``a -- b``.

    With probability ``p_keep_rev_arc`` both arcs are kept; otherwise one of
    the two directions is picked uniformly at random.
    """
    n = ugraph.num_nodes()
    dgraph = DirectedGraph(n)
    for a in range(n):
        for b in ugraph.neighbors(a):
            if b < a:
                continue
            if rng.rand_double() < p_keep_rev_arc:
                dgraph.add_arc(a, b)
                dgraph.add_arc(b, a)
            elif rng() % 2 == 0:
                dgraph.add_arc(a, b)
            else:
                dgraph.add_arc(b, a)
    return dgraph