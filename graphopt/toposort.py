"""Topological sort of directed graphs."""

from __future__ import annotations

from graphopt.graph import DirectedGraph


def topological_sort(graph: DirectedGraph) -> list[int]:
    """Nodes in topological order, leaves (no outgoing arcs) first.

    Returns an empty list when the graph has a cycle.
    """
    num_nodes = graph.num_nodes()
    parents: list[list[int]] = [[] for _ in range(num_nodes)]
    for node in range(num_nodes):
        for child in graph.neighbors(node):
            parents[child].append(node)

    residual = [graph.out_degree(node) for node in range(num_nodes)]
    leaves = [node for node, degree in enumerate(residual) if degree == 0]

    order = []
    while leaves:
        node = leaves.pop()
        order.append(node)
        for parent in parents[node]:
            residual[parent] -= 1
            if residual[parent] == 0:
                leaves.append(parent)

    return order if len(order) == num_nodes else []