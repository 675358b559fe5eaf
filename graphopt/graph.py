"""Directed and undirected graphs over integer nodes ``0 .. n-1``."""

from __future__ import annotations


class DirectedGraph:
    """A directed multigraph whose nodes are the integers ``0 .. num_nodes-1``.

    Arcs are stored as adjacency lists, in insertion order.
    """

    def __init__(self, num_nodes: int) -> None:
        if num_nodes < 0:
            raise ValueError(f"number of nodes must be non-negative, got {num_nodes}")
        self._neighbors: list[list[int]] = [[] for _ in range(num_nodes)]
        self._num_arcs = 0

    def _check(self, node: int) -> None:
        if not 0 <= node < len(self._neighbors):
            raise IndexError(f"node {node} out of range [0, {len(self._neighbors)})")

    def add_arc(self, tail: int, head: int) -> None:
        """Add the arc ``tail -> head``."""
        self._check(tail)
        self._check(head)
        self._neighbors[tail].append(head)
        self._num_arcs += 1

    def num_nodes(self) -> int:
        return len(self._neighbors)

    def num_arcs(self) -> int:
        return self._num_arcs

    def out_degree(self, node: int) -> int:
        """Number of arcs leaving ``node``."""
        self._check(node)
        return len(self._neighbors[node])

    def neighbors(self, node: int) -> tuple[int, ...]:
        """Heads of the arcs leaving ``node``, in insertion order."""
        self._check(node)
        return tuple(self._neighbors[node])

    def make_simple(self) -> None:
        """Drop self-arcs and repeated arcs, keeping first occurrences in order."""
        for node, adjacency in enumerate(self._neighbors):
            seen: set[int] = set()
            kept = []
            for head in adjacency:
                if head != node and head not in seen:
                    seen.add(head)
                    kept.append(head)
            self._neighbors[node] = kept
        self._num_arcs = sum(len(adj) for adj in self._neighbors)

    def __repr__(self) -> str:
        return f"DirectedGraph(num_nodes={self.num_nodes()}, num_arcs={self._num_arcs})"


class UndirectedGraph:
    """An undirected multigraph: each edge ``a -- b`` appears in both adjacency lists."""

    def __init__(self, num_nodes: int) -> None:
        self._dg = DirectedGraph(num_nodes)

    def add_edge(self, a: int, b: int) -> None:
        self._dg.add_arc(a, b)
        self._dg.add_arc(b, a)

    def num_nodes(self) -> int:
        return self._dg.num_nodes()

    def num_edges(self) -> int:
        return self._dg.num_arcs() // 2

    def degree(self, node: int) -> int:
        return self._dg.out_degree(node)

    def neighbors(self, node: int) -> tuple[int, ...]:
        return self._dg.neighbors(node)

    def nodes_connected_to(self, node: int) -> list[int]:
        """All nodes in the connected component of ``node`` (including itself)."""
        visited = {node}
        order = [node]
        stack = [node]
        while stack:
            current = stack.pop()
            for neighbor in self.neighbors(current):
                if neighbor not in visited:
                    visited.add(neighbor)
                    order.append(neighbor)
                    stack.append(neighbor)
        return order

    def connected_components(self) -> list[list[int]]:
        """The connected components, ordered by their smallest node."""
        visited = [False] * self.num_nodes()
        components = []
        for node in range(self.num_nodes()):
            if visited[node]:
                continue
            component = self.nodes_connected_to(node)
            for member in component:
                visited[member] = True
            components.append(component)
        return components

    def __repr__(self) -> str:
        return f"UndirectedGraph(num_nodes={self.num_nodes()}, num_edges={self.num_edges()})"