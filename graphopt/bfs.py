"""Breadth-first search and helpers working on the BFS parent tree."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence

from graphopt.graph import UndirectedGraph


def bfs(graph: UndirectedGraph, src: int) -> list[int]:
    """Run a BFS from ``src`` and return the parent tree.

    ``parent[src] == src``; nodes not reached have parent ``-1``.
    """
    n = graph.num_nodes()
    if not 0 <= src < n:
        raise IndexError(f"source node {src} out of range [0, {n})")
    parent = [-1] * n
    parent[src] = src
    queue = deque([src])
    while queue:
        node = queue.popleft()
        for neigh in graph.neighbors(node):
            if parent[neigh] == -1:
                parent[neigh] = node
                queue.append(neigh)
    return parent


def bfs_distances(parent: Sequence[int]) -> list[int]:
    """Depth of every node in a BFS parent tree; ``-1`` for unreached nodes."""
    n = len(parent)
    distance = [-1] * n
    for start, start_parent in enumerate(parent):
        if start_parent == -1 or distance[start] != -1:
            continue
        chain: list[int] = []
        on_chain: set[int] = set()
        node = start
        while distance[node] == -1 and parent[node] != node:
            if node in on_chain:
                raise ValueError(f"parent tree has a cycle through node {node}")
            on_chain.add(node)
            chain.append(node)
            node = parent[node]
            if not 0 <= node < n or parent[node] == -1:
                raise ValueError(f"parent chain of node {start} leaves the tree")
        if distance[node] == -1:
            distance[node] = 0
        base = distance[node]
        for depth, member in enumerate(reversed(chain), start=1):
            distance[member] = base + depth
    return distance


def shortest_path_from_rooted_tree(parent: Sequence[int], target: int) -> list[int]:
    """Path from the BFS root to ``target``; empty if ``target`` was not reached."""
    if parent[target] == -1:
        return []
    path = [target]
    while parent[target] != target:
        target = parent[target]
        path.append(target)
        if len(path) > len(parent):
            raise ValueError("parent tree has a cycle")
    path.reverse()
    return path