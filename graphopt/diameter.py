"""Time-bounded heuristics for lower and upper bounds on a graph's diameter."""

from __future__ import annotations

import time
from collections.abc import Sequence

from graphopt.bfs import bfs, bfs_distances, shortest_path_from_rooted_tree
from graphopt.graph import UndirectedGraph
from graphopt.rng import Random


def _time_budget(graph: UndirectedGraph) -> float:
    """CPU seconds to spend: 40% of ``50ms + (N + M) * 1us``."""
    return 0.4 * (1e-6 * (graph.num_nodes() + graph.num_edges()) + 50e-3)


def _pick_farthest(distances: Sequence[int], rng: Random) -> tuple[int, int]:
    best: list[int] = []
    max_d = -1
    for node, dist in enumerate(distances):
        if dist > max_d:
            best = [node]
            max_d = dist
        elif dist == max_d:
            best.append(node)
    if not best:
        raise ValueError("empty distance list")
    return best[rng.uniform(len(best))], max_d


def farthest(bfs_parents: Sequence[int], rng: Random) -> tuple[int, int]:
    """A node of maximal depth in a BFS tree, chosen at random among ties.

    Returns ``(node, depth)``.
    """
    return _pick_farthest(bfs_distances(bfs_parents), rng)


def _check_nonempty(graph: UndirectedGraph) -> int:
    n = graph.num_nodes()
    if n == 0:
        raise ValueError("graph has no nodes")
    return n


def diameter_lower_bound(graph: UndirectedGraph, rng: Random) -> tuple[int, int]:
    """Two nodes as far apart as could be found, by repeated BFS sweeps."""
    n = _check_nonempty(graph)
    deadline = time.process_time() + _time_budget(graph)
    max_d = -1
    result = (0, 0)
    while True:
        src = rng.uniform(n)
        distances = bfs_distances(bfs(graph, src))
        num_bfs = 2 + rng.uniform(2)
        for _ in range(1, num_bfs):
            src, _ = _pick_farthest(distances, rng)
            distances = bfs_distances(bfs(graph, src))
        node = max(range(n), key=distances.__getitem__)
        if distances[node] > max_d:
            max_d = distances[node]
            result = (src, node)
        if time.process_time() >= deadline:
            return result


def diameter_upper_bound(graph: UndirectedGraph, rng: Random) -> list[int]:
    """A central node or central clique giving an upper bound on the diameter.

    With a single node of radius R the diameter is at most 2R; with a clique
    of radius R it is at most 2R + 1.
    """
    n = _check_nonempty(graph)
    deadline = time.process_time() + _time_budget(graph)
    min_d: float = float("inf")
    best: list[int] = []
    while time.process_time() < deadline:
        a, _ = farthest(bfs(graph, rng.uniform(n)), rng)
        parents = bfs(graph, a)
        b, _ = farthest(parents, rng)
        path = shortest_path_from_rooted_tree(parents, b)
        middle = len(path) // 2
        if len(path) % 2 == 1:
            center = path[middle]
            _, radius = farthest(bfs(graph, center), rng)
            if 2 * radius < min_d:
                min_d = 2 * radius
                best = [center]
        else:
            c1 = path[middle]
            c0 = path[middle - 1]
            d0 = bfs_distances(bfs(graph, c0))
            d1 = bfs_distances(bfs(graph, c1))
            rmax = max([0, *(min(x, y) for x, y in zip(d0, d1))])
            if 2 * rmax + 1 < min_d:
                min_d = 2 * rmax + 1
                best = [c1, c0]

    if len(best) >= 2:
        common = set(graph.neighbors(best[1])) - {best[0], best[1]}
        candidates = [x for x in sorted(set(graph.neighbors(best[0]))) if x in common]
        while candidates:
            node = candidates.pop()
            best.append(node)
            adjacent = set(graph.neighbors(node))
            candidates = [x for x in candidates if x in adjacent]
    return best