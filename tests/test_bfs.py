import pytest

from graphopt.bfs import bfs, bfs_distances, shortest_path_from_rooted_tree
from graphopt.graph import UndirectedGraph

DOC_TREE = [2, 3, 2, 2, 3, 0]


def _graph(n, edges):
    g = UndirectedGraph(n)
    for a, b in edges:
        g.add_edge(a, b)
    return g


def test_documented_distances():
    assert bfs_distances(DOC_TREE) == [1, 2, 0, 1, 2, 2]


@pytest.mark.parametrize(
    "target, expected",
    [(4, [2, 3, 4]), (0, [2, 0]), (5, [2, 0, 5]), (2, [2])],
)
def test_documented_paths(target, expected):
    assert shortest_path_from_rooted_tree(DOC_TREE, target) == expected


def test_unreached_nodes():
    parent = [0, 0, -1]
    assert bfs_distances(parent)[2] == -1
    assert shortest_path_from_rooted_tree(parent, 2) == []


def test_bfs_parent_tree_properties():
    edges = [(0, 1), (1, 2), (2, 3), (0, 4), (4, 3), (5, 6)]
    g = _graph(7, edges)
    parent = bfs(g, 0)
    assert parent[0] == 0
    assert parent[5] == -1 and parent[6] == -1
    for node, p in enumerate(parent):
        if p not in (-1, node):
            assert p in g.neighbors(node)


def test_bfs_distances_are_shortest():
    edges = [(0, 1), (1, 2), (2, 3), (3, 4), (0, 5), (5, 4)]
    g = _graph(6, edges)
    dist = bfs_distances(bfs(g, 0))
    assert dist[0] == 0
    for a, b in edges:
        assert abs(dist[a] - dist[b]) <= 1
    assert dist[4] == dist[5] + 1
    assert dist[3] == dist[4] + 1


def test_path_matches_distance_and_edges():
    g = _graph(5, [(0, 1), (1, 2), (2, 3), (3, 4), (4, 0)])
    parent = bfs(g, 2)
    dist = bfs_distances(parent)
    for target in range(5):
        path = shortest_path_from_rooted_tree(parent, target)
        assert path[0] == 2 and path[-1] == target
        assert len(path) == dist[target] + 1
        for a, b in zip(path, path[1:]):
            assert b in g.neighbors(a)


def test_bfs_source_out_of_range():
    with pytest.raises(IndexError):
        bfs(UndirectedGraph(3), 3)


def test_cyclic_parent_tree_rejected():
    with pytest.raises(ValueError):
        bfs_distances([1, 2, 0])