"""
Unit tests for the BFS query functions using AdjacencyListGraph.
"""

import pytest

from adjacency_list_graph import AdjacencyListGraph
from bfs_engine import (
    find_connected_components,
    is_connected,
    shortest_distance,
    shortest_path,
    traverse,
    vertices_at_distance,
)


@pytest.fixture
def small_tree() -> AdjacencyListGraph:
    # 0 - 1 - 3
    #  \
    #   2
    return AdjacencyListGraph.from_edges([(0, 1), (0, 2), (1, 3)])


def test_traverse_visits_in_discovery_order(small_tree):
    assert traverse(small_tree, 0) == [0, 1, 2, 3]
    assert traverse(small_tree, 3) == [3, 1, 0, 2]


def test_shortest_path_and_distance_basic(small_tree):
    assert shortest_path(small_tree, 0, 3) == [0, 1, 3]
    assert shortest_distance(small_tree, 0, 3) == 2
    assert shortest_path(small_tree, 3, 2) == [3, 1, 0, 2]
    assert shortest_distance(small_tree, 3, 2) == 3


def test_shortest_path_prefers_fewest_hops():
    # 0 -> 1 -> 2 -> 3 and a shortcut 0 -> 4 -> 3
    g = AdjacencyListGraph.from_edges([(0, 1), (1, 2), (2, 3), (0, 4), (4, 3)])

    assert shortest_path(g, 0, 3) == [0, 4, 3]
    assert shortest_distance(g, 0, 3) == 2


def test_start_equals_target():
    g = AdjacencyListGraph()
    g.add_vertex(5)

    assert shortest_distance(g, 5, 5) == 0
    assert shortest_path(g, 5, 5) == [5]
    assert vertices_at_distance(g, 5, 0) == [5]


def test_missing_vertices_give_empty_results(small_tree):
    """No query raises for a vertex the graph doesn't have."""
    assert traverse(small_tree, 99) == []
    assert shortest_path(small_tree, 99, 0) == []
    assert shortest_path(small_tree, 0, 99) == []
    assert shortest_path(small_tree, 99, 99) == []
    assert shortest_distance(small_tree, 99, 0) == -1
    assert shortest_distance(small_tree, 0, 99) == -1
    assert shortest_distance(small_tree, 99, 99) == -1
    assert vertices_at_distance(small_tree, 99, 0) == []
    assert vertices_at_distance(small_tree, 99, 1) == []


def test_unreachable_target():
    g = AdjacencyListGraph.from_edges([(0, 1)], vertices=[2])

    assert shortest_path(g, 0, 2) == []
    assert shortest_distance(g, 0, 2) == -1


def test_directed_edges_are_followed_one_way():
    g = AdjacencyListGraph.from_edges([(0, 1), (1, 2)], directed=True)

    assert traverse(g, 0) == [0, 1, 2]
    assert traverse(g, 2) == [2]
    assert shortest_path(g, 0, 2) == [0, 1, 2]
    assert shortest_path(g, 2, 0) == []
    assert shortest_distance(g, 2, 0) == -1


def test_parallel_edges_and_self_loops_visit_once():
    g = AdjacencyListGraph()
    g.add_edge(0, 0)
    g.add_edge(0, 1)
    g.add_edge(0, 1)
    g.add_edge(1, 2)

    assert traverse(g, 0) == [0, 1, 2]
    assert shortest_distance(g, 0, 2) == 2
    assert vertices_at_distance(g, 0, 1) == [1]


@pytest.mark.parametrize(
    "distance, expected",
    [
        (0, [0]),
        (1, [1, 2]),
        (2, [3, 4]),
        (3, [5]),
        (4, []),
        (-1, []),
    ],
)
def test_vertices_at_distance_levels(distance, expected):
    g = AdjacencyListGraph.from_edges([(0, 1), (0, 2), (1, 3), (2, 4), (2, 3), (4, 5)])

    assert vertices_at_distance(g, 0, distance) == expected


def test_empty_graph_is_connected_with_no_components():
    g = AdjacencyListGraph()

    assert is_connected(g) is True
    assert find_connected_components(g) == []


def test_single_vertex_graph():
    g = AdjacencyListGraph()
    g.add_vertex(7)

    assert is_connected(g) is True
    assert find_connected_components(g) == [[7]]


def test_disconnected_graph_components():
    g = AdjacencyListGraph.from_edges([(0, 1)], vertices=[2])

    assert is_connected(g) is False
    components = find_connected_components(g)
    assert sorted(sorted(c) for c in components) == [[0, 1], [2]]


def test_connected_graph(small_tree):
    assert is_connected(small_tree) is True
    assert find_connected_components(small_tree) == [[0, 1, 2, 3]]


def test_components_follow_vertex_order():
    g = AdjacencyListGraph.from_edges([(4, 5), (1, 2), (5, 6)], vertices=[3])

    assert find_connected_components(g) == [[4, 5, 6], [1, 2], [3]]


def test_is_connected_directed_uses_first_vertex_reachability():
    reaches_all = AdjacencyListGraph.from_edges([(0, 1), (1, 2)], directed=True)
    assert is_connected(reaches_all) is True

    g = AdjacencyListGraph(directed=True)
    g.add_vertex(0)
    g.add_edge(1, 0)
    # 1 reaches 0, but 0 (the first vertex) reaches nothing
    assert is_connected(g) is False


def test_queries_do_not_mutate_graph(small_tree):
    before = {v: small_tree.neighbors(v) for v in small_tree.vertices()}

    traverse(small_tree, 0)
    shortest_path(small_tree, 0, 3)
    shortest_distance(small_tree, 0, 3)
    vertices_at_distance(small_tree, 0, 2)
    is_connected(small_tree)
    find_connected_components(small_tree)

    assert {v: small_tree.neighbors(v) for v in small_tree.vertices()} == before


def test_directed_components_can_share_vertices():
    """Each scan keeps its own visited set, so a later seed may re-list a vertex."""
    g = AdjacencyListGraph.from_edges([(0, 1), (2, 1)], directed=True)

    assert find_connected_components(g) == [[0, 1], [2, 1]]
