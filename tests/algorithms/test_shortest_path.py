"""Behaviour shared by the weighted algorithms (Dijkstra and Bellman-Ford)."""

import random

import pytest

from puzzlegraph.algorithms import bellman_ford, dijkstra
from puzzlegraph.graph import Graph, WeightedGraph

ALGORITHMS = [dijkstra, bellman_ford]


@pytest.fixture(params=ALGORITHMS, ids=lambda module: module.__name__.rsplit(".", 1)[-1])
def algorithm(request):
    return request.param


def test_detour_is_shorter(algorithm, detour_weighted):
    path = algorithm.find_path(WeightedGraph.of(detour_weighted), "A", lambda n: n == "E")

    assert path is not None
    assert path.dist == 10
    assert path.nodes == ("A", "D", "B", "C", "E")


@pytest.mark.parametrize(
    "detonation_time,expected",
    [(32, 50), (30, 49), (1, 20)],
)
def test_maze_with_detonations(algorithm, maze, grid_graph, detonation_time, expected):
    # Stepping onto an empty tile takes 1 second; blowing up a wall tile and
    # stepping onto it takes detonation_time seconds.
    start = (0, 0)
    end = (len(maze) - 1, len(maze[0]) - 1)
    graph = grid_graph(maze).weighted(
        lambda p, q: 1 if maze[q[0]][q[1]] == "." else detonation_time
    )

    path = algorithm.find_path(graph, start, lambda n: n == end)

    assert path.dist == expected
    assert path.nodes[0] == start
    assert path.nodes[-1] == end


def test_maze_with_large_detonation_time_matches_bfs(algorithm, maze, grid_graph):
    start = (0, 0)
    end = (len(maze) - 1, len(maze[0]) - 1)
    graph = grid_graph(maze).weighted(
        lambda p, q: 1 if maze[q[0]][q[1]] == "." else 32
    )

    path = algorithm.find_path(graph, start, lambda n: n == end)

    assert len(path.nodes) == 51
    # Manhattan distance is the lower bound for any route
    assert path.dist >= abs(end[0] - start[0]) + abs(end[1] - start[1])


def test_multiple_targets(algorithm):
    nodes = list(range(100))
    random.Random(123456789).shuffle(nodes)
    index = {node: idx for idx, node in enumerate(nodes)}

    graph = Graph.of(lambda i: nodes[index[i] : index[i] + 8]).weighted(lambda u, v: 1)
    path = algorithm.find_path(graph, nodes[0], lambda i: index[i] >= 42)

    assert path is not None
    assert path.dist == 6


def test_tuple_nodes_and_graph_definitions(algorithm):
    def append_digit(node):
        for i in range(4):
            end = node + (i,)
            if len(end) <= 6:
                yield end, max(i * 10, 1)

    start = (1, 0)
    target = (1, 0, 1, 0, 2, 1)

    path1 = algorithm.find_path(append_digit, start, lambda n: n == target)
    path2 = algorithm.find_path(WeightedGraph.of(append_digit), start, lambda n: n == target)
    path3 = algorithm.find_path(
        Graph.of(lambda c: (c + (i,) for i in range(4) if len(c) < 6)).weighted(
            lambda u, v: max(v[-1] * 10, 1)
        ),
        start,
        lambda n: n == target,
    )

    assert path1.dist == 41
    assert path1.end == target
    assert path1.nodes == path2.nodes == path3.nodes


def test_mapping_with_weight_function(algorithm, simple_graph):
    graph = WeightedGraph.of(simple_graph, lambda u, v: 1)

    assert algorithm.dist(graph, "A", lambda n: n == "F") == 3
    assert algorithm.dist(graph, "A", lambda n: n == "G") == 2


def test_find_paths_includes_sources(algorithm, simple_weighted):
    paths = algorithm.find_paths_from_any(WeightedGraph.of(simple_weighted), ["E", "C"])

    assert paths["E"].dist == 0
    assert paths["C"].dist == 0
    assert "A" not in paths
    assert paths["G"].dist == 5
    assert paths["B"].nodes == ("E", "F", "B")


def test_discovery_error_propagates(algorithm):
    def edges(node):
        raise KeyError(node)

    with pytest.raises(KeyError):
        algorithm.find_paths(edges, "A")
