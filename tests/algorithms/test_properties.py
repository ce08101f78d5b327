"""Cross-checks of the traversal algorithms against NetworkX on random graphs."""

import random

import networkx as nx
import pytest

from puzzlegraph.algorithms import bellman_ford, bfs, dijkstra
from puzzlegraph.graph import from_networkx, weighted_from_networkx

SEEDS = [1, 7, 42, 2024]


def _random_digraph(seed: int, n: int = 30, p: float = 0.1) -> nx.DiGraph:
    graph = nx.gnp_random_graph(n, p, seed=seed, directed=True)
    rng = random.Random(seed)
    for u, v in graph.edges:
        graph.edges[u, v]["weight"] = rng.randint(0, 9)
    return graph


def _random_dag(seed: int, n: int = 25, p: float = 0.2) -> nx.DiGraph:
    # Edges only go from lower to higher node ids, so there is no cycle.
    rng = random.Random(seed)
    graph = nx.DiGraph()
    graph.add_nodes_from(range(n))
    for u in range(n):
        for v in range(u + 1, n):
            if rng.random() < p:
                graph.add_edge(u, v, weight=rng.randint(-5, 9))
    return graph


def _dists(paths):
    return {node: path.dist for node, path in paths.items()}


@pytest.mark.parametrize("seed", SEEDS)
def test_bfs_matches_networkx(seed):
    graph = _random_digraph(seed)

    expected = nx.single_source_shortest_path_length(graph, 0)
    assert _dists(bfs.find_paths(from_networkx(graph), 0)) == expected


@pytest.mark.parametrize("seed", SEEDS)
def test_bfs_matches_dijkstra_with_unit_weights(seed):
    graph = _random_digraph(seed)
    view = from_networkx(graph)

    assert _dists(bfs.find_paths(view, 0)) == _dists(
        dijkstra.find_paths(view.weighted(lambda u, v: 1), 0)
    )


@pytest.mark.parametrize("seed", SEEDS)
def test_dijkstra_matches_networkx(seed):
    graph = _random_digraph(seed)

    expected = nx.single_source_dijkstra_path_length(graph, 0)
    assert _dists(dijkstra.find_paths(weighted_from_networkx(graph), 0)) == expected


@pytest.mark.parametrize("seed", SEEDS)
def test_bellman_ford_matches_dijkstra(seed):
    view = weighted_from_networkx(_random_digraph(seed))

    assert _dists(bellman_ford.find_paths(view, 0)) == _dists(
        dijkstra.find_paths(view, 0)
    )


@pytest.mark.parametrize("seed", SEEDS)
def test_bellman_ford_matches_networkx_with_negative_weights(seed):
    graph = _random_dag(seed)

    expected = nx.single_source_bellman_ford_path_length(graph, 0)
    assert _dists(bellman_ford.find_paths(weighted_from_networkx(graph), 0)) == expected


@pytest.mark.parametrize("seed", SEEDS)
def test_paths_are_consistent_with_edges(seed):
    graph = _random_digraph(seed)

    for node, path in dijkstra.find_paths(weighted_from_networkx(graph), 0).items():
        assert path.end == node
        assert path.source == 0
        assert path.nodes[-1] == node
        steps = list(zip(path.nodes, path.nodes[1:]))
        assert len(steps) == len(path.nodes) - 1
        assert sum(graph.edges[u, v]["weight"] for u, v in steps) == path.dist


@pytest.mark.parametrize("seed", SEEDS)
def test_multiple_sources_take_minimum(seed):
    graph = _random_digraph(seed)
    sources = [0, 5, 11]

    paths = dijkstra.find_paths_from_any(weighted_from_networkx(graph), sources)

    assert _dists(paths) == nx.multi_source_dijkstra_path_length(graph, set(sources))
    for source in sources:
        assert paths[source].dist == 0
        assert paths[source].previous is None
    assert all(path.source in sources for path in paths.values())


@pytest.mark.parametrize("algorithm", [dijkstra, bellman_ford])
def test_unreachable_target_in_random_graph(algorithm):
    graph = _random_digraph(3)
    graph.add_node("isolated")

    view = weighted_from_networkx(graph)
    assert algorithm.find_path(view, 0, lambda n: n == "isolated") is None


@pytest.mark.parametrize("algorithm", [bfs, dijkstra, bellman_ford])
def test_target_of_other_type_is_not_matched(algorithm):
    # Integer and string nodes mixed in one graph; the string target is isolated.
    graph = nx.DiGraph([(0, 1), (1, "a"), ("a", 2)])
    graph.add_node("isolated")
    view = from_networkx(graph) if algorithm is bfs else weighted_from_networkx(graph)

    assert algorithm.find_path(view, 0, lambda n: n == "isolated") is None
    assert algorithm.find_path(view, 0, lambda n: n == "a").dist == 2
    with pytest.raises(ValueError):
        algorithm.dist(view, 0, lambda n: n == "isolated")


def test_nodes_are_cached():
    path = dijkstra.find_path(lambda i: [(i + 1, 1)], 0, lambda i: i == 5)

    assert path.nodes is path.nodes
    assert list(path) == [0, 1, 2, 3, 4, 5]
