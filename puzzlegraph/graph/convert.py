"""Conversion utilities between NetworkX graphs and lazy graph views.

``from_networkx`` and ``weighted_from_networkx`` expose an existing NetworkX
graph (Graph, DiGraph, MultiGraph or MultiDiGraph) as a view accepted by the
traversal algorithms, without copying it. ``to_networkx`` goes the other way
and materializes the part of a view reachable from given source nodes, which
is handy for inspection, drawing, or cross-checking results.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterable, Union

import networkx as nx

from puzzlegraph.algorithms import bfs
from puzzlegraph.graph.views import Graph, WeightedGraph
from puzzlegraph.types import Cost

if TYPE_CHECKING:
    NxGraph = Union[nx.Graph, nx.DiGraph, nx.MultiGraph, nx.MultiDiGraph]
else:
    NxGraph = Any


def from_networkx(nx_graph: NxGraph) -> Graph:
    """Wrap a NetworkX graph as an unweighted ``Graph`` view.

    Neighbors are successors for directed graphs. A node that is not in the
    NetworkX graph has no neighbors. Changes to the NetworkX graph are
    reflected in the view.

    Args:
        nx_graph: NetworkX graph of any kind.

    Returns:
        Graph view over ``nx_graph``.
    """

    def neighbors(node: Any) -> Iterable[Any]:
        if node not in nx_graph:
            return ()
        return nx_graph.adj[node]

    return Graph(neighbors)


def weighted_from_networkx(
    nx_graph: NxGraph,
    weight_attr: str = "weight",
    default_weight: Cost = 1,
) -> WeightedGraph:
    """Wrap a NetworkX graph as a ``WeightedGraph`` view.

    For multigraphs, parallel edges between a pair of nodes collapse into a
    single edge carrying the minimal weight among them.

    Args:
        nx_graph: NetworkX graph of any kind.
        weight_attr: Edge attribute holding the weight.
        default_weight: Weight used when the attribute is missing.

    Returns:
        WeightedGraph view over ``nx_graph``.
    """
    multigraph = nx_graph.is_multigraph()

    def edges(node: Any) -> Iterable[Any]:
        if node not in nx_graph:
            return
        for neighbor, data in nx_graph.adj[node].items():
            if multigraph:
                weight = min(
                    attrs.get(weight_attr, default_weight) for attrs in data.values()
                )
            else:
                weight = data.get(weight_attr, default_weight)
            yield neighbor, weight

    return WeightedGraph(edges)


def to_networkx(
    graph: Union[Graph, WeightedGraph, Any],
    sources: Iterable[Any],
    weight_attr: str = "weight",
) -> nx.DiGraph:
    """Materialize the part of a view reachable from ``sources``.

    The reachable part must be finite. A ``WeightedGraph`` stores each edge
    weight under ``weight_attr``; repeated ``(u, v)`` pairs keep the minimal
    weight. Any other callable is treated as an unweighted neighbor function.

    Args:
        graph: ``Graph``, ``WeightedGraph`` or neighbor function.
        sources: Nodes to start the exploration from.
        weight_attr: Edge attribute name for weights of a ``WeightedGraph``.

    Returns:
        A NetworkX DiGraph with every reachable node and edge.

    Raises:
        ValueError: If ``sources`` is empty.
    """
    nx_graph = nx.DiGraph()

    if isinstance(graph, WeightedGraph):
        reachable = bfs.find_paths_from_any(graph.unweighted(), sources)
        for node in reachable:
            nx_graph.add_node(node)
        for u in reachable:
            for v, weight in graph.edges(u):
                if nx_graph.has_edge(u, v):
                    current = nx_graph.edges[u, v][weight_attr]
                    nx_graph.edges[u, v][weight_attr] = min(current, weight)
                else:
                    nx_graph.add_edge(u, v, **{weight_attr: weight})
        return nx_graph

    graph = Graph.of(graph)
    reachable = bfs.find_paths_from_any(graph, sources)
    for node in reachable:
        nx_graph.add_node(node)
    for u in reachable:
        for v in graph.neighbors(u):
            nx_graph.add_edge(u, v)
    return nx_graph
