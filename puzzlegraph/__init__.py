"""puzzlegraph: shortest paths over lazily defined graphs.

puzzlegraph finds shortest paths in graphs that are described by a function
from a node to its neighbors (or to its weighted outgoing edges) instead of a
stored node and edge collection. The nodes can be arbitrary hashable values,
such as the states of a combinatorial puzzle generated on the fly.

Primary API:
    bfs - Breadth-first search (number of edges)
    dijkstra - Dijkstra's algorithm (non-negative weights)
    bellman_ford - SPFA form of Bellman-Ford (negative weights allowed)
    Graph, WeightedGraph, Edge - Lazy graph views with filtering
    Path - Backward-linked path result
    from_networkx(), weighted_from_networkx(), to_networkx() - NetworkX interop

Example:
    from puzzlegraph import bfs

    # Reach 128 from 0 with "+1" and "*2" steps
    path = bfs.find_path(lambda i: (i + 1, 2 * i), 0, lambda i: i == 128)
    path.dist   # 8
    path.nodes  # (0, 1, 2, 4, 8, 16, 32, 64, 128)
"""

from __future__ import annotations

from puzzlegraph import logging
from puzzlegraph._version import __version__
from puzzlegraph.algorithms import bellman_ford, bfs, dijkstra
from puzzlegraph.config import SEARCH_CONFIG, SearchConfig
from puzzlegraph.graph import (
    Edge,
    Graph,
    WeightedGraph,
    from_networkx,
    to_networkx,
    weighted_from_networkx,
)
from puzzlegraph.path import Path

__all__ = [
    # Version
    "__version__",
    # Algorithms
    "bfs",
    "dijkstra",
    "bellman_ford",
    # Model
    "Path",
    "Edge",
    "Graph",
    "WeightedGraph",
    # Library integrations (NetworkX)
    "from_networkx",
    "weighted_from_networkx",
    "to_networkx",
    # Configuration
    "SearchConfig",
    "SEARCH_CONFIG",
    # Utilities
    "logging",
]
