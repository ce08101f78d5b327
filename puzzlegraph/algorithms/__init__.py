"""Shortest-path traversal algorithms over lazily defined graphs.

Each module exposes the same operations: ``find_path``, ``find_path_from_any``,
``find_paths``, ``find_paths_from_any`` and ``dist``.
"""

from puzzlegraph.algorithms import bellman_ford, bfs, dijkstra

__all__ = ["bfs", "dijkstra", "bellman_ford"]
