"""Breadth-first search.

Finds shortest paths in terms of the number of edges. Paths are expanded in
non-decreasing distance order from a FIFO frontier, so the first time a node
is reached is along a shortest path: each node is enqueued at most once and
the result map doubles as the visited set.

With a target predicate, the search returns as soon as an accepted node is
taken from the frontier. This makes it usable on huge or conceptually
infinite graphs whose neighbors are generated on the fly, e.g. the states and
moves of a puzzle.
"""

from __future__ import annotations

from collections import deque
from typing import Any, Callable, Dict, Iterable, Optional

from puzzlegraph.algorithms.base import (
    Results,
    SearchStats,
    TargetPredicate,
    never,
    require_dist,
    seed,
)
from puzzlegraph.logging import get_logger
from puzzlegraph.path import Path

logger = get_logger(__name__)

NeighborFunc = Callable[[Any], Iterable[Any]]


def _run(
    graph: NeighborFunc,
    sources: Iterable[Any],
    target: TargetPredicate,
    results: Results,
) -> Optional[Path]:
    stats = SearchStats("BFS", logger)
    queue = deque(seed(sources, results))

    while queue:
        path = queue.popleft()
        stats.popped(len(queue), len(results))
        if target(path.end):
            stats.finish(results, path)
            return path

        stats.expanded += 1
        dist = path.dist + 1
        for neighbor in graph(path.end):
            if neighbor not in results:
                next_path = Path(neighbor, dist, path)
                results[neighbor] = next_path
                queue.append(next_path)

    stats.finish(results)
    return None


def find_path(
    graph: NeighborFunc, source: Any, target: TargetPredicate
) -> Optional[Path]:
    """Find a shortest path from ``source`` to the nearest node accepted by ``target``.

    Args:
        graph: ``Graph`` or function returning the neighbors of a node.
        source: Source node.
        target: Predicate accepting the target node(s). For a single target
            node ``t``, pass ``lambda n: n == t``.

    Returns:
        A shortest ``Path`` to a nearest target node, or None if no target
        node is reachable.
    """
    return find_path_from_any(graph, (source,), target)


def find_path_from_any(
    graph: NeighborFunc, sources: Iterable[Any], target: TargetPredicate
) -> Optional[Path]:
    """Find a shortest path from any of ``sources`` to a node accepted by ``target``.

    Among several equally near target nodes, the one reached first wins.

    Args:
        graph: ``Graph`` or function returning the neighbors of a node.
        sources: Source nodes, all at distance zero.
        target: Predicate accepting the target node(s).

    Returns:
        A shortest ``Path`` to a nearest target node, or None if no target
        node is reachable.

    Raises:
        ValueError: If ``sources`` is empty.
    """
    return _run(graph, sources, target, {})


def find_paths(graph: NeighborFunc, source: Any) -> Dict[Any, Path]:
    """Find shortest paths to all nodes reachable from ``source``.

    Returns:
        Mapping of each reachable node (including the source) to a shortest path.
    """
    return find_paths_from_any(graph, (source,))


def find_paths_from_any(graph: NeighborFunc, sources: Iterable[Any]) -> Dict[Any, Path]:
    """Find shortest paths to all nodes reachable from any of ``sources``.

    The reachable part of the graph must be finite.

    Returns:
        Mapping of each reachable node to a shortest path from its nearest source.

    Raises:
        ValueError: If ``sources`` is empty.
    """
    results: Results = {}
    _run(graph, sources, never, results)
    return results


def dist(graph: NeighborFunc, source: Any, target: TargetPredicate) -> int:
    """Return the number of edges from ``source`` to the nearest target node.

    Raises:
        ValueError: If no target node is reachable.
    """
    return require_dist(find_path(graph, source, target))
