"""Bellman-Ford shortest paths in the queue-based SPFA form.

Supports negative edge weights. A node is re-enqueued every time its distance
strictly improves, so its edges may be discovered many times and the worst
case is O(V * E). Queue entries superseded by a later improvement are skipped
when popped; the improved path is already queued behind them.

The graph must not contain a negative-weight cycle reachable from a source:
such a cycle is not detected and the run does not terminate. The reachable
part of the graph must also be finite. Distances are not final until the
queue drains, so target lookups scan the finished results instead of
stopping early.
"""

from __future__ import annotations

from collections import deque
from typing import Any, Callable, Dict, Iterable, Optional, Tuple

from puzzlegraph.algorithms.base import (
    Results,
    SearchStats,
    TargetPredicate,
    require_dist,
    seed,
)
from puzzlegraph.logging import get_logger
from puzzlegraph.path import Path
from puzzlegraph.types import Cost

logger = get_logger(__name__)

EdgeFunc = Callable[[Any], Iterable[Tuple[Any, Cost]]]


def _run(graph: EdgeFunc, sources: Iterable[Any], results: Results) -> None:
    stats = SearchStats("Bellman-Ford", logger)
    queue = deque(seed(sources, results))

    while queue:
        path = queue.popleft()
        node_id = path.end
        stats.popped(len(queue), len(results))
        if results[node_id] is not path:
            continue

        stats.expanded += 1
        for neighbor_id, weight in graph(node_id):
            new_dist = path.dist + weight
            current = results.get(neighbor_id)
            if current is None or new_dist < current.dist:
                next_path = Path(neighbor_id, new_dist, path)
                results[neighbor_id] = next_path
                queue.append(next_path)

    stats.finish(results)


def _nearest(results: Results, target: TargetPredicate) -> Optional[Path]:
    best: Optional[Path] = None
    for node_id, path in results.items():
        if target(node_id) and (best is None or path.dist < best.dist):
            best = path
    return best


def find_path(graph: EdgeFunc, source: Any, target: TargetPredicate) -> Optional[Path]:
    """Find a shortest path from ``source`` to the nearest node accepted by ``target``.

    Args:
        graph: ``WeightedGraph`` or function returning the outgoing
            ``(end, weight)`` edges of a node.
        source: Source node.
        target: Predicate accepting the target node(s).

    Returns:
        A shortest ``Path`` to a nearest target node, or None if no target
        node is reachable.
    """
    return find_path_from_any(graph, (source,), target)


def find_path_from_any(
    graph: EdgeFunc, sources: Iterable[Any], target: TargetPredicate
) -> Optional[Path]:
    """Find a shortest path from any of ``sources`` to a node accepted by ``target``.

    All reachable nodes are relaxed first; the accepted node with minimal
    distance is then picked, the earliest discovered one on ties.

    Raises:
        ValueError: If ``sources`` is empty.
    """
    return _nearest(find_paths_from_any(graph, sources), target)


def find_paths(graph: EdgeFunc, source: Any) -> Dict[Any, Path]:
    """Find shortest paths to all nodes reachable from ``source``."""
    return find_paths_from_any(graph, (source,))


def find_paths_from_any(graph: EdgeFunc, sources: Iterable[Any]) -> Dict[Any, Path]:
    """Find shortest paths to all nodes reachable from any of ``sources``.

    Returns:
        Mapping of each reachable node to a shortest path from the sources.

    Raises:
        ValueError: If ``sources`` is empty.
    """
    results: Results = {}
    _run(graph, sources, results)
    return results


def dist(graph: EdgeFunc, source: Any, target: TargetPredicate) -> Cost:
    """Return the total weight of a shortest path to the nearest target node.

    Raises:
        ValueError: If no target node is reachable.
    """
    return require_dist(find_path(graph, source, target))
