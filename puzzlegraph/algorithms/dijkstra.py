"""Dijkstra's algorithm for graphs with non-negative edge weights.

Notes:
    The frontier is a binary heap without decrease-key. When a node's distance
    improves, a new entry is pushed and the superseded one stays in the heap;
    it is skipped when popped because its node is already settled by then.
    Each node is settled, and its edges discovered, at most once.

    Edge weights must be non-negative. This is not checked; use
    ``bellman_ford`` for negative weights.

    With a target predicate, the search returns the first accepted path popped
    from the heap. Paths pop in non-decreasing distance order, so this is a
    shortest path to a nearest target node, and graphs may be generated on the
    fly and be conceptually infinite.
"""

from __future__ import annotations

from heapq import heapify, heappop, heappush
from itertools import count
from typing import Any, Callable, Dict, Iterable, List, Optional, Set, Tuple

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
from puzzlegraph.types import Cost

logger = get_logger(__name__)

EdgeFunc = Callable[[Any], Iterable[Tuple[Any, Cost]]]


def _run(
    graph: EdgeFunc,
    sources: Iterable[Any],
    target: TargetPredicate,
    results: Results,
) -> Optional[Path]:
    stats = SearchStats("Dijkstra", logger)
    # The counter breaks distance ties, so nodes never need to be comparable
    tie_breaker = count()
    min_pq: List[Tuple[Cost, int, Path]] = [
        (path.dist, next(tie_breaker), path) for path in seed(sources, results)
    ]
    heapify(min_pq)
    settled: Set[Any] = set()

    while min_pq:
        current_dist, _, path = heappop(min_pq)
        node_id = path.end
        stats.popped(len(min_pq), len(results))
        if target(node_id):
            stats.finish(results, path)
            return path
        if node_id in settled:
            continue
        settled.add(node_id)

        stats.expanded += 1
        for neighbor_id, weight in graph(node_id):
            new_dist = current_dist + weight
            current = results.get(neighbor_id)
            if current is None or new_dist < current.dist:
                next_path = Path(neighbor_id, new_dist, path)
                results[neighbor_id] = next_path
                heappush(min_pq, (new_dist, next(tie_breaker), next_path))

    stats.finish(results)
    return None


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

    Raises:
        ValueError: If ``sources`` is empty.
    """
    return _run(graph, sources, target, {})


def find_paths(graph: EdgeFunc, source: Any) -> Dict[Any, Path]:
    """Find shortest paths to all nodes reachable from ``source``."""
    return find_paths_from_any(graph, (source,))


def find_paths_from_any(graph: EdgeFunc, sources: Iterable[Any]) -> Dict[Any, Path]:
    """Find shortest paths to all nodes reachable from any of ``sources``.

    Raises:
        ValueError: If ``sources`` is empty.
    """
    results: Results = {}
    _run(graph, sources, never, results)
    return results


def dist(graph: EdgeFunc, source: Any, target: TargetPredicate) -> Cost:
    """Return the total weight of a shortest path to the nearest target node.

    Raises:
        ValueError: If no target node is reachable.
    """
    return require_dist(find_path(graph, source, target))
