"""Driver policy shared by the traversal algorithms.

Every algorithm seeds all source nodes at distance zero, in iteration order,
and either runs to exhaustion (``never`` as the target predicate) or stops at
the nearest node accepted by the target predicate. The helpers here implement
the seeding, the not-found handling of ``dist``, and per-run bookkeeping for
DEBUG logging.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, List, Optional

from puzzlegraph.config import SEARCH_CONFIG, SearchConfig
from puzzlegraph.path import Path
from puzzlegraph.types import Cost

Results = Dict[Any, Path]
TargetPredicate = Callable[[Any], bool]


def never(node: Any) -> bool:
    """Target predicate accepting no node, so a traversal runs to exhaustion."""
    return False


def seed(sources: Iterable[Any], results: Results) -> List[Path]:
    """Create a zero-distance path for each distinct source node.

    Each path is recorded in ``results``; a source repeated in ``sources`` is
    seeded once.

    Args:
        sources: Source nodes in seeding order.
        results: Result map of the current run, filled in place.

    Returns:
        The seeded paths, in seeding order.

    Raises:
        ValueError: If ``sources`` is empty.
    """
    seeded: List[Path] = []
    for source in sources:
        if source in results:
            continue
        path = Path(source, 0)
        results[source] = path
        seeded.append(path)
    if not seeded:
        raise ValueError("At least one source node is required.")
    return seeded


def require_dist(path: Optional[Path]) -> Cost:
    """Return the distance of ``path``.

    Raises:
        ValueError: If no path was found.
    """
    if path is None:
        raise ValueError("No target node is reachable from the source node(s).")
    return path.dist


@dataclass
class SearchStats:
    """Counters of a single traversal run, reported through DEBUG logging.

    Attributes:
        algorithm: Name used in log records.
        logger: Logger of the algorithm module.
        pops: Number of paths taken from the frontier.
        expanded: Number of times a node's outgoing edges were discovered.
        config: Configuration read when the run starts.
    """

    algorithm: str
    logger: logging.Logger
    pops: int = 0
    expanded: int = 0
    config: SearchConfig = field(default_factory=lambda: SEARCH_CONFIG)

    def popped(self, frontier_size: int, reached: int) -> None:
        """Count a frontier pop and emit a progress record when one is due."""
        self.pops += 1
        if self.config.should_report(self.pops):
            self.logger.debug(
                "%s progress: %d pops, %d expanded, %d reached, frontier size %d",
                self.algorithm,
                self.pops,
                self.expanded,
                reached,
                frontier_size,
            )

    def finish(self, results: Results, found: Optional[Path] = None) -> None:
        """Emit the summary record of the run."""
        if not self.logger.isEnabledFor(logging.DEBUG):
            return
        if found is None:
            outcome = "no target"
        else:
            outcome = f"target {found.end!r} at distance {found.dist}"
        self.logger.debug(
            "%s finished: %d reached, %d expanded, %d pops, %s",
            self.algorithm,
            len(results),
            self.expanded,
            self.pops,
            outcome,
        )
