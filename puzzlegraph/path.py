"""Backward-linked representation of a discovered route.

A ``Path`` records the node a route ends at, its accumulated distance, and the
``Path`` that reached the predecessor node. Paths are never mutated: an
improvement to a node's distance creates a new ``Path`` wrapping the old
predecessor chain, so many candidate routes can share a common prefix without
copying it. The node sequence is derived on demand and cached.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import cached_property
from typing import Generic, Iterator, Optional, Tuple

from puzzlegraph.types import Cost, Node


@dataclass(frozen=True, eq=False)
class Path(Generic[Node]):
    """Route from a source node to ``end``.

    Attributes:
        end: Node at which the path terminates.
        dist: Total weight of the path (number of edges for unweighted search).
        previous: Path to the predecessor of ``end``; None if ``end`` is a source.
    """

    end: Node
    dist: Cost
    previous: Optional[Path[Node]] = field(default=None, repr=False)

    @cached_property
    def nodes(self) -> Tuple[Node, ...]:
        """Nodes along the path, from the source node to ``end``.

        Built by walking the ``previous`` links on first access and cached,
        since the path is immutable.
        """
        reversed_nodes = []
        path: Optional[Path[Node]] = self
        while path is not None:
            reversed_nodes.append(path.end)
            path = path.previous
        reversed_nodes.reverse()
        return tuple(reversed_nodes)

    @property
    def source(self) -> Node:
        """Return the first node of the path (the source node)."""
        return self.nodes[0]

    def __iter__(self) -> Iterator[Node]:
        """Iterate over the nodes of the path in source-to-end order."""
        return iter(self.nodes)
