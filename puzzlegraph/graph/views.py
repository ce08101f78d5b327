"""Lazy graph views for traversal algorithms.

A graph is never stored as a whole. A ``Graph`` wraps a function that yields
the neighbors of a node, and a ``WeightedGraph`` wraps a function that yields
the outgoing ``(end, weight)`` edges of a node. Both may generate their
sequences on the fly, so the nodes can be the states of a puzzle that are not
enumerated in advance.

Views are stateless and re-entrant. Filtering or converting a view returns a
new view that wraps the original one; nothing is materialized or mutated.
Undirected graphs are modelled by symmetric neighbor functions, which is the
caller's responsibility.

Example:
    >>> graph = Graph.of({"A": ["B", "C"], "B": ["C"]})
    >>> list(graph.neighbors("A"))
    ['B', 'C']
    >>> list(graph.filter_nodes(lambda v: v != "B").neighbors("A"))
    ['C']
    >>> list(graph.weighted(lambda u, v: 2).edges("B"))
    [Edge(end='C', weight=2)]
"""

from __future__ import annotations

from typing import (
    Any,
    Callable,
    Generic,
    Hashable,
    Iterable,
    Iterator,
    Mapping,
    NamedTuple,
    Optional,
    Tuple,
    Union,
)

from puzzlegraph.types import Cost, Node

NeighborFunc = Callable[[Any], Iterable[Any]]
EdgeFunc = Callable[[Any], Iterable[Tuple[Any, Cost]]]
NodePredicate = Callable[[Any], bool]
EdgePredicate = Callable[[Any, Any], bool]
WeightFunc = Callable[[Any, Any], Cost]


class Edge(NamedTuple):
    """Outgoing weighted edge of a node."""

    end: Hashable
    weight: Cost


def _lookup(mapping: Mapping) -> Callable[[Any], Iterable[Any]]:
    # Reads the mapping on every call so later changes are reflected.
    return lambda node: mapping.get(node, ())


class Graph(Generic[Node]):
    """Unweighted directed or undirected graph given by a neighbor function.

    Calling the graph with a node is the same as ``neighbors(node)``, so a
    ``Graph`` can be used wherever a plain neighbor function is accepted.
    """

    __slots__ = ("_neighbors",)

    def __init__(self, neighbors: NeighborFunc) -> None:
        self._neighbors = neighbors

    @classmethod
    def of(cls, source: Union[Graph, Mapping, NeighborFunc]) -> Graph:
        """Build a graph from a neighbor function or an adjacency mapping.

        Args:
            source: Callable returning the neighbors of a node, or a mapping of
                node to a collection of neighbors. Nodes missing from a mapping
                have no neighbors. An existing ``Graph`` is returned unchanged;
                a ``WeightedGraph`` is viewed without its weights.

        Returns:
            Graph view over ``source``.

        Raises:
            TypeError: If ``source`` is neither a mapping nor callable.
        """
        if isinstance(source, Graph):
            return source
        if isinstance(source, WeightedGraph):
            return source.unweighted()
        if isinstance(source, Mapping):
            return cls(_lookup(source))
        if callable(source):
            return cls(source)
        raise TypeError(f"Cannot build a graph from {type(source).__name__}")

    def neighbors(self, node: Node) -> Iterator[Node]:
        """Return the end nodes of the outgoing edges of ``node``."""
        return iter(self._neighbors(node))

    def __call__(self, node: Node) -> Iterator[Node]:
        return self.neighbors(node)

    def filter_nodes(self, predicate: NodePredicate) -> Graph:
        """Restrict the graph to neighbors accepted by ``predicate``.

        The queried node itself is not filtered, only its neighbors.
        """
        neighbors = self.neighbors
        return Graph(lambda node: (v for v in neighbors(node) if predicate(v)))

    def filter_edges(self, predicate: EdgePredicate) -> Graph:
        """Restrict the graph to edges ``(u, v)`` accepted by ``predicate``."""
        neighbors = self.neighbors
        return Graph(
            lambda node: (v for v in neighbors(node) if predicate(node, v))
        )

    def weighted(self, weight: WeightFunc) -> WeightedGraph:
        """Convert to a ``WeightedGraph`` assigning ``weight(u, v)`` to each edge."""
        return WeightedGraph.of(self, weight)


class WeightedGraph(Generic[Node]):
    """Weighted directed or undirected graph given by an edge function.

    The edge function yields ``(end, weight)`` pairs, either as ``Edge``
    instances or plain tuples. Calling the graph with a node is the same as
    ``edges(node)``.
    """

    __slots__ = ("_edges",)

    def __init__(self, edges: EdgeFunc) -> None:
        self._edges = edges

    @classmethod
    def of(
        cls,
        source: Union[WeightedGraph, Graph, Mapping, Callable],
        weight: Optional[WeightFunc] = None,
    ) -> WeightedGraph:
        """Build a weighted graph.

        Without ``weight``, ``source`` provides the edges directly: a callable
        or mapping yielding ``(end, weight)`` pairs. With ``weight``, ``source``
        provides plain neighbor nodes (callable, mapping or ``Graph``) and each
        edge ``(u, v)`` is assigned ``weight(u, v)``; the weights of a
        ``WeightedGraph`` source are replaced.

        Args:
            source: Edge or neighbor provider as described above.
            weight: Optional weight function of the two endpoints.

        Returns:
            WeightedGraph view over ``source``.

        Raises:
            TypeError: If ``source`` is neither a mapping nor callable.
        """
        if weight is not None:
            neighbors = Graph.of(source).neighbors
            return cls(
                lambda node: ((v, weight(node, v)) for v in neighbors(node))
            )
        if isinstance(source, WeightedGraph):
            return source
        if isinstance(source, Mapping):
            return cls(_lookup(source))
        if callable(source):
            return cls(source)
        raise TypeError(f"Cannot build a weighted graph from {type(source).__name__}")

    def edges(self, node: Node) -> Iterator[Edge]:
        """Return the outgoing edges of ``node`` as ``Edge`` tuples."""
        for end, weight in self._edges(node):
            yield Edge(end, weight)

    def __call__(self, node: Node) -> Iterator[Edge]:
        return self.edges(node)

    def neighbors(self, node: Node) -> Iterator[Node]:
        """Return the end nodes of the outgoing edges of ``node``."""
        return (edge.end for edge in self.edges(node))

    def filter_nodes(self, predicate: NodePredicate) -> WeightedGraph:
        """Restrict the graph to edges whose end node is accepted by ``predicate``.

        The queried node itself is not filtered, only its neighbors.
        """
        edges = self.edges
        return WeightedGraph(
            lambda node: (e for e in edges(node) if predicate(e.end))
        )

    def filter_edges(self, predicate: EdgePredicate) -> WeightedGraph:
        """Restrict the graph to edges ``(u, v)`` accepted by ``predicate``."""
        edges = self.edges
        return WeightedGraph(
            lambda node: (e for e in edges(node) if predicate(node, e.end))
        )

    def unweighted(self) -> Graph:
        """Return a ``Graph`` view of this graph ignoring the weights."""
        return Graph(self.neighbors)
