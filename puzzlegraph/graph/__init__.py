from puzzlegraph.graph.views import Edge, Graph, WeightedGraph
from puzzlegraph.graph.convert import from_networkx, to_networkx, weighted_from_networkx

__all__ = [
    "Edge",
    "Graph",
    "WeightedGraph",
    "from_networkx",
    "weighted_from_networkx",
    "to_networkx",
]
