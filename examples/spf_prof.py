# pylint: disable=invalid-name
import networkx as nx

from puzzlegraph.algorithms import dijkstra
from puzzlegraph.graph import weighted_from_networkx

from line_profiler import LineProfiler


g = nx.MultiDiGraph()
for node_num in range(100):
    node_id = str(node_num)
    g.add_node(node_id)
    for _node_id in list(g):
        if _node_id != node_id:
            for _metric in range(100, 0, -1):
                g.add_edge(_node_id, node_id, metric=_metric)
                g.add_edge(node_id, _node_id, metric=_metric)

view = weighted_from_networkx(g, weight_attr="metric")

lp = LineProfiler()
lp.add_function(dijkstra._run)
lp_wrapper = lp(dijkstra.find_paths)
lp_wrapper(view, "0")
lp.print_stats()

# Reference timing with NetworkX on the same graph:
#     nx.single_source_dijkstra_path_length(g, "0", weight="metric")
