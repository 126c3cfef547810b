from typing import Hashable

import networkx as nx

from .graph import WeightedGraph


def to_networkx(graph: WeightedGraph[Hashable]) -> nx.DiGraph:
    """
    Converts a WeightedGraph into a networkx DiGraph.

    Every vertex becomes a node (including vertices without edges) and every
    edge keeps its weight in the "weight" attribute, so networkx's own
    shortest-path and drawing functions can be used on the result.

    Args:
        graph: The graph to convert.

    Returns:
        A new networkx.DiGraph. Later changes to either graph are not shared.
    """
    G = nx.DiGraph()
    for vertex in graph.get_all_vertices():
        G.add_node(vertex)
    for vertex in graph.get_all_vertices():
        for neighbor in graph.neighbors(vertex):
            G.add_edge(vertex, neighbor, weight=graph.get_weight(vertex, neighbor))
    return G
