"""Graph conversion utilities between wgraph and NetworkX graphs."""

from __future__ import annotations

import networkx as nx

from wgraph.graph.weighted_graph import Graph


def to_networkx(graph: Graph) -> nx.MultiGraph:
    """Convert a :class:`Graph` to a NetworkX ``MultiGraph``.

    Nodes are the dense indices ``0..V-1``. Each undirected edge becomes one
    NetworkX edge carrying the original cost in the ``cost`` attribute;
    parallel edges are preserved.

    Args:
        graph: The graph to convert.

    Returns:
        A NetworkX MultiGraph with the same vertices and edges.
    """
    to_index = graph.id_type.to_index
    nx_graph = nx.MultiGraph()
    nx_graph.add_nodes_from(range(graph.vertices))

    for edges in graph.adjacencies:
        # Self-loops are stored twice under the same vertex; keep every other one
        loop_seen = False
        for edge in edges:
            u, v = to_index(edge.src), to_index(edge.dst)
            if u < v:
                nx_graph.add_edge(u, v, cost=edge.cost.item())
            elif u == v:
                if not loop_seen:
                    nx_graph.add_edge(u, v, cost=edge.cost.item())
                loop_seen = not loop_seen
    return nx_graph
