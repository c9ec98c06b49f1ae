"""Graph primitives and helpers.

This package provides the immutable weighted graph type `Graph` and helper
modules for construction from edge lists (`io`) and NetworkX conversion
(`convert`).
"""

from wgraph.graph.convert import to_networkx
from wgraph.graph.io import parse_edge_list, read_graph
from wgraph.graph.weighted_graph import Edge, Graph

__all__ = [
    "Edge",
    "Graph",
    "parse_edge_list",
    "read_graph",
    "to_networkx",
]
