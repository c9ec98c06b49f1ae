"""wgraph: generic weighted-graph engine.

Builds an undirected weighted graph from an edge-list description and answers
breadth-first depth, connected-component, shortest-path and minimum spanning
tree queries. Graphs are parameterized over the node identifier width and the
edge weight type.

Primary API:
    read_graph() - Load an edge-list file into a Graph
    parse_edge_list() - Build a Graph from text lines
    Graph - Immutable adjacency-list graph with query methods
    to_networkx() - Convert a Graph to a NetworkX MultiGraph

Example:
    from wgraph import read_graph

    graph = read_graph("graph.txt", id_type="u32", weight_type="f64")
    graph.connected_components()
    graph.minimum_spanning_tree()
    graph.shortest_path(0, 2)  # (cost, [0, ..., 2]) or None
"""

from __future__ import annotations

from wgraph import cli, logging
from wgraph._version import __version__
from wgraph.algorithms import DisjointSet
from wgraph.exceptions import GraphFormatError, NodeRangeError
from wgraph.graph import Edge, Graph, parse_edge_list, read_graph, to_networkx
from wgraph.types import (
    NODE_ID_TYPES,
    WEIGHT_TYPES,
    NodeIdType,
    WeightType,
    get_node_id_type,
    get_weight_type,
)

__all__ = [
    # Version
    "__version__",
    # Model
    "Graph",
    "Edge",
    "DisjointSet",
    # Construction
    "read_graph",
    "parse_edge_list",
    # Types
    "NodeIdType",
    "WeightType",
    "NODE_ID_TYPES",
    "WEIGHT_TYPES",
    "get_node_id_type",
    "get_weight_type",
    # Errors
    "GraphFormatError",
    "NodeRangeError",
    # Library integrations (NetworkX)
    "to_networkx",
    # Utilities
    "cli",
    "logging",
]
