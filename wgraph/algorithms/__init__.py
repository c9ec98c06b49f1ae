"""Graph algorithms: traversal, shortest paths and spanning trees."""

from wgraph.algorithms.bfs import bfs_depth, bfs_layers, connected_components
from wgraph.algorithms.disjoint_set import DisjointSet
from wgraph.algorithms.mst import minimum_spanning_edges, minimum_spanning_tree
from wgraph.algorithms.spf import PathDistance, path_cost, shortest_path

__all__ = [
    "bfs_depth",
    "bfs_layers",
    "connected_components",
    "shortest_path",
    "path_cost",
    "PathDistance",
    "minimum_spanning_tree",
    "minimum_spanning_edges",
    "DisjointSet",
]
