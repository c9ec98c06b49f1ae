"""Minimum spanning tree (Kruskal) over an undirected weighted graph.

Each undirected edge is stored twice in the adjacency lists; only the copy
oriented from the lower to the higher vertex index is considered, so a merged
edge is never counted twice. Edges are sorted ascending by cost with a stable
sort, so ties keep their input order and the output is deterministic.
"""

from __future__ import annotations

from operator import attrgetter
from typing import TYPE_CHECKING, Any, List

from wgraph.algorithms.disjoint_set import DisjointSet
from wgraph.logging import get_logger

if TYPE_CHECKING:
    from wgraph.graph.weighted_graph import Edge, Graph

logger = get_logger(__name__)


def minimum_spanning_edges(graph: "Graph") -> List["Edge"]:
    """Return the edges of a minimum spanning forest in acceptance order.

    For a connected graph with ``V`` vertices exactly ``V - 1`` edges are
    returned. Self-loops never join two components and are skipped.
    """
    to_index = graph.id_type.to_index
    candidates = [
        edge for edge in graph.edges() if to_index(edge.src) < to_index(edge.dst)
    ]
    candidates.sort(key=attrgetter("cost"))

    components = DisjointSet(graph.vertices)
    selected = []
    for edge in candidates:
        if components.union(to_index(edge.src), to_index(edge.dst)):
            selected.append(edge)
            if components.components == 1:
                break

    logger.debug(
        f"MST selected {len(selected)} of {len(candidates)} edges, "
        f"{components.components} components remain"
    )
    return selected


def minimum_spanning_tree(graph: "Graph") -> Any:
    """Return the total cost of a minimum spanning forest.

    Equals the minimum spanning tree weight when the graph is connected.

    Raises:
        OverflowError: If the total is not representable by the weight type.
    """
    weight_type = graph.weight_type
    total = weight_type.zero
    for edge in minimum_spanning_edges(graph):
        total = weight_type.add(total, edge.cost)
    return total
