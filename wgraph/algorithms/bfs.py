"""Breadth-first traversal: depth (eccentricity) and connected components."""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING, Any, Dict, List

from wgraph.logging import get_logger

if TYPE_CHECKING:
    from wgraph.graph.weighted_graph import Graph

logger = get_logger(__name__)


def _expand(graph: "Graph", start: int, visited: List[bool]) -> Dict[int, int]:
    """Mark every vertex reachable from ``start`` and record its layer.

    ``visited`` is shared by the caller so that repeated expansions across
    components touch each vertex once. Returns dense index -> hop count for the
    vertices marked by this call.
    """
    to_index = graph.id_type.to_index
    adjacencies = graph.adjacencies

    layers = {start: 0}
    queue = deque([(start, 0)])
    visited[start] = True
    while queue:
        node, depth = queue.popleft()
        for edge in adjacencies[node]:
            neighbor = to_index(edge.dst)
            if not visited[neighbor]:
                visited[neighbor] = True
                layers[neighbor] = depth + 1
                queue.append((neighbor, depth + 1))
    return layers


def bfs_layers(graph: "Graph", start: Any) -> Dict[int, int]:
    """Return the hop count from ``start`` to every vertex reachable from it.

    Args:
        graph: Graph to traverse.
        start: 0-indexed start node.

    Returns:
        Mapping of dense vertex index to layer number, in discovery order.

    Raises:
        NodeRangeError: If ``start`` is outside the graph.
    """
    start_index = graph.check_node(start)
    return _expand(graph, start_index, [False] * graph.vertices)


def bfs_depth(graph: "Graph", start: Any) -> int:
    """Return the largest layer number reached by BFS from ``start``.

    This is the eccentricity of ``start`` within its connected component,
    measured in edges. An isolated vertex has depth 0.

    Raises:
        NodeRangeError: If ``start`` is outside the graph.
    """
    layers = bfs_layers(graph, start)
    depth = max(layers.values())
    logger.debug(
        f"BFS from {start}: reached {len(layers)} of {graph.vertices} vertices, "
        f"depth {depth}"
    )
    return depth


def connected_components(graph: "Graph") -> int:
    """Count connected components.

    Vertices are scanned in index order; each unvisited vertex starts a new
    expansion that marks its whole component, so total work is O(V + E).
    """
    visited = [False] * graph.vertices
    components = 0
    for node in range(graph.vertices):
        if not visited[node]:
            _expand(graph, node, visited)
            components += 1
    logger.debug(f"Found {components} connected components in {graph!r}")
    return components
