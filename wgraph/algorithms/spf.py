"""Shortest-path-first (SPF) search between two nodes.

Implements single-source, single-target Dijkstra over non-negative weights
with path reconstruction from a predecessor array.

Notes:
    Negative edge weights are not supported and are not checked; with a
    negative cost the returned path may not be minimal. A Bellman-Ford style
    relaxation is the substitute if negative weights are ever needed.

    Ties are resolved by "first improvement wins": a neighbor's predecessor is
    only replaced on a strictly cheaper cost, neighbors are relaxed in
    adjacency (input) order, and queue entries of equal cost pop in the order
    they were pushed. Output is deterministic for a given file.

    Sums are formed with ``WeightType.add``. A candidate cost above
    ``max_value`` can never beat a recorded distance, so it is skipped rather
    than allowed to wrap around into a small value. A target reached only
    through such sums raises ``OverflowError`` instead of reading as
    unreachable.
"""

from __future__ import annotations

from heapq import heappop, heappush
from itertools import count
from typing import TYPE_CHECKING, Any, List, NamedTuple, Optional, Sequence, Tuple

from wgraph.algorithms.bfs import bfs_layers
from wgraph.logging import get_logger

if TYPE_CHECKING:
    from wgraph.graph.weighted_graph import Graph

logger = get_logger(__name__)


class PathDistance(NamedTuple):
    """Best known ``(predecessor, cost)`` for one vertex."""

    predecessor: Any
    cost: Any


def _rebuild_path(source: Any, target: Any, distance: Sequence[PathDistance]) -> List:
    path = []
    node = target
    while node != source:
        path.append(node)
        node = distance[int(node)].predecessor
    path.append(source)
    path.reverse()
    return path


def shortest_path(
    graph: "Graph", source: Any, target: Any
) -> Optional[Tuple[Any, List[Any]]]:
    """Compute the cheapest path from ``source`` to ``target``.

    Args:
        graph: Graph to search.
        source: 0-indexed source node.
        target: 0-indexed target node.

    Returns:
        ``(cost, path)`` where ``path`` lists typed node identifiers from
        ``source`` to ``target`` inclusive, or ``None`` when ``target`` is not
        reachable from ``source``.

    Raises:
        NodeRangeError: If either node is outside the graph.
        OverflowError: If ``target`` is reachable but every path to it costs
            more than the weight type can hold, or a negative edge drives a
            sum below the type's minimum.
    """
    id_type = graph.id_type
    weight_type = graph.weight_type
    source = id_type.from_index(graph.check_node(source))
    target = id_type.from_index(graph.check_node(target))
    to_index = id_type.to_index
    adjacencies = graph.adjacencies

    distance = [PathDistance(source, weight_type.max_value)] * graph.vertices
    distance[to_index(source)] = PathDistance(source, weight_type.zero)

    # (cost, push sequence, node); the sequence keeps equal costs in push order
    push_seq = count()
    overflowed = False
    min_pq: List[Tuple[Any, int, Any]] = [(weight_type.zero, next(push_seq), source)]

    while min_pq:
        cost, _, node = heappop(min_pq)
        if node == target:
            path = _rebuild_path(source, target, distance)
            logger.debug(f"SPF {source} -> {target}: cost {cost}, {len(path)} hops")
            return cost, path

        if cost > distance[to_index(node)].cost:
            continue

        for edge in adjacencies[to_index(node)]:
            try:
                new_cost = weight_type.add(cost, edge.cost)
            except OverflowError:
                if edge.cost < weight_type.zero:
                    raise
                overflowed = True
                continue
            neighbor = to_index(edge.dst)
            if new_cost < distance[neighbor].cost:
                distance[neighbor] = PathDistance(node, new_cost)
                heappush(min_pq, (new_cost, next(push_seq), edge.dst))

    if overflowed and to_index(target) in bfs_layers(graph, source):
        raise OverflowError(
            f"Every path from {source} to {target} costs more than "
            f"{weight_type.name} can hold"
        )
    logger.debug(f"SPF {source} -> {target}: target unreachable")
    return None


def path_cost(graph: "Graph", path: Sequence[Any]) -> Any:
    """Return the total cost of walking ``path`` using the cheapest edges.

    Args:
        graph: Graph the path belongs to.
        path: 0-indexed node identifiers, in walk order.

    Returns:
        Sum of the cheapest edge cost between each consecutive pair.

    Raises:
        ValueError: If two consecutive nodes are not adjacent.
        NodeRangeError: If a node is outside the graph.
        OverflowError: If the total is not representable by the weight type.
    """
    weight_type = graph.weight_type
    total = weight_type.zero
    for u, v in zip(path, path[1:]):
        v_index = graph.check_node(v)
        costs = [
            edge.cost
            for edge in graph.neighbors(u)
            if graph.id_type.to_index(edge.dst) == v_index
        ]
        if not costs:
            raise ValueError(f"Nodes {u} and {v} are not adjacent")
        total = weight_type.add(total, min(costs))
    return total
