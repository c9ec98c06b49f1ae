"""Immutable undirected weighted graph stored as adjacency lists.

`Graph` keeps, for every dense vertex index ``0..V-1``, the ordered tuple of
edges leaving that vertex. Every undirected edge is stored twice, once under
each endpoint, with ``src``/``dst`` oriented accordingly. The instance carries
the capability objects for its node identifier and weight types so algorithms
can obtain constants (``zero``, ``max_value``) and index conversions without
knowing the concrete widths.
"""

from __future__ import annotations

import operator
from typing import Any, Generic, Iterator, List, NamedTuple, Optional, Sequence, Tuple

from wgraph.algorithms import bfs, mst, spf
from wgraph.exceptions import NodeRangeError
from wgraph.types.numeric import N, W, NodeIdType, WeightType


class Edge(NamedTuple):
    """Directed copy of an undirected edge as stored under ``src``."""

    src: Any
    dst: Any
    cost: Any


class Graph(Generic[N, W]):
    """Undirected weighted graph with a fixed vertex count.

    Built once (normally by :func:`wgraph.graph.io.read_graph`) and never
    mutated afterwards. Query methods delegate to the algorithm modules in
    :mod:`wgraph.algorithms`; all per-query state is private to the call, so a
    single instance can be shared by any number of readers.

    Args:
        vertices: Number of vertices ``V``.
        adjacencies: ``V`` sequences of :class:`Edge`, indexed by dense vertex
            index.
        id_type: Capability object for node identifiers.
        weight_type: Capability object for edge weights.

    Raises:
        ValueError: If ``len(adjacencies) != vertices``.
    """

    __slots__ = ("_vertices", "_adjacencies", "_id_type", "_weight_type")

    def __init__(
        self,
        vertices: int,
        adjacencies: Sequence[Sequence[Edge]],
        id_type: NodeIdType,
        weight_type: WeightType,
    ) -> None:
        if len(adjacencies) != vertices:
            raise ValueError(
                f"Expected {vertices} adjacency lists, got {len(adjacencies)}"
            )
        self._vertices = vertices
        self._adjacencies: Tuple[Tuple[Edge, ...], ...] = tuple(
            tuple(edges) for edges in adjacencies
        )
        self._id_type = id_type
        self._weight_type = weight_type

    def __repr__(self) -> str:
        return (
            f"Graph(vertices={self._vertices}, edges={self.edge_count}, "
            f"id_type={self._id_type.name}, weight_type={self._weight_type.name})"
        )

    #
    # Structure
    #
    @property
    def vertices(self) -> int:
        return self._vertices

    @property
    def adjacencies(self) -> Tuple[Tuple[Edge, ...], ...]:
        return self._adjacencies

    @property
    def id_type(self) -> NodeIdType:
        return self._id_type

    @property
    def weight_type(self) -> WeightType:
        return self._weight_type

    @property
    def edge_count(self) -> int:
        """Number of undirected edges (each is stored twice)."""
        return sum(len(edges) for edges in self._adjacencies) // 2

    def check_node(self, node: Any) -> int:
        """Return the dense index of ``node`` after validating its range.

        Args:
            node: 0-indexed node identifier (Python or numpy integer).

        Returns:
            Dense index in ``[0, V)``.

        Raises:
            NodeRangeError: If ``node`` lies outside ``[0, V)``.
            TypeError: If ``node`` is not an integer.
        """
        index = operator.index(node)
        if not 0 <= index < self._vertices:
            raise NodeRangeError(node, self._vertices)
        return index

    def node(self, index: int) -> N:
        """Return the typed node identifier for a dense index."""
        return self._id_type.from_index(self.check_node(index))

    def neighbors(self, node: Any) -> Tuple[Edge, ...]:
        """Return the edges stored under ``node`` in insertion order."""
        return self._adjacencies[self.check_node(node)]

    def edges(self) -> Iterator[Edge]:
        """Yield every stored directed edge copy in adjacency order."""
        for edges in self._adjacencies:
            yield from edges

    #
    # Queries
    #
    def bfs_depth(self, start: Any) -> int:
        """See :func:`wgraph.algorithms.bfs.bfs_depth`."""
        return bfs.bfs_depth(self, start)

    def connected_components(self) -> int:
        """See :func:`wgraph.algorithms.bfs.connected_components`."""
        return bfs.connected_components(self)

    def shortest_path(self, source: Any, target: Any) -> Optional[Tuple[W, List[N]]]:
        """See :func:`wgraph.algorithms.spf.shortest_path`."""
        return spf.shortest_path(self, source, target)

    def minimum_spanning_tree(self) -> W:
        """See :func:`wgraph.algorithms.mst.minimum_spanning_tree`."""
        return mst.minimum_spanning_tree(self)

    def minimum_spanning_edges(self) -> List[Edge]:
        """See :func:`wgraph.algorithms.mst.minimum_spanning_edges`."""
        return mst.minimum_spanning_edges(self)
