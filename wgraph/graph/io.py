"""Build graphs from edge-list text descriptions.

Expected input::

    <vertex_count> <edge_count_hint>
    <u_1> <v_1> <w_1>
    <u_2> <v_2> <w_2>
    ...

Fields are whitespace-separated. Node ids are 1-indexed in the text and stored
0-indexed. The edge-count hint is informational only; the real edge count is
the number of edge lines. Blank edge lines are skipped.
"""

from __future__ import annotations

from pathlib import Path
from typing import BinaryIO, Iterable, Iterator, List, Union

from wgraph.exceptions import GraphFormatError, NodeRangeError
from wgraph.graph.weighted_graph import Edge, Graph
from wgraph.logging import get_logger
from wgraph.types.numeric import (
    NodeIdType,
    WeightType,
    get_node_id_type,
    get_weight_type,
    parse_integer,
)

logger = get_logger(__name__)

IdTypeLike = Union[str, NodeIdType]
WeightTypeLike = Union[str, WeightType]


def _resolve_types(id_type: IdTypeLike, weight_type: WeightTypeLike):
    if isinstance(id_type, str):
        id_type = get_node_id_type(id_type)
    if isinstance(weight_type, str):
        weight_type = get_weight_type(weight_type)
    return id_type, weight_type


def _parse_header(line: str, id_type: NodeIdType) -> int:
    tokens = line.split()
    if len(tokens) != 2:
        raise GraphFormatError(
            f"Header must contain vertex count and edge count, got {len(tokens)} "
            "token(s)",
            line_no=1,
            line=line,
        )
    try:
        vertices, edge_hint = (parse_integer(token) for token in tokens)
    except ValueError:
        raise GraphFormatError(
            f"Cannot parse header '{line.strip()}'", line_no=1, line=line
        ) from None
    if vertices < 0 or edge_hint < 0:
        raise GraphFormatError(
            f"Header values must be non-negative, got '{line.strip()}'",
            line_no=1,
            line=line,
        )
    if vertices > 0 and vertices - 1 > int(id_type.max_value):
        raise GraphFormatError(
            f"{vertices} vertices cannot be addressed with {id_type.name} node ids",
            line_no=1,
            line=line,
        )
    logger.debug(f"Header: {vertices} vertices, {edge_hint} edges announced")
    return vertices


def parse_edge_list(
    lines: Iterable[str],
    id_type: IdTypeLike = "u32",
    weight_type: WeightTypeLike = "u32",
) -> Graph:
    """Build a :class:`Graph` from edge-list lines.

    Args:
        lines: Header line followed by ``u v w`` edge lines.
        id_type: Node identifier capability or its registered name.
        weight_type: Edge weight capability or its registered name.

    Returns:
        The constructed graph.

    Raises:
        GraphFormatError: If the header or an edge line is malformed.
        NodeRangeError: If an edge endpoint is outside ``[1, V]``.
        ValueError: If a type name is unknown.
    """
    id_type, weight_type = _resolve_types(id_type, weight_type)
    line_iter = iter(lines)

    try:
        header = next(line_iter)
    except StopIteration:
        raise GraphFormatError("Input is empty, expected a header line") from None
    vertices = _parse_header(header, id_type)

    adjacencies: List[List[Edge]] = [[] for _ in range(vertices)]
    edge_count = 0
    for line_no, line in enumerate(line_iter, start=2):
        tokens = line.split()
        if not tokens:
            continue
        if len(tokens) != 3:
            raise GraphFormatError(
                f"Edge line must contain 3 tokens, got {len(tokens)}",
                line_no=line_no,
                line=line,
            )
        try:
            u = id_type.parse(tokens[0])
            v = id_type.parse(tokens[1])
            cost = weight_type.parse(tokens[2])
        except ValueError as e:
            raise GraphFormatError(str(e), line_no=line_no, line=line) from None

        for node in (u, v):
            if not 1 <= int(node) <= vertices:
                raise NodeRangeError(node, vertices, one_indexed=True)

        src = id_type.cast(int(u) - 1)
        dst = id_type.cast(int(v) - 1)
        adjacencies[int(src)].append(Edge(src, dst, cost))
        adjacencies[int(dst)].append(Edge(dst, src, cost))
        edge_count += 1

    graph = Graph(vertices, adjacencies, id_type, weight_type)
    logger.debug(f"Built {graph!r} from {edge_count} edge lines")
    return graph


def read_graph(
    path: Union[str, Path],
    id_type: IdTypeLike = "u32",
    weight_type: WeightTypeLike = "u32",
) -> Graph:
    """Read an edge-list file into a :class:`Graph`.

    Args:
        path: Path to the edge-list file.
        id_type: Node identifier capability or its registered name.
        weight_type: Edge weight capability or its registered name.

    Returns:
        The constructed graph.

    Raises:
        OSError: If the file cannot be opened or read.
        GraphFormatError: If the content is malformed or not valid UTF-8.
        NodeRangeError: If an edge endpoint is outside ``[1, V]``.
    """
    path = Path(path)
    logger.info(f"Loading graph from: {path}")
    with path.open("rb") as fh:
        return parse_edge_list(_decode_lines(fh), id_type, weight_type)


def _decode_lines(fh: BinaryIO) -> Iterator[str]:
    """Decode a binary stream line by line so a bad byte is reported with its line."""
    for line_no, raw in enumerate(fh, start=1):
        try:
            line = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise GraphFormatError(
                f"Invalid UTF-8 at byte {e.start}: {e.reason}",
                line_no=line_no,
                line=raw.decode("utf-8", errors="replace"),
            ) from None
        yield line
