"""Command-line interface for wgraph."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from time import perf_counter
from typing import List, Optional, Sequence

from wgraph.config import ENGINE_CONFIG
from wgraph.exceptions import GraphFormatError, NodeRangeError
from wgraph.graph.io import read_graph
from wgraph.logging import get_logger, level_for_flags, set_global_log_level
from wgraph.types.numeric import (
    NODE_ID_TYPES,
    WEIGHT_TYPES,
    get_node_id_type,
    get_weight_type,
)

logger = get_logger(__name__)


def _format_duration(seconds: float) -> str:
    """Return a concise human-readable duration string.

    Examples:
        0.123 -> "123.0 ms"; 1.234 -> "1.23 s"; 75.2 -> "1m 15.2s".
    """
    if seconds < 1.0:
        return f"{seconds * 1000.0:.1f} ms"
    if seconds < 60.0:
        return f"{seconds:.2f} s"
    minutes = int(seconds // 60)
    rem = seconds - minutes * 60
    return f"{minutes}m {rem:.1f}s"


def _format_path(path: Sequence) -> str:
    """Render 0-indexed node ids as 1-indexed text."""
    return ENGINE_CONFIG.path_separator.join(str(int(node) + 1) for node in path)


def _node_argument(value: str) -> int:
    """Parse a 1-indexed node id given on the command line."""
    try:
        node = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid node id: '{value}'") from None
    if node < 1:
        raise argparse.ArgumentTypeError(f"node ids start at 1, got {node}")
    return node


def _summarize(
    path: Path, start: int, target: Optional[int], id_name: str, weight_name: str
) -> Optional[str]:
    """Load the graph with the given types and return the summary line.

    Returns ``None`` when ``target`` is not reachable from ``start``.

    Raises:
        NodeRangeError: If ``start`` or ``target`` exceeds the vertex count.
    """
    start_time = perf_counter()
    graph_id = path.stem

    graph = read_graph(path, get_node_id_type(id_name), get_weight_type(weight_name))
    logger.debug(f"Loaded {graph!r}")
    for node in (start, target):
        if node is not None and node > graph.vertices:
            raise NodeRangeError(node, graph.vertices, one_indexed=True)

    if target is None:
        depth = graph.bfs_depth(start - 1)
        components = graph.connected_components()
        elapsed = perf_counter() - start_time
        return (
            f"{graph_id} Depth= {depth} Components= {components} "
            f"Time: {_format_duration(elapsed)}"
        )

    mst = graph.minimum_spanning_tree()
    result = graph.shortest_path(start - 1, target - 1)
    if result is None:
        return None
    cost, shortest = result
    elapsed = perf_counter() - start_time
    return (
        f"{graph_id} MST= {mst} SP= {cost} Path: {_format_path(shortest)} "
        f"Time: {_format_duration(elapsed)}"
    )


def _run(
    path: Path,
    start: int,
    target: Optional[int],
    id_types: Sequence[str],
    weight_types: Sequence[str],
) -> None:
    """Run every (id type, weight type) combination and print one line each."""
    try:
        for weight_name in weight_types:
            for id_name in id_types:
                logger.info(f"Running with node ids {id_name}, weights {weight_name}")
                line = _summarize(path, start, target, id_name, weight_name)
                if line is None:
                    message = (
                        f"No shortest path exists between node {start} "
                        f"and node {target}"
                    )
                    logger.error(message)
                    print(f"❌ ERROR: {message}")
                    sys.exit(1)
                print(line)
    except FileNotFoundError:
        logger.error(f"Graph file not found: {path}")
        print(f"❌ ERROR: Graph file not found: {path}")
        sys.exit(1)
    except GraphFormatError as e:
        logger.error(f"Invalid graph input: {e}")
        print(f"❌ ERROR: Invalid graph input: {e}")
        sys.exit(1)
    except NodeRangeError as e:
        logger.error(f"Invalid node: {e}")
        print(f"❌ ERROR: Invalid node: {e}")
        sys.exit(1)
    except OverflowError as e:
        logger.error(f"Weight overflow: {e}")
        print(f"❌ ERROR: Weight overflow: {e}")
        sys.exit(1)
    except OSError as e:
        logger.error(f"Cannot read graph file {path}: {e}")
        print(f"❌ ERROR: Cannot read graph file {path}: {e}")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Failed to process graph: {type(e).__name__}: {e}")
        print(f"❌ ERROR: Failed to process graph: {type(e).__name__}: {e}")
        sys.exit(1)


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``wgraph`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="wgraph",
        description=(
            "Load a weighted edge-list graph and report BFS depth and component "
            "count, or MST weight and the shortest path to a target node."
        ),
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )
    parser.add_argument("graph", type=Path, help="Path to edge-list file")
    parser.add_argument("start", type=_node_argument, help="1-indexed start node")
    parser.add_argument(
        "target",
        type=_node_argument,
        nargs="?",
        default=None,
        help="1-indexed target node (enables MST and shortest path output)",
    )
    parser.add_argument(
        "--id-type",
        action="append",
        choices=list(NODE_ID_TYPES),
        default=None,
        help=(
            "Node identifier type; repeat to run several "
            f"(default: {' '.join(ENGINE_CONFIG.default_id_types)})"
        ),
    )
    parser.add_argument(
        "--weight-type",
        action="append",
        choices=list(WEIGHT_TYPES),
        default=None,
        help=(
            "Edge weight type; repeat to run several "
            f"(default: {' '.join(ENGINE_CONFIG.default_weight_types)})"
        ),
    )

    effective_args = sys.argv[1:] if argv is None else argv

    # If no arguments are provided, show help and exit cleanly
    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    set_global_log_level(level_for_flags(args.verbose, args.quiet))
    logger.debug("Debug logging enabled")

    _run(
        path=args.graph,
        start=args.start,
        target=args.target,
        id_types=args.id_type or list(ENGINE_CONFIG.default_id_types),
        weight_types=args.weight_type or list(ENGINE_CONFIG.default_weight_types),
    )


if __name__ == "__main__":
    main()
