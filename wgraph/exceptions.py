"""Exception types raised while building and querying graphs.

Both types subclass a built-in exception so callers that already catch
``ValueError`` or ``IndexError`` keep working.
"""

from __future__ import annotations

from typing import Optional


class GraphFormatError(ValueError):
    """Raised when an edge-list description cannot be parsed.

    Attributes:
        line_no: 1-based line number of the offending line, if known.
        line: Raw text of the offending line, if known.
    """

    def __init__(
        self, message: str, line_no: Optional[int] = None, line: Optional[str] = None
    ) -> None:
        if line_no is not None:
            message = f"line {line_no}: {message}"
        super().__init__(message)
        self.line_no = line_no
        self.line = line


class NodeRangeError(IndexError):
    """Raised when a node identifier falls outside the graph's vertex range."""

    def __init__(self, node: object, vertices: int, one_indexed: bool = False) -> None:
        if one_indexed:
            bounds = f"[1, {vertices}]"
        else:
            bounds = f"[0, {vertices})"
        super().__init__(f"Node {node} is out of range {bounds}")
        self.node = node
        self.vertices = vertices
