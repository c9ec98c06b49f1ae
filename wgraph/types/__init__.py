"""Shared typing constructs for wgraph.

Defines the capability objects that parameterize a graph over its node
identifier width and edge weight type.
"""

from wgraph.types.numeric import (
    N,
    NODE_ID_TYPES,
    W,
    WEIGHT_TYPES,
    NodeIdType,
    WeightType,
    get_node_id_type,
    get_weight_type,
)

__all__ = [
    # Capabilities
    "NodeIdType",
    "WeightType",
    # Registries
    "NODE_ID_TYPES",
    "WEIGHT_TYPES",
    "get_node_id_type",
    "get_weight_type",
    # Type variables
    "N",
    "W",
]
