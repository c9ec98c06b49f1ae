"""Configuration classes for wgraph components."""

from dataclasses import dataclass, field
from typing import Tuple


@dataclass
class EngineConfig:
    """Defaults used by the command-line tool."""

    # Node identifier types tried when no --id-type is given
    default_id_types: Tuple[str, ...] = field(default_factory=lambda: ("u32",))

    # Edge weight types tried when no --weight-type is given
    default_weight_types: Tuple[str, ...] = field(default_factory=lambda: ("u32",))

    # Field separator used when printing shortest paths
    path_separator: str = " "


# Global configuration instance
ENGINE_CONFIG = EngineConfig()
