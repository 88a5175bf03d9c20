from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from dsgraph.graph.graph_schema import (
    BYTE_ALPHABET_SIZE,
    DEFAULT_WEIGHT,
    UNREACHABLE_DISTANCE,
)

# ---------------------------------------------------------------------
# Graph engine policy
# ---------------------------------------------------------------------


@dataclass(frozen=True)
class GraphConfig:
    """
    Controls identifier handling, capacity and algorithm constants
    of a graph engine.

    byte_identifiers keeps node ids to single characters below code point
    256, matching the visualizer's node labels. Turning it off accepts any
    non-empty string. max_nodes of None removes the capacity limit.
    """

    max_nodes: Optional[int] = BYTE_ALPHABET_SIZE
    byte_identifiers: bool = True
    uppercase_identifiers: bool = False
    default_weight: int = DEFAULT_WEIGHT
    unreachable_distance: int = UNREACHABLE_DISTANCE

    def __post_init__(self) -> None:
        if self.max_nodes is not None and self.max_nodes < 0:
            raise ValueError(f"max_nodes must be >= 0, got {self.max_nodes}")
        if self.unreachable_distance <= 0:
            raise ValueError(
                f"unreachable_distance must be positive, got {self.unreachable_distance}"
            )
