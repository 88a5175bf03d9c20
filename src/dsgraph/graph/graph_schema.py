from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Literal, Optional, Tuple, Union

NodeId = str

# Largest value of the visualizer's 32-bit int; reported for unreachable nodes.
UNREACHABLE_DISTANCE = 2**31 - 1

DEFAULT_WEIGHT = 1

# Size of the single-byte identifier alphabet.
BYTE_ALPHABET_SIZE = 256


@dataclass(frozen=True, order=True)
class EdgeKey:
    """
    Ordered (source, target) pair identifying a directed edge.
    """

    source: NodeId
    target: NodeId

    @property
    def label(self) -> str:
        return f"{self.source}-{self.target}"

    def as_tuple(self) -> Tuple[NodeId, NodeId]:
        return (self.source, self.target)


@dataclass(frozen=True)
class WeightedEdge:
    """
    Distinct directed edge with its weight and the number of parallel
    adjacency entries that point along it.
    """

    source: NodeId
    target: NodeId
    weight: int
    count: int = 1

    @property
    def key(self) -> EdgeKey:
        return EdgeKey(self.source, self.target)


StepKind = Literal[
    "start",
    "visit",
    "discover",
    "push",
    "skip",
    "process",
    "relax",
    "select",
    "complete",
]


@dataclass(frozen=True)
class AlgorithmStep:
    """
    One observable event of a running algorithm.

    `frontier` is the queue, stack or priority queue contents right after
    the event, which is what a visualizer renders next to the graph.
    """

    algorithm: str
    kind: StepKind
    node: Optional[NodeId] = None
    edge: Optional[EdgeKey] = None
    weight: Optional[int] = None
    distance: Optional[int] = None
    frontier: Tuple[Any, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "algorithm": self.algorithm,
            "kind": self.kind,
            "node": self.node,
            "edge": self.edge.as_tuple() if self.edge is not None else None,
            "weight": self.weight,
            "distance": self.distance,
            "frontier": list(self.frontier),
        }


def normalize_node_id(
    value: Union[str, int, None],
    *,
    byte_identifiers: bool = True,
    uppercase: bool = False,
) -> Optional[NodeId]:
    """
    Turn a caller supplied identifier into a NodeId, or None if invalid.

    In byte mode an identifier is a single character with a code point
    below 256; integers 0..255 are read as character codes.
    """
    if isinstance(value, bool) or value is None:
        return None

    if isinstance(value, int):
        if not byte_identifiers:
            value = str(value)
        elif 0 <= value < BYTE_ALPHABET_SIZE:
            value = chr(value)
        else:
            return None

    if not isinstance(value, str) or not value:
        return None

    if uppercase:
        value = value.upper()

    if byte_identifiers and (len(value) != 1 or ord(value) >= BYTE_ALPHABET_SIZE):
        return None

    return value
