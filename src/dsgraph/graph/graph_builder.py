from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterable, Mapping, Sequence, Union

if TYPE_CHECKING:
    from dsgraph.boundary.engine import GraphEngine
    from dsgraph.graph.graph_store import GraphStore

EdgeSpec = Union[Sequence, Mapping]


class GraphBuilder:
    """
    Bulk-loads a graph from plain node and edge listings.

    The target is anything with add_node/add_edge: a GraphStore takes ids
    as given, a GraphEngine normalizes and validates them first.

    Edges are `(source, target)` / `(source, target, weight)` sequences or
    mappings with "source", "target" and optional "weight" keys.
    """

    def __init__(self, target: Union[GraphStore, GraphEngine]) -> None:
        self.target = target

    def add_nodes(self, nodes: Iterable[Any]) -> None:
        for node in nodes:
            self.target.add_node(node)

    def add_edges(self, edges: Iterable[EdgeSpec]) -> None:
        for edge in edges:
            if isinstance(edge, Mapping):
                if "source" not in edge or "target" not in edge:
                    raise ValueError(f"edge needs source and target: {edge!r}")
                self.target.add_edge(edge["source"], edge["target"], edge.get("weight"))
            elif isinstance(edge, Sequence) and not isinstance(edge, str) and len(edge) in (2, 3):
                self.target.add_edge(*edge)
            else:
                raise ValueError(f"edge must be [source, target(, weight)]: {edge!r}")
