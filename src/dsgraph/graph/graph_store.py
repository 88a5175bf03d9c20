from __future__ import annotations

import logging
from typing import Iterable, List, Optional

import networkx as nx

from dsgraph.graph.graph_schema import (
    BYTE_ALPHABET_SIZE,
    DEFAULT_WEIGHT,
    NodeId,
    WeightedEdge,
)

logger = logging.getLogger("dsgraph.store")


class GraphStore:
    """
    Authoritative in-memory graph representation.

    The node set and the weight table live in a networkx DiGraph: one
    graph edge per ordered pair carries that pair's weight. Each node also
    keeps its ordered adjacency list under the "adjacency" attribute,
    where parallel entries for the same neighbor are preserved.
    """

    def __init__(
        self,
        *,
        max_nodes: Optional[int] = BYTE_ALPHABET_SIZE,
        default_weight: int = DEFAULT_WEIGHT,
    ) -> None:
        self._graph = nx.DiGraph()
        self.max_nodes = max_nodes
        self.default_weight = default_weight

    # -------------------- Nodes --------------------

    def add_node(self, node_id: NodeId) -> None:
        if node_id in self._graph:
            return

        if self.max_nodes is not None and self.node_count() >= self.max_nodes:
            logger.warning(
                "node capacity reached (%s); ignoring add_node(%r)",
                self.max_nodes,
                node_id,
            )
            return

        self._graph.add_node(node_id, adjacency=[])
        logger.debug("added node %r", node_id)

    def remove_node(self, node_id: NodeId) -> None:
        if node_id not in self._graph:
            return

        # Drops the node's own adjacency and every weight entry touching it.
        self._graph.remove_node(node_id)

        for _, data in self._graph.nodes(data=True):
            adjacency: List[NodeId] = data["adjacency"]
            if node_id in adjacency:
                adjacency[:] = [n for n in adjacency if n != node_id]

        logger.debug("removed node %r", node_id)

    def has_node(self, node_id: NodeId) -> bool:
        return node_id in self._graph

    def nodes(self) -> List[NodeId]:
        return sorted(self._graph.nodes)

    # -------------------- Edges --------------------

    def add_edge(
        self,
        source: NodeId,
        target: NodeId,
        weight: Optional[int] = None,
    ) -> None:
        if source not in self._graph or target not in self._graph:
            logger.info(
                "add_edge(%r, %r) ignored: both endpoints must exist",
                source,
                target,
            )
            return

        if weight is None:
            weight = self.default_weight

        self._graph.nodes[source]["adjacency"].append(target)
        # Overwrites any earlier weight recorded for this ordered pair.
        self._graph.add_edge(source, target, weight=weight)
        logger.debug("added edge %r -> %r (weight=%s)", source, target, weight)

    def remove_edge(self, source: NodeId, target: NodeId) -> None:
        if source not in self._graph:
            return

        adjacency: List[NodeId] = self._graph.nodes[source]["adjacency"]
        adjacency[:] = [n for n in adjacency if n != target]

        if self._graph.has_edge(source, target):
            self._graph.remove_edge(source, target)

        logger.debug("removed edge %r -> %r", source, target)

    def has_edge(self, source: NodeId, target: NodeId) -> bool:
        return self._graph.has_edge(source, target)

    def weight(self, source: NodeId, target: NodeId) -> int:
        """
        Weight recorded for (source, target), or the default weight when
        the pair has no record.
        """
        if not self._graph.has_edge(source, target):
            return self.default_weight
        return self._graph.edges[source, target].get("weight", self.default_weight)

    def edges(self) -> Iterable[WeightedEdge]:
        for source in self.nodes():
            adjacency = self._graph.nodes[source]["adjacency"]
            seen: List[NodeId] = []
            for target in adjacency:
                if target in seen:
                    continue
                seen.append(target)
                yield WeightedEdge(
                    source=source,
                    target=target,
                    weight=self.weight(source, target),
                    count=adjacency.count(target),
                )

    # -------------------- Traversal --------------------

    def adjacency(self, node_id: NodeId) -> List[NodeId]:
        """
        Ordered outgoing neighbors of node_id, parallel entries included.
        """
        if node_id not in self._graph:
            return []
        return list(self._graph.nodes[node_id]["adjacency"])

    # -------------------- Lifecycle --------------------

    def clear(self) -> None:
        self._graph.clear()
        logger.debug("graph cleared")

    def node_count(self) -> int:
        return self._graph.number_of_nodes()

    def edge_count(self) -> int:
        return self._graph.number_of_edges()

    def clone(self) -> "GraphStore":
        g = GraphStore(max_nodes=self.max_nodes, default_weight=self.default_weight)
        g._graph = self._graph.copy()
        # DiGraph.copy() shares attribute values; adjacency lists must not be.
        for _, data in g._graph.nodes(data=True):
            data["adjacency"] = list(data["adjacency"])
        return g

    def to_networkx(self) -> nx.DiGraph:
        """
        Independent DiGraph view with one weighted edge per ordered pair.
        """
        return self.clone()._graph
