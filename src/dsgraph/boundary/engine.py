from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from pydantic import ValidationError

from dsgraph.boundary.schemas import (
    AddEdgeCommand,
    CommandResponse,
    GraphEdge,
    GraphExportResponse,
    GraphStatsResponse,
    NodeCommand,
    QueryCommand,
    RemoveEdgeCommand,
    TraceCommand,
    command_adapter,
)
from dsgraph.config.settings import GraphConfig
from dsgraph.graph.graph_query import GraphQueryEngine
from dsgraph.graph.graph_schema import NodeId, normalize_node_id
from dsgraph.graph.graph_store import GraphStore

NodeRef = Union[str, int]

ALGORITHMS = ("bfs", "dfs", "dijkstra", "prim")

logger = logging.getLogger("dsgraph.boundary")


class GraphEngine:
    """
    Call boundary between a visualizer host and one graph.

    The caller owns the instance; there is no process-wide graph. Every
    method takes and returns plain values. Bad identifiers, missing
    endpoints and absent start nodes degrade to a no-op or an empty
    result instead of raising.
    """

    def __init__(self, config: Optional[GraphConfig] = None) -> None:
        self.config = config or GraphConfig()
        self._store = self._new_store()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def reset(self) -> None:
        """
        Replace the graph with a fresh, empty one.
        """
        self._store = self._new_store()
        logger.debug("graph reset")

    def clear(self) -> None:
        self._store.clear()

    @property
    def store(self) -> GraphStore:
        return self._store

    # ------------------------------------------------------------------
    # Mutators
    # ------------------------------------------------------------------

    def add_node(self, node: NodeRef) -> None:
        node_id = self._node_id(node, "add_node")
        if node_id is not None:
            self._store.add_node(node_id)

    def remove_node(self, node: NodeRef) -> None:
        node_id = self._node_id(node, "remove_node")
        if node_id is not None:
            self._store.remove_node(node_id)

    def add_edge(self, source: NodeRef, target: NodeRef, weight: Optional[int] = None) -> None:
        if weight is not None and (isinstance(weight, bool) or not isinstance(weight, int)):
            logger.warning("add_edge: invalid weight %r", weight)
            return

        pair = self._pair(source, target, "add_edge")
        if pair is not None:
            self._store.add_edge(pair[0], pair[1], weight)

    def remove_edge(self, source: NodeRef, target: NodeRef) -> None:
        pair = self._pair(source, target, "remove_edge")
        if pair is not None:
            self._store.remove_edge(*pair)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def bfs(self, start: NodeRef) -> List[str]:
        start_id = self._node_id(start, "bfs")
        if start_id is None:
            return []
        return self._query().bfs(start_id)

    def dfs(self, start: NodeRef) -> List[str]:
        start_id = self._node_id(start, "dfs")
        if start_id is None:
            return []
        return self._query().dfs(start_id)

    def shortest_paths(self, start: NodeRef) -> Dict[str, int]:
        start_id = self._node_id(start, "dijkstra")
        if start_id is None:
            return {}
        return self._query().dijkstra(start_id)

    def spanning_edges(self, start: NodeRef) -> List[Tuple[str, str]]:
        start_id = self._node_id(start, "prim")
        if start_id is None:
            return []
        return [edge.as_tuple() for edge in self._query().prim(start_id)]

    def trace(self, algorithm: str, start: NodeRef) -> List[Dict[str, Any]]:
        """
        Every step of one algorithm run, in order, as plain dicts.
        """
        if algorithm not in ALGORITHMS:
            logger.warning("trace: unknown algorithm %r", algorithm)
            return []

        start_id = self._node_id(start, algorithm)
        if start_id is None:
            return []

        steps = getattr(self._query(), f"{algorithm}_steps")
        return [step.to_dict() for step in steps(start_id)]

    def export(self) -> Dict[str, Any]:
        return GraphExportResponse(
            nodes=self._store.nodes(),
            edges=[
                GraphEdge(
                    source=edge.source,
                    target=edge.target,
                    weight=edge.weight,
                    count=edge.count,
                )
                for edge in self._store.edges()
            ],
        ).model_dump()

    def stats(self) -> Dict[str, Any]:
        return GraphStatsResponse(
            nodes=self._store.node_count(),
            edges=self._store.edge_count(),
        ).model_dump()

    # ------------------------------------------------------------------
    # Command dispatch
    # ------------------------------------------------------------------

    def execute(self, command: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Validate and run one host command, e.g.
        {"op": "add_edge", "source": "A", "target": "B", "weight": 3}.

        Malformed commands come back with ok=False and an error message.
        """
        op = command.get("op") if isinstance(command, Mapping) else None

        try:
            parsed = command_adapter.validate_python(command)
        except ValidationError as exc:
            logger.warning("rejected command %r: %s", op, exc.error_count())
            return CommandResponse(
                op=str(op),
                ok=False,
                error=_first_error(exc),
            ).model_dump()

        result: Any = None

        if parsed.op == "create":
            self.reset()
        elif parsed.op == "clear":
            self.clear()
        elif parsed.op == "export":
            result = self.export()
        elif isinstance(parsed, NodeCommand):
            getattr(self, parsed.op)(parsed.node)
        elif isinstance(parsed, AddEdgeCommand):
            self.add_edge(parsed.source, parsed.target, parsed.weight)
        elif isinstance(parsed, RemoveEdgeCommand):
            self.remove_edge(parsed.source, parsed.target)
        elif isinstance(parsed, TraceCommand):
            result = self.trace(parsed.algorithm, parsed.start)
        elif isinstance(parsed, QueryCommand):
            result = self._run_query(parsed.op, parsed.start)

        return CommandResponse(op=parsed.op, ok=True, result=result).model_dump()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _run_query(self, op: str, start: NodeRef) -> Any:
        if op == "bfs":
            return self.bfs(start)
        if op == "dfs":
            return self.dfs(start)
        if op == "dijkstra":
            return self.shortest_paths(start)
        return [list(edge) for edge in self.spanning_edges(start)]

    def _new_store(self) -> GraphStore:
        return GraphStore(
            max_nodes=self.config.max_nodes,
            default_weight=self.config.default_weight,
        )

    def _query(self) -> GraphQueryEngine:
        # Algorithms only ever see a snapshot of the store.
        return GraphQueryEngine(
            self._store.clone(),
            unreachable_distance=self.config.unreachable_distance,
        )

    def _node_id(self, value: NodeRef, operation: str) -> Optional[NodeId]:
        node_id = normalize_node_id(
            value,
            byte_identifiers=self.config.byte_identifiers,
            uppercase=self.config.uppercase_identifiers,
        )
        if node_id is None:
            logger.warning("%s: invalid node identifier %r", operation, value)
        return node_id

    def _pair(
        self, source: NodeRef, target: NodeRef, operation: str
    ) -> Optional[Tuple[NodeId, NodeId]]:
        source_id = self._node_id(source, operation)
        target_id = self._node_id(target, operation)
        if source_id is None or target_id is None:
            return None
        return source_id, target_id


def _first_error(exc: ValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return str(exc)
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    message = first.get("msg", "invalid command")
    return f"{location}: {message}" if location else message
