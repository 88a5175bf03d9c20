from __future__ import annotations

from collections import deque
import heapq
import logging
from typing import Deque, Dict, Iterator, List, Set, Tuple

from dsgraph.graph.graph_store import GraphStore
from dsgraph.graph.graph_schema import (
    AlgorithmStep,
    EdgeKey,
    NodeId,
    UNREACHABLE_DISTANCE,
)

logger = logging.getLogger("dsgraph.query")


class GraphQueryEngine:
    """
    Read-only algorithms over a GraphStore.

    Every algorithm is written once as a step generator (`*_steps`); the
    plain result methods replay those steps, so a visualized run and a
    direct call can never disagree. Nothing here mutates the store and no
    working state outlives a call.
    """

    def __init__(
        self,
        store: GraphStore,
        *,
        unreachable_distance: int = UNREACHABLE_DISTANCE,
    ) -> None:
        self.store = store
        self.unreachable_distance = unreachable_distance

    # ------------------------------------------------------------------
    # Results
    # ------------------------------------------------------------------

    def bfs(self, start: NodeId) -> List[NodeId]:
        return [s.node for s in self.bfs_steps(start) if s.kind == "visit"]

    def dfs(self, start: NodeId) -> List[NodeId]:
        return [s.node for s in self.dfs_steps(start) if s.kind == "visit"]

    def dijkstra(self, start: NodeId) -> Dict[NodeId, int]:
        """
        Shortest directed distance from start to every node.

        Unreachable nodes report `unreachable_distance`. An absent start
        yields an empty mapping.
        """
        if not self.store.has_node(start):
            return {}

        distances = {node: self.unreachable_distance for node in self.store.nodes()}
        for step in self.dijkstra_steps(start):
            if step.kind in {"start", "relax"}:
                distances[step.node] = step.distance
        return distances

    def prim(self, start: NodeId) -> List[EdgeKey]:
        return [s.edge for s in self.prim_steps(start) if s.kind == "select"]

    # ------------------------------------------------------------------
    # Breadth-first search
    # ------------------------------------------------------------------

    def bfs_steps(self, start: NodeId) -> Iterator[AlgorithmStep]:
        if not self._has_start("bfs", start):
            return

        queue: Deque[NodeId] = deque([start])
        visited: Set[NodeId] = {start}
        yield AlgorithmStep("bfs", "start", node=start, frontier=tuple(queue))

        while queue:
            current = queue.popleft()
            yield AlgorithmStep("bfs", "visit", node=current, frontier=tuple(queue))

            for neighbor in self.store.adjacency(current):
                if neighbor in visited:
                    continue
                visited.add(neighbor)
                queue.append(neighbor)
                yield AlgorithmStep(
                    "bfs",
                    "discover",
                    node=neighbor,
                    edge=EdgeKey(current, neighbor),
                    frontier=tuple(queue),
                )

        yield AlgorithmStep("bfs", "complete")

    # ------------------------------------------------------------------
    # Depth-first search
    # ------------------------------------------------------------------

    def dfs_steps(self, start: NodeId) -> Iterator[AlgorithmStep]:
        if not self._has_start("dfs", start):
            return

        stack: List[NodeId] = [start]
        visited: Set[NodeId] = set()
        yield AlgorithmStep("dfs", "start", node=start, frontier=tuple(stack))

        while stack:
            current = stack.pop()

            if current in visited:
                yield AlgorithmStep("dfs", "skip", node=current, frontier=tuple(stack))
                continue

            visited.add(current)
            yield AlgorithmStep("dfs", "visit", node=current, frontier=tuple(stack))

            # Reverse push keeps the recursive left-to-right visiting order.
            for neighbor in reversed(self.store.adjacency(current)):
                if neighbor in visited:
                    continue
                stack.append(neighbor)
                yield AlgorithmStep(
                    "dfs",
                    "push",
                    node=neighbor,
                    edge=EdgeKey(current, neighbor),
                    frontier=tuple(stack),
                )

        yield AlgorithmStep("dfs", "complete")

    # ------------------------------------------------------------------
    # Dijkstra
    # ------------------------------------------------------------------

    def dijkstra_steps(self, start: NodeId) -> Iterator[AlgorithmStep]:
        if not self._has_start("dijkstra", start):
            return

        best: Dict[NodeId, int] = {start: 0}
        pq: List[Tuple[int, NodeId]] = [(0, start)]
        yield AlgorithmStep(
            "dijkstra", "start", node=start, distance=0, frontier=tuple(pq)
        )

        while pq:
            dist, current = heapq.heappop(pq)

            # Stale entry left behind by a later, shorter relaxation.
            if dist > best.get(current, self.unreachable_distance):
                yield AlgorithmStep(
                    "dijkstra",
                    "skip",
                    node=current,
                    distance=dist,
                    frontier=tuple(sorted(pq)),
                )
                continue

            yield AlgorithmStep(
                "dijkstra",
                "process",
                node=current,
                distance=dist,
                frontier=tuple(sorted(pq)),
            )

            for neighbor in self.store.adjacency(current):
                weight = self.store.weight(current, neighbor)
                alt = best[current] + weight

                if alt < best.get(neighbor, self.unreachable_distance):
                    best[neighbor] = alt
                    heapq.heappush(pq, (alt, neighbor))
                    yield AlgorithmStep(
                        "dijkstra",
                        "relax",
                        node=neighbor,
                        edge=EdgeKey(current, neighbor),
                        weight=weight,
                        distance=alt,
                        frontier=tuple(sorted(pq)),
                    )

        yield AlgorithmStep("dijkstra", "complete")

    # ------------------------------------------------------------------
    # Prim (outgoing edges only)
    # ------------------------------------------------------------------

    def prim_steps(self, start: NodeId) -> Iterator[AlgorithmStep]:
        """
        Grow a spanning structure from start along outgoing edges.

        Each round picks the lightest edge leaving the in-tree set, scanning
        in-tree nodes in sorted order and neighbors in adjacency order; the
        first edge found wins ties. Sorting is by code point, so ids 128-255
        come after ASCII rather than before it as signed bytes would, and
        ties involving them follow code point order. Edges pointing into the
        tree are never considered, so with asymmetric edges this is not an
        undirected MST.
        Stops early, without error, when no crossing edge remains.
        """
        if not self._has_start("prim", start):
            return

        in_tree: Set[NodeId] = {start}
        total = self.store.node_count()
        yield AlgorithmStep("prim", "start", node=start, frontier=(start,))

        while len(in_tree) < total:
            min_edge: EdgeKey | None = None
            min_weight = 0

            for node in sorted(in_tree):
                for neighbor in self.store.adjacency(node):
                    if neighbor in in_tree:
                        continue
                    weight = self.store.weight(node, neighbor)
                    if min_edge is None or weight < min_weight:
                        min_edge = EdgeKey(node, neighbor)
                        min_weight = weight

            if min_edge is None:
                logger.info(
                    "prim from %r stopped with %s of %s nodes reachable",
                    start,
                    len(in_tree),
                    total,
                )
                break

            in_tree.add(min_edge.target)
            logger.debug("prim selected %s (weight=%s)", min_edge.label, min_weight)
            yield AlgorithmStep(
                "prim",
                "select",
                node=min_edge.target,
                edge=min_edge,
                weight=min_weight,
                frontier=tuple(sorted(in_tree)),
            )

        yield AlgorithmStep("prim", "complete")

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _has_start(self, algorithm: str, start: NodeId) -> bool:
        if self.store.has_node(start):
            return True
        logger.info("%s: start node %r does not exist", algorithm, start)
        return False
