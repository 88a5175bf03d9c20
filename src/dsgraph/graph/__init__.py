"""
Graph subsystem for dsgraph.

Defines the directed, weighted graph used by the visualizer:
- mutable adjacency storage with a per-pair weight table
- breadth-first and depth-first traversal
- Dijkstra shortest distances and Prim spanning edges
- step traces for animating each algorithm
"""

from dsgraph.graph.graph_schema import (
    AlgorithmStep,
    EdgeKey,
    WeightedEdge,
    UNREACHABLE_DISTANCE,
)
from dsgraph.graph.graph_store import GraphStore
from dsgraph.graph.graph_builder import GraphBuilder
from dsgraph.graph.graph_query import GraphQueryEngine

__all__ = [
    "AlgorithmStep",
    "EdgeKey",
    "WeightedEdge",
    "UNREACHABLE_DISTANCE",
    "GraphStore",
    "GraphBuilder",
    "GraphQueryEngine",
]
