"""
dsgraph
=======

A step-drivable, in-memory directed graph engine for data structure
visualizers.

Core idea:
- A small mutable store (nodes, ordered adjacency lists, per-pair weights)
  with read-only algorithms that can be replayed one step at a time.

Public API:
- GraphEngine
- GraphStore
- GraphQueryEngine
- GraphConfig
"""

from dsgraph.boundary.engine import GraphEngine
from dsgraph.config.settings import GraphConfig
from dsgraph.graph.graph_store import GraphStore
from dsgraph.graph.graph_query import GraphQueryEngine

__all__ = [
    "GraphEngine",
    "GraphConfig",
    "GraphStore",
    "GraphQueryEngine",
]

__version__ = "0.1.0"
