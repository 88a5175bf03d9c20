from __future__ import annotations

import pytest

from dsgraph.boundary.engine import GraphEngine
from dsgraph.graph.graph_builder import GraphBuilder
from dsgraph.graph.graph_query import GraphQueryEngine
from dsgraph.graph.graph_store import GraphStore


def build_store(nodes, edges) -> GraphStore:
    store = GraphStore()
    builder = GraphBuilder(store)
    builder.add_nodes(nodes)
    builder.add_edges(edges)
    return store


@pytest.fixture()
def store() -> GraphStore:
    return GraphStore()


@pytest.fixture()
def engine() -> GraphEngine:
    return GraphEngine()


@pytest.fixture()
def make_store():
    return build_store


@pytest.fixture()
def weighted_store() -> GraphStore:
    # A -> B (4), A -> C (1), C -> B (2), B -> D (5), C -> D (8), D -> E (3)
    return build_store(
        "ABCDE",
        [
            ("A", "B", 4),
            ("A", "C", 1),
            ("C", "B", 2),
            ("B", "D", 5),
            ("C", "D", 8),
            ("D", "E", 3),
        ],
    )


@pytest.fixture()
def weighted_query(weighted_store: GraphStore) -> GraphQueryEngine:
    return GraphQueryEngine(weighted_store)
