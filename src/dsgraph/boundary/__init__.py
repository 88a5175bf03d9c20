"""
Call boundary for dsgraph.

GraphEngine is what a visualizer host drives: plain-value methods for
each graph operation plus execute() for JSON-style commands.
"""

from dsgraph.boundary.engine import GraphEngine
from dsgraph.boundary.schemas import CommandResponse, command_adapter

__all__ = [
    "GraphEngine",
    "CommandResponse",
    "command_adapter",
]
